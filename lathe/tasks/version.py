"""Print version for Lathe and the current interpreter."""

import platform

from rich.console import Console

from lathe import __version__

console = Console()


def version():
    """Print version for Lathe and the current interpreter."""
    console.print(
        f"Lathe {__version__} on Python {platform.python_version()} "
        f"({platform.python_implementation()})"
    )
