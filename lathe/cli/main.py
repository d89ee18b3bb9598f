"""Main CLI entry point using Typer."""

import typer
from loguru import logger
from rich.console import Console

from lathe.core.config import get_settings
from lathe.core.dispatch import Dispatcher
from lathe.core.errors import ProjectFileError, TaskAbort
from lathe.core.logs import configure_logging

app = typer.Typer(
    name="lathe",
    help="Lathe - build automation for JVM projects",
    add_completion=False,
    rich_markup_mode="rich",
)

err_console = Console(stderr=True)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        # -h and --help are task aliases, not Typer options
        "help_option_names": [],
    }
)
def main(
    args: list[str] | None = typer.Argument(
        None,
        help="Task name and its arguments; end an argument with ',' to start another task",
    ),
) -> None:
    """
    Run one or more tasks.

    Example:
        lathe clean, compile
    """
    settings = get_settings()
    configure_logging(settings)
    dispatcher = Dispatcher(settings)

    try:
        code = dispatcher.main(args or [])
    except TaskAbort as e:
        err_console.print(e.message, markup=False, highlight=False)
        raise typer.Exit(e.exit_code) from e
    except ProjectFileError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e

    if code:
        raise typer.Exit(code)
