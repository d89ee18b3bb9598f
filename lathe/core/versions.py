"""Version comparison for the min-lathe-version check."""

import re

from loguru import logger

_DIGITS = re.compile(r"\d+")


def _components(version: str) -> tuple[int, ...]:
    """Numeric components of the part before the first hyphen."""
    release = version.split("-", 1)[0]
    return tuple(int(part) for part in _DIGITS.findall(release))


def version_greater_eq(actual: str, required: str) -> bool:
    """
    Check if actual is greater than or equal to required.

    Takes major, minor and incremental versions into account; qualifiers after
    the first hyphen are ignored. A shorter version that is a prefix of the
    longer one sorts first.

    Example:
        >>> version_greater_eq("2.0.0", "1.9.9")
        True
        >>> version_greater_eq("1.10.0", "1.9.0")
        True
        >>> version_greater_eq("1.0.0-SNAPSHOT", "1.0.0")
        True
    """
    return _components(actual) >= _components(required)


def verify_min_version(project, actual: str) -> bool:
    """
    Warn when the project asks for a newer tool than the one running.

    Never aborts; returns whether the running version is new enough.
    """
    required = project.get("min-lathe-version")
    if not required or version_greater_eq(actual, required):
        return True

    logger.warning(
        f"\n*** Warning: This project requires Lathe version {required} ***"
        f"\n*** Using version {actual} could cause problems. ***\n"
        "\n- Get the latest version of Lathe by executing"
        '\n- "pip install --upgrade lathe"\n'
    )
    return False
