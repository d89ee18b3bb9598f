"""Core module - dispatcher, configuration, errors and command line helpers."""

from lathe.core.config import Settings, get_settings
from lathe.core.dispatch import Dispatcher
from lathe.core.errors import (
    ArityMismatchError,
    LatheError,
    MissingProjectError,
    ProjectFileError,
    TaskAbort,
    TaskNotFoundError,
)

__all__ = [
    "ArityMismatchError",
    "Dispatcher",
    "LatheError",
    "MissingProjectError",
    "ProjectFileError",
    "Settings",
    "TaskAbort",
    "TaskNotFoundError",
    "get_settings",
]
