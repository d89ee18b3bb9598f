"""Resolution of project-relative paths."""

import os
from pathlib import Path


def normalize_path(project_root: str | Path, path: str | Path | None) -> str | None:
    """
    Resolve path against project_root and return its absolute form.

    None stays None; defaults are applied by the caller. The path does not
    have to exist.

    Example:
        >>> normalize_path("/work/app", "classes")
        '/work/app/classes'
        >>> normalize_path("/work/app", "/tmp/out")
        '/tmp/out'
    """
    if path is None:
        return None
    return os.path.abspath(os.path.join(os.fspath(project_root), os.fspath(path)))
