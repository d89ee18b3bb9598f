"""
Project descriptor loading.

A project file is a TOML document of key/value options. Loading it applies
defaults, folds deprecated keys into their replacements and turns every
path option into an absolute path under the project root.
"""

import os
import tomllib
from collections.abc import Iterator, Mapping
from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import Any

from loguru import logger
from pydantic import ValidationError

from lathe.core.errors import ProjectFileError
from lathe.project.models import ProjectOptions
from lathe.project.paths import normalize_path

PATH_DEFAULTS: dict[str, str] = {
    "compile-path": "classes",
    "source-path": "src",
    "library-path": "lib",
    "test-path": "test",
    "resources-path": "resources",
}

DEV_RESOURCES_DEFAULT = "test-resources"

# Deprecated key -> replacement
DEPRECATED_KEYS: dict[str, str] = {
    "test-resources-path": "dev-resources-path",
    "jar-dir": "target-dir",
}

PATH_KEYS: tuple[str, ...] = (
    *PATH_DEFAULTS,
    "dev-resources-path",
    "test-resources-path",
    "target-dir",
    "jar-dir",
)


class ProjectDescriptor(Mapping[str, Any]):
    """
    Read-only, normalized configuration for one project.

    Behaves as a mapping keyed by the hyphenated option names of the project
    file. Built once per command; a new descriptor is built rather than
    changing an existing one.

    Example:
        >>> project = build_descriptor({"name": "app", "version": "0.1.0"}, "/work/app")
        >>> project["compile-path"]
        '/work/app/classes'
        >>> project.group
        'app'
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = MappingProxyType(dict(data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ProjectDescriptor({self.group}/{self.name} {self.version})"

    @property
    def name(self) -> str:
        return self._data["name"]

    @property
    def group(self) -> str:
        return self._data["group"]

    @property
    def version(self) -> str:
        return self._data["version"]

    @property
    def root(self) -> str:
        return self._data["root"]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain, mutable dictionary."""
        return dict(self._data)


def _first_present(*values: Any) -> Any:
    """Return the first value that is not None."""
    return next((value for value in values if value is not None), None)


def build_descriptor(
    options: Mapping[str, Any] | ProjectOptions,
    root: str | Path,
) -> ProjectDescriptor:
    """
    Build a descriptor from project file options.

    Args:
        options: Raw option mapping or already validated options.
        root: Directory containing the project file.

    Returns:
        Normalized ProjectDescriptor.

    Raises:
        pydantic.ValidationError: If the options do not match ProjectOptions.
    """
    if not isinstance(options, ProjectOptions):
        options = ProjectOptions.model_validate(dict(options))

    raw = options.model_dump(by_alias=True, exclude_none=True)
    root = os.path.abspath(os.fspath(root))
    normalize = partial(normalize_path, root)

    group, _, name = options.name.rpartition("/")
    group = group or name

    dependencies = _first_present(raw.get("dependencies"), raw.get("deps"))
    dev_dependencies = _first_present(raw.get("dev-dependencies"), raw.get("dev-deps"))
    dev_resources = normalize(
        _first_present(
            raw.get("dev-resources-path"),
            raw.get("test-resources-path"),
            DEV_RESOURCES_DEFAULT,
        )
    )
    target_dir = normalize(_first_present(raw.get("target-dir"), raw.get("jar-dir"), root))

    data = dict(raw)
    data.update(
        {
            "name": name,
            "group": group,
            "version": options.version,
            "dependencies": dependencies,
            "deps": dependencies,
            "dev-dependencies": dev_dependencies,
            "dev-deps": dev_dependencies,
            "dev-resources-path": dev_resources,
            "test-resources-path": dev_resources,
            "target-dir": target_dir,
            "jar-dir": target_dir,
            "root": root,
        }
    )
    for key, default in PATH_DEFAULTS.items():
        data[key] = normalize(_first_present(raw.get(key), default))

    for deprecated, replacement in DEPRECATED_KEYS.items():
        if raw.get(deprecated) is not None:
            logger.warning(f"{deprecated} is deprecated; use {replacement}.")

    return ProjectDescriptor(data)


def read_project(path: str | Path = "project.toml") -> ProjectDescriptor | None:
    """
    Load the project file at path.

    Returns None when the file does not exist; running without a project is
    normal for tasks such as help.

    Raises:
        ProjectFileError: If the file is not valid TOML or has invalid options.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            options = tomllib.load(f)
    except FileNotFoundError:
        logger.debug(f"No project file at {path}")
        return None
    except tomllib.TOMLDecodeError as e:
        raise ProjectFileError(str(path), str(e)) from e

    try:
        project = build_descriptor(options, path.absolute().parent)
    except ValidationError as e:
        raise ProjectFileError(str(path), str(e)) from e

    logger.debug(f"Loaded {project!r} from {path}")
    return project
