"""Project files - loading, normalization and repository settings."""

from lathe.project.descriptor import (
    PATH_KEYS,
    ProjectDescriptor,
    build_descriptor,
    read_project,
)
from lathe.project.models import ProjectOptions, RepositorySettings
from lathe.project.paths import normalize_path
from lathe.project.repositories import DEFAULT_REPOSITORIES, repositories_for

__all__ = [
    "DEFAULT_REPOSITORIES",
    "PATH_KEYS",
    "ProjectDescriptor",
    "ProjectOptions",
    "RepositorySettings",
    "build_descriptor",
    "normalize_path",
    "read_project",
    "repositories_for",
]
