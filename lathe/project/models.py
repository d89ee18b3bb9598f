"""Pydantic models for project file options and repository settings."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RepositorySettings(BaseModel):
    """Settings for one artifact repository.

    Extra keys (credentials, checksum and update policies) are kept as given
    for the repository client to interpret.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    url: str = Field(..., min_length=1, description="Repository base URL")
    releases: bool | None = Field(
        default=None,
        description="Whether release artifacts are served",
    )
    snapshots: bool | None = Field(
        default=None,
        description="Whether snapshot artifacts are served",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, leaving out unset policies."""
        return self.model_dump(exclude_none=True)


class ProjectOptions(BaseModel):
    """Options recognized in a project file.

    Keys use the hyphenated spelling of the project file; unknown keys are
    allowed and carried through to the descriptor for plugins to read.

    Example:
        >>> options = ProjectOptions.model_validate(
        ...     {"name": "org.example/app", "version": "1.0.0", "source-path": "lib/src"}
        ... )
        >>> options.source_path
        'lib/src'
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., min_length=1, description="Project name, optionally group/name")
    version: str = Field(..., min_length=1, description="Project version")
    description: str | None = None

    dependencies: list[Any] | dict[str, Any] | None = None
    deps: list[Any] | dict[str, Any] | None = None
    dev_dependencies: list[Any] | dict[str, Any] | None = Field(
        default=None, alias="dev-dependencies"
    )
    dev_deps: list[Any] | dict[str, Any] | None = Field(default=None, alias="dev-deps")

    compile_path: str | None = Field(default=None, alias="compile-path")
    source_path: str | None = Field(default=None, alias="source-path")
    library_path: str | None = Field(default=None, alias="library-path")
    test_path: str | None = Field(default=None, alias="test-path")
    resources_path: str | None = Field(default=None, alias="resources-path")
    dev_resources_path: str | None = Field(default=None, alias="dev-resources-path")
    test_resources_path: str | None = Field(default=None, alias="test-resources-path")
    target_dir: str | None = Field(default=None, alias="target-dir")
    jar_dir: str | None = Field(default=None, alias="jar-dir")

    min_lathe_version: str | None = Field(default=None, alias="min-lathe-version")
    hooks: list[str] | None = None
    implicit_hooks: bool = Field(default=False, alias="implicit-hooks")
    omit_default_repositories: bool = Field(
        default=False, alias="omit-default-repositories"
    )
    repositories: dict[str, str | RepositorySettings] = Field(default_factory=dict)
