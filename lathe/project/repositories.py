"""Artifact repository settings for a project."""

from collections.abc import Mapping
from typing import Any

from lathe.project.models import RepositorySettings

DEFAULT_REPOSITORIES: dict[str, RepositorySettings] = {
    "central": RepositorySettings(url="https://repo1.maven.org/maven2", snapshots=False),
    "clojure": RepositorySettings(url="http://build.clojure.org/releases", snapshots=False),
    # TODO: drop from the defaults once projects declare it themselves.
    "clojure-snapshots": RepositorySettings(
        url="http://build.clojure.org/snapshots", releases=False
    ),
    "clojars": RepositorySettings(url="https://clojars.org/repo/"),
}


def init_settings(
    repo_id: str,
    settings: str | Mapping[str, Any] | RepositorySettings,
) -> RepositorySettings:
    """
    Turn one project repository entry into settings.

    A string is shorthand for the URL. The release/snapshot policy is inferred
    from the ids "releases" and "snapshots" unless the entry sets it.
    """
    if isinstance(settings, str):
        return RepositorySettings(url=settings)

    if isinstance(settings, RepositorySettings):
        data = settings.model_dump(exclude_none=True)
    else:
        data = dict(settings)

    if repo_id == "releases":
        data = {"snapshots": False, **data}
    elif repo_id == "snapshots":
        data = {"releases": False, **data}

    return RepositorySettings.model_validate(data)


def repositories_for(project: Mapping[str, Any]) -> dict[str, RepositorySettings]:
    """
    Return the repositories for project, including or excluding defaults.

    Project entries replace a default with the same id entirely.

    Example:
        >>> repos = repositories_for({"repositories": {"releases": {"url": "x"}}})
        >>> repos["releases"].to_dict()
        {'url': 'x', 'snapshots': False}
    """
    repositories: dict[str, RepositorySettings] = {}
    if not project.get("omit-default-repositories"):
        repositories.update(DEFAULT_REPOSITORIES)

    for repo_id, settings in (project.get("repositories") or {}).items():
        repositories[repo_id] = init_settings(repo_id, settings)

    return repositories
