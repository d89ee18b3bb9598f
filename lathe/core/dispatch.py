"""
Command dispatch.

The Dispatcher ties the pieces together for one process: it runs the user
init script, loads the project file, activates hooks and applies each task
group of the command line in turn.
"""

import runpy
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from lathe.core.args import make_groups
from lathe.core.config import Settings, get_settings
from lathe.core.versions import verify_min_version
from lathe.engine.aliases import AliasTable
from lathe.engine.arity import apply_task
from lathe.engine.hooks import load_hooks
from lathe.engine.registry import TaskRegistry, task_not_found
from lathe.project.descriptor import ProjectDescriptor, read_project

DEFAULT_TASK = "help"


class Dispatcher:
    """
    Run tasks named on the command line.

    The registry and alias table are filled during setup (init script, hook
    modules) and only read while a task runs.

    Example:
        >>> dispatcher = Dispatcher()
        >>> dispatcher.main(["clean,", "compile"])
        0
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: TaskRegistry | None = None,
        aliases: AliasTable | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            settings: Optional settings override. Uses default if not provided.
            registry: Task registry; built from settings.lathe_task_packages if omitted.
            aliases: Alias table; the default aliases if omitted.
        """
        self.settings = settings or get_settings()
        self.registry = registry or TaskRegistry(self.settings.lathe_task_packages)
        self.aliases = aliases or AliasTable()
        self._user_namespace: dict[str, Any] | None = None

    def home_dir(self) -> Path:
        """Full path to the Lathe home directory ($LATHE_HOME or ~/.lathe)."""
        return self.settings.home_dir()

    def user_init(self) -> None:
        """Run <home>/init.py once, if present."""
        if self._user_namespace is not None:
            return

        self._user_namespace = {}
        init_file = self.home_dir() / "init.py"
        if init_file.exists():
            logger.debug(f"Loading {init_file}")
            self._user_namespace = runpy.run_path(
                str(init_file),
                init_globals={"registry": self.registry, "aliases": self.aliases},
            )

    def user_settings(self) -> dict[str, Any]:
        """The settings mapping from init.py, or an empty dict."""
        return dict((self._user_namespace or {}).get("settings") or {})

    def read_project(self) -> ProjectDescriptor | None:
        return read_project(Path(self.settings.lathe_project_file))

    def run_task(self, task_name: str | None, *args: str) -> Any:
        """
        Run one task with its command line arguments.

        Returns:
            The task's return value.

        Raises:
            TaskAbort: For unknown tasks and mismatched arguments.
            ProjectFileError: If the project file is broken.
        """
        self.user_init()
        task_name = self.aliases.resolve(task_name) if task_name else DEFAULT_TASK
        project = self.read_project()

        if project is not None:
            if project.get("min-lathe-version"):
                verify_min_version(project, self.settings.lathe_version)
            Path(project["compile-path"]).mkdir(parents=True, exist_ok=True)
            load_hooks(self.registry, project, self.settings)

        logger.debug(f"Dispatching {task_name} {list(args)}")
        return apply_task(
            self.registry,
            task_name,
            project,
            args,
            task_not_found,
            self.settings.lathe_project_file,
        )

    def main(self, argv: Sequence[str]) -> int:
        """
        Run every task group in argv.

        Stops at the first task returning a positive integer and returns it
        as the exit code; otherwise returns 0.
        """
        # Empty groups from a trailing separator are skipped; help only runs for no arguments.
        groups = [group for group in make_groups(list(argv)) if group] or [[]]
        for group in groups:
            task_name, *args = group or [None]
            result = self.run_task(task_name, *args)
            if isinstance(result, int) and not isinstance(result, bool) and result > 0:
                return result
        return 0
