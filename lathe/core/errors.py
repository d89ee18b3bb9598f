"""Exception types raised by the dispatch engine."""


class LatheError(Exception):
    """Base exception for Lathe errors."""

    pass


class ProjectFileError(LatheError):
    """The project file could not be parsed or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Problem loading {path}: {reason}")


class TaskAbort(LatheError):
    """
    Stop the current command with a user-facing message.

    Raised instead of exiting the process so that the CLI boundary decides
    how to report it. The exit code is always positive.
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class TaskNotFoundError(TaskAbort):
    """No task implementation matches the requested name."""

    def __init__(self, task_name: str | None = None) -> None:
        self.task_name = task_name
        super().__init__('That\'s not a task. Use "lathe help" to list all tasks.')


class MissingProjectError(TaskAbort):
    """The task needs a project file but none was found."""

    def __init__(self, task_name: str, project_file: str = "project.toml") -> None:
        self.task_name = task_name
        super().__init__(f"Couldn't find {project_file}, which is needed for {task_name}")


class ArityMismatchError(TaskAbort):
    """No declared variant of the task accepts the given arguments."""

    def __init__(self, task_name: str, variants: list) -> None:
        self.task_name = task_name
        self.variants = list(variants)
        expected = " ".join(str(v) for v in self.variants)
        super().__init__(
            f"Wrong number of arguments to {task_name} task.\nExpected {expected}"
        )
