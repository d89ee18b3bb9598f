"""
Task registry.

Maps task names to implementations. A task named "foo-bar" lives in a module
"<package>.foo_bar" as a function "foo_bar", searched for in each task
package in order. Modules are imported on first use and cached by the
interpreter's module cache. Plugins and the user init script may also
register callables directly.
"""

import importlib
import importlib.util
import keyword
import pkgutil
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from loguru import logger

from lathe.core.errors import TaskNotFoundError
from lathe.engine.task import Task

DEFAULT_TASK_PACKAGES = ("lathe.tasks", "lathe_tasks")

_current_registry: ContextVar["TaskRegistry | None"] = ContextVar("lathe_registry", default=None)


def current_registry() -> "TaskRegistry | None":
    """The registry of the task being run, or None outside a task."""
    return _current_registry.get()


def task_not_found(*_args: Any) -> None:
    """Fallback for names that do not resolve to a task."""
    raise TaskNotFoundError()


def modules_in(package: str) -> list[str]:
    """Names of the modules directly inside package, or [] if it is missing."""
    try:
        spec = importlib.util.find_spec(package)
    except ModuleNotFoundError:
        return []
    if spec is None or spec.submodule_search_locations is None:
        return []
    return [
        info.name
        for info in pkgutil.iter_modules(spec.submodule_search_locations)
        if not info.name.startswith("_")
    ]


def _is_missing(error: ModuleNotFoundError, module_name: str) -> bool:
    """True when the failed import is module_name itself or one of its parents."""
    missing = error.name or ""
    return bool(missing) and (module_name == missing or module_name.startswith(missing + "."))


class TaskRegistry:
    """
    Locate task implementations and hold their interceptor chains.

    Example:
        >>> registry = TaskRegistry()
        >>> registry.locate("help", task_not_found).name
        'help'
        >>> registry.register("greet", lambda name: print(f"hi {name}"))
    """

    def __init__(self, packages: Sequence[str] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            packages: Packages searched for task modules, in order.
        """
        self.packages = list(packages) if packages is not None else list(DEFAULT_TASK_PACKAGES)
        self.activated_hooks: set[str] = set()
        self._tasks: dict[str, Callable[..., Any]] = {}
        self._hooks: dict[str, list[Callable[..., Any]]] = {}

    def register(self, name: str, func: Callable[..., Any]) -> None:
        """Register func as the implementation of task name."""
        logger.debug(f"Registered task {name}")
        self._tasks[name] = func

    def add_hook(self, name: str, interceptor: Callable[..., Any]) -> None:
        """Add interceptor to the chain of task name; the newest runs first."""
        self._hooks.setdefault(name, []).append(interceptor)

    @contextmanager
    def bound(self) -> Iterator["TaskRegistry"]:
        """Make this registry the current one while a task runs."""
        token = _current_registry.set(self)
        try:
            yield self
        finally:
            _current_registry.reset(token)

    def hooks_for(self, name: str) -> list[Callable[..., Any]]:
        return list(self._hooks.get(name, []))

    def locate(self, name: str, fallback: Callable[..., Any] = task_not_found) -> Task:
        """
        Find the implementation of task name.

        Args:
            name: Task name as typed, after alias substitution.
            fallback: Callable used when no implementation exists.

        Returns:
            Task wrapping the implementation, or wrapping fallback.

        Raises:
            Exception: Whatever importing a broken task module raises.
        """
        func = self._find(name)
        if func is None:
            logger.debug(f"No task named {name!r}")
            return Task(name, fallback)
        return Task(name, func, self._hooks.setdefault(name, []))

    def _find(self, name: str) -> Callable[..., Any] | None:
        if name in self._tasks:
            return self._tasks[name]

        attr = name.replace("-", "_")
        if not attr.isidentifier() or keyword.iskeyword(attr):
            return None

        for package in self.packages:
            module_name = f"{package}.{attr}"
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                if _is_missing(e, module_name):
                    continue
                raise
            func = getattr(module, attr, None)
            if callable(func):
                return func
        return None

    def task_names(self) -> list[str]:
        """All task names that can be located, sorted."""
        names = set(self._tasks)
        for package in self.packages:
            names.update(module.replace("_", "-") for module in modules_in(package))
        return sorted(names)
