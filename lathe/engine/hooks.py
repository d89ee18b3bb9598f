"""
Hooks: extra behaviour around task invocation.

An interceptor is called as interceptor(target, *args), where target is the
rest of the chain. Hook modules are plain modules with an
activate(registry) function that adds interceptors.
"""

import importlib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from lathe.core.config import Settings
from lathe.engine.registry import TaskRegistry, modules_in, task_not_found


def add_hook(
    registry: TaskRegistry,
    target: str,
    interceptor: Callable[..., Any],
) -> Callable[..., Any]:
    """Wrap task target with interceptor."""
    registry.add_hook(target, interceptor)
    return interceptor


def prepend_tasks(
    registry: TaskRegistry,
    target: str,
    *tasks_to_add: str | Callable[..., Any],
) -> Callable[..., Any]:
    """
    Run tasks_to_add before every invocation of target.

    The added tasks must take a project argument and nothing else. Names are
    located when the hook fires, so tasks carry their own hooks.

    Example:
        >>> prepend_tasks(registry, "package", "check")
    """

    def run_first(target_fn: Callable[..., Any], project: Any, *args: Any) -> Any:
        for task in tasks_to_add:
            if isinstance(task, str):
                task = registry.locate(task, task_not_found)
            task(project)
        return target_fn(project, *args)

    return add_hook(registry, target, run_first)


def hook_modules(project: Mapping[str, Any], hook_package: str) -> list[str]:
    """Modules to load hooks from, sorted by name."""
    hooks = project.get("hooks")
    if hooks is None and project.get("implicit-hooks"):
        hooks = [f"{hook_package}.{name}" for name in modules_in(hook_package)]
    return sorted(hooks or [])


def _has_libraries(library_path: Path) -> bool:
    return library_path.is_dir() and any(library_path.iterdir())


def load_hooks(
    registry: TaskRegistry,
    project: Mapping[str, Any],
    settings: Settings,
) -> list[str]:
    """
    Import the hook modules of project and activate them once per registry.

    A hook that fails to load only produces a warning, and nothing at all
    while the library directory is still empty.

    Returns:
        Names of the modules activated by this call.
    """
    library_path = Path(project.get("library-path") or "lib")
    activated: list[str] = []

    for name in hook_modules(project, settings.lathe_hook_package):
        if name in registry.activated_hooks:
            continue
        # A failed activation is not retried; it may have added hooks already.
        registry.activated_hooks.add(name)
        try:
            module = importlib.import_module(name)
            activate = getattr(module, "activate", None)
            if callable(activate):
                activate(registry)
        except Exception as e:
            if _has_libraries(library_path):
                message = f"Warning: problem requiring {name} hook: {e}"
                if settings.debug:
                    logger.opt(exception=e).warning(message)
                else:
                    logger.warning(message)
            continue

        activated.append(name)
        logger.debug(f"Activated hooks from {name}")

    return activated
