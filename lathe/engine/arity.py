"""
Arity matching and task invocation.

A task declares one or more call shapes. The shape used for a command is
the first one, longest first, that accepts the number of command line
arguments; a leading "project" parameter is filled in from the project
descriptor when there is one.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from loguru import logger

from lathe.core.errors import ArityMismatchError, MissingProjectError
from lathe.engine.registry import TaskRegistry, task_not_found
from lathe.engine.task import Variant


def project_needed(parameters: Variant | Iterable[Variant]) -> bool:
    """True if the variant, or every one of the variants, needs a project."""
    if isinstance(parameters, Variant):
        return parameters.needs_project
    return all(project_needed(variant) for variant in parameters)


def arg_count(variant: Variant, has_project: bool) -> int:
    """Number of parameters still to be filled from the command line."""
    if has_project and variant.needs_project:
        return len(variant) - 1
    return len(variant)


def matching_arity(
    variants: Iterable[Variant],
    has_project: bool,
    args: Sequence[str],
) -> Variant | None:
    """
    Pick the variant to call for args.

    Variants with more parameters are tried first; among variants of equal
    length, the one declared last is tried first.

    Example:
        >>> variants = [Variant(("project",)), Variant(("project", "x"))]
        >>> matching_arity(variants, True, ["x"])
        Variant(params=('project', 'x'))
        >>> matching_arity(variants, False, ["x"]) is None
        True
    """
    for variant in reversed(sorted(variants, key=len)):
        if variant.variadic:
            fits = len(args) >= arg_count(variant, has_project) - 2
        else:
            fits = arg_count(variant, has_project) == len(args)
        if fits and (has_project or not variant.needs_project):
            return variant
    return None


def apply_task(
    registry: TaskRegistry,
    task_name: str,
    project: Mapping[str, Any] | None,
    args: Sequence[str],
    not_found: Callable[..., Any] = task_not_found,
    project_file: str = "project.toml",
) -> Any:
    """
    Locate task_name, match its arity and call it.

    Returns:
        Whatever the task returns.

    Raises:
        MissingProjectError: If every variant needs a project and there is none.
        ArityMismatchError: If no variant accepts the arguments.
    """
    task = registry.locate(task_name, not_found)
    variants = task.variants
    parameters = matching_arity(variants, project is not None, args)

    if parameters is None:
        if project is None and project_needed(variants):
            raise MissingProjectError(task_name, project_file)
        raise ArityMismatchError(task_name, variants)

    logger.debug(f"Running {task_name} as {parameters}")
    with registry.bound():
        if parameters.needs_project:
            return task(project, *args)
        return task(*args)
