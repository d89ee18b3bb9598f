"""Task call shapes and the callable task handle."""

import inspect
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from functools import partial
from typing import Any

REST_MARKER = "&"
PROJECT_PARAM = "project"


@dataclass(frozen=True)
class Variant:
    """One declared call shape of a task.

    A variant is variadic when the rest marker is its second-to-last
    parameter, and needs a project when its first parameter is "project".
    """

    params: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"[{' '.join(self.params)}]"

    @property
    def variadic(self) -> bool:
        return len(self.params) >= 2 and self.params[-2] == REST_MARKER

    @property
    def needs_project(self) -> bool:
        return bool(self.params) and self.params[0] == PROJECT_PARAM

    def without_project(self) -> "Variant":
        """Call shape as typed on the command line."""
        return Variant(tuple(p for p in self.params if p != PROJECT_PARAM))


def arglists(*variants: Iterable[str]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Declare the call shapes of a task explicitly.

    Example:
        >>> @arglists(["project"], ["project", "&", "namespaces"])
        ... def test(project, *namespaces): ...
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func.__task_arglists__ = tuple(Variant(tuple(v)) for v in variants)
        return func

    return decorator


def task_variants(func: Callable[..., Any]) -> tuple[Variant, ...]:
    """
    Return the declared call shapes of func.

    Uses @arglists metadata when present; otherwise each optional positional
    parameter adds one fixed variant and a *rest parameter yields a variadic
    variant covering every positional parameter.
    """
    explicit = getattr(func, "__task_arglists__", None)
    if explicit is not None:
        return explicit

    required: list[str] = []
    optional: list[str] = []
    rest: str | None = None
    for param in inspect.signature(func).parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                required.append(param.name)
            else:
                optional.append(param.name)
        elif param.kind is param.VAR_POSITIONAL:
            rest = param.name

    if rest is None:
        return tuple(
            Variant((*required, *optional[:i])) for i in range(len(optional) + 1)
        )

    fixed = [Variant((*required, *optional[:i])) for i in range(len(optional))]
    return (*fixed, Variant((*required, *optional, REST_MARKER, rest)))


@dataclass
class Task:
    """
    Handle on a located task implementation.

    Calling the task walks its interceptor chain with the implementation as
    the innermost link. The chain is shared with the registry, so hooks added
    later still apply.

    Example:
        >>> task = registry.locate("compile", task_not_found)
        >>> task.variants
        (Variant(params=('project',)),)
        >>> task(project)
    """

    name: str
    func: Callable[..., Any]
    hooks: Sequence[Callable[..., Any]] = field(default_factory=list)

    @property
    def variants(self) -> tuple[Variant, ...]:
        return task_variants(self.func)

    @property
    def doc(self) -> str:
        return inspect.getdoc(self.func) or ""

    def __call__(self, *args: Any) -> Any:
        call = self.func
        for hook in self.hooks:
            call = partial(hook, call)
        return call(*args)
