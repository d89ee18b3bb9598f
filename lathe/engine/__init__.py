"""Task engine - lookup, arity matching, hooks and aliases.

This module provides everything between a task name and a task call:
- Task lookup (name -> implementation, with a not-found fallback)
- Arity matching (arguments -> declared call shape)
- Hooks (interceptors run around a task)
- Aliases (alternate names -> canonical names)
"""

from lathe.engine.aliases import AliasTable
from lathe.engine.arity import apply_task, matching_arity, project_needed
from lathe.engine.hooks import add_hook, load_hooks, prepend_tasks
from lathe.engine.registry import TaskRegistry, current_registry, task_not_found
from lathe.engine.task import Task, Variant, arglists, task_variants

__all__ = [
    # Lookup
    "Task",
    "TaskRegistry",
    "task_not_found",
    "current_registry",
    # Call shapes
    "Variant",
    "arglists",
    "task_variants",
    "matching_arity",
    "project_needed",
    "apply_task",
    # Hooks
    "add_hook",
    "prepend_tasks",
    "load_hooks",
    # Aliases
    "AliasTable",
]
