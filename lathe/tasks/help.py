"""Display a list of tasks or help for a given task."""

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lathe.core.config import get_settings
from lathe.core.errors import TaskNotFoundError
from lathe.engine.registry import TaskRegistry, current_registry, task_not_found

console = Console()


def _summary(doc: str) -> str:
    return doc.strip().splitlines()[0] if doc.strip() else ""


def _summary_for(registry: TaskRegistry, name: str) -> str:
    try:
        return escape(_summary(registry.locate(name, task_not_found).doc))
    except Exception as e:
        logger.warning(f"Problem loading {name} task: {e}")
        return "[red]Failed to load.[/red]"


def help(task_name=None):
    """Display a list of tasks or help for a given task."""
    registry = current_registry() or TaskRegistry(get_settings().lathe_task_packages)

    if task_name is not None:
        task = registry.locate(task_name, task_not_found)
        if task.func is task_not_found:
            raise TaskNotFoundError(task_name)
        shapes = " ".join(str(v.without_project()) for v in task.variants)
        console.print(f"[bold]Arguments:[/bold] {escape(shapes)}\n")
        console.print(escape(task.doc or "No documentation available."))
        return

    table = Table(title="Lathe is a build tool for JVM projects.")
    table.add_column("Task")
    table.add_column("Description")
    for name in registry.task_names():
        table.add_row(name, _summary_for(registry, name))

    console.print(table)
    console.print("\nRun [bold]lathe help $TASK[/bold] for details.")
