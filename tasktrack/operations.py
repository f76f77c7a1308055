"""
Pure operations over task records.

Update functions take the new value first and the task last, and always
return a new ``Task``.
"""

from typing import List, Mapping, Optional
from rich.console import Console

from .domain import Displayable, Priority, Status, Task, UserId
from .formatters import RichFormatter


def create_task(task_id: int, title: str) -> Task:
    """New TODO task with MEDIUM priority and nothing else set."""
    return Task(
        id=task_id,
        title=title,
        description=None,
        assigned_to=None,
        project=None,
        status=Status.TODO,
        priority=Priority.MEDIUM,
        tags=(),
    )


def update_task_status(new_status: Status, task: Task) -> Task:
    return task.with_changes(status=new_status)


def update_task_priority(new_priority: Priority, task: Task) -> Task:
    return task.with_changes(priority=new_priority)


def add_tag_to_task(tag: str, task: Task) -> Task:
    # Duplicates are kept
    return task.with_changes(tags=task.tags + (tag,))


def assign_task(user_id: Optional[UserId], task: Task) -> Task:
    return task.with_changes(assigned_to=user_id)


def set_task_project(project: Optional[str], task: Task) -> Task:
    return task.with_changes(project=project)


def print_displayable_item(item: Displayable, console: Optional[Console] = None) -> None:
    """Write the item's summary to ``console`` (stdout when omitted)."""
    console = console or RichFormatter.make_console()
    console.print(RichFormatter.format_item(item))


def get_tasks_by_priority(priority: Priority, task_map: Mapping[int, Task]) -> List[Task]:
    """All tasks in ``task_map`` with exactly ``priority``, in mapping order."""
    return [task for task in task_map.values() if task.priority == priority]


def get_tasks_by_min_priority(min_priority: Priority, task_map: Mapping[int, Task]) -> List[Task]:
    """All tasks whose priority ranks at or above ``min_priority``."""
    return [
        task for task in task_map.values()
        if task.priority.rank >= min_priority.rank
    ]
