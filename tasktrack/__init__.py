"""
tasktrack - in-memory task tracking

Provides an immutable task/user record model and an owning task store:
- Copy-with-change updates for status, priority and tags
- Priority filtering over any id -> Task mapping
- A task store that reports missing and duplicate ids as result values

Usage:
    from tasktrack import TaskManagerService, Priority, Status, update_task_status

    service = TaskManagerService()
    service.add_task(1, "Write docs", priority=Priority.HIGH)
    result = service.update_task(1, lambda t: update_task_status(Status.DONE, t))
"""

from .domain import Displayable, Priority, Status, Task, User, UserId
from .operations import (
    add_tag_to_task,
    assign_task,
    create_task,
    get_tasks_by_min_priority,
    get_tasks_by_priority,
    print_displayable_item,
    set_task_project,
    update_task_priority,
    update_task_status,
)
from .results import (
    DuplicateTaskId,
    Failure,
    OperationResult,
    Success,
    TaskError,
    TaskNotFound,
    handle_operation_result,
)
from .service import TaskManagerService

__version__ = "0.1.0"
__all__ = [
    "Displayable",
    "Priority",
    "Status",
    "Task",
    "User",
    "UserId",
    "add_tag_to_task",
    "assign_task",
    "create_task",
    "get_tasks_by_min_priority",
    "get_tasks_by_priority",
    "print_displayable_item",
    "set_task_project",
    "update_task_priority",
    "update_task_status",
    "DuplicateTaskId",
    "Failure",
    "OperationResult",
    "Success",
    "TaskError",
    "TaskNotFound",
    "handle_operation_result",
    "TaskManagerService",
]
