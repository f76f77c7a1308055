from typing import Callable, Dict, List, Optional
import logging
import threading

from .domain import Priority, Status, Task
from .operations import create_task, get_tasks_by_priority
from .results import DuplicateTaskId, Failure, OperationResult, Success, TaskNotFound

logger = logging.getLogger(__name__)


class TaskManagerService:
    """
    Owns the id -> Task mapping for one session.

    Stored tasks are immutable, so lookups hand out the stored value directly.
    Every mutation and snapshot is serialized through a single lock.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._lock = threading.RLock()

    def add_task(
        self,
        task_id: int,
        title: str,
        description: Optional[str] = None,
        priority: Optional[Priority] = None,
        status: Optional[Status] = None,
    ) -> OperationResult[Task, DuplicateTaskId]:
        """Create a task and store it. Fails if ``task_id`` is taken."""
        task = create_task(task_id, title)
        changes = {}
        if description is not None:
            changes["description"] = description
        if priority is not None:
            changes["priority"] = priority
        if status is not None:
            changes["status"] = status
        if changes:
            task = task.with_changes(**changes)

        with self._lock:
            if task_id in self._tasks:
                logger.warning(f"Rejected duplicate task id {task_id}")
                return Failure(DuplicateTaskId(task_id))
            self._tasks[task_id] = task

        logger.info(f"Added task {task_id}: {title}")
        return Success(task)

    def try_get_task_by_id(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def update_task(
        self, task_id: int, transform: Callable[[Task], Task]
    ) -> OperationResult[None, TaskNotFound]:
        """
        Replace the stored task with ``transform(current)``.

        ``transform`` is called exactly once. If it raises, the exception
        propagates and the stored value is left as it was.
        A transform that changes the task id raises ``ValueError``.
        """
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                logger.warning(f"Cannot update task {task_id}: not found")
                return Failure(TaskNotFound(task_id))
            updated = transform(current)
            if updated.id != task_id:
                raise ValueError(
                    f"Transform changed task id {task_id} to {updated.id}"
                )
            self._tasks[task_id] = updated

        logger.info(f"Updated task {task_id}")
        return Success(None)

    @property
    def all_tasks(self) -> List[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return list(self._tasks.values())

    @property
    def task_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_tasks_by_priority(self, priority: Priority) -> List[Task]:
        with self._lock:
            return get_tasks_by_priority(priority, self._tasks.copy())
