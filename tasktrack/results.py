"""
Success/failure wrapper for store operations.

Missing or duplicate ids are ordinary outcomes, so they travel back to the
caller as ``Failure`` values instead of being raised.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class TaskError:
    """Base for expected task-store errors."""
    task_id: int


@dataclass(frozen=True)
class TaskNotFound(TaskError):
    def __str__(self) -> str:
        return f"Task with id {self.task_id} not found"


@dataclass(frozen=True)
class DuplicateTaskId(TaskError):
    def __str__(self) -> str:
        return f"Task with id {self.task_id} already exists"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False


OperationResult = Union[Success[T], Failure[E]]


def handle_operation_result(
    operation_name: str,
    result: "OperationResult[T, E]",
    on_success: Callable[[T], None],
    on_failure: Callable[[E], None],
) -> None:
    """Dispatch ``result`` to the matching callback."""
    if isinstance(result, Success):
        logger.info(f"{operation_name}: succeeded")
        on_success(result.value)
    elif isinstance(result, Failure):
        logger.warning(f"{operation_name}: failed ({result.error})")
        on_failure(result.error)
    else:
        raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")
