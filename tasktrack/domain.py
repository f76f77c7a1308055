"""
Domain records for task tracking.

Every record here is immutable: "updates" build a new value with
``dataclasses.replace`` and leave the original untouched.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple


class Displayable(ABC):
    """Anything that can render itself as a one-line human-readable summary."""

    @abstractmethod
    def display(self) -> str:
        ...


class Status(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").upper()


class Priority(str, Enum):
    """Task urgency. Ordered LOW < MEDIUM < HIGH via ``rank``."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @property
    def label(self) -> str:
        return self.value.upper()


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


@dataclass(frozen=True)
class UserId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class User(Displayable):
    id: UserId
    name: str

    def display(self) -> str:
        return f"User #{self.id}: {self.name}"


@dataclass(frozen=True)
class Task(Displayable):
    """A unit of work. ``id`` is assigned by the caller."""
    id: int
    title: str
    description: Optional[str] = None
    assigned_to: Optional[UserId] = None
    project: Optional[str] = None
    status: Status = Status.TODO
    priority: Priority = Priority.MEDIUM
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of tags but always store a tuple; a bare string is one tag
        if isinstance(self.tags, str):
            object.__setattr__(self, "tags", (self.tags,))
        elif not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    def with_changes(self, **changes) -> "Task":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def display(self) -> str:
        parts = [
            f"Task #{self.id}: {self.title}",
            f"status={self.status.label}",
            f"priority={self.priority.label}",
        ]
        if self.assigned_to is not None:
            parts.append(f"assignee={self.assigned_to}")
        if self.project:
            parts.append(f"project={self.project}")
        if self.tags:
            parts.append(f"tags={', '.join(self.tags)}")
        return " | ".join(parts)
