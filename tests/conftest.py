import io

import pytest
from rich.console import Console

from tasktrack.domain import Priority, Status, Task, UserId
from tasktrack.service import TaskManagerService


@pytest.fixture
def service():
    """Empty task store"""
    return TaskManagerService()


@pytest.fixture
def sample_task():
    return Task(
        id=7,
        title="Write report",
        description="Quarterly numbers",
        assigned_to=UserId(3),
        project="finance",
        status=Status.IN_PROGRESS,
        priority=Priority.LOW,
        tags=("q3",),
    )


@pytest.fixture
def capture_console():
    """Console writing plain text to an in-memory buffer"""
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, width=200, highlight=False)
    return console, buffer
