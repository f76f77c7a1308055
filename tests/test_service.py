import threading

import pytest

from tasktrack.domain import Priority, Status
from tasktrack.operations import add_tag_to_task, update_task_status
from tasktrack.results import DuplicateTaskId, Failure, Success, TaskNotFound
from tasktrack.service import TaskManagerService


class TestAddTask:
    def test_add_and_get(self, service):
        result = service.add_task(5, "X")
        assert isinstance(result, Success)
        task = service.try_get_task_by_id(5)
        assert task is not None
        assert task.id == 5
        assert task.title == "X"
        assert task.status == Status.TODO
        assert task.priority == Priority.MEDIUM
        assert result.value == task

    def test_optional_fields_override_defaults(self, service):
        result = service.add_task(
            201, "Service task", description="Details", priority=Priority.HIGH, status=Status.DONE
        )
        task = result.value
        assert task.description == "Details"
        assert task.priority == Priority.HIGH
        assert task.status == Status.DONE

    def test_duplicate_id_fails(self, service):
        service.add_task(1, "first")
        result = service.add_task(1, "second")
        assert isinstance(result, Failure)
        assert result.error == DuplicateTaskId(1)
        assert not result.is_success
        assert service.task_count == 1
        assert service.try_get_task_by_id(1).title == "first"

    def test_missing_id_returns_none(self, service):
        assert service.try_get_task_by_id(42) is None


class TestUpdateTask:
    def test_not_found(self, service):
        result = service.update_task(999, lambda t: t)
        assert isinstance(result, Failure)
        assert result.error == TaskNotFound(999)
        assert "999" in str(result.error)
        assert service.task_count == 0

    def test_applies_transform_once(self, service):
        service.add_task(5, "X")
        previous = service.try_get_task_by_id(5)
        calls = []

        def transform(task):
            calls.append(task)
            return add_tag_to_task("seen", task)

        result = service.update_task(5, transform)
        assert isinstance(result, Success)
        assert result.value is None
        assert calls == [previous]
        assert service.try_get_task_by_id(5) == add_tag_to_task("seen", previous)
        assert service.all_tasks == [add_tag_to_task("seen", previous)]
        assert previous not in service.all_tasks

    def test_transform_error_propagates(self, service):
        service.add_task(5, "X")
        before = service.try_get_task_by_id(5)

        def broken(task):
            raise ValueError("boom")

        with pytest.raises(ValueError):
            service.update_task(5, broken)
        assert service.try_get_task_by_id(5) == before

    def test_transform_cannot_change_id(self, service):
        service.add_task(5, "X")
        before = service.try_get_task_by_id(5)

        with pytest.raises(ValueError):
            service.update_task(5, lambda t: t.with_changes(id=6))
        assert service.try_get_task_by_id(5) == before

        assert isinstance(service.add_task(6, "Y"), Success)
        ids = [t.id for t in service.all_tasks]
        assert ids == [5, 6]
        assert len(ids) == len(set(ids))


class TestQueries:
    def test_count_and_snapshot(self, service):
        assert service.task_count == 0
        assert service.all_tasks == []
        for i in range(3):
            service.add_task(i, f"task {i}")
        assert service.task_count == 3
        assert [t.id for t in service.all_tasks] == [0, 1, 2]

    def test_snapshot_is_detached(self, service):
        service.add_task(1, "a")
        snapshot = service.all_tasks
        service.add_task(2, "b")
        service.update_task(1, lambda t: update_task_status(Status.DONE, t))
        assert [t.id for t in snapshot] == [1]
        assert snapshot[0].status == Status.TODO

    def test_get_tasks_by_priority(self, service):
        service.add_task(1, "a", priority=Priority.HIGH)
        service.add_task(2, "b")
        service.add_task(3, "c", priority=Priority.HIGH)
        assert [t.id for t in service.get_tasks_by_priority(Priority.HIGH)] == [1, 3]
        assert service.get_tasks_by_priority(Priority.LOW) == []


class TestConcurrency:
    def test_concurrent_updates_are_serialized(self, service):
        service.add_task(1, "shared")

        def worker():
            for _ in range(50):
                service.update_task(1, lambda t: add_tag_to_task("x", t))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(service.try_get_task_by_id(1).tags) == 200

    def test_count_consistent_with_concurrent_adds(self, service):
        def worker(offset):
            for i in range(50):
                service.add_task(offset + i, f"task {offset + i}")

        threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert service.task_count == 200
        assert service.task_count == len(service.all_tasks)
