# tests/test_task_repo_memory.py

from __future__ import annotations

import threading

import pytest

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.task_models import ListFilter, TaskDraft, TaskStatus
from tasktracker.infra.db.task_repo_memory import InMemoryTaskRepo


def _draft(title: str, status: TaskStatus = TaskStatus.pending) -> TaskDraft:
    return TaskDraft(title=title, description=f"{title} notes", status=status)


def test_create_assigns_sequential_ids(repo: InMemoryTaskRepo) -> None:
    ids = [repo.create(_draft(f"t{i}")) for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_create_then_get_round_trip(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("write docs", TaskStatus.in_progress))
    task = repo.get(task_id)

    assert task.id == task_id
    assert task.title == "write docs"
    assert task.description == "write docs notes"
    assert task.status == TaskStatus.in_progress
    assert task.created_at == task.updated_at


def test_get_returns_independent_copies(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("original"))

    first = repo.get(task_id)
    first.title = "mutated"
    first.status = TaskStatus.cancelled

    again = repo.get(task_id)
    assert again.title == "original"
    assert again.status == TaskStatus.pending


def test_create_does_not_alias_draft(repo: InMemoryTaskRepo) -> None:
    draft = _draft("kept")
    task_id = repo.create(draft)
    draft.title = "changed after create"
    assert repo.get(task_id).title == "kept"


def test_get_missing_raises(repo: InMemoryTaskRepo) -> None:
    with pytest.raises(TaskNotFoundError) as exc:
        repo.get(42)
    assert exc.value.task_id == 42


def test_update_overwrites_fields_and_refreshes_updated_at(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("old"))
    before = repo.get(task_id)

    task = repo.get(task_id)
    task.title = "new"
    task.description = None
    task.status = TaskStatus.completed
    repo.update(task)

    after = repo.get(task_id)
    assert after.title == "new"
    assert after.description is None
    assert after.status == TaskStatus.completed
    assert after.created_at == before.created_at
    assert after.updated_at > before.updated_at


def test_update_ignores_id_and_created_at_changes(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("stable"))
    task = repo.get(task_id)
    original_created = task.created_at

    task.created_at = original_created.replace(year=1999)
    repo.update(task)

    assert repo.get(task_id).created_at == original_created


def test_update_missing_raises(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("gone"))
    task = repo.get(task_id)
    repo.delete(task_id)

    with pytest.raises(TaskNotFoundError):
        repo.update(task)


def test_delete_removes_and_second_delete_fails(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("temp"))
    repo.delete(task_id)

    with pytest.raises(TaskNotFoundError):
        repo.get(task_id)
    with pytest.raises(TaskNotFoundError):
        repo.delete(task_id)


def test_ids_are_not_reused_after_delete(repo: InMemoryTaskRepo) -> None:
    first = repo.create(_draft("a"))
    repo.delete(first)
    assert repo.create(_draft("b")) == first + 1


def test_list_keeps_insertion_order_and_total(repo: InMemoryTaskRepo) -> None:
    for i in range(3):
        repo.create(_draft(f"t{i}"))

    tasks, total = repo.list(ListFilter(offset=0, limit=10))
    assert total == 3
    assert [t.title for t in tasks] == ["t0", "t1", "t2"]


def test_list_filters_by_status_before_paginating(repo: InMemoryTaskRepo) -> None:
    repo.create(_draft("a", TaskStatus.completed))
    repo.create(_draft("b", TaskStatus.pending))
    repo.create(_draft("c", TaskStatus.completed))
    repo.create(_draft("d", TaskStatus.completed))

    tasks, total = repo.list(ListFilter(status=TaskStatus.completed, offset=1, limit=1))
    assert total == 3
    assert [t.title for t in tasks] == ["c"]


@pytest.mark.parametrize(
    "offset,limit,expected",
    [
        (0, 2, ["t0", "t1"]),
        (2, 2, ["t2"]),
        (3, 2, []),
        (50, 10, []),
        (1, 0, []),
    ],
)
def test_list_clamps_page_bounds(repo: InMemoryTaskRepo, offset: int, limit: int, expected: list[str]) -> None:
    for i in range(3):
        repo.create(_draft(f"t{i}"))

    tasks, total = repo.list(ListFilter(offset=offset, limit=limit))
    assert total == 3
    assert [t.title for t in tasks] == expected


def test_repeated_reads_are_identical(repo: InMemoryTaskRepo) -> None:
    task_id = repo.create(_draft("same"))
    repo.create(_draft("other"))

    assert repo.get(task_id) == repo.get(task_id)
    assert repo.list(ListFilter()) == repo.list(ListFilter())


def test_concurrent_creates_never_duplicate_ids() -> None:
    repo = InMemoryTaskRepo()
    ids: list[int] = []
    ids_lock = threading.Lock()

    def worker(n: int) -> None:
        local = [repo.create(_draft(f"w{n}-{i}")) for i in range(50)]
        with ids_lock:
            ids.extend(local)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 400
    assert len(set(ids)) == 400
    assert sorted(ids) == list(range(1, 401))

    _, total = repo.list(ListFilter(limit=1000))
    assert total == 400
