# tests/test_task_store.py

from __future__ import annotations

import pytest

from tasklist.tasks.errors import TaskNotFound, ValidationError
from tasklist.tasks.task_models import Task, TaskPriority
from tasklist.tasks.task_store import TaskStore


def test_add_counts_only_successful_adds(store: TaskStore) -> None:
    titles = ["Buy milk", "  ", "Call mom", "", "\t\n", "Pay rent"]
    ok = 0
    for title in titles:
        try:
            store.add(title)
            ok += 1
        except ValidationError:
            pass

    assert ok == 3
    assert len(store) == 3
    assert [t.title for t in store.list_tasks()] == ["Buy milk", "Call mom", "Pay rent"]


@pytest.mark.parametrize("title", ["", "  ", "\t"])
def test_add_blank_title_rejected(store: TaskStore, title: str) -> None:
    with pytest.raises(ValidationError) as exc:
        store.add(title, "desc", TaskPriority.HIGH)
    assert exc.value.field == "title"
    assert store.count() == 0


def test_add_trims_and_sets_defaults(store: TaskStore) -> None:
    task = store.add("  Buy milk  ", "  2 litres ")

    assert task.title == "Buy milk"
    assert task.description == "2 litres"
    assert task.done is False
    assert task.priority == TaskPriority.MEDIUM
    assert task.id
    assert store.get(task.id) == task


def test_add_rejects_title_over_limit(store: TaskStore) -> None:
    store.add("x" * 50)
    with pytest.raises(ValidationError):
        store.add("x" * 51)
    assert store.count() == 1


def test_ids_are_unique_even_if_factory_repeats(clock) -> None:
    ids = iter(["a", "a", "b"])
    s = TaskStore(clock=clock, id_factory=lambda: next(ids))
    t1 = s.add("one")
    t2 = s.add("two")
    assert (t1.id, t2.id) == ("a", "b")


def test_update_replaces_in_place(store: TaskStore) -> None:
    a = store.add("A")
    b = store.add("B")
    c = store.add("C")

    assert store.update(b.copy_with(title="B2", priority=TaskPriority.HIGH)) is True

    tasks = store.list_tasks()
    assert [t.id for t in tasks] == [a.id, b.id, c.id]
    assert tasks[1].title == "B2"
    assert tasks[1].created_at == b.created_at


def test_update_unknown_id_is_noop(store: TaskStore, clock) -> None:
    store.add("A")
    before = store.list_tasks()

    ghost = Task(id="missing", title="Ghost", created_at=clock())
    assert store.update(ghost) is False
    assert store.list_tasks() == before


def test_update_blank_title_rejected_without_mutation(store: TaskStore) -> None:
    a = store.add("A")
    with pytest.raises(ValidationError):
        store.update(a.copy_with(title="   "))
    assert store.require(a.id).title == "A"


def test_remove_returns_task_and_index(store: TaskStore) -> None:
    store.add("A")
    b = store.add("B")
    store.add("C")

    removed = store.remove(b.id)
    assert removed is not None
    assert removed.task == b
    assert removed.index == 1
    assert len(store) == 2
    assert store.remove(b.id) is None


def test_remove_then_restore_reproduces_sequence(store: TaskStore) -> None:
    for title in ("A", "B", "C", "D"):
        store.add(title)
    before = store.list_tasks()

    removed = store.remove(before[2].id)
    assert removed is not None
    store.restore_at(removed.task, removed.index)

    assert store.list_tasks() == before


def test_restore_at_clamps_index(store: TaskStore) -> None:
    a = store.add("A")
    b = store.add("B")
    removed_a = store.remove(a.id)
    removed_b = store.remove(b.id)
    assert removed_a is not None and removed_b is not None

    assert store.restore_at(removed_a.task, 99) == 0
    assert store.restore_at(removed_b.task, -5) == 0
    assert [t.title for t in store.list_tasks()] == ["B", "A"]


def test_restore_existing_id_is_noop(store: TaskStore) -> None:
    a = store.add("A")
    store.add("B")
    assert store.restore_at(a, 1) == 0
    assert len(store) == 2


def test_toggle_done_flips_and_keeps_position(store: TaskStore) -> None:
    a = store.add("A")
    b = store.add("B")

    flipped = store.toggle_done(a.id)
    assert flipped is not None and flipped.done is True
    assert [t.id for t in store.list_tasks()] == [a.id, b.id]

    again = store.toggle_done(a.id)
    assert again is not None and again.done is False
    assert store.toggle_done("missing") is None


def test_undo_remove_is_single_step(store: TaskStore) -> None:
    a = store.add("A")
    b = store.add("B")
    store.add("C")

    store.remove(a.id)
    store.remove(b.id)

    # Only the last deletion is remembered.
    restored = store.undo_remove()
    assert restored == b
    assert [t.title for t in store.list_tasks()] == ["B", "C"]
    assert store.undo_remove() is None
    assert store.last_removed is None


def test_require_raises_for_unknown_id(store: TaskStore) -> None:
    with pytest.raises(TaskNotFound):
        store.require("nope")
    assert "nope" not in store


def test_update_stores_trimmed_description(store: TaskStore) -> None:
    task = store.add("Title", "notes")

    assert store.update(task.copy_with(description="  padded  ")) is True
    assert store.require(task.id).description == "padded"


def test_undo_remove_skips_when_id_is_taken_again(clock) -> None:
    ids = iter(["a", "a"])
    s = TaskStore(clock=clock, id_factory=lambda: next(ids))
    first = s.add("First")
    s.remove(first.id)
    s.add("Second")

    assert s.undo_remove() is None
    assert [t.title for t in s.list_tasks()] == ["Second"]
    assert s.last_removed is None
