# src/tasklist/tasks/task_view.py

from __future__ import annotations

"""
View pipeline.

visible_tasks() derives what the user currently sees from the store contents
and the view state:
- filter by completion (all / active / done),
- keep tasks whose title or description contains the query (case-insensitive),
- sort: incomplete first, then higher priority, then newest first.

The function is pure. sorted() is stable, so tasks with equal keys keep
their store order on every call.
"""

from collections.abc import Iterable
from datetime import datetime

from .task_models import Task, TaskFilter, TaskPriority


def priority_rank(priority: TaskPriority) -> int:
    return priority.rank


def sort_key(task: Task) -> tuple[bool, int, float]:
    created: datetime = task.created_at
    return (task.done, -priority_rank(task.priority), -created.timestamp())


def _keep(task: Task, task_filter: TaskFilter) -> bool:
    if task_filter == TaskFilter.ACTIVE:
        return not task.done
    if task_filter == TaskFilter.DONE:
        return task.done
    return True


def visible_tasks(
    all_tasks: Iterable[Task],
    task_filter: TaskFilter = TaskFilter.ALL,
    query: str = "",
) -> list[Task]:
    items = [t for t in all_tasks if _keep(t, task_filter)]

    needle = (query or "").strip().lower()
    if needle:
        items = [t for t in items if t.matches(needle)]

    return sorted(items, key=sort_key)
