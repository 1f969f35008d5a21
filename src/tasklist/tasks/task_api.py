# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .errors import TaskNotFound
from .task_models import RemovedTask, Task, TaskPriority

logger = logging.getLogger(__name__)


def create_task(
    state: AppState,
    title: str,
    description: str = "",
    priority: TaskPriority = TaskPriority.MEDIUM,
) -> Task:
    """Add a task via state.task_store. ValidationError propagates to the caller."""
    task = state.task_store.add(title, description, priority)
    logger.info("Created task id=%s priority=%s", task.id, task.priority.value)
    return task


def edit_task(
    state: AppState,
    task_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    priority: TaskPriority | None = None,
    done: bool | None = None,
) -> Task:
    """
    Submit an edit as a single immutable Task.

    The edit form collects field values locally; this builds the new
    instance with copy_with() and hands it to update(). Unknown ids raise
    TaskNotFound.
    """
    current = state.task_store.require(task_id)
    updated = current.copy_with(
        title=title,
        description=description,
        priority=priority,
        done=done,
    )

    if not state.task_store.update(updated):
        raise TaskNotFound(task_id)

    stored = state.task_store.require(task_id)
    logger.info("Edited task id=%s", task_id)
    return stored


def toggle_task(state: AppState, task_id: str) -> Task:
    task = state.task_store.toggle_done(task_id)
    if task is None:
        raise TaskNotFound(task_id)
    logger.info("Toggled task id=%s done=%s", task_id, task.done)
    return task


def delete_task(state: AppState, task_id: str) -> RemovedTask | None:
    removed = state.task_store.remove(task_id)
    if removed is not None:
        logger.info("Deleted task id=%s index=%d", task_id, removed.index)
    return removed


def undo_delete(state: AppState) -> Task | None:
    """Undo the most recent deletion (one step only)."""
    task = state.task_store.undo_remove()
    if task is not None:
        logger.info("Restored task id=%s", task.id)
    return task
