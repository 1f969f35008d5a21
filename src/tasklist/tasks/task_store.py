# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from .errors import TaskNotFound, ValidationError
from .task_models import RemovedTask, Task, TaskPriority, new_task_id, utc_now

logger = logging.getLogger(__name__)

DEFAULT_TITLE_MAX_LENGTH = 50


class TaskStore:
    """
    In-memory task store for one session.

    Ordering:
    - tasks keep insertion order; update/toggle replace in place
    - remove() returns the original index so the caller can restore_at() it

    Undo:
    - only the most recent removal is remembered (last_removed)
    - a second removal replaces the pending restore point

    Not thread-safe: the store is owned by a single UI session.
    """

    def __init__(
        self,
        *,
        max_title_length: int = DEFAULT_TITLE_MAX_LENGTH,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._tasks: list[Task] = []
        self._max_title_length = int(max_title_length)
        self._clock = clock
        self._id_factory = id_factory
        self._last_removed: RemovedTask | None = None

    # ---- low-level helpers ----

    def _validate_title(self, raw: str | None) -> str:
        title = (raw or "").strip()
        if not title:
            raise ValidationError("Title is required.")
        if len(title) > self._max_title_length:
            raise ValidationError(
                f"Title is too long ({len(title)} > {self._max_title_length} characters)."
            )
        return title

    def _new_id(self) -> str:
        # Ids must stay unique for the lifetime of the store.
        while True:
            task_id = self._id_factory()
            if self.index_of(task_id) is None:
                return task_id

    # ---- queries ----

    @property
    def max_title_length(self) -> int:
        return self._max_title_length

    @property
    def last_removed(self) -> RemovedTask | None:
        return self._last_removed

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self.index_of(task_id) is not None

    def count(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def get(self, task_id: str) -> Task | None:
        idx = self.index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def require(self, task_id: str) -> Task:
        task = self.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    # ---- mutators ----

    def add(
        self,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Task:
        clean_title = self._validate_title(title)

        task = Task(
            id=self._new_id(),
            title=clean_title,
            description=(description or "").strip(),
            done=False,
            priority=priority,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s total=%d", task.id, task.priority.value, len(self._tasks))
        return task

    def update(self, task: Task) -> bool:
        """
        Replace the stored task with the same id, keeping its position.

        Unknown ids are ignored (returns False). The title is validated
        before anything is replaced; title and description are stored trimmed.
        """
        idx = self.index_of(task.id)
        if idx is None:
            logger.debug("Task update ignored, id=%s not in store", task.id)
            return False

        clean_title = self._validate_title(task.title)
        clean_description = (task.description or "").strip()
        if clean_title != task.title or clean_description != task.description:
            task = task.copy_with(title=clean_title, description=clean_description)

        self._tasks[idx] = task
        logger.debug("Task updated id=%s index=%d done=%s", task.id, idx, task.done)
        return True

    def remove(self, task_id: str) -> RemovedTask | None:
        idx = self.index_of(task_id)
        if idx is None:
            logger.debug("Task remove ignored, id=%s not in store", task_id)
            return None

        task = self._tasks.pop(idx)
        removed = RemovedTask(task=task, index=idx)
        self._last_removed = removed
        logger.debug("Task removed id=%s index=%d total=%d", task_id, idx, len(self._tasks))
        return removed

    def restore_at(self, task: Task, index: int) -> int:
        """
        Reinsert a previously removed task at `index`, clamped into [0, len].

        Returns the index actually used. If the id is already present the
        store is left untouched and the existing index is returned.
        """
        existing = self.index_of(task.id)
        if existing is not None:
            logger.debug("Task restore ignored, id=%s already at index=%d", task.id, existing)
            return existing

        pos = max(0, min(int(index), len(self._tasks)))
        self._tasks.insert(pos, task)

        if self._last_removed is not None and self._last_removed.task.id == task.id:
            self._last_removed = None

        logger.debug("Task restored id=%s index=%d (requested=%d)", task.id, pos, index)
        return pos

    def toggle_done(self, task_id: str) -> Task | None:
        task = self.get(task_id)
        if task is None:
            logger.debug("Task toggle ignored, id=%s not in store", task_id)
            return None

        flipped = task.copy_with(done=not task.done)
        self.update(flipped)
        return flipped

    def undo_remove(self) -> Task | None:
        """Restore the most recently removed task at its original index (one step)."""
        removed = self._last_removed
        if removed is None:
            return None
        if self.index_of(removed.task.id) is not None:
            self._last_removed = None
            return None
        self.restore_at(removed.task, removed.index)
        self._last_removed = None
        return removed.task
