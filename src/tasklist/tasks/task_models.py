# src/tasklist/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from enum import StrEnum


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Numeric ordering used for sorting only (high=3, medium=2, low=1)."""
        return _PRIORITY_RANK[self]

    @classmethod
    def from_text(cls, raw: str | None) -> TaskPriority | None:
        if not raw:
            return None
        key = raw.strip().lower()
        return _PRIORITY_ALIASES.get(key)


_PRIORITY_RANK: dict[TaskPriority, int] = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}

_PRIORITY_ALIASES: dict[str, TaskPriority] = {
    "l": TaskPriority.LOW,
    "low": TaskPriority.LOW,
    "m": TaskPriority.MEDIUM,
    "med": TaskPriority.MEDIUM,
    "medium": TaskPriority.MEDIUM,
    "h": TaskPriority.HIGH,
    "high": TaskPriority.HIGH,
}


class TaskFilter(StrEnum):
    """
    Completion filter applied by the view pipeline.

    Notes:
    - "active" keeps incomplete tasks, "done" keeps completed ones.
    - next() cycles all -> active -> done -> all.
    """

    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    def next(self) -> TaskFilter:
        order = list(TaskFilter)
        return order[(order.index(self) + 1) % len(order)]

    @classmethod
    def from_text(cls, raw: str | None) -> TaskFilter | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def new_task_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str = ""
    done: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    created_at: datetime = field(default_factory=utc_now)

    def copy_with(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        done: bool | None = None,
        priority: TaskPriority | None = None,
    ) -> Task:
        """Return a new instance with the same id and created_at."""
        return replace(
            self,
            title=self.title if title is None else title,
            description=self.description if description is None else description,
            done=self.done if done is None else done,
            priority=self.priority if priority is None else priority,
        )

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on title or description; `needle` must be lower-cased."""
        return needle in self.title.lower() or needle in self.description.lower()


@dataclass(frozen=True, slots=True)
class RemovedTask:
    """A deleted task together with the index it occupied in the store."""

    task: Task
    index: int
