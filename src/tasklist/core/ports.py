# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

The front-end depends on this Protocol rather than on TaskStore directly,
so any in-memory implementation with the same contract can be plugged in.
"""

from typing import Protocol

from ..tasks.task_models import RemovedTask, Task, TaskPriority


class TaskRepo(Protocol):
    # Mutators
    def add(
            self,
            title: str,
            description: str = "",
            priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Task: ...
    def update(self, task: Task) -> bool: ...
    def remove(self, task_id: str) -> RemovedTask | None: ...
    def restore_at(self, task: Task, index: int) -> int: ...
    def toggle_done(self, task_id: str) -> Task | None: ...
    def undo_remove(self) -> Task | None: ...

    # Queries
    def get(self, task_id: str) -> Task | None: ...
    def require(self, task_id: str) -> Task: ...
    def list_tasks(self) -> list[Task]: ...
    def count(self) -> int: ...

    @property
    def last_removed(self) -> RemovedTask | None: ...
