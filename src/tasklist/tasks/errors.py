# src/tasklist/tasks/errors.py

from __future__ import annotations


class TasklistError(Exception):
    """Base class for errors raised by the task core."""


class ValidationError(TasklistError, ValueError):
    """
    User input rejected before any mutation happened.

    `field` names the offending Task field so the front-end can point at it.
    """

    def __init__(self, message: str, *, field: str = "title") -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class TaskNotFound(TasklistError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
