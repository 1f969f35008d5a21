# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_view import visible_tasks
from .ports import TaskRepo


@dataclass(slots=True)
class ViewState:
    """Filter and search query owned by the screen; consumed by visible_tasks()."""

    task_filter: TaskFilter = TaskFilter.ALL
    query: str = ""

    def cycle_filter(self) -> TaskFilter:
        self.task_filter = self.task_filter.next()
        return self.task_filter


@dataclass
class AppState:
    # Settings are kept on the state so command handlers can read them.
    settings: object

    task_store: TaskRepo
    view: ViewState = field(default_factory=ViewState)

    # Ids of the last rendered list, so "/done 2" refers to what the user saw.
    shown_ids: list[str] = field(default_factory=list)

    def visible(self) -> list[Task]:
        return visible_tasks(self.task_store.list_tasks(), self.view.task_filter, self.view.query)
