# src/tasklist/core/labels.py

"""Display labels and formatting for the presentation layer."""

from __future__ import annotations

from datetime import datetime

from ..tasks.task_models import Task, TaskFilter, TaskPriority

PRIORITY_LABELS: dict[TaskPriority, str] = {
    TaskPriority.LOW: "Low",
    TaskPriority.MEDIUM: "Medium",
    TaskPriority.HIGH: "High",
}

FILTER_LABELS: dict[TaskFilter, str] = {
    TaskFilter.ALL: "All",
    TaskFilter.ACTIVE: "Active",
    TaskFilter.DONE: "Done",
}

PRIORITY_MARKS: dict[TaskPriority, str] = {
    TaskPriority.LOW: ".",
    TaskPriority.MEDIUM: "!",
    TaskPriority.HIGH: "!!",
}


def priority_label(priority: TaskPriority) -> str:
    return PRIORITY_LABELS[priority]


def filter_label(task_filter: TaskFilter) -> str:
    return FILTER_LABELS[task_filter]


def format_created(dt: datetime) -> str:
    """dd.mm.yyyy HH:MM in local time (naive datetimes are shown as-is)."""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%d.%m.%Y %H:%M")


def render_task_line(n: int, task: Task) -> str:
    box = "[x]" if task.done else "[ ]"
    mark = PRIORITY_MARKS[task.priority]
    line = f"{n:>2}. {box} {mark:<2} {task.title}"
    meta = f"Priority: {priority_label(task.priority)}, Created: {format_created(task.created_at)}"
    if task.description.strip():
        desc = task.description.strip().splitlines()[0]
        if len(desc) > 60:
            desc = desc[:57] + "..."
        return f"{line}\n      {desc}\n      {meta}"
    return f"{line}\n      {meta}"
