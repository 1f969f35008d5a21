# tests/test_labels.py

from __future__ import annotations

from datetime import datetime

from tasklist.core.labels import filter_label, format_created, priority_label, render_task_line
from tasklist.tasks.task_models import Task, TaskFilter, TaskPriority


def test_labels_cover_every_variant() -> None:
    assert [priority_label(p) for p in TaskPriority] == ["Low", "Medium", "High"]
    assert [filter_label(f) for f in TaskFilter] == ["All", "Active", "Done"]


def test_format_created_naive() -> None:
    assert format_created(datetime(2024, 3, 7, 9, 5)) == "07.03.2024 09:05"


def test_render_task_line() -> None:
    task = Task(
        id="1",
        title="Buy milk",
        description="oat\nsecond line",
        done=True,
        priority=TaskPriority.HIGH,
        created_at=datetime(2024, 3, 7, 9, 5),
    )
    line = render_task_line(2, task)
    assert line.splitlines() == [
        " 2. [x] !! Buy milk",
        "      oat",
        "      Priority: High, Created: 07.03.2024 09:05",
    ]
