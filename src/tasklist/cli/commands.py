# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
import shlex
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from ..core.labels import filter_label, priority_label, render_task_line
from ..core.state import AppState
from ..tasks.errors import TaskNotFound, ValidationError
from ..tasks.task_api import create_task, delete_task, edit_task, toggle_task, undo_delete
from ..tasks.task_models import TaskFilter, TaskPriority

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Reply text plus whether the task list should be redrawn after it."""

    text: str
    refresh: bool


class CommandRegistry:
    """Slash-command registry used by the console connector (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._refresh: set[str] = set()
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        refresh: bool = False,
        raw: bool = False,
    ) -> None:
        """
        raw=True hands the handler the rest of the line untouched as a
        single argument (free text such as titles); otherwise args are
        whitespace-separated words.
        """
        aliases = aliases or []
        for key in [name.lower(), *(a.lower() for a in aliases)]:
            self._handlers[key] = handler
            if refresh:
                self._refresh.add(key)
            if raw:
                self._raw.add(key)
        self._help[name.lower()] = help_text

    def dispatch(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> CommandResult | None:
        """
        Handle a string like "/command args".
        Returns None if the line is not a command.

        Task errors (validation, unknown task) become the reply text; the
        store is unchanged in both cases.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)

        if not parts:
            return CommandResult("Empty command. Use /help to list available commands.", False)

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return CommandResult(
                f"Unknown command: /{name}. Use /help to list available commands.", False
            )

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                text = h3(state, args, emit)
            else:
                h2 = cast(CommandHandler2, handler)
                text = h2(state, args)
        except ValidationError as e:
            logger.debug("Command /%s rejected: %s", name, e.message)
            return CommandResult(e.message, False)
        except TaskNotFound as e:
            logger.debug("Command /%s: %s", name, e)
            return CommandResult("That task no longer exists. Use /list to refresh.", True)

        return CommandResult(text, name in self._refresh)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """Like dispatch() but returns only the reply text."""
        result = self.dispatch(state, line, emit=emit)
        return None if result is None else result.text

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_list(state: AppState) -> str:
    """Render the visible tasks and remember their ids for numbered commands."""
    items = state.visible()
    state.shown_ids = [t.id for t in items]

    header = f"Tasks [{filter_label(state.view.task_filter)}]"
    if state.view.query.strip():
        header += f' search="{state.view.query.strip()}"'

    if state.task_store.count() == 0:
        return f"{header}\n  No tasks. Use /add to create one."
    if not items:
        return f"{header}\n  Nothing matches the current filter/search."

    lines = [header]
    lines.extend(render_task_line(n, t) for n, t in enumerate(items, start=1))
    return "\n".join(lines)


def _resolve_task_id(state: AppState, raw: str) -> str:
    """Map a 1-based position in the last rendered list to a task id."""
    if not state.shown_ids:
        state.shown_ids = [t.id for t in state.visible()]
    try:
        n = int(raw)
    except ValueError:
        raise ValidationError(f"Expected a task number, got {raw!r}.", field="id") from None
    if n < 1 or n > len(state.shown_ids):
        raise ValidationError(f"No task #{n} in the current list.", field="id")
    return state.shown_ids[n - 1]


def _parse_bool(raw: str) -> bool | None:
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "y", "on", "done"):
        return True
    if v in ("0", "false", "no", "n", "off", "active"):
        return False
    return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    done = sum(1 for t in tasks if t.done)
    pending_undo = "yes" if state.task_store.last_removed is not None else "no"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({len(tasks) - done} active, {done} done)\n"
        f"  Filter: {filter_label(state.view.task_filter)}\n"
        f"  Search: {state.view.query.strip() or '-'}\n"
        f"  Undo available: {pending_undo}"
    )


_PRIORITY_TOKEN = re.compile(r"(^|\s+)!(\S+)(?=\s|$)")


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk                     -> medium priority, no description
    /add Buy milk | 2 litres !high    -> description + priority
    """
    text = args[0] if args else ""
    priority = TaskPriority.MEDIUM

    def _take_priority(m: re.Match[str]) -> str:
        nonlocal priority
        found = TaskPriority.from_text(m.group(2))
        if found is None:
            return m.group(0)
        priority = found
        return ""

    text = _PRIORITY_TOKEN.sub(_take_priority, text)
    title, _, description = text.partition("|")
    task = create_task(state, title, description, priority)
    return f'Added "{task.title}" ({priority_label(task.priority)}).'


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <n> title=... desc=... prio=low|medium|high done=yes|no

    Values may be quoted: title="Buy oat milk".
    """
    try:
        args = shlex.split(args[0]) if args else []
    except ValueError:
        return 'Unbalanced quotes. Usage: /edit <n> title="..." desc="..."'
    if len(args) < 2:
        return 'Usage: /edit <n> title="..." desc="..." prio=high done=yes'

    task_id = _resolve_task_id(state, args[0])
    fields: dict[str, object] = {}

    for pair in args[1:]:
        key, sep, value = pair.partition("=")
        key = key.strip().lower()
        if not sep:
            return f"Expected field=value, got {pair!r}."
        if key == "title":
            fields["title"] = value
        elif key in ("desc", "description"):
            fields["description"] = value
        elif key in ("prio", "priority"):
            prio = TaskPriority.from_text(value)
            if prio is None:
                return "Priority must be one of: low, medium, high."
            fields["priority"] = prio
        elif key == "done":
            flag = _parse_bool(value)
            if flag is None:
                return "done must be yes or no."
            fields["done"] = flag
        else:
            return f"Unknown field: {key}. Use title, desc, prio or done."

    task = edit_task(state, task_id, **fields)  # type: ignore[arg-type]
    return f'Saved "{task.title}".'


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <n>"
    task = toggle_task(state, _resolve_task_id(state, args[0]))
    return f'"{task.title}" marked {"done" if task.done else "active"}.'


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <n>"
    removed = delete_task(state, _resolve_task_id(state, args[0]))
    if removed is None:
        raise TaskNotFound(args[0])
    return f'Task "{removed.task.title}" deleted. Use /undo to restore it.'


def cmd_undo(state: AppState, args: list[str]) -> str:
    task = undo_delete(state)
    if task is None:
        return "Nothing to undo."
    return f'Task "{task.title}" restored.'


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter              -> show current filter
    /filter active       -> set filter (all | active | done)
    """
    if not args:
        return f"Filter is {filter_label(state.view.task_filter)}. Use /filter all|active|done."
    flt = TaskFilter.from_text(args[0])
    if flt is None:
        return "Usage: /filter all | active | done."
    state.view.task_filter = flt
    return f"Filter: {filter_label(flt)}."


def cmd_cycle(state: AppState, args: list[str]) -> str:
    flt = state.view.cycle_filter()
    return f"Filter: {filter_label(flt)}."


def cmd_search(state: AppState, args: list[str]) -> str:
    state.view.query = args[0] if args else ""
    if not state.view.query.strip():
        return "Search cleared."
    return f'Searching for "{state.view.query.strip()}".'


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the visible tasks.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task counts and the current view.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> [| description] [!low|!medium|!high].",
    aliases=["a"],
    refresh=True,
    raw=True,
)
registry.register(
    "edit",
    cmd_edit,
    help_text='Edit a task: /edit <n> title="..." desc="..." prio=high done=yes.',
    aliases=["e"],
    refresh=True,
    raw=True,
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["x"], refresh=True)
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <n>.", aliases=["del"], refresh=True)
registry.register("undo", cmd_undo, help_text="Restore the last deleted task.", aliases=["u"], refresh=True)
registry.register(
    "filter", cmd_filter, help_text="Filter tasks: /filter all | active | done.", aliases=["f"], refresh=True
)
registry.register("cycle", cmd_cycle, help_text="Cycle the filter: all -> active -> done.", refresh=True)
registry.register(
    "search",
    cmd_search,
    help_text="Search title/description: /search <text> (empty clears).",
    aliases=["s"],
    refresh=True,
    raw=True,
)
