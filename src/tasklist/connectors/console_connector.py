# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import render_list
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> None:
    """
    Interactive loop: one command is fully handled before the next line is read.

    Plain text without a leading slash is treated as "/add <text>".
    """
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))

    def emit(text: str) -> None:
        write(f"  {text}")

    write(f"[{app_name}] Type /help for commands, /exit to quit.\n")
    write(render_list(state))

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit", "/q"):
            logger.info("Console exit command received.")
            break

        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            result = command_registry.dispatch(state, line, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            write("Internal error while handling a command.")
            continue

        if result is None:
            continue

        if result.text:
            write(result.text)
        if result.refresh:
            write(render_list(state))

    logger.info("Console connector finished.")
