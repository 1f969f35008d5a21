# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the in-memory TaskStore with the configured title limit,
- wires it into AppState together with a fresh view state.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState, ViewState
from ..tasks.task_store import DEFAULT_TITLE_MAX_LENGTH, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    max_len = int(getattr(settings, "title_max_length", DEFAULT_TITLE_MAX_LENGTH))
    store = TaskStore(max_title_length=max_len)

    state = AppState(settings=settings, task_store=store, view=ViewState())
    logger.debug("AppState ready (title_max_length=%d)", max_len)
    return state
