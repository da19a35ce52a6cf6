"""Overview screen input handling"""

import logging
from typing import Callable

import pyperclip

from lognav.helpers.curses_utils import (
    DOWN_KEYS,
    ENTER_KEYS,
    ESC,
    LEFT_KEYS,
    RIGHT_KEYS,
    UP_KEYS,
)
from lognav.models.app_state import (
    AppState,
    Mode,
    SelectedView,
    StatusMessage,
    Widget,
)
from lognav.worker import Request, RequestQueue

logger = logging.getLogger(__name__)

_FOCUS_DOWN = {
    Widget.LOG_GROUP_FILTER: Widget.QUERY_TEXT,
    Widget.TIME_SELECTOR: Widget.QUERY_TEXT,
    Widget.QUERY_TEXT: Widget.RESULT_ROWS,
}

_FOCUS_UP = {
    Widget.LOG_GROUP_FILTER: Widget.RESULT_ROWS,
    Widget.TIME_SELECTOR: Widget.RESULT_ROWS,
    Widget.QUERY_TEXT: Widget.LOG_GROUP_FILTER,
    Widget.RESULT_ROWS: Widget.QUERY_TEXT,
}

_FOCUS_SIDEWAYS = {
    Widget.LOG_GROUP_FILTER: Widget.TIME_SELECTOR,
    Widget.TIME_SELECTOR: Widget.LOG_GROUP_FILTER,
}


class OverviewViewModel:
    """Handles keys on the overview screen"""

    def __init__(
        self,
        requests: RequestQueue,
        copy_to_clipboard: Callable[[str], None] = pyperclip.copy,
    ) -> None:
        self._requests = requests
        self._copy_to_clipboard = copy_to_clipboard

    def handle_input(self, state: AppState, key: int) -> None:
        """Handle a key pressed on the overview screen"""
        if state.mode == Mode.NORMAL:
            self._handle_normal(state, key)
        elif state.focused == Widget.RESULT_ROWS:
            self._handle_result_rows(state, key)
        elif key == ESC:
            state.mode = Mode.NORMAL

    def _handle_normal(self, state: AppState, key: int) -> None:
        if key in ENTER_KEYS:
            self._select(state)
        elif key in LEFT_KEYS or key in RIGHT_KEYS:
            state.focused = _FOCUS_SIDEWAYS.get(state.focused, state.focused)
        elif key in DOWN_KEYS:
            state.focused = _FOCUS_DOWN.get(state.focused, Widget.LOG_GROUP_FILTER)
        elif key in UP_KEYS:
            state.focused = _FOCUS_UP.get(state.focused, Widget.LOG_GROUP_FILTER)
        elif key == ord("r"):
            self._requests.put(Request.RUN_QUERY)

    def _select(self, state: AppState) -> None:
        if state.focused == Widget.LOG_GROUP_FILTER:
            state.selected_view = SelectedView.LOG_GROUP_BROWSER
            state.mode = Mode.INSERT
            if not state.log_groups:
                self._requests.put(Request.LIST_LOG_GROUPS)
        elif state.focused == Widget.QUERY_TEXT:
            state.break_inner = True
        elif state.focused == Widget.TIME_SELECTOR:
            state.time_selector.open_popup()
        elif state.focused == Widget.RESULT_ROWS:
            state.mode = Mode.INSERT

    def _handle_result_rows(self, state: AppState, key: int) -> None:
        if key == ESC:
            state.mode = Mode.NORMAL
        elif key in DOWN_KEYS:
            state.move_result_cursor(1)
        elif key in UP_KEYS:
            state.move_result_cursor(-1)
        elif key == ord("y"):
            self._yank(state)

    def _yank(self, state: AppState) -> None:
        row = state.selected_result
        if row is None:
            return
        try:
            self._copy_to_clipboard(row.message)
        except pyperclip.PyperclipException as e:
            logger.error("Clipboard action failed: %s", e)
            state.status_message = StatusMessage.error("Clipboard action failed.")
        else:
            state.status_message = StatusMessage.info("Yanked to clipboard.")
