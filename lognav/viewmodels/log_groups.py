"""Log group browser input handling"""

from lognav.helpers.curses_utils import (
    BACKSPACE_KEYS,
    DOWN_KEYS,
    ENTER_KEYS,
    ESC,
    UP_KEYS,
    is_printable,
)
from lognav.models.app_state import AppState, Mode, SelectedView, Widget
from lognav.worker import Request, RequestQueue


class LogGroupsViewModel:
    """Handles keys in the log group browser"""

    def __init__(self, requests: RequestQueue) -> None:
        self._requests = requests

    def handle_input(self, state: AppState, key: int) -> None:
        """Handle a key pressed in the log group browser"""
        if state.focused == Widget.LOG_GROUP_RESULTS:
            self._handle_results(state, key)
        elif state.mode == Mode.INSERT:
            self._handle_filter_insert(state, key)
        else:
            self._handle_filter_normal(state, key)

    def _handle_filter_normal(self, state: AppState, key: int) -> None:
        if key == ESC:
            self._back_to_overview(state)
        elif key in ENTER_KEYS or key in DOWN_KEYS:
            state.focused = Widget.LOG_GROUP_RESULTS
        elif key in (ord("i"), ord("/")):
            state.mode = Mode.INSERT
        elif key == ord("r"):
            self._requests.put(Request.LIST_LOG_GROUPS)

    @staticmethod
    def _handle_filter_insert(state: AppState, key: int) -> None:
        if key == ESC:
            state.mode = Mode.NORMAL
        elif key in ENTER_KEYS:
            state.focused = Widget.LOG_GROUP_RESULTS
        elif key in BACKSPACE_KEYS:
            state.log_filter = state.log_filter[:-1]
            state.filter_log_groups()
        elif is_printable(key):
            state.log_filter += chr(key)
            state.filter_log_groups()

    def _handle_results(self, state: AppState, key: int) -> None:
        if key in DOWN_KEYS:
            state.move_log_group_cursor(1)
        elif key in UP_KEYS:
            state.move_log_group_cursor(-1)
        elif key in ENTER_KEYS:
            name = state.highlighted_log_group
            if name is not None:
                state.toggle_log_group(name)
        elif key == ESC and state.mode == Mode.INSERT:
            state.mode = Mode.NORMAL
        elif key == ESC:
            self._back_to_overview(state)
        elif state.mode == Mode.NORMAL and key in (ord("i"), ord("/")):
            state.focused = Widget.LOG_GROUP_FILTER
            state.mode = Mode.INSERT
        elif state.mode == Mode.NORMAL and key == ord("r"):
            self._requests.put(Request.LIST_LOG_GROUPS)

    @staticmethod
    def _back_to_overview(state: AppState) -> None:
        state.selected_view = SelectedView.OVERVIEW
        state.focused = Widget.LOG_GROUP_FILTER
        state.mode = Mode.NORMAL
