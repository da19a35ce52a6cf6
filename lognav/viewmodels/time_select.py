"""Time selector popup input handling"""

import logging

from lognav.errors import LogNavError
from lognav.helpers.curses_utils import (
    BACKSPACE_KEYS,
    ENTER_KEYS,
    ESC,
    TAB,
    is_printable,
)
from lognav.models.app_state import AppState, StatusMessage
from lognav.models.time_range import TimeSelector

logger = logging.getLogger(__name__)


class TimeSelectViewModel:
    """Edits the time range while the popup is open"""

    def handle_input(self, state: AppState, key: int) -> None:
        """Handle a key pressed while the popup is open"""
        selector = state.time_selector
        if key == TAB:
            selector.toggle_input()
        elif key in BACKSPACE_KEYS:
            selector.active_text = selector.active_text[:-1]
        elif key in ENTER_KEYS:
            self._apply(state)
        elif key == ESC:
            selector.popup_open = False
        elif is_printable(key):
            selector.active_text += chr(key)

    @staticmethod
    def _apply(state: AppState) -> None:
        selector = state.time_selector
        try:
            new_selector = TimeSelector.from_strings(
                selector.start_text, selector.end_text
            )
        except LogNavError as e:
            logger.info(
                "Rejected time range %r - %r: %s",
                selector.start_text,
                selector.end_text,
                e,
            )
            state.status_message = StatusMessage.error(str(e))
            return

        state.time_selector = new_selector
        state.status_message = StatusMessage.info(
            f"New time range selected: {new_selector}"
        )
