"""Top level key dispatch"""

from typing import Callable

import pyperclip

from lognav.models.app_state import AppState, Mode, SelectedView
from lognav.viewmodels.log_groups import LogGroupsViewModel
from lognav.viewmodels.overview import OverviewViewModel
from lognav.viewmodels.time_select import TimeSelectViewModel
from lognav.worker import RequestQueue


class AppModel:
    """Routes key events to the handler of the active view"""

    def __init__(
        self,
        requests: RequestQueue,
        copy_to_clipboard: Callable[[str], None] = pyperclip.copy,
    ) -> None:
        self._time_select = TimeSelectViewModel()
        self._overview = OverviewViewModel(requests, copy_to_clipboard)
        self._log_groups = LogGroupsViewModel(requests)

    def handle_input(self, state: AppState, key: int) -> None:
        """Apply a key event to the state"""
        if state.time_selector.popup_open:
            self._time_select.handle_input(state, key)
        elif key == ord("q") and state.mode == Mode.NORMAL:
            state.quit = True
        elif state.selected_view == SelectedView.OVERVIEW:
            self._overview.handle_input(state, key)
        else:
            self._log_groups.handle_input(state, key)
