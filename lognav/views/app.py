"""The input/render loop"""

import curses
import logging

from lognav.models.app_state import AppState, SelectedView
from lognav.models.shared import SharedState
from lognav.output_controller import OutputController
from lognav.viewmodels.app import AppModel
from lognav.views.log_groups import LogGroupsView
from lognav.views.overview import OverviewView

INPUT_TIMEOUT_MS = 50

logger = logging.getLogger(__name__)


class App:
    """Draws the state and applies key events until asked to stop.

    `run` returns when the state requests quitting or editing the query, so the
    caller can release the terminal.
    """

    def __init__(
        self,
        output_controller: OutputController,
        shared: SharedState,
        model: AppModel,
    ) -> None:
        self._output_controller = output_controller
        self._window = output_controller.create_main_window()
        self._shared = shared
        self._model = model
        self._overview = OverviewView()
        self._log_groups = LogGroupsView()
        self._needs_redraw = True

    def run(self) -> None:
        """Main TUI loop"""
        self._window.timeout(INPUT_TIMEOUT_MS)
        while True:
            with self._shared.access() as state:
                if state.quit or state.break_inner:
                    return
                snapshot = None
                if self._needs_redraw or state.changes:
                    snapshot = state.snapshot()
                    state.clear_changes()

            if snapshot is not None:
                self._draw(snapshot)
                self._needs_redraw = False

            key = self._window.getch()
            if key == -1:
                continue
            if key == curses.KEY_RESIZE:
                self._output_controller.update_lines_cols()
                logger.info(
                    "Resized to %s", self._output_controller.get_terminal_size()
                )
            else:
                with self._shared.access() as state:
                    self._model.handle_input(state, key)
            self._needs_redraw = True

    def _draw(self, state: AppState) -> None:
        self._window.erase()
        if state.selected_view == SelectedView.OVERVIEW:
            cursor = self._overview.draw(self._window, state)
        else:
            cursor = self._log_groups.draw(self._window, state)

        if cursor is None:
            self._output_controller.curs_set(0)
        else:
            self._window.move(cursor)
            self._output_controller.curs_set(1)
        self._window.refresh()
