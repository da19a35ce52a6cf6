"""Draws the log group browser"""

from lognav.helpers.curses_utils import Color, Position, Size, Viewport
from lognav.models.app_state import AppState, Mode, Widget
from lognav.output_controller import Window
from lognav.views.widgets import (
    Line,
    draw_box,
    draw_controls,
    draw_input_box,
    draw_status_bar,
    visible_range,
)

CONTROLS = [
    "q (quit)",
    "i or / (edit filter)",
    "j/k (move)",
    "Enter (toggle selection)",
    "r (reload)",
    "Escape (go back)",
]

MARGIN = 1
FILTER_HEIGHT = 3
STATUS_HEIGHT = 3


class LogGroupsView:
    """Draws the filter box, the filtered log groups and the status"""

    def draw(self, window: Window, state: AppState) -> Position | None:
        """Draw the screen and return where the cursor should be shown"""
        height, width = window.getmaxyx()
        inner_width = width - 2 * MARGIN
        results_height = height - 2 * MARGIN - FILTER_HEIGHT - STATUS_HEIGHT - 1
        y = MARGIN

        filter_focused = state.focused == Widget.LOG_GROUP_FILTER
        cursor = draw_input_box(
            window,
            Viewport(Position(y, MARGIN), Size(FILTER_HEIGHT, inner_width)),
            "filter log groups",
            state.log_filter,
            focused=filter_focused,
        )
        y += FILTER_HEIGHT

        if results_height >= 2:
            self._draw_results(
                window,
                Viewport(Position(y, MARGIN), Size(results_height, inner_width)),
                state,
            )
            y += results_height

        draw_status_bar(
            window,
            Viewport(Position(y, MARGIN), Size(STATUS_HEIGHT, inner_width)),
            state.status_message,
        )
        y += STATUS_HEIGHT
        draw_controls(
            window, Viewport(Position(y, MARGIN), Size(1, inner_width)), CONTROLS
        )

        if filter_focused and state.mode == Mode.INSERT:
            return cursor
        return None

    @staticmethod
    def _draw_results(window: Window, viewport: Viewport, state: AppState) -> None:
        results_focused = state.focused == Widget.LOG_GROUP_RESULTS
        lines = []
        for i, position in enumerate(state.filtered_log_groups):
            name = state.log_groups[position]
            marker = "*" if name in state.selected_log_groups else " "
            highlighted = results_focused and i == state.log_group_row
            color = Color.ERROR if highlighted else None
            lines.append(Line(f"[{marker}] {i}: {name}", color))
        for name in state.unlisted_selected_log_groups:
            lines.append(Line(f"[*] {name} (not listed)", Color.HEADER))

        rows = visible_range(state.log_group_row, len(lines), viewport.height - 2)
        draw_box(
            window,
            viewport,
            f"results ({len(state.filtered_log_groups)}/{len(state.log_groups)})",
            [lines[i] for i in rows],
            focused=results_focused,
        )
