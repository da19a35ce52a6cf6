"""Draws the overview screen"""

from lognav.helpers.curses_utils import Color, Position, Size, Viewport
from lognav.models.app_state import AppState, Mode, Widget
from lognav.models.time_range import TimeSelectorInput
from lognav.output_controller import Window
from lognav.views.widgets import (
    Line,
    centered_viewport,
    draw_box,
    draw_controls,
    draw_input_box,
    draw_status_bar,
    visible_range,
)

CONTROLS = [
    "q (quit)",
    "hjkl/Arrows (control focus)",
    "Enter (select)",
    "Escape (go back)",
    "r (run the query)",
    "y (yank row)",
]

MARGIN = 1
TOP_HEIGHT = 3
QUERY_HEIGHT = 9
STATUS_HEIGHT = 3
TIME_WIDTH = 50
POPUP_SIZE = Size(5, 60)


class OverviewView:
    """Draws the selected log groups, time range, query, results and status"""

    def draw(self, window: Window, state: AppState) -> Position | None:
        """Draw the screen and return where the cursor should be shown"""
        height, width = window.getmaxyx()
        inner_width = width - 2 * MARGIN
        time_width = min(TIME_WIDTH, inner_width // 2)
        results_height = (
            height - 2 * MARGIN - TOP_HEIGHT - QUERY_HEIGHT - STATUS_HEIGHT - 1
        )
        y = MARGIN

        draw_box(
            window,
            Viewport(
                Position(y, MARGIN), Size(TOP_HEIGHT, inner_width - time_width)
            ),
            "log groups",
            [Line(", ".join(state.selected_log_groups))],
            focused=state.focused == Widget.LOG_GROUP_FILTER,
        )
        draw_box(
            window,
            Viewport(
                Position(y, MARGIN + inner_width - time_width),
                Size(TOP_HEIGHT, time_width),
            ),
            "selected time",
            [Line(str(state.time_selector))],
            focused=state.focused == Widget.TIME_SELECTOR,
        )
        y += TOP_HEIGHT

        draw_box(
            window,
            Viewport(Position(y, MARGIN), Size(QUERY_HEIGHT, inner_width)),
            "query",
            [Line(line) for line in state.query_text.splitlines()],
            focused=state.focused == Widget.QUERY_TEXT,
        )
        y += QUERY_HEIGHT

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

        if state.time_selector.popup_open:
            return self._draw_popup(window, state)
        return None

    @staticmethod
    def _draw_results(window: Window, viewport: Viewport, state: AppState) -> None:
        highlight = state.focused == Widget.RESULT_ROWS and state.mode == Mode.INSERT
        rows = visible_range(
            state.selected_row, len(state.query_results), viewport.height - 2
        )
        lines = [
            Line(
                f"{i}: {state.query_results[i].message}",
                Color.ERROR if highlight and i == state.selected_row else None,
            )
            for i in rows
        ]
        draw_box(
            window,
            viewport,
            "results",
            lines,
            focused=state.focused == Widget.RESULT_ROWS,
        )

    @staticmethod
    def _draw_popup(window: Window, state: AppState) -> Position:
        selector = state.time_selector
        popup = centered_viewport(
            POPUP_SIZE.width, POPUP_SIZE.height, window.getmaxyx()
        )
        draw_box(window, popup, "Select time", [], focused=True)

        half = (popup.width - 2) // 2
        start_box = Viewport(Position(popup.y + 1, popup.x + 1), Size(3, half))
        end_box = Viewport(
            Position(popup.y + 1, popup.x + 1 + half),
            Size(3, popup.width - 2 - half),
        )
        start_cursor = draw_input_box(
            window,
            start_box,
            "start",
            selector.start_text,
            focused=selector.active_input == TimeSelectorInput.START,
        )
        end_cursor = draw_input_box(
            window,
            end_box,
            "end",
            selector.end_text,
            focused=selector.active_input == TimeSelectorInput.END,
        )
        if selector.active_input == TimeSelectorInput.START:
            return start_cursor
        return end_cursor
