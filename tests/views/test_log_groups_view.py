"""Tests for drawing the log group browser"""

import pytest

from lognav.helpers.curses_utils import Color, Position, Size
from lognav.models.app_state import AppState, Mode, SelectedView, Widget
from lognav.views.log_groups import LogGroupsView
from tests.infra.mock_output_controller import MockWindow


@pytest.fixture(name="window")
def window_fixture() -> MockWindow:
    """Create an 80x24 window"""
    return MockWindow(Size(24, 80))


@pytest.fixture(name="state")
def state_fixture() -> AppState:
    """Create a browser state with three listed groups"""
    state = AppState(selected_view=SelectedView.LOG_GROUP_BROWSER)
    state.extend_log_groups(["/aws/lambda/a", "/aws/lambda/b", "/ecs/c"])
    return state


def test_draws_listing(window: MockWindow, state: AppState) -> None:
    """Test that every group is listed with its selection marker"""
    # Arrange
    state.toggle_log_group("/aws/lambda/b")

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    screen = window.get_screen()
    assert "┌filter log groups" in screen
    assert "┌results (3/3)" in screen
    assert "[ ] 0: /aws/lambda/a" in screen
    assert "[*] 1: /aws/lambda/b" in screen
    assert "[ ] 2: /ecs/c" in screen
    assert "Enter (toggle selection)" in window.get_line(22)


def test_filtered_listing(window: MockWindow, state: AppState) -> None:
    """Test that only matching groups are shown with filtered positions"""
    # Arrange
    state.log_filter = "ecs"
    state.filter_log_groups()

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    screen = window.get_screen()
    assert "┌results (1/3)" in screen
    assert "[ ] 0: /ecs/c" in screen
    assert "/aws/lambda/a" not in screen


def test_unlisted_selection_is_shown(window: MockWindow, state: AppState) -> None:
    """Test that selections missing from the listing are still drawn"""
    # Arrange
    state.toggle_log_group("/gone")

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    y = window.find_line("[*] /gone (not listed)")
    assert y is not None
    assert window.get_cell(Position(y, 2)).color == Color.HEADER


def test_cursor_row_highlight(window: MockWindow, state: AppState) -> None:
    """Test that the cursor row stands out when the results are focused"""
    # Arrange
    state.focused = Widget.LOG_GROUP_RESULTS
    state.log_group_row = 2

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    y = window.find_line("2: /ecs/c")
    assert window.get_cell(Position(y, 2)).color == Color.ERROR


def test_filter_cursor_in_insert_mode(window: MockWindow, state: AppState) -> None:
    """Test that the cursor follows the filter text while inserting"""
    # Arrange
    state.mode = Mode.INSERT
    state.log_filter = "ecs"

    # Act
    cursor = LogGroupsView().draw(window, state)

    # Assert
    assert cursor == Position(2, 2 + len("ecs"))


def test_no_cursor_in_normal_mode(window: MockWindow, state: AppState) -> None:
    """Test that the cursor is hidden outside insert mode"""
    # Act
    cursor = LogGroupsView().draw(window, state)

    # Assert
    assert cursor is None


def test_listing_scrolls_with_cursor(window: MockWindow) -> None:
    """Test that a long listing keeps the cursor row visible"""
    # Arrange
    state = AppState(
        selected_view=SelectedView.LOG_GROUP_BROWSER,
        focused=Widget.LOG_GROUP_RESULTS,
    )
    state.extend_log_groups([f"/group/{i:02d}" for i in range(40)])
    state.log_group_row = 30

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    assert window.find_line("] 21: ") is None
    assert window.find_line("] 22: ") is not None
    assert window.find_line("] 30: ") is not None
    assert window.find_line("] 34: ") is not None
    assert window.find_line("] 35: ") is None


@pytest.mark.parametrize("height", [4, 6, 7])
def test_short_terminal(state: AppState, height: int) -> None:
    """Test that boxes that don't fit a short terminal are left out"""
    # Arrange
    window = MockWindow(Size(height, 80))

    # Act
    LogGroupsView().draw(window, state)

    # Assert
    assert "┌filter log groups" in window.get_screen()
    assert window.find_line("q (quit)") is None
