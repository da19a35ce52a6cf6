"""Tests for the shared drawing primitives"""

import pytest

from lognav.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport
from lognav.views.widgets import (
    Line,
    centered_viewport,
    draw_box,
    fit,
    visible_range,
)
from tests.infra.mock_output_controller import MockWindow


@pytest.mark.parametrize(
    "selected,count,size,expected",
    [
        (0, 3, 10, range(0, 3)),
        (4, 20, 10, range(0, 10)),
        (5, 20, 10, range(0, 10)),
        (6, 20, 10, range(1, 11)),
        (19, 20, 10, range(10, 20)),
        (0, 0, 10, range(0, 0)),
        (3, 10, 0, range(0)),
    ],
)
def test_visible_range(selected: int, count: int, size: int, expected: range) -> None:
    """Test that the window keeps rows after the cursor visible"""
    # Assert
    assert visible_range(selected, count, size) == expected


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_visible_range_small_box_shows_cursor(size: int) -> None:
    """Test that the cursor row stays visible in a box smaller than the margin"""
    # Act
    rows = visible_range(40, 50, size)

    # Assert
    assert 40 in rows
    assert len(rows) == size


def test_fit_flattens_and_cuts() -> None:
    """Test that text is made a single line of at most width characters"""
    # Assert
    assert fit("a\nb\tc", 10) == "a b c"
    assert fit("abcdef", 3) == "abc"
    assert fit("abc", -1) == ""


def test_draw_box() -> None:
    """Test that a box has a titled border and padded lines"""
    # Arrange
    window = MockWindow(Size(5, 12))

    # Act
    draw_box(
        window,
        Viewport(Position(0, 0), Size(4, 10)),
        "title",
        [Line("first", Color.ERROR), Line("a much longer line")],
        focused=True,
    )

    # Assert
    assert window.get_line(0) == "┌title───┐"
    assert window.get_line(1) == "│first   │"
    assert window.get_line(2) == "│a much l│"
    assert window.get_line(3) == "└────────┘"
    assert window.get_cell(Position(0, 0)).color == Color.FOCUSED
    assert window.get_cell(Position(0, 0)).attributes == [TextAttribute.BOLD]
    assert window.get_cell(Position(1, 1)).color == Color.ERROR


def test_centered_viewport() -> None:
    """Test that popups are centered and shrink to fit the screen"""
    # Assert
    assert centered_viewport(60, 5, Size(24, 80)) == Viewport(
        Position(9, 10), Size(5, 60)
    )
    assert centered_viewport(60, 5, Size(24, 40)).size == Size(5, 38)


def test_unfocused_box_is_plain() -> None:
    """Test that an unfocused box border has no attributes"""
    # Arrange
    window = MockWindow(Size(3, 10))

    # Act
    draw_box(window, Viewport(Position(0, 0), Size(3, 10)), "title", [])

    # Assert
    assert window.get_line(1) == "│        │"
    assert window.get_cell(Position(0, 0)).color == Color.DEFAULT
    assert window.get_cell(Position(0, 0)).attributes is None


def test_box_outside_window_is_skipped() -> None:
    """Test that a box reaching past the window edge is not drawn"""
    # Arrange
    window = MockWindow(Size(4, 10))

    # Act
    draw_box(window, Viewport(Position(2, 0), Size(3, 10)), "title", [Line("x")])

    # Assert
    assert window.get_screen().strip() == ""
