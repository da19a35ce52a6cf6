"""Drawing primitives shared by the views"""

from typing import NamedTuple

from lognav.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport
from lognav.models.app_state import StatusLevel, StatusMessage
from lognav.output_controller import Window

SCROLL_MARGIN = 5


class Line(NamedTuple):
    """A line of text inside a box"""

    text: str
    color: Color | None = None


def fit(text: str, width: int) -> str:
    """Flatten text to a single line and cut it to width"""
    return text.replace("\n", " ").replace("\t", " ")[: max(width, 0)]


def _fits(window: Window, viewport: Viewport) -> bool:
    height, width = window.getmaxyx()
    return (
        viewport.y >= 0
        and viewport.x >= 0
        and viewport.y + viewport.height <= height
        and viewport.x + viewport.width <= width
    )


def draw_box(  # pylint: disable=too-many-arguments
    window: Window,
    viewport: Viewport,
    title: str,
    lines: list[Line],
    *,
    focused: bool = False,
) -> None:
    """Draw a bordered box with a title and one text line per inner row.

    Nothing is drawn when the box doesn't fit inside the window.
    """
    if viewport.height < 2 or viewport.width < 2 or not _fits(window, viewport):
        return
    border_color = Color.FOCUSED if focused else Color.DEFAULT
    border_attributes = [TextAttribute.BOLD] if focused else None
    inner_width = viewport.width - 2
    top = "┌" + fit(title, inner_width).ljust(inner_width, "─") + "┐"
    bottom = "└" + "─" * inner_width + "┘"

    window.addstr(viewport.pos, top, color=border_color, attributes=border_attributes)
    for row in range(viewport.height - 2):
        y = viewport.y + 1 + row
        window.addstr(Position(y, viewport.x), "│", color=border_color)
        if row < len(lines):
            line = lines[row]
            window.addstr(
                Position(y, viewport.x + 1),
                fit(line.text, inner_width).ljust(inner_width),
                color=line.color,
            )
        else:
            window.addstr(Position(y, viewport.x + 1), " " * inner_width)
        window.addstr(
            Position(y, viewport.x + viewport.width - 1), "│", color=border_color
        )
    window.addstr(
        Position(viewport.y + viewport.height - 1, viewport.x),
        bottom,
        color=border_color,
        attributes=border_attributes,
    )


def draw_input_box(
    window: Window, viewport: Viewport, title: str, text: str, *, focused: bool
) -> Position:
    """Draw a single line input box and return the position after its text"""
    inner_width = max(viewport.width - 2, 0)
    visible = text[-inner_width:] if inner_width else ""
    draw_box(window, viewport, title, [Line(visible)], focused=focused)
    return Position(viewport.y + 1, viewport.x + 1 + len(fit(visible, inner_width)))


def draw_status_bar(window: Window, viewport: Viewport, status: StatusMessage) -> None:
    """Draw the status message box"""
    color = Color.ERROR if status.level == StatusLevel.ERROR else Color.INFO
    draw_box(window, viewport, "status", [Line(str(status), color)])


def draw_controls(window: Window, viewport: Viewport, controls: list[str]) -> None:
    """Draw the key bindings line"""
    if not _fits(window, viewport):
        return
    window.addstr(
        viewport.pos, fit(" | ".join(controls), viewport.width), color=Color.HEADER
    )


def visible_range(selected: int, count: int, size: int) -> range:
    """Get the rows of a list to show so the selected row stays visible"""
    if size <= 0:
        return range(0)
    scroll_select = selected + min(SCROLL_MARGIN, size)
    if scroll_select <= size:
        return range(0, min(size, count))
    scroll_bounds = max(count - size, 0)
    start = min(scroll_select - size, scroll_bounds)
    return range(start, min(scroll_select, count))


def centered_viewport(width: int, height: int, screen: Size) -> Viewport:
    """Get a viewport of the given size centered on the screen"""
    width = min(width, screen.width - 2)
    height = min(height, screen.height - 2)
    return Viewport(
        Position((screen.height - height) // 2, (screen.width - width) // 2),
        Size(height, width),
    )
