"""Curses utility functions"""

import curses
import enum
from typing import NamedTuple

DEL = 127

ESC = 27

TAB = ord("\t")

ENTER_KEYS = frozenset({ord("\n"), ord("\r"), curses.KEY_ENTER})

BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, DEL, ord("\b")})

DOWN_KEYS = frozenset({ord("j"), curses.KEY_DOWN})

UP_KEYS = frozenset({ord("k"), curses.KEY_UP})

LEFT_KEYS = frozenset({ord("h"), curses.KEY_LEFT})

RIGHT_KEYS = frozenset({ord("l"), curses.KEY_RIGHT})


def is_printable(key: int) -> bool:
    """Check if a key code is a printable ASCII character"""
    return 32 <= key <= 126


class Position(NamedTuple):
    """A simple position class"""

    y: int
    x: int


class Size(NamedTuple):
    """A simple size class"""

    height: int
    width: int


class Viewport(NamedTuple):
    """A simple viewport class"""

    pos: Position
    size: Size

    @property
    def x(self):
        """Get the x position"""
        return self.pos.x

    @property
    def y(self):
        """Get the y position"""
        return self.pos.y

    @property
    def width(self):
        """Get the width"""
        return self.size.width

    @property
    def height(self):
        """Get the height"""
        return self.size.height


class Color(enum.IntEnum):
    """Enumeration of colors"""

    DEFAULT = curses.COLOR_WHITE
    INFO = curses.COLOR_GREEN
    FOCUSED = curses.COLOR_YELLOW
    ERROR = curses.COLOR_RED
    HEADER = curses.COLOR_CYAN


class TextAttribute(enum.IntEnum):
    """Enumeration of text attributes"""

    BOLD = curses.A_BOLD
