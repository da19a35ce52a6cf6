"""Time expressions and the time range they resolve to"""

import dataclasses
import enum
import re
import time
from datetime import datetime, timezone
from typing import Callable

from lognav.errors import ParseError, ValidationError

_LEADING_DIGITS = re.compile(r"[0-9]*")

_RFC3339_FORMATS = [
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
]


class RelativeUnit(enum.StrEnum):
    """Units of a relative time expression"""

    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"

    @property
    def seconds(self) -> int:
        """Number of seconds in one unit"""
        return {
            RelativeUnit.SECONDS: 1,
            RelativeUnit.MINUTES: 60,
            RelativeUnit.HOURS: 3600,
            RelativeUnit.DAYS: 86400,
        }[self]


@dataclasses.dataclass(frozen=True)
class Relative:
    """A duration anchored to the other side of the range"""

    unit: RelativeUnit
    magnitude: int

    @property
    def offset(self) -> int:
        """The duration in seconds"""
        return self.magnitude * self.unit.seconds

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit}"


@dataclasses.dataclass(frozen=True)
class Specific:
    """An absolute point in time"""

    timestamp: datetime

    def __str__(self) -> str:
        return self.timestamp.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclasses.dataclass(frozen=True)
class Now:
    """The wall-clock time at resolution"""

    def __str__(self) -> str:
        return "now"


TimeExpr = Relative | Specific | Now


def parse(text: str) -> TimeExpr:
    """Parse a time expression.

    Accepts "now", a relative duration such as "30m" (units s, m, h and d), an
    RFC 3339 timestamp, "YYYY-MM-DD HH:MM:SS" or "YYYY-MM-DD" (both UTC).
    """
    text = text.strip().lower()
    if not text:
        raise ParseError("Empty time expression")
    if text == "now":
        return Now()

    digits = _LEADING_DIGITS.match(text).group()  # type: ignore[union-attr]
    rest = text[len(digits) :]
    if not rest:
        raise ParseError(f"Missing unit in relative time {text!r}")

    try:
        unit = RelativeUnit(rest[0])
    except ValueError:
        return Specific(_parse_specific(text))

    unit_name = unit.name.lower()
    if len(rest) > 1:
        raise ParseError(f"Invalid relative suffix for {unit_name} in {text!r}")
    if not digits:
        raise ParseError(f"Invalid number of {unit_name} in {text!r}")
    return Relative(unit, int(digits))


def _parse_specific(text: str) -> datetime:
    for fmt in _RFC3339_FORMATS:
        try:
            return datetime.strptime(text.upper(), fmt)
        except ValueError:
            pass

    for fmt in ["%Y-%m-%d %H:%M:%S", "%Y-%m-%d"]:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            pass

    raise ParseError(f"Could not parse relative or specific datetime {text!r}")


def _resolve_absolute(expr: TimeExpr, now: Callable[[], float]) -> int:
    if isinstance(expr, Specific):
        return int(expr.timestamp.timestamp())
    if isinstance(expr, Now):
        return int(now())
    raise ValidationError(f"Relative time {expr} needs an absolute anchor")


def resolve(
    start: TimeExpr, end: TimeExpr, now: Callable[[], float] = time.time
) -> tuple[int, int]:
    """Resolve a pair of time expressions into epoch seconds.

    A relative side is computed from the resolved other side: a relative start
    is subtracted from the end and a relative end is added to the start. The
    result is not checked for start <= end.
    """
    if isinstance(start, Relative) and isinstance(end, Relative):
        raise ValidationError("Both start and end time can't be relative")
    if isinstance(start, Relative):
        end_ts = _resolve_absolute(end, now)
        return end_ts - start.offset, end_ts
    if isinstance(end, Relative):
        start_ts = _resolve_absolute(start, now)
        return start_ts, start_ts + end.offset
    return _resolve_absolute(start, now), _resolve_absolute(end, now)


class TimeSelectorInput(enum.Enum):
    """The edit buffer receiving input in the time selector popup"""

    START = "start"
    END = "end"


@dataclasses.dataclass
class TimeSelector:  # pylint: disable=too-many-instance-attributes
    """The selected query time range and its popup editing state"""

    start: TimeExpr = Relative(RelativeUnit.HOURS, 1)
    end: TimeExpr = Now()
    popup_open: bool = False
    start_text: str = "1h"
    end_text: str = "now"
    active_input: TimeSelectorInput = TimeSelectorInput.START

    def __post_init__(self) -> None:
        if isinstance(self.start, Relative) and isinstance(self.end, Relative):
            raise ValidationError("Both start and end time can't be relative")

    @classmethod
    def from_strings(cls, start_text: str, end_text: str) -> "TimeSelector":
        """Build a selector from user input, raising ParseError or ValidationError"""
        return cls(
            start=parse(start_text),
            end=parse(end_text),
            start_text=start_text,
            end_text=end_text,
        )

    def open_popup(self) -> None:
        """Open the popup with the current range in the edit buffers"""
        self.popup_open = True
        self.start_text = str(self.start)
        self.end_text = str(self.end)
        self.active_input = TimeSelectorInput.START

    def toggle_input(self) -> None:
        """Switch the edit buffer receiving input"""
        self.active_input = (
            TimeSelectorInput.END
            if self.active_input == TimeSelectorInput.START
            else TimeSelectorInput.START
        )

    @property
    def active_text(self) -> str:
        """The text of the active edit buffer"""
        if self.active_input == TimeSelectorInput.START:
            return self.start_text
        return self.end_text

    @active_text.setter
    def active_text(self, text: str) -> None:
        if self.active_input == TimeSelectorInput.START:
            self.start_text = text
        else:
            self.end_text = text

    def to_timestamps(self, now: Callable[[], float] = time.time) -> tuple[int, int]:
        """Resolve the selected range into epoch seconds"""
        return resolve(self.start, self.end, now)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"
