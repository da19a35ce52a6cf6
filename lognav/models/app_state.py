"""The application state shared by the UI loop and the request worker"""

import dataclasses
import enum

from lognav.helpers.list_utils import clamp_index, wrap_index
from lognav.helpers.state import State
from lognav.models.search_index import SearchIndex
from lognav.models.time_range import TimeSelector

DEFAULT_QUERY = """fields @timestamp, @message
| sort @timestamp desc
| limit 200"""


class SelectedView(enum.Enum):
    """Top level screens"""

    OVERVIEW = "overview"
    LOG_GROUP_BROWSER = "log_group_browser"


class Widget(enum.Enum):
    """Widgets that can receive key input"""

    LOG_GROUP_FILTER = "log_group_filter"
    LOG_GROUP_RESULTS = "log_group_results"
    QUERY_TEXT = "query_text"
    RESULT_ROWS = "result_rows"
    TIME_SELECTOR = "time_selector"


class Mode(enum.Enum):
    """Modal input discipline"""

    NORMAL = "normal"
    INSERT = "insert"


class StatusLevel(enum.StrEnum):
    """Severity of a status message"""

    INFO = "INFO"
    ERROR = "ERROR"


@dataclasses.dataclass(frozen=True)
class StatusMessage:
    """Outcome of the last operation"""

    text: str = ""
    level: StatusLevel = StatusLevel.INFO

    @classmethod
    def info(cls, text: str) -> "StatusMessage":
        """Create an info message"""
        return cls(text, StatusLevel.INFO)

    @classmethod
    def error(cls, text: str) -> "StatusMessage":
        """Create an error message"""
        return cls(text, StatusLevel.ERROR)

    def __str__(self) -> str:
        return f"[{self.level}] {self.text}"


@dataclasses.dataclass(frozen=True)
class QueryLogRow:
    """A single row of query results"""

    message: str
    timestamp: str
    ptr: str


@dataclasses.dataclass
class AppState(State):  # pylint: disable=too-many-instance-attributes
    """State of the lognav application"""

    selected_view: SelectedView = SelectedView.OVERVIEW
    focused: Widget = Widget.LOG_GROUP_FILTER
    mode: Mode = Mode.NORMAL
    break_inner: bool = False
    quit: bool = False
    status_message: StatusMessage = StatusMessage()
    log_groups: list[str] = dataclasses.field(default_factory=list)
    log_filter: str = ""
    filtered_log_groups: list[int] = dataclasses.field(default_factory=list)
    log_group_row: int = 0
    selected_log_groups: list[str] = dataclasses.field(default_factory=list)
    search_index: SearchIndex = dataclasses.field(default_factory=SearchIndex)
    query_text: str = DEFAULT_QUERY
    query_results: list[QueryLogRow] = dataclasses.field(default_factory=list)
    selected_row: int = 0
    time_selector: TimeSelector = dataclasses.field(default_factory=TimeSelector)

    def filter_log_groups(self) -> None:
        """Recompute the filtered positions from the filter text"""
        matches = self.search_index.search(self.log_filter)
        self.filtered_log_groups = [
            i for i in range(len(self.log_groups)) if not matches or i in matches
        ]
        self.log_group_row = clamp_index(
            self.log_group_row, len(self.filtered_log_groups)
        )

    def reset_log_groups(self) -> None:
        """Forget the listed log groups, keeping the selected ones"""
        self.log_groups = []
        self.search_index.reset()
        self.filter_log_groups()

    def extend_log_groups(self, names: list[str]) -> None:
        """Append a page of listed log groups and index them"""
        offset = len(self.log_groups)
        for i, name in enumerate(names):
            self.search_index.insert(offset + i, name)
        self.log_groups.extend(names)
        self._changed("log_groups")
        self.filter_log_groups()

    @property
    def highlighted_log_group(self) -> str | None:
        """The log group under the browser cursor"""
        if not self.filtered_log_groups:
            return None
        return self.log_groups[self.filtered_log_groups[self.log_group_row]]

    def toggle_log_group(self, name: str) -> None:
        """Select name if it is not selected, otherwise deselect it"""
        if name in self.selected_log_groups:
            self.selected_log_groups.remove(name)
        else:
            self.selected_log_groups.append(name)
        self._changed("selected_log_groups")

    @property
    def unlisted_selected_log_groups(self) -> list[str]:
        """Selected log groups missing from the current listing"""
        listed = set(self.log_groups)
        return [name for name in self.selected_log_groups if name not in listed]

    def move_log_group_cursor(self, delta: int) -> None:
        """Move the browser cursor, wrapping around the filtered list"""
        self.log_group_row = wrap_index(
            self.log_group_row, delta, len(self.filtered_log_groups)
        )

    def set_query_results(self, rows: list[QueryLogRow]) -> None:
        """Replace the query results"""
        self.query_results = rows
        self.selected_row = clamp_index(self.selected_row, len(rows))

    def move_result_cursor(self, delta: int) -> None:
        """Move the result cursor, wrapping around the results"""
        self.selected_row = wrap_index(
            self.selected_row, delta, len(self.query_results)
        )

    @property
    def selected_result(self) -> QueryLogRow | None:
        """The result row under the cursor"""
        if not self.query_results:
            return None
        return self.query_results[self.selected_row]

    def snapshot(self) -> "AppState":
        """Copy the state for drawing outside the lock"""
        return dataclasses.replace(
            self,
            log_groups=list(self.log_groups),
            filtered_log_groups=list(self.filtered_log_groups),
            selected_log_groups=list(self.selected_log_groups),
            query_results=list(self.query_results),
            time_selector=dataclasses.replace(self.time_selector),
        )
