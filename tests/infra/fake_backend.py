"""In-memory LogsBackend for worker tests"""

from lognav.backend import LogGroupPage, LogsBackend, QueryResultsPage, ResultRow
from lognav.errors import BackendError


def make_row(message: str, timestamp: str = "2024-01-01 00:00:00.000") -> ResultRow:
    """Build a result row in the backend's field/value shape"""
    return [
        {"field": "@timestamp", "value": timestamp},
        {"field": "@message", "value": message},
        {"field": "@ptr", "value": f"ptr-{message}"},
    ]


class FakeBackend(LogsBackend):
    """Replays scripted pages and records the calls made"""

    def __init__(
        self,
        pages: list[LogGroupPage | BackendError] | None = None,
        results: list[QueryResultsPage | BackendError] | None = None,
        start_error: BackendError | None = None,
    ) -> None:
        self.pages = list(pages or [])
        self.results = list(results or [])
        self.start_error = start_error
        self.list_calls: list[str | None] = []
        self.started_queries: list[tuple[list[str], str, int, int]] = []
        self.result_calls = 0

    def list_log_groups(self, next_token: str | None = None) -> LogGroupPage:
        self.list_calls.append(next_token)
        page = self.pages.pop(0)
        if isinstance(page, BackendError):
            raise page
        return page

    def start_query(
        self,
        log_group_names: list[str],
        query_string: str,
        start_time: int,
        end_time: int,
    ) -> str:
        if self.start_error:
            raise self.start_error
        self.started_queries.append(
            (log_group_names, query_string, start_time, end_time)
        )
        return "query-1"

    def get_query_results(self, query_id: str) -> QueryResultsPage:
        self.result_calls += 1
        result = self.results.pop(0)
        if isinstance(result, BackendError):
            raise result
        return result
