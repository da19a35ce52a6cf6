"""Remote log service client"""

import dataclasses
import enum
import logging
from abc import ABC, abstractmethod
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from lognav.errors import BackendError, DecodeError
from lognav.models.app_state import QueryLogRow

logger = logging.getLogger(__name__)

ResultRow = list[dict[str, str]]


class QueryStatus(enum.StrEnum):
    """Status of a submitted query"""

    SCHEDULED = "Scheduled"
    RUNNING = "Running"
    COMPLETE = "Complete"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"

    @property
    def is_running(self) -> bool:
        """Whether the query may still produce more results"""
        return self in (QueryStatus.SCHEDULED, QueryStatus.RUNNING)


@dataclasses.dataclass(frozen=True)
class LogGroupPage:
    """One page of a log group listing"""

    names: list[str]
    next_token: str | None = None


@dataclasses.dataclass(frozen=True)
class QueryResultsPage:
    """The current snapshot of a query's results"""

    status: QueryStatus
    rows: list[ResultRow] = dataclasses.field(default_factory=list)


def decode_row(row: ResultRow) -> QueryLogRow:
    """Decode a row of field/value pairs, raising DecodeError if a field is missing"""
    values = {cell["field"]: cell.get("value", "") for cell in row if "field" in cell}
    try:
        return QueryLogRow(
            message=values["@message"],
            timestamp=values["@timestamp"],
            ptr=values["@ptr"],
        )
    except KeyError as e:
        raise DecodeError(f"Result row is missing field {e.args[0]}") from e


class LogsBackend(ABC):
    """Abstract interface of the remote log service"""

    @abstractmethod
    def list_log_groups(self, next_token: str | None = None) -> LogGroupPage:
        """List one page of log group names"""

    @abstractmethod
    def start_query(
        self,
        log_group_names: list[str],
        query_string: str,
        start_time: int,
        end_time: int,
    ) -> str:
        """Submit a query and return its id"""

    @abstractmethod
    def get_query_results(self, query_id: str) -> QueryResultsPage:
        """Get the status and current rows of a query"""


class CloudWatchLogsBackend(LogsBackend):
    """LogsBackend over the CloudWatch Logs API"""

    def __init__(self, client: Any) -> None:
        self._client = client

    def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        try:
            return getattr(self._client, operation)(**kwargs)
        except (BotoCoreError, ClientError) as e:
            raise BackendError(f"{operation} failed: {e}") from e

    def list_log_groups(self, next_token: str | None = None) -> LogGroupPage:
        kwargs = {"nextToken": next_token} if next_token else {}
        response = self._call("describe_log_groups", **kwargs)
        names = [
            group["logGroupName"]
            for group in response.get("logGroups", [])
            if "logGroupName" in group
        ]
        return LogGroupPage(names, response.get("nextToken"))

    def start_query(
        self,
        log_group_names: list[str],
        query_string: str,
        start_time: int,
        end_time: int,
    ) -> str:
        response = self._call(
            "start_query",
            logGroupNames=log_group_names,
            queryString=query_string,
            startTime=start_time,
            endTime=end_time,
        )
        return response["queryId"]

    def get_query_results(self, query_id: str) -> QueryResultsPage:
        response = self._call("get_query_results", queryId=query_id)
        try:
            status = QueryStatus(response.get("status", QueryStatus.UNKNOWN))
        except ValueError:
            logger.warning("Unexpected query status %r", response.get("status"))
            status = QueryStatus.UNKNOWN
        return QueryResultsPage(status, response.get("results", []))
