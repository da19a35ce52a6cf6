"""Background worker performing remote requests"""

import enum
import logging
import queue
import threading
import time
from typing import Callable

from lognav.backend import LogsBackend, QueryStatus, decode_row
from lognav.errors import BackendError
from lognav.models.app_state import StatusMessage
from lognav.models.shared import SharedState

POLL_INTERVAL = 0.5

logger = logging.getLogger(__name__)


class Request(enum.Enum):
    """Requests the UI can send to the worker"""

    LIST_LOG_GROUPS = "list_log_groups"
    RUN_QUERY = "run_query"


RequestQueue = queue.Queue[Request]


class RequestWorker(threading.Thread):
    """Serves requests from the queue one at a time.

    Remote calls and sleeps happen outside the state lock, which is taken only
    to merge results.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        shared: SharedState,
        requests: RequestQueue,
        backend: LogsBackend,
        sleep: Callable[[float], None] = time.sleep,
        now: Callable[[], float] = time.time,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        super().__init__(name="request-worker", daemon=True)
        self._shared = shared
        self._requests = requests
        self._backend = backend
        self._sleep = sleep
        self._now = now
        self._poll_interval = poll_interval

    def run(self) -> None:
        """Drain the request queue forever"""
        while True:
            request = self._requests.get()
            try:
                self.process(request)
            finally:
                self._requests.task_done()

    def process(self, request: Request) -> None:
        """Serve a single request"""
        logger.info("Processing request %s", request.name)
        try:
            if request == Request.LIST_LOG_GROUPS:
                self._list_log_groups()
            else:
                self._run_query()
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Request %s failed", request.name)
            self._set_status(StatusMessage.error(f"Request {request.value} failed"))
        logger.info("Finished request %s", request.name)

    def _set_status(self, message: StatusMessage) -> None:
        with self._shared.access() as state:
            state.status_message = message

    def _list_log_groups(self) -> None:
        with self._shared.access() as state:
            state.reset_log_groups()
            state.status_message = StatusMessage.info("Listing log groups...")

        next_token: str | None = None
        while True:
            try:
                page = self._backend.list_log_groups(next_token)
            except BackendError as e:
                logger.error("Listing log groups failed: %s", e)
                self._set_status(StatusMessage.error(f"Listing log groups failed: {e}"))
                return

            with self._shared.access() as state:
                state.extend_log_groups(page.names)
                count = len(state.log_groups)

            next_token = page.next_token
            if not next_token:
                break

        self._set_status(StatusMessage.info(f"Listed {count} log groups"))

    def _run_query(self) -> None:
        with self._shared.access() as state:
            log_group_names = list(state.selected_log_groups)
            query_text = state.query_text
            start_time, end_time = state.time_selector.to_timestamps(self._now)
            if not log_group_names:
                state.status_message = StatusMessage.error("No log groups selected")
                return
            state.status_message = StatusMessage.info("Query started")

        try:
            query_id = self._backend.start_query(
                log_group_names, query_text, start_time, end_time
            )
        except BackendError as e:
            logger.error("Starting query failed: %s", e)
            self._set_status(StatusMessage.error(f"Starting query failed: {e}"))
            return

        logger.info("Started query %s", query_id)
        while True:
            try:
                page = self._backend.get_query_results(query_id)
            except BackendError as e:
                logger.error("Polling query %s failed: %s", query_id, e)
                self._set_status(StatusMessage.error(f"Polling query failed: {e}"))
                return

            rows = [decode_row(row) for row in page.rows]
            if not page.status.is_running:
                break
            if rows:
                with self._shared.access() as state:
                    state.set_query_results(rows)
            self._sleep(self._poll_interval)

        with self._shared.access() as state:
            state.set_query_results(rows)
            if page.status == QueryStatus.COMPLETE:
                state.status_message = StatusMessage.info(
                    f"Query completed with {len(rows)} rows"
                )
            else:
                state.status_message = StatusMessage.error(
                    f"Query finished with status {page.status}"
                )
