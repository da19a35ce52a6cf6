#!/usr/bin/env python3
"""
lognav - A terminal dashboard for browsing and querying CloudWatch Logs
"""
import argparse
import curses
import functools
import logging
import queue
import tempfile
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError

from lognav.backend import CloudWatchLogsBackend
from lognav.errors import LogNavError
from lognav.models.app_state import DEFAULT_QUERY, AppState
from lognav.models.shared import SharedState
from lognav.models.time_range import TimeSelector
from lognav.output_controller import CursesOutputController
from lognav.supervisor import supervise
from lognav.viewmodels.app import AppModel
from lognav.views.app import App
from lognav.worker import RequestQueue, RequestWorker

LOG_FILE = Path(tempfile.gettempdir()) / "lognav.log"

logger = logging.getLogger(__name__)


def _init_app(stdscr: curses.window, shared: SharedState, model: AppModel) -> None:
    logger.info("Starting dashboard")
    app = App(CursesOutputController(stdscr), shared, model)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt")
        with shared.access() as state:
            state.quit = True
    except BaseException as e:
        logger.exception("An error occurred")
        raise e
    finally:
        logger.info("Leaving dashboard")


def _parse_args() -> tuple[argparse.Namespace, TimeSelector]:
    parser = argparse.ArgumentParser(
        description="lognav - Browse and query CloudWatch Logs from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:
      %(prog)s
      %(prog)s --profile prod --region eu-west-1
      %(prog)s --start 2024-01-01 --end 1d

    Time expressions:
      now, 30s, 15m, 1h, 7d, RFC 3339 timestamps,
      "YYYY-MM-DD HH:MM:SS" and "YYYY-MM-DD" (UTC).
      At most one of --start and --end may be relative.

    The query is edited with $EDITOR (default vi).
    """,
    )
    parser.add_argument("--region", help="AWS region of the log groups")
    parser.add_argument("--profile", help="AWS profile to use")
    parser.add_argument(
        "--query", default=DEFAULT_QUERY, help="Initial Logs Insights query"
    )
    parser.add_argument("--start", default="1h", help="Start of the time range")
    parser.add_argument("--end", default="now", help="End of the time range")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=LOG_FILE,
        help=f"Where to write diagnostic logs (default: {LOG_FILE})",
    )

    args = parser.parse_args()
    try:
        time_selector = TimeSelector.from_strings(args.start, args.end)
    except LogNavError as e:
        parser.error(f"Invalid time range: {e}")

    try:
        session = boto3.Session(profile_name=args.profile, region_name=args.region)
        args.client = session.client("logs")
    except BotoCoreError as e:
        parser.error(f"Could not create CloudWatch Logs client: {e}")
    return args, time_selector


def main() -> None:
    """Main entry point"""
    args, time_selector = _parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s[%(process)d]: %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.FileHandler(args.log_file, mode="a", encoding="utf-8"),
        ],
    )

    shared = SharedState(AppState(query_text=args.query, time_selector=time_selector))
    requests: RequestQueue = queue.Queue()
    RequestWorker(shared, requests, CloudWatchLogsBackend(args.client)).start()
    model = AppModel(requests)

    try:
        supervise(shared, functools.partial(curses.wrapper, _init_app, shared, model))
    except BaseException:
        logger.exception("lognav exited with an error")
        raise
    logger.info("Exiting")


if __name__ == "__main__":
    main()
