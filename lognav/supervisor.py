"""Alternates between the terminal UI and the external query editor"""

import logging
from typing import Callable

from lognav.errors import EditorError
from lognav.helpers.editor import input_from_editor
from lognav.models.app_state import StatusMessage
from lognav.models.shared import SharedState

logger = logging.getLogger(__name__)


def supervise(
    shared: SharedState,
    run_ui: Callable[[], None],
    edit: Callable[[str], str] = input_from_editor,
) -> None:
    """Run the UI until it quits, editing the query whenever it asks to.

    run_ui must acquire the terminal, run the input/render loop and release the
    terminal before returning.
    """
    while True:
        run_ui()
        with shared.access() as state:
            if state.quit:
                return
            state.break_inner = False
            query_text = state.query_text

        try:
            new_text = edit(query_text)
        except EditorError as e:
            logger.error("Editing the query failed: %s", e)
            with shared.access() as state:
                state.status_message = StatusMessage.error(str(e))
            continue

        with shared.access() as state:
            state.query_text = new_text
            state.status_message = StatusMessage.info("Query updated")
