"""Text input through the user's external editor"""

import logging
import os
import pathlib
import shlex
import subprocess
import tempfile

from lognav.errors import EditorError

DEFAULT_EDITOR = "vi"

logger = logging.getLogger(__name__)


def get_editor_command() -> list[str]:
    """Get the editor command from $EDITOR, falling back to vi"""
    return shlex.split(os.environ.get("EDITOR", "")) or [DEFAULT_EDITOR]


def input_from_editor(placeholder: str) -> str:
    """Open the user's editor on a temporary file seeded with placeholder.

    Blocks until the editor exits and returns the saved text. A non-zero exit
    status or a failure to launch the editor raises EditorError.
    """
    command = get_editor_command()
    with tempfile.TemporaryDirectory(prefix="lognav-") as tmp_dir:
        file_path = pathlib.Path(tmp_dir) / "query.txt"
        try:
            file_path.write_text(placeholder, encoding="utf-8")
            logger.info("Opening editor %s on %s", command, file_path)
            completed = subprocess.run([*command, str(file_path)], check=False)
        except OSError as e:
            raise EditorError(f"Could not run editor {command[0]!r}: {e}") from e

        if completed.returncode != 0:
            raise EditorError(
                f"Editor exited with unsuccessful exit status {completed.returncode}"
            )

        try:
            return file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise EditorError(f"Could not read edited text: {e}") from e
