"""
Design (storage.py)
- Purpose: Append formatted record blocks to the output text file.
- Inputs: Filename/path and the text block to append.
- Outputs: True on success, False on failure; one status line via `write`.
- Side effects: Creates the file if absent and appends to it. Never truncates, never rotates.
- Errors: OSError is caught and reported, never propagated.
"""

import logging
from os import PathLike
from pathlib import Path
from typing import Callable

from .config import FILE_ENCODING, MSG_SAVED, MSG_WRITE_FAILED, OUTPUT_FILENAME

logger = logging.getLogger(__name__)


def get_output_path(base: str | PathLike | None = None) -> Path:
    """
    Resolve path for my_user.txt. Relative to the current working directory
    unless a base directory is given.
    """
    if base is None:
        return Path(OUTPUT_FILENAME)
    return Path(base) / OUTPUT_FILENAME


def save_to_file(filename: str | PathLike, text: str, write: Callable[[str], None] | None = None) -> bool:
    """
    Append text to filename, creating it if needed. Reports the outcome through `write` (print() when omitted).
    """
    write = write or print
    try:
        # newline="" keeps "\n" as written on every platform
        with open(filename, "a", encoding=FILE_ENCODING, newline="") as f:
            f.write(text)
    except OSError as e:
        logger.debug("Append to %s failed", filename, exc_info=True)
        write(MSG_WRITE_FAILED.format(reason=e.strerror or e))
        return False
    logger.debug("Appended %d chars to %s", len(text), filename)
    write(MSG_SAVED.format(filename=filename))
    return True
