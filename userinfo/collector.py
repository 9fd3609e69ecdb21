"""
Design (collector.py)
- Purpose: Ask the console user for first name, surname and age, and turn the answers into a record block.
- Inputs: `read` (prompt -> answer, input() when omitted) and `write` (print() when omitted).
- Outputs: Formatted record text, or None when the answers are rejected.
- Side effects: Prompts on stdout; prints at most one rejection message.
- No retries: a single bad answer aborts the run.
"""

import logging
from typing import Callable

from .config import PROMPT_AGE, PROMPT_FIRST_NAME, PROMPT_SURNAME
from .exceptions import ValidationError
from .models import UserRecord

logger = logging.getLogger(__name__)

PROMPTS = (PROMPT_FIRST_NAME, PROMPT_SURNAME, PROMPT_AGE)


def _ask(prompt: str, read: Callable[[str], str]) -> str:
    # stdin closed before an answer counts as a blank answer
    try:
        return read(prompt)
    except EOFError:
        logger.debug("Input ended at prompt %r", prompt)
        return ""


def get_user_info(read: Callable[[str], str] | None = None, write: Callable[[str], None] | None = None) -> str | None:
    """
    Collect the three answers in fixed order and return the formatted record.

    All three prompts are always shown before validation runs.
    Returns None (after writing one message) if a field is blank or the age
    is not an integer.
    """
    # Looked up per call so a patched builtins.input/print is honoured
    read = read or input
    write = write or print
    first_name, surname, age_text = (_ask(prompt, read) for prompt in PROMPTS)
    try:
        record = UserRecord.from_input(first_name, surname, age_text)
    except ValidationError as e:
        logger.debug("Rejected input (%s): %s", e.field, e.message)
        write(e.message)
        return None
    logger.debug("Built record for %s %s", record.first_name, record.surname)
    return record.to_text()
