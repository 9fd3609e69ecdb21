"""
Design (utils.py)
- Purpose: Reusable helpers: field cleaning, age parsing, logging setup.
- Inputs: Raw console strings; logging level.
- Outputs: Cleaned strings, parsed ints.
- Side effects: configure_logging installs a stderr handler on the root logger.
"""

import logging
import re

from .config import AGE_MAX, AGE_MIN, LOG_FORMAT, LOG_LEVEL, MSG_INVALID_AGE
from .exceptions import ValidationError

# Only control characters and ASCII space are trimmed; U+00A0 and other Unicode spaces are kept
_TRIM_CHARS = "".join(map(chr, range(0x21)))

# Optional sign plus decimal digits from any script; rejects "1_000" that int() would accept
_AGE_PATTERN = re.compile(r"[+-]?\d+")


def clean_field(raw: str | None) -> str:
    """
    Purpose: Trim a console answer at both ends; internal whitespace is kept.
    Inputs: raw (str, or None when input ended early)
    Outputs: Trimmed string ('' if None or blank).
    """
    if raw is None:
        return ""
    return raw.strip(_TRIM_CHARS)


def parse_age(text: str) -> int:
    """
    Purpose: Parse an already-trimmed age answer.
    Inputs: text (e.g. "30", "+7", "030", "٣٠")
    Outputs: int value. Negative values are accepted: "-5" parses to -5.
    Raises: ValidationError(field="age") if text is not an integer literal
            or falls outside the signed 32-bit range.
    """
    if not _AGE_PATTERN.fullmatch(text):
        raise ValidationError("age", MSG_INVALID_AGE)
    age = int(text)
    if not AGE_MIN <= age <= AGE_MAX:
        raise ValidationError("age", MSG_INVALID_AGE)
    return age


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Attach a stderr handler to the root logger (no-op if one is already configured)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
