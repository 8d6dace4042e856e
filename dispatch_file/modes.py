"""Open-mode resolution — pure function from configuration to truncate/append."""

import os
from enum import Enum

APPEND_KEYWORDS = (">>", "append")


class OpenMode(Enum):
    TRUNCATE = "w"
    APPEND = "a"


def _is_append_flag(mode) -> bool:
    """True if mode is the platform's numeric O_APPEND value (int or digit string)."""
    if isinstance(mode, bool):
        return False
    if isinstance(mode, int):
        return mode == os.O_APPEND
    if isinstance(mode, str) and mode.isdigit():
        return int(mode) == os.O_APPEND
    return False


def resolve_mode(close_after_write: bool, mode=None) -> OpenMode:
    """Resolve the requested mode to TRUNCATE or APPEND.

    close_after_write always wins: reopening per message must never wipe
    what earlier messages wrote. Unrecognized values fall back to TRUNCATE
    rather than raising.
    """
    if close_after_write:
        return OpenMode.APPEND
    if isinstance(mode, OpenMode):
        return mode
    if mode in APPEND_KEYWORDS or _is_append_flag(mode):
        return OpenMode.APPEND
    return OpenMode.TRUNCATE
