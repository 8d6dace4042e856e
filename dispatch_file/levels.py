"""Severity levels — pure functions for level lookup and threshold checks."""

LOG_LEVELS = ("debug", "info", "notice", "warning", "error", "critical", "alert", "emergency")

LEVEL_ALIASES = {
    "warn": "warning",
    "err": "error",
    "crit": "critical",
    "emerg": "emergency",
}


def level_index(level) -> int:
    """Return the position of a level in LOG_LEVELS, or -1 if unknown.

    Accepts names (case-insensitive, aliases included) and numeric levels 0-7.
    """
    if isinstance(level, bool):
        return -1
    if isinstance(level, int):
        return level if 0 <= level < len(LOG_LEVELS) else -1
    if not isinstance(level, str):
        return -1
    normalized = level.strip().lower()
    if normalized.isdigit():
        return level_index(int(normalized))
    normalized = LEVEL_ALIASES.get(normalized, normalized)
    if normalized in LOG_LEVELS:
        return LOG_LEVELS.index(normalized)
    return -1


def level_name(level) -> str:
    """Canonical name for a level. Raises ValueError for unknown levels."""
    idx = level_index(level)
    if idx == -1:
        raise ValueError(f"Unknown log level: {level!r}")
    return LOG_LEVELS[idx]


def within_range(level, min_level, max_level=None) -> bool:
    """Return True if min_level <= level <= max_level in severity.

    An unknown level is never accepted. max_level of None means no ceiling.
    """
    idx = level_index(level)
    min_idx = level_index(min_level)
    max_idx = len(LOG_LEVELS) - 1 if max_level is None else level_index(max_level)
    if -1 in (idx, min_idx, max_idx):
        return False
    return min_idx <= idx <= max_idx
