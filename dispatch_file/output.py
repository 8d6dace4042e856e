"""Per-output dispatch contract: severity thresholds and the message callback chain."""

import logging

from dispatch_file.levels import LOG_LEVELS, level_index, level_name, within_range

logger = logging.getLogger(__name__)


class Output:
    """Base for dispatch outputs.

    log() decides whether a record passes this output's min/max thresholds,
    runs the callback chain once and hands the result to log_message().
    Subclasses implement log_message() and never re-run the chain.

    Each callback is called as callback(message=..., level=...) and must
    return the (possibly rewritten) message.
    """

    def __init__(self, name: str, min_level="debug", max_level=None, callbacks=None):
        self.name = name
        self.min_level = level_name(min_level)
        self.max_level = level_name(max_level) if max_level is not None else LOG_LEVELS[-1]
        if level_index(self.max_level) < level_index(self.min_level):
            raise ValueError(
                f"max_level {self.max_level!r} is below min_level {self.min_level!r} for output {name!r}"
            )
        if callbacks is None:
            callbacks = []
        elif callable(callbacks):
            callbacks = [callbacks]
        self.callbacks = list(callbacks)

    def accepts(self, level) -> bool:
        return within_range(level, self.min_level, self.max_level)

    def _apply_callbacks(self, message: str, level: str) -> str:
        for callback in self.callbacks:
            message = callback(message=message, level=level)
        return message

    def log(self, level, message: str) -> bool:
        """Dispatch one record. Returns True if it was written."""
        if not self.accepts(level):
            logger.debug("Output %s skipped record at level %r", self.name, level)
            return False
        name = level_name(level)
        self.log_message(self._apply_callbacks(message, name))
        return True

    def log_message(self, message: str) -> None:
        raise NotImplementedError
