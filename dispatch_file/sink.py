"""File sink — the dispatch output that persists formatted messages to a file."""

import threading

from dispatch_file.config import SinkConfig
from dispatch_file.handle import FileHandleManager
from dispatch_file.output import Output


class FileSink(Output):
    """Writes already-formatted messages to a file.

    Options: filename (required), mode ("write"/">" or "append"/">>",
    default truncate), autoflush (default True), close_after_write
    (default False; forces append), encoding (for str messages).

    In persistent mode the file is opened here, so an unwritable path fails
    at construction. Use as a context manager, or call close(), to release
    the handle deterministically.
    """

    def __init__(self, name: str = "file", min_level="debug", max_level=None, callbacks=None,
                 config: SinkConfig | None = None, **options):
        super().__init__(name, min_level=min_level, max_level=max_level, callbacks=callbacks)
        if config is not None and options:
            raise ValueError(f"Pass either config or sink options, not both (got {', '.join(sorted(options))})")
        self.config = config if config is not None else SinkConfig.from_options(**options)
        self._manager = FileHandleManager(self.config)
        if self._manager.persistent:
            self._manager.open()

    @classmethod
    def from_config(cls, config: SinkConfig, **output_kwargs) -> "FileSink":
        return cls(config=config, **output_kwargs)

    @property
    def filename(self) -> str:
        return self.config.filename

    @property
    def closed(self) -> bool:
        return self._manager.closed

    @property
    def handle_open(self) -> bool:
        return self._manager.is_open

    def log_message(self, message) -> None:
        if isinstance(message, str):
            message = message.encode(self.config.encoding)
        self._manager.write(message)

    def close(self) -> None:
        self._manager.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class LockedFileSink(FileSink):
    """FileSink whose writes are serialized for use from several threads."""

    def __init__(self, *args, **kwargs):
        self._lock = threading.Lock()
        super().__init__(*args, **kwargs)

    def log_message(self, message) -> None:
        with self._lock:
            super().log_message(message)

    def close(self) -> None:
        with self._lock:
            super().close()
