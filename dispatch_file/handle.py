"""File handle lifecycle — the only owner of the sink's OS file."""

import logging
import weakref

from dispatch_file.config import SinkConfig

logger = logging.getLogger(__name__)


def _close_quietly(fh) -> None:
    # A failed close must not mask a write that already succeeded.
    try:
        fh.close()
    except (OSError, ValueError):
        pass


class FileHandleManager:
    """Opens, writes and closes the target file per the sink's config.

    Two operating modes, fixed at construction:

    - persistent (close_after_write=False): open() is called once by the
      owner, every write reuses the handle, close() releases it exactly once.
    - ephemeral (close_after_write=True): each write opens, writes and closes;
      no handle is held between writes.
    """

    def __init__(self, config: SinkConfig):
        self._config = config
        self._file = None
        self._finalizer = None
        self._closed = False

    @property
    def config(self) -> SinkConfig:
        return self._config

    @property
    def persistent(self) -> bool:
        return not self._config.close_after_write

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _open_handle(self):
        mode = self._config.mode.value + "b"
        try:
            fh = open(self._config.filename, mode)
        except OSError as exc:
            raise OSError(
                exc.errno, f"Can't write to '{self._config.filename}': {exc.strerror}", self._config.filename
            ) from exc
        logger.debug("Opened %s (mode=%s)", self._config.filename, mode)
        return fh

    def open(self) -> None:
        """Open the persistent handle. Raises OSError if the file can't be opened."""
        if not self.persistent:
            raise ValueError("open() is only used for persistent handles")
        if self._closed:
            raise ValueError(f"Handle for {self._config.filename} already closed")
        if self._file is not None:
            return
        self._file = self._open_handle()
        # Backstop for owners that never call close(); released at GC or exit.
        self._finalizer = weakref.finalize(self, _close_quietly, self._file)

    def _write_to(self, fh, data: bytes) -> None:
        fh.write(data)
        if self._config.autoflush:
            fh.flush()

    def write(self, data: bytes) -> None:
        """Write data exactly as given, flushing before return if autoflush is on."""
        if self._closed or (self.persistent and self._file is None):
            raise ValueError(f"I/O operation on closed sink file {self._config.filename}")
        if self.persistent:
            self._write_to(self._file, data)
            return

        fh = self._open_handle()
        try:
            self._write_to(fh, data)
        finally:
            _close_quietly(fh)

    def close(self) -> None:
        """Release the persistent handle. Safe to call more than once."""
        self._closed = True
        if self._file is None:
            return
        self._file = None
        self._finalizer()
        logger.debug("Closed %s", self._config.filename)
