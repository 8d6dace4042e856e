"""Configuration module — frozen sink config built from options, env vars, or YAML."""

import os
import logging
from dataclasses import dataclass

import yaml

from dispatch_file.modes import OpenMode, resolve_mode

logger = logging.getLogger(__name__)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _as_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return _parse_bool(value)
    return bool(value)


@dataclass(frozen=True)
class SinkConfig:
    filename: str
    mode: OpenMode = OpenMode.TRUNCATE
    autoflush: bool = True
    close_after_write: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        if isinstance(self.filename, os.PathLike):
            object.__setattr__(self, "filename", os.fspath(self.filename))
        if not isinstance(self.filename, str) or not self.filename:
            raise ValueError(f"filename must be a non-empty string, got {self.filename!r}")
        close = _as_bool(self.close_after_write, False)
        object.__setattr__(self, "close_after_write", close)
        object.__setattr__(self, "autoflush", _as_bool(self.autoflush, True))
        # close_after_write forces append even when the mode was set directly
        object.__setattr__(self, "mode", resolve_mode(close, self.mode))
        object.__setattr__(self, "encoding", self.encoding or "utf-8")

    @classmethod
    def from_options(
        cls,
        filename=None,
        mode=None,
        autoflush=None,
        close_after_write=None,
        encoding=None,
        **extra,
    ) -> "SinkConfig":
        """Build a SinkConfig from loosely typed options.

        Unknown keys are ignored so that options meant for other parts of the
        dispatch setup can be passed through unchanged. None means the default.
        """
        if extra:
            logger.debug("Ignoring unrecognized sink options: %s", ", ".join(sorted(extra)))
        return cls(
            filename=filename,
            mode=mode,
            autoflush=autoflush,
            close_after_write=close_after_write,
            encoding=encoding,
        )


def load_yaml_config(path: str | None) -> dict:
    """Load sink options from a YAML file. Returns empty dict if no path or no file."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(overrides: dict | None = None) -> SinkConfig:
    """Build SinkConfig from environment variables, then apply overrides on top."""
    options = {
        "filename": os.environ.get("LOG_FILENAME"),
        "mode": os.environ.get("LOG_FILE_MODE"),
        "autoflush": _parse_bool(os.environ.get("LOG_AUTOFLUSH", "true")),
        "close_after_write": _parse_bool(os.environ.get("LOG_CLOSE_AFTER_WRITE", "false")),
        "encoding": os.environ.get("LOG_FILE_ENCODING", "utf-8"),
    }
    if overrides:
        options.update({k: v for k, v in overrides.items() if v is not None})
    return SinkConfig.from_options(**options)
