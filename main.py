#!/usr/bin/env python3
"""File sink CLI — pipes stdin lines into a dispatch file sink."""

import argparse
import logging
import sys

from dispatch_file.config import load_config, load_yaml_config
from dispatch_file.levels import LOG_LEVELS, level_name
from dispatch_file.sink import FileSink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [dispatch-file] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write stdin lines to a log file")
    parser.add_argument("--filename", default=None, help="Target log file (or LOG_FILENAME)")
    parser.add_argument(
        "--mode", default=None,
        help="Open mode: write, >, append, >> (default: write)",
    )
    parser.add_argument(
        "--no-autoflush", dest="autoflush", action="store_false", default=None,
        help="Do not flush after every message",
    )
    parser.add_argument(
        "--close-after-write", action="store_true", default=None,
        help="Open and close the file for every message (forces append)",
    )
    parser.add_argument("--config", default=None, help="Path to YAML file with sink options")
    parser.add_argument("--level", default="info", help="Level each stdin line is logged at")
    parser.add_argument("--min-level", default="debug", choices=LOG_LEVELS)
    parser.add_argument(
        "--no-newline", dest="newline", action="store_false",
        help="Strip trailing newlines instead of passing lines through as read",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def run(args, stream) -> int:
    """Log every line of stream through a FileSink. Returns lines written."""
    level = level_name(args.level)
    overrides = load_yaml_config(args.config)
    overrides.update({
        "filename": args.filename,
        "mode": args.mode,
        "autoflush": args.autoflush,
        "close_after_write": args.close_after_write,
    })
    config = load_config(overrides)
    logger.info(
        "Config: filename=%s, mode=%s, autoflush=%s, close_after_write=%s",
        config.filename, config.mode.name.lower(), config.autoflush, config.close_after_write,
    )

    written = 0
    with FileSink.from_config(config, name="cli", min_level=args.min_level) as sink:
        for line in stream:
            if not args.newline:
                line = line.rstrip("\n")
            if sink.log(level, line):
                written += 1
    return written


def main(argv=None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        written = run(args, sys.stdin)
    except UnicodeError as exc:
        logger.error("Could not encode message: %s", exc)
        return 1
    except ValueError as exc:
        parser.error(str(exc))
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 130

    logger.info("Wrote %d message(s)", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
