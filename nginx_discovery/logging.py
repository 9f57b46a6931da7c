"""
Logging for nginx-discovery.

The lexer and parser only create loggers through get_logger() and log at
DEBUG; nothing is printed unless the command-line entry point installs
handlers with setup_logging(). Console records go to stderr, so the tree
and token views on stdout can be piped.

    $ nginx-discover -d site.conf
    DEBUG    nginx_discovery.lexer: Tokenized 42 tokens over 12 lines
    DEBUG    nginx_discovery.parser: Parsed 3 top-level directives (9 total)
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


ROOT_LOGGER = "nginx_discovery"

CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;91m",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname = record.levelname
        color = LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{color}{levelname:8}{RESET}"
        try:
            return super().format(record)
        finally:
            # The file handler formats the same record afterwards
            record.levelname = levelname


@dataclass
class LogConfig:
    """Console level and optional rotating log file."""

    console_level: int = logging.WARNING
    colors: bool = True
    file_path: str | None = None
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install handlers on the package root logger.

    Calling it again replaces the handlers from the previous call.
    """
    if config is None:
        config = LogConfig()

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(config.console_level)
    console.setFormatter(ColoredFormatter(use_colors=config.colors and sys.stderr.isatty()))
    root.addHandler(console)

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        root.addHandler(file_handler)


def setup_logging_from_args(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
    colors: bool = True,
) -> LogConfig:
    """Map the -v/-d/-q/--log-file/--no-color flags to a LogConfig and apply it."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    config = LogConfig(console_level=level, colors=colors, file_path=log_file)
    setup_logging(config)
    return config


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, e.g. get_logger("parser") -> nginx_discovery.parser."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
