from __future__ import annotations

import logging
import sys

"""Console logging for the converter.

One line per record, ``LABEL message``:

    INFO    progress of a command (file read, file written, validation passed)
    WARN    a row discarded by the extractor, an unexpected header row, or a
            key repeated inside a JSON source
    ERROR   the reason a parse / generate / validate run failed
    SUMMARY the closing line of each CLI command (``services.summary``)

Discarded rows are also handed to the skip-log observer
(``logging.skip_log.SkipLogBuffer``); the WARN line here is the console copy.
Modules log through ``logging.getLogger(__name__)`` and reach the
``i18n_excel`` logger configured below.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "enable_debug",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "i18n_excel"

# INFO(20) と WARNING(30) の間
SUMMARY_LEVEL = 25
SUMMARY_PREFIX = "SUMMARY "

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """``LABEL message``; WARNING is shortened to WARN."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Attach a single stdout handler to the ``i18n_excel`` logger.

    Records stay on stdout next to the SUMMARY line and do not propagate to
    the root logger. Calling it again returns the same logger.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # 既存ハンドラを除去して重複出力を防ぐ
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def enable_debug() -> None:
    """``--debug``: lower the converter logger and its handlers to DEBUG."""
    logger = get_logger()
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    logger.debug("debug mode enabled")


def log_summary(line: str) -> None:
    """Emit a command's closing line at SUMMARY level.

    ``line`` may be the full rendered ``SUMMARY key=value ...`` text; the
    leading label is dropped because the formatter adds it back.
    """
    get_logger().log(SUMMARY_LEVEL, line.removeprefix(SUMMARY_PREFIX))


def reset_logging() -> None:
    """Forget the configured logger so the next setup_logging() rebuilds it (tests)."""
    global _logger
    _logger = None
