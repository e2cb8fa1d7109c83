"""Loguru setup: console, rotating file and Slack sinks, stdlib interception."""

import logging
import sys
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from globalwatch.core.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[name]}:{function}:{line} | {message}"

VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

# Third-party loggers routed into loguru
INTERCEPTED = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "httpcore")

_configured = False


class InterceptHandler(logging.Handler):
    """Redirect stdlib logs to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_name == "emit":
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _slack_sink(message: Any) -> None:
    record = message.record
    name = record["extra"].get("name", "globalwatch")
    text = (
        f"[globalwatch/{settings.ENV}] [{record['level'].name}] "
        f"{name}:{record['function']}:{record['line']}\n{record['message']}"
    )
    try:
        httpx.post(settings.SLACK_WEBHOOK_URL, json={"text": text}, timeout=5.0)
    except httpx.HTTPError:
        # Logging here would recurse back into this sink
        pass


def resolve_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    level = LEVEL_ALIASES.get(level, level)
    return level if level in VALID_LEVELS else "INFO"


def _add_file_sink(level: str) -> None:
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "globalwatch.log",
        level=level,
        format=LOG_FORMAT,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        backtrace=False,
        diagnose=False,
    )


def _intercept_stdlib(level: str) -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    # httpx logs every request at INFO; a paginated scan would flood the log
    if level not in ("TRACE", "DEBUG"):
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def configure_logging() -> None:
    global _configured
    if _configured:
        return
    _configured = True

    level = resolve_level(settings.effective_log_level)

    logger.remove()
    logger.configure(extra={"name": "globalwatch"})
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, backtrace=False, diagnose=False)

    if settings.LOG_DIR:
        _add_file_sink(level)
    if settings.SLACK_WEBHOOK_URL:
        logger.add(_slack_sink, level="ERROR", enqueue=True)

    _intercept_stdlib(level)


def get_logger(name: str) -> logger.__class__:
    return logger.bind(name=name)


configure_logging()
