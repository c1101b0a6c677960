"""Logging setup for the registry: loguru sinks and stdlib interception."""

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from loguru import logger

from src.user_registry.runtime.config.config_data import ConfigData
from src.user_registry.runtime.context import get_config

# Fields rendered in the header of a plain line, not in the trailing context
_HEADER_FIELDS = {"request_id", "context"}

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
    "{extra[context]}"
)


class InterceptHandler(logging.Handler):
    """Send stdlib records (uvicorn, SQLAlchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # The request middleware already logs every request
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def render_context(record: dict[str, Any]) -> None:
    """Flatten bound fields into ``extra["context"]`` for plain output.

    A record bound with ``operation="insert"`` inside a request renders as
    `` | method=POST path=/users client_ip=... operation=insert``.
    """
    extra = record["extra"]
    extra.setdefault("request_id", "-")
    pairs = [
        f"{key}={value}"
        for key, value in extra.items()
        if key not in _HEADER_FIELDS
    ]
    extra["context"] = " | " + " ".join(pairs) if pairs else ""


def _sink_options(fmt: str) -> dict[str, Any]:
    if fmt == "json":
        return {"format": "{message}", "serialize": True}
    return {"format": PLAIN_FORMAT, "serialize": False}


def configure_logging(config: ConfigData | None = None, sink: TextIO | None = None):
    """Route all application logging through loguru.

    ``logging.format`` selects JSON lines or the plain layout for the console
    and the optional file sink alike.
    """
    main_config = config or get_config()
    cfg = main_config.logging
    env = main_config.app.environment
    debug_tracebacks = env != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"}, patcher=render_context)

    logger.add(
        sink or sys.stderr,
        level=cfg.level,
        colorize=None if cfg.format == "plain" else False,
        backtrace=debug_tracebacks,
        diagnose=debug_tracebacks,
        **_sink_options(cfg.format),
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=cfg.level,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            enqueue=True,
            backtrace=debug_tracebacks,
            diagnose=debug_tracebacks,
            **_sink_options(cfg.format),
        )

    # level=0 lets every record reach the interceptor; loguru filters by level
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    # SQL echo stays governed by database.echo, not the app level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)

    logger.bind(level=cfg.level, format=cfg.format, file=cfg.file).info(
        "Logging configured for {} environment", env
    )
