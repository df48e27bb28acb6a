import json
import logging
import sys
import time
from typing import Any

from .config import Config, EnvConfig

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or "envtyped")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    config: Config | None = None,
    logger_name: str = "envtyped",
) -> logging.Logger:
    """Configures the package logger; explicit arguments win over LOG_* variables."""
    cfg = config or EnvConfig()
    level_str = (level if level is not None else cfg.get_str("LOG_LEVEL", "INFO") or "INFO").upper()
    fmt_str = (fmt if fmt is not None else cfg.get_str("LOG_FORMAT", "plain") or "plain").lower()
    use_utc = utc if utc is not None else cfg.get_bool("LOG_UTC", True)

    target = get_logger(logger_name)
    for h in list(target.handlers):
        target.removeHandler(h)

    target.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stderr)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))

    target.addHandler(handler)
    target.propagate = False

    get_logger(f"{logger_name}.boot").debug(
        "logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc}
    )
    return target
