"""Base structured logging utilities for the pipeline core.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across providers, plugins and the
  orchestrator.

All package loggers are children of the shared ``vibe`` logger, which owns a
single stderr handler. ``normalized_log_event`` guarantees a stable set of keys
(``phase``, ``error_code``, ``tokens``) across every emitter.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "vibe"
LOG_LEVEL_ENV = "VIBE_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_vibe_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_vibe_console_handler"
_FILE_HANDLER_ATTR = "_vibe_file_handler"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``vibe`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False) or stream_obj is not sys.stderr:
                # pytest's capsys swaps sys.stderr between tests; follow it.
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(json_mode, desired_level))
                continue
            existing.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a package logger wired to the shared ``vibe`` handler.

    Names not already under the ``vibe.`` namespace are prefixed so every
    package logger propagates to the single configured base handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``vibe`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler is attached writing to
        ``file_path``. When ``None``, any previously attached managed file
        handler is removed.
    json_mode: bool
        Whether to use the JSON formatter or a plain text formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (should be JSON formatted by ``get_logger``).
    event: str
        Event name (e.g. ``send.start``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    level: int
        Logging level for the record.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "error_code", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a stable JSON-friendly form."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured log event carrying the normalized key set.

    ``phase`` and ``tokens`` are always present (``tokens`` may be null);
    ``error_code`` is omitted when ``None`` to reflect "no error" naturally.
    Extra fields never clobber the normalized values.
    """
    base_fields: Dict[str, Any] = {"phase": phase, "tokens": _coerce_tokens(tokens)}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
