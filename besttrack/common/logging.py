"""Structured logging setup for the best-track service.

Every log line includes: timestamp, level, module tag, message, and structured data.
Long raw source lines in structured data are clipped so a pasted archive
cannot flood the log.

Usage:
    from besttrack.common.logging import get_logger
    logger = get_logger("PARSER")
    logger.debug("Skipping row", extra={"data": {"line": "AL, 09, ..."}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

# Module tags for structured logging
MODULE_TAGS = {
    "PARSER",
    "API",
    "SYSTEM",
    "TEST",
}

MAX_DATA_VALUE_CHARS = 200


def _clip_value(value: object) -> object:
    """Clip long strings so raw source rows stay readable in log output."""
    if isinstance(value, str) and len(value) > MAX_DATA_VALUE_CHARS:
        return value[:MAX_DATA_VALUE_CHARS] + "..."
    return value


class StructuredFormatter(logging.Formatter):
    """Formats log records as structured, human-readable lines.

    Output format:
        2025-02-15T10:30:00Z | INFO | PARSER | Parsed best track | {"storms": 3}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        level = record.levelname
        module_tag = getattr(record, "module_tag", "SYSTEM")

        # Include request ID when available (set by RequestIdMiddleware)
        try:
            from besttrack.common.middleware import request_id_var

            rid = request_id_var.get("")
        except ImportError:
            rid = ""

        data = getattr(record, "data", None)
        if isinstance(data, dict):
            data = {k: _clip_value(v) for k, v in data.items()}
        if data is not None:
            try:
                data_str = json.dumps(data, default=str)
            except (TypeError, ValueError):
                data_str = str(data)
        else:
            data_str = ""

        parts = [timestamp, level]
        if rid:
            parts.append(f"rid={rid[:8]}")
        parts.extend([module_tag, record.getMessage()])
        if data_str:
            parts.append(data_str)

        return " | ".join(parts)


class ModuleTagLogger(logging.LoggerAdapter):
    """Logger adapter that injects module_tag and supports structured data.

    Usage:
        logger = get_logger("PARSER")
        logger.info("Parsed best track", extra={"data": {"storms": 3}})
    """

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        extra["module_tag"] = self.extra.get("module_tag", "SYSTEM")
        kwargs["extra"] = extra
        return msg, kwargs


# Cache loggers to avoid duplicate handlers
_loggers: dict[str, ModuleTagLogger] = {}


def get_logger(module_tag: str) -> ModuleTagLogger:
    """Get a structured logger with the given module tag.

    Args:
        module_tag: One of the MODULE_TAGS (PARSER, API, SYSTEM, etc.)

    Returns:
        A logger adapter that injects the module tag into every log line.
    """
    if module_tag in _loggers:
        return _loggers[module_tag]

    logger = logging.getLogger(f"besttrack.{module_tag.lower()}")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

    adapter = ModuleTagLogger(logger, {"module_tag": module_tag})
    _loggers[module_tag] = adapter
    return adapter
