"""
Lead Builder - Logging setup.

setup_logging() installs one handler on the root logger. Modules log through
logging.getLogger("leadbuilder.<area>") and attach lead context as extras:

    logger.debug("Scored lead %s", score,
                 extra={"lead_score": score, "missing_count": 2, "tier": "warm"})

Both formatters render those extras, so a scoring line reads the same
whether it lands in a terminal or a log pipeline.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

from leadbuilder import config

# Lead context a log record may carry, in render order
LEAD_EXTRAS = ("field", "action", "target", "phase",
               "lead_score", "tier", "missing_count")


def lead_context(record: logging.LogRecord) -> dict:
    return {key: getattr(record, key) for key in LEAD_EXTRAS if hasattr(record, key)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, lead extras flattened into it."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(lead_context(record))
        if record.exc_info and record.exc_info[0]:
            entry["error"] = f"{record.exc_info[0].__name__}: {record.exc_info[1]}"
        return json.dumps(entry)


class TextFormatter(logging.Formatter):
    """'time [logger] LEVEL: message key=value ...'"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = lead_context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


_initialized = False


def setup_logging(level: str = None, fmt: str = None, log_file: str = None):
    """Configure the root logger once. Later calls are no-ops.

    Arguments default to LOG_LEVEL / LOG_FORMAT / LOG_FILE from leadbuilder.config.
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    level = (level or config.LOG_LEVEL).upper()
    fmt = fmt or config.LOG_FORMAT
    log_file = log_file or config.LOG_FILE
    formatter = JSONFormatter() if fmt == "json" else TextFormatter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("leadbuilder").info("Logging configured: level=%s, format=%s", level, fmt)


def reset_logging():
    """Allow setup_logging() to run again. Used by tests."""
    global _initialized
    _initialized = False
