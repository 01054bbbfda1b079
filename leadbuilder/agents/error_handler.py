"""
Agent Error Handler - Captures and logs non-fatal errors from side-effecting
collaborators (clipboard writers, host callbacks).

The scoring core never raises, so the only failures worth catching come
from code handed in by the host. Those are logged and swallowed so computed
state stays intact.

Usage:
    from leadbuilder.agents.error_handler import safe_execute

    ok = safe_execute(
        writer, args=(text,),
        phase="copy", action="email",
        fallback=False
    )
"""

import logging
import traceback
from typing import Any, Callable

logger = logging.getLogger("leadbuilder.error_handler")


def log_error(phase: str, error: Exception = None, error_message: str = None,
              action: str = None, context: dict = None, severity: str = "warning"):
    """Log a non-fatal error with structured extras.

    Args:
        phase: Where the error occurred (copy, api, ...)
        error: The exception object (optional if error_message provided)
        error_message: Human-readable error description
        action: Sub-step or target within the phase
        context: Additional context, rendered into the message
        severity: "warning", "error", or "critical"
    """
    msg = error_message or (str(error) if error else "Unknown error")
    error_type = type(error).__name__ if error else "UnknownError"
    log_extra = {"phase": phase, "action": action or ""}
    detail = f" ({context})" if context else ""

    if severity == "critical":
        logger.critical("%s in %s: %s%s", error_type, phase, msg, detail, extra=log_extra)
    elif severity == "error":
        logger.error("%s in %s: %s%s", error_type, phase, msg, detail, extra=log_extra)
    else:
        logger.warning("%s in %s: %s%s", error_type, phase, msg, detail, extra=log_extra)


def safe_execute(
    fn: Callable,
    args: tuple = (),
    kwargs: dict = None,
    phase: str = "unknown",
    action: str = None,
    fallback: Any = None,
    severity: str = "warning",
) -> Any:
    """Execute a function with automatic error capture.

    If the function raises, the error is logged and the fallback value is returned.

    Args:
        fn: The function to call.
        args: Positional arguments.
        kwargs: Keyword arguments.
        phase: Phase name for logging.
        action: Sub-step or target for logging.
        fallback: Value to return if fn raises.
        severity: Error severity level.

    Returns:
        The function's return value, or fallback if it raised.
    """
    kwargs = kwargs or {}
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        log_error(
            phase=phase,
            error=e,
            action=action,
            context={
                "function": getattr(fn, "__name__", repr(fn)),
                "traceback": traceback.format_exc()[-500:],
            },
            severity=severity,
        )
        return fallback
