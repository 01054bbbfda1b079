"""
Centralized Configuration - Single source of truth for all settings.

All environment variables are read here, validated, and exposed as module-level
constants. Other modules import from here instead of reading os.environ directly.

Usage:
    from leadbuilder.config import LOG_LEVEL, COPY_ACK_SECONDS
"""

import os
import sys

# ─── PATHS ───────────────────────────────────────────────────

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_errors = []


def _env_number(name: str, default: str, cast=int):
    """Parse a numeric env var, recording an error and keeping the default on bad input."""
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        _errors.append(f"{name} must be a number, got '{raw}'")
        return cast(default)


# ─── API ─────────────────────────────────────────────────────

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = _env_number("API_PORT", "8000")
CORS_ORIGINS = [
    o.strip() for o in os.environ.get(
        "LEAD_CORS_ORIGINS", "http://localhost:3000,http://localhost:8000"
    ).split(",") if o.strip()
]

# ─── WORKSPACE ───────────────────────────────────────────────

COPY_ACK_SECONDS = _env_number("COPY_ACK_SECONDS", "2.5", float)
INSIGHT_CACHE_SIZE = _env_number("INSIGHT_CACHE_SIZE", "128")  # 0 = no memo

# ─── LOGGING ─────────────────────────────────────────────────

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # "text" or "json"
LOG_FILE = os.environ.get("LOG_FILE", "")  # empty = stdout only

# ─── VALIDATION ──────────────────────────────────────────────

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_LOG_FORMATS = {"text", "json"}

if LOG_LEVEL not in _VALID_LOG_LEVELS:
    _errors.append(f"LOG_LEVEL must be one of {_VALID_LOG_LEVELS}, got '{LOG_LEVEL}'")

if LOG_FORMAT not in _VALID_LOG_FORMATS:
    _errors.append(f"LOG_FORMAT must be one of {_VALID_LOG_FORMATS}, got '{LOG_FORMAT}'")

if COPY_ACK_SECONDS <= 0:
    _errors.append(f"COPY_ACK_SECONDS must be positive, got {COPY_ACK_SECONDS}")

if INSIGHT_CACHE_SIZE < 0:
    _errors.append(f"INSIGHT_CACHE_SIZE must be zero or positive, got {INSIGHT_CACHE_SIZE}")

if not 0 < API_PORT < 65536:
    _errors.append(f"API_PORT must be a valid TCP port, got {API_PORT}")

if _errors:
    for e in _errors:
        print(f"[config] ERROR: {e}", file=sys.stderr)
    # Don't crash during import - the scoring core needs none of this


def validate(strict: bool = False) -> list:
    """Validate all configuration settings.

    Args:
        strict: If True, raise ValueError on any errors.

    Returns:
        List of error messages (empty if all valid).
    """
    if strict and _errors:
        raise ValueError(f"Configuration errors: {'; '.join(_errors)}")
    return list(_errors)


def print_config():
    """Print current configuration (safe - no secrets)."""
    print("=" * 50)
    print("Lead Builder Configuration")
    print("=" * 50)
    print(f"  API_HOST:             {API_HOST}")
    print(f"  API_PORT:             {API_PORT}")
    print(f"  CORS_ORIGINS:         {', '.join(CORS_ORIGINS)}")
    print(f"  COPY_ACK_SECONDS:     {COPY_ACK_SECONDS}")
    print(f"  INSIGHT_CACHE_SIZE:   {INSIGHT_CACHE_SIZE}")
    print(f"  LOG_LEVEL:            {LOG_LEVEL}")
    print(f"  LOG_FORMAT:           {LOG_FORMAT}")
    print(f"  LOG_FILE:             {LOG_FILE or '(stdout)'}")
    print(f"  PROJECT_ROOT:         {PROJECT_ROOT}")
    print("=" * 50)
