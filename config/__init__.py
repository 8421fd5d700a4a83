"""
Configuration Package with Profile Loading
Automatically loads the appropriate profile based on SPEEDO_ENV environment variable.

Usage:
    export SPEEDO_ENV=development  # or 'production', 'safe'

    Or in code:
    import config
    print(config.SPD_BOTTOM_ROWS)
"""

import os
import sys
from typing import List, Tuple


_PENDING_LOGS: List[Tuple[str, str]] = []


def _queue_startup_log(level: str, message: str) -> None:
    logger = sys.modules.get("showlog")
    handler = getattr(logger, level, None) if logger else None
    if callable(handler):
        handler(message)
    else:
        _PENDING_LOGS.append((level, message))


def _flush_pending_logs() -> None:
    if not _PENDING_LOGS:
        return

    logger = sys.modules.get("showlog")
    if not logger:
        return

    remaining: List[Tuple[str, str]] = []
    for level, payload in _PENDING_LOGS:
        handler = getattr(logger, level, None)
        if callable(handler):
            handler(payload)
        else:
            remaining.append((level, payload))

    _PENDING_LOGS[:] = remaining


def _notify_showlog_ready() -> None:
    _flush_pending_logs()


def _log_debug(message: str) -> None:
    _queue_startup_log("debug", f"[CONFIG] {message}")


def _log_info(message: str) -> None:
    _queue_startup_log("info", f"[CONFIG] {message}")


def _log_warn(message: str) -> None:
    _queue_startup_log("warn", f"[CONFIG] {message}")

# Import all base configuration modules first
from .logging import *
from .paths import *
from .styling import *
from .validation import *
from .speedometer import *

# Detect environment profile
_env = os.getenv("SPEEDO_ENV", "production").lower()

# Load profile-specific overrides
if _env == "development" or _env == "dev":
    _log_info("Loading DEVELOPMENT profile")
    from .profiles.dev import *
elif _env == "safe":
    _log_info("Loading SAFE MODE profile")
    from .profiles.safe import *
else:
    _log_info("Loading PRODUCTION profile")
    from .profiles.prod import *

# Export current profile name
ACTIVE_PROFILE = _env if _env in ("development", "dev", "safe") else "production"

_log_info(f"Active profile: {ACTIVE_PROFILE}")


def _apply_env_policy_overrides(ns):
    """Let SPEEDO_RANGE_POLICY / SPEEDO_CONFLICT_POLICY win over the profile."""
    for env_key, cfg_key, allowed in (
        ("SPEEDO_RANGE_POLICY", "RANGE_POLICY", RANGE_POLICIES),
        ("SPEEDO_CONFLICT_POLICY", "CONFLICT_POLICY", CONFLICT_POLICIES),
    ):
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        value = raw.strip().lower()
        if value in allowed:
            ns[cfg_key] = value
        else:
            _log_warn(f"Ignoring {env_key}={raw!r} (expected one of {', '.join(allowed)})")


_apply_env_policy_overrides(globals())

_log_debug(f"RANGE_POLICY={RANGE_POLICY}, CONFLICT_POLICY={CONFLICT_POLICY}, LOG_LEVEL={LOG_LEVEL}")
