from __future__ import annotations
import logging
import os


_logger = logging.getLogger("TwikConfig")


def int_from_env(var: str, default: int | None = None) -> int | None:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        _logger.warning("Ignoring non-integer value %r for %s", raw, var)
        return default


def get_recursion_limit() -> int | None:
    """Requested Python recursion limit for deeply recursive programs, if any."""
    limit = int_from_env('TWIK_RECURSION_LIMIT')
    if limit is not None and limit <= 0:
        _logger.warning("Ignoring non-positive TWIK_RECURSION_LIMIT %d", limit)
        return None
    return limit
