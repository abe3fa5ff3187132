from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Host recursion budget installed by the interpreter. Each nested lishp call
# uses a handful of Python frames, so the interpreter default is well above
# CPython's 1000.
DEFAULT_RECURSION_LIMIT = 20000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.debug("Ignoring %s=%r: not an integer", var, raw)
        return default
    if value <= 0:
        logger.debug("Ignoring %s=%r: must be positive", var, raw)
        return default
    return value


def get_recursion_limit() -> int:
    return int_from_env('LISHP_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)
