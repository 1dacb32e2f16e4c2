from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var, "").strip()
    return Path(raw) if raw else None


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", var, raw)
        return None


def get_prelude_path() -> Optional[Path]:
    return path_from_env('LISPY_PRELUDE')


def get_recursion_limit() -> Optional[int]:
    return int_from_env('LISPY_RECURSION_LIMIT')
