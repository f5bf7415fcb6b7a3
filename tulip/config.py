from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = ">>> "
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get('TULIP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get('TULIP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('TULIP_PRELUDE_PATH')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def verbosity_to_level(verbosity: int) -> int:
    """Map a repeated -v count onto a logging level; 0 defers to the environment."""
    if verbosity <= 0:
        return get_log_level()
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG
