from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


_DEFAULT_LOAD_DIRS = [Path('.')]
_DEFAULT_PROMPT = 'lisple > '
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    return paths_from_env('LISPLE_LOAD_PATH', _DEFAULT_LOAD_DIRS)


def get_prompt() -> str:
    return os.environ.get('LISPLE_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('LISPLE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
