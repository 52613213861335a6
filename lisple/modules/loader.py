from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from lisple.config import get_load_roots
from lisple.errors import LoadError

logger = logging.getLogger(__name__)


# Map a file designator to an existing file: as given first, then under each load root

def resolve_source(name: str) -> Optional[Path]:
    direct = Path(name)
    if direct.is_file():
        return direct
    if direct.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / direct
        if candidate.is_file():
            return candidate
    return None


def load_source(name: str) -> str:
    p = resolve_source(name)
    if p is None:
        raise LoadError(name, "no such file in LISPLE_LOAD_PATH")
    logger.debug("Reading source %s", p)
    try:
        return p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(name, str(e)) from e
