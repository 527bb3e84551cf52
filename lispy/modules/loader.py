from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Protocol

from lispy.config import get_load_roots, get_prelude_path
from lispy.errors import LispyLoadError

_logger = logging.getLogger("Loader")


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str, filename: str = ...) -> None: ...


# Map a `load` argument to a file: as given first, then under each LISPY_PATH root

def resolve_source(name: str) -> Optional[Path]:
    p = Path(name)
    if p.is_file():
        return p
    if p.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return None


def load_prelude(itp: _HasEvalPrelude, path: Path | None = None) -> Path:
    p = path if path is not None else get_prelude_path()
    try:
        code = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise LispyLoadError(f"Cannot read prelude '{p}': {exc}") from exc
    _logger.debug("Loading prelude from %s", p)
    itp.eval_prelude(code, str(p))
    return p
