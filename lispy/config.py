from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
_DEFAULT_PRELUDE_FILE = 'std.lspy'
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load` for relative paths, after the cwd."""
    return paths_from_env('LISPY_PATH', [])


def get_prelude_path() -> Path:
    roots = paths_from_env('LISPY_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # A directory holds std.lspy; a file path is used as is
    p = roots[0]
    return p / _DEFAULT_PRELUDE_FILE if p.is_dir() else p


def get_log_level() -> str:
    return os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
