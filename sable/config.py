from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_LOAD_PATH = [Path('.')]
_DEFAULT_SOURCE_EXTENSION = '.scm'
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    return paths_from_env('SABLE_LOAD_PATH', _DEFAULT_LOAD_PATH)


def get_source_extension() -> str:
    ext = os.environ.get('SABLE_SOURCE_EXTENSION') or _DEFAULT_SOURCE_EXTENSION
    return ext if ext.startswith('.') else '.' + ext


def get_log_level() -> str:
    return (os.environ.get('SABLE_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).upper()
