from __future__ import annotations

import logging
from pathlib import Path

from sable import EvaluatorFn, LispValue
from sable.config import get_load_path, get_source_extension
from sable.errors import SableIOError
from sable.evaluation.sequence import run_forms
from sable.reader.parser import parse
from sable.runtime_context import get_source_opener
from sable.types.environment import Environment

logger = logging.getLogger(__name__)


def with_extension(name: str) -> Path:
    path = Path(name)
    ext = get_source_extension()
    if path.suffix != ext:
        path = path.with_name(path.name + ext)
    return path


def resolve_source(name: str) -> Path:
    """Map a load target to a path, searching SABLE_LOAD_PATH for relative names.

    A relative name found in no root is returned unchanged, so the opener
    decides how to treat it.
    """
    path = with_extension(name)
    if path.is_absolute():
        return path
    for root in get_load_path():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return path


def read_source(path: Path) -> str:
    opener = get_source_opener()
    try:
        with opener(str(path)) as stream:
            return stream.read()
    except OSError as exc:
        raise SableIOError(f"load {path} failed: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SableIOError(f"load {path} failed: not valid text ({exc.reason})") from exc


def load_file(name: str, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Read, parse and evaluate a source file into `env`."""
    path = resolve_source(name)
    code = read_source(path)
    logger.debug("loading %s", path)
    return run_forms(parse(code), env, evaluate_fn)
