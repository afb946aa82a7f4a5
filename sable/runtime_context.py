from __future__ import annotations
from typing import Callable, Optional, TextIO

# NOTE: process-global, like the rest of the interpreter state.
SourceOpener = Callable[[str], TextIO]


def _open_source(path: str) -> TextIO:
    return open(path, 'r', encoding='utf-8')


_source_opener: SourceOpener = _open_source


def set_source_opener(opener: Optional[SourceOpener]) -> None:
    """Install the capability `load` uses to open files; None restores the default."""
    global _source_opener
    _source_opener = opener if opener is not None else _open_source


def get_source_opener() -> SourceOpener:
    return _source_opener
