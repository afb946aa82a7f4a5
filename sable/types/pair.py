"""Immutable cons cells for runtime lists.

Parsed syntax uses Python lists; values built by quoting or by the list
builtins are chains of Pair terminated by Empty. The two meet only at
quoting (list -> Pair) and at argument-list extraction (Pair -> list).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sable import LispValue
from sable.types.nil import Empty, EmptyType


@dataclass(frozen=True, slots=True)
class Pair:
    head: LispValue
    tail: LispValue = Empty

    @staticmethod
    def from_iterable(items: Iterable[LispValue], tail: LispValue = Empty) -> LispValue:
        """Build a Pair chain from `items`; an empty iterable yields `tail`."""
        result = tail
        for item in reversed(list(items)):
            result = Pair(item, result)
        return result

    def is_list(self) -> bool:
        """True iff the chain ends in Empty."""
        cell: LispValue = self
        while isinstance(cell, Pair):
            cell = cell.tail
        return isinstance(cell, EmptyType)

    def to_list(self) -> list[LispValue]:
        """Materialize the heads of a proper list as a Python list."""
        items: list[LispValue] = []
        cell: LispValue = self
        while isinstance(cell, Pair):
            items.append(cell.head)
            cell = cell.tail
        return items

    def __len__(self) -> int:
        return len(self.to_list())

    def __repr__(self) -> str:
        return f"Pair({self.head!r}, {self.tail!r})"


def is_list(value: LispValue) -> bool:
    """Proper-list test that also accepts the empty list."""
    if isinstance(value, EmptyType):
        return True
    return isinstance(value, Pair) and value.is_list()


def list_items(value: LispValue) -> list[LispValue]:
    """Return the elements of a proper list (Empty -> [])."""
    if isinstance(value, Pair):
        return value.to_list()
    return []
