from __future__ import annotations


class EmptyType:
    """The empty list, also the result of evaluating an empty expression."""

    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(EmptyType)


class UnspecifiedType:
    """Result of definitions and other forms that produce no value."""

    _instance: UnspecifiedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unspecified>"

    def __eq__(self, other):
        return isinstance(other, UnspecifiedType)

    def __hash__(self):
        return hash(UnspecifiedType)


Empty = EmptyType()
Unspecified = UnspecifiedType()
