from __future__ import annotations


class NothingType:
    """Slot marker: the name is reserved by the pre-bind pass but not yet defined."""
    __slots__ = ()

    def __repr__(self): return "Nothing"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NothingType)

    def __hash__(self):
        return hash(NothingType)


Nothing = NothingType()
