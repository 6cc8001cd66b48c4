"""User-defined structures: the type, its instances and its generated functions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class StructType:
    """A named record type. Compared by identity: two `define-struct`s of the
    same name are different types."""
    name: str
    fields: tuple[str, ...]

    @property
    def arity(self) -> int:
        return len(self.fields)


@dataclass(frozen=True, eq=False)
class Struct:
    struct_type: StructType
    values: tuple


@dataclass(frozen=True)
class StructureConstructor:
    struct_type: StructType

    @property
    def name(self) -> str:
        return f"make-{self.struct_type.name}"


@dataclass(frozen=True)
class StructureAccessor:
    struct_type: StructType
    index: int

    @property
    def name(self) -> str:
        return f"{self.struct_type.name}-{self.struct_type.fields[self.index]}"


@dataclass(frozen=True)
class StructurePredicate:
    struct_type: StructType

    @property
    def name(self) -> str:
        return f"{self.struct_type.name}?"


def structure_functions(struct_type: StructType) -> dict[str, object]:
    """All the functions a `define-struct` binds, keyed by name, in order:
    constructor, one accessor per field, predicate."""
    fns: dict[str, object] = {}
    ctor = StructureConstructor(struct_type)
    fns[ctor.name] = ctor
    for i in range(struct_type.arity):
        acc = StructureAccessor(struct_type, i)
        fns[acc.name] = acc
    pred = StructurePredicate(struct_type)
    fns[pred.name] = pred
    return fns
