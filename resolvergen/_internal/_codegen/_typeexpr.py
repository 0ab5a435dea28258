# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Output type expressions.

Type mapping produces a small tree of immutable nodes which the emitter
later renders as TypeScript.  Optionality is carried by an explicit
``Nullable`` wrapper: schema types start out nullable and a non-null
wrapper strips exactly one ``Nullable`` layer.
"""

from __future__ import annotations
from typing_extensions import TypeAliasType

from resolvergen._internal._reflection._base import struct

from ._config import SymbolRef


@struct
class Primitive:
    name: str


@struct
class EmptyRecord:
    pass


@struct
class NamedRef:
    """Reference to a declaration synthesized into the generated module."""

    name: str


@struct
class ExternalRef:
    """Reference to a type supplied by the user's configuration."""

    symbol: SymbolRef


@struct
class ListOf:
    element: TypeExpr
    mutable: bool
    # Array<T> rather than T[]; needed when the element is nullable
    # or a union of several types.
    generic: bool


@struct
class UnionOf:
    members: tuple[TypeExpr, ...]


@struct
class Nullable:
    inner: NonNullableExpr


NonNullableExpr = TypeAliasType(
    "NonNullableExpr",
    Primitive | EmptyRecord | NamedRef | ExternalRef | ListOf | UnionOf,
)

TypeExpr = TypeAliasType("TypeExpr", NonNullableExpr | Nullable)

CompositeRef = TypeAliasType(
    "CompositeRef",
    EmptyRecord | NamedRef | ExternalRef,
)


STRING = Primitive(name="string")
NUMBER = Primitive(name="number")
BOOLEAN = Primitive(name="boolean")
EMPTY = EmptyRecord()


def nullable_of(expr: TypeExpr) -> Nullable:
    if isinstance(expr, Nullable):
        return expr
    return Nullable(inner=expr)


def strip_nullable(expr: TypeExpr) -> NonNullableExpr:
    if isinstance(expr, Nullable):
        return expr.inner
    return expr


def is_nullable(expr: TypeExpr) -> bool:
    return isinstance(expr, Nullable)

