# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Declaration records produced by the synthesizer.

Each record holds everything needed to render one top-level TypeScript
declaration; the emitter never goes back to the schema.  Names stored
on the records are schema type names, the emitter derives the
``<Name>Resolvers`` / ``<Name>Types`` spellings from them.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, TypeVar
from typing_extensions import TypeAliasType

from resolvergen._internal._reflection._base import struct

from ._typeexpr import NamedRef

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._config import SymbolRef
    from ._typeexpr import TypeExpr


# Root type parameter of generic interface resolver contracts.
GENERIC_ROOT = NamedRef(name="T")


@struct
class ScalarDeclaration:
    name: str


@struct
class ResolversContract:
    """The top-level ``Resolvers`` interface."""

    required: tuple[str, ...]
    optional: tuple[str, ...]
    scalars: tuple[ScalarDeclaration, ...]


@struct
class ResolverField:
    name: str
    root: TypeExpr
    args: TypeExpr
    result: TypeExpr
    subscription: bool = False


@struct
class InterfaceContract:
    """Generic resolver contract shared by an interface's implementors."""

    name: str
    fields: tuple[ResolverField, ...]


@struct
class ImplementorsAlias:
    name: str
    members: tuple[TypeExpr, ...]


@struct
class DiscriminationEntry:
    name: str
    members: tuple[TypeExpr, ...]


@struct
class DiscriminationTable:
    entries: tuple[DiscriminationEntry, ...]


@struct
class ContractExtension:
    interface: str
    root: TypeExpr


@struct
class TypeResolvers:
    name: str
    extends: tuple[ContractExtension, ...]
    fields: tuple[ResolverField, ...]


@struct
class ResolverHelpers:
    context: SymbolRef


@struct
class PropertySignature:
    name: str
    type: TypeExpr
    optional: bool = False


@struct
class ArgumentRecord:
    name: str
    properties: tuple[PropertySignature, ...]


@struct
class DataShape:
    name: str
    properties: tuple[PropertySignature, ...]


@struct
class InputShape:
    name: str
    properties: tuple[PropertySignature, ...]


@struct
class EnumMember:
    name: str
    value: str


@struct
class EnumDeclaration:
    name: str
    members: tuple[EnumMember, ...]


@struct
class EnumReexport:
    name: str
    symbol: SymbolRef


@struct
class UnionAlias:
    name: str
    members: tuple[TypeExpr, ...]


Declaration = TypeAliasType(
    "Declaration",
    ResolversContract
    | InterfaceContract
    | ImplementorsAlias
    | DiscriminationTable
    | TypeResolvers
    | ResolverHelpers
    | ArgumentRecord
    | DataShape
    | InputShape
    | EnumDeclaration
    | EnumReexport
    | UnionAlias,
)


_D = TypeVar("_D")


@struct
class DeclarationSet:
    declarations: tuple[Declaration, ...]

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def of_type(self, cls: type[_D]) -> tuple[_D, ...]:
        return tuple(d for d in self.declarations if isinstance(d, cls))

    def find(self, cls: type[_D], name: str) -> _D | None:
        for d in self.of_type(cls):
            if getattr(d, "name", None) == name:
                return d
        return None
