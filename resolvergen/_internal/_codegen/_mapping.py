# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Mapping of schema types to output type expressions.

``TypeMapper.map_type`` is the single recursive entry point: it walks the
non-null/list wrapper chain of a type reference and hands the named type
at the bottom to the scalar, enum or composite resolvers.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import logging

from resolvergen.errors import EnumMemberCollisionError, SchemaContractError
from resolvergen._internal import _reflection as reflection
from resolvergen._internal._reflection import TypeKind

from . import _declarations as decl
from ._naming import pascal_case
from ._typeexpr import (
    BOOLEAN,
    EMPTY,
    NUMBER,
    STRING,
    CompositeRef,
    ExternalRef,
    ListOf,
    NamedRef,
    NonNullableExpr,
    Primitive,
    TypeExpr,
    UnionOf,
    is_nullable,
    nullable_of,
    strip_nullable,
)

if TYPE_CHECKING:
    from ._config import Config
    from ._implementors import ImplementorIndex


logger = logging.getLogger(__name__)


PRIMITIVE_SCALARS: dict[str, Primitive] = {
    "String": STRING,
    "ID": STRING,
    "Int": NUMBER,
    "Float": NUMBER,
    "Boolean": BOOLEAN,
}


class TypeMapper:
    def __init__(
        self,
        catalogue: reflection.SchemaCatalogue,
        config: Config,
        implementors: ImplementorIndex,
    ) -> None:
        self._catalogue = catalogue
        self._config = config
        self._implementors = implementors
        self._warned_scalars: set[str] = set()

    @property
    def catalogue(self) -> reflection.SchemaCatalogue:
        return self._catalogue

    @property
    def config(self) -> Config:
        return self._config

    @property
    def implementors(self) -> ImplementorIndex:
        return self._implementors

    def map_type(
        self,
        ref: reflection.TypeRef,
        *,
        mutable: bool,
        referrer: str | None = None,
    ) -> TypeExpr:
        """Map a field, argument or input type reference.

        Every level starts out nullable; a non-null wrapper strips the
        nullability of its immediate child.  *mutable* selects mutable
        containers (data shapes, inputs, arguments) over read-only ones
        (resolver results).
        """
        match ref:
            case reflection.NonNullTypeRef(
                of_type=reflection.NonNullTypeRef()
            ):
                where = f" in {referrer}" if referrer else ""
                raise SchemaContractError(
                    f"non-null type wrapped in non-null{where}: {ref}"
                )
            case reflection.NonNullTypeRef(of_type=inner):
                mapped = self.map_type(
                    inner, mutable=mutable, referrer=referrer
                )
                return strip_nullable(mapped)
            case reflection.ListTypeRef(of_type=inner):
                element = self.map_type(
                    inner, mutable=mutable, referrer=referrer
                )
                generic = is_nullable(element) or self._is_abstract(
                    inner, referrer=referrer
                )
                return nullable_of(
                    ListOf(element=element, mutable=mutable, generic=generic)
                )
            case reflection.NamedTypeRef(name=name):
                return nullable_of(self.map_named(name, referrer=referrer))
            case _:
                raise SchemaContractError(
                    f"unsupported type reference {ref!r}"
                )

    def _is_abstract(
        self,
        ref: reflection.TypeRef,
        *,
        referrer: str | None,
    ) -> bool:
        t = self._catalogue.get_ref(ref, referrer=referrer)
        return t.kind.is_abstract()

    def map_named(
        self,
        name: str,
        *,
        referrer: str | None = None,
    ) -> NonNullableExpr:
        t = self._catalogue.get(name, referrer=referrer)
        match t.kind:
            case TypeKind.Object:
                return self.map_object(name)
            case TypeKind.Interface:
                return self.map_interface(name)
            case TypeKind.Union | TypeKind.InputObject:
                return NamedRef(name=name)
            case TypeKind.Enum:
                return self.map_enum(name)
            case TypeKind.Scalar:
                return self.map_scalar(name)
            case _:
                raise SchemaContractError(f"unsupported type kind {t.kind}")

    def map_scalar(self, name: str) -> Primitive | NamedRef | ExternalRef:
        prim = PRIMITIVE_SCALARS.get(name)
        if prim is not None:
            return prim
        symbol = self._config.scalar_symbol(name)
        if symbol is not None:
            return ExternalRef(symbol=symbol)
        if name not in self._warned_scalars:
            self._warned_scalars.add(name)
            logger.warning(
                "no type configured for scalar %s, "
                "emitting its name as a placeholder",
                name,
            )
        return NamedRef(name=name)

    def map_enum(self, name: str) -> NamedRef | ExternalRef:
        symbol = self._config.enum_symbol(name)
        if symbol is not None:
            return ExternalRef(symbol=symbol)
        return NamedRef(name=name)

    def synthesize_enum(
        self,
        t: reflection.EnumType,
    ) -> decl.EnumDeclaration | decl.EnumReexport:
        symbol = self._config.enum_symbol(t.name)
        if symbol is not None:
            return decl.EnumReexport(name=t.name, symbol=symbol)

        members: list[decl.EnumMember] = []
        seen: dict[str, str] = {}
        for value in t.values:
            ident = pascal_case(value)
            other = seen.get(ident)
            if other is not None:
                raise EnumMemberCollisionError(t.name, ident, (other, value))
            seen[ident] = value
            members.append(decl.EnumMember(name=ident, value=value))

        return decl.EnumDeclaration(name=t.name, members=tuple(members))

    def is_mapped(self, name: str) -> bool:
        return self._config.is_mapped(name)

    def map_object(self, name: str) -> CompositeRef:
        """The root value type handed to resolvers of *name*."""
        if self._catalogue.is_root_type(name):
            return EMPTY
        symbol = self._config.mapper_symbol(name)
        if symbol is not None:
            return ExternalRef(symbol=symbol)
        return NamedRef(name=name)

    def map_interface(self, name: str) -> NamedRef | ExternalRef | UnionOf:
        """The type of a field declared with interface type *name*.

        Implementors backed by a mapper do not satisfy the synthesized
        interface shape, so they are listed next to it explicitly.
        """
        symbol = self._config.mapper_symbol(name)
        if symbol is not None:
            return ExternalRef(symbol=symbol)

        own = NamedRef(name=name)
        mapped: list[TypeExpr] = [
            self.map_object(impl)
            for impl in self._implementors.get(name, ())
            if self.is_mapped(impl)
        ]
        if not mapped:
            return own
        return UnionOf(members=(*mapped, own))

    def interface_members(self, name: str) -> tuple[TypeExpr, ...]:
        """Concrete types that may back a value of interface *name*."""
        symbol = self._config.mapper_symbol(name)
        if symbol is not None:
            return (ExternalRef(symbol=symbol),)
        return tuple(
            self.map_object(impl) for impl in self._implementors.get(name, ())
        )

    def union_members(self, name: str) -> tuple[TypeExpr, ...]:
        t = self._catalogue.get(name)
        if not reflection.is_union_type(t):
            raise SchemaContractError(f"{name} is not a union type")
        return tuple(
            self.map_named(member, referrer=f"union {name}")
            for member in t.members
        )
