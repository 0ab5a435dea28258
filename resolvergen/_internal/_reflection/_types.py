# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import (
    Literal,
    TypeGuard,
)
from typing_extensions import TypeAliasType

from ._base import struct, sobject, SchemaObject
from ._enums import TypeKind


@struct
class NamedTypeRef:
    name: str

    def __str__(self) -> str:
        return self.name


@struct
class ListTypeRef:
    of_type: TypeRef

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@struct
class NonNullTypeRef:
    of_type: TypeRef

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = TypeAliasType(
    "TypeRef",
    NamedTypeRef | ListTypeRef | NonNullTypeRef,
)


def unwrap(ref: TypeRef) -> NamedTypeRef:
    """Return the named type at the bottom of a wrapper chain."""
    while not isinstance(ref, NamedTypeRef):
        ref = ref.of_type
    return ref


@struct
class InputValue:
    name: str
    type: TypeRef
    description: str | None = None


@struct
class Field:
    name: str
    type: TypeRef
    args: tuple[InputValue, ...] = ()
    description: str | None = None


@sobject
class NamedType(SchemaObject):
    kind: TypeKind


@sobject
class ScalarType(NamedType):
    kind: Literal[TypeKind.Scalar] = TypeKind.Scalar


@sobject
class EnumType(NamedType):
    kind: Literal[TypeKind.Enum] = TypeKind.Enum
    values: tuple[str, ...] = ()


@sobject
class ObjectType(NamedType):
    kind: Literal[TypeKind.Object] = TypeKind.Object
    fields: tuple[Field, ...] = ()
    interfaces: tuple[str, ...] = ()

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


@sobject
class InterfaceType(NamedType):
    kind: Literal[TypeKind.Interface] = TypeKind.Interface
    fields: tuple[Field, ...] = ()

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


@sobject
class UnionType(NamedType):
    kind: Literal[TypeKind.Union] = TypeKind.Union
    members: tuple[str, ...] = ()


@sobject
class InputObjectType(NamedType):
    kind: Literal[TypeKind.InputObject] = TypeKind.InputObject
    fields: tuple[InputValue, ...] = ()


AnyType = TypeAliasType(
    "AnyType",
    ScalarType
    | EnumType
    | ObjectType
    | InterfaceType
    | UnionType
    | InputObjectType,
)


def is_interface_type(t: NamedType) -> TypeGuard[InterfaceType]:
    return isinstance(t, InterfaceType)


def is_union_type(t: NamedType) -> TypeGuard[UnionType]:
    return isinstance(t, UnionType)

