# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

from ._enums import (
    BUILTIN_SCALARS,
    RootOperation,
    TypeKind,
)

from ._types import (
    AnyType,
    EnumType,
    Field,
    InputObjectType,
    InputValue,
    InterfaceType,
    ListTypeRef,
    NamedType,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectType,
    ScalarType,
    TypeRef,
    UnionType,
    is_interface_type,
    is_union_type,
    unwrap,
)

from ._catalogue import (
    SchemaCatalogue,
)

from ._graphql import (
    catalogue_from_schema,
    catalogue_from_sdl,
)

__all__ = (
    "BUILTIN_SCALARS",
    "AnyType",
    "EnumType",
    "Field",
    "InputObjectType",
    "InputValue",
    "InterfaceType",
    "ListTypeRef",
    "NamedType",
    "NamedTypeRef",
    "NonNullTypeRef",
    "ObjectType",
    "RootOperation",
    "ScalarType",
    "SchemaCatalogue",
    "TypeKind",
    "TypeRef",
    "UnionType",
    "catalogue_from_schema",
    "catalogue_from_sdl",
    "is_interface_type",
    "is_union_type",
    "unwrap",
)
