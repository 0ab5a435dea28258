# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Build a SchemaCatalogue from a graphql-core schema."""

from __future__ import annotations
from typing import TYPE_CHECKING

import graphql

from resolvergen.errors import SchemaContractError

from ._catalogue import SchemaCatalogue
from ._types import (
    AnyType,
    EnumType,
    Field,
    InputObjectType,
    InputValue,
    InterfaceType,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectType,
    ScalarType,
    TypeRef,
    UnionType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _type_ref(t: graphql.GraphQLType) -> TypeRef:
    if isinstance(t, graphql.GraphQLNonNull):
        return NonNullTypeRef(of_type=_type_ref(t.of_type))
    elif isinstance(t, graphql.GraphQLList):
        return ListTypeRef(of_type=_type_ref(t.of_type))
    elif isinstance(t, graphql.GraphQLNamedType):
        return NamedTypeRef(name=t.name)
    else:
        raise SchemaContractError(f"unsupported GraphQL type {t!r}")


def _input_values(
    values: Mapping[str, graphql.GraphQLArgument]
    | Mapping[str, graphql.GraphQLInputField],
) -> tuple[InputValue, ...]:
    return tuple(
        InputValue(
            name=name,
            type=_type_ref(v.type),
            description=v.description,
        )
        for name, v in values.items()
    )


def _fields(
    fields: Mapping[str, graphql.GraphQLField],
) -> tuple[Field, ...]:
    return tuple(
        Field(
            name=name,
            type=_type_ref(f.type),
            args=_input_values(f.args),
            description=f.description,
        )
        for name, f in fields.items()
    )


def _named_type(t: graphql.GraphQLNamedType) -> AnyType:
    if isinstance(t, graphql.GraphQLObjectType):
        return ObjectType(
            name=t.name,
            description=t.description,
            fields=_fields(t.fields),
            interfaces=tuple(i.name for i in t.interfaces),
        )
    elif isinstance(t, graphql.GraphQLInterfaceType):
        return InterfaceType(
            name=t.name,
            description=t.description,
            fields=_fields(t.fields),
        )
    elif isinstance(t, graphql.GraphQLUnionType):
        return UnionType(
            name=t.name,
            description=t.description,
            members=tuple(m.name for m in t.types),
        )
    elif isinstance(t, graphql.GraphQLEnumType):
        return EnumType(
            name=t.name,
            description=t.description,
            values=tuple(t.values),
        )
    elif isinstance(t, graphql.GraphQLScalarType):
        return ScalarType(name=t.name, description=t.description)
    elif isinstance(t, graphql.GraphQLInputObjectType):
        return InputObjectType(
            name=t.name,
            description=t.description,
            fields=_input_values(t.fields),
        )
    else:
        raise SchemaContractError(f"unsupported GraphQL type {t!r}")


def catalogue_from_schema(schema: graphql.GraphQLSchema) -> SchemaCatalogue:
    """Convert a graphql-core schema, keeping its type map order."""
    types = [
        _named_type(t)
        for name, t in schema.type_map.items()
        if not name.startswith("__")
    ]

    def _root_name(t: graphql.GraphQLObjectType | None) -> str | None:
        return t.name if t is not None else None

    return SchemaCatalogue(
        types,
        query_type=_root_name(schema.query_type),
        mutation_type=_root_name(schema.mutation_type),
        subscription_type=_root_name(schema.subscription_type),
    )


def catalogue_from_sdl(sdl: str) -> SchemaCatalogue:
    """Parse SDL text with graphql-core and convert the resulting schema."""
    try:
        schema = graphql.build_schema(sdl)
    except graphql.GraphQLError as e:
        raise SchemaContractError(f"invalid schema: {e.message}") from e
    except TypeError as e:
        # graphql-core reports SDL validation failures as TypeError
        raise SchemaContractError(f"invalid schema: {e}") from e
    return catalogue_from_schema(schema)
