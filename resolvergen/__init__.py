# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Generate TypeScript resolver contracts from a GraphQL schema."""

from __future__ import annotations
from typing import TYPE_CHECKING, Any

import graphql

from .errors import (
    ConfigError,
    EnumMemberCollisionError,
    ResolverGenError,
    SchemaContractError,
    UnknownTypeError,
)
from ._internal._codegen import (
    Config,
    DeclarationSet,
    emit,
    synthesize,
)
from ._internal._reflection import (
    SchemaCatalogue,
    catalogue_from_schema,
    catalogue_from_sdl,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


__version__ = "0.1.0"

__all__ = (
    "Config",
    "ConfigError",
    "DeclarationSet",
    "EnumMemberCollisionError",
    "ResolverGenError",
    "SchemaCatalogue",
    "SchemaContractError",
    "UnknownTypeError",
    "generate",
    "generate_from_sdl",
)


def _as_config(config: Config | Mapping[str, Any]) -> Config:
    if isinstance(config, Config):
        return config
    return Config.load(config)


def generate(
    schema: SchemaCatalogue | graphql.GraphQLSchema,
    config: Config | Mapping[str, Any],
    *,
    preamble: str | None = None,
) -> str:
    """Return the TypeScript module declaring resolvers for *schema*.

    *config* is a :class:`Config` or the raw mapping it is loaded from.
    """
    if isinstance(schema, graphql.GraphQLSchema):
        catalogue = catalogue_from_schema(schema)
    else:
        catalogue = schema
    declarations = synthesize(catalogue, _as_config(config))
    return emit(declarations, preamble=preamble)


def generate_from_sdl(
    sdl: str,
    config: Config | Mapping[str, Any],
    *,
    preamble: str | None = None,
) -> str:
    return generate(catalogue_from_sdl(sdl), config, preamble=preamble)
