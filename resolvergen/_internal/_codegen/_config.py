# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Mapping configuration and external symbol references."""

from __future__ import annotations
from typing import TYPE_CHECKING, Any

import pydantic

from resolvergen.errors import ConfigError
from resolvergen._internal._reflection._base import struct

if TYPE_CHECKING:
    from collections.abc import Mapping


DEFAULT_EXPORT = "default"


@struct
class SymbolRef:
    """A reference to a type defined outside of the generated module.

    *name* is the identifier used inside type expressions.  For external
    references *module* is the import source and *imported* the exported
    name (``"default"`` for default exports); internal references have no
    module and are rendered verbatim.
    """

    name: str
    module: str | None = None
    imported: str | None = None

    @property
    def is_external(self) -> bool:
        return self.module is not None

    @property
    def is_default(self) -> bool:
        return self.imported == DEFAULT_EXPORT


def parse_symbol_ref(
    spec: str,
    *,
    default_alias: str | None = None,
) -> SymbolRef:
    """Parse a ``path#Symbol`` reference.

    Supported forms::

        ./entities#AuthorEntity          named export
        ./scalars#default                default export, bound to default_alias
        ./entities#Author as AuthorRow   named export bound to an alias
        \\#src/entities#UserEntity        subpath import (leading '#' kept)
        Date                             internal reference, no import
    """
    text = spec.strip()
    if not text:
        raise ConfigError("empty type reference")
    if text.startswith("\\#"):
        text = text[1:]

    path, sep, symbol = text.rpartition("#")
    if not sep:
        return SymbolRef(name=text)

    symbol = symbol.strip()
    if not path or not symbol:
        raise ConfigError(f"invalid type reference {spec!r}")

    imported, as_kw, alias = symbol.partition(" as ")
    imported = imported.strip()
    if as_kw:
        alias = alias.strip()
        if not alias.isidentifier():
            raise ConfigError(f"invalid import alias in {spec!r}")
        name = alias
    elif imported == DEFAULT_EXPORT:
        if default_alias is None:
            raise ConfigError(
                f"default import {spec!r} needs an alias: "
                f"use '{path}#default as Name'"
            )
        name = default_alias
    else:
        name = imported

    if not imported.isidentifier():
        raise ConfigError(f"invalid symbol name in {spec!r}")

    return SymbolRef(name=name, module=path, imported=imported)


class Config(pydantic.BaseModel):
    """User-supplied type overrides.

    Keys follow the graphql-codegen spelling (``contextType``,
    ``enumValues``); the snake_case field names are accepted too.  Keys
    this tool does not understand are ignored.
    """

    model_config = pydantic.ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    context_type: str = pydantic.Field(alias="contextType")
    scalars: dict[str, str] = pydantic.Field(default_factory=dict)
    mappers: dict[str, str] = pydantic.Field(default_factory=dict)
    enum_values: dict[str, str] = pydantic.Field(
        default_factory=dict,
        alias="enumValues",
    )

    @pydantic.model_validator(mode="after")
    def _check_references(self) -> Config:
        try:
            self.context_symbol()
            for table in (self.scalars, self.mappers):
                for name, spec in table.items():
                    if spec:
                        parse_symbol_ref(spec, default_alias=name)
            for name, spec in self.enum_values.items():
                if not spec:
                    continue
                ref = parse_symbol_ref(spec, default_alias=name)
                if not ref.is_external:
                    raise ConfigError(
                        f"enumValues.{name}: {spec!r} does not name a "
                        f"module, expected 'path#Symbol'"
                    )
        except ConfigError as e:
            raise ValueError(str(e)) from None
        return self

    @classmethod
    def load(cls, data: Mapping[str, Any]) -> Config:
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise ConfigError(f"invalid configuration: {e}") from e

    def context_symbol(self) -> SymbolRef:
        return parse_symbol_ref(self.context_type, default_alias="Context")

    def _lookup(self, table: Mapping[str, str], name: str) -> SymbolRef | None:
        spec = table.get(name)
        if not spec:
            return None
        return parse_symbol_ref(spec, default_alias=name)

    def scalar_symbol(self, name: str) -> SymbolRef | None:
        return self._lookup(self.scalars, name)

    def mapper_symbol(self, name: str) -> SymbolRef | None:
        return self._lookup(self.mappers, name)

    def enum_symbol(self, name: str) -> SymbolRef | None:
        return self._lookup(self.enum_values, name)

    def is_mapped(self, name: str) -> bool:
        return bool(self.mappers.get(name))
