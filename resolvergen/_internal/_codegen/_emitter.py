# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Render a declaration set as a TypeScript module."""

from __future__ import annotations
from typing import TYPE_CHECKING

import io
import logging

from resolvergen.errors import ConfigError

from . import _declarations as decl
from ._module import GeneratedModule
from ._typeexpr import (
    EmptyRecord,
    ExternalRef,
    ListOf,
    NamedRef,
    Nullable,
    Primitive,
    UnionOf,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._config import SymbolRef
    from ._typeexpr import TypeExpr


logger = logging.getLogger(__name__)


GRAPHQL_MODULE = "graphql"

RESOLVERS = "Resolvers"
UNION_RESOLVERS = "UnionResolvers"
HELPER_NAMES = (
    "MaybePromise",
    "Resolver",
    "SubscriptionResolverFilter",
    "SubscriptionResolver",
)


def emit(
    declarations: decl.DeclarationSet,
    *,
    preamble: str | None = None,
) -> str:
    """Render *declarations* in order and return the module text."""
    emitter = TypeScriptEmitter(preamble=preamble)
    emitter.write_declarations(declarations)
    out = io.StringIO()
    emitter.output(out)
    return out.getvalue()


def declared_names(declaration: decl.Declaration) -> list[str]:
    """Module-level identifiers introduced by *declaration*."""
    match declaration:
        case decl.ResolversContract():
            return [RESOLVERS]
        case decl.InterfaceContract(name=name) | decl.TypeResolvers(name=name):
            return [f"{name}Resolvers"]
        case decl.ImplementorsAlias(name=name):
            return [f"{name}Types"]
        case decl.DiscriminationTable():
            return [UNION_RESOLVERS]
        case decl.ResolverHelpers():
            return list(HELPER_NAMES)
        case (
            decl.ArgumentRecord(name=name)
            | decl.DataShape(name=name)
            | decl.InputShape(name=name)
            | decl.EnumDeclaration(name=name)
            | decl.UnionAlias(name=name)
        ):
            return [name]
        case _:
            # re-exports do not bind a local name
            return []


class TypeScriptEmitter:
    def __init__(self, *, preamble: str | None = None) -> None:
        self.ts_file = GeneratedModule(preamble)

    def write(self, text: str = "") -> None:
        self.ts_file.write(text)

    def write_section_break(self, size: int = 1) -> None:
        self.ts_file.write_section_break(size)

    def import_name(
        self,
        module: str,
        name: str,
        *,
        alias: str | None = None,
        type_only: bool = False,
    ) -> str:
        return self.ts_file.import_name(
            module, name, alias=alias, type_only=type_only
        )

    def output(self, out: io.TextIOBase) -> None:
        self.ts_file.output(out)

    def write_declarations(self, declarations: decl.DeclarationSet) -> None:
        # Reserve every declared name first so that imports never shadow
        # a declaration, wherever it appears in the module.
        for declaration in declarations:
            self.ts_file.update_globals(declared_names(declaration))

        for declaration in declarations:
            self.write_declaration(declaration)
            self.write_section_break()

    def write_declaration(self, declaration: decl.Declaration) -> None:
        match declaration:
            case decl.ResolversContract():
                self.write_resolvers_contract(declaration)
            case decl.InterfaceContract():
                self.write_interface_contract(declaration)
            case decl.ImplementorsAlias():
                self.write_type_alias(
                    f"{declaration.name}Types", declaration.members
                )
            case decl.DiscriminationTable():
                self.write_discrimination_table(declaration)
            case decl.TypeResolvers():
                self.write_type_resolvers(declaration)
            case decl.ResolverHelpers():
                self.write_resolver_helpers(declaration)
            case (
                decl.ArgumentRecord()
                | decl.DataShape()
                | decl.InputShape()
            ):
                self.write_interface(declaration.name, declaration.properties)
            case decl.EnumDeclaration():
                self.write_enum(declaration)
            case decl.EnumReexport():
                self.write_enum_reexport(declaration)
            case decl.UnionAlias():
                self.write_type_alias(declaration.name, declaration.members)
            case _:
                raise TypeError(f"unexpected declaration: {declaration!r}")

    def render_symbol(self, symbol: SymbolRef) -> str:
        if symbol.module is None or symbol.imported is None:
            return symbol.name
        alias = None if symbol.name == symbol.imported else symbol.name
        return self.import_name(symbol.module, symbol.imported, alias=alias)

    def render_type(self, expr: TypeExpr) -> str:
        match expr:
            case Primitive(name=name) | NamedRef(name=name):
                return name
            case EmptyRecord():
                return "{}"
            case ExternalRef(symbol=symbol):
                return self.render_symbol(symbol)
            case Nullable(inner=inner):
                return f"{self.render_type(inner)} | null | undefined"
            case UnionOf(members=members):
                return " | ".join(self.render_type(m) for m in members)
            case ListOf(element=element, mutable=mutable, generic=True):
                container = "Array" if mutable else "ReadonlyArray"
                return f"{container}<{self.render_type(element)}>"
            case ListOf(element=element, mutable=mutable):
                rendered = self.render_type(element)
                if isinstance(element, UnionOf) or (
                    isinstance(element, ListOf)
                    and not element.generic
                    and not element.mutable
                ):
                    rendered = f"({rendered})"
                prefix = "" if mutable else "readonly "
                return f"{prefix}{rendered}[]"
            case _:
                raise TypeError(f"unexpected type expression: {expr!r}")

    def _render_signature(self, field: decl.ResolverField) -> str:
        shape = "SubscriptionResolver" if field.subscription else "Resolver"
        root = self.render_type(field.root)
        args = self.render_type(field.args)
        result = self.render_type(field.result)
        return f"{field.name}: {shape}<{root}, {args}, {result}>;"

    def _write_body(self, header: str, lines: Iterable[str]) -> None:
        lines = list(lines)
        if not lines:
            self.write(f"{header} {{}}")
            return
        self.write(f"{header} {{")
        with self.ts_file.indented():
            for line in lines:
                self.write(line)
        self.write("}")

    def write_resolvers_contract(
        self,
        contract: decl.ResolversContract,
    ) -> None:
        lines = [f"{name}: {name}Resolvers;" for name in contract.required]
        lines.extend(
            f"{name}?: {name}Resolvers;" for name in contract.optional
        )
        if contract.scalars:
            scalar_type = self.import_name(GRAPHQL_MODULE, "GraphQLScalarType")
            lines.extend(
                f"{scalar.name}: {scalar_type};" for scalar in contract.scalars
            )
        self._write_body(f"export interface {RESOLVERS}", lines)

    def write_interface_contract(
        self,
        contract: decl.InterfaceContract,
    ) -> None:
        root = self.render_type(decl.GENERIC_ROOT)
        self._write_body(
            f"export interface {contract.name}Resolvers<{root}>",
            (self._render_signature(f) for f in contract.fields),
        )

    def write_type_resolvers(self, resolvers: decl.TypeResolvers) -> None:
        header = f"export interface {resolvers.name}Resolvers"
        if resolvers.extends:
            bases = ", ".join(
                f"{ext.interface}Resolvers<{self.render_type(ext.root)}>"
                for ext in resolvers.extends
            )
            header = f"{header} extends {bases}"
        self._write_body(
            header,
            (self._render_signature(f) for f in resolvers.fields),
        )

    def write_discrimination_table(
        self,
        table: decl.DiscriminationTable,
    ) -> None:
        entries = []
        for entry in table.entries:
            members = " | ".join(self.render_type(m) for m in entry.members)
            entries.append(
                f"{entry.name}: {{ __resolveType(o: {members}): string }}"
            )
        self.write(
            self.ts_file.format_list(
                f"export type {UNION_RESOLVERS} = {{{{{{list}}}}}};",
                entries,
                separator="; ",
                padded=True,
            )
        )

    def write_resolver_helpers(self, helpers: decl.ResolverHelpers) -> None:
        ctx = self.render_symbol(helpers.context)
        info = self.import_name(
            GRAPHQL_MODULE, "GraphQLResolveInfo", type_only=True
        )
        params = f"ctx: {ctx}, info: {info}"
        self.write("type MaybePromise<T> = T | Promise<T>;")
        self.write(
            f"export type Resolver<R, A, T> = "
            f"(root: R, args: A, {params}) => MaybePromise<T>;"
        )
        self.write_section_break()
        self.write("export type SubscriptionResolverFilter<R, A, T> = (")
        with self.ts_file.indented():
            self.write("root: R | undefined,")
            self.write("args: A,")
            self.write(f"ctx: {ctx},")
            self.write(f"info: {info},")
        self.write(") => boolean | Promise<boolean>;")
        self.write("export type SubscriptionResolver<R, A, T> = {")
        with self.ts_file.indented():
            self.write(
                f"subscribe: (root: R | undefined, args: A, {params}) "
                f"=> AsyncIterator<T>;"
            )
        self.write("};")

    def write_interface(
        self,
        name: str,
        properties: Iterable[decl.PropertySignature],
    ) -> None:
        self._write_body(
            f"export interface {name}",
            (
                f"{prop.name}{'?' if prop.optional else ''}: "
                f"{self.render_type(prop.type)};"
                for prop in properties
            ),
        )

    def write_enum(self, enum: decl.EnumDeclaration) -> None:
        self._write_body(
            f"export enum {enum.name}",
            (f'{member.name} = "{member.value}",' for member in enum.members),
        )

    def write_enum_reexport(self, reexport: decl.EnumReexport) -> None:
        symbol = reexport.symbol
        if symbol.module is None or symbol.imported is None:
            raise ConfigError(
                f"enum {reexport.name}: {symbol.name!r} does not name a "
                f"module to re-export from"
            )
        if symbol.imported == symbol.name:
            spec = symbol.name
        else:
            spec = f"{symbol.imported} as {symbol.name}"
        self.write(f'export {{ {spec} }} from "{symbol.module}";')

    def write_type_alias(
        self,
        name: str,
        members: Iterable[TypeExpr],
    ) -> None:
        rendered = [self.render_type(m) for m in members]
        if not rendered:
            logger.debug("%s has no members, emitting never", name)
            rendered = ["never"]
        self.write(f"export type {name} = {' | '.join(rendered)};")
