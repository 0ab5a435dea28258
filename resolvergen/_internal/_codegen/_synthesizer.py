# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Walk a schema catalogue and produce the full declaration set."""

from __future__ import annotations
from typing import TYPE_CHECKING

import logging

from resolvergen.errors import SchemaContractError
from resolvergen._internal import _reflection as reflection
from resolvergen._internal._reflection import BUILTIN_SCALARS

from . import _declarations as decl
from ._implementors import build_implementor_index
from ._mapping import TypeMapper
from ._naming import upper_first
from ._typeexpr import EMPTY, NamedRef, is_nullable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._config import Config
    from ._typeexpr import TypeExpr


logger = logging.getLogger(__name__)


def synthesize(
    catalogue: reflection.SchemaCatalogue,
    config: Config,
) -> decl.DeclarationSet:
    catalogue.validate()
    index = build_implementor_index(catalogue)
    mapper = TypeMapper(catalogue, config, index)
    return DeclarationSynthesizer(mapper).run()


class DeclarationSynthesizer:
    """Produce declarations in their fixed output order.

    Object types split in two groups: *needs-handler* types (root query
    and mutation types, and types backed by a mapper) must be resolved
    explicitly, every other object type may be resolved and also gets a
    plain data shape.
    """

    def __init__(self, mapper: TypeMapper) -> None:
        self._mapper = mapper
        self._catalogue = mapper.catalogue
        self._arguments: list[decl.ArgumentRecord] = []

    def run(self) -> decl.DeclarationSet:
        self._arguments = []
        cat = self._catalogue
        mapper = self._mapper

        objects = cat.object_types()
        required = [
            t
            for t in objects
            if cat.is_root_type(t.name) or mapper.is_mapped(t.name)
        ]
        optional = [t for t in objects if t not in required]
        interfaces = cat.interface_types()
        unmapped_ifaces = [
            t for t in interfaces if not mapper.is_mapped(t.name)
        ]

        out: list[decl.Declaration] = [
            decl.ResolversContract(
                required=tuple(t.name for t in required),
                optional=tuple(t.name for t in optional),
                scalars=tuple(
                    decl.ScalarDeclaration(name=t.name)
                    for t in cat.scalar_types()
                    if t.name not in BUILTIN_SCALARS
                ),
            )
        ]

        for iface in interfaces:
            if not mapper.is_mapped(iface.name):
                out.append(self._interface_contract(iface))
            if mapper.implementors.get(iface.name):
                out.append(
                    decl.ImplementorsAlias(
                        name=iface.name,
                        members=mapper.interface_members(iface.name),
                    )
                )

        out.append(self._discrimination_table(interfaces))
        out.extend(self._type_resolvers(t) for t in required)
        out.extend(self._type_resolvers(t) for t in optional)
        context = mapper.config.context_symbol()
        out.append(decl.ResolverHelpers(context=context))
        out.extend(self._arguments)
        out.extend(self._data_shape(t) for t in optional)
        out.extend(self._data_shape(t) for t in unmapped_ifaces)
        out.extend(
            decl.InputShape(
                name=t.name,
                properties=self._properties(t.name, t.fields, optional=True),
            )
            for t in cat.input_object_types()
        )
        out.extend(mapper.synthesize_enum(t) for t in cat.enum_types())
        out.extend(
            decl.UnionAlias(name=t.name, members=mapper.union_members(t.name))
            for t in cat.union_types()
        )

        logger.debug(
            "synthesized %d declarations (%d required resolvers, "
            "%d optional resolvers, %d argument records)",
            len(out),
            len(required),
            len(optional),
            len(self._arguments),
        )
        return decl.DeclarationSet(declarations=tuple(out))

    def _interface_contract(
        self,
        iface: reflection.InterfaceType,
    ) -> decl.InterfaceContract:
        return decl.InterfaceContract(
            name=iface.name,
            fields=tuple(
                self._resolver_field(iface.name, decl.GENERIC_ROOT, field)
                for field in iface.fields
            ),
        )

    def _discrimination_table(
        self,
        interfaces: Iterable[reflection.InterfaceType],
    ) -> decl.DiscriminationTable:
        mapper = self._mapper
        entries = [
            decl.DiscriminationEntry(
                name=t.name,
                members=mapper.union_members(t.name),
            )
            for t in self._catalogue.union_types()
        ]
        entries.extend(
            decl.DiscriminationEntry(
                name=t.name,
                members=mapper.interface_members(t.name),
            )
            for t in interfaces
            if mapper.implementors.get(t.name)
        )
        return decl.DiscriminationTable(entries=tuple(entries))

    def _type_resolvers(
        self,
        obj: reflection.ObjectType,
    ) -> decl.TypeResolvers:
        mapper = self._mapper
        root = mapper.map_object(obj.name)

        extends: list[decl.ContractExtension] = []
        inherited: set[str] = set()
        for iface_name in obj.interfaces:
            if mapper.is_mapped(iface_name):
                # The mapper type already carries the shared fields.
                continue
            iface = self._catalogue.get(iface_name, referrer=obj.name)
            if not reflection.is_interface_type(iface):
                raise SchemaContractError(
                    f"{obj.name} implements {iface_name!r}, "
                    f"which is not an interface"
                )
            extends.append(
                decl.ContractExtension(interface=iface_name, root=root)
            )
            inherited.update(iface.field_names())

        subscription = self._catalogue.is_subscription_type(obj.name)
        return decl.TypeResolvers(
            name=obj.name,
            extends=tuple(extends),
            fields=tuple(
                self._resolver_field(
                    obj.name, root, field, subscription=subscription
                )
                for field in obj.fields
                if field.name not in inherited
            ),
        )

    def _resolver_field(
        self,
        owner: str,
        root: TypeExpr,
        field: reflection.Field,
        *,
        subscription: bool = False,
    ) -> decl.ResolverField:
        return decl.ResolverField(
            name=field.name,
            root=root,
            args=self._argument_record(owner, field),
            result=self._mapper.map_type(
                field.type,
                mutable=False,
                referrer=f"{owner}.{field.name}",
            ),
            subscription=subscription,
        )

    def _argument_record(
        self,
        owner: str,
        field: reflection.Field,
    ) -> TypeExpr:
        if not field.args:
            return EMPTY
        name = f"{owner}{upper_first(field.name)}Args"
        self._arguments.append(
            decl.ArgumentRecord(
                name=name,
                properties=self._properties(
                    f"{owner}.{field.name}", field.args, optional=True
                ),
            )
        )
        return NamedRef(name=name)

    def _data_shape(
        self,
        t: reflection.ObjectType | reflection.InterfaceType,
    ) -> decl.DataShape:
        return decl.DataShape(
            name=t.name,
            properties=tuple(
                decl.PropertySignature(
                    name=field.name,
                    type=self._mapper.map_type(
                        field.type,
                        mutable=True,
                        referrer=f"{t.name}.{field.name}",
                    ),
                )
                for field in t.fields
            ),
        )

    def _properties(
        self,
        owner: str,
        values: Iterable[reflection.InputValue],
        *,
        optional: bool,
    ) -> tuple[decl.PropertySignature, ...]:
        props = []
        for value in values:
            ty = self._mapper.map_type(
                value.type,
                mutable=True,
                referrer=f"{owner}.{value.name}",
            )
            props.append(
                decl.PropertySignature(
                    name=value.name,
                    type=ty,
                    optional=optional and is_nullable(ty),
                )
            )
        return tuple(props)
