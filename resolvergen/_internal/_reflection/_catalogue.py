# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""The ordered catalogue of named schema types.

The catalogue is the read-only view of a schema that the compiler works
from.  Types are kept in an explicit list so that everything derived from
the catalogue is emitted in declaration order; the name index is only ever
used for lookups.
"""

from __future__ import annotations
from typing import (
    TYPE_CHECKING,
    TypeVar,
)

import types

from resolvergen.errors import SchemaContractError, UnknownTypeError

from ._enums import BUILTIN_SCALARS, RootOperation, TypeKind
from ._types import (
    AnyType,
    EnumType,
    InputObjectType,
    InterfaceType,
    NamedType,
    ObjectType,
    ScalarType,
    TypeRef,
    UnionType,
    unwrap,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


_NT = TypeVar("_NT", bound=NamedType)

_BUILTIN_SCALAR_TYPES = types.MappingProxyType(
    {name: ScalarType(name=name) for name in BUILTIN_SCALARS}
)


class SchemaCatalogue:
    def __init__(
        self,
        types: Iterable[AnyType],
        *,
        query_type: str | None = RootOperation.Query.value,
        mutation_type: str | None = RootOperation.Mutation.value,
        subscription_type: str | None = RootOperation.Subscription.value,
    ) -> None:
        self._types: tuple[AnyType, ...] = tuple(types)
        self._by_name: dict[str, AnyType] = {}
        for t in self._types:
            if t.name in self._by_name:
                raise SchemaContractError(f"duplicate type name {t.name!r}")
            self._by_name[t.name] = t
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.subscription_type = subscription_type

    def __iter__(self) -> Iterator[AnyType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name or name in _BUILTIN_SCALAR_TYPES

    def __repr__(self) -> str:
        return f"<{type(self).__name__} of {len(self._types)} types>"

    def get(self, name: str, *, referrer: str | None = None) -> AnyType:
        t = self._by_name.get(name)
        if t is None:
            t = _BUILTIN_SCALAR_TYPES.get(name)
        if t is None:
            raise UnknownTypeError(name, referrer=referrer)
        return t

    def get_ref(self, ref: TypeRef, *, referrer: str | None = None) -> AnyType:
        return self.get(unwrap(ref).name, referrer=referrer)

    def kind_of(self, name: str) -> TypeKind:
        return self.get(name).kind

    def _of_class(self, cls: type[_NT]) -> list[_NT]:
        return [
            t
            for t in self._types
            if isinstance(t, cls) and not t.is_introspection
        ]

    def object_types(self) -> list[ObjectType]:
        return self._of_class(ObjectType)

    def interface_types(self) -> list[InterfaceType]:
        return self._of_class(InterfaceType)

    def union_types(self) -> list[UnionType]:
        return self._of_class(UnionType)

    def enum_types(self) -> list[EnumType]:
        return self._of_class(EnumType)

    def scalar_types(self) -> list[ScalarType]:
        return self._of_class(ScalarType)

    def input_object_types(self) -> list[InputObjectType]:
        return self._of_class(InputObjectType)

    def is_root_type(self, name: str) -> bool:
        """True for the root query and mutation types.

        These have no backing entity: their handlers receive an empty
        record as the root value.
        """
        return name in {self.query_type, self.mutation_type} - {None}

    def is_subscription_type(self, name: str) -> bool:
        return (
            self.subscription_type is not None
            and name == self.subscription_type
        )

    def validate(self) -> None:
        """Check that every type reference resolves within the catalogue.

        Raises UnknownTypeError naming the first offending reference, or
        SchemaContractError when a reference has the wrong kind.
        """
        for t in self._types:
            if t.is_introspection:
                continue
            if isinstance(t, (ObjectType, InterfaceType)):
                for field in t.fields:
                    where = f"{t.name}.{field.name}"
                    self.get_ref(field.type, referrer=where)
                    for arg in field.args:
                        self.get_ref(
                            arg.type, referrer=f"{where}({arg.name}:)"
                        )
            if isinstance(t, ObjectType):
                for iface in t.interfaces:
                    it = self.get(iface, referrer=t.name)
                    if it.kind is not TypeKind.Interface:
                        raise SchemaContractError(
                            f"{t.name} implements {iface!r}, "
                            f"which is not an interface"
                        )
            elif isinstance(t, UnionType):
                for member in t.members:
                    self.get(member, referrer=f"union {t.name}")
            elif isinstance(t, InputObjectType):
                for input_field in t.fields:
                    self.get_ref(
                        input_field.type,
                        referrer=f"{t.name}.{input_field.name}",
                    )
