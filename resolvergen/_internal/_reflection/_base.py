# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import TypeVar
from typing_extensions import dataclass_transform

import dataclasses


_T = TypeVar("_T")


_struct_dataclass = dataclasses.dataclass(frozen=True, kw_only=True)
_dataclass = dataclasses.dataclass(eq=False, frozen=True, kw_only=True)


@dataclass_transform(
    frozen_default=True,
    kw_only_default=True,
)
def struct(t: type[_T]) -> type[_T]:
    return _struct_dataclass(t)


@dataclass_transform(
    eq_default=False,
    frozen_default=True,
    kw_only_default=True,
)
def sobject(t: type[_T]) -> type[_T]:
    return _dataclass(t)


@sobject
class SchemaObject:
    name: str
    description: str | None = None

    @property
    def is_introspection(self) -> bool:
        return self.name.startswith("__")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        else:
            return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
