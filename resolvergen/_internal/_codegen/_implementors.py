# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import TYPE_CHECKING
from typing_extensions import TypeAliasType

import types
from collections.abc import Mapping

if TYPE_CHECKING:
    from resolvergen._internal import _reflection as reflection


ImplementorIndex = TypeAliasType(
    "ImplementorIndex",
    Mapping[str, tuple[str, ...]],
)


def build_implementor_index(
    catalogue: reflection.SchemaCatalogue,
) -> ImplementorIndex:
    """Map each interface name to the object types implementing it.

    Implementors are listed in catalogue order, each at most once.  The
    returned mapping is read-only.
    """
    impls: dict[str, list[str]] = {}
    for obj in catalogue.object_types():
        for iface in obj.interfaces:
            members = impls.setdefault(iface, [])
            if obj.name not in members:
                members.append(obj.name)

    return types.MappingProxyType(
        {iface: tuple(members) for iface, members in impls.items()}
    )
