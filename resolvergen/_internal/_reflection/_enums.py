# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


import enum


class StrEnum(str, enum.Enum):
    pass


class TypeKind(StrEnum):
    Object = "Object"
    Interface = "Interface"
    Union = "Union"
    Enum = "Enum"
    Scalar = "Scalar"
    InputObject = "InputObject"

    def is_abstract(self) -> bool:
        return self in {
            TypeKind.Interface,
            TypeKind.Union,
        }


class RootOperation(StrEnum):
    Query = "Query"
    Mutation = "Mutation"
    Subscription = "Subscription"


BUILTIN_SCALARS: tuple[str, ...] = ("String", "ID", "Int", "Float", "Boolean")
