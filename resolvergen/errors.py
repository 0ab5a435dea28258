# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""Exceptions raised by the declaration compiler."""

from __future__ import annotations


__all__ = (
    "ConfigError",
    "EnumMemberCollisionError",
    "ResolverGenError",
    "SchemaContractError",
    "UnknownTypeError",
)


class ResolverGenError(Exception):
    """Base class for all resolvergen errors."""


class SchemaContractError(ResolverGenError):
    """The schema handed to the compiler violates its input contract."""


class UnknownTypeError(SchemaContractError):
    def __init__(self, name: str, *, referrer: str | None = None) -> None:
        self.name = name
        self.referrer = referrer
        if referrer:
            msg = f"{referrer} references unknown type {name!r}"
        else:
            msg = f"unknown type {name!r}"
        super().__init__(msg)


class EnumMemberCollisionError(SchemaContractError):
    def __init__(
        self,
        enum_name: str,
        identifier: str,
        values: tuple[str, str],
    ) -> None:
        self.enum_name = enum_name
        self.identifier = identifier
        self.values = values
        first, second = values
        super().__init__(
            f"enum {enum_name}: values {first!r} and {second!r} both map "
            f"to member identifier {identifier!r}"
        )


class ConfigError(ResolverGenError):
    """The mapping configuration is invalid."""
