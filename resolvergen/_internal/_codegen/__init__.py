# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

from ._config import (
    Config,
    SymbolRef,
    parse_symbol_ref,
)

from ._declarations import (
    DeclarationSet,
)

from ._emitter import (
    emit,
)

from ._implementors import (
    ImplementorIndex,
    build_implementor_index,
)

from ._mapping import (
    TypeMapper,
)

from ._synthesizer import (
    synthesize,
)

__all__ = (
    "Config",
    "DeclarationSet",
    "ImplementorIndex",
    "SymbolRef",
    "TypeMapper",
    "build_implementor_index",
    "emit",
    "parse_symbol_ref",
    "synthesize",
)
