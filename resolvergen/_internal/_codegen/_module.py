# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import (
    TYPE_CHECKING,
    TypeAlias,
)

import collections.abc
import contextlib
import enum
import textwrap
from collections import defaultdict

if TYPE_CHECKING:
    import io

    from collections.abc import Iterator


MAX_LINE_LENGTH = 120


class _ImportSource(enum.Enum):
    package = enum.auto()
    local = enum.auto()


class _ImportKind(enum.Enum):
    names = enum.auto()
    default = enum.auto()


# source -> kind -> module -> local name -> (exported name, type-only)
_Imports: TypeAlias = defaultdict[
    _ImportSource,
    defaultdict[_ImportKind, defaultdict[str, dict[str, tuple[str, bool]]]],
]


def _new_imports_map() -> _Imports:
    return defaultdict(lambda: defaultdict(lambda: defaultdict(dict)))


class GeneratedModule:
    """A TypeScript module being generated.

    Code is accumulated with :meth:`write`; every external name used by
    the code is requested through :meth:`import_name`, which returns the
    local identifier to use and records the import statement rendered by
    :meth:`output`.
    """

    INDENT = " " * 2

    def __init__(self, preamble: str | None = None) -> None:
        self._comment_preamble = preamble
        self._indent_level = 0
        self._code: list[str] = []
        self._imports: _Imports = _new_imports_map()
        self._globals: set[str] = set()
        self._imported_names: dict[tuple[str, str], str] = {}

    def has_content(self) -> bool:
        return bool(self._code)

    def has_global(self, name: str) -> bool:
        return name in self._globals

    def add_global(self, name: str) -> None:
        self._globals.add(name)

    def update_globals(self, names: collections.abc.Iterable[str]) -> None:
        self._globals.update(names)

    def _get_import_source(self, module: str) -> _ImportSource:
        if module.startswith((".", "/", "#", "~")):
            return _ImportSource.local
        else:
            return _ImportSource.package

    def _disambiguate_import_name(self, name: str) -> str:
        if name not in self._globals:
            return name

        ctr = 1
        mangled = f"{name}_{ctr}"
        while mangled in self._globals:
            ctr += 1
            mangled = f"{name}_{ctr}"

        return mangled

    def import_name(
        self,
        module: str,
        name: str,
        *,
        alias: str | None = None,
        type_only: bool = False,
    ) -> str:
        """Import *name* from *module* and return its local identifier.

        *name* ``"default"`` requests the default export, bound to
        *alias*.  The same export imported twice reuses the first local
        name; a local name already taken by another symbol is suffixed
        with a counter.
        """
        key = (module, name)
        kind = _ImportKind.default if name == "default" else _ImportKind.names
        source = self._get_import_source(module)
        imports = self._imports[source][kind][module]

        local = self._imported_names.get(key)
        if local is not None:
            exported, was_type_only = imports[local]
            imports[local] = (exported, was_type_only and type_only)
            return local

        if kind is _ImportKind.default and alias is None:
            raise ValueError(
                f"import_name: default import from {module!r} needs an alias"
            )

        local = self._disambiguate_import_name(alias or name)
        imports[local] = (name, type_only)
        self._globals.add(local)
        self._imported_names[key] = local
        return local

    def current_indentation(self, extra: int = 0) -> str:
        return self.INDENT * (self._indent_level + extra)

    @contextlib.contextmanager
    def indented(self) -> Iterator[None]:
        self._indent_level += 1
        try:
            yield
        finally:
            self._indent_level -= 1

    def write(self, text: str = "") -> None:
        chunk = textwrap.indent(text, prefix=self.INDENT * self._indent_level)
        self._code.append(chunk)

    def write_section_break(self, size: int = 1) -> None:
        self._code.extend([""] * size)

    def get_comment_preamble(self) -> str | None:
        return self._comment_preamble

    def render_imports(self) -> str:
        output = []
        for source in _ImportSource.__members__.values():
            by_kind = self._imports[source]
            modules = sorted(
                set(by_kind[_ImportKind.default])
                | set(by_kind[_ImportKind.names])
            )
            for module in modules:
                defaults = by_kind[_ImportKind.default].get(module, {})
                for local in sorted(defaults):
                    _, type_only = defaults[local]
                    type_kw = "type " if type_only else ""
                    output.append(f'import {type_kw}{local} from "{module}";')

                names = by_kind[_ImportKind.names].get(module)
                if names:
                    output.append(self._render_named_import(module, names))

        return "\n".join(output)

    def _render_named_import(
        self,
        module: str,
        names: dict[str, tuple[str, bool]],
    ) -> str:
        all_type_only = all(type_only for _, type_only in names.values())
        specifiers = []
        for local, (exported, type_only) in sorted(
            names.items(), key=lambda kv: (kv[1][0], kv[0])
        ):
            spec = exported if local == exported else f"{exported} as {local}"
            if type_only and not all_type_only:
                spec = f"type {spec}"
            specifiers.append(spec)

        keyword = "import type" if all_type_only else "import"
        return self.format_list(
            keyword + ' {{{list}}} from "' + module + '";',
            specifiers,
            padded=True,
        )

    def output(self, out: io.TextIOBase) -> None:
        preamble = self.get_comment_preamble()
        if preamble:
            out.write(preamble.rstrip("\n"))
            out.write("\n\n")
        imports = self.render_imports()
        if imports:
            out.write(imports)
            out.write("\n\n")
        out.write("\n".join(self._code).strip("\n"))
        out.write("\n")

    def format_list(
        self,
        tpl: str,
        values: list[str],
        *,
        extra_indent: int = 0,
        separator: str = ", ",
        trailing_separator: bool = True,
        padded: bool = False,
    ) -> str:
        """Render *values* into the ``{list}`` slot of *tpl*.

        Lists that push the line past MAX_LINE_LENGTH are put one item
        per line, each indented one level deeper than the template.
        """
        list_string = separator.join(values)
        if padded and list_string:
            list_string = f" {list_string} "
        output_string = tpl.format(list=list_string)
        line_length = len(output_string) + len(
            self.current_indentation(extra_indent)
        )
        if line_length > MAX_LINE_LENGTH and values:
            strip_sep = separator.rstrip()
            line_sep = f"{strip_sep}\n{self.INDENT}"
            list_string = line_sep.join(values)
            if trailing_separator:
                list_string += strip_sep
            list_string = f"\n{self.INDENT}{list_string}\n"
            output_string = tpl.format(list=list_string)

        return output_string
