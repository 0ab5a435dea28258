# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import (
    TYPE_CHECKING,
    Any,
    NoReturn,
    TextIO,
)

import json
import logging
import pathlib
import sys
import tomllib

from resolvergen import errors
from resolvergen._internal._codegen import Config, emit, synthesize
from resolvergen._internal._color import get_color
from resolvergen._internal._reflection import catalogue_from_sdl

if TYPE_CHECKING:
    import argparse


C = get_color()

COMMENT = """\
//
// Automatically generated from GraphQL schema by resolvergen.
//
// Do not edit directly as re-generating this file will overwrite any changes.
//\
"""

TOML_TABLE = ("tool", "resolvergen")

logger = logging.getLogger(__name__)


class Generator:
    """Load configuration and schema files, and write the generated module.

    Failures are reported on stderr and end the process with an exit
    code: 2 for unreadable input files, 22 for an invalid configuration,
    65 for a schema the compiler cannot handle.
    """

    def __init__(
        self,
        args: argparse.Namespace,
        *,
        stderr: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._schema_paths = [pathlib.Path(p) for p in args.schema]
        self._config_path = pathlib.Path(args.config)
        self._out = pathlib.Path(args.out) if args.out else None
        self._quiet = bool(args.quiet)
        self._stderr = stderr if stderr is not None else sys.stderr
        self._stdout = stdout if stdout is not None else sys.stdout

    def abort(self, code: int) -> NoReturn:
        sys.exit(code)

    def print_msg(self, msg: str) -> None:
        print(msg, file=self._stderr)

    def print_error(self, msg: str) -> None:
        print(
            f"{C.BOLD}{C.FAIL}error: {C.ENDC}{C.BOLD}{msg}{C.ENDC}",
            file=self._stderr,
        )

    def _read_text(self, path: pathlib.Path) -> str:
        try:
            return path.read_text(encoding="utf8")
        except OSError as e:
            self.print_error(f"cannot read {path}: {e.strerror}")
            self.abort(2)
        except UnicodeDecodeError as e:
            self.print_error(f"cannot read {path}: {e}")
            self.abort(2)

    def load_config(self) -> Config:
        path = self._config_path
        text = self._read_text(path)
        try:
            data = parse_config_text(text, suffix=path.suffix)
            return Config.load(data)
        except errors.ConfigError as e:
            self.print_error(f"{path}: {e}")
            self.abort(22)

    def load_schema_sdl(self) -> str:
        return "\n".join(self._read_text(p) for p in self._schema_paths)

    def run(self) -> None:
        config = self.load_config()
        sdl = self.load_schema_sdl()
        try:
            catalogue = catalogue_from_sdl(sdl)
            declarations = synthesize(catalogue, config)
        except errors.SchemaContractError as e:
            self.print_error(str(e))
            self.abort(65)

        content = emit(declarations, preamble=COMMENT)

        if self._out is None:
            self._stdout.write(content)
            return

        self._out.parent.mkdir(parents=True, exist_ok=True)
        self._out.write_text(content, encoding="utf8")
        logger.debug("wrote %d bytes to %s", len(content), self._out)
        if not self._quiet:
            self.print_msg(
                f"{C.GREEN}Generated {C.BOLD}{self._out}{C.ENDC}"
                f"{C.GREEN} from {len(self._schema_paths)} schema "
                f"file(s){C.ENDC}"
            )


def parse_config_text(text: str, *, suffix: str) -> dict[str, Any]:
    """Decode a TOML or JSON configuration document.

    For TOML, a ``[tool.resolvergen]`` table takes precedence over the
    document's top-level keys.
    """
    if suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise errors.ConfigError(f"invalid JSON: {e}") from e
    else:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise errors.ConfigError(f"invalid TOML: {e}") from e
        table: Any = data
        for key in TOML_TABLE:
            table = table.get(key) if isinstance(table, dict) else None
        if table is not None:
            data = table

    if not isinstance(data, dict):
        raise errors.ConfigError("configuration must be a table/object")
    return data
