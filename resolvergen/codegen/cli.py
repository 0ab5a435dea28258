# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations
from typing import TYPE_CHECKING, NoReturn

import argparse
import logging
import sys

from resolvergen.codegen import generator

if TYPE_CHECKING:
    from collections.abc import Sequence


class ColoredArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:  # type: ignore [override]
        c = generator.C
        self.exit(
            2,
            f"{c.BOLD}{c.FAIL}error:{c.ENDC} "
            f"{c.BOLD}{message:s}{c.ENDC}\n",
        )


parser = ColoredArgumentParser(
    prog="resolvergen",
    description="Generate TypeScript resolver types from a GraphQL schema.",
)
parser.add_argument(
    "--schema",
    metavar="PATH",
    action="append",
    required=True,
    help="GraphQL SDL file; repeat to concatenate several files.",
)
parser.add_argument(
    "--config",
    metavar="PATH",
    required=True,
    help="Mapping configuration: a JSON file, or a TOML file with the "
    "options at the top level or under [tool.resolvergen].",
)
parser.add_argument(
    "--out",
    metavar="PATH",
    help="The output file (default is to write to stdout).",
)
verbosity = parser.add_mutually_exclusive_group()
verbosity.add_argument(
    "-q",
    "--quiet",
    action="store_true",
    help="Only report errors.",
)
verbosity.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="Log debugging information to stderr.",
)


def _setup_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    root = logging.getLogger("resolvergen")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s: %(name)s: %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)


def main(argv: Sequence[str] | None = None) -> None:
    args = parser.parse_args(argv)
    _setup_logging(args)
    generator.Generator(args).run()


if __name__ == "__main__":
    main()
