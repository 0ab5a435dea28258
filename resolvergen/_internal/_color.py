# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations

import os
import sys
import warnings


class Color:
    HEADER = ""
    BLUE = ""
    GREEN = ""
    WARNING = ""
    FAIL = ""
    ENDC = ""
    BOLD = ""
    UNDERLINE = ""


_COLOR: Color | None = None


def _use_color() -> bool:
    setting = os.getenv("RESOLVERGEN_COLOR_OUTPUT", "default")
    match setting:
        case "default" | "auto":
            return "NO_COLOR" not in os.environ and sys.stderr.isatty()
        case "enabled":
            return True
        case "disabled":
            return False
        case _:
            warnings.warn(
                f"RESOLVERGEN_COLOR_OUTPUT can only be one of: "
                f"default, auto, enabled or disabled; got {setting!r}",
                stacklevel=2,
            )
            return False


def get_color() -> Color:
    global _COLOR

    if _COLOR is None:
        _COLOR = Color()
        if _use_color():
            _COLOR.HEADER = "\033[95m"
            _COLOR.BLUE = "\033[94m"
            _COLOR.GREEN = "\033[92m"
            _COLOR.WARNING = "\033[93m"
            _COLOR.FAIL = "\033[91m"
            _COLOR.ENDC = "\033[0m"
            _COLOR.BOLD = "\033[1m"
            _COLOR.UNDERLINE = "\033[4m"

    return _COLOR
