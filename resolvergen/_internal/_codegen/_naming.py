# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.


from __future__ import annotations

import re


_WORD_BOUNDARIES = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """Split *value* at case changes and non-alphanumeric runs."""
    text = value
    for boundary in _WORD_BOUNDARIES:
        text = boundary.sub(r"\1 \2", text)
    text = _NON_ALNUM.sub(" ", text)
    return text.split()


def pascal_case(value: str) -> str:
    """``IN_PROGRESS`` -> ``InProgress``, ``v2_beta`` -> ``V2Beta``.

    A word starting with a digit is joined with an underscore so that
    ``LEVEL_2`` and ``LEVEL2`` stay distinct, and an identifier that would
    start with a digit gets a leading underscore.
    """
    parts = []
    for i, word in enumerate(split_words(value)):
        first, rest = word[0], word[1:].lower()
        if i > 0 and first.isdigit():
            parts.append(f"_{first}{rest}")
        else:
            parts.append(f"{first.upper()}{rest}")
    ident = "".join(parts)
    if not ident:
        return value
    if ident[0].isdigit():
        ident = f"_{ident}"
    return ident


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]
