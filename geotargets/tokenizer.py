"""
Line tokenizer for the geotargets quoted-CSV format.

The format is not RFC-4180: quotes inside a quoted value are never doubled.
A quote only closes a value when it is the last character of the line or is
directly followed by a comma, so values such as `"Say "Hi" Bay"` survive.
Spaces outside quotes are dropped one by one.
"""

from __future__ import annotations

from typing import List

QUOTE = '"'
COMMA = ","
SPACE = " "


def _closes_value(line: str, index: int) -> bool:
    nxt = index + 1
    return nxt == len(line) or line[nxt] == COMMA


def tokenize(line: str) -> List[str]:
    """
    Split one raw line into its fields.

    Malformed input produces a short (possibly empty) list; deciding whether
    that is fatal is left to the caller.
    """
    fields: List[str] = []
    current: List[str] = []
    quoted = False
    # set once a closing quote has emitted the current field
    emitted = False

    for index, char in enumerate(line):
        if quoted:
            if char == QUOTE and _closes_value(line, index):
                fields.append("".join(current))
                current = []
                quoted = False
                emitted = True
            else:
                current.append(char)
            continue

        if char == QUOTE:
            quoted = True
        elif char == COMMA:
            if not emitted:
                fields.append("".join(current))
            current = []
            emitted = False
        elif char != SPACE:
            current.append(char)

    # unterminated but non-empty value
    if current:
        fields.append("".join(current))

    return fields
