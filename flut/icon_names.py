"""Build an icon-name enumeration from an icon font's codepoints listing."""

from __future__ import annotations

import string
from enum import IntEnum

_MAX_CODEPOINT = 0xFFFF


def to_pascal_case(word: str) -> str:
    """Convert a snake_case name to PascalCase, prefixing ``_`` if it starts with a digit."""
    prefix = "_" if word[:1] in string.digits and word else ""
    parts = []
    for part in word.split("_"):
        if not part:
            raise ValueError(f"empty segment in name {word!r}")
        first = part[0].upper() if part[0].isascii() else part[0]
        parts.append(first + part[1:])
    return prefix + "".join(parts)


def parse_codepoints(text: str) -> dict[int, str]:
    """Parse whitespace-separated ``name hexcode`` pairs into codepoint -> PascalCase name.

    A later entry for the same codepoint replaces an earlier one.
    """
    tokens = text.split()
    result: dict[int, str] = {}
    for name, code in zip(tokens[0::2], tokens[1::2]):
        if code.startswith("-"):
            raise ValueError(f"invalid codepoint {code!r}")
        value = int(code, 16)
        if value > _MAX_CODEPOINT:
            raise ValueError(f"codepoint {code!r} exceeds 16 bits")
        result[value] = to_pascal_case(name)
    return result


def make_icon_name_enum(text: str) -> type[IntEnum]:
    """Return an ``IconName`` IntEnum whose members map icon names to codepoints."""
    members = [(name, code) for code, name in parse_codepoints(text).items()]
    return IntEnum("IconName", members, module=__name__)