from __future__ import annotations

from typing import Any, Mapping

from .escapes import escape
from .grammar import InvalidKeyError, is_valid_name


def format_line(name: str, value: Any) -> str:
    if not is_valid_name(name):
        raise InvalidKeyError(name)
    # keys are case-insensitive; decode lowercases them too
    return f"{name.lower()} = '{escape(str(value))}'"


def encode_lines(mapping: Mapping[str, Any], sort_keys: bool = True) -> list[str]:
    names = sorted(mapping) if sort_keys else list(mapping)
    return [format_line(name, mapping[name]) for name in names]


def encode(mapping: Mapping[str, Any], sort_keys: bool = True) -> str:
    return "".join(f"{line}\n" for line in encode_lines(mapping, sort_keys=sort_keys))
