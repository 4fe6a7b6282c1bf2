"""Escape handling for single-quoted postgresql.conf values.

``unescape`` interprets the payload found between the quotes of a value and
``escape`` produces a payload that ``unescape`` maps back to the same string.
"""
from __future__ import annotations

import re

from .grammar import BACKSLASH, QUOTE, SHORTHAND_CODES, SHORTHAND_ESCAPES

_ESCAPE_SEQUENCE = re.compile(
    r"''"                    # doubled quote
    r"|\\([0-7]{1,3}|.)",    # backslash + 1-3 octal digits or one char
    re.DOTALL,
)


def unescape(payload: str) -> str:
    parts: list[str] = []
    pending = bytearray()
    pos = 0
    for match in _ESCAPE_SEQUENCE.finditer(payload):
        if match.start() > pos:
            _flush_bytes(parts, pending)
            parts.append(payload[pos:match.start()])
        pos = match.end()
        byte = _octal_byte(match)
        if byte is not None and byte >= 0x80:
            pending.append(byte)
            continue
        _flush_bytes(parts, pending)
        parts.append(_translate_escape(match))
    _flush_bytes(parts, pending)
    parts.append(payload[pos:])
    return "".join(parts)


def _octal_byte(match: re.Match[str]) -> int | None:
    code = match.group(1)
    if code is None or code[0] not in "01234567":
        return None
    return int(code, 8) & 0xFF


def _flush_bytes(parts: list[str], pending: bytearray) -> None:
    # octal escapes are bytes; a run of high bytes is usually one UTF-8 character
    if not pending:
        return
    try:
        parts.append(pending.decode("utf-8"))
    except UnicodeDecodeError:
        parts.append(pending.decode("latin-1"))
    pending.clear()


def _translate_escape(match: re.Match[str]) -> str:
    byte = _octal_byte(match)
    if byte is not None:
        return chr(byte)
    code = match.group(1)
    if code is None:
        return QUOTE
    return SHORTHAND_ESCAPES.get(code, code)


def escape(value: str) -> str:
    return "".join(_escape_char(ch) for ch in value)


def _escape_char(ch: str) -> str:
    if ch == QUOTE:
        return QUOTE * 2
    if ch == BACKSLASH:
        return BACKSLASH * 2
    if ch in SHORTHAND_CODES:
        return BACKSLASH + SHORTHAND_CODES[ch]
    if ord(ch) < 0x20 or ord(ch) == 0x7F:
        # always three digits so a following digit is not read as part of it
        return f"\\{ord(ch):03o}"
    return ch
