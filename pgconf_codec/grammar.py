from __future__ import annotations

import re

NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

BLANK_LINE = re.compile(r"\s*(?:#.*)?", re.DOTALL)
ASSIGNMENT = re.compile(r"\s*([A-Za-z0-9_]+)\s*=\s*(.*)", re.DOTALL)
TRAILER = re.compile(r"\s*(?:#.*)?", re.DOTALL)

QUOTE = "'"
BACKSLASH = "\\"
COMMENT = "#"

SHORTHAND_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
SHORTHAND_CODES = {char: code for code, char in SHORTHAND_ESCAPES.items()}


def is_valid_name(name: str) -> bool:
    return NAME_PATTERN.fullmatch(name) is not None


class CodecError(ValueError):
    pass


class InvalidKeyError(CodecError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid parameter name {name!r}")
        self.name = name
