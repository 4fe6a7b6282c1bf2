from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .escapes import unescape
from .grammar import ASSIGNMENT, BACKSLASH, BLANK_LINE, COMMENT, QUOTE, TRAILER

logger = logging.getLogger(__name__)

UNPARSEABLE_NAME = "unable to parse name"
UNPARSEABLE_VALUE = "unable to parse value"


@dataclass(frozen=True)
class Entry:
    name: str
    value: str
    lineno: int


@dataclass(frozen=True)
class SkippedLine:
    lineno: int
    text: str
    reason: str


@dataclass(slots=True)
class ParseResult:
    values: dict[str, str] = field(default_factory=dict)
    skipped: List[SkippedLine] = field(default_factory=list)


class _QuotedValue:
    """Reads a single-quoted value from the text following ``=``."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.index = 1

    def read(self) -> str | None:
        while not self._eof:
            char = self._peek()
            if char == BACKSLASH:
                self.index += 2
                continue
            if char == QUOTE:
                if self._peek_next() == QUOTE:
                    self.index += 2
                    continue
                payload = self.text[1:self.index]
                if not TRAILER.fullmatch(self.text, self.index + 1):
                    return None
                return unescape(payload)
            self.index += 1
        return None

    @property
    def _eof(self) -> bool:
        return self.index >= self.length

    def _peek(self) -> str:
        return self.text[self.index]

    def _peek_next(self) -> str:
        if self.index + 1 >= self.length:
            return ""
        return self.text[self.index + 1]


def _read_unquoted(text: str) -> str:
    end = text.find(COMMENT)
    if end >= 0:
        text = text[:end]
    return text.rstrip()


def parse_line(line: str, lineno: int = 0) -> Entry | SkippedLine | None:
    line = line.rstrip("\r\n")
    if BLANK_LINE.fullmatch(line):
        return None
    match = ASSIGNMENT.fullmatch(line)
    if match is None:
        return SkippedLine(lineno, line, UNPARSEABLE_NAME)
    name, rest = match.group(1).lower(), match.group(2)
    if rest.startswith(QUOTE):
        value = _QuotedValue(rest).read()
        if value is None:
            return SkippedLine(lineno, line, UNPARSEABLE_VALUE)
    else:
        value = _read_unquoted(rest)
    return Entry(name, value, lineno)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    result = ParseResult()
    for lineno, line in enumerate(lines, start=1):
        parsed = parse_line(line, lineno)
        if parsed is None:
            continue
        if isinstance(parsed, SkippedLine):
            logger.warning("%s at line %d: %r", parsed.reason, parsed.lineno, parsed.text)
            result.skipped.append(parsed)
            continue
        result.values[parsed.name] = parsed.value
    return result


def decode(lines: Iterable[str]) -> dict[str, str]:
    return parse_lines(lines).values


def split_lines(text: str) -> list[str]:
    # str.splitlines() would also break on \x0b, \x1c and \x85, which values may hold
    return text.split("\n")


def parse_config(text: str) -> dict[str, str]:
    return decode(split_lines(text))
