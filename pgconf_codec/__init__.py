"""Reader and writer for PostgreSQL's postgresql.conf format."""
from __future__ import annotations

from .cli import main
from .config_loader import ConfigLoader, load_config, save_config
from .config_model import Config
from .config_parser import Entry, ParseResult, SkippedLine, decode, parse_config, parse_line, parse_lines
from .config_writer import encode, encode_lines, format_line
from .grammar import CodecError, InvalidKeyError

__all__ = [
    "CodecError",
    "Config",
    "ConfigLoader",
    "Entry",
    "InvalidKeyError",
    "ParseResult",
    "SkippedLine",
    "decode",
    "encode",
    "encode_lines",
    "format_line",
    "load_config",
    "main",
    "parse_config",
    "parse_line",
    "parse_lines",
    "save_config",
]
