from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable

from .config_loader import ConfigLoader
from .config_model import Config
from .config_parser import SkippedLine
from .config_writer import encode
from .grammar import CodecError

MISSING_SETTING = "missing required setting"


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    handlers = {
        "check": _handle_check,
        "get": _handle_get,
        "set": _handle_set,
        "unset": _handle_unset,
        "dump": _handle_dump,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("No command specified")
        return 2
    try:
        return handler(args)
    except FileNotFoundError:
        print(f"File not found: {args.path}", file=sys.stderr)
        return 2
    except PermissionError:
        print(f"Permission denied: {args.path}", file=sys.stderr)
        return 2
    except UnicodeDecodeError:
        print(f"Cannot decode {args.path} as UTF-8", file=sys.stderr)
        return 2
    except CodecError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pgconf", description="Read and edit postgresql.conf files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser("check", help="Report lines that cannot be parsed")
    check.add_argument("path", help="Path to postgresql.conf")
    check.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    check.add_argument("--strict", action="store_true", help="Fail when any line is skipped")
    check.add_argument("--require", action="append", default=[], metavar="NAME", help="Setting that must be present (repeatable)")

    get = sub.add_parser("get", help="Print the value of a setting")
    get.add_argument("path", help="Path to postgresql.conf")
    get.add_argument("name", help="Setting name (case-insensitive)")

    set_ = sub.add_parser("set", help="Set a value and rewrite the file")
    set_.add_argument("path", help="Path to postgresql.conf")
    set_.add_argument("name", help="Setting name")
    set_.add_argument("value", help="New value")

    unset = sub.add_parser("unset", help="Remove a setting and rewrite the file")
    unset.add_argument("path", help="Path to postgresql.conf")
    unset.add_argument("name", help="Setting name (case-insensitive)")

    dump = sub.add_parser("dump", help="Print all settings")
    dump.add_argument("path", help="Path to postgresql.conf")
    dump.add_argument("--format", choices=("conf", "json"), default="conf", help="Output format")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle_check(args: argparse.Namespace) -> int:
    result = ConfigLoader(args.path).read()
    missing = list(Config(result.values).missing(*args.require))

    if args.format == "json":
        _print_json(result.skipped, missing)
    else:
        _print_text(result.skipped, missing, args.path, len(result.values))

    if missing or (args.strict and result.skipped):
        return 2
    return 0


def _handle_get(args: argparse.Namespace) -> int:
    value = ConfigLoader(args.path).load().get(args.name)
    if value is None:
        print(f"{args.name} is not set", file=sys.stderr)
        return 1
    print(value)
    return 0


def _handle_set(args: argparse.Namespace) -> int:
    loader = ConfigLoader(args.path)
    config = loader.load()
    config.set(args.name, args.value)
    loader.save(config)
    return 0


def _handle_unset(args: argparse.Namespace) -> int:
    loader = ConfigLoader(args.path)
    config = loader.load()
    if not config.remove(args.name):
        print(f"{args.name} is not set", file=sys.stderr)
        return 1
    loader.save(config)
    return 0


def _handle_dump(args: argparse.Namespace) -> int:
    config = ConfigLoader(args.path).load()
    if args.format == "json":
        json.dump(dict(sorted(config.values.items())), sys.stdout, indent=2)
        print()
    else:
        sys.stdout.write(encode(config.values))
    return 0


def _print_json(skipped: list[SkippedLine], missing: list[str]) -> None:
    payload = [{"line": s.lineno, "reason": s.reason, "text": s.text} for s in skipped]
    payload.extend({"line": None, "reason": MISSING_SETTING, "text": name} for name in missing)
    json.dump(payload, sys.stdout, indent=2)
    print()


def _print_text(skipped: list[SkippedLine], missing: list[str], path: str, count: int) -> None:
    if not skipped and not missing:
        print(f"OK: {path} is valid ({count} setting(s))")
        return
    for entry in skipped:
        print(f"[WARNING] line {entry.lineno}: {entry.reason}: {entry.text}")
    for name in missing:
        print(f"[ERROR] {MISSING_SETTING}: {name}")
    if missing:
        print(f"FAILED: {len(missing)} missing setting(s), {len(skipped)} skipped line(s)")
    else:
        print(f"OK: {path} loaded with {len(skipped)} skipped line(s)")


if __name__ == "__main__":
    sys.exit(main())
