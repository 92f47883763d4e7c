"""CLI for eqsat-pattern: parse, ground, format and inspect patterns."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .errors import PatternError
from .ground import wildcard_names
from .language import get_language, list_languages
from .parser import parse_expr, parse_pattern
from .pattern_nodes import Wildcard
from .printer import format_pattern


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eqsat-pattern",
        description="Parse S-expression patterns for term rewriting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # parse
    parse_p = sub.add_parser("parse", help="Parse a pattern and show its tree")
    _add_source_args(parse_p)
    parse_p.add_argument("--json", action="store_true", help="Print the tree as JSON")

    # ground
    ground_p = sub.add_parser("ground", help="Parse a wildcard-free expression")
    _add_source_args(ground_p)
    ground_p.add_argument("--json", action="store_true", help="Print the tree as JSON")

    # fmt
    fmt_p = sub.add_parser("fmt", help="Print a pattern in canonical form")
    _add_source_args(fmt_p)

    # check
    check_p = sub.add_parser("check", help="Validate a pattern and summarize it")
    _add_source_args(check_p)

    # languages
    sub.add_parser("languages", help="List registered operator languages")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 1

    # Commands that don't need a source
    if args.command == "languages":
        return _cmd_languages()

    language = get_language(args.language)
    if language is None:
        print(f"Error: unknown language: {args.language}", file=sys.stderr)
        return 1

    try:
        source = _read_source(args)
        if args.command == "parse":
            return _cmd_parse(source, language, as_json=args.json)
        elif args.command == "ground":
            return _cmd_ground(source, language, as_json=args.json)
        elif args.command == "fmt":
            return _cmd_fmt(source, language)
        elif args.command == "check":
            return _cmd_check(source, language)
    except FileNotFoundError:
        print(f"Error: file not found: {args.file}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: {args.file or '<stdin>'} is not valid UTF-8: {e.reason}", file=sys.stderr)
        return 1
    except RecursionError:
        # size / depth / printing walk the tree recursively
        print("Error: expression nested too deeply", file=sys.stderr)
        return 1
    except PatternError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", nargs="?", help="Input file holding one S-expression")
    p.add_argument("-e", "--expr", dest="text", help="Take the S-expression from the command line")
    p.add_argument("--language", default="symbols", help="Operator language (default: symbols)")


def _read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.file is None or args.file == "-":
        return sys.stdin.read()
    with open(args.file, encoding="utf-8") as f:
        return f.read()


def _cmd_parse(source: str, language, as_json: bool = False) -> int:
    pattern = parse_pattern(source, language)
    if as_json:
        print(json.dumps(pattern.to_dict(), indent=2, default=str))
    else:
        _print_tree(pattern)
    return 0


def _cmd_ground(source: str, language, as_json: bool = False) -> int:
    expr = parse_expr(source, language)
    if as_json:
        print(json.dumps(expr.to_dict(), indent=2, default=str))
    else:
        _print_tree(expr)
    return 0


def _cmd_fmt(source: str, language) -> int:
    pattern = parse_pattern(source, language)
    print(format_pattern(pattern, language))
    return 0


def _cmd_check(source: str, language) -> int:
    pattern = parse_pattern(source, language)
    names = wildcard_names(pattern)
    kind = "ground term" if not names else "pattern"
    print(f"Valid {kind}: {pattern.size()} nodes, depth {pattern.depth()}")
    if names:
        print(f"Wildcards: {', '.join(names)}")
    return 0


def _cmd_languages() -> int:
    print("Available languages:")
    for lang in list_languages():
        print(f"  {lang.name:12s}  {type(lang).__name__}")
    return 0


def _print_tree(node, indent: int = 0) -> None:
    prefix = "  " * indent
    if isinstance(node, Wildcard):
        print(f"{prefix}Wildcard {node.name} [{node.kind.value}]")
        return
    print(f"{prefix}{type(node).__name__} {node.op!r}")
    for child in node.children:
        _print_tree(child, indent + 1)


if __name__ == "__main__":
    sys.exit(main())
