"""dns-name CLI entry point.

Usage: dns-name [--log-level LEVEL] [command]
"""
import argparse
import logging
import sys

from dns_name.suffix.compiler import CompileError
from dns_name.suffix.loader import rule_to_ascii
from dns_name.suffix.matcher import MatchError
from dns_name.suffix.suffix_list import SuffixList

log = logging.getLogger(__name__)

EXIT_INVALID_NAME = 1
EXIT_LOAD_ERROR = 2


def _add_list_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--list", dest="list_path", required=True, metavar="PATH",
        help="Rule list file (comma-separated rules unless --psl is given).",
    )
    p.add_argument(
        "--psl", action="store_true",
        help="Read the list in canonical public suffix list format.",
    )


def _add_parse_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "parse",
        help="Split names into suffix, root and registrable parts.",
    )
    _add_list_arguments(p)
    p.add_argument("names", nargs="+", metavar="NAME", help="DNS names to parse.")


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Compile a rule list and report its size.",
    )
    _add_list_arguments(p)
    p.add_argument(
        "--rule", dest="rules", action="append", default=[], metavar="RULE",
        help="Report whether RULE is listed (repeatable).",
    )


def _load(args: argparse.Namespace) -> SuffixList:
    try:
        return SuffixList.from_path(args.list_path, public_suffix_format=args.psl)
    except (OSError, CompileError, UnicodeError) as e:
        print(f"dns-name: error: {e}", file=sys.stderr)
        sys.exit(EXIT_LOAD_ERROR)


def _format_part(part: str | None) -> str:
    return part if part is not None else "-"


def _run_parse(args: argparse.Namespace) -> int:
    suffixes = _load(args)
    status = 0
    for raw in args.names:
        try:
            parsed = suffixes.parse_dns_name(raw)
        except MatchError as e:
            print(f"dns-name: {e}", file=sys.stderr)
            status = EXIT_INVALID_NAME
            continue
        print(
            f"{parsed.name}\t"
            f"suffix={_format_part(parsed.suffix)}\t"
            f"root={_format_part(parsed.root)}\t"
            f"registrable={_format_part(parsed.registrable)}"
        )
    return status


def _run_check(args: argparse.Namespace) -> int:
    suffixes = _load(args)
    print(f"rules: {suffixes.rule_count}")
    print(f"nodes: {suffixes.trie.node_count()}")
    status = 0
    for rule in args.rules:
        try:
            listed = suffixes.has_rule(rule_to_ascii(rule))
        except (CompileError, UnicodeError) as e:
            print(f"dns-name: {e}", file=sys.stderr)
            status = EXIT_INVALID_NAME
            continue
        print(f"{rule}: {'listed' if listed else 'not listed'}")
    return status


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dns-name",
        description="Classify DNS names against a public suffix list.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_parse_parser(subparsers)
    _add_check_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    log.debug("running %s with list %s", args.command, args.list_path)
    if args.command == "parse":
        sys.exit(_run_parse(args))
    if args.command == "check":
        sys.exit(_run_check(args))
