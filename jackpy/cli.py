"""Command-line entrypoint: `jackpy PATH` writes `<stem>.xml` for each `.jack` file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from jackpy.diagnostics import format_diagnostic
from jackpy.parser import ParseMode, ParserOptions
from jackpy.pipeline import analyze_file, collect_sources

EXIT_OK = 0
EXIT_PARSE_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jackpy",
        description="Parse Jack source files into tag-delimited parse trees",
    )
    parser.add_argument("path", type=Path, help="A .jack file or a directory of .jack files")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for output files (default: next to each source file)",
    )
    parser.add_argument("--tokens", action="store_true", help="Also write the token listing as <stem>T.xml")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on characters the lexer cannot classify instead of skipping them",
    )
    parser.add_argument(
        "--keep-comments",
        action="store_true",
        help="Do not strip // and /* */ comments before tokenizing",
    )
    parser.add_argument(
        "--strict-declared-types",
        action="store_true",
        help="Reject int/char/boolean as field and static variable types",
    )
    parser.add_argument("--indent", type=int, default=0, help="Indent nested lines by N spaces per level")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def options_from_args(args: argparse.Namespace) -> ParserOptions:
    return ParserOptions(
        mode=ParseMode.STRICT if args.strict else ParseMode.PERMISSIVE,
        strip_comments=not args.keep_comments,
        primitive_types_as_identifiers=not args.strict_declared_types,
        indent=args.indent,
    )


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    _configure_logging(args)

    if args.indent < 0:
        arg_parser.error("--indent cannot be negative")

    try:
        sources = collect_sources(args.path)
    except FileNotFoundError as exc:
        print(f"jackpy: {exc}", file=sys.stderr)
        return EXIT_USAGE
    if not sources:
        print(f"jackpy: no .jack files in {args.path}", file=sys.stderr)
        return EXIT_USAGE

    options = options_from_args(args)
    failed = 0
    for source in tqdm(sources, desc="Parsing", unit="file", disable=args.no_progress or len(sources) < 2):
        result = analyze_file(source, options, output_dir=args.output_dir, write_tokens=args.tokens)
        if result.ok:
            continue
        failed += 1
        for diagnostic in result.parse.diagnostics:
            if diagnostic.severity == "error":
                tqdm.write(
                    format_diagnostic(diagnostic, result.parse.source_text, path=str(source)),
                    file=sys.stderr,
                )

    return EXIT_PARSE_FAILED if failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
