"""Convert a markdown file to HTML.

Usage:
  python -m fencemeta README.md -o README.html
  cat notes.md | python -m fencemeta --include caption --include source-url
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from fencemeta.config import Settings
from fencemeta.logging_config import configure_logging
from fencemeta.parser import render_html


def build_settings(args: argparse.Namespace) -> Settings:
    overrides: dict = {}
    if args.include is not None:
        overrides["include"] = args.include
    if args.include_pattern is not None:
        overrides["include_pattern"] = args.include_pattern
    if args.no_lang_attr:
        overrides["lang_attr"] = None
    elif args.lang_attr is not None:
        overrides["lang_attr"] = args.lang_attr
    if args.strict:
        overrides["allow_flags"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings(**overrides)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert markdown to HTML, projecting code fence metadata")
    parser.add_argument("input", nargs="?", type=Path, help="Markdown file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="HTML file (default: stdout)")
    parser.add_argument("--include", action="append", metavar="KEY", help="Attribute name to project (repeatable)")
    parser.add_argument("--include-pattern", metavar="REGEX", help="Project attributes whose name matches")
    parser.add_argument("--lang-attr", metavar="NAME", help="data-* attribute name for the language")
    parser.add_argument("--no-lang-attr", action="store_true", help="Do not copy the language into an attribute")
    parser.add_argument("--strict", action="store_true", help="Require key=value, no key-only flags")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    settings = build_settings(args)
    configure_logging(settings.log_level)

    if args.input is not None:
        if not args.input.is_file():
            logger.error(f"Input file not found: {args.input}")
            return 1
        text = args.input.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    html = render_html(text, settings)

    if args.output is not None:
        args.output.write_text(html, encoding="utf-8")
        logger.info(f"Wrote {len(html)} characters to {args.output}")
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
