"""CLI entry point for the offline diet-plan parser."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .models import ParsedQuantity
from .pantry.quantity import format_quantity, parse_quantity, subtract_quantity
from .parser.offline import OfflineParser

# pdftotext separates pages with a form feed
PAGE_SEPARATOR = "\f"


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="dietplan",
        description="Offline diet-plan parser: weekly meals and shopping list from PDF text",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse page texts into a weekly plan")
    parse_parser.add_argument(
        "files", type=str, nargs="+",
        help="One text file per page, or one file with form-feed page breaks",
    )
    parse_parser.add_argument("--json", action="store_true", help="Output JSON")
    parse_parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="Also write a printable PDF",
    )

    # quantity
    qty_parser = sub.add_parser("quantity", help="Parse free-text quantities")
    qty_parser.add_argument("texts", type=str, nargs="+")
    qty_parser.add_argument(
        "--consume-from", type=float, default=None, metavar="N",
        help="Pantry amount to deplete with each quantity",
    )
    qty_parser.add_argument(
        "--restore", action="store_true",
        help="Add the quantities back instead of subtracting",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = load_config(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "parse":
            _cmd_parse(config, args)
        case "quantity":
            _cmd_quantity(config, args)


def read_page_texts(paths: list[str]) -> list[str]:
    """Read page texts from files.

    A single file containing form feeds is split into pages; otherwise each
    file is one page.
    """
    texts = [Path(p).read_text(encoding="utf-8") for p in paths]
    if len(texts) == 1 and PAGE_SEPARATOR in texts[0]:
        return texts[0].split(PAGE_SEPARATOR)
    return texts


def _cmd_parse(config, args) -> None:
    try:
        page_texts = read_page_texts(args.files)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        sys.exit(2)

    parser = OfflineParser(config.vocabulary())
    data = parser.parse(page_texts)

    if args.json:
        print(json.dumps(data.to_dict(), ensure_ascii=False, indent=2))
    else:
        if not data.weekly_plan:
            print("No days or meals found.")
        else:
            print(data.display())

    if not args.pdf:
        return

    from .pdf import generate_pdf

    try:
        path = generate_pdf(
            data,
            args.pdf,
            font_path=config.pdf.font_path or None,
            title=config.pdf.title,
        )
        print(f"PDF saved: {path}", file=sys.stderr)
    except (ImportError, FileNotFoundError) as e:
        print(f"PDF error: {e}", file=sys.stderr)


def _cmd_quantity(config, args) -> None:
    vocabulary = config.vocabulary()
    remaining = args.consume_from

    for text in args.texts:
        parsed: ParsedQuantity | None = parse_quantity(text, vocabulary)
        if parsed is None:
            line = f"{text!r}: not quantifiable"
        else:
            line = (
                f"{text!r}: value={parsed.value:g} unit={parsed.unit} "
                f"-> {format_quantity(parsed, vocabulary)}"
            )
        if remaining is not None:
            remaining = subtract_quantity(remaining, text, args.restore, vocabulary)
            line = f"{line}  (pantry: {remaining:g})"
        print(line)
