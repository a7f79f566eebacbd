from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import html_parser, markdown_parser
from .config import INPUT_FORMATS, load_settings
from .utils import configure_logging, dump_blocks, read_text, resolve_output_path

MARKDOWN_SUFFIXES = {".md", ".markdown"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlblocks",
        description="Convert HTML (or Markdown) into chat message rich text blocks.",
    )
    parser.add_argument("input", type=str, help="Path to input file, or - for stdin")
    parser.add_argument("-o", "--output", type=str, help="Output JSON path (default: stdout)")
    parser.add_argument("--config", type=str, help="YAML settings file")
    parser.add_argument("--format", dest="input_format", choices=INPUT_FORMATS, help="Input format")
    parser.add_argument(
        "--payload",
        dest="wrap_payload",
        action="store_true",
        default=None,
        help='Wrap output as {"blocks": [...]}',
    )
    parser.add_argument("--indent", dest="json_indent", type=int, help="JSON indentation")
    parser.add_argument("--verbose", action="store_true", default=None, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config).merged(
            input_format=args.input_format,
            wrap_payload=args.wrap_payload,
            json_indent=args.json_indent,
            verbose=args.verbose,
        )
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(verbose=settings.verbose)

    input_path = None if args.input == "-" else Path(args.input).expanduser()
    if input_path is not None and not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    logging.info("Reading %s", input_path or "stdin")
    source = read_text(input_path)
    logging.debug("Input length: %d chars", len(source))

    if _is_markdown(input_path, settings.input_format):
        logging.info("Parsing markdown...")
        blocks = markdown_parser.parse_markdown(source)
    else:
        logging.info("Parsing HTML...")
        blocks = html_parser.parse_html(source)
    logging.info("Built %d block(s)", len(blocks))

    rendered = dump_blocks(blocks, wrap_payload=settings.wrap_payload, indent=settings.json_indent)
    if output_path is None:
        sys.stdout.write(rendered + "\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered + "\n", encoding="utf-8")
    logging.info("Done. Saved to %s", output_path)


def _is_markdown(input_path: Path | None, input_format: str) -> bool:
    if input_format != "auto":
        return input_format == "markdown"
    return input_path is not None and input_path.suffix.lower() in MARKDOWN_SUFFIXES


if __name__ == "__main__":
    main()
