"""CLI entry point for previewing span payloads."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError
from pydantic_settings import SettingsError

from traceprettify.config import PrettifyConfig
from traceprettify.prettify import build_recognizers, extract_message, prettify_message


def _read_payload(stream) -> object:
    """Read a JSON document, falling back to the raw text when it is not JSON."""
    raw = stream.read()
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="traceprettify",
        description="Preview the readable message of a logged span input or output",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="JSON file to read (default: stdin)",
    )
    parser.add_argument(
        "--type",
        choices=["input", "output"],
        default="input",
        help="Whether the payload is a span input or output (default: input)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the name of the matching recognizer to stderr",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the payload could not be prettified",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    payload = _read_payload(args.file)
    if args.file is not sys.stdin:
        args.file.close()

    try:
        config = PrettifyConfig()
    except (SettingsError, ValidationError) as exc:
        parser.error(f"invalid TRACEPRETTIFY_* setting: {exc}")

    recognizers = build_recognizers(config)
    result = prettify_message(payload, args.type, recognizers=recognizers)

    if args.explain:
        name = extract_message(payload, args.type, recognizers).recognizer if result.prettified else None
        print(f"recognizer: {name or 'none'}", file=sys.stderr)

    if result.prettified or isinstance(result.message, str):
        print(result.message)
    else:
        print(json.dumps(result.message, indent=2, ensure_ascii=False))

    if args.strict and not result.prettified:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
