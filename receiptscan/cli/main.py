#!/usr/bin/env python3

import argparse
import os
from collections.abc import Sequence

DEFAULT_OCR_URL = "http://localhost:8001"


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--csv", default=None, help="Also write the receipt as CSV to this path")
    parser.add_argument(
        "--rules",
        default=None,
        help="Merchant rules TOML (default: bundled rules + config/merchant_rules.toml)",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt extraction CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  scan <image>               OCR a receipt image and extract it
  parse <text_file>          Extract a receipt from already-recognized text

Environment:
  OCR_SERVICE_URL            Default OCR service URL for scan
  RECEIPTSCAN_ROOT           Project root for config/ and receipts/
  RECEIPTSCAN_LOG_LEVEL      DEBUG, INFO, WARNING or ERROR
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="OCR a receipt image and extract it")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument(
        "--ocr-url",
        default=os.environ.get("OCR_SERVICE_URL", DEFAULT_OCR_URL),
        help=f"OCR service URL (default: $OCR_SERVICE_URL or {DEFAULT_OCR_URL})",
    )
    _add_output_arguments(scan_parser)

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Extract a receipt from a text file")
    parse_parser.add_argument("text_file", help="Path to OCR text file")
    parse_parser.add_argument(
        "--filename",
        default=None,
        help="Source image filename used for the receipt name (default: the text file name)",
    )
    _add_output_arguments(parse_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "scan":
        from receiptscan.cli.receipt import cmd_scan

        return cmd_scan(args)
    if args.command == "parse":
        from receiptscan.cli.receipt import cmd_parse

        return cmd_parse(args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
