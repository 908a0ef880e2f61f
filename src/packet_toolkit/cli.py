"""
Command line entry point: build a packet PDF from a TOML or JSON packet file.

Examples:
    packet-build contest/packet.toml
    packet-build contest/packet.json -o out/statements.pdf --no-page-numbers
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import List, Optional

from packet_toolkit import __version__
from packet_toolkit.builder import BuilderConfig, BuildError, StyleConfig, build_packet

logger = logging.getLogger("packet_toolkit.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packet-build",
        description="Render a problem packet (title, preamble, problems) to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s packet.toml
  %(prog)s packet.json -o statements.pdf
        """,
    )
    parser.add_argument(
        "packet",
        type=Path,
        help="Packet file (.toml or .json)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output PDF path (default: packet path with .pdf suffix)",
    )
    parser.add_argument(
        "--no-page-numbers",
        action="store_true",
        help="Omit the page number footer",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    style = StyleConfig()
    if args.no_page_numbers:
        style = dataclasses.replace(style, show_page_numbers=False)

    try:
        config = BuilderConfig(packet_path=args.packet, output_path=args.output, style=style)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = build_packet(config)
    except BuildError as e:
        logger.error(str(e))
        return 1

    logger.info(
        f"Wrote {result.output_pdf} ({result.page_count} pages, "
        f"{result.problem_count} problems, {result.visible_test_count} test cases)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
