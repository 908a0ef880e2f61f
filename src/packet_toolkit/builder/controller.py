"""
Module: builder.controller

Purpose:
    Orchestrate the complete packet building pipeline.
    Load → Assemble → Render

Key Functions:
    - build_packet(): Main entry point for building a packet PDF

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.loading: Packet loading
    - builder.layout: Document assembly
    - builder.output: PDF rendering

Used By:
    - packet_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from packet_toolkit.core.models import Packet
from packet_toolkit.core.schemas.validator import ValidationError

from .config import BuilderConfig
from .layout import assemble
from .loading import load_packet, LoaderError
from .output.renderer import render_to_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_pdf: Path to generated PDF
        packet: Packet that was rendered
        page_count: Number of pages generated
        problem_count: Number of problem sections
        visible_test_count: Number of printed test cases
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_packet(config)
        >>> print(f"Generated {result.page_count} pages for {result.problem_count} problems")
    """
    output_pdf: Path
    packet: Packet
    page_count: int
    problem_count: int
    visible_test_count: int
    metadata: dict
    warnings: tuple[str, ...]


def build_packet(config: BuilderConfig) -> BuildResult:
    """
    Build a packet PDF from start to finish.

    Pipeline:
    1. Load and validate the packet file
    2. Assemble the document tree
    3. Render to PDF

    Args:
        config: Build configuration

    Returns:
        BuildResult with path and statistics

    Raises:
        BuildError: If the packet cannot be loaded or is invalid.
            Errors raised by ReportLab while typesetting propagate unchanged.

    Example:
        >>> result = build_packet(BuilderConfig(packet_path=Path("packet.toml")))
        >>> result.output_pdf
        PosixPath('packet.pdf')
    """
    start_time = time.perf_counter()
    logger.info(f"Starting build for {config.packet_path}")

    # 1. Load packet
    try:
        packet = load_packet(config.packet_path)
    except LoaderError as e:
        raise BuildError(f"Failed to load packet: {e}") from e
    except ValidationError as e:
        location = f" at {e.path}" if e.path else ""
        raise BuildError(f"Invalid packet{location}: {e}") from e

    warnings = _collect_warnings(packet)
    for warning in warnings:
        logger.warning(warning)

    # 2. Assemble document tree
    tree = assemble(packet, config.style)
    logger.info(f"Assembled {len(tree.blocks)} blocks, {tree.page_break_count} page breaks")

    # 3. Render PDF
    output_pdf = config.resolved_output_path
    page_count = render_to_pdf(tree, output_pdf, config.style)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Packet generation completed in {elapsed:.2f}s")

    return BuildResult(
        output_pdf=output_pdf,
        packet=packet,
        page_count=page_count,
        problem_count=packet.problem_count,
        visible_test_count=packet.visible_test_count,
        metadata=_build_metadata(config, packet, page_count),
        warnings=tuple(warnings),
    )


def _collect_warnings(packet: Packet) -> List[str]:
    """Degenerate but valid packet shapes worth reporting."""
    warnings: List[str] = []
    if not packet.problems:
        warnings.append("Packet has no problems; output is the title page only")
    for problem in packet.problems:
        if not problem.visible_tests:
            warnings.append(f"Problem {problem.title!r} has no visible test cases")
    return warnings


def _build_metadata(config: BuilderConfig, packet: Packet, page_count: int) -> dict:
    """
    Build metadata dictionary for a generated packet.

    Args:
        config: Build configuration used
        packet: Rendered packet
        page_count: Pages written

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    return {
        "title": packet.title,
        "source": str(config.packet_path),
        "output": str(config.resolved_output_path),
        "page_count": page_count,
        "problems": [
            {
                "title": p.title,
                "tests": len(p.tests),
                "visible_tests": len(p.visible_tests),
            }
            for p in packet.problems
        ],
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
