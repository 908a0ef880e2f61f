"""
Module: builder.config

Purpose:
    Configuration dataclass for the packet building pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a packet

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - packet_toolkit.cli: Command line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from packet_toolkit.builder.layout.config import StyleConfig


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a packet (immutable).

    Attributes:
        packet_path: Path to the packet file (.toml or .json)
        output_path: PDF path; defaults to packet_path with a .pdf suffix
        style: Page style for layout and rendering

    Example:
        >>> config = BuilderConfig(packet_path=Path("contest/packet.toml"))
        >>> config.resolved_output_path
        PosixPath('contest/packet.pdf')
    """

    # Required
    packet_path: Path

    # Output
    output_path: Optional[Path] = None

    # Layout
    style: StyleConfig = field(default_factory=StyleConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not str(self.packet_path):
            raise ValueError("packet_path must not be empty")
        if self.output_path is not None and self.output_path.suffix.lower() != ".pdf":
            raise ValueError(f"output_path must end in .pdf: {self.output_path}")
        if self.output_path is not None and self.output_path == self.packet_path:
            raise ValueError("output_path must differ from packet_path")

    @property
    def resolved_output_path(self) -> Path:
        """Output path, derived from the packet path when not given."""
        if self.output_path is not None:
            return self.output_path
        return self.packet_path.with_suffix(".pdf")
