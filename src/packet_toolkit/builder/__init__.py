"""
Module: builder

Purpose:
    Building pipeline for turning a packet file into a paginated PDF.
    Loads and validates the packet, assembles the document tree and
    renders it with ReportLab.

Key Functions:
    - load_packet(): Load a packet file
    - assemble(): Packet -> DocumentTree
    - build_packet(): Main entry point for packet generation

Key Classes:
    - BuilderConfig: Configuration for building
    - StyleConfig: Page style configuration

Dependencies:
    - reportlab: PDF output
    - markdown-it-py: Preamble and description markdown
    - packet_toolkit.core.models: Packet data models

Used By:
    - packet_toolkit.cli: Command line entry point
"""

from .config import BuilderConfig
from .layout import StyleConfig, assemble
from .loading.loader import load_packet, parse_packet, LoaderError
from .controller import build_packet, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    "StyleConfig",
    # Loading
    "load_packet",
    "parse_packet",
    "LoaderError",
    # Layout
    "assemble",
    # Controller
    "build_packet",
    "BuildResult",
    "BuildError",
]
