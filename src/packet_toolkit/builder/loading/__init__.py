"""
Module: builder.loading

Purpose:
    Packet loading from TOML/JSON files.
    Resolves imports and builds validated Packet objects.

Key Functions:
    - load_packet(): Load a packet file
    - parse_packet(): Parse packet text

Dependencies:
    - packet_toolkit.core.models: Packet
    - packet_toolkit.core.schemas.validator: Validation

Used By:
    - builder.controller: Main build controller
"""

from .loader import load_packet, parse_packet, LoaderError

__all__ = [
    "load_packet",
    "parse_packet",
    "LoaderError",
]
