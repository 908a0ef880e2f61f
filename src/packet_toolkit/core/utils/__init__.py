"""
Utils Package

Serialization helpers for packet models.
"""

from .serialization import serialize_packet, deserialize_packet

__all__ = [
    "serialize_packet",
    "deserialize_packet",
]
