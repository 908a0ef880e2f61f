"""
Serialization Utilities

Provides to/from dict helpers for packet models.

- Clean separation: ``serialize_*`` and ``deserialize_*`` functions
- All models have ``to_dict()`` and ``from_dict()`` methods
- Validation before deserialization so bad data never reaches a model
"""

from __future__ import annotations

from typing import Any

from ..models.packets import Packet
from ..schemas.validator import validate_packet, ValidationError


def serialize_packet(packet: Packet) -> dict[str, Any]:
    """
    Serialize a Packet to a dictionary.

    The output can be written to JSON and read back by the loader.

    Args:
        packet: Packet instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return packet.to_dict()


def deserialize_packet(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Packet:
    """
    Deserialize a Packet from a dictionary.

    Args:
        data: Dictionary with packet data (imports already resolved)
        validate: Whether to validate before building models

    Returns:
        Packet instance

    Raises:
        ValidationError: If validation fails or a model rejects its values
    """
    if validate:
        validate_packet(data)

    try:
        return Packet.from_dict(data)
    except (KeyError, ValueError) as e:
        raise ValidationError(f"Failed to build packet: {e}") from e
