"""
Schemas Package

Validation utilities for raw packet data.
"""

from .validator import validate_packet, ValidationError

__all__ = [
    "validate_packet",
    "ValidationError",
]
