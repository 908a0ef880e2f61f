"""
Packet Toolkit Core Package

Shared data models, schema validation and serialization helpers.
These models are the single source of truth for the builder.
"""

from .models import TestCase, Problem, Packet

__all__ = [
    "TestCase",
    "Problem",
    "Packet",
]
