"""
Core Models Package

Immutable, validated data models describing a packet.

All models in this package are frozen dataclasses. A packet is built once
by the loader and never mutated while it is laid out or rendered.
"""

from .cases import TestCase
from .problems import Problem
from .packets import Packet

__all__ = [
    "TestCase",
    "Problem",
    "Packet",
]
