"""
Module: problems

Purpose:
    Provides the Problem dataclass - one titled problem statement with an
    optional markdown description and an ordered list of test cases.

Key Functions:
    - Problem.visible_tests: Visible cases in original order
    - Problem.has_description: Presence check (None vs "")
    - Problem.to_dict() / Problem.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .cases.TestCase

Used By:
    - core.models.packets.Packet
    - builder.layout.sections
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cases import TestCase


@dataclass(frozen=True)
class Problem:
    """
    Problem statement (immutable).

    Attributes:
        title: Section heading for the problem (required, non-blank)
        description: Markdown description, or None when absent. An empty
            string is a present description and is kept distinct from None.
        tests: Test cases in rendering order

    Invariants:
        - tests is never reordered
        - hidden tests are kept, only filtered by visible_tests

    Example:
        >>> p = Problem(title="Add", tests=(TestCase("1 2", "3", True),))
        >>> len(p.visible_tests)
        1
    """

    title: str
    description: Optional[str] = None
    tests: tuple[TestCase, ...] = ()

    def __post_init__(self) -> None:
        """Validate problem on construction."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError(f"Problem title must be a non-empty string: {self.title!r}")
        if self.description is not None and not isinstance(self.description, str):
            raise ValueError(f"description must be a string or None: {self.description!r}")
        if not isinstance(self.tests, tuple):
            # Accept lists from callers but store an immutable tuple
            object.__setattr__(self, "tests", tuple(self.tests))
        for i, test in enumerate(self.tests):
            if not isinstance(test, TestCase):
                raise ValueError(f"tests[{i}] must be a TestCase: {test!r}")

    @property
    def has_description(self) -> bool:
        """True when a description is present, even if it is empty."""
        return self.description is not None

    @property
    def visible_tests(self) -> tuple[TestCase, ...]:
        """Visible test cases in original order."""
        return tuple(t for t in self.tests if t.visible)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary.

        Note: description is omitted entirely when absent.
        """
        d = {
            "title": self.title,
            "tests": [t.to_dict() for t in self.tests],
        }
        if self.description is not None:
            d["description"] = self.description
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Problem:
        """Deserialize from dictionary."""
        return cls(
            title=data["title"],
            description=data.get("description"),
            tests=tuple(TestCase.from_dict(t) for t in data.get("tests", [])),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Problem({self.title!r}, tests={len(self.tests)}, "
            f"visible={len(self.visible_tests)})"
        )
