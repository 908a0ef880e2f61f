"""
Module: packets

Purpose:
    Provides the Packet dataclass - the whole output unit: a document
    title, a markdown preamble and the ordered problems.

Key Functions:
    - Packet.visible_test_count: Number of printed test cases
    - Packet.to_dict() / Packet.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .problems.Problem

Used By:
    - builder.loading.loader
    - builder.layout.assembler
    - builder.controller
"""

from __future__ import annotations

from dataclasses import dataclass

from .problems import Problem


@dataclass(frozen=True)
class Packet:
    """
    Complete packet representation (immutable).

    Constructed once by the loader and read-only afterwards.

    Attributes:
        title: Document title (required, non-blank)
        preamble: Markdown shown on the title page (may be empty)
        problems: Problems in rendering order (may be empty)

    Example:
        >>> packet = Packet(title="Spring Contest", problems=(problem,))
        >>> packet.problem_count
        1
    """

    title: str
    preamble: str = ""
    problems: tuple[Problem, ...] = ()

    def __post_init__(self) -> None:
        """Validate packet on construction."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError(f"Packet title must be a non-empty string: {self.title!r}")
        if not isinstance(self.preamble, str):
            raise ValueError(f"preamble must be a string: {self.preamble!r}")
        if not isinstance(self.problems, tuple):
            object.__setattr__(self, "problems", tuple(self.problems))
        for i, problem in enumerate(self.problems):
            if not isinstance(problem, Problem):
                raise ValueError(f"problems[{i}] must be a Problem: {problem!r}")

    @property
    def problem_count(self) -> int:
        """Number of problems in the packet."""
        return len(self.problems)

    @property
    def visible_test_count(self) -> int:
        """Total visible test cases across all problems."""
        return sum(len(p.visible_tests) for p in self.problems)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "title": self.title,
            "preamble": self.preamble,
            "problems": [p.to_dict() for p in self.problems],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Packet:
        """Deserialize from dictionary."""
        return cls(
            title=data["title"],
            preamble=data.get("preamble") or "",
            problems=tuple(Problem.from_dict(p) for p in data.get("problems", [])),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Packet({self.title!r}, problems={self.problem_count})"
