"""
Module: cases

Purpose:
    Provides the TestCase dataclass - one example input/output pair of a
    problem, with a visibility flag deciding whether it is printed.

Key Functions:
    - TestCase.has_input / TestCase.has_output: Explicit emptiness checks
    - TestCase.to_dict() / TestCase.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.problems.Problem
    - builder.layout.examples
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TestCase:
    """
    Example test case (immutable).

    Hidden cases stay in the model; they are filtered out at render time.

    Attributes:
        input: Text fed to the solution (may be empty)
        output: Expected output text (may be empty)
        visible: Whether the case is printed in the packet

    Example:
        >>> case = TestCase(input="1 2", output="3", visible=True)
        >>> case.has_input
        True
    """

    # Not a pytest test class
    __test__ = False

    input: str = ""
    output: str = ""
    visible: bool = False

    def __post_init__(self) -> None:
        """Validate test case on construction."""
        if not isinstance(self.input, str):
            raise ValueError(f"input must be a string: {self.input!r}")
        if not isinstance(self.output, str):
            raise ValueError(f"output must be a string: {self.output!r}")
        if not isinstance(self.visible, bool):
            raise ValueError(f"visible must be a bool: {self.visible!r}")

    @property
    def has_input(self) -> bool:
        """True when input text is non-empty (whitespace counts as content)."""
        return self.input != ""

    @property
    def has_output(self) -> bool:
        """True when output text is non-empty (whitespace counts as content)."""
        return self.output != ""

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "input": self.input,
            "output": self.output,
            "visible": self.visible,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TestCase:
        """
        Deserialize from dictionary.

        Missing ``visible`` defaults to False, matching packet files.
        Packet files must carry ``input`` and ``output``; the validator
        enforces that before this runs, so the empty defaults only serve
        direct construction.
        """
        return cls(
            input=data.get("input", ""),
            output=data.get("output", ""),
            visible=data.get("visible", False),
        )
