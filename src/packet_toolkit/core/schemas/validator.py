"""
Schema Validation Utilities

Validates raw packet data (as parsed from TOML or JSON) before any model
is built or any page is rendered.

Structurally invalid packets fail fast with a ValidationError naming the
offending path, e.g. ``problems[2].tests[0].visible``. Degenerate but valid
packets (no problems, no tests, empty text) pass.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Raised when packet data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_packet(data: dict[str, Any]) -> None:
    """
    Validate packet data.

    Only the keys the renderer reads are checked. Every test case needs
    ``input`` and ``output``; ``visible`` is optional. Host-only keys such as
    ``setup``, ``languages`` and ``authentication`` are not inspected.

    Args:
        data: Packet dictionary with imports already resolved

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Packet must be a table, got {type(data).__name__}")

    _require_title(data, "title")

    preamble = data.get("preamble")
    if preamble is not None and not isinstance(preamble, str):
        raise ValidationError(
            f"preamble must be a string: {preamble!r}",
            path="preamble",
        )

    problems = data.get("problems", [])
    if not isinstance(problems, list):
        raise ValidationError(
            "problems must be a list",
            path="problems",
        )
    for i, problem in enumerate(problems):
        _validate_problem(problem, f"problems[{i}]")


def _validate_problem(data: Any, path: str) -> None:
    """Validate a single problem."""
    if not isinstance(data, dict):
        raise ValidationError(
            f"Problem must be a table, got {type(data).__name__}",
            path=path,
        )

    _require_title(data, f"{path}.title")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ValidationError(
            f"description must be a string: {description!r}",
            path=f"{path}.description",
        )

    tests = data.get("tests", [])
    if not isinstance(tests, list):
        raise ValidationError(
            "tests must be a list",
            path=f"{path}.tests",
        )
    for j, test in enumerate(tests):
        _validate_test(test, f"{path}.tests[{j}]")


def _validate_test(data: Any, path: str) -> None:
    """Validate a single test case."""
    if not isinstance(data, dict):
        raise ValidationError(
            f"Test must be a table, got {type(data).__name__}",
            path=path,
        )

    errors = []
    for key in ("input", "output"):
        if key not in data:
            errors.append(f"Missing field: {key}")
        elif not isinstance(data[key], str):
            errors.append(f"{key} must be a string")
    if "visible" in data and not isinstance(data["visible"], bool):
        errors.append("visible must be a boolean")

    if errors:
        raise ValidationError(
            f"Invalid test case at {path}: {'; '.join(errors)}",
            path=path,
            errors=errors,
        )


def _require_title(data: dict[str, Any], path: str) -> None:
    """Title must exist and be a non-blank string."""
    title = data.get("title")
    if title is None:
        raise ValidationError(
            "Missing required field: title",
            path=path,
            errors=["Missing field: title"],
        )
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(
            f"title must be a non-empty string: {title!r}",
            path=path,
        )
