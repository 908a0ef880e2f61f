"""
Module: builder.loading.loader

Purpose:
    Load packets from TOML or JSON files with full validation.
    Resolves ``{ import = "file.md" }`` tables for the preamble and
    problem descriptions, relative to the packet file.

Key Functions:
    - load_packet(): Load a packet file
    - parse_packet(): Parse packet text already in memory

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - tomllib (std): TOML parsing
    - json (std): JSON parsing
    - core.utils.serialization: Validation + model construction

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from packet_toolkit.core.models import Packet
from packet_toolkit.core.schemas.validator import ValidationError
from packet_toolkit.core.utils.serialization import deserialize_packet


logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("toml", "json")

# Keys a full packet carries for the judging host; layout never reads them
HOST_PACKET_KEYS = ("setup", "languages", "authentication", "default_language")
HOST_PROBLEM_KEYS = ("languages", "default_language")


class LoaderError(Exception):
    """Error loading a packet file."""
    pass


def load_packet(path: Path) -> Packet:
    """
    Load a packet from a ``.toml`` or ``.json`` file.

    Process:
    1. Read the file (UTF-8)
    2. Parse by suffix
    3. Resolve imports relative to the file's directory
    4. Validate and build the Packet

    Args:
        path: Packet file path

    Returns:
        Packet instance

    Raises:
        LoaderError: If the file is missing, unreadable or not parseable
        ValidationError: If the packet structure is invalid

    Example:
        >>> packet = load_packet(Path("contest/packet.toml"))
        >>> packet.problem_count
        12
    """
    if not path.exists():
        raise LoaderError(f"Packet file does not exist: {path}")

    fmt = path.suffix.lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise LoaderError(f"Unsupported packet format {path.suffix!r}: {path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read packet file {path}: {e}") from e

    packet = parse_packet(text, fmt=fmt, base_path=path.parent)
    logger.info(
        f"Loaded packet {packet.title!r} from {path.name}: "
        f"{packet.problem_count} problems, {packet.visible_test_count} visible tests"
    )
    return packet


def parse_packet(
    text: str,
    *,
    fmt: str = "toml",
    base_path: Optional[Path] = None,
) -> Packet:
    """
    Parse packet text.

    Args:
        text: TOML or JSON document
        fmt: "toml" or "json"
        base_path: Directory imports are resolved against (defaults to cwd)

    Returns:
        Packet instance

    Raises:
        LoaderError: If the text cannot be parsed or an import cannot be read
        ValidationError: If the packet structure is invalid
    """
    data = _parse_document(text, fmt)
    base = base_path if base_path is not None else Path.cwd()

    _log_host_keys(data)
    data = _resolve_imports(data, base)
    return deserialize_packet(data)


def _parse_document(text: str, fmt: str) -> dict[str, Any]:
    """Parse TOML/JSON text into a dictionary."""
    if fmt == "toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise LoaderError(f"Packet is malformed: {e}") from e
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise LoaderError(f"Packet is malformed: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"Packet must be an object, got {type(data).__name__}")
        return data
    raise LoaderError(f"Unsupported packet format: {fmt!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Imports
# ─────────────────────────────────────────────────────────────────────────────

def _resolve_imports(data: dict[str, Any], base: Path) -> dict[str, Any]:
    """
    Replace import tables with file contents.

    Returns a new dict; the parsed input is left untouched.
    """
    resolved = dict(data)
    if "preamble" in resolved:
        resolved["preamble"] = _resolve_text(resolved["preamble"], base, "preamble")

    problems = resolved.get("problems")
    if isinstance(problems, list):
        new_problems = []
        for i, problem in enumerate(problems):
            if isinstance(problem, dict) and "description" in problem:
                problem = dict(problem)
                problem["description"] = _resolve_text(
                    problem["description"], base, f"problems[{i}].description"
                )
            new_problems.append(problem)
        resolved["problems"] = new_problems
    return resolved


def _resolve_text(value: Any, base: Path, field_path: str) -> Any:
    """
    Resolve one text field.

    Strings pass through. A table must be exactly ``{import = "path"}``.
    Other types are left for the validator to reject.
    """
    if not isinstance(value, dict):
        return value

    if set(value) != {"import"} or not isinstance(value["import"], str):
        raise ValidationError(
            f"{field_path} must be a string or an import table like {{ import = \"file.md\" }}",
            path=field_path,
        )

    import_path = Path(value["import"])
    if not import_path.is_absolute():
        import_path = base / import_path

    try:
        content = import_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to import {field_path} from {import_path}: {e}") from e

    logger.debug(f"Imported {field_path} from {import_path}")
    # Drop a byte order mark left by some editors
    return content.lstrip("\ufeff")


def _log_host_keys(data: dict[str, Any]) -> None:
    """Note keys that belong to the judging host rather than the document."""
    ignored = [k for k in HOST_PACKET_KEYS if k in data]
    problems = data.get("problems")
    if isinstance(problems, list):
        for i, problem in enumerate(problems):
            if isinstance(problem, dict):
                ignored.extend(f"problems[{i}].{k}" for k in HOST_PROBLEM_KEYS if k in problem)
    if ignored:
        logger.debug(f"Ignoring host-only packet keys: {', '.join(ignored)}")
