"""
Module: builder.layout.borders

Purpose:
    Map a table cell position to its border edges.

    Row 0 is the label row: a thick rule underneath, nothing else.
    Every other row gets a hairline underneath and a hairline on its left,
    except the leftmost column which has no left edge.

Key Functions:
    - border_for_cell(): Border edges for a (column, row) position

Dependencies:
    - builder.layout.config: Rule weights
    - builder.layout.models: Stroke, CellBorder

Used By:
    - builder.output.renderer: Example table styling
"""

from __future__ import annotations

from typing import Optional

from .config import StyleConfig
from .models import CellBorder, Stroke

_DEFAULT_STYLE = StyleConfig()


def border_for_cell(x: int, y: int, style: Optional[StyleConfig] = None) -> CellBorder:
    """
    Get the border edges for a table cell.

    Args:
        x: Zero-based column index
        y: Zero-based row index
        style: Style supplying rule weights (defaults to StyleConfig())

    Returns:
        CellBorder with top/bottom/left strokes (None = not drawn)

    Raises:
        ValueError: If x or y is negative

    Example:
        >>> border_for_cell(0, 0).bottom
        Stroke(weight=0.7)
        >>> border_for_cell(0, 1).left is None
        True
    """
    if x < 0 or y < 0:
        raise ValueError(f"Cell position must be non-negative: ({x}, {y})")

    style = style or _DEFAULT_STYLE

    if y == 0:
        return CellBorder(bottom=Stroke(style.header_rule_weight))

    hairline = Stroke(style.body_rule_weight)
    return CellBorder(
        bottom=hairline,
        left=hairline if x > 0 else None,
    )
