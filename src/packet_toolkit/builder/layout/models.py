"""
Module: builder.layout.models

Purpose:
    Data models for the renderable document tree.
    Immutable dataclasses describing blocks; the output layer turns them
    into typeset flowables.

Key Classes:
    - TitleBlock, Heading, Paragraph, ListBlock, CodeBlock, QuoteBlock,
      MarkdownTable: Prose blocks
    - Divider, PageBreak: Structural blocks
    - Stroke, CellBorder: Table border description
    - ExampleColumn, ExampleTable: Test case layout
    - RunningHeader: Per-page header content
    - DocumentTree: Root of the tree

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.*: Produce nodes
    - builder.output.renderer: Consumes nodes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .header import PageHeaderPolicy


# ─────────────────────────────────────────────────────────────────────────────
# Prose Blocks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TitleBlock:
    """Centred, bold, large document title."""

    text: str


@dataclass(frozen=True)
class Heading:
    """
    Section heading.

    Attributes:
        text: Plain heading text (escaped by the renderer)
        level: 1 for problem titles, 2 for test case headings, deeper
            levels for headings inside markdown
    """

    text: str
    level: int = 1


@dataclass(frozen=True)
class Paragraph:
    """Paragraph in ReportLab inline markup (already escaped)."""

    markup: str


@dataclass(frozen=True)
class ListBlock:
    """
    Bullet or ordered list.

    Attributes:
        items: Item markup strings
        ordered: Numbered list when True
        start: First number of an ordered list
    """

    items: tuple[str, ...]
    ordered: bool = False
    start: int = 1


@dataclass(frozen=True)
class CodeBlock:
    """Verbatim text in a shaded box."""

    text: str


@dataclass(frozen=True)
class QuoteBlock:
    """Indented quotation in inline markup."""

    markup: str


@dataclass(frozen=True)
class MarkdownTable:
    """Simple table from markdown; first row is the header."""

    rows: tuple[tuple[str, ...], ...]


# ─────────────────────────────────────────────────────────────────────────────
# Structural Blocks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Divider:
    """
    Horizontal rule.

    Attributes:
        weight: Line thickness in points
        length: Fraction of the frame width (1.0 = full width)
        gap_above: Vertical space before the rule
    """

    weight: float
    length: float = 1.0
    gap_above: float = 0


@dataclass(frozen=True)
class PageBreak:
    """Forced page break."""


# ─────────────────────────────────────────────────────────────────────────────
# Tables
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Stroke:
    """A drawn edge with a thickness in points."""

    weight: float


@dataclass(frozen=True)
class CellBorder:
    """
    Border edges of one table cell. None means the edge is not drawn.

    Example:
        >>> CellBorder(bottom=Stroke(0.7))
        CellBorder(top=None, bottom=Stroke(weight=0.7), left=None)
    """

    top: Optional[Stroke] = None
    bottom: Optional[Stroke] = None
    left: Optional[Stroke] = None


@dataclass(frozen=True)
class ExampleColumn:
    """
    One labelled column of a test case table.

    Attributes:
        label: "Input" or "Output"
        content: Verbatim text (may be empty)
    """

    label: str
    content: str


@dataclass(frozen=True)
class ExampleTable:
    """
    Test case layout: a label row (row 0) over a content row (row 1).

    Example:
        >>> table.labels
        ('Input', 'Output')
    """

    columns: tuple[ExampleColumn, ...]

    @property
    def labels(self) -> tuple[str, ...]:
        """Column labels in order."""
        return tuple(c.label for c in self.columns)

    @property
    def column_count(self) -> int:
        """Number of content columns."""
        return len(self.columns)


# ─────────────────────────────────────────────────────────────────────────────
# Page Furniture and Root
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RunningHeader:
    """
    Header drawn at the top of a page.

    Attributes:
        title: Document title, set in italics
        rule_weight: Divider thickness under the title
        gap_above: Space between the title and the divider
    """

    title: str
    rule_weight: float
    gap_above: float


Block = Union[
    TitleBlock,
    Heading,
    Paragraph,
    ListBlock,
    CodeBlock,
    QuoteBlock,
    MarkdownTable,
    Divider,
    PageBreak,
    ExampleTable,
]


@dataclass(frozen=True)
class DocumentTree:
    """
    Complete renderable document.

    Attributes:
        title: Document title (also used for PDF metadata)
        blocks: Body blocks in order
        header: Policy asked for a running header on every page
        page_numbering: Numbering pattern; "1" means decimal from 1
    """

    title: str
    blocks: tuple[Block, ...]
    header: PageHeaderPolicy
    page_numbering: str = "1"

    @property
    def page_break_count(self) -> int:
        """Number of forced page breaks."""
        return sum(1 for b in self.blocks if isinstance(b, PageBreak))

    def headings(self, level: Optional[int] = None) -> list[str]:
        """Heading texts, optionally restricted to one level."""
        return [
            b.text for b in self.blocks
            if isinstance(b, Heading) and (level is None or b.level == level)
        ]
