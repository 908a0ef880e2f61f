"""
Module: builder.output.renderer

Purpose:
    Render a DocumentTree to PDF using ReportLab platypus.
    Blocks become flowables; platypus paginates them. A page callback
    asks the tree's header policy for each page as it is laid out and
    draws the running header and the page number.

Key Functions:
    - build_story(): DocumentTree -> list of flowables
    - render_to_pdf(): Write PDF file, return page count
    - render_to_bytes(): Render PDF into memory

Dependencies:
    - reportlab: PDF generation
    - builder.layout: DocumentTree, StyleConfig, border_for_cell

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import (
    Flowable,
    HRFlowable,
    ListFlowable,
    ListItem,
    PageBreak as RLPageBreak,
    Paragraph as RLParagraph,
    Preformatted,
    SimpleDocTemplate,
    Table,
    TableStyle,
)

from packet_toolkit.builder.layout import (
    CodeBlock,
    Divider,
    DocumentTree,
    ExampleTable,
    Heading,
    ListBlock,
    MarkdownTable,
    PageBreak,
    Paragraph,
    QuoteBlock,
    RunningHeader,
    StyleConfig,
    TitleBlock,
    border_for_cell,
)

logger = logging.getLogger(__name__)

# Page furniture
HEADER_FONT_SIZE = 9
FOOTER_FONT_SIZE = 9
PRODUCER = "packet_toolkit"


def render_to_pdf(
    tree: DocumentTree,
    output_path: Path,
    style: Optional[StyleConfig] = None,
) -> int:
    """
    Render document tree to PDF file.

    Args:
        tree: Document tree from assemble()
        output_path: Path to write PDF
        style: Style configuration (defaults to StyleConfig())

    Returns:
        Number of pages written

    Raises:
        IOError: If PDF cannot be written
        reportlab.platypus.doctemplate.LayoutError: If content cannot be
            placed on a page (propagated unchanged)

    Example:
        >>> render_to_pdf(tree, Path("output/packet.pdf"))
        4
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    page_count = _build(tree, str(output_path), style or StyleConfig())
    logger.info(f"Rendered {page_count} pages to {output_path}")
    return page_count


def render_to_bytes(tree: DocumentTree, style: Optional[StyleConfig] = None) -> bytes:
    """
    Render document tree to PDF bytes in memory.

    Output is reproducible: the same tree and style give identical bytes.

    Args:
        tree: Document tree from assemble()
        style: Style configuration (defaults to StyleConfig())

    Returns:
        PDF file contents
    """
    buf = io.BytesIO()
    page_count = _build(tree, buf, style or StyleConfig())
    logger.debug(f"Rendered {page_count} pages in memory")
    return buf.getvalue()


def _build(tree: DocumentTree, target: Union[str, io.BytesIO], style: StyleConfig) -> int:
    """Run platypus over the story and return the final page number."""
    doc = SimpleDocTemplate(
        target,
        pagesize=style.page_size,
        leftMargin=style.margin_left,
        rightMargin=style.margin_right,
        topMargin=style.margin_top,
        bottomMargin=style.margin_bottom,
        title=tree.title,
        creator=PRODUCER,
        invariant=True,
    )
    on_page = _make_page_callback(tree, style)
    doc.build(build_story(tree, style), onFirstPage=on_page, onLaterPages=on_page)
    return doc.page


# ─────────────────────────────────────────────────────────────────────────────
# Page Furniture
# ─────────────────────────────────────────────────────────────────────────────

def _make_page_callback(tree: DocumentTree, style: StyleConfig) -> Callable[[Canvas, Any], None]:
    """
    Build the per-page callback.

    The header policy is consulted here, once per page, with the page
    number platypus has reached.
    """
    def on_page(canvas: Canvas, doc: Any) -> None:
        page_number = canvas.getPageNumber()
        header = tree.header.header_for(page_number)
        if header is not None:
            _draw_running_header(canvas, header, style)
        if style.show_page_numbers:
            _draw_page_number(canvas, format_page_number(page_number, tree.page_numbering), style)

    return on_page


def format_page_number(page_number: int, numbering: str) -> str:
    """
    Format a page number for the footer.

    Args:
        page_number: 1-based page number
        numbering: Numbering pattern; only "1" (decimal) is supported

    Raises:
        ValueError: For an unknown pattern
    """
    if numbering != "1":
        raise ValueError(f"Unsupported page numbering: {numbering!r}")
    return str(page_number)


def _draw_running_header(canvas: Canvas, header: RunningHeader, style: StyleConfig) -> None:
    """
    Draw the italic title and the divider below it in the top margin.

    Args:
        canvas: ReportLab canvas
        header: Header content for this page
        style: Page geometry
    """
    baseline = style.page_height - style.margin_top / 2
    rule_y = baseline - header.gap_above - HEADER_FONT_SIZE * 0.25

    canvas.saveState()
    canvas.setFont(style.italic_font, HEADER_FONT_SIZE)
    canvas.drawString(style.margin_left, baseline, header.title)
    canvas.setLineWidth(header.rule_weight)
    canvas.line(style.margin_left, rule_y, style.page_width - style.margin_right, rule_y)
    canvas.restoreState()


def _draw_page_number(canvas: Canvas, text: str, style: StyleConfig) -> None:
    """Draw the page number centred in the bottom margin."""
    canvas.saveState()
    canvas.setFont(style.body_font, FOOTER_FONT_SIZE)
    canvas.drawCentredString(style.page_width / 2, style.margin_bottom / 2, text)
    canvas.restoreState()


# ─────────────────────────────────────────────────────────────────────────────
# Story Building
# ─────────────────────────────────────────────────────────────────────────────

def build_story(tree: DocumentTree, style: Optional[StyleConfig] = None) -> List[Flowable]:
    """
    Convert document blocks into ReportLab flowables.

    Args:
        tree: Document tree from assemble()
        style: Style configuration (defaults to StyleConfig())

    Returns:
        Flowables in block order, one or more per block
    """
    style = style or StyleConfig()
    styles = _build_styles(style)
    story: List[Flowable] = []

    for block in tree.blocks:
        if isinstance(block, TitleBlock):
            story.append(RLParagraph(escape(block.text), styles["title"]))
        elif isinstance(block, Heading):
            level = min(max(block.level, 1), 6)
            story.append(RLParagraph(escape(block.text), styles[f"h{level}"]))
        elif isinstance(block, Paragraph):
            story.append(RLParagraph(block.markup, styles["body"]))
        elif isinstance(block, QuoteBlock):
            story.append(RLParagraph(block.markup, styles["quote"]))
        elif isinstance(block, ListBlock):
            story.append(_list_flowable(block, styles))
        elif isinstance(block, CodeBlock):
            story.append(_code_flowable(block, style, styles))
        elif isinstance(block, MarkdownTable):
            story.append(_markdown_table(block, style, styles))
        elif isinstance(block, Divider):
            story.append(HRFlowable(
                width=f"{block.length * 100:g}%",
                thickness=block.weight,
                color=colors.black,
                spaceBefore=block.gap_above,
                spaceAfter=6,
            ))
        elif isinstance(block, PageBreak):
            story.append(RLPageBreak())
        elif isinstance(block, ExampleTable):
            story.append(example_table_flowable(block, style, styles))
        else:
            raise TypeError(f"Unknown block type: {type(block).__name__}")

    return story


def _build_styles(style: StyleConfig) -> dict[str, ParagraphStyle]:
    """Create the paragraph styles used by the story."""
    sample = getSampleStyleSheet()
    size = style.body_font_size

    styles = {
        "title": ParagraphStyle(
            name="PacketTitle",
            parent=sample["Title"],
            fontName=style.bold_font,
            fontSize=style.title_font_size,
            leading=style.title_font_size * 1.2,
            alignment=TA_CENTER,
            spaceAfter=10,
        ),
        "body": ParagraphStyle(
            name="PacketBody",
            parent=sample["Normal"],
            fontName=style.body_font,
            fontSize=size,
            leading=size * 1.3,
            spaceAfter=6,
        ),
        "quote": ParagraphStyle(
            name="PacketQuote",
            parent=sample["Normal"],
            fontName=style.body_font,
            fontSize=size,
            leading=size * 1.3,
            leftIndent=18,
            textColor=colors.dimgrey,
            spaceAfter=6,
        ),
        "label": ParagraphStyle(
            name="PacketLabel",
            parent=sample["Normal"],
            fontName=style.bold_font,
            fontSize=size,
            leading=size * 1.2,
        ),
        "code": ParagraphStyle(
            name="PacketCode",
            parent=sample["Code"],
            fontName=style.mono_font,
            fontSize=style.mono_font_size,
            leading=style.mono_font_size * 1.25,
            leftIndent=0,
            firstLineIndent=0,
        ),
    }

    # Headings shrink from 1.6x body size down to body size
    for level in range(1, 7):
        heading_size = size * max(1.0, 1.6 - 0.15 * (level - 1))
        styles[f"h{level}"] = ParagraphStyle(
            name=f"PacketHeading{level}",
            parent=sample["Normal"],
            fontName=style.bold_font,
            fontSize=heading_size,
            leading=heading_size * 1.25,
            spaceBefore=heading_size * 0.8,
            spaceAfter=heading_size * 0.4,
            keepWithNext=1,
        )
    return styles


class VerbatimText(Preformatted):
    """
    Preformatted text that keeps every given line, including blank ones.

    Preformatted trims leading and trailing blank lines, both on
    construction and when it splits across a page, so the exact line list
    is stored and split directly.
    """

    def __init__(self, lines: List[str], style: ParagraphStyle):
        Preformatted.__init__(self, "\n".join(lines), style)
        self.lines = list(lines) or [""]

    def split(self, availWidth, availHeight):
        if len(self.lines) <= 1:
            return []
        fit = int(availHeight / self.style.leading)
        if fit <= 0:
            return []
        if fit >= len(self.lines):
            return [self]
        return [
            VerbatimText(self.lines[:fit], self.style),
            VerbatimText(self.lines[fit:], self.style),
        ]


def _verbatim(text: str, code_style: ParagraphStyle, width: float) -> VerbatimText:
    """
    Verbatim text block that keeps every line, including blank ones.

    Lines longer than the width are hard-wrapped onto continuation lines.
    """
    char_width = stringWidth("M", code_style.fontName, code_style.fontSize)
    max_chars = max(1, int(width / char_width))

    lines: list[str] = []
    for line in text.split("\n"):
        chunks = [line[i:i + max_chars] for i in range(0, len(line), max_chars)]
        lines.extend(chunks or [""])

    return VerbatimText(lines, code_style)


def _border_commands(columns: int, rows: int, style: StyleConfig) -> list[tuple]:
    """TableStyle line commands for every cell, from border_for_cell()."""
    commands: list[tuple] = []
    for y in range(rows):
        for x in range(columns):
            border = border_for_cell(x, y, style)
            if border.top is not None:
                commands.append(("LINEABOVE", (x, y), (x, y), border.top.weight, colors.black))
            if border.bottom is not None:
                commands.append(("LINEBELOW", (x, y), (x, y), border.bottom.weight, colors.black))
            if border.left is not None:
                commands.append(("LINEBEFORE", (x, y), (x, y), border.left.weight, colors.black))
    return commands


def example_table_flowable(
    table: ExampleTable,
    style: StyleConfig,
    styles: Optional[dict[str, ParagraphStyle]] = None,
) -> Table:
    """
    Build the ReportLab table for one test case.

    Row 0 holds the bold labels, row 1 the shaded verbatim content.
    Columns share the frame width equally.

    Args:
        table: Example table from layout_test_case()
        style: Style configuration
        styles: Paragraph styles (built from style when omitted)

    Returns:
        Styled ReportLab Table
    """
    styles = styles or _build_styles(style)
    column_count = table.column_count
    col_width = style.frame_width / column_count
    text_width = col_width - 2 * style.cell_padding

    data = [
        [RLParagraph(escape(c.label), styles["label"]) for c in table.columns],
        [[_verbatim(c.content, styles["code"], text_width)] for c in table.columns],
    ]

    commands: list[tuple] = [
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("RIGHTPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("TOPPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("BOTTOMPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("BACKGROUND", (0, 1), (-1, 1), colors.HexColor(style.code_fill)),
    ]
    commands.extend(_border_commands(column_count, len(data), style))

    # Long examples split inside the content row; labels repeat on the next page
    tbl = Table(
        data,
        colWidths=[col_width] * column_count,
        hAlign="LEFT",
        repeatRows=1,
        splitInRow=1,
    )
    tbl.setStyle(TableStyle(commands))
    return tbl


def _code_flowable(block: CodeBlock, style: StyleConfig, styles: dict[str, ParagraphStyle]) -> Table:
    """Shaded full-width box around a verbatim code block."""
    text_width = style.frame_width - 2 * style.cell_padding
    tbl = Table(
        [[[_verbatim(block.text, styles["code"], text_width)]]],
        colWidths=[style.frame_width],
        hAlign="LEFT",
        splitInRow=1,
    )
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor(style.code_fill)),
        ("LEFTPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("RIGHTPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("TOPPADDING", (0, 0), (-1, -1), style.cell_padding),
        ("BOTTOMPADDING", (0, 0), (-1, -1), style.cell_padding),
    ]))
    return tbl


def _markdown_table(block: MarkdownTable, style: StyleConfig, styles: dict[str, ParagraphStyle]) -> Table:
    """Markdown table with the same cell borders as example tables."""
    if not block.rows:
        return Table([[""]])
    column_count = max(len(row) for row in block.rows)
    data = []
    for y, row in enumerate(block.rows):
        cell_style = styles["label"] if y == 0 else styles["body"]
        padded = list(row) + [""] * (column_count - len(row))
        data.append([RLParagraph(cell, cell_style) for cell in padded])

    commands: list[tuple] = [("VALIGN", (0, 0), (-1, -1), "TOP")]
    commands.extend(_border_commands(column_count, len(data), style))

    tbl = Table(data, colWidths=[style.frame_width / column_count] * column_count, hAlign="LEFT")
    tbl.setStyle(TableStyle(commands))
    return tbl


def _list_flowable(block: ListBlock, styles: dict[str, ParagraphStyle]) -> ListFlowable:
    """Bullet or numbered list."""
    items = [ListItem(RLParagraph(item, styles["body"])) for item in block.items]
    if block.ordered:
        return ListFlowable(items, bulletType="1", start=block.start)
    return ListFlowable(items, bulletType="bullet")
