"""
Module: builder.layout

Purpose:
    Page layout for packet building.
    Converts a Packet into a renderable DocumentTree.

Key Functions:
    - assemble(): Main entry point for layout
    - render_problem(): Lay out one problem section
    - layout_test_case(): One- or two-column example table
    - border_for_cell(): Table border edges by cell position
    - render_markdown(): Markdown -> blocks

Key Classes:
    - StyleConfig: Configuration for page style
    - PageHeaderPolicy: Per-page running header decision
    - DocumentTree: Layout output

Dependencies:
    - markdown-it-py: Markdown tokenizer
    - packet_toolkit.core.models: Packet, Problem, TestCase

Used By:
    - builder.controller: Main build controller
    - builder.output.renderer: PDF output
"""

from .config import StyleConfig
from .models import (
    Block,
    CellBorder,
    CodeBlock,
    Divider,
    DocumentTree,
    ExampleColumn,
    ExampleTable,
    Heading,
    ListBlock,
    MarkdownTable,
    PageBreak,
    Paragraph,
    QuoteBlock,
    RunningHeader,
    Stroke,
    TitleBlock,
)
from .borders import border_for_cell
from .examples import layout_test_case
from .header import PageHeaderPolicy
from .markdown import render_markdown
from .sections import render_problem, case_heading
from .assembler import assemble

__all__ = [
    # Config
    "StyleConfig",
    # Models
    "Block",
    "CellBorder",
    "CodeBlock",
    "Divider",
    "DocumentTree",
    "ExampleColumn",
    "ExampleTable",
    "Heading",
    "ListBlock",
    "MarkdownTable",
    "PageBreak",
    "Paragraph",
    "QuoteBlock",
    "RunningHeader",
    "Stroke",
    "TitleBlock",
    # Functions
    "border_for_cell",
    "layout_test_case",
    "render_markdown",
    "render_problem",
    "case_heading",
    "assemble",
    # Policies
    "PageHeaderPolicy",
]
