"""
Module: builder.layout.assembler

Purpose:
    Assemble a Packet into a DocumentTree.
    Title page -> preamble -> (page break, problem section) per problem.

Key Functions:
    - assemble(): Main entry point for layout

Algorithm:
    1. Title block (centred, bold, large) and a full-width divider
    2. Preamble markdown, right after the title block
    3. Decimal page numbering from 1, running header policy attached
    4. For each problem, in order: page break, then the problem section

    A page break precedes every problem, including the first, so the
    title page never shares a page with problem content.

Dependencies:
    - core.models: Packet
    - builder.layout.sections: Problem rendering
    - builder.layout.header: PageHeaderPolicy

Used By:
    - builder.controller: Build pipeline
"""

from __future__ import annotations

import logging
from typing import Optional

from packet_toolkit.core.models import Packet

from .config import StyleConfig
from .header import PageHeaderPolicy
from .markdown import render_markdown
from .models import Block, Divider, DocumentTree, PageBreak, TitleBlock
from .sections import render_problem

logger = logging.getLogger(__name__)

DECIMAL_NUMBERING = "1"


def assemble(packet: Packet, style: Optional[StyleConfig] = None) -> DocumentTree:
    """
    Lay out a whole packet.

    Pure function of its inputs: the same packet always gives an equal
    tree. Problems are never skipped or reordered.

    Args:
        packet: Packet to lay out
        style: Style configuration (defaults to StyleConfig())

    Returns:
        DocumentTree ready for the output layer

    Example:
        >>> tree = assemble(Packet(title="Spring Contest"))
        >>> tree.page_break_count
        0
    """
    style = style or StyleConfig()

    blocks: list[Block] = [
        TitleBlock(packet.title),
        Divider(weight=style.title_rule_weight, length=1.0),
    ]
    blocks.extend(render_markdown(packet.preamble, style=style))

    for problem in packet.problems:
        blocks.append(PageBreak())
        blocks.extend(render_problem(problem, style=style))

    logger.debug(f"Assembled {len(blocks)} blocks for {packet.problem_count} problems")

    return DocumentTree(
        title=packet.title,
        blocks=tuple(blocks),
        header=PageHeaderPolicy(packet.title, style=style),
        page_numbering=DECIMAL_NUMBERING,
    )
