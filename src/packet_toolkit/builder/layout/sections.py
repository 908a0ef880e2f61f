"""
Module: builder.layout.sections

Purpose:
    Render one problem: title heading, optional description, then a
    "Test case N" heading and example table per visible test case.

Numbering:
    N counts visible cases only and restarts at 1 for every problem.
    Hiding case 2 of 5 gives 1,2,3,4 rather than 1,3,4,5.

Key Functions:
    - render_problem(): Problem -> tuple of blocks
    - case_heading(): Heading text for the N-th visible case

Dependencies:
    - core.models: Problem
    - builder.layout.examples: Test case layout
    - builder.layout.markdown: Description rendering

Used By:
    - builder.layout.assembler: Document assembly
"""

from __future__ import annotations

import logging
from typing import Optional

from packet_toolkit.core.models import Problem

from .config import StyleConfig
from .examples import layout_test_case
from .markdown import render_markdown
from .models import Block, Heading

logger = logging.getLogger(__name__)

PROBLEM_HEADING_LEVEL = 1
TEST_CASE_HEADING_LEVEL = 2


def case_heading(number: int) -> str:
    """Heading text for the N-th visible test case (1-based)."""
    return f"Test case {number}"


def render_problem(problem: Problem, style: Optional[StyleConfig] = None) -> tuple[Block, ...]:
    """
    Render a single problem section.

    An absent description renders nothing at all; an empty one renders
    its (empty) blocks. A problem without visible tests is just its
    heading and description.

    Args:
        problem: Problem to render
        style: Style passed through to markdown rendering

    Returns:
        Blocks for the section, in order

    Example:
        >>> blocks = render_problem(Problem("Add", tests=(TestCase("1 2", "3", True),)))
        >>> [b.text for b in blocks if isinstance(b, Heading)]
        ['Add', 'Test case 1']
    """
    blocks: list[Block] = [Heading(problem.title, level=PROBLEM_HEADING_LEVEL)]

    if problem.has_description:
        blocks.extend(render_markdown(problem.description, style=style))

    visible = problem.visible_tests
    for number, test in enumerate(visible, start=1):
        blocks.append(Heading(case_heading(number), level=TEST_CASE_HEADING_LEVEL))
        blocks.append(layout_test_case(test))

    hidden = len(problem.tests) - len(visible)
    logger.debug(
        f"Rendered problem {problem.title!r}: {len(visible)} visible, {hidden} hidden test cases"
    )
    return tuple(blocks)
