"""
Module: builder.layout.header

Purpose:
    Decide per page whether the running header appears.

    The page number is only known while the typesetting engine lays out
    pages, so the policy is a small object holding the title that the
    output layer queries once per page. Page 1 (the title page) gets no
    header; every later page gets the italic title over a half-weight
    divider.

Key Classes:
    - PageHeaderPolicy: Lazily evaluated header decision

Dependencies:
    - builder.layout.config: Divider weight and gap
    - builder.layout.models: RunningHeader

Used By:
    - builder.layout.assembler: Attached to the DocumentTree
    - builder.output.renderer: Queried from the page callback
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import StyleConfig
from .models import RunningHeader

TITLE_PAGE_NUMBER = 1


@dataclass(frozen=True)
class PageHeaderPolicy:
    """
    Running header policy for one document.

    Attributes:
        title: Document title shown in the header
        style: Supplies divider weight and gap

    Example:
        >>> policy = PageHeaderPolicy("Spring Contest")
        >>> policy.header_for(1) is None
        True
        >>> policy.header_for(2).title
        'Spring Contest'
    """

    title: str
    style: StyleConfig = field(default_factory=StyleConfig)

    def header_for(self, page_number: int) -> Optional[RunningHeader]:
        """
        Get the header for a page.

        Args:
            page_number: 1-based page number reported by the engine

        Returns:
            RunningHeader, or None on the title page

        Raises:
            ValueError: If page_number < 1
        """
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1: {page_number}")
        if page_number == TITLE_PAGE_NUMBER:
            return None
        return RunningHeader(
            title=self.title,
            rule_weight=self.style.header_divider_weight,
            gap_above=self.style.header_gap,
        )
