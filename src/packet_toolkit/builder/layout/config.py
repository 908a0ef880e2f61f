"""
Module: builder.layout.config

Purpose:
    Configuration for packet layout and typesetting.
    Defines page geometry, fonts, rule weights and shading.

Key Classes:
    - StyleConfig: Immutable style configuration

Dependencies:
    - dataclasses (std)
    - reportlab: Page size constants

Used By:
    - builder.layout.borders: Rule weights
    - builder.layout.header: Running header geometry
    - builder.output.renderer: Fonts, margins, fills
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4


# Standard A4 page dimensions in points
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = A4


@dataclass(frozen=True)
class StyleConfig:
    """
    Configuration for packet style (immutable).

    All lengths are in PDF points (1/72 inch).

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Top margin
        margin_bottom: Bottom margin
        margin_left: Left margin
        margin_right: Right margin
        body_font: Font for prose
        bold_font: Font for labels and the title
        italic_font: Font for the running header
        mono_font: Font for verbatim example data
        body_font_size: Prose size; headings derive from it
        title_font_size: Title page heading size
        mono_font_size: Example data size
        header_rule_weight: Rule under a table's label row
        body_rule_weight: Hairline for content cells
        title_rule_weight: Divider under the title block
        header_divider_weight: Running header divider (half weight)
        header_gap: Vertical gap between header title and its divider
        cell_padding: Inner padding of example cells
        code_fill: Neutral fill behind verbatim text
        show_page_numbers: Draw the decimal page number in the footer

    Example:
        >>> style = StyleConfig()
        >>> style.frame_width
        451.27...
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT

    # Margins
    margin_top: float = 72
    margin_bottom: float = 72
    margin_left: float = 72
    margin_right: float = 72

    # Fonts
    body_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    italic_font: str = "Helvetica-Oblique"
    mono_font: str = "Courier"
    body_font_size: float = 11
    title_font_size: float = 24
    mono_font_size: float = 9.5

    # Rules
    header_rule_weight: float = 0.7
    body_rule_weight: float = 0.1
    title_rule_weight: float = 1.0
    header_divider_weight: float = 0.5
    header_gap: float = 4

    # Example cells
    cell_padding: float = 5
    code_fill: str = "#E6E6E6"

    # Footer
    show_page_numbers: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.frame_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.frame_height <= 0:
            raise ValueError("Margins exceed page height")
        for name in ("header_rule_weight", "body_rule_weight", "title_rule_weight", "header_divider_weight"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        if self.body_font_size <= 0 or self.title_font_size <= 0 or self.mono_font_size <= 0:
            raise ValueError("Font sizes must be positive")

    @property
    def page_size(self) -> tuple[float, float]:
        """(width, height) tuple for ReportLab."""
        return (self.page_width, self.page_height)

    @property
    def frame_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def frame_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom
