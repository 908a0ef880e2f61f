"""
Unit tests for StyleConfig.
"""

import pytest
from reportlab.lib.pagesizes import A4

from packet_toolkit.builder.layout import StyleConfig


class TestStyleConfig:
    """Tests for StyleConfig dataclass."""

    def test_init_when_defaults_then_a4_and_rule_weights(self):
        """Defaults: A4 page, 0.7/0.1 table rules, 0.5 header divider."""
        # Act
        style = StyleConfig()

        # Assert
        assert style.page_size == A4
        assert style.header_rule_weight == 0.7
        assert style.body_rule_weight == 0.1
        assert style.header_divider_weight == 0.5
        assert style.show_page_numbers is True

    def test_frame_width_when_valid_margins_then_correct(self):
        """frame_width should be page_width - margins."""
        style = StyleConfig(page_width=600, margin_left=100, margin_right=50)

        assert style.frame_width == 450

    def test_init_when_margins_exceed_width_then_raises_error(self):
        """Invalid margins should raise ValueError."""
        with pytest.raises(ValueError, match="Margins exceed page width"):
            StyleConfig(page_width=100, margin_left=60, margin_right=60)

    def test_init_when_zero_rule_weight_then_raises_error(self):
        """Rules must have a positive thickness."""
        with pytest.raises(ValueError, match="body_rule_weight"):
            StyleConfig(body_rule_weight=0)
