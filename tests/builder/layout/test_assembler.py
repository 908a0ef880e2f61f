"""
Unit tests for document assembly.

Test Coverage:
- Title page structure
- Page break before every problem
- Per-problem numbering restart
- Determinism
"""

from packet_toolkit.builder.layout import (
    Divider,
    ExampleTable,
    Heading,
    PageBreak,
    Paragraph,
    PageHeaderPolicy,
    StyleConfig,
    TitleBlock,
    assemble,
)
from packet_toolkit.core.models import Packet, Problem, TestCase


class TestAssemble:
    """Tests for assemble()."""

    def test_assemble_when_no_problems_then_title_page_only(self):
        """Empty packet: title, divider and preamble, no page breaks."""
        # Arrange
        packet = Packet(title="Spring Contest", preamble="Welcome.")

        # Act
        tree = assemble(packet)

        # Assert
        assert tree.blocks == (
            TitleBlock("Spring Contest"),
            Divider(weight=1.0, length=1.0),
            Paragraph("Welcome."),
        )
        assert tree.page_break_count == 0

    def test_assemble_when_problems_then_page_break_before_each(self, sample_packet):
        """Every problem, including the first, starts on a new page."""
        tree = assemble(sample_packet)

        assert tree.page_break_count == sample_packet.problem_count
        for i, block in enumerate(tree.blocks):
            if isinstance(block, PageBreak):
                assert isinstance(tree.blocks[i + 1], Heading)
                assert tree.blocks[i + 1].level == 1

    def test_assemble_when_problems_then_order_preserved(self, sample_packet):
        """Problem headings follow packet order."""
        tree = assemble(sample_packet)

        assert tree.headings(level=1) == ["Add", "Hello"]

    def test_assemble_when_several_problems_then_numbering_restarts(self, sample_packet):
        """Each problem numbers its visible cases from 1."""
        tree = assemble(sample_packet)

        assert tree.headings(level=2) == ["Test case 1", "Test case 2", "Test case 1"]

    def test_assemble_when_hidden_tests_then_not_in_tree(self, sample_packet):
        """Hidden test data never reaches the document."""
        tree = assemble(sample_packet)

        contents = [c.content for b in tree.blocks if isinstance(b, ExampleTable) for c in b.columns]
        assert "5 5\n" not in contents
        assert "10\n" not in contents

    def test_assemble_when_preamble_then_before_first_page_break(self, sample_packet):
        """Preamble sits on the title page."""
        tree = assemble(sample_packet)

        first_break = tree.blocks.index(PageBreak())
        assert Paragraph("Read <b>all</b> problems before starting.") in tree.blocks[:first_break]

    def test_assemble_when_called_then_header_policy_and_decimal_numbering(self, sample_packet):
        """Header policy carries the title; numbering is decimal from 1."""
        style = StyleConfig(header_gap=8)

        tree = assemble(sample_packet, style)

        assert tree.header == PageHeaderPolicy("Spring Contest", style)
        assert tree.page_numbering == "1"

    def test_assemble_when_same_packet_twice_then_equal_trees(self, sample_packet):
        """Assembly is deterministic."""
        assert assemble(sample_packet) == assemble(sample_packet)

    def test_assemble_when_problem_without_visible_tests_then_section_kept(self):
        """Problems are never skipped."""
        packet = Packet(title="T", problems=(Problem(title="Hidden", tests=(TestCase("1", "1"),)),))

        tree = assemble(packet)

        assert tree.headings() == ["Hidden"]
        assert tree.page_break_count == 1
