"""
Unit tests for builder.output.renderer

Test Coverage:
- Story building from a document tree
- Example table borders and shading
- Verbatim text handling
- PDF output and reproducibility
"""

import io

import pytest
from pypdf import PdfReader
from reportlab.lib import colors
from reportlab.platypus import PageBreak as RLPageBreak, Paragraph as RLParagraph, Table

from packet_toolkit.builder.layout import (
    DocumentTree,
    ExampleColumn,
    ExampleTable,
    PageHeaderPolicy,
    StyleConfig,
    assemble,
)
from packet_toolkit.builder.output import build_story, render_to_bytes, render_to_pdf
from packet_toolkit.builder.output.renderer import (
    _border_commands,
    _build_styles,
    VerbatimText,
    _verbatim,
    example_table_flowable,
    format_page_number,
)
from packet_toolkit.core.models import Packet, Problem, TestCase


@pytest.fixture
def style():
    """Default style configuration."""
    return StyleConfig()


class TestBuildStory:
    """Tests for build_story()."""

    def test_build_story_when_sample_tree_then_one_flowable_per_block(self, sample_packet):
        """Every block becomes one flowable, page breaks included."""
        tree = assemble(sample_packet)

        story = build_story(tree)

        assert len(story) == len(tree.blocks)
        assert sum(isinstance(f, RLPageBreak) for f in story) == 2
        assert isinstance(story[0], RLParagraph)

    def test_build_story_when_unknown_block_then_raises_type_error(self):
        """Unknown node types are programming errors."""
        tree = DocumentTree(title="T", blocks=("not a block",), header=PageHeaderPolicy("T"))

        with pytest.raises(TypeError, match="Unknown block type"):
            build_story(tree)


class TestExampleTable:
    """Tests for example table flowables."""

    def test_border_commands_when_two_by_two_then_rules_by_position(self, style):
        """Label row gets a thick rule; content cells get hairlines."""
        commands = _border_commands(2, 2, style)

        assert ("LINEBELOW", (0, 0), (0, 0), 0.7, colors.black) in commands
        assert ("LINEBELOW", (1, 0), (1, 0), 0.7, colors.black) in commands
        assert ("LINEBELOW", (0, 1), (0, 1), 0.1, colors.black) in commands
        assert ("LINEBEFORE", (1, 1), (1, 1), 0.1, colors.black) in commands
        assert not any(c[0] == "LINEBEFORE" and c[1] == (0, 1) for c in commands)
        assert not any(c[0] == "LINEABOVE" for c in commands)
        assert len(commands) == 5

    def test_example_table_when_two_columns_then_columns_fill_frame(self, style):
        """Columns share the frame width."""
        table = ExampleTable(columns=(ExampleColumn("Input", "1"), ExampleColumn("Output", "2")))

        flowable = example_table_flowable(table, style)

        width, _ = flowable.wrap(style.frame_width, style.frame_height)

        assert isinstance(flowable, Table)
        assert width == pytest.approx(style.frame_width)
        assert len(flowable._cellvalues) == 2
        assert len(flowable._cellvalues[0]) == 2

    def test_example_table_when_single_column_then_full_width(self, style):
        """Output-only tables span the frame."""
        table = ExampleTable(columns=(ExampleColumn("Output", "hello"),))

        flowable = example_table_flowable(table, style)

        width, _ = flowable.wrap(style.frame_width, style.frame_height)

        assert width == pytest.approx(style.frame_width)
        assert len(flowable._cellvalues[0]) == 1


class TestVerbatim:
    """Tests for verbatim text blocks."""

    def test_verbatim_when_blank_lines_then_all_kept(self, style):
        """Leading, inner and trailing blank lines survive."""
        block = _verbatim("\na\n\nb\n", _build_styles(style)["code"], 400)

        assert block.lines == ["", "a", "", "b", ""]

    def test_verbatim_when_empty_then_one_empty_line(self, style):
        """Empty content still takes up one line."""
        block = _verbatim("", _build_styles(style)["code"], 400)

        assert block.lines == [""]

    def test_verbatim_when_line_too_long_then_hard_wrapped(self, style):
        """Long lines continue on the next line without losing characters."""
        code = _build_styles(style)["code"]
        text = "x" * 500

        block = _verbatim(text, code, 100)

        assert len(block.lines) > 1
        assert "".join(block.lines) == text


class TestFormatPageNumber:
    """Tests for format_page_number()."""

    def test_format_when_decimal_then_plain_number(self):
        assert format_page_number(12, "1") == "12"

    def test_format_when_unknown_pattern_then_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported page numbering"):
            format_page_number(1, "i")


class TestRenderPdf:
    """Tests for PDF rendering."""

    def test_render_to_pdf_when_sample_then_page_per_problem_plus_title(self, sample_packet, tmp_path):
        """Title page plus one page per short problem."""
        output = tmp_path / "out" / "packet.pdf"

        page_count = render_to_pdf(assemble(sample_packet), output)

        assert output.exists()
        assert page_count == 3

    def test_render_to_bytes_when_same_tree_then_identical(self, sample_packet):
        """Same tree, same bytes."""
        tree = assemble(sample_packet)

        first = render_to_bytes(tree)
        second = render_to_bytes(tree)

        assert first.startswith(b"%PDF")
        assert first == second

    def test_render_to_bytes_when_no_problems_then_single_page(self):
        """Empty packet renders just the title page."""
        data = render_to_bytes(assemble(Packet(title="Empty", preamble="Nothing yet.")))

        assert len(PdfReader(io.BytesIO(data)).pages) == 1


class TestLongContent:
    """Tests for examples and code taller than one page."""

    def test_verbatim_split_when_blank_lines_at_boundary_then_all_kept(self, style):
        """Splitting across a page loses no lines, blank ones included."""
        code = _build_styles(style)["code"]
        lines = ["", "a", "", "", "b", ""]
        block = VerbatimText(lines, code)

        first, second = block.split(400, code.leading * 3)

        assert first.lines == ["", "a", ""]
        assert second.lines == ["", "b", ""]

    def test_verbatim_split_when_no_line_fits_then_empty(self, style):
        code = _build_styles(style)["code"]

        assert VerbatimText(["a", "b"], code).split(400, code.leading / 2) == []

    def test_render_when_test_case_has_200_lines_then_spans_pages(self):
        """A visible example taller than the frame continues on later pages."""
        # Arrange
        big_input = "\n".join(f"line{i}" for i in range(200))
        packet = Packet(title="T", problems=(Problem(title="Big", tests=(TestCase(big_input, "1", True),)),))

        # Act
        reader = PdfReader(io.BytesIO(render_to_bytes(assemble(packet))))

        # Assert
        assert len(reader.pages) >= 3
        text = "\n".join(page.extract_text() for page in reader.pages)
        assert "line0" in text
        assert "line199" in text
        assert "Input" in reader.pages[-1].extract_text()

    def test_render_when_description_code_block_has_120_lines_then_spans_pages(self):
        """Fenced code in a description splits across pages too."""
        code = "\n".join(f"row{i}" for i in range(120))
        packet = Packet(title="T", problems=(Problem(title="Code", description=f"```\n{code}\n```"),))

        reader = PdfReader(io.BytesIO(render_to_bytes(assemble(packet))))

        assert len(reader.pages) >= 3
        assert "row119" in reader.pages[-1].extract_text()
