"""
Unit Tests for Packet Models

Tests for TestCase, Problem and Packet dataclasses.
"""

import pytest

from packet_toolkit.core.models import Packet, Problem, TestCase


class TestTestCase:
    """Tests for TestCase dataclass."""

    def test_init_when_defaults_then_empty_and_hidden(self):
        """Missing fields default to empty text and hidden."""
        case = TestCase()

        assert case.input == ""
        assert case.output == ""
        assert case.visible is False

    def test_has_input_when_whitespace_then_true(self):
        """Whitespace is content; only the empty string is empty."""
        case = TestCase(input=" \n", output="")

        assert case.has_input is True
        assert case.has_output is False

    def test_init_when_visible_not_bool_then_raises_error(self):
        """visible must be a real boolean."""
        with pytest.raises(ValueError, match="visible must be a bool"):
            TestCase(input="1", output="1", visible="yes")

    def test_init_when_input_not_string_then_raises_error(self):
        """Numeric input is rejected rather than coerced."""
        with pytest.raises(ValueError, match="input must be a string"):
            TestCase(input=12, output="12")

    def test_from_dict_when_visible_missing_then_hidden(self):
        """Packet files omit visible for hidden cases."""
        case = TestCase.from_dict({"input": "a", "output": "b"})

        assert case == TestCase("a", "b", False)

    def test_to_dict_when_called_then_all_fields_present(self):
        """to_dict writes all three fields."""
        assert TestCase("a", "b", True).to_dict() == {"input": "a", "output": "b", "visible": True}


class TestProblem:
    """Tests for Problem dataclass."""

    def test_visible_tests_when_mixed_then_original_order(self):
        """Hidden cases are filtered, order is preserved."""
        # Arrange
        a, b, c = TestCase("a", "b", True), TestCase("c", "d", False), TestCase("e", "f", True)
        problem = Problem(title="P", tests=(a, b, c))

        # Act
        visible = problem.visible_tests

        # Assert
        assert visible == (a, c)
        assert problem.tests == (a, b, c)

    def test_init_when_tests_list_then_stored_as_tuple(self):
        """Lists are accepted and frozen into tuples."""
        problem = Problem(title="P", tests=[TestCase("1", "1", True)])

        assert isinstance(problem.tests, tuple)

    def test_has_description_when_empty_string_then_true(self):
        """An empty description is still present."""
        assert Problem(title="P", description="").has_description is True
        assert Problem(title="P").has_description is False

    def test_init_when_blank_title_then_raises_error(self):
        """Titles must have visible text."""
        with pytest.raises(ValueError, match="title must be a non-empty string"):
            Problem(title="   ")

    def test_init_when_test_not_testcase_then_raises_error(self):
        """Raw dicts are not accepted as tests."""
        with pytest.raises(ValueError, match=r"tests\[0\] must be a TestCase"):
            Problem(title="P", tests=({"input": "1"},))

    def test_to_dict_when_no_description_then_key_omitted(self):
        """Absent description is not written as null."""
        data = Problem(title="P").to_dict()

        assert "description" not in data
        assert data == {"title": "P", "tests": []}

    def test_from_dict_when_round_tripped_then_equal(self):
        """from_dict(to_dict()) gives an equal problem."""
        problem = Problem(title="P", description="", tests=(TestCase("1", "2", True),))

        assert Problem.from_dict(problem.to_dict()) == problem


class TestPacket:
    """Tests for Packet dataclass."""

    def test_counts_when_sample_packet_then_correct(self, sample_packet):
        """problem_count and visible_test_count reflect the problems."""
        assert sample_packet.problem_count == 2
        assert sample_packet.visible_test_count == 3

    def test_init_when_no_problems_then_valid(self):
        """A packet without problems is degenerate but valid."""
        packet = Packet(title="Empty")

        assert packet.problems == ()
        assert packet.preamble == ""

    def test_init_when_missing_title_then_raises_error(self):
        """Packet title is required."""
        with pytest.raises(ValueError, match="Packet title"):
            Packet(title="")

    def test_from_dict_when_preamble_null_then_empty_string(self):
        """A null preamble is read as empty."""
        packet = Packet.from_dict({"title": "T", "preamble": None})

        assert packet.preamble == ""

    def test_init_when_problems_list_then_frozen(self):
        """Packets are immutable once built."""
        packet = Packet(title="T", problems=[Problem(title="P")])

        assert isinstance(packet.problems, tuple)
        with pytest.raises(AttributeError):
            packet.title = "Other"
