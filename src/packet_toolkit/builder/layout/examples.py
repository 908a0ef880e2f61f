"""
Module: builder.layout.examples

Purpose:
    Lay out one test case as a labelled example table.

Algorithm:
    - No input but some output: single "Output" column. An input column
      would be empty and says nothing for output-only examples.
    - Anything else (input present, or both empty): "Input" and "Output"
      side by side. Empty text still gets its box so the table stays
      symmetric; blank cases are never dropped here.

Key Functions:
    - layout_test_case(): TestCase -> ExampleTable

Dependencies:
    - core.models: TestCase
    - builder.layout.models: ExampleTable, ExampleColumn

Used By:
    - builder.layout.sections: Problem rendering
"""

from __future__ import annotations

from packet_toolkit.core.models import TestCase

from .models import ExampleColumn, ExampleTable

INPUT_LABEL = "Input"
OUTPUT_LABEL = "Output"


def layout_test_case(test: TestCase) -> ExampleTable:
    """
    Choose the one- or two-column layout for a test case.

    Uses the explicit emptiness checks on TestCase so the both-empty
    case falls through to two columns.

    Args:
        test: Test case to lay out (visibility is not checked here)

    Returns:
        ExampleTable with one or two columns

    Example:
        >>> layout_test_case(TestCase("", "hello")).labels
        ('Output',)
        >>> layout_test_case(TestCase("", "")).labels
        ('Input', 'Output')
    """
    if not test.has_input and test.has_output:
        return ExampleTable(columns=(ExampleColumn(OUTPUT_LABEL, test.output),))

    return ExampleTable(columns=(
        ExampleColumn(INPUT_LABEL, test.input),
        ExampleColumn(OUTPUT_LABEL, test.output),
    ))
