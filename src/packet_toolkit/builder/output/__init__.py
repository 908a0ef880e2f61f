"""
Module: builder.output

Purpose:
    PDF rendering for the packet builder.
    Converts a DocumentTree to PDF using ReportLab.

Key Functions:
    - render_to_pdf(): Render tree to a PDF file
    - render_to_bytes(): Render tree to PDF bytes
    - build_story(): Tree -> ReportLab flowables

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: DocumentTree

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, render_to_bytes, build_story

__all__ = [
    "render_to_pdf",
    "render_to_bytes",
    "build_story",
]
