"""
Module: builder.layout.markdown

Purpose:
    Convert markdown (packet preamble and problem descriptions) into
    document tree blocks. Inline formatting becomes ReportLab paragraph
    markup with all text escaped; code stays verbatim.

Key Functions:
    - render_markdown(): Markdown text -> tuple of blocks
    - inline_markup(): Inline token -> ReportLab markup

Dependencies:
    - markdown-it-py: CommonMark tokenizer
    - builder.layout.models: Block types

Used By:
    - builder.layout.sections: Problem descriptions
    - builder.layout.assembler: Preamble
"""

from __future__ import annotations

import logging
from typing import Optional
from xml.sax.saxutils import escape, quoteattr

from markdown_it import MarkdownIt

from .config import StyleConfig
from .models import (
    Block,
    CodeBlock,
    Divider,
    Heading,
    ListBlock,
    MarkdownTable,
    Paragraph,
    QuoteBlock,
)

logger = logging.getLogger(__name__)

# Markdown "#" lands below problem (1) and test case (2) headings
DEFAULT_HEADING_OFFSET = 2
MAX_HEADING_LEVEL = 6

_MD_PARSER: MarkdownIt | None = None


def _get_markdown_parser() -> MarkdownIt:
    global _MD_PARSER
    if _MD_PARSER is None:
        # Raw HTML is tokenized as text and escaped, never interpreted
        _MD_PARSER = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])
    return _MD_PARSER


def render_markdown(
    text: str,
    *,
    style: Optional[StyleConfig] = None,
    heading_offset: int = DEFAULT_HEADING_OFFSET,
) -> tuple[Block, ...]:
    """
    Convert markdown into document blocks.

    Args:
        text: Markdown source
        style: Style supplying the thematic break weight
        heading_offset: Added to markdown heading levels

    Returns:
        Blocks in source order; empty for blank input

    Example:
        >>> render_markdown("Read *two* numbers.")
        (Paragraph(markup='Read <i>two</i> numbers.'),)
    """
    if not text.strip():
        return ()

    style = style or StyleConfig()
    tokens = _get_markdown_parser().parse(text)
    blocks: list[Block] = []

    i = 0
    while i < len(tokens):
        tok = tokens[i]
        t = tok.type

        if t == "heading_open":
            level = int(tok.tag[1]) if tok.tag.startswith("h") else 1
            inline = tokens[i + 1]
            blocks.append(Heading(
                text=_plain_text(inline),
                level=min(level + heading_offset, MAX_HEADING_LEVEL),
            ))
            i += 3
            continue

        if t == "paragraph_open":
            markup = inline_markup(tokens[i + 1], mono_font=style.mono_font)
            if markup:
                blocks.append(Paragraph(markup))
            i += 3
            continue

        if t in {"bullet_list_open", "ordered_list_open"}:
            block, i = _parse_list(tokens, i, style.mono_font)
            blocks.append(block)
            continue

        if t in {"fence", "code_block"}:
            blocks.append(CodeBlock(_strip_final_newline(tok.content)))
            i += 1
            continue

        if t == "blockquote_open":
            inner, i = _collect_until_close(tokens, i)
            lines = [inline_markup(x, mono_font=style.mono_font) for x in inner if x.type == "inline"]
            blocks.append(QuoteBlock("<br/>".join(line for line in lines if line)))
            continue

        if t == "table_open":
            block, i = _parse_table(tokens, i, style.mono_font)
            blocks.append(block)
            continue

        if t == "hr":
            blocks.append(Divider(weight=style.header_divider_weight))
            i += 1
            continue

        if t == "html_block":
            blocks.append(Paragraph(escape(tok.content.strip())))
            i += 1
            continue

        logger.debug(f"Skipping markdown token {t}")
        i += 1

    return tuple(blocks)


# ─────────────────────────────────────────────────────────────────────────────
# Inline Conversion
# ─────────────────────────────────────────────────────────────────────────────

def inline_markup(token, *, mono_font: str = "Courier") -> str:
    """
    Convert an inline token into ReportLab paragraph markup.

    Args:
        token: markdown-it ``inline`` token
        mono_font: Font face for inline code

    Returns:
        Markup string with text escaped
    """
    if token is None:
        return ""
    if token.type != "inline" or not token.children:
        return escape(token.content or "")

    parts: list[str] = []
    for child in token.children:
        ct = child.type
        if ct == "text":
            parts.append(escape(child.content))
        elif ct == "softbreak":
            parts.append(" ")
        elif ct == "hardbreak":
            parts.append("<br/>")
        elif ct == "strong_open":
            parts.append("<b>")
        elif ct == "strong_close":
            parts.append("</b>")
        elif ct == "em_open":
            parts.append("<i>")
        elif ct == "em_close":
            parts.append("</i>")
        elif ct == "s_open":
            parts.append("<strike>")
        elif ct == "s_close":
            parts.append("</strike>")
        elif ct == "code_inline":
            parts.append(f'<font face={quoteattr(mono_font)}>{escape(child.content)}</font>')
        elif ct == "link_open":
            href = child.attrGet("href") or ""
            parts.append(f'<link href={quoteattr(href)} color="blue">')
        elif ct == "link_close":
            parts.append("</link>")
        elif ct == "image":
            # Images are not embedded; keep the alt text
            parts.append(escape(child.content))
        else:
            parts.append(escape(child.content or ""))
    return "".join(parts).strip()


def _plain_text(token) -> str:
    """Inline token text with formatting dropped."""
    if token is None or not token.children:
        return token.content if token is not None else ""
    return "".join(
        c.content if c.type in {"text", "code_inline"} else " " if c.type == "softbreak" else ""
        for c in token.children
    ).strip()


def _strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


# ─────────────────────────────────────────────────────────────────────────────
# Container Blocks
# ─────────────────────────────────────────────────────────────────────────────

def _collect_until_close(tokens: list, start: int) -> tuple[list, int]:
    """
    Collect the tokens between an opening token and its matching close.

    Returns:
        (inner tokens, index after the close token)
    """
    open_tok = tokens[start]
    close_type = open_tok.type.replace("_open", "_close")
    i = start + 1
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == close_type and tok.level == open_tok.level:
            return tokens[start + 1:i], i + 1
        i += 1
    return tokens[start + 1:], len(tokens)


def _parse_list(tokens: list, start: int, mono_font: str) -> tuple[ListBlock, int]:
    """
    Parse a bullet or ordered list.

    Nested lists are folded into their parent item as extra lines.
    """
    open_tok = tokens[start]
    ordered = open_tok.type == "ordered_list_open"
    first = open_tok.attrGet("start")
    inner, next_i = _collect_until_close(tokens, start)

    items: list[str] = []
    i = 0
    while i < len(inner):
        tok = inner[i]
        if tok.type == "list_item_open" and tok.level == open_tok.level + 1:
            item_tokens, i = _collect_until_close(inner, i)
            items.append(_list_item_markup(item_tokens, mono_font))
            continue
        i += 1

    return ListBlock(items=tuple(items), ordered=ordered, start=int(first) if first is not None else 1), next_i


def _list_item_markup(tokens: list, mono_font: str) -> str:
    """Join an item's paragraphs; nested lists become indented lines."""
    lines: list[str] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.type in {"bullet_list_open", "ordered_list_open"}:
            nested, i = _parse_list(tokens, i, mono_font)
            for n, item in enumerate(nested.items):
                marker = f"{nested.start + n}." if nested.ordered else "&bull;"
                lines.append(f"&nbsp;&nbsp;&nbsp;{marker} {item}")
            continue
        if tok.type == "inline":
            lines.append(inline_markup(tok, mono_font=mono_font))
        elif tok.type in {"fence", "code_block"}:
            code = escape(_strip_final_newline(tok.content)).replace("\n", "<br/>")
            lines.append(f'<font face={quoteattr(mono_font)}>{code}</font>')
        i += 1
    return "<br/>".join(line for line in lines if line)


def _parse_table(tokens: list, start: int, mono_font: str) -> tuple[MarkdownTable, int]:
    """Parse a GFM table into rows of cell markup."""
    inner, next_i = _collect_until_close(tokens, start)
    rows: list[tuple[str, ...]] = []
    current: Optional[list[str]] = None
    for tok in inner:
        if tok.type == "tr_open":
            current = []
        elif tok.type == "inline" and current is not None:
            current.append(inline_markup(tok, mono_font=mono_font))
        elif tok.type == "tr_close" and current is not None:
            rows.append(tuple(current))
            current = None
    return MarkdownTable(rows=tuple(rows)), next_i
