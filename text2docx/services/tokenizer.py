# text2docx/services/tokenizer.py
"""Markdown block lexing on top of markdown-it-py.

markdown-it produces a flat open/close token stream; this module folds the
top-level part of it into the closed set of BlockToken kinds the builder
understands. Inline markup is left as raw source text.
"""
import re
from typing import List, Optional

from markdown_it import MarkdownIt

from text2docx.models.document import (
    Blank,
    BlockToken,
    Blockquote,
    CodeBlock,
    Heading,
    ListBlock,
    Other,
    Paragraph,
    Rule,
)

DEFAULT_PRESET = "gfm-like"

_newline_pat = re.compile(r"\r\n?")

def _make_parser(preset: str) -> MarkdownIt:
    return MarkdownIt(preset, options_update={"linkify": False})

def _heading_level(token) -> Optional[int]:
    """Extract heading level from an hN tag, else None."""
    if token.tag and token.tag[0] == "h" and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None

def _close_index(tokens: list, i: int) -> int:
    """Index of the token closing tokens[i]; i itself for self-contained tokens."""
    tok = tokens[i]
    if tok.nesting != 1:
        return i
    for j in range(i + 1, len(tokens)):
        if tokens[j].level == tok.level and tokens[j].nesting == -1:
            return j
    return len(tokens) - 1

def _inline_texts(tokens: list) -> List[str]:
    return [t.content for t in tokens if t.type == "inline"]

def _nested_texts(tokens: list) -> List[str]:
    """Inline text plus any code nested in a list or blockquote, in source order."""
    out = []
    for t in tokens:
        if t.type == "inline":
            out.append(t.content)
        elif t.type in ("fence", "code_block"):
            out.append("\n".join(_code_lines(t.content)))
    return out

def _source_slice(token, source_lines: List[str]) -> str:
    if token.map:
        start, end = token.map
        return "\n".join(source_lines[start:end]).rstrip()
    return token.content.rstrip()

def _code_lines(content: str) -> tuple:
    if not content:
        return ()
    if content.endswith("\n"):
        content = content[:-1]
    return tuple(content.split("\n"))

def _to_block(tokens: list, i: int, j: int, source_lines: List[str]) -> BlockToken:
    tok = tokens[i]
    inner = tokens[i + 1:j]

    if tok.type == "heading_open":
        text = "".join(_inline_texts(inner))
        return Heading(_heading_level(tok) or 1, text)
    if tok.type == "paragraph_open":
        return Paragraph("\n".join(_inline_texts(inner)))
    if tok.type in ("bullet_list_open", "ordered_list_open"):
        return ListBlock(tuple(_nested_texts(inner)))
    if tok.type == "blockquote_open":
        return Blockquote("\n".join(_nested_texts(inner)))
    if tok.type in ("fence", "code_block"):
        return CodeBlock(_code_lines(tok.content))
    if tok.type == "hr":
        return Rule()
    return Other(_source_slice(tok, source_lines))

def tokenize(text: str, preset: str = DEFAULT_PRESET) -> List[BlockToken]:
    """Lex `text` into top-level block tokens, in source order.

    A Blank is inserted wherever two neighbouring blocks are separated by one
    or more empty lines. Never raises on malformed input.
    """
    src = _newline_pat.sub("\n", text)
    tokens = _make_parser(preset).parse(src)
    source_lines = src.split("\n")

    blocks: List[BlockToken] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        j = _close_index(tokens, i)
        # list ranges swallow trailing blank lines, so look at the line above instead
        if blocks and tok.map and tok.map[0] > 0 and not source_lines[tok.map[0] - 1].strip():
            blocks.append(Blank())
        blocks.append(_to_block(tokens, i, j, source_lines))
        i = j + 1
    return blocks
