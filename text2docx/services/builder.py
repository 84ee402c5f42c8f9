# text2docx/services/builder.py
import re
from typing import Iterable, List

from text2docx.models.document import (
    Blank,
    BlockToken,
    Blockquote,
    BodyParagraph,
    CodeBlock,
    DocumentModel,
    Heading,
    HeadingParagraph,
    InlineSpan,
    ListBlock,
    Other,
    Paragraph,
    ParagraphNode,
    Rule,
)
from text2docx.services.inline import split

BULLET = "• "
RULE_GLYPHS = "─" * 40
QUOTE_INDENT = 1
LIST_INDENT = 1
MAX_HEADING_LEVEL = 6
PLAIN_HEADING_MAX_LEN = 50

_newlines = re.compile(r"\n+")
_hash_prefix = re.compile(r"^#+\s*")

def _heading_level(depth: int) -> int:
    return depth if 1 <= depth <= MAX_HEADING_LEVEL else 1

def _plain(text: str) -> BodyParagraph:
    return BodyParagraph(runs=(InlineSpan.plain(text),), plain=True)

def _from_block(tok: BlockToken) -> List[ParagraphNode]:
    if isinstance(tok, Heading):
        return [HeadingParagraph(_heading_level(tok.depth), tok.text)]
    if isinstance(tok, Paragraph):
        return [BodyParagraph(runs=tuple(split(tok.text)))]
    if isinstance(tok, ListBlock):
        return [
            BodyParagraph(runs=(InlineSpan.plain(BULLET), *split(item)), indent=LIST_INDENT)
            for item in tok.items
        ]
    if isinstance(tok, Blockquote):
        text = _newlines.sub(" ", tok.text)
        return [BodyParagraph(runs=(InlineSpan.plain(text),), indent=QUOTE_INDENT, italic=True)]
    if isinstance(tok, CodeBlock):
        return [BodyParagraph(runs=(InlineSpan.plain(line),), code=True) for line in tok.lines]
    if isinstance(tok, Rule):
        return [_plain(RULE_GLYPHS)]
    if isinstance(tok, Blank):
        return [BodyParagraph(plain=True)]
    if isinstance(tok, Other):
        return [_plain(tok.text)] if tok.text else []
    raise TypeError(f"unknown block token: {tok!r}")

def build(tokens: Iterable[BlockToken]) -> DocumentModel:
    """Map block tokens to paragraph nodes, preserving order."""
    model = DocumentModel()
    for tok in tokens:
        model.paragraphs.extend(_from_block(tok))
    return model

def _is_plain_heading(line: str) -> bool:
    # lines without letters (digits, punctuation) also qualify
    return line.startswith("#") or (line == line.upper() and len(line) < PLAIN_HEADING_MAX_LEN)

def build_plain(text: str) -> DocumentModel:
    """Legacy line-per-paragraph mode: no Markdown parsing beyond '#' and all-caps headings."""
    model = DocumentModel()
    for line in text.replace("\r\n", "\n").split("\n"):
        if not line.strip():
            continue
        if _is_plain_heading(line):
            model.paragraphs.append(HeadingParagraph(1, _hash_prefix.sub("", line)))
        else:
            model.paragraphs.append(BodyParagraph(runs=(InlineSpan.plain(line),)))
    return model
