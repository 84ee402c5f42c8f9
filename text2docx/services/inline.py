# text2docx/services/inline.py
import re
from typing import List

from text2docx.models.document import InlineSpan, SpanStyle

# One pass, first alternative wins at each position. No nesting:
# "**a *b* c**" is a single bold span with the inner asterisks kept.
_span_pat = re.compile(
    r"\*\*(?P<bold>.+?)\*\*"
    r"|\*(?P<italic>.+?)\*"
    r"|`(?P<code>.+?)`"
    r"|~~(?P<strike>.+?)~~"
    r"|(?P<plain>[^*`~]+)"
    r"|(?P<stray>[*`~])"
)

_STYLES = {
    "bold": SpanStyle.BOLD,
    "italic": SpanStyle.ITALIC,
    "code": SpanStyle.CODE,
    "strike": SpanStyle.STRIKE,
}

def split(text: str) -> List[InlineSpan]:
    """Split inline Markdown into styled spans, delimiters stripped.

    Unmatched marker characters come back as plain text; neighbouring plain
    pieces are merged so "a * b" is one span.
    """
    spans: List[InlineSpan] = []
    for m in _span_pat.finditer(text):
        kind = m.lastgroup
        if kind in _STYLES:
            spans.append(InlineSpan(_STYLES[kind], m.group(kind)))
            continue
        piece = m.group(kind)
        if spans and spans[-1].style is SpanStyle.PLAIN:
            spans[-1] = InlineSpan.plain(spans[-1].text + piece)
        else:
            spans.append(InlineSpan.plain(piece))
    return spans
