from text2docx.models.document import InlineSpan, SpanStyle
from text2docx.services.inline import split

B, I, C, S, P = SpanStyle.BOLD, SpanStyle.ITALIC, SpanStyle.CODE, SpanStyle.STRIKE, SpanStyle.PLAIN

CASES = [
    ("**bold**", [(B, "bold")]),
    ("plain", [(P, "plain")]),
    ("a *b* c", [(P, "a "), (I, "b"), (P, " c")]),
    ("use `x = 1` here", [(P, "use "), (C, "x = 1"), (P, " here")]),
    ("~~gone~~ now", [(S, "gone"), (P, " now")]),
    ("**a** and **b**", [(B, "a"), (P, " and "), (B, "b")]),
    # no nesting: inner markers stay literal
    ("**a *b* c**", [(B, "a *b* c")]),
    # unmatched markers fall through as plain text
    ("2 * 3 = 6", [(P, "2 * 3 = 6")]),
    ("tilde ~ and tick `", [(P, "tilde ~ and tick `")]),
    ("**", [(P, "**")]),
]

def _pairs(spans):
    return [(s.style, s.text) for s in spans]

def test_split_cases():
    for raw, expected in CASES:
        assert _pairs(split(raw)) == expected, raw

def test_split_empty():
    assert split("") == []

def test_split_keeps_text_without_delimiters():
    raw = "Intro **strong** then *soft*, `code` and ~~old~~.\nNext line"
    joined = "".join(s.text for s in split(raw))
    assert joined == "Intro strong then soft, code and old.\nNext line"

def test_split_is_deterministic():
    raw = "x **y** *z* `w`"
    assert split(raw) == split(raw)
    assert split(raw)[1] == InlineSpan(SpanStyle.BOLD, "y")
