from text2docx.models.document import (
    Blank, Blockquote, CodeBlock, Heading, ListBlock, Other, Paragraph, Rule,
)
from text2docx.services.tokenizer import tokenize

def test_heading_blank_paragraph():
    blocks = tokenize("## Title\n\nSome **bold** text.\n")
    assert blocks == [Heading(2, "Title"), Blank(), Paragraph("Some **bold** text.")]

def test_adjacent_blocks_have_no_blank():
    blocks = tokenize("# Title\nbody\n")
    assert blocks == [Heading(1, "Title"), Paragraph("body")]

def test_paragraph_keeps_soft_breaks():
    assert tokenize("one\ntwo\n") == [Paragraph("one\ntwo")]

def test_bullet_and_ordered_lists():
    assert tokenize("- one\n- *two*\n") == [ListBlock(("one", "*two*"))]
    assert tokenize("1. first\n2. second\n") == [ListBlock(("first", "second"))]

def test_nested_list_is_flattened():
    assert tokenize("- a\n  - b\n- c\n") == [ListBlock(("a", "b", "c"))]

def test_blockquote():
    assert tokenize("> quoted\n> more\n") == [Blockquote("quoted\nmore")]

def test_fenced_code_keeps_whitespace():
    blocks = tokenize("```python\n  indented\n\nx = 1\n```\n")
    assert blocks == [CodeBlock(("  indented", "", "x = 1"))]

def test_indented_code_block():
    assert tokenize("    code line\n") == [CodeBlock(("code line",))]

def test_rule():
    assert tokenize("***\n") == [Rule()]

def test_html_and_tables_degrade_to_other():
    assert tokenize("<div>hi</div>\n") == [Other("<div>hi</div>")]
    table = "| a | b |\n|---|---|\n| 1 | 2 |"
    assert tokenize(table + "\n") == [Other(table)]

def test_empty_and_crlf_input():
    assert tokenize("") == []
    assert tokenize("# A\r\n\r\nb\r\n") == [Heading(1, "A"), Blank(), Paragraph("b")]

def test_code_inside_blockquote_is_kept():
    assert tokenize("> ```\n> code line\n> ```\n") == [Blockquote("code line")]
    assert tokenize("> intro\n>\n>     indented\n") == [Blockquote("intro\nindented")]

def test_code_inside_list_item_is_kept():
    blocks = tokenize("- item\n\n  ```\n  x = 1\n  ```\n")
    assert blocks == [ListBlock(("item", "x = 1"))]

def test_fence_with_single_blank_line():
    assert tokenize("```\n\n```\n") == [CodeBlock(("",))]
    assert tokenize("```\n```\n") == [CodeBlock(())]
