# text2docx/services/exporter.py
import io, re
from typing import Optional

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from text2docx.models.document import BodyParagraph, DocumentModel, HeadingParagraph, SpanStyle

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOCX_EXT = ".docx"

# paragraph/run formatting for the rendered document
BODY_SIZE = Pt(12)
CODE_SIZE = Pt(10)
CODE_FONT = "Courier New"
CODE_FILL = "F2F2F2"
INDENT_STEP_INCHES = 0.5
HEADING_SPACE_BEFORE = Pt(12)
HEADING_SPACE_AFTER = Pt(6)
BODY_SPACE_AFTER = Pt(10)

_ext_pat = re.compile(r"\.[^/.]+$")
# characters lxml refuses in text nodes (C0 controls except tab/LF/CR, surrogates, U+FFFE/FFFF)
_xml_illegal_pat = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

def docx_filename(filename: Optional[str], file_id: str) -> str:
    """'report.txt' -> 'report.docx'; no name -> 'document-<id>.docx'."""
    if filename:
        return _ext_pat.sub("", filename) + DOCX_EXT
    return f"document-{file_id}{DOCX_EXT}"

def _xml_safe(text: str) -> str:
    return _xml_illegal_pat.sub("", text)

def _shade(paragraph, fill: str):
    # w:shd precedes w:spacing/w:ind in pPr, so add it before any formatting
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    paragraph._p.get_or_add_pPr().append(shd)

def _add_heading(doc: Document, node: HeadingParagraph):
    h = doc.add_heading(_xml_safe(node.text), level=node.level)
    h.paragraph_format.space_before = HEADING_SPACE_BEFORE
    h.paragraph_format.space_after = HEADING_SPACE_AFTER

def _add_body(doc: Document, node: BodyParagraph):
    p = doc.add_paragraph()
    if node.code:
        _shade(p, CODE_FILL)
        p.paragraph_format.space_after = Pt(0)
    else:
        p.paragraph_format.space_after = BODY_SPACE_AFTER
    if node.indent:
        p.paragraph_format.left_indent = Inches(INDENT_STEP_INCHES * node.indent)

    for span in node.runs:
        r = p.add_run(_xml_safe(span.text))
        r.font.size = BODY_SIZE
        if span.style is SpanStyle.BOLD:
            r.bold = True
        elif span.style is SpanStyle.ITALIC:
            r.italic = True
        elif span.style is SpanStyle.STRIKE:
            r.font.strike = True
        if node.italic:
            r.italic = True
        if node.code or span.style is SpanStyle.CODE:
            r.font.name = CODE_FONT
            r.font.size = CODE_SIZE

def render_docx(model: DocumentModel, title: Optional[str] = None, author: Optional[str] = None) -> bytes:
    doc = Document()
    if title:
        doc.core_properties.title = _xml_safe(title)
    if author:
        doc.core_properties.author = _xml_safe(author)

    for node in model:
        if isinstance(node, HeadingParagraph):
            _add_heading(doc, node)
        elif isinstance(node, BodyParagraph):
            _add_body(doc, node)
        else:
            raise TypeError(f"unknown paragraph node: {node!r}")

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
