# text2docx/models/document.py
"""Block tokens, inline spans and paragraph nodes passed between the
tokenizer, the builder and the docx exporter.

Token, span and paragraph kinds are frozen dataclasses and each family is a
closed ``Union`` so dispatch sites can be checked for exhaustiveness.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

# ----------------- block tokens -----------------

@dataclass(frozen=True)
class Heading:
    depth: int
    text: str

@dataclass(frozen=True)
class Paragraph:
    text: str

@dataclass(frozen=True)
class ListBlock:
    items: Tuple[str, ...]

@dataclass(frozen=True)
class Blockquote:
    text: str

@dataclass(frozen=True)
class CodeBlock:
    lines: Tuple[str, ...]

@dataclass(frozen=True)
class Rule:
    pass

@dataclass(frozen=True)
class Blank:
    pass

@dataclass(frozen=True)
class Other:
    text: str = ""

BlockToken = Union[Heading, Paragraph, ListBlock, Blockquote, CodeBlock, Rule, Blank, Other]

# ----------------- inline spans -----------------

class SpanStyle(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    STRIKE = "strike"
    PLAIN = "plain"

@dataclass(frozen=True)
class InlineSpan:
    style: SpanStyle
    text: str

    @classmethod
    def plain(cls, text: str) -> "InlineSpan":
        return cls(SpanStyle.PLAIN, text)

# ----------------- paragraphs -----------------

@dataclass(frozen=True)
class HeadingParagraph:
    level: int
    text: str

@dataclass(frozen=True)
class BodyParagraph:
    runs: Tuple[InlineSpan, ...] = ()
    indent: int = 0        # indent steps, not points
    italic: bool = False   # whole paragraph italic (blockquotes)
    code: bool = False     # monospace + shaded (code block lines)
    plain: bool = False    # no inline styling was applied

    @property
    def text(self) -> str:
        return "".join(r.text for r in self.runs)

ParagraphNode = Union[HeadingParagraph, BodyParagraph]

@dataclass
class DocumentModel:
    paragraphs: List[ParagraphNode] = field(default_factory=list)

    def __iter__(self):
        return iter(self.paragraphs)

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __getitem__(self, i):
        return self.paragraphs[i]

# ----------------- output -----------------

@dataclass
class OutputFile:
    """One rendered document on its way to blob storage."""
    data: bytes
    file_id: str
    filename: str
    mime_type: str
    url: Optional[str] = None   # assigned by the blob store

    @property
    def size(self) -> int:
        return len(self.data)
