from __future__ import annotations

import io
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

Measure = Callable[[str], float]


@dataclass(frozen=True)
class PageLayout:
    """
    Page geometry in millimetres, top-left origin (y grows downwards).

    Defaults match an A4 portrait page: 297mm tall, 20mm kept free at the
    bottom, body starting 20mm from the top.
    """

    max_width: float = 180.0
    line_height: float = 7.0
    page_height: float = 277.0
    top_margin: float = 20.0
    left_margin: float = 10.0
    font_name: str = "Helvetica"
    font_size: float = 12.0
    title_font_name: str = "Helvetica-Bold"
    title_font_size: float = 18.0


@dataclass(frozen=True)
class PlacedLine:
    text: str
    x: float
    y: float


@dataclass
class DocumentPage:
    lines: list[PlacedLine] = field(default_factory=list)


@dataclass
class PaginatedDocument:
    layout: PageLayout
    pages: list[DocumentPage] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        return sum(len(p.lines) for p in self.pages)


def register_ttf_font(path: str | Path, name: str | None = None) -> str:
    """
    Register a TrueType font (e.g. DejaVuSans, Noto Sans) with reportlab and
    return its name for use in a PageLayout. The standard Helvetica only
    covers WinAnsi; a Unicode TTF is needed for CJK, emoji and most symbols.
    """
    path = Path(path)
    name = name or path.stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(path)))
    return name


def layout_with_font(path: str | Path | None, base: PageLayout | None = None) -> PageLayout:
    """Default layout, switched to a TTF for both heading and body when `path` is set."""
    base = base or PageLayout()
    if not path:
        return base
    name = register_ttf_font(path)
    return replace(base, font_name=name, title_font_name=name)


def reportlab_measure(font_name: str, font_size: float) -> Measure:
    """Width of a string in mm for a registered PDF font."""

    def _measure(s: str) -> float:
        return stringWidth(s, font_name, font_size) / mm

    return _measure


# ----------------------------
# Wrapping
# ----------------------------

def _split_long_word(word: str, max_width: float, measure: Measure) -> list[str]:
    pieces: list[str] = []
    cur = ""
    for ch in word:
        if cur and measure(cur + ch) > max_width:
            pieces.append(cur)
            cur = ch
        else:
            cur += ch
    if cur:
        pieces.append(cur)
    return pieces


def wrap_text(text: str, max_width: float, measure: Measure) -> list[str]:
    """
    Greedy word wrap. Paragraphs (newline-separated) wrap independently and
    blank paragraphs are kept as empty lines. A single word wider than
    `max_width` is broken at character boundaries.
    """
    if not text:
        return []

    lines: list[str] = []
    for para in text.splitlines():
        words = para.split()
        if not words:
            lines.append("")
            continue

        cur = ""
        for word in words:
            candidate = f"{cur} {word}" if cur else word
            if measure(candidate) <= max_width:
                cur = candidate
                continue

            if cur:
                lines.append(cur)
                cur = ""

            if measure(word) <= max_width:
                cur = word
            else:
                pieces = _split_long_word(word, max_width, measure)
                lines.extend(pieces[:-1])
                cur = pieces[-1]

        if cur:
            lines.append(cur)
    return lines


# ----------------------------
# Pagination
# ----------------------------

def paginate(text: str, layout: PageLayout | None = None, measure: Measure | None = None) -> PaginatedDocument:
    layout = layout or PageLayout()
    measure = measure or reportlab_measure(layout.font_name, layout.font_size)

    doc = PaginatedDocument(layout=layout, pages=[DocumentPage()])
    y = layout.top_margin

    for line in wrap_text(text, layout.max_width, measure):
        # a page always takes at least one line, even if the layout is too short for it
        if y + layout.line_height > layout.page_height and doc.pages[-1].lines:
            doc.pages.append(DocumentPage())
            y = layout.top_margin
        doc.pages[-1].lines.append(PlacedLine(text=line, x=layout.left_margin, y=y))
        y += layout.line_height

    return doc


# ----------------------------
# PDF rendering
# ----------------------------

TITLE_POSITION = (10.0, 10.0)


def render_pdf(document: PaginatedDocument, title: str | None = None) -> bytes:
    """
    Draw a paginated document onto A4 pages. The optional title heading goes
    on the first page above the body.
    """
    buf = io.BytesIO()
    page_w, page_h = A4
    c = canvas.Canvas(buf, pagesize=(page_w, page_h))
    if title:
        c.setTitle(title)

    def _to_pdf(x_mm: float, y_mm: float) -> tuple[float, float]:
        # reportlab's origin is bottom-left, in points
        return x_mm * mm, page_h - y_mm * mm

    layout = document.layout
    for i, page in enumerate(document.pages):
        if i == 0 and title:
            c.setFont(layout.title_font_name, layout.title_font_size)
            c.drawString(*_to_pdf(*TITLE_POSITION), title)

        c.setFont(layout.font_name, layout.font_size)
        for line in page.lines:
            c.drawString(*_to_pdf(line.x, line.y), line.text)
        c.showPage()

    c.save()
    return buf.getvalue()


def study_guide_filename(query: str) -> str:
    return f"{query}_study_guide.pdf"
