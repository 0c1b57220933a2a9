from pathlib import Path

import reportlab

from learnhub.services.document import (
    PageLayout,
    layout_with_font,
    paginate,
    render_pdf,
    reportlab_measure,
    study_guide_filename,
    wrap_text,
)

# one unit per character keeps the geometry easy to reason about
chars = len


def test_wrap_breaks_at_whitespace():
    assert wrap_text("aaa bbb ccc", 7, chars) == ["aaa bbb", "ccc"]


def test_wrap_keeps_paragraphs_and_blank_lines():
    assert wrap_text("one two\n\nthree", 20, chars) == ["one two", "", "three"]


def test_wrap_breaks_oversized_word():
    assert wrap_text("ab abcdefghij cd", 4, chars) == ["ab", "abcd", "efgh", "ij", "cd"]


def test_wrap_never_exceeds_width():
    text = "lorem ipsum dolor sit amet consectetur adipiscing elit " * 20
    assert all(len(line) <= 15 for line in wrap_text(text, 15, chars))


def test_wrap_empty():
    assert wrap_text("", 10, chars) == []


def test_empty_text_is_single_empty_page():
    doc = paginate("", measure=chars)
    assert len(doc.pages) == 1
    assert doc.pages[0].lines == []


def test_short_text_is_single_page():
    doc = paginate("\n".join(f"line {i}" for i in range(5)), measure=chars)
    assert len(doc.pages) == 1
    assert [line.y for line in doc.pages[0].lines] == [20, 27, 34, 41, 48]
    assert all(line.x == 10 for line in doc.pages[0].lines)


def test_long_text_breaks_pages_within_height():
    layout = PageLayout()
    doc = paginate("\n".join(["w"] * 100), layout, measure=chars)

    # y = 20 + 7k fits while y + 7 <= 277, i.e. 36 lines per page
    assert [len(p.lines) for p in doc.pages] == [36, 36, 28]
    assert doc.line_count == 100
    for page in doc.pages:
        assert page.lines[0].y == layout.top_margin
        for line in page.lines:
            assert line.y + layout.line_height <= layout.page_height


def test_pagination_is_deterministic():
    text = "The quick brown fox jumps over the lazy dog. " * 300
    a = paginate(text)
    b = paginate(text)
    assert [[(l.text, l.y) for l in p.lines] for p in a.pages] == [[(l.text, l.y) for l in p.lines] for p in b.pages]
    assert len(a.pages) > 1


def test_custom_layout():
    layout = PageLayout(max_width=10, line_height=5, page_height=30, top_margin=10, left_margin=2)
    doc = paginate("aaaa bbbb cccc dddd eeee", layout, measure=chars)
    assert [[l.text for l in p.lines] for p in doc.pages] == [["aaaa bbbb", "cccc dddd", "eeee"]]
    doc = paginate("\n".join("abcdef"), layout, measure=chars)
    assert [len(p.lines) for p in doc.pages] == [4, 2]


def test_reportlab_measure_is_in_mm():
    measure = reportlab_measure("Helvetica", 12)
    assert 0 < measure("Hello") < measure("Hello, world")
    # 12pt Helvetica "M" is 10pt wide, about 3.5mm
    assert 3.0 < measure("M") < 4.0


def test_render_pdf_produces_pdf_bytes():
    pdf = render_pdf(paginate("Hello study guide"), title="Study Guide: python")
    assert pdf.startswith(b"%PDF")
    assert pdf.rstrip().endswith(b"%%EOF")


def test_study_guide_filename():
    assert study_guide_filename("machine learning") == "machine learning_study_guide.pdf"


VERA_TTF = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"


def test_layout_without_font_path_keeps_helvetica():
    assert layout_with_font(None) == PageLayout()
    assert layout_with_font("") == PageLayout()


def test_ttf_font_used_for_heading_and_body():
    layout = layout_with_font(VERA_TTF)
    assert layout.font_name == "Vera"
    assert layout.title_font_name == "Vera"
    assert layout.max_width == PageLayout().max_width

    doc = paginate("café – “quoted” naïve\n" * 50, layout)
    pdf = render_pdf(doc, title="Study Guide: café")
    assert len(doc.pages) == 2
    assert pdf.startswith(b"%PDF")
    assert b"Vera" in pdf
