"""
Tests for the HTML rendering surface
"""
from ocr_importer.schemas import Question, StructuredExam
from utils.render import render_exam, render_text, render_upload_page


def test_render_text_mixed_segments():
    html = render_text("Before \\[a+b\\] after $c$ end")

    assert html == (
        '<span class="plain-text">Before</span> '
        '<div class="math-block">\\[a+b\\]</div> '
        '<span class="plain-text">after</span> '
        '<span class="math-inline">\\(c\\)</span> '
        '<span class="plain-text">end</span>'
    )


def test_render_text_escapes_html():
    html = render_text("<b>x</b> $a<b$")

    assert "<b>x</b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "\\(a&lt;b\\)" in html


def test_render_text_empty():
    assert render_text(None) == ""
    assert render_text("   ") == ""


def test_render_exam_questions():
    exam = StructuredExam(
        subject="Maths",
        topic="Algebra",
        subTopic="Quadratics",
        questions=[
            Question(question="Solve $x^2=4$", options=["$2$", "$-2$"], image="https://img.test/q.png?w=1&h=2"),
            Question(question="Plain question", hint="Use \\[x=1\\]"),
        ],
    )
    html = render_exam(exam)

    assert '<b>Subject:</b> <span class="plain-text">Maths</span>' in html
    assert '<b>Subtopic:</b> <span class="plain-text">Quadratics</span>' in html
    assert "<b>Q1:</b>" in html and "<b>Q2:</b>" in html
    assert html.count('<li class="option-item">') == 2
    assert 'src="https://img.test/q.png?w=1&amp;h=2"' in html
    assert 'alt="Question 1"' in html
    assert html.count('class="question-image"') == 1
    assert '<i>Hint: <span class="plain-text">Use</span> <div class="math-block">\\[x=1\\]</div></i>' in html


def test_render_exam_without_questions():
    html = render_exam(StructuredExam())

    assert "No content extracted yet" in html
    assert "exam-meta" not in html


def test_upload_page_error_message():
    html = render_upload_page(error="Error extracting PDF")

    assert '<p class="error-message plain-text">Error extracting PDF</p>' in html
    assert "katex" in html


def test_plain_text_with_delimiters_is_not_typeset():
    html = render_text("Evaluate \\(x\\) now")

    assert html == '<span class="plain-text">Evaluate \\(x\\) now</span>'


def test_auto_render_ignores_plain_text():
    html = render_upload_page()

    assert "ignoredClasses: ['plain-text']" in html
