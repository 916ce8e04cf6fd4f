"""
HTML rendering for structured exams.

Every text field goes through the math segmenter; math is emitted with
KaTeX delimiters and typeset in the browser by KaTeX auto-render.
"""
from html import escape
from typing import Optional

from ocr_importer.schemas import StructuredExam
from utils.latex_segments import SegmentKind, segment_math_text

KATEX_VERSION = "0.16.9"
KATEX_CDN = f"https://cdn.jsdelivr.net/npm/katex@{KATEX_VERSION}/dist"

# Elements with this class are never typeset, even if they contain delimiters
PLAIN_CLASS = "plain-text"

PAGE_HEAD = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>PDF OCR</title>
<link rel="stylesheet" href="{KATEX_CDN}/katex.min.css">
<script defer src="{KATEX_CDN}/katex.min.js"></script>
<script defer src="{KATEX_CDN}/contrib/auto-render.min.js"
  onload="renderMathInElement(document.body, {{delimiters: [
    {{left: '\\\\[', right: '\\\\]', display: true}},
    {{left: '\\\\(', right: '\\\\)', display: false}}
  ], ignoredClasses: ['{PLAIN_CLASS}']}});"></script>
</head>
<body>
<div class="pdf-ocr-container">
<header class="header">
<h1>PDF OCR</h1>
<p>Upload a PDF or call test API to extract questions and answers.</p>
</header>
"""

PAGE_FOOT = """</div>
</body>
</html>
"""


def render_text(text: Optional[str]) -> str:
    html = []
    for seg in segment_math_text(text):
        if seg.kind is SegmentKind.BLOCK:
            html.append(f'<div class="math-block">\\[{escape(seg.text)}\\]</div>')
        elif seg.kind is SegmentKind.INLINE:
            html.append(f'<span class="math-inline">\\({escape(seg.text)}\\)</span>')
        else:
            html.append(f'<span class="{PLAIN_CLASS}">{escape(seg.text)}</span>')
    return " ".join(html)


def render_upload_form(error: Optional[str] = None) -> str:
    html = """<div class="upload-section">
<form action="/view" method="post" enctype="multipart/form-data" class="upload-form">
<input type="file" name="pdf" accept="application/pdf" class="file-input">
<button type="submit" class="upload-btn">Upload &amp; Extract</button>
</form>
<a href="/view/test" class="test-btn">Call Test API</a>
"""
    if error:
        html += f'<p class="error-message {PLAIN_CLASS}">{escape(error)}</p>\n'
    return html + "</div>\n"


def render_upload_page(error: Optional[str] = None) -> str:
    return PAGE_HEAD + render_upload_form(error) + PAGE_FOOT


def render_exam(exam: StructuredExam) -> str:
    body = [render_upload_form(), '<div class="content-section">', "<h2>Extracted Questions</h2>"]

    meta = [(label, value) for label, value in (
        ("Subject", exam.subject),
        ("Topic", exam.topic),
        ("Subtopic", exam.subTopic),
    ) if value]
    if meta:
        body.append('<p class="exam-meta">' + " | ".join(
            f'<b>{label}:</b> <span class="{PLAIN_CLASS}">{escape(value)}</span>' for label, value in meta
        ) + "</p>")

    if not exam.questions:
        body.append('<p class="placeholder-text">No content extracted yet. '
                    'Please upload a PDF or call test API.</p>')
    else:
        body.append('<div class="questions-list">')
        for idx, q in enumerate(exam.questions, start=1):
            body.append('<div class="question-item">')
            body.append(f'<p class="question-text"><b>Q{idx}:</b> {render_text(q.question)}</p>')
            body.append('<div class="opt-diagram-container">')

            body.append('<ol type="1" class="options-list">')
            for opt in q.options:
                body.append(f'<li class="option-item">{render_text(opt)}</li>')
            body.append("</ol>")

            if q.image:
                body.append(
                    f'<div class="question-image-container"><img src="{escape(q.image)}" '
                    f'alt="Question {idx}" class="question-image"></div>'
                )
            body.append("</div>")

            if q.hint:
                body.append(f'<p class="hint-text"><i>Hint: {render_text(q.hint)}</i></p>')
            body.append("</div>")
        body.append("</div>")

    body.append("</div>")
    return PAGE_HEAD + "\n".join(body) + "\n" + PAGE_FOOT
