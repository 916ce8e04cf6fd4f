import json

import fitz
import pytest

from ocr_importer.structurer import ExamStructurer
from tests.fakes import SAMPLE_EXAM, FakeModel, MathpixStub, make_mathpix_client


@pytest.fixture
def pdf_bytes() -> bytes:
    """A one-page PDF built with PyMuPDF."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "1. What is 2 + 2?")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def mathpix_stub():
    return MathpixStub()


@pytest.fixture
def ocr_client(mathpix_stub):
    return make_mathpix_client(mathpix_stub)


@pytest.fixture
def structurer():
    return ExamStructurer(api_key="test-key", model=FakeModel(json.dumps(SAMPLE_EXAM)))
