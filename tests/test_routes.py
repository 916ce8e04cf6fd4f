"""
Route tests using FastAPI's TestClient with the API clients overridden.
"""
import json

import pytest
from fastapi.testclient import TestClient

from app.core.clients import get_ocr_client, get_structurer, get_test_payload
from app.main import app
from ocr_importer.structurer import ExamStructurer
from tests.fakes import SAMPLE_EXAM, FakeModel, MathpixStub, make_mathpix_client


@pytest.fixture
def client():
    # No `with` block: the lifespan (real clients) is not started
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_clients(ocr=None, structurer=None, payload=None):
    app.dependency_overrides[get_ocr_client] = lambda: ocr or make_mathpix_client(MathpixStub())
    app.dependency_overrides[get_structurer] = lambda: structurer or ExamStructurer(
        "key", model=FakeModel(json.dumps(SAMPLE_EXAM))
    )
    app.dependency_overrides[get_test_payload] = lambda: payload if payload is not None else {}


def upload(client, path, data, filename="paper.pdf", content_type="application/pdf"):
    return client.post(path, files={"pdf": (filename, data, content_type)})


class TestUpload:

    def test_success_returns_exam_json(self, client, pdf_bytes):
        use_clients()
        response = upload(client, "/upload", pdf_bytes)

        assert response.status_code == 200
        assert response.json() == SAMPLE_EXAM

    def test_missing_file_is_400(self, client):
        use_clients()
        response = client.post("/upload")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_non_pdf_is_400(self, client):
        use_clients()
        response = upload(client, "/upload", b"just text", "notes.txt", "text/plain")

        assert response.status_code == 400

    def test_ocr_timeout_is_504(self, client, pdf_bytes):
        use_clients(ocr=make_mathpix_client(MathpixStub(statuses=["split"]), max_attempts=2))
        response = upload(client, "/upload", pdf_bytes)

        assert response.status_code == 504

    def test_ocr_failure_is_generic_500(self, client, pdf_bytes):
        use_clients(ocr=make_mathpix_client(MathpixStub(statuses=["error"])))
        response = upload(client, "/upload", pdf_bytes)

        assert response.status_code == 500
        assert response.json()["detail"] == "Error processing PDF"

    def test_structuring_failure_is_generic_500(self, client, pdf_bytes):
        use_clients(structurer=ExamStructurer("key", model=FakeModel("not json")))
        response = upload(client, "/upload", pdf_bytes)

        assert response.status_code == 500
        assert response.json()["detail"] == "Error processing PDF"


class TestTestEndpoint:

    def test_structures_fixed_payload(self, client):
        model = FakeModel(json.dumps(SAMPLE_EXAM))
        use_clients(structurer=ExamStructurer("key", model=model), payload={"pages": []})
        response = client.get("/test")

        assert response.status_code == 200
        assert response.json()["topic"] == "Mechanics"
        assert '{"pages": []}' in model.prompts[0]

    def test_failure_is_500(self, client):
        use_clients(structurer=ExamStructurer("key", model=FakeModel(None)))
        response = client.get("/test")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to structure data"}


class TestViewer:

    def test_upload_form(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert 'name="pdf"' in response.text
        assert "Upload &amp; Extract" in response.text

    def test_view_renders_questions(self, client, pdf_bytes):
        use_clients()
        response = upload(client, "/view", pdf_bytes)

        assert response.status_code == 200
        assert "<b>Q1:</b>" in response.text
        assert '<span class="math-inline">\\(v = 3t^2\\)</span>' in response.text
        assert "Hint:" in response.text

    def test_view_error_rerenders_form(self, client, pdf_bytes):
        use_clients(ocr=make_mathpix_client(MathpixStub(statuses=["error"])))
        response = upload(client, "/view", pdf_bytes)

        assert response.status_code == 500
        assert "Error extracting PDF" in response.text
        assert 'name="pdf"' in response.text

    def test_view_test(self, client):
        use_clients()
        response = client.get("/view/test")

        assert response.status_code == 200
        assert "Physics" in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
