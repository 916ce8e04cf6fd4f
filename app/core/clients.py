import json
from pathlib import Path
from typing import Any

from fastapi import Request

from app.core.config import Settings
from ocr_importer.mathpix_client import MathpixClient
from ocr_importer.structurer import ExamStructurer
from utils.logger import get_logger

logger = get_logger(__name__)


def create_ocr_client(settings: Settings) -> MathpixClient:
    if not (settings.MATHPIX_APP_ID and settings.MATHPIX_APP_KEY):
        logger.warning("MATHPIX_APP_ID / MATHPIX_APP_KEY not set. Uploads will fail.")
    return MathpixClient(
        app_id=settings.MATHPIX_APP_ID,
        app_key=settings.MATHPIX_APP_KEY,
        base_url=settings.MATHPIX_BASE_URL,
        poll_interval=settings.MATHPIX_POLL_INTERVAL,
        max_attempts=settings.MATHPIX_MAX_POLL_ATTEMPTS,
        timeout=settings.MATHPIX_REQUEST_TIMEOUT,
    )


def create_structurer(settings: Settings) -> ExamStructurer:
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not found in environment variables.")
    return ExamStructurer(api_key=settings.GEMINI_API_KEY, model_name=settings.GEMINI_MODEL)


def load_test_payload(settings: Settings) -> Any:
    """Fixed OCR payload for GET /test (empty unless TEST_PAYLOAD_PATH is set)."""
    if not settings.TEST_PAYLOAD_PATH:
        return {}
    return json.loads(Path(settings.TEST_PAYLOAD_PATH).read_text(encoding="utf-8"))


def get_ocr_client(request: Request) -> MathpixClient:
    """
    Dependency returning the Mathpix client built at startup.
    """
    return request.app.state.ocr_client


def get_structurer(request: Request) -> ExamStructurer:
    return request.app.state.structurer


def get_test_payload(request: Request) -> Any:
    return request.app.state.test_payload
