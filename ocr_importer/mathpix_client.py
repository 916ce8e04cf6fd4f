"""
Mathpix PDF OCR client.

Uploads a PDF, polls the asynchronous job until it completes and fetches
the line-level result (`.lines.json`).
"""
import asyncio
import json
from typing import Any, Dict, Optional

import httpx

from ocr_importer.errors import OcrJobFailedError, OcrSubmitError, OcrTimeoutError
from ocr_importer.schemas import OcrJobStatus
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.mathpix.com/v3"

# Sent as `options_json` with every upload
CONVERSION_OPTIONS = {
    "conversion_formats": {"docx": True},
    "math_inline_delimiters": ["$", "$"],
    "rm_spaces": True,
}


class MathpixClient:
    """Async client for the Mathpix `/pdf` endpoints."""

    def __init__(
        self,
        app_id: Optional[str],
        app_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        poll_interval: float = 2.0,
        max_attempts: int = 150,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            app_id / app_key: Mathpix credentials, sent as headers.
            poll_interval: Seconds to wait before each status poll.
            max_attempts: Status polls allowed before giving up.
            http_client: Pre-built client (tests pass one with a mock transport).
        """
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.http = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def headers(self) -> Dict[str, str]:
        return {"app_id": self.app_id or "", "app_key": self.app_key or ""}

    async def submit(self, file_bytes: bytes, filename: str = "upload.pdf") -> str:
        """Uploads the PDF and returns the Mathpix pdf_id."""
        response = await self.http.post(
            f"{self.base_url}/pdf",
            headers=self.headers,
            files={"file": (filename, file_bytes, "application/pdf")},
            data={"options_json": json.dumps(CONVERSION_OPTIONS)},
        )
        response.raise_for_status()
        data = response.json()

        pdf_id = data.get("pdf_id")
        if not pdf_id:
            raise OcrSubmitError(f"Mathpix upload failed: {data.get('error') or data}")

        logger.info(f"PDF uploaded. ID: {pdf_id}")
        return pdf_id

    async def get_status(self, pdf_id: str) -> OcrJobStatus:
        response = await self.http.get(f"{self.base_url}/pdf/{pdf_id}", headers=self.headers)
        response.raise_for_status()
        data = response.json()

        error = data.get("error") or data.get("error_info")
        return OcrJobStatus(
            pdf_id=pdf_id,
            status=data.get("status") or "",
            num_pages=data.get("num_pages") or 0,
            num_pages_completed=data.get("num_pages_completed") or 0,
            error=str(error) if error else None,
        )

    async def poll_until_complete(self, pdf_id: str) -> OcrJobStatus:
        """
        Waits `poll_interval` before every poll until the job is completed.

        Raises:
            OcrJobFailedError: the job reported status 'error'.
            OcrTimeoutError: `max_attempts` polls without completion.
        """
        for attempt in range(1, self.max_attempts + 1):
            await asyncio.sleep(self.poll_interval)
            job = await self.get_status(pdf_id)
            logger.info(
                f"PDF status: {job.status} ({job.num_pages_completed}/{job.num_pages}) "
                f"[poll {attempt}/{self.max_attempts}]"
            )

            if job.is_completed:
                return job
            if job.is_failed:
                raise OcrJobFailedError(pdf_id, job.error or "")

        raise OcrTimeoutError(pdf_id, self.max_attempts)

    async def fetch_lines(self, pdf_id: str) -> Dict[str, Any]:
        response = await self.http.get(
            f"{self.base_url}/pdf/{pdf_id}.lines.json", headers=self.headers
        )
        response.raise_for_status()
        return response.json()

    async def extract(self, file_bytes: bytes, filename: str = "upload.pdf") -> Dict[str, Any]:
        """Submit -> wait -> fetch. Returns the raw lines JSON."""
        pdf_id = await self.submit(file_bytes, filename)
        await self.poll_until_complete(pdf_id)
        return await self.fetch_lines(pdf_id)

    async def aclose(self):
        await self.http.aclose()
