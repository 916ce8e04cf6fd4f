from fastapi import APIRouter, HTTPException, Depends, UploadFile, File
from fastapi.responses import JSONResponse
from typing import Any, Optional
import httpx

from app.core.clients import get_ocr_client, get_structurer, get_test_payload
from ocr_importer.errors import ExamImportError, InvalidPdfError, OcrTimeoutError
from ocr_importer.mathpix_client import MathpixClient
from ocr_importer.pdf_check import inspect_pdf
from ocr_importer.pipeline import run_exam_pipeline
from ocr_importer.schemas import StructuredExam
from ocr_importer.structurer import ExamStructurer
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def read_pdf_upload(pdf: Optional[UploadFile]) -> bytes:
    """Reads the multipart `pdf` field, rejecting missing or non-PDF uploads with 400."""
    if pdf is None or not pdf.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    file_bytes = await pdf.read()
    if not file_bytes:
        raise HTTPException(status_code=400, detail="No file uploaded")

    logger.info(f"Received file: {pdf.filename} ({len(file_bytes)} bytes)")

    if pdf.content_type not in ("application/pdf", "application/octet-stream") \
            and not pdf.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Invalid file type. Only PDF allowed.")

    try:
        inspect_pdf(file_bytes)
    except InvalidPdfError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return file_bytes


async def process_upload(
    pdf: Optional[UploadFile],
    ocr: MathpixClient,
    structurer: ExamStructurer,
) -> StructuredExam:
    file_bytes = await read_pdf_upload(pdf)

    try:
        return await run_exam_pipeline(file_bytes, pdf.filename, ocr, structurer)
    except OcrTimeoutError as e:
        logger.error(f"OCR Timeout: {e}")
        raise HTTPException(status_code=504, detail="Error processing PDF")
    except (ExamImportError, httpx.HTTPError) as e:
        logger.error(f"Upstream Error: {e}")
        raise HTTPException(status_code=500, detail="Error processing PDF")
    except Exception as e:
        logger.error(f"Server Error: {e}")
        raise HTTPException(status_code=500, detail="Error processing PDF")


@router.post("/upload")
async def upload_pdf(
    pdf: Optional[UploadFile] = File(None),
    ocr: MathpixClient = Depends(get_ocr_client),
    structurer: ExamStructurer = Depends(get_structurer),
):
    """
    Uploads a PDF to Mathpix, waits for OCR and returns Gemini-structured questions.
    """
    exam = await process_upload(pdf, ocr, structurer)
    return exam.model_dump()


@router.get("/test")
async def test_structuring(
    structurer: ExamStructurer = Depends(get_structurer),
    payload: Any = Depends(get_test_payload),
):
    """
    Structures the fixed sample payload, for checking the Gemini setup by hand.
    """
    exam = await structurer.structure(payload)
    if exam is None:
        return JSONResponse(status_code=500, content={"error": "Failed to structure data"})
    return exam.model_dump()
