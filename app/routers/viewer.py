from fastapi import APIRouter, HTTPException, Depends, UploadFile, File
from fastapi.responses import HTMLResponse
from typing import Any, Optional

from app.core.clients import get_ocr_client, get_structurer, get_test_payload
from app.routers.exams import process_upload
from ocr_importer.mathpix_client import MathpixClient
from ocr_importer.structurer import ExamStructurer
from utils.render import render_exam, render_upload_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def upload_page():
    return HTMLResponse(render_upload_page())


@router.post("/view", response_class=HTMLResponse)
async def view_upload(
    pdf: Optional[UploadFile] = File(None),
    ocr: MathpixClient = Depends(get_ocr_client),
    structurer: ExamStructurer = Depends(get_structurer),
):
    try:
        exam = await process_upload(pdf, ocr, structurer)
    except HTTPException as e:
        message = e.detail if e.status_code == 400 else "Error extracting PDF"
        return HTMLResponse(render_upload_page(error=message), status_code=e.status_code)
    return HTMLResponse(render_exam(exam))


@router.get("/view/test", response_class=HTMLResponse)
async def view_test(
    structurer: ExamStructurer = Depends(get_structurer),
    payload: Any = Depends(get_test_payload),
):
    exam = await structurer.structure(payload)
    if exam is None:
        return HTMLResponse(render_upload_page(error="Test API call failed"), status_code=500)
    return HTMLResponse(render_exam(exam))
