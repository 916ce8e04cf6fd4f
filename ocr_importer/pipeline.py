from ocr_importer.errors import StructuringError
from ocr_importer.mathpix_client import MathpixClient
from ocr_importer.schemas import StructuredExam
from ocr_importer.structurer import ExamStructurer
from utils.logger import get_logger

logger = get_logger(__name__)


async def run_exam_pipeline(
    file_bytes: bytes,
    filename: str,
    ocr: MathpixClient,
    structurer: ExamStructurer,
) -> StructuredExam:
    """
    PDF bytes -> Mathpix lines JSON -> Gemini -> StructuredExam.

    OCR errors propagate unchanged; an unusable model answer raises
    StructuringError.
    """
    logger.info(f"Step 1: OCR for {filename} ({len(file_bytes)} bytes)...")
    lines = await ocr.extract(file_bytes, filename)

    logger.info("Step 2: Structuring OCR output with Gemini...")
    exam = await structurer.structure(lines)
    if exam is None:
        raise StructuringError("Failed to structure data")

    logger.info(f"Pipeline Complete. Generated {len(exam.questions)} questions.")
    return exam
