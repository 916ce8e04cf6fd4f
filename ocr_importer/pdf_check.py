import fitz

from ocr_importer.errors import InvalidPdfError
from utils.logger import get_logger

logger = get_logger(__name__)


def inspect_pdf(pdf_bytes: bytes) -> int:
    """
    Opens the upload with PyMuPDF before it is sent for OCR.
    Returns the page count; raises InvalidPdfError for anything that is not
    a readable, non-empty PDF.
    """
    if not pdf_bytes.startswith(b"%PDF"):
        raise InvalidPdfError("File is not a PDF")

    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except RuntimeError as e:  # fitz.FileDataError and older MuPDF open errors
        raise InvalidPdfError(f"Unreadable PDF: {e}") from e

    with doc:
        page_count = len(doc)
    if page_count == 0:
        raise InvalidPdfError("PDF has no pages")

    logger.info(f"Opened PDF with {page_count} pages")
    return page_count
