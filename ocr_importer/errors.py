class ExamImportError(Exception):
    """Base error for the PDF -> structured exam import chain."""


class OcrError(ExamImportError):
    pass


class OcrSubmitError(OcrError):
    """Mathpix accepted the request but did not return a pdf_id."""


class OcrJobFailedError(OcrError):
    """The Mathpix job finished with status 'error'."""

    def __init__(self, pdf_id: str, detail: str = ""):
        self.pdf_id = pdf_id
        self.detail = detail
        super().__init__(f"Mathpix job {pdf_id} failed: {detail or 'unknown error'}")


class OcrTimeoutError(OcrError):
    """The Mathpix job did not complete within the allowed poll attempts."""

    def __init__(self, pdf_id: str, attempts: int):
        self.pdf_id = pdf_id
        self.attempts = attempts
        super().__init__(f"Mathpix job {pdf_id} not completed after {attempts} polls")


class StructuringError(ExamImportError):
    """Gemini returned nothing usable for the OCR payload."""


class InvalidPdfError(ExamImportError):
    """The upload is not a readable PDF."""
