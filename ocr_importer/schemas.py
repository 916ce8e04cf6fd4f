from pydantic import BaseModel, field_validator
from typing import Optional, List


class Question(BaseModel):
    question: str = ""
    options: List[str] = []
    image: Optional[str] = None
    hint: Optional[str] = None

    @field_validator("question", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("options", mode="before")
    @classmethod
    def null_options_to_empty(cls, value):
        # A null option keeps its slot so option numbering stays intact
        if value is None:
            return []
        if isinstance(value, list):
            return ["" if opt is None else opt for opt in value]
        return value


class StructuredExam(BaseModel):
    subject: str = ""
    topic: str = ""
    subTopic: str = ""
    questions: List[Question] = []

    @field_validator("subject", "topic", "subTopic", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("questions", mode="before")
    @classmethod
    def drop_null_questions(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [q for q in value if q is not None]
        return value


class OcrJobStatus(BaseModel):
    pdf_id: str
    status: str = ""
    num_pages: int = 0
    num_pages_completed: int = 0
    error: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def is_failed(self) -> bool:
        return self.status == "error"
