import json
from typing import Any, Optional

import google.generativeai as genai
from pydantic import ValidationError

from ocr_importer.prompts import EXAM_RESPONSE_SCHEMA, STRUCTURE_PROMPT
from ocr_importer.schemas import StructuredExam
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

generation_config = {
    "temperature": 0.1,
    "response_mime_type": "application/json",
    "response_schema": EXAM_RESPONSE_SCHEMA,
}


def clean_json(text: str) -> str:
    """Strips a Markdown code fence around the model output, if any."""
    clean_text = text.strip()
    if clean_text.startswith("```json"):
        clean_text = clean_text[7:]
    elif clean_text.startswith("```"):
        clean_text = clean_text[3:]
    if clean_text.endswith("```"):
        clean_text = clean_text[:-3]
    return clean_text.strip()


def build_prompt(raw_payload: Any) -> str:
    return f"""
{STRUCTURE_PROMPT}

Input JSON:
{json.dumps(raw_payload, ensure_ascii=False)}
"""


class ExamStructurer:
    """
    Turns raw Mathpix OCR JSON into a StructuredExam using Gemini.

    `model` may be injected (anything with an async `generate_content_async`);
    otherwise a GenerativeModel is built on first use.
    """

    def __init__(self, api_key: Optional[str], model_name: str = DEFAULT_MODEL, model=None):
        self.api_key = api_key
        self.model_name = model_name
        self._model = model

    @property
    def model(self):
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                model_name=self.model_name,
                generation_config=generation_config,
            )
        return self._model

    async def structure(self, raw_payload: Any) -> Optional[StructuredExam]:
        """
        Returns the structured exam, or None when the model call fails or
        its output is not valid exam JSON.
        """
        if not self.api_key and self._model is None:
            logger.warning("GEMINI_API_KEY not set. Cannot structure OCR output.")
            return None

        try:
            response = await self.model.generate_content_async(build_prompt(raw_payload))
        except Exception as e:
            logger.error(f"Gemini structuring error: {e}")
            return None

        try:
            raw_text = response.text
        except ValueError:
            logger.warning("Gemini returned no text (blocked or empty candidate).")
            return None

        logger.info(f"Gemini response received. Length: {len(raw_text or '')}")
        logger.debug(f"Raw AI Output (Snippet): {(raw_text or '')[:500]}...")

        try:
            data = json.loads(clean_json(raw_text or ""))
        except json.JSONDecodeError:
            logger.error("JSON parse error on Gemini output.")
            logger.error(raw_text)
            return None

        try:
            exam = StructuredExam.model_validate(data)
        except ValidationError as e:
            logger.error(f"Gemini output does not match exam schema: {e}")
            return None

        logger.info(f"Structured {len(exam.questions)} questions.")
        return exam
