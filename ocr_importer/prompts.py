# Structuring prompt and response schema for Gemini

STRUCTURE_PROMPT = """
You are an expert in formatting educational content, including physics and mathematics. I will provide you with a JSON containing OCR-extracted text from a question paper. The JSON includes pages, lines, text blocks, and diagrams, but the content is messy and contains raw text, LaTeX-style math formulas, and question/answer markers.

Your task is to:

1. Produce a clean, **human-readable formatted version** of the entire content.
2. Preserve **all math equations exactly as they are**, using LaTeX format if present.
   Use $...$ for inline math and \\[...\\] for display math.
3. Convert MCQs into a readable list format:
   - For example:
     (1) 5:7
     (2) 3:5
     (3) √3:√5
4. Keep headers like Subject, Topic, Subtopic, Exam, Question Number, Question Type, and Keywords.
5. Include diagrams as provided in "text_display".
6. Remove any unnecessary raw markers like \\####, \\#*, \\#, or escape characters unless they are part of the LaTeX/math syntax.
7. Produce **one continuous document per page** in a readable format.
8. If an image link is provided, put only the exact URL (with its query parameters) in the "image" key, no extra text.
   For example ![](https://cdn.mathpix.com/cropped/example.jpg?height=320&width=347) becomes
   https://cdn.mathpix.com/cropped/example.jpg?height=320&width=347
9. Check if the data is in tabular form or any other format.

Output JSON format:

{
  "subject": "...",
  "topic": "...",
  "subTopic": "...",
  "questions": [
    {
      "question": "...",
      "options": ["...", "...", "...", "..."],
      "image": "...",
      "hint": "..."
    }
  ]
}
"""

# OpenAPI-subset schema accepted by `response_schema`
EXAM_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "subject": {"type": "STRING"},
        "topic": {"type": "STRING"},
        "subTopic": {"type": "STRING"},
        "questions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "question": {"type": "STRING"},
                    "options": {
                        "type": "ARRAY",
                        "items": {"type": "STRING"},
                    },
                    "image": {"type": "STRING", "nullable": True},
                    "hint": {"type": "STRING", "nullable": True},
                },
                "required": ["question", "options"],
            },
        },
    },
    "required": ["subject", "topic", "subTopic", "questions"],
}
