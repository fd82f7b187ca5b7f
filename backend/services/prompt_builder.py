"""Prompt templates for the Gemini document evaluation call."""

from config import settings

EVALUATION_SYSTEM_INSTRUCTION = """You are an expert AI document evaluator. Analyze the document content and provide a detailed evaluation.

IMPORTANT: You must respond ONLY with a valid JSON object, no other text.

Evaluate based on:
- Technical skills and expertise found in the document
- Years of experience
- Education background
- Projects and achievements mentioned
- Overall quality and presentation

JSON Response Format:
{
  "score": <number 0-100 based on document quality>,
  "skills": [<extract ACTUAL skills mentioned in the document>],
  "experienceLevel": "<Entry/Mid/Senior/Expert based on actual experience>",
  "experienceYears": <estimated years from document>,
  "shortlistRecommendation": "<Yes/No/Maybe>",
  "strengths": [<extract ACTUAL achievements and strengths from document>],
  "improvements": [<areas that could be improved>],
  "reasoning": "<key highlights and summary from the ACTUAL document content>"
}"""


def document_excerpt(document_text: str, max_chars: int | None = None) -> str:
    """Leading slice of the document that is sent to the model."""
    limit = settings.max_excerpt_chars if max_chars is None else max_chars
    return document_text[:limit]


def build_evaluation_prompt(document_text: str, file_name: str) -> str:
    """User turn for the evaluation call: file label plus the document excerpt."""
    return (
        "Please evaluate this document and extract REAL information:\n\n"
        f"File: {file_name}\n\n"
        f"Content:\n{document_excerpt(document_text)}"
    )
