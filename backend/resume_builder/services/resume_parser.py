"""
Resume Parser Service using Gemini to extract structured data from pasted text.
The model is asked for a fixed JSON document; its reply is normalized,
parsed and validated before anything is stored.
"""
import json
import logging
import re
from typing import Optional

from pydantic import ValidationError

from ..exceptions import AIResponseParseError, MissingFieldError
from ..schemas.resume import ResumeData
from .gemini import GeminiClient

logger = logging.getLogger(__name__)


# ============================================================================
# Resume Extraction Prompt
# ============================================================================

RESUME_EXTRACTION_SYSTEM_PROMPT = "You are an expert AI agent that extracts structured data from resumes."

RESUME_JSON_TEMPLATE = """{
  "professional_summary": "",
  "skills": [],
  "personal_info": {
    "image": "",
    "profession": "",
    "full_name": "",
    "email": "",
    "phone": "",
    "location": "",
    "website": ""
  },
  "experience": [
    {
      "company": "",
      "position": "",
      "start_date": "",
      "end_date": "",
      "description": "",
      "is_current": false
    }
  ],
  "projects": [
    {
      "name": "",
      "type": "",
      "description": ""
    }
  ],
  "education": [
    {
      "institution": "",
      "degree": "",
      "graduation_date": "",
      "field": "",
      "gpa": ""
    }
  ]
}"""


def build_extraction_prompt(resume_text: str) -> str:
    return (
        f"{RESUME_EXTRACTION_SYSTEM_PROMPT}\n\n"
        "Extract data from this resume text and output valid JSON only (no extra text). "
        "If professional_summary is missing, fill it with an appropriate 1-2 sentence summary.\n\n"
        f"Resume:\n{resume_text}\n\n"
        f"Return JSON with these keys:\n{RESUME_JSON_TEMPLATE}"
    ).strip()


# ============================================================================
# Response Normalization
# ============================================================================

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


def normalize_ai_json(raw: str) -> str:
    """
    Cut the JSON object out of a model reply.

    Removes a surrounding ```json fence, then keeps the text from the first
    ``{`` to the last ``}``. Unrelated braces in prose around the object
    will break this.
    """
    json_string = raw.strip()

    if json_string.startswith("```"):
        json_string = _TRAILING_FENCE.sub("", _LEADING_FENCE.sub("", json_string))

    first_brace = json_string.find("{")
    last_brace = json_string.rfind("}")
    if first_brace != -1 and last_brace != -1:
        json_string = json_string[first_brace:last_brace + 1]

    return json_string


def parse_resume_json(raw: str) -> ResumeData:
    """Normalize and validate a model reply, raising AIResponseParseError on failure."""
    raw = raw.strip()
    json_string = normalize_ai_json(raw)

    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse JSON response: {e}. Raw response: {raw[:500]}...")
        raise AIResponseParseError(raw, str(e)) from e

    if not isinstance(data, dict):
        raise AIResponseParseError(raw, f"Expected a JSON object, got {type(data).__name__}")

    try:
        return ResumeData.model_validate(data)
    except ValidationError as e:
        logger.warning(f"AI response does not match the resume schema: {e}")
        raise AIResponseParseError(raw, str(e)) from e


# ============================================================================
# Extraction
# ============================================================================

async def extract_resume_data(resume_text: Optional[str], client: GeminiClient) -> ResumeData:
    """
    Extract structured resume data from pasted text.

    Args:
        resume_text: Raw resume text as pasted by the user
        client: Gemini client used for the single generation call

    Returns:
        Validated ResumeData

    Raises:
        MissingFieldError: resume_text is empty
        AIServiceError: the Gemini call failed
        AIResponseParseError: the reply is not a resume JSON object
    """
    if not resume_text or not resume_text.strip():
        raise MissingFieldError("Missing required field 'resumeText'")

    text = await client.generate(build_extraction_prompt(resume_text))
    return parse_resume_json(text)
