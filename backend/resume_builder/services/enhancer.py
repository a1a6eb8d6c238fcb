"""
Resume text enhancement - professional summaries and job descriptions.
"""
import logging
from typing import Optional

from ..config import get_settings
from ..exceptions import MissingFieldError
from .gemini import GeminiClient

logger = logging.getLogger(__name__)


# ============================================================================
# Prompts
# ============================================================================

PROFESSIONAL_SUMMARY_PROMPT = (
    "You are a professional resume writer specializing in crafting impactful and ATS-optimized summaries. "
    "Refine and enhance the candidate's professional summary into 1-2 powerful sentences that highlight "
    "key technical skills, relevant experience, and career goals. "
    "The output must be concise, compelling, and ready for inclusion in a modern resume; "
    "return only the improved summary text with no explanations."
)

JOB_DESCRIPTION_PROMPT = (
    "You are an expert resume writer. Rewrite the job description section into 1-2 concise, impactful "
    "sentences emphasizing responsibilities, achievements, and measurable results. "
    "Use strong action verbs and keep it ATS-friendly. "
    "Return only the rewritten job description text without explanations."
)


def build_summary_prompt(user_content: str) -> str:
    return (
        f"{PROFESSIONAL_SUMMARY_PROMPT}\n\n"
        f"Candidate summary:\n{user_content}\n\n"
        "Return only the improved summary text."
    )


def build_job_description_prompt(user_content: str) -> str:
    return (
        f"{JOB_DESCRIPTION_PROMPT}\n\n"
        f"Job description:\n{user_content}\n\n"
        "Return only the rewritten job description."
    )


def _require_content(user_content: Optional[str]) -> str:
    if not user_content or not user_content.strip():
        raise MissingFieldError("Missing required fields")
    return user_content


# ============================================================================
# Enhancement
# ============================================================================

async def enhance_professional_summary(user_content: Optional[str], client: GeminiClient) -> str:
    """Rewrite a professional summary into 1-2 ATS-friendly sentences."""
    content = _require_content(user_content)
    settings = get_settings()

    text = await client.generate(
        build_summary_prompt(content),
        temperature=settings.gemini_temperature,
        max_output_tokens=settings.gemini_max_output_tokens,
    )
    logger.debug(f"Enhanced professional summary ({len(text)} chars)")
    return text.strip()


async def enhance_job_description(user_content: Optional[str], client: GeminiClient) -> str:
    """Rewrite a job description around responsibilities and results."""
    content = _require_content(user_content)

    text = await client.generate(build_job_description_prompt(content))
    logger.debug(f"Enhanced job description ({len(text)} chars)")
    return text.strip()
