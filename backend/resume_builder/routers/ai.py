"""
AI Router - text enhancement and resume extraction backed by Gemini
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Resume, DEFAULT_TITLE
from ..services.auth import get_current_user_id
from ..services.enhancer import enhance_professional_summary, enhance_job_description
from ..services.gemini import GeminiClient, get_ai_client
from ..services.resume_parser import extract_resume_data
from ..schemas.resume import (
    EnhanceRequest, EnhanceResponse,
    UploadResumeRequest, UploadResumeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI"])


@router.post("/enhance-pro-sum", response_model=EnhanceResponse)
async def enhance_pro_sum(
    payload: EnhanceRequest,
    client: GeminiClient = Depends(get_ai_client),
):
    """Enhance a resume's professional summary."""
    ai_content = await enhance_professional_summary(payload.user_content, client)
    return EnhanceResponse(ai_content=ai_content)


@router.post("/enhance-job-desc", response_model=EnhanceResponse)
async def enhance_job_desc(
    payload: EnhanceRequest,
    client: GeminiClient = Depends(get_ai_client),
):
    """Enhance a job description from the experience section."""
    ai_content = await enhance_job_description(payload.user_content, client)
    return EnhanceResponse(ai_content=ai_content)


@router.post("/upload-resume", response_model=UploadResumeResponse)
async def upload_resume(
    payload: UploadResumeRequest,
    db: AsyncSession = Depends(get_db),
    client: GeminiClient = Depends(get_ai_client),
    user_id: str = Depends(get_current_user_id),
):
    """
    Extract structured data from pasted resume text and store it as a new resume.

    Nothing is written unless the AI reply parses into a complete resume object;
    parse failures come back as 500 with the raw reply for diagnosis.
    """
    parsed = await extract_resume_data(payload.resume_text, client)

    resume = Resume(
        user_id=user_id,
        title=payload.title or DEFAULT_TITLE,
        **parsed.model_dump(),
    )
    db.add(resume)
    await db.flush()  # Get the ID

    logger.info(f"Created resume {resume.id} for user {user_id}")
    return UploadResumeResponse(resume_id=resume.id)
