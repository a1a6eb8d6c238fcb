"""
Resumes Router - read access to stored resumes and HTML previews
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..database import get_db
from ..exceptions import ResumeNotFoundError
from ..models import Resume
from ..services.auth import get_current_user_id
from ..services.templates import render_resume_html
from ..schemas.resume import ResumeResponse, ResumeSummary

router = APIRouter(prefix="/api/resumes", tags=["Resumes"])


async def get_owned_resume(db: AsyncSession, resume_id: int, user_id: str) -> Resume:
    result = await db.execute(
        select(Resume).where(Resume.id == resume_id, Resume.user_id == user_id)
    )
    resume = result.scalar_one_or_none()
    if not resume:
        raise ResumeNotFoundError(resume_id)
    return resume


@router.get("", response_model=List[ResumeSummary])
async def list_resumes(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """List the caller's resumes, newest first."""
    result = await db.execute(
        select(Resume)
        .where(Resume.user_id == user_id)
        .order_by(Resume.id.desc())
    )
    return result.scalars().all()


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return await get_owned_resume(db, resume_id, user_id)


@router.get("/{resume_id}/preview", response_class=HTMLResponse)
async def preview_resume(
    resume_id: int,
    template: Optional[str] = Query(default=None),
    accent_color: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Render a resume as HTML.

    Query parameters override the stored template and accent color;
    unknown template names render with the classic template.
    """
    resume = await get_owned_resume(db, resume_id, user_id)
    data = ResumeResponse.model_validate(resume).model_dump()

    html = render_resume_html(
        data,
        template=template or resume.template,
        accent_color=accent_color or resume.accent_color,
    )
    return HTMLResponse(content=html)
