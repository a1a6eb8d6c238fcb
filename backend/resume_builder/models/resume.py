"""
Resume model - one document per uploaded/extracted resume.

The list and sub-object sections are stored as JSON columns, so the row
mirrors the document shape returned by the extraction prompt.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON
from sqlalchemy.sql import func
from ..database import Base


DEFAULT_TITLE = "Untitled Resume"
DEFAULT_TEMPLATE = "classic"
DEFAULT_ACCENT_COLOR = "#3B82F6"


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False, default=DEFAULT_TITLE)

    # Content sections
    professional_summary = Column(Text, nullable=True, default="")
    skills = Column(JSON, nullable=False, default=list)
    personal_info = Column(JSON, nullable=False, default=dict)
    experience = Column(JSON, nullable=False, default=list)
    projects = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)

    # Presentation
    template = Column(String(50), nullable=False, default=DEFAULT_TEMPLATE)
    accent_color = Column(String(20), nullable=False, default=DEFAULT_ACCENT_COLOR)
    public = Column(Boolean, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
