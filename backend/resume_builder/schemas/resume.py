"""
Resume schemas - extraction output, request bodies and API responses.

Request and response bodies use the camelCase keys the web client sends
(``userContent``, ``resumeText``, ``aiContent``, ``resumeId``).
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


# ============================================================================
# Extracted Resume Data (shape the AI is asked to return)
# ============================================================================

class _Lenient(BaseModel):
    """AI output: ignore unknown keys, accept numbers where text is expected."""

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True


class PersonalInfo(_Lenient):
    image: Optional[str] = ""
    profession: Optional[str] = ""
    full_name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    location: Optional[str] = ""
    website: Optional[str] = ""


class ExperienceEntry(_Lenient):
    company: Optional[str] = ""
    position: Optional[str] = ""
    start_date: Optional[str] = ""
    end_date: Optional[str] = ""
    description: Optional[str] = ""
    is_current: Optional[bool] = False


class ProjectEntry(_Lenient):
    name: Optional[str] = ""
    type: Optional[str] = ""
    description: Optional[str] = ""


class EducationEntry(_Lenient):
    institution: Optional[str] = ""
    degree: Optional[str] = ""
    graduation_date: Optional[str] = ""
    field: Optional[str] = ""
    gpa: Optional[str] = ""


class ResumeData(_Lenient):
    """Structured resume content extracted from free text"""
    professional_summary: Optional[str] = ""
    skills: List[str] = Field(default_factory=list)
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)

    @field_validator("skills", "experience", "projects", "education", mode="before")
    @classmethod
    def null_list_to_empty(cls, value):
        # Models often write an empty section as null, or leave null items in a list
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("personal_info", mode="before")
    @classmethod
    def null_personal_info(cls, value):
        return {} if value is None else value


# ============================================================================
# AI Endpoint Schemas
# ============================================================================

class EnhanceRequest(BaseModel):
    user_content: Optional[str] = Field(default=None, alias="userContent")

    class Config:
        populate_by_name = True


class EnhanceResponse(BaseModel):
    ai_content: str = Field(alias="aiContent")

    class Config:
        populate_by_name = True


class UploadResumeRequest(BaseModel):
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    title: Optional[str] = None

    class Config:
        populate_by_name = True


class UploadResumeResponse(BaseModel):
    resume_id: int = Field(alias="resumeId")

    class Config:
        populate_by_name = True


# ============================================================================
# Resume Read Schemas
# ============================================================================

class ResumeResponse(BaseModel):
    id: int
    user_id: str
    title: str
    professional_summary: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    template: str
    accent_color: str
    public: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ResumeSummary(BaseModel):
    id: int
    title: str
    template: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
