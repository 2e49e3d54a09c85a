import pydantic
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum

from smartresume.schemas.ResumeSchemas import PersonalInfo, Experience


class CoverLetterTone(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    ENTHUSIASTIC = "enthusiastic"
    FORMAL = "formal"
    CONFIDENT = "confident"
    CONVERSATIONAL = "conversational"


class CoverLetterRequest(BaseModel):
    """Request body for POST /api/resumes/{id}/cover-letter"""
    tone: CoverLetterTone = CoverLetterTone.PROFESSIONAL
    jobDescription: Optional[str] = None


class CoverLetterUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class CoverLetterSnapshot(BaseModel):
    """The slice of a resume the writer sees: who, the two most recent roles, skills."""
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(default_factory=list, max_length=2)
    skills: List[str] = Field(default_factory=list)


class CoverLetterFull(BaseModel):
    id: str
    resumeId: str
    content: str
    tone: str
    jobDescription: Optional[str] = None
    createdAt: Optional[datetime] = None

    model_config = pydantic.ConfigDict(from_attributes=True)


class CoverLetterSummary(BaseModel):
    """Summary model for cover letter listing"""
    id: str
    resumeId: str
    tone: str
    createdAt: Optional[datetime] = None
    wordCount: int = 0
    content: Optional[str] = None


class CoverLetterListMeta(BaseModel):
    """Pagination metadata for cover letter list"""
    page: int
    perPage: int
    total: int
    totalPages: int


class CoverLetterListResponse(BaseModel):
    items: List[CoverLetterSummary]
    meta: CoverLetterListMeta
