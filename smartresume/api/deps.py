"""FastAPI dependencies shared by the endpoint modules.

The AI and PDF dependencies are split out so tests can override them with
fakes through ``app.dependency_overrides``.
"""
from typing import Callable

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smartresume.agents.cover_letter_writer import CoverLetterWriter
from smartresume.agents.resume_analyst import ResumeAnalyst
from smartresume.agents.resume_optimizer import ResumeOptimizer
from smartresume.core.config import settings
from smartresume.core.llm import LLMProvider, get_llm
from smartresume.crud import crud_resume, crud_user
from smartresume.db.session import get_db
from smartresume.models.resume import Resume
from smartresume.models.user import User
from smartresume.services.pdf_service import render_resume_pdf


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Resolve the caller from the identity headers set by the auth middleware."""
    user_id = (request.headers.get(settings.AUTH_USER_HEADER) or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    return crud_user.upsert_user(
        db,
        user_id,
        email=request.headers.get(settings.AUTH_EMAIL_HEADER),
        firstName=request.headers.get(settings.AUTH_FIRST_NAME_HEADER),
        lastName=request.headers.get(settings.AUTH_LAST_NAME_HEADER),
        profileImageUrl=request.headers.get(settings.AUTH_PROFILE_IMAGE_HEADER),
    )


def get_owned_resume(
    resume_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Resume:
    # Missing and owned-by-someone-else are indistinguishable to the caller
    resume = crud_resume.get_user_resume(db, resume_id, current_user.id)
    if resume is None:
        raise HTTPException(status_code=404, detail="Resume not found")
    return resume


def get_llm_provider() -> LLMProvider:
    return get_llm()


def get_optimizer(provider: LLMProvider = Depends(get_llm_provider)) -> ResumeOptimizer:
    return ResumeOptimizer(provider, failure_mode=settings.AI_FAILURE_MODE)


def get_analyst(provider: LLMProvider = Depends(get_llm_provider)) -> ResumeAnalyst:
    return ResumeAnalyst(provider)


def get_cover_letter_writer(provider: LLMProvider = Depends(get_llm_provider)) -> CoverLetterWriter:
    return CoverLetterWriter(provider, failure_mode=settings.AI_FAILURE_MODE)


def get_pdf_renderer() -> Callable[..., bytes]:
    return render_resume_pdf
