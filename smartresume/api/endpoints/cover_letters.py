"""
Cover Letters API Endpoints

Generation, retrieval and editing of the cover letters attached to a resume.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
import logging

from smartresume.agents.cover_letter_writer import CoverLetterWriter
from smartresume.api.deps import get_cover_letter_writer, get_owned_resume
from smartresume.core.exceptions import CoverLetterGenerationError
from smartresume.db.session import get_db
from smartresume.models.resume import Resume
from smartresume.schemas.CoverLetterSchemas import (
    CoverLetterFull,
    CoverLetterListResponse,
    CoverLetterRequest,
    CoverLetterUpdate,
)
from smartresume.services import cover_letter_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{resume_id}/cover-letter", response_model=CoverLetterFull, status_code=201)
def create_cover_letter(
    request: CoverLetterRequest,
    resume: Resume = Depends(get_owned_resume),
    db: Session = Depends(get_db),
    writer: CoverLetterWriter = Depends(get_cover_letter_writer),
):
    """
    Generate a cover letter for the resume and store it.

    Without a jobDescription in the request, the one stored on the resume is used.
    """
    try:
        return cover_letter_service.generate_cover_letter(
            db,
            resume,
            writer,
            tone=request.tone,
            job_description=request.jobDescription,
        )
    except CoverLetterGenerationError:
        logger.exception("Cover letter generation failed for resume %s", resume.id)
        raise HTTPException(status_code=502, detail="Failed to generate cover letter")


@router.get("/{resume_id}/cover-letter", response_model=Optional[CoverLetterFull])
def read_latest_cover_letter(resume: Resume = Depends(get_owned_resume), db: Session = Depends(get_db)):
    """Most recent cover letter for the resume, or null if none has been generated."""
    return cover_letter_service.get_latest_cover_letter(db, resume.id)


@router.get("/{resume_id}/cover-letters", response_model=CoverLetterListResponse)
def list_cover_letters_endpoint(
    page: int = 1,
    per_page: int = cover_letter_service.DEFAULT_PER_PAGE,
    include_content: bool = False,
    resume: Resume = Depends(get_owned_resume),
    db: Session = Depends(get_db),
):
    """
    List cover letters for the resume, newest first.

    Query Parameters:
    - page: Page number (default: 1)
    - per_page: Items per page (default: 20, max: 100)
    - include_content: Include the letter text in each item (default: false)
    """
    return cover_letter_service.list_cover_letters(
        db,
        resume.id,
        page=page,
        per_page=per_page,
        include_content=include_content,
    )


@router.put("/{resume_id}/cover-letters/{cover_letter_id}", response_model=CoverLetterFull)
def update_cover_letter(
    cover_letter_id: str,
    update: CoverLetterUpdate,
    resume: Resume = Depends(get_owned_resume),
    db: Session = Depends(get_db),
):
    cover_letter = cover_letter_service.get_resume_cover_letter(db, resume.id, cover_letter_id)
    if cover_letter is None:
        raise HTTPException(status_code=404, detail="Cover letter not found")
    return cover_letter_service.update_cover_letter_content(db, cover_letter, update.content)
