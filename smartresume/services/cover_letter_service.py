"""
Cover Letter Service

Service layer for cover letter operations: generation for a stored resume,
persistence and paginated history.
"""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
import logging

from smartresume.agents.cover_letter_writer import CoverLetterWriter, build_cover_letter_snapshot
from smartresume.models.cover_letter import CoverLetter
from smartresume.models.resume import Resume
from smartresume.schemas.CoverLetterSchemas import CoverLetterTone
from smartresume.services.resume_service import resume_content_from_row

logger = logging.getLogger(__name__)

MAX_PER_PAGE = 100
DEFAULT_PER_PAGE = 20


def count_words(content: Optional[str]) -> int:
    return len((content or "").split())


def save_cover_letter(
    db: Session,
    resume_id: str,
    content: str,
    tone: str = CoverLetterTone.PROFESSIONAL.value,
    job_description: Optional[str] = None,
) -> CoverLetter:
    """
    Save a cover letter to the database.

    Every generation creates a new row; older letters for the same resume
    are kept as history.
    """
    cover_letter = CoverLetter(
        resumeId=resume_id,
        content=content,
        tone=tone,
        jobDescription=job_description,
    )

    db.add(cover_letter)
    db.commit()
    db.refresh(cover_letter)

    logger.info(f"Cover letter saved successfully with id: {cover_letter.id}, resumeId: {resume_id}")
    return cover_letter


def get_latest_cover_letter(db: Session, resume_id: str) -> Optional[CoverLetter]:
    return (
        db.query(CoverLetter)
        .filter(CoverLetter.resumeId == resume_id)
        .order_by(CoverLetter.createdAt.desc())
        .first()
    )


def get_resume_cover_letter(db: Session, resume_id: str, cover_letter_id: str) -> Optional[CoverLetter]:
    """Fetch a cover letter only if it belongs to the given resume."""
    return (
        db.query(CoverLetter)
        .filter(CoverLetter.id == cover_letter_id, CoverLetter.resumeId == resume_id)
        .first()
    )


def update_cover_letter_content(db: Session, cover_letter: CoverLetter, content: str) -> CoverLetter:
    cover_letter.content = content
    db.commit()
    db.refresh(cover_letter)

    logger.info(f"Cover letter {cover_letter.id} updated")
    return cover_letter


def list_cover_letters(
    db: Session,
    resume_id: str,
    *,
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
    include_content: bool = False,
) -> Dict[str, Any]:
    """
    List a resume's cover letters, newest first, with pagination.

    Args:
        db: Database session
        resume_id: Owning resume; ownership is checked by the caller
        page: Page number (1-based)
        per_page: Items per page, capped at MAX_PER_PAGE
        include_content: Include the letter text in each item

    Returns:
        Dict with items and meta information
    """
    if per_page > MAX_PER_PAGE:
        per_page = MAX_PER_PAGE
    if per_page < 1:
        per_page = DEFAULT_PER_PAGE
    if page < 1:
        page = 1

    query = db.query(CoverLetter).filter(CoverLetter.resumeId == resume_id)
    total = query.count()

    cover_letters = (
        query.order_by(CoverLetter.createdAt.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )

    items = []
    for cl in cover_letters:
        item = {
            "id": cl.id,
            "resumeId": cl.resumeId,
            "tone": cl.tone,
            "createdAt": cl.createdAt,
            "wordCount": count_words(cl.content),
        }
        if include_content:
            item["content"] = cl.content
        items.append(item)

    total_pages = (total + per_page - 1) // per_page

    logger.info(f"Listed cover letters: resumeId={resume_id}, page={page}, per_page={per_page}, total={total}")

    return {
        "items": items,
        "meta": {
            "page": page,
            "perPage": per_page,
            "total": total,
            "totalPages": total_pages,
        },
    }


def generate_cover_letter(
    db: Session,
    resume: Resume,
    writer: CoverLetterWriter,
    tone: str = CoverLetterTone.PROFESSIONAL.value,
    job_description: Optional[str] = None,
) -> CoverLetter:
    """Write a cover letter for a stored resume and persist it.

    An empty job_description falls back to the one stored on the resume.

    Raises:
        CoverLetterGenerationError: the provider failed and fallback is off.
    """
    tone = CoverLetterTone(tone).value
    job_description = job_description if job_description and job_description.strip() else (resume.jobDescription or "")
    snapshot = build_cover_letter_snapshot(resume_content_from_row(resume))

    content = writer.generate(snapshot, job_description, tone)

    return save_cover_letter(
        db,
        resume_id=resume.id,
        content=content,
        tone=tone,
        job_description=job_description or None,
    )
