from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

from smartresume.models.resume import Resume
from smartresume.models.user import utcnow

# Columns a caller may set through create/update; id, userId and timestamps are server-owned
WRITABLE_FIELDS = (
    "title",
    "personalInfo",
    "experience",
    "education",
    "skills",
    "summary",
    "templateId",
    "jobDescription",
    "matchScore",
    "isPremium",
)


def get_resume(db: Session, resume_id: str) -> Optional[Resume]:
    return db.query(Resume).filter(Resume.id == resume_id).first()


def get_user_resume(db: Session, resume_id: str, user_id: str) -> Optional[Resume]:
    """Return the resume only if it belongs to user_id; absent and not-owned look the same."""
    resume = get_resume(db, resume_id)
    if resume is None or resume.userId != user_id:
        return None
    return resume


def get_user_resumes(db: Session, user_id: str) -> List[Resume]:
    return (
        db.query(Resume)
        .filter(Resume.userId == user_id)
        .order_by(Resume.updatedAt.desc())
        .all()
    )


def create_resume(db: Session, user_id: str, resume_data: Dict[str, Any]) -> Resume:
    """
    Create a new resume in the database.
    """
    db_resume = Resume(
        userId=user_id,
        **{key: resume_data[key] for key in WRITABLE_FIELDS if key in resume_data},
    )

    db.add(db_resume)
    db.commit()
    db.refresh(db_resume)

    return db_resume


def update_resume(db: Session, resume: Resume, changes: Dict[str, Any]) -> Resume:
    """Apply a partial update in one write. Keys outside WRITABLE_FIELDS are ignored."""
    for key, value in changes.items():
        if key in WRITABLE_FIELDS:
            setattr(resume, key, value)
    # Bump even when no column changed so the dashboard ordering reflects the save
    resume.updatedAt = utcnow()

    db.commit()
    db.refresh(resume)
    return resume


def delete_resume(db: Session, resume: Resume) -> None:
    """Delete a resume; its cover letters go with it."""
    db.delete(resume)
    db.commit()
