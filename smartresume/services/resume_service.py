"""Resume workflows that sit between the API layer and the CRUD layer.

Each function takes the request's session and the services it needs, and
performs at most one write, so a failed AI call never leaves a half-updated
row behind.
"""
from typing import Any, Dict, Optional, Tuple
import logging

from sqlalchemy.orm import Session

from smartresume.agents.resume_optimizer import OptimizationResult, ResumeOptimizer
from smartresume.crud import crud_resume
from smartresume.models.resume import Resume
from smartresume.schemas.ResumeSchemas import ResumeContent, ResumeForm, ResumeUpdate

logger = logging.getLogger(__name__)


def has_job_description(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def resume_content_from_row(resume: Resume) -> ResumeContent:
    """Validate a stored row into the structure the AI services read."""
    return ResumeContent.model_validate(resume)


def _optimized_fields(result: OptimizationResult) -> Dict[str, Any]:
    optimized = result.optimizedResume
    return {
        "personalInfo": optimized.personalInfo.model_dump(mode="json"),
        "experience": [exp.model_dump(mode="json") for exp in optimized.experience],
        "skills": list(optimized.skills),
        "summary": optimized.summary,
        "matchScore": result.matchScore,
    }


def create_resume_from_form(
    db: Session,
    user_id: str,
    form: ResumeForm,
    optimizer: ResumeOptimizer,
) -> Resume:
    """Store a new resume for user_id.

    With a non-blank job description the content is optimized first, so the
    row is written once with the optimized content and its score. Without one
    the form is stored as submitted and matchScore stays null.

    Raises:
        OptimizationError: optimization failed; nothing was written.
    """
    data = form.model_dump(mode="json")
    data["summary"] = form.personalInfo.summary
    data["matchScore"] = None

    if has_job_description(form.jobDescription):
        content = ResumeContent(
            personalInfo=form.personalInfo,
            experience=form.experience,
            education=form.education,
            skills=form.skills,
        )
        result = optimizer.optimize(content, form.jobDescription)
        data.update(_optimized_fields(result))

    resume = crud_resume.create_resume(db, user_id, data)
    logger.info(f"Resume created: id={resume.id}, userId={user_id}, matchScore={resume.matchScore}")
    return resume


def apply_update(db: Session, resume: Resume, update: ResumeUpdate) -> Resume:
    """Apply a partial update; summary follows personalInfo.summary when personalInfo is sent."""
    changes = update.changes()
    if "personalInfo" in changes:
        changes["summary"] = changes["personalInfo"].get("summary")

    resume = crud_resume.update_resume(db, resume, changes)
    logger.info(f"Resume updated: id={resume.id}, fields={sorted(changes)}")
    return resume


def optimize_resume(
    db: Session,
    resume: Resume,
    optimizer: ResumeOptimizer,
    job_description: str,
) -> Tuple[Resume, OptimizationResult]:
    """Optimize a stored resume against job_description and persist the result.

    The row is only written after the optimizer returns.

    Raises:
        ValueError: job_description is blank.
        OptimizationError: optimization failed; the row is unchanged.
    """
    if not has_job_description(job_description):
        raise ValueError("Job description is required")

    result = optimizer.optimize(resume_content_from_row(resume), job_description)

    changes = _optimized_fields(result)
    changes["jobDescription"] = job_description
    resume = crud_resume.update_resume(db, resume, changes)

    logger.info(f"Resume optimized: id={resume.id}, matchScore={result.matchScore}")
    return resume, result
