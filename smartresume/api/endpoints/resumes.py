from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from typing import Callable, List
import logging

from smartresume.agents.resume_analyst import ResumeAnalyst
from smartresume.agents.resume_optimizer import ResumeOptimizer
from smartresume.api.deps import (
    get_analyst,
    get_current_user,
    get_optimizer,
    get_owned_resume,
    get_pdf_renderer,
)
from smartresume.core.exceptions import InsightsError, OptimizationError, RenderingError
from smartresume.crud import crud_resume
from smartresume.db.session import get_db
from smartresume.models.resume import Resume
from smartresume.models.user import User
from smartresume.schemas.ResumeSchemas import (
    OptimizeRequest,
    OptimizeResponse,
    ResumeForm,
    ResumeInsights,
    ResumePreviewRequest,
    ResumeResponse,
    ResumeUpdate,
    StepValidationRequest,
    StepValidationResponse,
)
from smartresume.services import resume_service
from smartresume.services.pdf_service import content_disposition, render_resume_html
from smartresume.services.resume_validation import validate_step

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/validate-step", response_model=StepValidationResponse)
def validate_form_step(
    request: StepValidationRequest,
    current_user: User = Depends(get_current_user),
):
    """Validate the fields of one builder step without saving anything."""
    errors = validate_step(request.step, request.data)
    return StepValidationResponse(step=request.step, valid=not errors, errors=errors)


@router.post("/preview", response_class=HTMLResponse)
def preview_resume(
    request: ResumePreviewRequest,
    current_user: User = Depends(get_current_user),
):
    return HTMLResponse(render_resume_html(request.to_renderable(), for_preview=True))


@router.post("", response_model=ResumeResponse, status_code=201)
def create_resume(
    form: ResumeForm,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    optimizer: ResumeOptimizer = Depends(get_optimizer),
):
    """
    Create a resume. When a job description is supplied the content is
    optimized before the first write.
    """
    try:
        return resume_service.create_resume_from_form(db, current_user.id, form, optimizer)
    except OptimizationError:
        logger.exception("Optimization failed while creating resume for user %s", current_user.id)
        raise HTTPException(status_code=502, detail="Failed to optimize resume")


@router.get("", response_model=List[ResumeResponse])
def read_resumes(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud_resume.get_user_resumes(db, current_user.id)


@router.get("/{resume_id}", response_model=ResumeResponse)
def read_resume(resume: Resume = Depends(get_owned_resume)):
    return resume


@router.put("/{resume_id}", response_model=ResumeResponse)
def update_resume(
    update: ResumeUpdate,
    resume: Resume = Depends(get_owned_resume),
    db: Session = Depends(get_db),
):
    return resume_service.apply_update(db, resume, update)


@router.delete("/{resume_id}", status_code=204)
def delete_resume(resume: Resume = Depends(get_owned_resume), db: Session = Depends(get_db)):
    crud_resume.delete_resume(db, resume)
    logger.info(f"Resume deleted: id={resume.id}")
    return Response(status_code=204)


@router.post("/{resume_id}/optimize", response_model=OptimizeResponse)
def optimize_resume(
    request: OptimizeRequest,
    resume: Resume = Depends(get_owned_resume),
    db: Session = Depends(get_db),
    optimizer: ResumeOptimizer = Depends(get_optimizer),
):
    """
    Optimize a stored resume against a job description.

    The resume is only written once the optimizer has returned; on failure
    the stored row is left untouched.
    """
    if not resume_service.has_job_description(request.jobDescription):
        raise HTTPException(status_code=400, detail="Job description is required")

    try:
        resume, result = resume_service.optimize_resume(db, resume, optimizer, request.jobDescription)
    except OptimizationError:
        logger.exception("Optimization failed for resume %s", resume.id)
        raise HTTPException(status_code=502, detail="Failed to optimize resume")

    return OptimizeResponse(
        resume=ResumeResponse.model_validate(resume),
        matchScore=result.matchScore,
        optimizations=result.optimizations,
    )


@router.post("/{resume_id}/insights", response_model=ResumeInsights)
def resume_insights(
    resume: Resume = Depends(get_owned_resume),
    analyst: ResumeAnalyst = Depends(get_analyst),
):
    try:
        return analyst.analyze(resume_service.resume_content_from_row(resume))
    except InsightsError:
        logger.exception("Insights failed for resume %s", resume.id)
        raise HTTPException(status_code=502, detail="Failed to generate resume insights")


@router.get("/{resume_id}/pdf")
def download_resume_pdf(
    resume: Resume = Depends(get_owned_resume),
    render_pdf: Callable[..., bytes] = Depends(get_pdf_renderer),
):
    try:
        pdf_bytes = render_pdf(resume)
    except RenderingError:
        logger.exception("PDF generation failed for resume %s", resume.id)
        raise HTTPException(status_code=500, detail="Failed to generate PDF")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(resume.title, "pdf")},
    )


@router.get("/{resume_id}/html")
def download_resume_html(resume: Resume = Depends(get_owned_resume)):
    """Export the print HTML for browsers that can save it as PDF themselves."""
    return Response(
        content=render_resume_html(resume),
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": content_disposition(resume.title, "html")},
    )
