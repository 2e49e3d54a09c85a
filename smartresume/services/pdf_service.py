"""Services for rendering resumes to HTML and PDF.

All three visual templates share one Jinja2 template; a TemplateStyle
descriptor supplies the per-template colours and section styling.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from smartresume.core.config import settings
from smartresume.schemas.ResumeSchemas import RenderableResume, TemplateId
from smartresume.schemas.template import TemplateInfo, TemplateStyle
from smartresume.tools.pdf_generator import create_pdf, create_pdf_with_browser

WATERMARK_TEXT = "Generated with SmartResume"

TEMPLATE_STYLES: Dict[str, TemplateStyle] = {
    TemplateId.MODERN.value: TemplateStyle(
        id="modern",
        name="Modern Professional",
        description="Clean and contemporary design perfect for tech and creative roles",
        badge="Most Popular",
        accent_color="#2563eb",
        heading_color="#1e3a8a",
        section_title_style="underline",
        header_align="center",
        header_rule=True,
    ),
    TemplateId.MINIMAL.value: TemplateStyle(
        id="minimal",
        name="Minimal Clean",
        description="Simple and elegant design that focuses on your content",
        badge="ATS Optimized",
        accent_color="#334155",
        section_title_style="uppercase",
        skills_as_tags=False,
    ),
    TemplateId.EXECUTIVE.value: TemplateStyle(
        id="executive",
        name="Executive",
        description="Professional design perfect for senior-level positions",
        badge="Premium",
        accent_color="#9333ea",
        section_title_style="underline",
        left_border=True,
    ),
}

SECTION_LABELS: Dict[str, Dict[str, str]] = {
    "minimal": {
        "summary": "Summary",
        "experience": "Experience",
        "education": "Education",
        "skills": "Skills",
    },
}
DEFAULT_LABELS = {
    "summary": "Professional Summary",
    "experience": "Professional Experience",
    "education": "Education",
    "skills": "Skills",
}


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    return Environment(
        loader=PackageLoader("smartresume", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
    )


def list_templates() -> List[TemplateInfo]:
    return [
        TemplateInfo(id=s.id, name=s.name, description=s.description, badge=s.badge)
        for s in TEMPLATE_STYLES.values()
    ]


def get_template_style(template_id: Any) -> TemplateStyle:
    key = template_id.value if isinstance(template_id, TemplateId) else str(template_id or "")
    return TEMPLATE_STYLES.get(key, TEMPLATE_STYLES[TemplateId.MODERN.value])


def render_resume_html(resume: Any, for_preview: bool = False) -> str:
    """Render a resume (ORM row, RenderableResume or compatible object) to a full HTML page.

    Export output renders skills exactly as stored and adds the watermark for
    non-premium resumes. Preview output drops blank skills and never carries
    the watermark, matching what the builder shows on screen.
    """
    doc = resume if isinstance(resume, RenderableResume) else RenderableResume.model_validate(resume)
    style = get_template_style(doc.templateId)

    skills = [s for s in doc.skills if s.strip()] if for_preview else list(doc.skills)
    watermark = None if (for_preview or doc.isPremium) else WATERMARK_TEXT

    template = _get_env().get_template("resume.html")
    return template.render(
        resume=doc,
        style=style,
        labels=SECTION_LABELS.get(style.id, DEFAULT_LABELS),
        skills=skills,
        watermark=watermark,
    )


def render_resume_pdf(resume: Any, engine: Optional[str] = None) -> bytes:
    """Render a resume to PDF bytes (A4, 20mm margins, backgrounds printed).

    Raises:
        RenderingError: if the engine fails for any reason.
    """
    html = render_resume_html(resume)
    engine = engine or settings.PDF_ENGINE
    if engine == "playwright":
        return create_pdf_with_browser(html, timeout_seconds=settings.PDF_TIMEOUT_SECONDS)
    return create_pdf(html)


_UNSAFE_FILENAME_CHARS = re.compile(r'["\\\r\n]')


def content_disposition(title: str, extension: str) -> str:
    """`attachment; filename="<title>.<ext>"` with characters a header cannot carry replaced."""
    name = _UNSAFE_FILENAME_CHARS.sub("_", title or "resume").strip() or "resume"
    # Starlette encodes header values as latin-1
    name = name.encode("latin-1", errors="replace").decode("latin-1")
    return f'attachment; filename="{name}.{extension}"'
