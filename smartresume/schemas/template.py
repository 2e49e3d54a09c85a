from pydantic import BaseModel
from typing import Literal, Optional


class TemplateStyle(BaseModel):
    """Per-template style descriptor consumed by the single resume template.

    All three layouts share one Jinja2 template; only these values differ.
    """
    id: str
    name: str
    description: str
    badge: Optional[str] = None
    accent_color: str
    heading_color: str = "#0f172a"
    muted_color: str = "#475569"
    # "underline": coloured rule under each heading, "uppercase": tracked caps, no rule
    section_title_style: Literal["underline", "uppercase"] = "underline"
    header_align: Literal["center", "left"] = "left"
    header_rule: bool = False
    left_border: bool = False
    skills_as_tags: bool = True


class TemplateInfo(BaseModel):
    """Public catalogue entry for the template selector."""
    id: str
    name: str
    description: str
    badge: Optional[str] = None
