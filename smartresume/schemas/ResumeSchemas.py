import pydantic
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional, Any, Dict
from datetime import datetime
from enum import Enum


class TemplateId(str, Enum):
    MODERN = "modern"
    MINIMAL = "minimal"
    EXECUTIVE = "executive"


class PersonalInfo(BaseModel):
    firstName: str = Field(..., min_length=1, description="First name is required")
    lastName: str = Field(..., min_length=1, description="Last name is required")
    email: EmailStr
    phone: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, description="Professional title")
    summary: Optional[str] = None


class Experience(BaseModel):
    position: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    startDate: str = Field(..., min_length=1)
    endDate: Optional[str] = None
    current: bool = False
    description: str = Field(..., min_length=1)


class Education(BaseModel):
    degree: str = Field(..., min_length=1)
    school: str = Field(..., min_length=1)
    graduationDate: str = Field(..., min_length=1)
    gpa: Optional[str] = None


class ResumeForm(BaseModel):
    """Full resume submission from the builder.

    Skills are kept exactly as entered: duplicates and blank strings included.
    """
    title: str = Field(..., min_length=1, description="Resume title is required")
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(..., min_length=1, description="At least one experience is required")
    education: List[Education] = Field(..., min_length=1, description="At least one education is required")
    skills: List[str] = Field(..., min_length=1, description="At least one skill is required")
    templateId: TemplateId = TemplateId.MODERN
    jobDescription: Optional[str] = None


class ResumeUpdate(BaseModel):
    """Partial update: any subset of the form's top-level fields.

    Fields that are present are validated with the same rules as ResumeForm.
    Only jobDescription may be explicitly cleared with null.
    """
    title: Optional[str] = Field(None, min_length=1)
    personalInfo: Optional[PersonalInfo] = None
    experience: Optional[List[Experience]] = Field(None, min_length=1)
    education: Optional[List[Education]] = Field(None, min_length=1)
    skills: Optional[List[str]] = Field(None, min_length=1)
    templateId: Optional[TemplateId] = None
    jobDescription: Optional[str] = None

    @pydantic.model_validator(mode="after")
    def _reject_explicit_nulls(self):
        nullable = {"jobDescription"}
        for name in self.model_fields_set:
            if name not in nullable and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent, as JSON-ready values."""
        return self.model_dump(mode="json", exclude_unset=True)


class ResumeContent(BaseModel):
    """The structured part of a resume that the AI services read and rewrite.

    Unlike ResumeForm it does not enforce minimum list lengths, because stored
    rows may have been edited out of band.
    """
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    model_config = pydantic.ConfigDict(from_attributes=True)

    @property
    def summary(self) -> Optional[str]:
        return self.personalInfo.summary


class ResumeResponse(BaseModel):
    id: str
    userId: str
    title: str
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    templateId: TemplateId = TemplateId.MODERN
    jobDescription: Optional[str] = None
    matchScore: Optional[int] = Field(None, ge=0, le=100)
    isPremium: bool = False
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    model_config = pydantic.ConfigDict(from_attributes=True)


class OptimizeRequest(BaseModel):
    # Checked in the handler so a missing/blank value is a 400, not a schema error
    jobDescription: Optional[str] = None


class OptimizeResponse(BaseModel):
    resume: ResumeResponse
    matchScore: int = Field(..., ge=0, le=100)
    optimizations: List[str] = Field(default_factory=list)


class ResumeInsights(BaseModel):
    strengthsScore: int = Field(75, ge=0, le=100)
    weaknessesScore: int = Field(25, ge=0, le=100)
    suggestions: List[str] = Field(default_factory=list)
    overallRating: int = Field(75, ge=0, le=100)


class StepValidationRequest(BaseModel):
    step: int = Field(..., ge=1, le=4)
    data: Dict[str, Any] = Field(default_factory=dict)


class FieldError(BaseModel):
    loc: List[Any]
    msg: str
    type: str


class StepValidationResponse(BaseModel):
    step: int
    valid: bool
    errors: List[FieldError] = Field(default_factory=list)


class UserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    profileImageUrl: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    model_config = pydantic.ConfigDict(from_attributes=True)


# Builder steps. Each step validates only the fields shown on that screen.
class PersonalInfoStep(BaseModel):
    title: str = Field(..., min_length=1)
    personalInfo: PersonalInfo


class ExperienceStep(BaseModel):
    experience: List[Experience] = Field(..., min_length=1)


class EducationSkillsStep(BaseModel):
    education: List[Education] = Field(..., min_length=1)
    skills: List[str] = Field(..., min_length=1)


class TemplateStep(BaseModel):
    templateId: TemplateId
    jobDescription: Optional[str] = None


FORM_STEPS = {
    1: PersonalInfoStep,
    2: ExperienceStep,
    3: EducationSkillsStep,
    4: TemplateStep,
}


class RenderableResume(BaseModel):
    """What the template renderer needs. Built from a stored row or from unsaved form data."""
    title: str
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    templateId: TemplateId = TemplateId.MODERN
    isPremium: bool = False

    model_config = pydantic.ConfigDict(from_attributes=True)

    @classmethod
    def from_form(cls, form: ResumeForm) -> "RenderableResume":
        return cls(
            title=form.title,
            personalInfo=form.personalInfo,
            experience=form.experience,
            education=form.education,
            skills=form.skills,
            summary=form.personalInfo.summary,
            templateId=form.templateId,
        )


class ResumePreviewRequest(BaseModel):
    """Builder state sent for live preview. Lists may still be empty mid-build."""
    title: str = ""
    personalInfo: PersonalInfo
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    templateId: TemplateId = TemplateId.MODERN

    def to_renderable(self) -> RenderableResume:
        return RenderableResume(
            title=self.title,
            personalInfo=self.personalInfo,
            experience=self.experience,
            education=self.education,
            skills=self.skills,
            summary=self.personalInfo.summary,
            templateId=self.templateId,
        )
