from .ResumeSchemas import (
	TemplateId,
	PersonalInfo,
	Experience,
	Education,
	ResumeForm,
	ResumeUpdate,
	ResumeContent,
	ResumeResponse,
	OptimizeRequest,
	OptimizeResponse,
	ResumeInsights,
	StepValidationRequest,
	StepValidationResponse,
	FieldError,
	UserResponse,
	RenderableResume,
	ResumePreviewRequest,
	FORM_STEPS,
)
from .CoverLetterSchemas import (
	CoverLetterTone,
	CoverLetterRequest,
	CoverLetterUpdate,
	CoverLetterSnapshot,
	CoverLetterFull,
	CoverLetterSummary,
	CoverLetterListMeta,
	CoverLetterListResponse,
)
from .template import TemplateStyle, TemplateInfo

__all__ = [
	"TemplateId",
	"PersonalInfo",
	"Experience",
	"Education",
	"ResumeForm",
	"ResumeUpdate",
	"ResumeContent",
	"ResumeResponse",
	"OptimizeRequest",
	"OptimizeResponse",
	"ResumeInsights",
	"StepValidationRequest",
	"StepValidationResponse",
	"FieldError",
	"UserResponse",
	"RenderableResume",
	"ResumePreviewRequest",
	"FORM_STEPS",
	"CoverLetterTone",
	"CoverLetterRequest",
	"CoverLetterUpdate",
	"CoverLetterSnapshot",
	"CoverLetterFull",
	"CoverLetterSummary",
	"CoverLetterListMeta",
	"CoverLetterListResponse",
	"TemplateStyle",
	"TemplateInfo",
]
