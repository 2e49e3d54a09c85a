"""Service-level errors.

Endpoints translate these into HTTP responses; services never raise
HTTPException themselves.
"""


class SmartResumeError(Exception):
    """Base class for errors raised by the service layer."""


class AIProviderError(SmartResumeError):
    """The AI provider could not be reached or returned an error."""


class OptimizationError(SmartResumeError):
    """Resume optimization failed (transport, provider or parse failure)."""


class InsightsError(SmartResumeError):
    """Resume insights could not be generated."""


class CoverLetterGenerationError(SmartResumeError):
    """Cover letter generation failed."""


class RenderingError(SmartResumeError):
    """The PDF engine failed to render a document."""
