"""
Cover Letter Writer Agent

Writes a plain-text cover letter from a resume snapshot and a job
description. The response is used verbatim; there is no JSON step.
"""
import logging
from typing import Literal

from smartresume.core.exceptions import AIProviderError, CoverLetterGenerationError
from smartresume.core.llm import LLMProvider
from smartresume.schemas.CoverLetterSchemas import CoverLetterSnapshot, CoverLetterTone
from smartresume.schemas.ResumeSchemas import ResumeContent

logger = logging.getLogger(__name__)


def build_cover_letter_snapshot(resume: ResumeContent) -> CoverLetterSnapshot:
    """Take personal info, the first two experience entries as stored, and skills."""
    return CoverLetterSnapshot(
        personalInfo=resume.personalInfo,
        experience=resume.experience[:2],
        skills=list(resume.skills),
    )


def build_system_prompt(tone: str) -> str:
    return (
        "You are an expert cover letter writer. Create compelling, personalized cover letters that "
        "highlight relevant experience and demonstrate genuine interest in the role. "
        f"Write in a {tone} tone."
    )


def build_cover_letter_prompt(snapshot: CoverLetterSnapshot, job_description: str, tone: str) -> str:
    info = snapshot.personalInfo
    experience = "\n".join(
        f"- {exp.position} at {exp.company}: {exp.description}" for exp in snapshot.experience
    )
    return (
        "Create a cover letter for the following:\n\n"
        "Personal Information:\n"
        f"- Name: {info.firstName} {info.lastName}\n"
        f"- Title: {info.title}\n"
        f"- Email: {info.email}\n"
        f"- Phone: {info.phone}\n"
        f"- Location: {info.location}\n\n"
        f"Relevant Experience:\n{experience}\n\n"
        f"Skills: {', '.join(snapshot.skills)}\n\n"
        f"Job Description:\n{job_description or 'Not provided'}\n\n"
        "Requirements:\n"
        "1. Start with a compelling opening that shows genuine interest\n"
        "2. Highlight the most relevant experiences that match the job requirements\n"
        "3. Demonstrate knowledge of the company/role\n"
        "4. Include a strong closing with call to action\n"
        "5. Keep it concise (3-4 paragraphs)\n"
        f"6. Use a {tone} tone throughout\n"
        "7. Do not leave placeholders such as [Company Name] or [Hiring Manager]\n"
        "8. Return plain text only: no markdown, no HTML, no explanations"
    )


def fallback_cover_letter(snapshot: CoverLetterSnapshot, job_description: str) -> str:
    """Plain template letter filled from the resume's own fields."""
    info = snapshot.personalInfo
    name = f"{info.firstName} {info.lastName}"
    top_skills = ", ".join([s for s in snapshot.skills if s.strip()][:3]) or "a broad set of skills"
    role = "this role" if job_description else "a role on your team"

    paragraphs = [
        "Dear Hiring Manager,",
        f"I am writing to express my interest in {role}. As a {info.title}, "
        f"I bring hands-on experience with {top_skills}.",
    ]
    if snapshot.experience:
        latest = snapshot.experience[0]
        paragraphs.append(
            f"Most recently I worked as {latest.position} at {latest.company}, "
            "where I delivered results that map directly to the responsibilities you describe."
        )
    paragraphs.append(
        "I would welcome the opportunity to discuss how my background can contribute to your team. "
        "Thank you for your time and consideration."
    )
    paragraphs.append(f"Sincerely,\n{name}")
    return "\n\n".join(paragraphs)


class CoverLetterWriter:
    def __init__(self, provider: LLMProvider, failure_mode: Literal["raise", "fallback"] = "raise"):
        self.provider = provider
        self.failure_mode = failure_mode

    def generate(
        self,
        snapshot: CoverLetterSnapshot,
        job_description: str,
        tone: str = CoverLetterTone.PROFESSIONAL.value,
    ) -> str:
        tone = CoverLetterTone(tone).value
        try:
            content = self.provider.generate(
                build_cover_letter_prompt(snapshot, job_description, tone),
                system=build_system_prompt(tone),
                temperature=0.8,
            )
        except AIProviderError as e:
            if self.failure_mode == "fallback":
                logger.warning("Cover letter generation failed, using template letter: %s", e)
                return fallback_cover_letter(snapshot, job_description)
            raise CoverLetterGenerationError("Failed to generate cover letter") from e

        return content or ""
