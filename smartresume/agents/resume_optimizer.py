"""
Resume Optimizer Agent

Rewrites a resume's summary and experience descriptions against a job
description and scores how well the two align.
"""
import logging
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field, ValidationError

from smartresume.core.exceptions import AIProviderError, OptimizationError
from smartresume.core.llm import LLMProvider
from smartresume.schemas.ResumeSchemas import Experience, ResumeContent
from smartresume.tools.json_extract import clamp_score, extract_json_object, string_list

logger = logging.getLogger(__name__)


OPTIMIZER_SYSTEM_PROMPT = (
    "You are an expert resume optimizer and ATS specialist. Your task is to analyze a job "
    "description and optimize a resume to maximize the match score and improve ATS compatibility."
    "\n\nProvide your response in JSON format with the following structure:"
    "\n{"
    '\n  "matchScore": number (0-100),'
    '\n  "enhancedSummary": "optimized professional summary",'
    '\n  "optimizedExperience": array of experience objects (position, company, startDate, endDate, current, description) '
    "in the same order as the input, with optimized descriptions,"
    '\n  "suggestedSkills": array of relevant skills to add,'
    '\n  "optimizations": array of short strings, one per change made'
    "\n}"
)


class OptimizationResult(BaseModel):
    optimizedResume: ResumeContent
    matchScore: int = Field(0, ge=0, le=100)
    optimizations: List[str] = Field(default_factory=list)
    suggestedSkills: List[str] = Field(default_factory=list)


def build_optimization_prompt(resume: ResumeContent, job_description: str) -> str:
    info = resume.personalInfo
    experience_lines = "".join(
        f"\n- {exp.position} at {exp.company}\n  {exp.description}\n" for exp in resume.experience
    )
    return (
        f"Job Description:\n{job_description}\n\n"
        "Current Resume Data:\n"
        f"Name: {info.firstName} {info.lastName}\n"
        f"Title: {info.title}\n"
        f"Summary: {info.summary or 'No summary provided'}\n\n"
        f"Experience:\n{experience_lines}\n"
        f"Current Skills: {', '.join(resume.skills)}\n\n"
        "Please analyze this job description and optimize the resume for maximum ATS compatibility "
        "and relevance. Focus on:\n"
        "1. Rewriting the professional summary with relevant keywords\n"
        "2. Rewriting each experience description with action verbs and keywords from the job description\n"
        "3. Suggesting additional relevant skills from the job description\n"
        "4. Calculating an accurate match score between 0 and 100\n"
        "5. Listing every change you made"
    )


def _merge_experience(original: List[Experience], proposed: Any) -> List[Experience]:
    """Overlay the model's experience entries on the originals, index by index.

    The result always has one entry per original: originals without a proposal
    stay as they are and extra proposals are ignored. Falls back to the
    original list if the proposal is missing, empty or does not validate.
    """
    if not isinstance(proposed, list) or not proposed:
        return list(original)
    if not all(isinstance(item, dict) for item in proposed):
        return list(original)

    merged: List[Experience] = []
    try:
        for i, entry in enumerate(original):
            if i >= len(proposed):
                merged.append(entry)
                continue
            item = proposed[i]
            base: Dict[str, Any] = entry.model_dump()
            base.update({k: v for k, v in item.items() if v is not None or k == "endDate"})
            merged.append(Experience.model_validate(base))
    except ValidationError as e:
        logger.warning("Discarding optimized experience that failed validation: %s", e)
        return list(original)
    return merged


def _merge_skills(skills: List[str], suggested: List[str]) -> List[str]:
    merged = list(skills)
    for skill in suggested:
        if skill and skill not in merged:
            merged.append(skill)
    return merged


def parse_optimization_response(text: str, resume: ResumeContent) -> OptimizationResult:
    """Turn the raw model text into a clamped, defaulted OptimizationResult.

    Raises:
        ValueError: if the text contains no JSON object.
    """
    data = extract_json_object(text)

    summary = data.get("enhancedSummary")
    if not isinstance(summary, str) or not summary:
        summary = resume.summary

    suggested = string_list(data.get("suggestedSkills"))
    optimizations = string_list(data.get("optimizations"))
    if not optimizations and isinstance(data.get("feedback"), str) and data["feedback"]:
        optimizations = [data["feedback"]]

    optimized = ResumeContent(
        personalInfo=resume.personalInfo.model_copy(update={"summary": summary}),
        experience=_merge_experience(resume.experience, data.get("optimizedExperience")),
        education=list(resume.education),
        skills=_merge_skills(resume.skills, suggested),
    )
    return OptimizationResult(
        optimizedResume=optimized,
        matchScore=clamp_score(data.get("matchScore")),
        optimizations=optimizations,
        suggestedSkills=suggested,
    )


class ResumeOptimizer:
    """Calls the AI provider and returns an optimized copy of the resume.

    Nothing is persisted here; the caller stores the result.
    """

    def __init__(self, provider: LLMProvider, failure_mode: Literal["raise", "fallback"] = "raise"):
        self.provider = provider
        self.failure_mode = failure_mode

    def optimize(self, resume: ResumeContent, job_description: str) -> OptimizationResult:
        if not job_description or not job_description.strip():
            raise ValueError("Job description is required")

        try:
            text = self.provider.generate(
                build_optimization_prompt(resume, job_description),
                system=OPTIMIZER_SYSTEM_PROMPT,
                json_output=True,
                temperature=0.7,
            )
            result = parse_optimization_response(text, resume)
        except (AIProviderError, ValueError) as e:
            if self.failure_mode == "fallback":
                logger.warning("Optimization failed, returning unmodified resume: %s", e)
                return OptimizationResult(optimizedResume=resume, matchScore=0)
            raise OptimizationError("Failed to analyze job description and optimize resume") from e

        logger.info(
            "Optimization completed via %s: matchScore=%s, %d optimizations",
            self.provider.name,
            result.matchScore,
            len(result.optimizations),
        )
        return result
