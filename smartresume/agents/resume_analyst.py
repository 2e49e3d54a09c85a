import logging

from smartresume.core.exceptions import AIProviderError, InsightsError
from smartresume.core.llm import LLMProvider
from smartresume.schemas.ResumeSchemas import ResumeContent, ResumeInsights
from smartresume.tools.json_extract import clamp_score, extract_json_object, string_list

logger = logging.getLogger(__name__)


ANALYST_SYSTEM_PROMPT = (
    "You are a resume analysis expert. Analyze the provided resume and provide insights on its "
    "strengths, weaknesses, and improvement suggestions."
    "\n\nProvide your response in JSON format:"
    "\n{"
    '\n  "strengthsScore": number (0-100),'
    '\n  "weaknessesScore": number (0-100),'
    '\n  "suggestions": array of specific improvement suggestions,'
    '\n  "overallRating": number (0-100)'
    "\n}"
)


def build_insights_prompt(resume: ResumeContent) -> str:
    info = resume.personalInfo
    experience = "\n".join(f"{e.position} at {e.company}: {e.description}" for e in resume.experience)
    education = "\n".join(f"{e.degree} from {e.school}" for e in resume.education)
    return (
        "Analyze this resume:\n\n"
        f"Personal Info: {info.firstName} {info.lastName}\n"
        f"Title: {info.title}\n"
        f"Summary: {info.summary or 'No summary provided'}\n\n"
        f"Experience:\n{experience}\n\n"
        f"Education:\n{education}\n\n"
        f"Skills: {', '.join(resume.skills)}\n\n"
        "Provide detailed analysis focusing on:\n"
        "1. Content quality and relevance\n"
        "2. Achievement quantification\n"
        "3. Keyword optimization\n"
        "4. Structure and formatting\n"
        "5. ATS compatibility"
    )


def parse_insights_response(text: str) -> ResumeInsights:
    data = extract_json_object(text)
    return ResumeInsights(
        strengthsScore=clamp_score(data.get("strengthsScore"), default=75),
        weaknessesScore=clamp_score(data.get("weaknessesScore"), default=25),
        suggestions=string_list(data.get("suggestions")),
        overallRating=clamp_score(data.get("overallRating"), default=75),
    )


class ResumeAnalyst:
    def __init__(self, provider: LLMProvider):
        self.provider = provider

    def analyze(self, resume: ResumeContent) -> ResumeInsights:
        try:
            text = self.provider.generate(
                build_insights_prompt(resume),
                system=ANALYST_SYSTEM_PROMPT,
                json_output=True,
                temperature=0.7,
            )
            return parse_insights_response(text)
        except (AIProviderError, ValueError) as e:
            raise InsightsError("Failed to generate resume insights") from e
