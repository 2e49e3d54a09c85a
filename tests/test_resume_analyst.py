import pytest

from smartresume.agents.resume_analyst import ResumeAnalyst, parse_insights_response
from smartresume.core.exceptions import AIProviderError, InsightsError


def test_insights_are_parsed(make_provider, resume_content):
    provider = make_provider(
        ['{"strengthsScore": 82, "weaknessesScore": 30, "suggestions": ["Quantify impact"], "overallRating": 79}']
    )
    insights = ResumeAnalyst(provider).analyze(resume_content)

    assert insights.strengthsScore == 82
    assert insights.weaknessesScore == 30
    assert insights.suggestions == ["Quantify impact"]
    assert insights.overallRating == 79
    assert "Senior Engineer at Acme" in provider.calls[0]["prompt"]


def test_missing_values_use_defaults():
    insights = parse_insights_response("{}")
    assert (insights.strengthsScore, insights.weaknessesScore, insights.overallRating) == (75, 25, 75)
    assert insights.suggestions == []


def test_scores_are_clamped():
    insights = parse_insights_response('{"strengthsScore": 250, "weaknessesScore": -1, "overallRating": "abc"}')
    assert insights.strengthsScore == 100
    assert insights.weaknessesScore == 0
    assert insights.overallRating == 75


@pytest.mark.parametrize("responses, error", [(None, AIProviderError("down")), (["no json"], None)])
def test_failures_raise_insights_error(make_provider, resume_content, responses, error):
    with pytest.raises(InsightsError):
        ResumeAnalyst(make_provider(responses, error=error)).analyze(resume_content)
