"""
Tests for pulling JSON objects and scores out of model responses
"""
import math

import pytest

from smartresume.tools.json_extract import clamp_score, extract_json_object, string_list


def test_extract_plain_object():
    assert extract_json_object('{"matchScore": 70}') == {"matchScore": 70}


def test_extract_object_wrapped_in_prose_and_fences():
    text = 'Here is the result:\n```json\n{"matchScore": 70, "optimizations": ["a"]}\n```\nHope it helps!'
    assert extract_json_object(text) == {"matchScore": 70, "optimizations": ["a"]}


def test_braces_inside_strings_do_not_break_balance():
    text = 'noise {"enhancedSummary": "Uses {curly} braces and \\"quotes\\" }", "matchScore": 5} trailing }'
    data = extract_json_object(text)
    assert data["enhancedSummary"] == 'Uses {curly} braces and "quotes" }'
    assert data["matchScore"] == 5


def test_skips_unparseable_candidates():
    text = "{not json} then {\"ok\": true}"
    assert extract_json_object(text) == {"ok": True}


def test_nested_objects_return_outermost():
    text = '{"outer": {"inner": 1}}'
    assert extract_json_object(text) == {"outer": {"inner": 1}}


@pytest.mark.parametrize("text", ["", "no json here", "[1, 2, 3]", "{unterminated"])
def test_extract_raises_when_no_object(text):
    with pytest.raises(ValueError):
        extract_json_object(text)


@pytest.mark.parametrize(
    "value, expected",
    [
        (88, 88),
        (88.6, 89),
        (-5, 0),
        (150, 100),
        ("72", 72),
        ("65%", 65),
        (" 40 ", 40),
        (float("inf"), 100),
        (float("-inf"), 0),
    ],
)
def test_clamp_score(value, expected):
    assert clamp_score(value) == expected


@pytest.mark.parametrize("value", [None, True, "high", math.nan, {"score": 1}, [50]])
def test_clamp_score_uses_default_for_unusable_values(value):
    assert clamp_score(value, default=75) == 75


def test_string_list_keeps_only_strings():
    assert string_list(["Go", 3, None, "SQL"]) == ["Go", "SQL"]
    assert string_list("Go") == []
    assert string_list(None) == []
