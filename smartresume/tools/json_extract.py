import json
import math
from typing import Any, Dict, Iterator, List


def _balanced_candidates(text: str) -> Iterator[str]:
    """Yield every balanced ``{...}`` span, left to right.

    Braces inside JSON string literals do not count towards the balance.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    yield text[start : i + 1]
                    break
        start = text.find("{", start + 1)


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Models sometimes wrap JSON in prose or markdown fences.
    Return the first balanced span that parses as a JSON object.

    Raises:
        ValueError: if the text contains no JSON object.
    """
    if not text:
        raise ValueError("Empty model response")

    for candidate in _balanced_candidates(text):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise ValueError("No JSON object found in model response")


def clamp_score(value: Any, default: int = 0) -> int:
    """Coerce a model-supplied score into an int in [0, 100]."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or math.isnan(value):
        return default
    if math.isinf(value):
        return 100 if value > 0 else 0
    return max(0, min(100, int(round(value))))


def string_list(value: Any) -> List[str]:
    """Keep only the string items of a model-supplied list."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]
