from typing import Any, Dict, List

from pydantic import ValidationError

from smartresume.schemas.ResumeSchemas import FORM_STEPS, FieldError


def field_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(loc=list(err["loc"]), msg=err["msg"], type=err["type"])
        for err in exc.errors(include_url=False)
    ]


def validate_step(step: int, data: Dict[str, Any]) -> List[FieldError]:
    """Validate one builder step. Fields belonging to other steps are ignored.

    Raises:
        KeyError: step is not one of the builder steps.
    """
    model = FORM_STEPS[step]
    try:
        model.model_validate(data)
    except ValidationError as e:
        return field_errors(e)
    return []
