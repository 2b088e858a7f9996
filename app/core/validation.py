from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from app.models.error import FieldError
from app.models.movie import MovieCreate, MovieUpdate


@dataclass
class ValidationResult:
    """
    Outcome of validating a movie payload: either the cleaned data or the
    per-field errors, never both.
    """
    data: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


def _field_name(loc) -> str:
    if not loc:
        return "body"
    return ".".join(str(part) for part in loc)


def _to_field_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(field=_field_name(err["loc"]), message=err["msg"], type=err["type"])
        for err in exc.errors()
    ]


def _validate(model: Type[BaseModel], payload: Any, exclude_unset: bool) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationResult(errors=[
            FieldError(field="body", message="Input should be a JSON object", type="dict_type")
        ])

    try:
        parsed = model.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(errors=_to_field_errors(e))

    return ValidationResult(data=parsed.model_dump(exclude_unset=exclude_unset))


def validate_movie(payload: Any) -> ValidationResult:
    return _validate(MovieCreate, payload, exclude_unset=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    # only the fields actually sent take part in the merge
    return _validate(MovieUpdate, payload, exclude_unset=True)
