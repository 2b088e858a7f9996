import datetime
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BeforeValidator,
    BaseModel,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

MIN_YEAR = 1900
RATE_MIN = 0.0
RATE_MAX = 10.0

Genre = Literal[
    "Action",
    "Adventure",
    "Crime",
    "Comedy",
    "Drama",
    "Fantasy",
    "Horror",
    "Thriller",
    "Sci-Fi",
]

_url_adapter = TypeAdapter(AnyUrl)


def max_year() -> int:
    return datetime.date.today().year + 1


def _check_year(year: int) -> int:
    if year > max_year():
        raise ValueError(f"Input should be less than or equal to {max_year()}")
    return year


def _require_number(rate: Any) -> Any:
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise ValueError("Input should be a valid number")
    return rate


def _check_rate(rate: Union[int, float]) -> Union[int, float]:
    if not RATE_MIN <= rate <= RATE_MAX:
        raise ValueError(f"Input should be between {RATE_MIN:g} and {RATE_MAX:g}")
    return rate


def _check_poster(poster: str) -> str:
    # validated as a URL but kept exactly as sent
    try:
        _url_adapter.validate_python(poster)
    except ValidationError:
        raise ValueError("Input should be a valid URL")
    return poster


Title = Annotated[StrictStr, Field(min_length=1)]
Year = Annotated[StrictInt, Field(ge=MIN_YEAR), AfterValidator(_check_year)]
Director = Annotated[StrictStr, Field(min_length=1)]
Duration = Annotated[StrictInt, Field(gt=0)]
Poster = Annotated[StrictStr, AfterValidator(_check_poster)]
Genres = Annotated[List[Genre], Field(min_length=1)]
# ints stay ints so the value is echoed back unchanged
Rate = Annotated[Union[int, float], BeforeValidator(_require_number), AfterValidator(_check_rate)]


class MovieCreate(BaseModel):
    """
    Payload for POST /movies. Unknown keys, a client supplied id included, are dropped.
    """
    title: Title
    year: Year
    director: Director
    duration: Duration
    poster: Poster
    genre: Genres
    rate: Rate = 0


class MovieUpdate(BaseModel):
    """
    Payload for PATCH /movies/{id}. Every field is optional, but a present
    field follows the MovieCreate rules and may not be null.
    """
    title: Optional[Title] = None
    year: Optional[Year] = None
    director: Optional[Director] = None
    duration: Optional[Duration] = None
    poster: Optional[Poster] = None
    genre: Optional[Genres] = None
    rate: Optional[Rate] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one movie field must be provided")
        return self


class Movie(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: List[str]
    rate: Union[int, float] = 0
