from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator
from typing import List, Tuple

from .constants import DEFAULT_DISC_STEPS
from .coordinates import validate_lnglat
from .errors import InvalidArgument


class CorridorRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    route: List[Tuple[float, float]]  # (lon, lat) pairs
    offset_m: float = Field(gt=0, allow_inf_nan=False, strict=True)
    closed: StrictBool = False
    steps: int = Field(default=DEFAULT_DISC_STEPS, ge=3, strict=True)

    @field_validator('route')
    @classmethod
    def check_route(cls, route: List[Tuple[float, float]]) -> List[Tuple[float, float]]:
        return [validate_lnglat(p) for p in route]


def parse_request(route, offset_m, closed=False, steps=DEFAULT_DISC_STEPS) -> CorridorRequest:
    """Validate builder inputs, raising InvalidArgument on the first problem."""
    try:
        return CorridorRequest(route=list(route), offset_m=offset_m, closed=closed, steps=steps)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid corridor request: {e}") from e
    except TypeError as e:
        raise InvalidArgument(f"Route must be a sequence of coordinates: {e}") from e
