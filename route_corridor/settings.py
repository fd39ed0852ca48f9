# -*- coding: utf-8 -*-
"""
Corridor settings.

Defaults mirror the map client: a 100 m offset adjustable on a 1-1000 m
slider, an open route and 64-step discs. A JSON file with any subset of
the fields overrides them.
"""

from __future__ import annotations

import json
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .constants import DEFAULT_DISC_STEPS
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class CorridorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset_m: int = Field(default=100, gt=0)
    offset_min_m: int = Field(default=1, gt=0)
    offset_max_m: int = Field(default=1000, gt=0)
    closed: bool = False
    disc_steps: int = Field(default=DEFAULT_DISC_STEPS, ge=3)

    @model_validator(mode='after')
    def check_offset_range(self) -> 'CorridorSettings':
        if self.offset_min_m > self.offset_max_m:
            raise ValueError(f"offset_min_m ({self.offset_min_m}) > offset_max_m ({self.offset_max_m})")
        if not self.offset_min_m <= self.offset_m <= self.offset_max_m:
            raise ValueError(f"offset_m ({self.offset_m}) outside "
                             f"[{self.offset_min_m}, {self.offset_max_m}]")
        return self


def load_settings(file_path: str | os.PathLike | None = None) -> CorridorSettings:
    """
    Load settings from a JSON file, or return the defaults.

    Args:
        file_path: Path to a JSON object with CorridorSettings fields

    Returns:
        Validated CorridorSettings

    Raises:
        InvalidArgument: the file is not valid JSON or fails validation
    """
    if file_path is None:
        return CorridorSettings()

    with open(file_path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"Settings file {file_path} is not valid JSON: {e}") from e

    try:
        settings = CorridorSettings.model_validate(data)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid settings in {file_path}: {e}") from e
    logger.info(f"Loaded corridor settings from {file_path}")
    return settings
