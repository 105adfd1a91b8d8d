from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cube import Color, SLOTS_PER_FACE


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


FaceSlots = List[Optional[Color]]


class CubeConfiguration(CamelModel):
    front: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)
    right: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)
    back: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)
    left: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)
    top: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)
    bottom: FaceSlots = Field(..., min_length=SLOTS_PER_FACE, max_length=SLOTS_PER_FACE)

    @field_validator("front", "right", "back", "left", "top", "bottom", mode="before")
    @classmethod
    def empty_string_is_empty_slot(cls, v):
        # the web client sends "" for unpainted squares
        if isinstance(v, list):
            return [None if c == "" else c for c in v]
        return v


class ConfigurationCreate(CamelModel):
    name: Optional[str] = None
    configuration: CubeConfiguration


class ConfigurationRecord(CamelModel):
    id: str
    name: Optional[str] = None
    configuration: CubeConfiguration
    created_at: datetime


class SolutionData(CamelModel):
    moves: List[str]
    total_moves: int
    solving_time: float


class SolveRequest(CamelModel):
    configuration: CubeConfiguration
    configuration_id: Optional[str] = None


class SolveResponse(CamelModel):
    solution: SolutionData


class SolutionRecord(CamelModel):
    id: str
    configuration_id: Optional[str] = None
    solution: SolutionData
    created_at: datetime


class RandomConfigurationResponse(CamelModel):
    configuration: CubeConfiguration
