"""
Pydantic schemas for the HTTP API responses.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class HealthModel(BaseModel):
    status: str = "ok"
    profile: str


class DigitsResponse(BaseModel):
    offset: int
    count: int
    digits: str


class ProfileModel(BaseModel):
    count: int
    group_size: int = Field(alias="groupSize")
    groups_per_line: int = Field(alias="groupsPerLine")
    max_count: int = Field(alias="maxCount")
    model_config = ConfigDict(populate_by_name=True)


class ProfileCollection(BaseModel):
    profiles: Dict[str, ProfileModel] = Field(default_factory=dict)
