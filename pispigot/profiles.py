"""
Named output profiles.

Profiles live in a YAML mapping of ``name -> fields`` and are validated with
pydantic.  The file is looked up from an explicit path, then the
``PISPIGOT_PROFILES`` environment variable, then the copy shipped in
``pispigot/configs``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator, validator

LOG = logging.getLogger(__name__)

ENV_PROFILES_VAR = "PISPIGOT_PROFILES"
CONFIG_DIR = Path(__file__).resolve().parent / "configs"
PROFILES_PATH = CONFIG_DIR / "profiles.yaml"
DEFAULT_PROFILE = "default"

PathLike = Union[str, os.PathLike]


class ProfileError(RuntimeError):
    """Base class for profile loading errors."""


class UnknownProfile(ProfileError):
    """Raised when a profile name is not defined."""


class StreamProfile(BaseModel):
    count: int = Field(default=100, ge=0)
    group_size: int = Field(default=10, ge=0, alias="groupSize")
    groups_per_line: int = Field(default=5, ge=0, alias="groupsPerLine")
    max_count: int = Field(default=10_000, ge=1, alias="maxCount")
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @validator("count", "group_size", "groups_per_line", "max_count", pre=True)
    def _reject_booleans(cls, value: object) -> object:
        # YAML 1.1 reads yes/no as booleans.
        if isinstance(value, bool):
            raise ValueError("expected an integer")
        return value

    @model_validator(mode="after")
    def _count_within_max(self) -> StreamProfile:
        if self.count > self.max_count:
            raise ValueError(f"count {self.count} exceeds maxCount {self.max_count}")
        return self


def profiles_path(path: Optional[PathLike] = None) -> Path:
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(ENV_PROFILES_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return PROFILES_PATH


def load_profiles(path: Optional[PathLike] = None) -> Dict[str, StreamProfile]:
    """
    Load every profile from ``path``.

    A missing file is not an error: the built-in ``default`` profile is always
    available and can be overridden by the file.
    """

    source = profiles_path(path)
    try:
        with source.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except FileNotFoundError:
        LOG.info("Profiles file %s not found; using built-in defaults.", source)
        raw = {}
    except yaml.YAMLError as exc:
        raise ProfileError(f"Malformed profiles file {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ProfileError(f"Profiles file {source} must contain a mapping")

    profiles: Dict[str, StreamProfile] = {DEFAULT_PROFILE: StreamProfile()}
    for name, fields in raw.items():
        try:
            profiles[str(name)] = StreamProfile(**(fields or {}))
        except (TypeError, ValidationError) as exc:
            raise ProfileError(f"Invalid profile '{name}' in {source}: {exc}") from exc
    return profiles


def resolve_profile(name: Optional[str] = None, path: Optional[PathLike] = None) -> StreamProfile:
    profiles = load_profiles(path)
    key = name or DEFAULT_PROFILE
    try:
        return profiles[key]
    except KeyError:
        raise UnknownProfile(f"Profile '{key}' not defined") from None
