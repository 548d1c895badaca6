from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from profile_activation.domain.profiles.models import Profile

# Validation levels
VALIDATION_LEVEL_MINIMAL = 0
VALIDATION_LEVEL_STRICT = 31


@dataclass
class BuildModel:
    """Build model as seen by the interpolator. Only profiles are carried."""

    profiles: list[Profile] = field(default_factory=list)


@dataclass(frozen=True)
class ModelBuildingRequest:
    raw_model: BuildModel
    active_profile_ids: frozenset[str] = field(default_factory=frozenset)
    inactive_profile_ids: frozenset[str] = field(default_factory=frozenset)
    system_properties: Mapping[str, str] = field(default_factory=dict)
    user_properties: Mapping[str, str] = field(default_factory=dict)
    two_phase_building: bool = False
    validation_level: int = VALIDATION_LEVEL_STRICT
