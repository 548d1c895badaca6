from __future__ import annotations

"""
Profile activation domain.

Plain data describing build profiles, their activation conditions, the
context a resolution runs in, and the problems it may report. Nothing in
this package performs I/O.

Usage Example:
    ```python
    from profile_activation.domain.profiles import (
        Activation,
        ActivationProperty,
        Profile,
        ProfileActivationContext,
    )

    profile = Profile(
        id="integration",
        activation=Activation(property=ActivationProperty(name="env", value="ci")),
    )
    context = ProfileActivationContext.from_args(user_properties={"env": "ci"})
    ```
"""

from profile_activation.domain.profiles.building import (
    VALIDATION_LEVEL_MINIMAL,
    VALIDATION_LEVEL_STRICT,
    BuildModel,
    ModelBuildingRequest,
)
from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.domain.profiles.models import (
    SOURCE_POM,
    SOURCE_SETTINGS,
    Activation,
    ActivationProperty,
    InputLocation,
    Profile,
)
from profile_activation.domain.profiles.problems import ModelProblem, ModelVersion, Severity
from profile_activation.domain.profiles.version_range import matches_version

__all__ = [
    # Models
    "Profile",
    "Activation",
    "ActivationProperty",
    "InputLocation",
    "SOURCE_POM",
    "SOURCE_SETTINGS",
    # Context
    "ProfileActivationContext",
    # Building
    "BuildModel",
    "ModelBuildingRequest",
    "VALIDATION_LEVEL_MINIMAL",
    "VALIDATION_LEVEL_STRICT",
    # Problems
    "ModelProblem",
    "ModelVersion",
    "Severity",
    # Versions
    "matches_version",
]
