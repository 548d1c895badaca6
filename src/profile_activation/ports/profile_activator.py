from __future__ import annotations

from typing import Protocol

from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.domain.profiles.models import Profile
from profile_activation.ports.problem_collector import ProblemCollector


class ProfileActivator(Protocol):
    """Evaluates one kind of activation condition."""

    def present_in_config(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool: ...

    def is_active(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool: ...
