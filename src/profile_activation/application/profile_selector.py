from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from profile_activation.domain.profiles.building import (
    VALIDATION_LEVEL_MINIMAL,
    BuildModel,
    ModelBuildingRequest,
)
from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.domain.profiles.models import InputLocation, Profile
from profile_activation.domain.profiles.problems import ModelProblem, ModelVersion, Severity
from profile_activation.ports.model_interpolator import ModelInterpolator
from profile_activation.ports.problem_collector import ProblemCollector
from profile_activation.ports.profile_activator import ProfileActivator

logger = logging.getLogger(__name__)


class _PassThroughInterpolator:
    def interpolate_model(
        self,
        model: BuildModel,
        project_directory: Optional[Path],
        request: ModelBuildingRequest,
        problems: ProblemCollector,
    ) -> BuildModel:
        return model


class _DiscardingProblemCollector:
    def add(self, problem: ModelProblem) -> None:
        return None


class DefaultProfileSelector:
    """Calculates the active profiles among a given collection of profiles."""

    def __init__(
        self,
        activators: Optional[Iterable[ProfileActivator]] = None,
        interpolator: Optional[ModelInterpolator] = None,
    ) -> None:
        self.activators: List[ProfileActivator] = []
        self.interpolator: ModelInterpolator = interpolator or _PassThroughInterpolator()
        for activator in activators or []:
            self.add_profile_activator(activator)

    def add_profile_activator(self, activator: Optional[ProfileActivator]) -> "DefaultProfileSelector":
        if activator is not None:
            self.activators.append(activator)
        return self

    def set_interpolator(self, interpolator: ModelInterpolator) -> None:
        self.interpolator = interpolator

    def get_active_profiles(
        self,
        profiles: Iterable[Profile],
        context: ProfileActivationContext,
        problems: ProblemCollector,
    ) -> List[Profile]:
        """
        Resolve which profiles are active for this build.

        Explicit deactivation beats everything, explicit activation or a
        satisfied condition activates, and activeByDefault is the fallback.
        POM-sourced defaults only apply when no other POM-sourced profile was
        activated; defaults from any other source always apply.

        Returns:
            The active profiles (the same objects that were passed in) in input
            order, followed by any POM-sourced defaults. Empty if profile ids are
            not unique.
        """
        profiles = list(profiles)
        if len({profile.id for profile in profiles}) < len(profiles):
            logger.warning("Profile ids are not unique, no profile will be activated")
            return []

        activated_ids = set(context.active_profile_ids)
        deactivated_ids = set(context.inactive_profile_ids)

        active_profiles: List[Profile] = []
        pom_default_candidates: List[Profile] = []
        activated_pom_profile_not_by_default = False

        interpolated = self._early_interpolate_profile_activations(profiles, context)

        for profile in profiles:
            if profile.id in deactivated_ids:
                logger.debug("Profile %s explicitly deactivated", profile.id)
                continue

            if profile.id in activated_ids or self._is_active(
                interpolated.get(profile.id, profile), profile.location, context, problems
            ):
                active_profiles.append(profile)
                if profile.is_pom_sourced:
                    activated_pom_profile_not_by_default = True
            elif profile.is_active_by_default:
                if profile.is_pom_sourced:
                    pom_default_candidates.append(profile)
                else:
                    active_profiles.append(profile)

        if not activated_pom_profile_not_by_default:
            active_profiles.extend(pom_default_candidates)
        elif pom_default_candidates:
            logger.debug(
                "Skipping %d default profile(s) from the project: %s",
                len(pom_default_candidates),
                ", ".join(p.id for p in pom_default_candidates),
            )

        logger.debug("Active profiles: %s", [p.id for p in active_profiles])
        return active_profiles

    def _early_interpolate_profile_activations(
        self, profiles: List[Profile], context: ProfileActivationContext
    ) -> dict[str, Profile]:
        # Only id, source and a private copy of the activation go through interpolation
        model = BuildModel(
            profiles=[
                Profile(id=p.id, source=p.source, activation=copy.deepcopy(p.activation)) for p in profiles
            ]
        )
        request = ModelBuildingRequest(
            raw_model=model,
            active_profile_ids=frozenset(context.active_profile_ids),
            inactive_profile_ids=frozenset(context.inactive_profile_ids),
            system_properties=dict(context.system_properties),
            user_properties=dict(context.user_properties),
            two_phase_building=True,
            validation_level=VALIDATION_LEVEL_MINIMAL,
        )

        result = self.interpolator.interpolate_model(
            model, context.project_directory, request, _DiscardingProblemCollector()
        )
        if result is None:
            result = model
        return {profile.id: profile for profile in result.profiles}

    def _is_active(
        self,
        profile: Profile,
        location: Optional[InputLocation],
        context: ProfileActivationContext,
        problems: ProblemCollector,
    ) -> bool:
        try:
            # A profile with no recognized condition never activates on its own
            is_active = False
            for activator in self.activators:
                if activator.present_in_config(profile, context, problems):
                    is_active = True
            for activator in self.activators:
                if activator.present_in_config(profile, context, problems):
                    is_active &= bool(activator.is_active(profile, context, problems))
        except Exception as e:
            logger.debug("Activation check failed for profile %s", profile.id, exc_info=True)
            problems.add(
                ModelProblem(
                    severity=Severity.ERROR,
                    version=ModelVersion.BASE,
                    message=f"Failed to determine activation for profile {profile.id}",
                    location=location,
                    exception=e,
                )
            )
            return False
        return is_active
