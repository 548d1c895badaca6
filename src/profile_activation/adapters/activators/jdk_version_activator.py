from __future__ import annotations

from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.domain.profiles.models import Profile
from profile_activation.domain.profiles.problems import ModelProblem, ModelVersion, Severity
from profile_activation.domain.profiles.version_range import matches_version
from profile_activation.ports.problem_collector import ProblemCollector
from profile_activation.ports.profile_activator import ProfileActivator

JAVA_VERSION_PROPERTY = "java.version"


class JdkVersionProfileActivator(ProfileActivator):
    """Activates a profile based on the version of the JDK running the build."""

    def present_in_config(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool:
        activation = profile.activation
        return activation is not None and activation.jdk is not None

    def is_active(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool:
        if not self.present_in_config(profile, context, problems):
            return False

        version = context.system_properties.get(JAVA_VERSION_PROPERTY)
        if not version:
            problems.add(
                ModelProblem(
                    severity=Severity.ERROR,
                    version=ModelVersion.BASE,
                    message=f"Failed to determine Java version for profile {profile.id}",
                    location=profile.location,
                )
            )
            return False

        return matches_version(version, profile.activation.jdk)
