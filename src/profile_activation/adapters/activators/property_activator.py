from __future__ import annotations

from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.domain.profiles.models import Profile
from profile_activation.domain.profiles.problems import ModelProblem, ModelVersion, Severity
from profile_activation.ports.problem_collector import ProblemCollector
from profile_activation.ports.profile_activator import ProfileActivator


class PropertyProfileActivator(ProfileActivator):
    """Activates a profile based on the presence or value of a property."""

    def present_in_config(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool:
        activation = profile.activation
        return activation is not None and activation.property is not None

    def is_active(
        self, profile: Profile, context: ProfileActivationContext, problems: ProblemCollector
    ) -> bool:
        """
        Evaluate the property condition.

        Rules:
        - "!name" with no value: active when the property is absent or empty
        - "name" with no value: active when the property has a non-empty value
        - value "x": active when the property equals x
        - value "!x": active when the property does not equal x

        User properties are consulted before system properties.
        """
        if not self.present_in_config(profile, context, problems):
            return False
        condition = profile.activation.property

        name = condition.name
        reverse_name = False
        if name and name.startswith("!"):
            reverse_name = True
            name = name[1:]

        if not name:
            problems.add(
                ModelProblem(
                    severity=Severity.ERROR,
                    version=ModelVersion.BASE,
                    message=f"The property name is required to activate the profile {profile.id}",
                    location=profile.location,
                )
            )
            return False

        actual = context.get_property(name)

        expected = condition.value
        if expected:
            reverse_value = False
            if expected.startswith("!"):
                reverse_value = True
                expected = expected[1:]
            # Reverse the result if the value is prefixed with "!"
            result = expected == actual
            return not result if reverse_value else result

        result = bool(actual)
        return not result if reverse_name else result
