from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from profile_activation.ports.model_interpolator import ModelInterpolator
    from profile_activation.ports.profile_activator import ProfileActivator

from profile_activation.adapters.activators.jdk_version_activator import JdkVersionProfileActivator
from profile_activation.adapters.activators.property_activator import PropertyProfileActivator
from profile_activation.adapters.interpolation.property_interpolator import PropertyModelInterpolator
from profile_activation.application.profile_selector import DefaultProfileSelector


def create_selector() -> DefaultProfileSelector:
    """
    Factory function wiring the selector with the built-in activators.

    Activators are registered once here and treated as read-only afterwards.
    """
    activators: list["ProfileActivator"] = [
        PropertyProfileActivator(),
        JdkVersionProfileActivator(),
    ]
    interpolator: "ModelInterpolator" = PropertyModelInterpolator()
    return DefaultProfileSelector(activators=activators, interpolator=interpolator)
