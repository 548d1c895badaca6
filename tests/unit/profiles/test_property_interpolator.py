from pathlib import Path
from unittest.mock import Mock

from profile_activation.adapters.interpolation.property_interpolator import PropertyModelInterpolator
from profile_activation.domain.profiles import (
    VALIDATION_LEVEL_MINIMAL,
    Activation,
    ActivationProperty,
    BuildModel,
    ModelBuildingRequest,
    Profile,
)


def _request(model: BuildModel, system=None, user=None) -> ModelBuildingRequest:
    return ModelBuildingRequest(
        raw_model=model,
        system_properties=system or {},
        user_properties=user or {},
        two_phase_building=True,
        validation_level=VALIDATION_LEVEL_MINIMAL,
    )


def test_interpolates_property_condition_in_place():
    """Test that name and value expressions are replaced and the same model is returned."""
    condition = ActivationProperty(name="${prop.name}", value="${expected}")
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(property=condition))])

    result = PropertyModelInterpolator().interpolate_model(
        model, None, _request(model, user={"prop.name": "env", "expected": "ci"}), Mock()
    )

    assert result is model
    assert condition.name == "env"
    assert condition.value == "ci"


def test_user_properties_win_over_system_properties():
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(jdk="${jdk.version}"))])

    PropertyModelInterpolator().interpolate_model(
        model, None, _request(model, system={"jdk.version": "11"}, user={"jdk.version": "17"}), Mock()
    )

    assert model.profiles[0].activation.jdk == "17"


def test_unresolved_expressions_are_left_untouched():
    problems = Mock()
    condition = ActivationProperty(name="env", value="${unknown}-suffix")
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(property=condition))])

    PropertyModelInterpolator().interpolate_model(model, None, _request(model), problems)

    assert condition.value == "${unknown}-suffix"
    problems.add.assert_not_called()


def test_basedir_resolves_to_project_directory():
    condition = ActivationProperty(name="config", value="${project.basedir}/conf")
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(property=condition))])

    PropertyModelInterpolator().interpolate_model(model, Path("/work/app"), _request(model), Mock())

    assert condition.value == f"{Path('/work/app')}/conf"


def test_nested_expressions_are_resolved():
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(jdk="${outer}"))])

    PropertyModelInterpolator().interpolate_model(
        model, None, _request(model, user={"outer": "${inner}", "inner": "21"}), Mock()
    )

    assert model.profiles[0].activation.jdk == "21"


def test_self_reference_does_not_loop():
    model = BuildModel(profiles=[Profile(id="p", activation=Activation(jdk="${a}"))])

    PropertyModelInterpolator().interpolate_model(model, None, _request(model, user={"a": "${a}"}), Mock())

    assert model.profiles[0].activation.jdk == "${a}"


def test_profiles_without_activation_are_skipped():
    model = BuildModel(profiles=[Profile(id="p")])

    result = PropertyModelInterpolator().interpolate_model(model, None, _request(model), Mock())

    assert result.profiles[0].activation is None
