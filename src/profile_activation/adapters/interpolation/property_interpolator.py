from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping, Optional

from profile_activation.domain.profiles.building import BuildModel, ModelBuildingRequest
from profile_activation.ports.model_interpolator import ModelInterpolator
from profile_activation.ports.problem_collector import ProblemCollector

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(r"\$\{([^}]+)\}")

# Guards against self-referencing properties such as a=${a}
MAX_RESOLUTION_DEPTH = 10

BASEDIR_EXPRESSIONS = ("basedir", "project.basedir")


class PropertyModelInterpolator(ModelInterpolator):
    """
    Replaces ${name} expressions in profile activation conditions.

    Substitution happens in place on the given model, which is also returned.
    Unresolved expressions are left as they are.
    """

    def interpolate_model(
        self,
        model: BuildModel,
        project_directory: Optional[Path],
        request: ModelBuildingRequest,
        problems: ProblemCollector,
    ) -> BuildModel:
        values = self._build_values(project_directory, request)
        for profile in model.profiles:
            activation = profile.activation
            if activation is None:
                continue
            if activation.property is not None:
                activation.property.name = self.interpolate(activation.property.name, values)
                activation.property.value = self.interpolate(activation.property.value, values)
            activation.jdk = self.interpolate(activation.jdk, values)
        return model

    @staticmethod
    def _build_values(project_directory: Optional[Path], request: ModelBuildingRequest) -> dict[str, str]:
        values: dict[str, str] = {}
        if project_directory is not None:
            for expression in BASEDIR_EXPRESSIONS:
                values[expression] = str(project_directory)
        values.update(request.system_properties)
        # User properties take precedence over system properties
        values.update(request.user_properties)
        return values

    def interpolate(self, text: Optional[str], values: Mapping[str, str]) -> Optional[str]:
        if not text or "${" not in text:
            return text

        result = text
        for _ in range(MAX_RESOLUTION_DEPTH):
            replaced = _EXPRESSION.sub(lambda m: values.get(m.group(1).strip(), m.group(0)), result)
            if replaced == result:
                break
            result = replaced
        else:
            logger.debug("Giving up resolving %r after %d passes", text, MAX_RESOLUTION_DEPTH)
        return result
