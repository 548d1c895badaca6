from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from profile_activation.domain.profiles.building import BuildModel, ModelBuildingRequest
from profile_activation.ports.problem_collector import ProblemCollector


class ModelInterpolator(Protocol):
    def interpolate_model(
        self,
        model: BuildModel,
        project_directory: Optional[Path],
        request: ModelBuildingRequest,
        problems: ProblemCollector,
    ) -> BuildModel: ...
