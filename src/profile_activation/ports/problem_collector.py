from __future__ import annotations

from typing import Protocol

from profile_activation.domain.profiles.problems import ModelProblem


class ProblemCollector(Protocol):
    def add(self, problem: ModelProblem) -> None: ...
