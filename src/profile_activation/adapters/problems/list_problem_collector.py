from __future__ import annotations

import logging
from typing import List

from profile_activation.domain.profiles.problems import ModelProblem, Severity
from profile_activation.ports.problem_collector import ProblemCollector

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.FATAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
}


class ListProblemCollector(ProblemCollector):
    """Keeps reported problems in order and logs each one."""

    def __init__(self) -> None:
        self.problems: List[ModelProblem] = []

    def add(self, problem: ModelProblem) -> None:
        self.problems.append(problem)
        logger.log(
            _LOG_LEVELS.get(problem.severity, logging.WARNING),
            "%s%s",
            problem.message,
            f" @ {problem.location}" if problem.location else "",
        )

    @property
    def errors(self) -> List[ModelProblem]:
        return [p for p in self.problems if p.severity in (Severity.ERROR, Severity.FATAL)]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
