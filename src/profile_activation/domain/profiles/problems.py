from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from profile_activation.domain.profiles.models import InputLocation


class Severity(str, Enum):
    FATAL = "FATAL"
    ERROR = "ERROR"
    WARNING = "WARNING"


class ModelVersion(str, Enum):
    """Model version from which a problem is reported."""

    BASE = "BASE"
    V20 = "V20"
    V30 = "V30"
    V31 = "V31"


@dataclass(frozen=True)
class ModelProblem:
    severity: Severity
    version: ModelVersion
    message: str
    location: Optional[InputLocation] = None
    exception: Optional[BaseException] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "version": self.version.value,
            "message": self.message,
            "location": str(self.location) if self.location else None,
            "exception": repr(self.exception) if self.exception else None,
        }
