from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Profile sources
SOURCE_POM = "pom"
SOURCE_SETTINGS = "settings.xml"


@dataclass(frozen=True)
class InputLocation:
    """Where a profile was declared, for diagnostics."""

    source: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    index: Optional[int] = None

    def __str__(self) -> str:
        parts = [self.source or "<unknown>"]
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.column is not None:
            parts.append(f"column {self.column}")
        if self.index is not None:
            parts.append(f"profile #{self.index}")
        return ", ".join(parts)


@dataclass
class ActivationProperty:
    """Named property condition; value is optional and may be negated with '!'."""

    name: Optional[str] = None
    value: Optional[str] = None


@dataclass
class Activation:
    """Conditions under which a profile turns on."""

    active_by_default: bool = False
    property: Optional[ActivationProperty] = None
    jdk: Optional[str] = None


# Profiles compare and hash by identity
@dataclass(frozen=True, eq=False)
class Profile:
    id: str
    source: str = SOURCE_POM
    activation: Optional[Activation] = None
    location: Optional[InputLocation] = None

    @property
    def is_pom_sourced(self) -> bool:
        return self.source == SOURCE_POM

    @property
    def is_active_by_default(self) -> bool:
        return self.activation is not None and self.activation.active_by_default
