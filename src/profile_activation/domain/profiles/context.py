from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class ProfileActivationContext:
    """Caller-supplied inputs for one profile resolution."""

    active_profile_ids: frozenset[str] = field(default_factory=frozenset)
    inactive_profile_ids: frozenset[str] = field(default_factory=frozenset)
    system_properties: Mapping[str, str] = field(default_factory=dict)
    user_properties: Mapping[str, str] = field(default_factory=dict)
    project_directory: Optional[Path] = None

    @classmethod
    def from_args(
        cls,
        active_profile_ids: Optional[Iterable[str]] = None,
        inactive_profile_ids: Optional[Iterable[str]] = None,
        system_properties: Optional[Mapping[str, str]] = None,
        user_properties: Optional[Mapping[str, str]] = None,
        project_directory: Optional[str | Path] = None,
    ) -> "ProfileActivationContext":
        return cls(
            active_profile_ids=frozenset(active_profile_ids or ()),
            inactive_profile_ids=frozenset(inactive_profile_ids or ()),
            system_properties=dict(system_properties or {}),
            user_properties=dict(user_properties or {}),
            project_directory=Path(project_directory) if project_directory else None,
        )

    def get_property(self, name: str) -> Optional[str]:
        """Look up a property, user properties first."""
        value = self.user_properties.get(name)
        if value is None:
            value = self.system_properties.get(name)
        return value
