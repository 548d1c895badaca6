"""Loads profile definitions from JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from profile_activation.application.errors import ProfileDefinitionError
from profile_activation.domain.profiles.models import (
    SOURCE_POM,
    Activation,
    ActivationProperty,
    InputLocation,
    Profile,
)

logger = logging.getLogger(__name__)

PROFILES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["profiles"],
    "properties": {
        "profiles": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id"],
                "additionalProperties": False,
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "source": {"type": "string", "minLength": 1},
                    "activation": {
                        "type": "object",
                        "additionalProperties": False,
                        "properties": {
                            "activeByDefault": {"type": "boolean"},
                            "property": {
                                "type": "object",
                                "additionalProperties": False,
                                "properties": {
                                    "name": {"type": "string"},
                                    "value": {"type": "string"},
                                },
                            },
                            "jdk": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
}


class JsonProfileLoader:
    """Reads and validates a {"profiles": [...]} document into Profile objects."""

    def __init__(self, default_source: str = SOURCE_POM) -> None:
        self.default_source = default_source

    def _validate_json(self, data: Any, path: str) -> None:
        validator = jsonschema.Draft202012Validator(PROFILES_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        if errors:
            details = [f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}" for e in errors]
            raise ProfileDefinitionError(
                f"Profile definitions in {path} failed validation: {details[0]}",
                path=path,
                details=details,
            )

    def load(self, path: str | Path) -> list[Profile]:
        """Load profiles from a JSON file."""
        profile_path = Path(path)
        if not profile_path.exists():
            raise ProfileDefinitionError(f"Profile definitions not found: {profile_path}", path=str(profile_path))

        try:
            with open(profile_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProfileDefinitionError(
                f"Invalid JSON in profile definitions {profile_path}: {e}", path=str(profile_path)
            ) from e
        except UnicodeDecodeError as e:
            raise ProfileDefinitionError(
                f"Profile definitions {profile_path} are not valid UTF-8: {e}", path=str(profile_path)
            ) from e
        except OSError as e:
            raise ProfileDefinitionError(
                f"Cannot read profile definitions {profile_path}: {e}", path=str(profile_path)
            ) from e

        return self.parse(data, source_name=str(profile_path))

    def parse(self, data: Any, source_name: str = "<inline>") -> list[Profile]:
        """Build profiles from an already decoded document."""
        self._validate_json(data, source_name)

        profiles = [
            self._build_profile(entry, InputLocation(source=source_name, index=index))
            for index, entry in enumerate(data["profiles"])
        ]
        logger.debug("Loaded %d profile(s) from %s", len(profiles), source_name)
        return profiles

    def _build_profile(self, entry: dict[str, Any], location: InputLocation) -> Profile:
        activation = None
        raw_activation = entry.get("activation")
        if raw_activation is not None:
            raw_property = raw_activation.get("property")
            activation = Activation(
                active_by_default=raw_activation.get("activeByDefault", False),
                property=ActivationProperty(
                    name=raw_property.get("name"),
                    value=raw_property.get("value"),
                )
                if raw_property is not None
                else None,
                jdk=raw_activation.get("jdk"),
            )

        return Profile(
            id=entry["id"],
            source=entry.get("source", self.default_source),
            activation=activation,
            location=location,
        )
