from __future__ import annotations

import argparse
import json
import os
import platform
import sys
from pathlib import Path
from typing import Optional, Sequence

from profile_activation.adapters.problems.list_problem_collector import ListProblemCollector
from profile_activation.adapters.profiles.json_profile_loader import JsonProfileLoader
from profile_activation.app.factory import create_selector
from profile_activation.application.errors import ProfileDefinitionError
from profile_activation.domain.profiles.context import ProfileActivationContext
from profile_activation.observability.logging import configure_logging
from profile_activation.settings import Settings, get_settings


def parse_profile_selection(values: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split "-P a,!b,-c,+d" style selections into (active, inactive) ids."""
    active: list[str] = []
    inactive: list[str] = []
    for value in values:
        for token in value.split(","):
            token = token.strip()
            if not token:
                continue
            if token[0] in ("!", "-"):
                inactive.append(token[1:])
            elif token[0] == "+":
                active.append(token[1:])
            else:
                active.append(token)
    return active, inactive


def parse_user_properties(values: Sequence[str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for value in values:
        name, sep, prop_value = value.partition("=")
        properties[name.strip()] = prop_value if sep else "true"
    return properties


def build_system_properties(settings: Settings) -> dict[str, str]:
    properties = {
        "os.name": platform.system().lower(),
        "os.arch": platform.machine().lower(),
        "os.version": platform.release(),
        "user.dir": os.getcwd(),
    }
    java_version = os.getenv("JAVA_VERSION")
    if java_version:
        properties["java.version"] = java_version
    if settings.expose_environment:
        for name, value in os.environ.items():
            properties[f"env.{name}"] = value
    return properties


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build profile activation CLI")
    parser.add_argument("--log-level", dest="log_level")
    subparsers = parser.add_subparsers(dest="command")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve the active profiles")
    resolve_parser.add_argument("--profiles", dest="profiles_file", default=settings.profiles_file)
    resolve_parser.add_argument("-P", "--activate-profiles", action="append", default=[], dest="profile_selection")
    resolve_parser.add_argument("-D", "--define", action="append", default=[], dest="user_properties")
    resolve_parser.add_argument("--project-dir", dest="project_dir")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.command != "resolve":
        parser.print_help()
        return 0
    if not args.profiles_file:
        parser.error("--profiles is required when PROFILES_FILE is not set")

    try:
        profiles = JsonProfileLoader().load(args.profiles_file)
    except ProfileDefinitionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        for detail in e.details[1:]:
            print(f"  {detail}", file=sys.stderr)
        return 1

    active_ids, inactive_ids = parse_profile_selection(args.profile_selection)
    project_dir = Path(args.project_dir) if args.project_dir else Path(args.profiles_file).resolve().parent
    context = ProfileActivationContext.from_args(
        active_profile_ids=active_ids,
        inactive_profile_ids=inactive_ids,
        system_properties=build_system_properties(settings),
        user_properties=parse_user_properties(args.user_properties),
        project_directory=project_dir,
    )

    problems = ListProblemCollector()
    active_profiles = create_selector().get_active_profiles(profiles, context, problems)

    print(
        json.dumps(
            {
                "active_profiles": [p.id for p in active_profiles],
                "problems": [p.to_dict() for p in problems.problems],
            }
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
