from __future__ import annotations

import re
from dataclasses import dataclass

from profile_activation.application.errors import VersionRangeError

_TOKEN_SEPARATORS = re.compile(r"[.\-_]")

# Upper bound used when a range declares only its lower bound
UNBOUNDED_UPPER = "99999999"


@dataclass(frozen=True)
class RangeValue:
    value: str
    closed: bool


def is_range(requirement: str) -> bool:
    return requirement.startswith("[") or requirement.startswith("(")


def parse_range(requirement: str) -> list[RangeValue]:
    """
    Parse a version range such as "[1.8,11)", "[11,)" or "(,1.8]" into its bounds.

    Returns:
        Two RangeValues (lower, upper). An empty value means the bound is open.
    """
    ranges: list[RangeValue] = []
    for token in requirement.split(","):
        token = token.strip()
        if token.startswith("["):
            ranges.append(RangeValue(token.strip("[]()"), True))
        elif token.startswith("("):
            ranges.append(RangeValue(token.strip("[]()"), False))
        elif token.endswith("]"):
            ranges.append(RangeValue(token.strip("[]()"), True))
        elif token.endswith(")"):
            ranges.append(RangeValue(token.strip("[]()"), False))
        elif not token:
            ranges.append(RangeValue("", False))
    if len(ranges) < 2:
        ranges.append(RangeValue(UNBOUNDED_UPPER, False))
    return ranges


def _tokens(version: str) -> list[int]:
    try:
        return [int(token) for token in _TOKEN_SEPARATORS.split(version)]
    except ValueError as e:
        raise VersionRangeError(f"Non-numeric version token in '{version}'") from e


def compare_versions(left: str, right: str) -> int:
    """
    Compare two dotted versions numerically, padding the shorter one with zeros.

    Returns:
        -1, 0 or 1

    Raises:
        VersionRangeError: If either version holds a non-numeric token
    """
    left_tokens = _tokens(left)
    right_tokens = _tokens(right)
    width = max(len(left_tokens), len(right_tokens))
    left_tokens += [0] * (width - len(left_tokens))
    right_tokens += [0] * (width - len(right_tokens))

    for x, y in zip(left_tokens, right_tokens):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def is_in_range(version: str, ranges: list[RangeValue]) -> bool:
    lower, upper = ranges[0], ranges[1]
    if lower.value:
        relation = compare_versions(version, lower.value)
        if relation < 0 or (relation == 0 and not lower.closed):
            return False
    if upper.value:
        relation = compare_versions(version, upper.value)
        if relation > 0 or (relation == 0 and not upper.closed):
            return False
    return True


def matches_version(version: str, requirement: str) -> bool:
    """
    Test a version against a JDK version requirement.

    Supported forms:
    - "!1.8": version does not start with 1.8
    - "[1.8,11)": version lies in the range
    - "1.8": version starts with 1.8

    Raises:
        VersionRangeError: If a range comparison meets a non-numeric token
    """
    if requirement.startswith("!"):
        return not version.startswith(requirement[1:])
    if is_range(requirement):
        return is_in_range(version, parse_range(requirement))
    return version.startswith(requirement)
