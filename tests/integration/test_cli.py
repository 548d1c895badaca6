from __future__ import annotations

import json
from pathlib import Path

import pytest

from profile_activation.app.cli import main, parse_profile_selection, parse_user_properties


@pytest.fixture
def profiles_file(tmp_path: Path) -> Path:
    path = tmp_path / "profiles.json"
    path.write_text(
        json.dumps(
            {
                "profiles": [
                    {"id": "local", "activation": {"activeByDefault": True}},
                    {"id": "ci", "activation": {"property": {"name": "env", "value": "${target}"}}},
                    {"id": "mirror", "source": "settings.xml", "activation": {"activeByDefault": True}},
                    {"id": "modern-jdk", "activation": {"jdk": "[17,)"}},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def _run(capsys, *argv: str) -> dict:
    assert main(list(argv)) == 0
    return json.loads(capsys.readouterr().out)


def test_parse_profile_selection():
    active, inactive = parse_profile_selection(["a,!b", "-c,+d", " ,e"])

    assert active == ["a", "d", "e"]
    assert inactive == ["b", "c"]


def test_parse_user_properties():
    assert parse_user_properties(["env=ci", "skipTests", "expr=a=b"]) == {
        "env": "ci",
        "skipTests": "true",
        "expr": "a=b",
    }


def test_resolve_defaults(capsys, profiles_file: Path, monkeypatch):
    monkeypatch.delenv("JAVA_VERSION", raising=False)

    output = _run(capsys, "resolve", "--profiles", str(profiles_file))

    assert output["active_profiles"] == ["mirror", "local"]
    # modern-jdk cannot be evaluated without a Java version
    assert [p["severity"] for p in output["problems"]] == ["ERROR"]


def test_resolve_condition_through_interpolation(capsys, profiles_file: Path, monkeypatch):
    monkeypatch.setenv("JAVA_VERSION", "21.0.2")

    output = _run(capsys, "resolve", "--profiles", str(profiles_file), "-D", "env=prod", "-D", "target=prod")

    assert output["active_profiles"] == ["ci", "mirror", "modern-jdk"]
    assert output["problems"] == []


def test_resolve_explicit_selection(capsys, profiles_file: Path, monkeypatch):
    monkeypatch.setenv("JAVA_VERSION", "11.0.20")

    output = _run(capsys, "resolve", "--profiles", str(profiles_file), "-P", "!mirror,modern-jdk")

    assert output["active_profiles"] == ["modern-jdk"]


def test_resolve_invalid_definitions_exit_code(capsys, tmp_path: Path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"profiles": [{"activation": {}}]}), encoding="utf-8")

    assert main(["resolve", "--profiles", str(path)]) == 1
    assert "failed validation" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "resolve" in capsys.readouterr().out


def test_resolve_non_utf8_definitions_exit_code(capsys, tmp_path: Path):
    path = tmp_path / "profiles.json"
    path.write_bytes(b'{"profiles": [{"id": "\xff\xfe"}]}')

    assert main(["resolve", "--profiles", str(path)]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_resolve_directory_definitions_exit_code(capsys, tmp_path: Path):
    assert main(["resolve", "--profiles", str(tmp_path)]) == 1
    assert "Cannot read" in capsys.readouterr().err
