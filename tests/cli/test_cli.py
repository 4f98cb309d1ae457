"""Tests for the condmatch command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from condmatch import cli


def extract_json_from_stdout(output: str) -> str:
    """Return the JSON document printed last, skipping any log lines before it."""
    start = output.find("[\n")
    if start == -1:
        start = output.find("[]")
    return output[start:] if start != -1 else output


@pytest.fixture
def conditions_file(tmp_path: Path) -> Path:
    path = tmp_path / "conditions.yaml"
    path.write_text(
        """
conditions:
  - {name: app_version, match: semver_ge, value: "2.0"}
  - {name: age, match: le, value: 42}
  - {name: email, match: exists}
"""
    )
    return path


@pytest.fixture
def attributes_file(tmp_path: Path) -> Path:
    path = tmp_path / "user.yaml"
    path.write_text("app_version: '2.0.0'\nage: 41\n")
    return path


def test_eval_json(conditions_file: Path, attributes_file: Path, capsys) -> None:
    cli.main(
        [
            "--quiet",
            "eval",
            str(conditions_file),
            "--attributes",
            str(attributes_file),
            "--json",
        ]
    )
    data = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert [(r["name"], r["matched"], r["error"]) for r in data] == [
        ("app_version", True, None),
        ("age", False, None),
        ("email", False, None),
    ]


def test_eval_reports_unknown(conditions_file: Path, capsys) -> None:
    cli.main(["--quiet", "eval", str(conditions_file), "--json"])
    data = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert data[0]["matched"] is False
    assert data[0]["error"] == 'no attribute named "app_version"'
    assert data[0]["reason"] == "Attribute not found."
    assert data[2]["error"] is None


def test_eval_attr_overrides(
    conditions_file: Path, attributes_file: Path, capsys
) -> None:
    cli.main(
        [
            "--quiet",
            "eval",
            str(conditions_file),
            "-a",
            str(attributes_file),
            "--attr",
            "app_version=1.9",
            "--attr",
            "email=a@b.c",
            "--json",
        ]
    )
    data = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    # 1.9 parses as a float, which a semver condition cannot compare
    assert data[0]["reason"] == "Attribute value type is invalid."
    assert data[2]["matched"] is True


def test_eval_table(conditions_file: Path, attributes_file: Path, capsys) -> None:
    cli.main(["eval", str(conditions_file), "--attributes", str(attributes_file)])
    out = capsys.readouterr().out
    assert "Attribute" in out and "Result" in out
    assert "app_version" in out
    assert "true" in out


def test_eval_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["eval", str(tmp_path / "nope.yaml")])
    assert exc_info.value.code == 1
    assert "File not found" in capsys.readouterr().out


def test_eval_malformed_conditions(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- {match: gt, value: 1}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["eval", str(path)])
    assert exc_info.value.code == 1
    assert "Invalid condition at index 0" in capsys.readouterr().out


def test_bad_attr_override_rejected(conditions_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["eval", str(conditions_file), "--attr", "novalue"])
    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    "target,version,expected",
    [("2.0", "2.0.0", "0"), ("2.0", "1.9", "-1"), ("1.0.0-beta", "1.0.0-rc", "1")],
)
def test_compare(target: str, version: str, expected: str, capsys) -> None:
    cli.main(["compare", target, version])
    assert capsys.readouterr().out.strip().splitlines()[-1] == expected


def test_compare_invalid_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["compare", "2.0", "2.0.0.1"])
    assert exc_info.value.code == 1
    assert "invalid semantic version" in capsys.readouterr().out


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: condmatch" in capsys.readouterr().out


def test_verbose_and_quiet_switch_levels(caplog, conditions_file: Path) -> None:
    with caplog.at_level(logging.DEBUG, logger="condmatch"):
        cli.main(["--verbose", "eval", str(conditions_file)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="condmatch"):
        cli.main(["--quiet", "eval", str(conditions_file)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


@pytest.mark.parametrize(
    "flags,level",
    [
        (["--verbose"], logging.DEBUG),
        (["--quiet"], logging.WARNING),
        ([], logging.INFO),
    ],
)
def test_logging_flags_set_package_level(flags, level, capsys) -> None:
    cli.main([*flags, "compare", "2.0", "2.0.1"])
    assert logging.getLogger("condmatch").level == level
    assert capsys.readouterr().out.strip().splitlines()[-1] == "0"
