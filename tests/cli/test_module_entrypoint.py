"""Tests for running condmatch as a module (`python -m condmatch`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["condmatch", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("condmatch", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_compare_subcommand(capsys) -> None:
    """The module entrypoint dispatches to the compare command."""
    with patch("sys.argv", ["condmatch", "compare", "2.0", "2.0.3"]):
        runpy.run_module("condmatch", run_name="__main__")
    assert capsys.readouterr().out.strip().splitlines()[-1] == "0"
