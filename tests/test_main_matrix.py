"""Tests for the command-line support matrix output."""

from __future__ import annotations

import sys

import pytest

from runtime_registry.main import main, main_format_support_matrix


def test_main_format_support_matrix_lists_keys_in_order() -> None:
    """Format one tab-separated line per key in declaration order.

    Returns:
        None: Assertions validate formatted lines.

    Raises:
        AssertionError: Raised when matrix lines are unexpected.
    """

    lines = main_format_support_matrix()

    assert lines[0] == "cpu\tmandatory=\toptional=jes"
    assert lines[3] == "docker\tmandatory=jes\toptional=local"
    assert lines[4] == "failOnStderr\tmandatory=\toptional=jes,local,sge"
    assert len(lines) == 8


def test_main_matrix_command_prints_matrix(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Print the support matrix for the `matrix` command without starting a server."""

    monkeypatch.setattr(sys, "argv", ["runtime-registry", "matrix"])

    main()

    output_lines = capsys.readouterr().out.splitlines()
    assert output_lines == main_format_support_matrix()
