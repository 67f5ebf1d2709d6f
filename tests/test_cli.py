"""Tests for perch.cli argument parsing."""

import pytest

from perch.cli import main


def exit_code(argv: list[str]) -> int | str | None:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.mark.parametrize("argv", [["--help"], ["run", "--help"], ["routes", "--help"]])
def test_help(argv: list[str]) -> None:
    assert exit_code(argv) == 0


@pytest.mark.parametrize(
    "argv",
    [
        ["run"],
        ["routes"],
        ["run", "shop:app", "--port", "eighty"],
        ["serve", "shop:app"],
    ],
    ids=["run-without-app", "routes-without-app", "non-integer-port", "unknown-command"],
)
def test_usage_errors(argv: list[str]) -> None:
    assert exit_code(argv) == 2


def test_bare_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert exit_code([]) == 0
    out = capsys.readouterr().out
    assert "usage: perch" in out
    assert "routes" in out
