"""Tests for ``perch routes`` — route table listing."""

import sys
import types

import pytest

from perch.app import App
from perch.cli import main
from perch.cli._routes import format_routes
from perch.routing.route import Route


def _index() -> str:
    return "index"


def _user(id: str) -> str:
    return id


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    app = App()
    app.handle("GET", "/users/:id", _user, name="user_detail")
    app.handle("GET", "/", _index)
    app.handle("POST", "/users/:id", _user)

    mod = types.ModuleType("_fake_perch_routes")
    mod.app = app  # type: ignore[attr-defined]
    mod.empty = App()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_perch_routes", mod)


class TestFormatRoutes:
    def test_header_and_rows(self) -> None:
        table = format_routes([Route(method="GET", pattern="/", handler=_index)])
        lines = table.splitlines()

        assert lines[0].split() == ["METHOD", "PATTERN", "HANDLER"]
        assert set(lines[1]) == {"-"}
        assert lines[2].split() == ["GET", "/", "_index"]

    def test_route_name_shown(self) -> None:
        route = Route(method="GET", pattern="/users/:id", handler=_user, name="user_detail")
        assert "_user (user_detail)" in format_routes([route])

    def test_columns_aligned(self) -> None:
        table = format_routes(
            [
                Route(method="GET", pattern="/", handler=_index),
                Route(method="DELETE", pattern="/a/long/pattern", handler=_index),
            ]
        )
        lines = table.splitlines()
        handler_columns = {line.index("_index") for line in lines[2:]}
        assert len(handler_columns) == 1


@pytest.mark.usefixtures("_fake_app_module")
class TestRoutesCommand:
    def test_lists_in_match_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_perch_routes:app"])
        rows = capsys.readouterr().out.splitlines()[2:]

        assert [row.split()[:2] for row in rows] == [
            ["GET", "/users/:id"],
            ["GET", "/"],
            ["POST", "/users/:id"],
        ]

    def test_empty_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_perch_routes:empty"])
        assert capsys.readouterr().out.strip() == "No routes registered."

    def test_bad_import_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_perch_routes:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
