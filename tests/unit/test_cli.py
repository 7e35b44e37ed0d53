"""CLI command tests against a temporary data directory."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.app_shell import cli
from src.components.icon_settings import DEFAULT_CSS_URL, DEFAULT_JS_URL


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, project_root: Path) -> None:
    monkeypatch.setenv("ICONLIB_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("ICONLIB_RULES_PATH", str(project_root / "rules.yaml"))
    monkeypatch.setenv("ICONLIB_LIBRARIES_PATH", str(project_root / "libraries.yaml"))
    monkeypatch.setenv("ICONLIB_MIGRATIONS_DIR", str(project_root / "migrations"))


def _json_output(capsys: pytest.CaptureFixture[str]) -> dict:
    out = capsys.readouterr().out
    return json.loads(out[out.index("{") :])


class TestCli:
    def test_migrate(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["migrate"])

        assert "Applied 1 migrations." in capsys.readouterr().out

    def test_show_defaults(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["show"])

        assert _json_output(capsys)["external_svg_location"] == DEFAULT_JS_URL

    def test_set_persists(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["set", "--method", "webfonts", "--use-cdn", "--svg-location", ""])
        capsys.readouterr()

        cli.main(["show"])

        shown = _json_output(capsys)
        assert shown["method"] == "webfonts"
        assert shown["external_svg_location"] == DEFAULT_CSS_URL

    def test_set_keeps_unspecified_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["set", "--no-use-cdn", "--svg-location", "/libraries/fa/all.js"])
        capsys.readouterr()

        cli.main(["set", "--use-shim"])

        shown = _json_output(capsys)
        assert shown["use_cdn"] is False
        assert shown["use_shim"] is True
        assert shown["external_svg_location"] == "/libraries/fa/all.js"

    def test_dry_run_does_not_save(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["set", "--method", "webfonts", "--dry-run"])
        assert "Dry run" in capsys.readouterr().out

        cli.main(["show"])

        assert _json_output(capsys)["method"] == "svg"

    def test_invalid_location_exits(self) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["set", "--svg-location", "not a url"])

        assert exc.value.code == 2

    def test_reset(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["set", "--method", "webfonts"])
        capsys.readouterr()

        cli.main(["reset"])

        assert _json_output(capsys)["method"] == "svg"

    def test_libraries(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["set", "--method", "svg", "--use-cdn", "--use-shim"])
        capsys.readouterr()

        cli.main(["libraries"])

        out = capsys.readouterr().out
        assert f"fontawesome.svg: {DEFAULT_JS_URL}" in out
        assert "fontawesome.svg.shim: https://" in out

    def test_missing_rules_exits(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ICONLIB_RULES_PATH", str(tmp_path / "missing.yaml"))

        with pytest.raises(SystemExit):
            cli.main(["show"])
