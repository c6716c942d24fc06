"""Tests for SortGraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from sortgraph.config.settings import SortGraphSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = SortGraphSettings.from_cli(start=tmp_path)
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.graph.max_vertices is None
        assert settings.output.width == 100

    def test_frozen(self, tmp_path: Path) -> None:
        settings = SortGraphSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sortgraph.toml").write_text("[graph]\nmax_vertices = 20\n")
        settings = SortGraphSettings.from_cli(start=tmp_path)
        assert settings.graph.max_vertices == 20
        assert settings.graph.max_edges is None
        assert settings.config_path == (tmp_path / "sortgraph.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 60\n")
        settings = SortGraphSettings.from_cli(config_path=str(custom))
        assert settings.output.width == 60
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "sortgraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            SortGraphSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "sortgraph.toml").write_text("[graph]\nmax_vertices = 20\n")
        monkeypatch.setenv("SORTGRAPH_GRAPH__MAX_VERTICES", "5")
        settings = SortGraphSettings.from_cli(start=tmp_path)
        assert settings.graph.max_vertices == 5

    def test_cli_flags_override_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SORTGRAPH_VERBOSE", "false")
        settings = SortGraphSettings.from_cli(start=tmp_path, verbose=True)
        assert settings.verbose is True
