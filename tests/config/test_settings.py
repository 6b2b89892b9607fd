"""Tests for RafallSettings — flags, env vars, and the JSON site config."""

from pathlib import Path

import pytest

from rafall.config.models import GeneratorConfig
from rafall.config.settings import RafallSettings
from rafall.domain.errors import ConfigError


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RafallSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.site == {}
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.generator == GeneratorConfig()
        assert settings.generator.source_dir == "src"
        assert settings.generator.extensions == [".html"]
        assert set(settings.generator.meta_files.values()) == {
            "archive.html",
            "layout.html",
            "post.html",
        }

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RafallSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_project_root_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert RafallSettings.from_cli().project_root == tmp_path


class TestJsonConfigSource:
    def test_default_config_path(self, sample_project: Path) -> None:
        settings = RafallSettings.from_cli(project_root=sample_project)
        assert settings.config_path == sample_project / "etc" / "rafall.conf"
        assert settings.site["siteName"] == "Rafall"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.json"
        custom.write_text('{"siteName": "Custom"}')
        settings = RafallSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.config_path == custom
        assert settings.site == {"siteName": "Custom"}

    def test_explicit_missing_config_is_an_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            RafallSettings.from_cli(config_path=str(tmp_path / "nope.conf"), project_root=tmp_path)

    def test_invalid_config_is_an_error(self, tmp_path: Path) -> None:
        (tmp_path / "etc").mkdir()
        (tmp_path / "etc" / "rafall.conf").write_text("invalid;json:")
        with pytest.raises(ConfigError):
            RafallSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_overrides_generator(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RAFALL_GENERATOR__SOURCE_DIR", "posts")
        settings = RafallSettings.from_cli(project_root=tmp_path)
        assert settings.generator.source_dir == "posts"
        assert settings.generator.extensions == [".html"]

    def test_env_overrides_config_file(
        self, sample_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RAFALL_SITE", '{"siteName": "From env"}')
        settings = RafallSettings.from_cli(project_root=sample_project)
        assert settings.site == {"siteName": "From env"}

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RAFALL_VERBOSE", "false")
        settings = RafallSettings.from_cli(project_root=tmp_path, verbose=True)
        assert settings.verbose is True
