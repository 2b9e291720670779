"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from sahasranama.config import DEFAULT_COLOPHON_PATTERN, AppConfig, load_config


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Lalita Sahasranama"
        assert config.app.language == "sa"

    def test_default_annotation_config(self) -> None:
        config = AppConfig()
        assert config.annotation.colophon_pattern == DEFAULT_COLOPHON_PATTERN
        assert list(config.annotation.sources) == ["Bhaskaraya", "V. Ravi", "Sanskrit Documents"]

    def test_default_known_sources(self) -> None:
        known = AppConfig().extraction.known_sources
        assert known["bhaskararaya"].author == "Bhāskararāya"
        assert known["bhaskararaya"].source == "Saubhāgya-bhāskara"
        assert known["vravi"].period == "Modern"
        assert known["sanskritdocuments"].source is None

    def test_default_paths(self) -> None:
        config = AppConfig()
        assert config.paths.verses_path == "./data/sanskrit.txt"
        assert config.paths.output_dir == "./data/processed"

    def test_default_logging(self) -> None:
        assert AppConfig().logging.level == "INFO"


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "annotation": {"sources": {"Only": "only"}},
            "extraction": {"placeholder_commentary": "TODO"},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data, allow_unicode=True), encoding="utf-8")

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.app.version == "0.1.0"
        assert config.annotation.sources == {"Only": "only"}
        assert config.extraction.placeholder_commentary == "TODO"
        # Other fields keep defaults
        assert config.paths.corpus_path == "./data/meanings.md"
        assert "vravi" in config.extraction.known_sources

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Lalita Sahasranama"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file).paths.output_dir == "./data/processed"

    def test_env_overrides_log_level(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: INFO\n")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = load_config(config_file)
        assert config.logging.level == "DEBUG"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.app.name == "Lalita Sahasranama"
        assert config.annotation.sources["V. Ravi"] == "vravi"
