"""Unit tests for cli.config module."""

import pytest

from src.cli.config import PublishConfigLoader
from src.cli.errors import ConfigError, ConfigNotFoundError
from src.cli.models import PublishConfig


class TestPublishConfigLoaderLoad:
    """Test cases for PublishConfigLoader.load."""

    def test_loads_all_fields(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "manifest: build/pages.yaml\n"
            "space_key: DOCS\n"
            "ancestor_id: 123456\n"
            "strategy: REPLACE_ANCESTOR\n"
            "page_title_prefix: 'Doc - '\n",
            encoding="utf-8",
        )

        config = PublishConfigLoader.load(str(path))

        assert config.manifest == "build/pages.yaml"
        assert config.space_key == "DOCS"
        assert config.ancestor_id == "123456"
        assert config.strategy == "REPLACE_ANCESTOR"
        assert config.page_title_prefix == "Doc - "
        assert config.source_encoding == "utf-8"

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            PublishConfigLoader.load(str(tmp_path / "missing.yaml"))

    def test_missing_default_file_is_empty_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert PublishConfigLoader.load() == PublishConfig()

    def test_default_file_is_read_when_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / PublishConfigLoader.DEFAULT_CONFIG_PATH).write_text("space_key: OPS\n", encoding="utf-8")

        assert PublishConfigLoader.load().space_key == "OPS"

    def test_empty_file_is_empty_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert PublishConfigLoader.load(str(path)) == PublishConfig()

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("space_key: [DOCS", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            PublishConfigLoader.load(str(path))

    def test_non_dictionary_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="dictionary"):
            PublishConfigLoader.load(str(path))

    def test_unknown_field_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("spaceKey: DOCS\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="spaceKey"):
            PublishConfigLoader.load(str(path))

    def test_nested_value_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("space_key:\n  name: DOCS\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            PublishConfigLoader.load(str(path))

        assert exc_info.value.config_field == "space_key"


class TestPublishConfigLoaderMerge:
    """Test cases for PublishConfigLoader.merge."""

    def test_cli_values_override_file_values(self):
        config = PublishConfig(space_key="DOCS", ancestor_id="1")

        merged = PublishConfigLoader.merge(config, {"space_key": "OPS", "ancestor_id": None})

        assert merged.space_key == "OPS"
        assert merged.ancestor_id == "1"
        assert config.space_key == "DOCS"

    def test_unknown_override_raises(self):
        with pytest.raises(ConfigError):
            PublishConfigLoader.merge(PublishConfig(), {"dry_run": True})
