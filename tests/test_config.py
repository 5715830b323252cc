"""Tests for the configuration system."""

import json

import pytest
import yaml

from pricebasket.config import Config
from pricebasket.core.errors import ConfigError


class TestConfig:
    """Test Config defaults and dotted access."""

    def test_defaults(self):
        """Test default configuration values."""
        config = Config()

        assert config.get("data.dir") == "."
        assert config.get("data.catalog_file") == "catalog.list"
        assert config.get("data.offers_file") == "offers.list"
        assert config.get("data.create_missing") is True
        assert config.get("offers.disabled_parsers") == []
        assert config.get("report.currency_symbol") == "£"
        assert config.get("logging.level") == "WARNING"
        assert config.get("logging.format") == "text"

    def test_get_missing_key(self):
        """Test the default for unknown keys."""
        config = Config()
        assert config.get("nope") is None
        assert config.get("report.nope", "x") == "x"
        assert config.get("report.format.deeper", 1) == 1

    def test_set_nested_key(self):
        """Test setting values by dotted key."""
        config = Config()
        config.set("report.format", "json")
        config.set("extra.section.value", 3)

        assert config.get("report.format") == "json"
        assert config.get("extra.section.value") == 3

    def test_merge_keeps_unspecified_defaults(self):
        """Test that partial overrides keep sibling defaults."""
        config = Config({"report": {"currency_symbol": "$"}})

        assert config.get("report.currency_symbol") == "$"
        assert config.get("report.minor_unit_suffix") == "p"

    def test_instances_do_not_share_state(self):
        """Test that changing one config leaves defaults untouched."""
        first = Config()
        first.get("offers.disabled_parsers").append("bundle")

        assert Config().get("offers.disabled_parsers") == []

    def test_to_dict_is_a_copy(self):
        """Test that to_dict cannot modify the configuration."""
        config = Config()
        config.to_dict()["report"]["format"] = "json"
        assert config.get("report.format") == "text"


class TestConfigFiles:
    """Test loading configuration files."""

    def test_from_yaml_file(self, tmp_path):
        """Test a YAML config file."""
        path = tmp_path / "pricebasket.yml"
        path.write_text(yaml.dump({"offers": {"disabled_parsers": ["bundle"]}}), encoding="utf-8")

        config = Config.from_file(path)

        assert config.get("offers.disabled_parsers") == ["bundle"]
        assert config.source == path

    def test_from_json_file(self, tmp_path):
        """Test a JSON config file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"report": {"format": "json"}}), encoding="utf-8")

        assert Config.from_file(path).get("report.format") == "json"

    def test_empty_yaml_file(self, tmp_path):
        """Test that an empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert Config.from_file(path).get("report.format") == "text"

    @pytest.mark.parametrize("name,content", [
        ("bad.yml", "report: [unclosed"),
        ("list.yml", "- a\n- b\n"),
        ("bad.json", "{not json"),
        ("config.toml", "[report]"),
    ])
    def test_invalid_files(self, tmp_path, name, content):
        """Test unreadable or unsupported config files."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError):
            Config.from_file(path)

    def test_missing_file(self, tmp_path):
        """Test an explicit path that does not exist."""
        with pytest.raises(ConfigError):
            Config.from_file(tmp_path / "missing.yml")

    def test_find_and_load_searches_parents(self, tmp_path):
        """Test discovery of a config file in a parent directory."""
        (tmp_path / ".pricebasket.yml").write_text("report:\n  format: json\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        config = Config.find_and_load(nested)

        assert config.get("report.format") == "json"
        assert config.source == (tmp_path / ".pricebasket.yml").resolve()


class TestEnvironmentOverrides:
    """Test PRICEBASKET_* environment variables."""

    def test_overrides_applied(self):
        """Test every supported variable."""
        config = Config().apply_env_overrides({
            "PRICEBASKET_DATA_DIR": "/srv/shop",
            "PRICEBASKET_CURRENCY_SYMBOL": "$",
            "PRICEBASKET_LOG_LEVEL": "DEBUG",
            "PRICEBASKET_LOG_FORMAT": "json",
            "UNRELATED": "x",
        })

        assert config.get("data.dir") == "/srv/shop"
        assert config.get("report.currency_symbol") == "$"
        assert config.get("logging.level") == "DEBUG"
        assert config.get("logging.format") == "json"

    def test_reads_process_environment(self, monkeypatch):
        """Test that os.environ is used by default."""
        monkeypatch.setenv("PRICEBASKET_CURRENCY_SYMBOL", "€")
        assert Config().apply_env_overrides().get("report.currency_symbol") == "€"

    def test_empty_values_ignored(self):
        """Test that empty variables do not override."""
        config = Config().apply_env_overrides({"PRICEBASKET_DATA_DIR": ""})
        assert config.get("data.dir") == "."
