"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest
from proofreader.errors import ConfigurationError
from proofreader.models.config import ProofreaderConfig, SelectorConfig


class TestProofreaderConfig:
    """Tests for ProofreaderConfig."""

    def test_default(self):
        """Test the bundled settings."""
        config = ProofreaderConfig.default()

        assert config.dictionaries.built_in == ["en_US"]
        assert config.selectors.whitelist[0].startswith("p, li")
        assert "code" in config.selectors.blacklist[0]
        assert config.style.passive is True
        assert config.style.eprime is False
        assert config.performance.max_suggestions == 5

    def test_original_settings_layout(self):
        """Test the write-good/build-in key names."""
        config = ProofreaderConfig.from_dict(
            {
                "selectors": {"whitelist": "article p", "blacklist": ["pre", "code"]},
                "dictionaries": {"build-in": ["en_US", "en_GB"], "custom": ["words.txt"]},
                "write-good": {"weasel": False, "thereIs": False},
            }
        )

        assert config.selectors.whitelist == ["article p"]
        assert config.selectors.blacklist == ["pre", "code"]
        assert config.dictionaries.built_in == ["en_US", "en_GB"]
        assert config.style.weasel is False
        assert config.style.there_is is False
        assert config.style.adverb is True

    def test_missing_object(self):
        """Test a non-mapping configuration."""
        with pytest.raises(ConfigurationError, match="Configuration object missing."):
            ProofreaderConfig.from_dict(None)

    def test_missing_whitelist(self):
        """Test selectors without a whitelist."""
        with pytest.raises(ConfigurationError, match="Whitelist has to be set."):
            ProofreaderConfig.from_dict({"selectors": {"whitelist": "  "}})

        with pytest.raises(ConfigurationError):
            ProofreaderConfig.from_dict({"dictionaries": {"build-in": ["en_US"]}})

    def test_unknown_keys_rejected(self):
        """Test extra keys are not silently ignored."""
        with pytest.raises(ConfigurationError):
            ProofreaderConfig.from_dict({"selectors": {"whitelist": "p"}, "selector": {}})

        with pytest.raises(ConfigurationError):
            ProofreaderConfig.from_dict({"selectors": {"whitelist": "p"}, "write-good": {"passiv": True}})

    def test_invalid_json(self):
        """Test malformed JSON."""
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ProofreaderConfig.from_json("{not json")

    def test_from_json_file(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"selectors": {"whitelist": "p"}, "log_level": "DEBUG"}))

        config = ProofreaderConfig.from_file(path)
        assert config.log_level == "DEBUG"

    def test_from_yaml_file_resolves_paths(self, tmp_path):
        """Test relative dictionary paths are resolved against the config file."""
        path = tmp_path / "proofreader.yaml"
        path.write_text(
            "selectors:\n"
            "  whitelist: p\n"
            "dictionaries:\n"
            "  build-in: [en_US]\n"
            "  custom: [words.txt, /abs/words.txt]\n"
            "  search_paths: [dicts]\n"
        )

        config = ProofreaderConfig.from_file(path)
        assert config.dictionaries.custom == [tmp_path / "words.txt", Path("/abs/words.txt")]
        assert config.dictionaries.search_paths == [tmp_path / "dicts"]

    def test_missing_file(self, tmp_path):
        """Test an unreadable config file."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            ProofreaderConfig.from_file(tmp_path / "nope.json")

    def test_invalid_yaml(self):
        """Test malformed YAML."""
        with pytest.raises(ConfigurationError):
            ProofreaderConfig.from_yaml("selectors: [unclosed")

    def test_to_yaml_uses_original_keys(self):
        """Test YAML output keeps the settings file key names."""
        config = ProofreaderConfig.default()
        text = config.to_yaml()

        assert "build-in:" in text
        assert "write-good:" in text
        assert ProofreaderConfig.from_yaml(text) == config

    def test_frozen(self):
        """Test configuration objects are immutable."""
        config = SelectorConfig(whitelist=["p"])
        with pytest.raises(Exception):
            config.whitelist = ["li"]
