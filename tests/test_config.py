"""Tests for formatter settings and settings files."""

import json

import pytest

from localized_format import FormatterConfig, load_config


class TestFormatterConfig:
    def test_defaults(self):
        config = FormatterConfig()

        assert config.default_locale == "en"
        assert config.max_depth == 16
        assert config.cache_max_size == 2048

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_locale": ""},
            {"max_depth": 0},
            {"max_depth": -1},
            {"max_depth": True},
            {"cache_max_size": 0},
            {"cache_max_size": "10"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            FormatterConfig(**kwargs)

    def test_from_dict_ignores_unknown_keys(self, caplog):
        config = FormatterConfig.from_dict({"default_locale": "de", "colour": "blue"})

        assert config.default_locale == "de"
        assert "colour" in caplog.text

    def test_from_dict_section(self):
        config = FormatterConfig.from_dict({"localized_format": {"max_depth": 4}})
        assert config.max_depth == 4


class TestLoadConfig:
    def test_json(self, tmp_path):
        path = tmp_path / "formatter.json"
        path.write_text(json.dumps({"default_locale": "fr", "max_depth": 8}), encoding="utf-8")

        config = load_config(path)

        assert config.default_locale == "fr"
        assert config.max_depth == 8

    def test_yaml(self, tmp_path):
        pytest.importorskip("yaml")
        path = tmp_path / "formatter.yaml"
        path.write_text("localized_format:\n  default_locale: ru\n  cache_max_size: 64\n", encoding="utf-8")

        config = load_config(path)

        assert config.default_locale == "ru"
        assert config.cache_max_size == 64

    def test_empty_yaml_uses_defaults(self, tmp_path):
        pytest.importorskip("yaml")
        path = tmp_path / "formatter.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == FormatterConfig()

    def test_toml(self, tmp_path):
        pytest.importorskip("tomli")
        path = tmp_path / "formatter.toml"
        path.write_text('[localized_format]\ndefault_locale = "ja"\nmax_depth = 2\n', encoding="utf-8")

        config = load_config(path)

        assert config.default_locale == "ja"
        assert config.max_depth == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "formatter.ini"
        path.write_text("[x]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(path)

    def test_non_mapping_content(self, tmp_path):
        path = tmp_path / "formatter.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(path)
