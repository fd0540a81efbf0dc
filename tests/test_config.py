"""Tests for configuration from environment and YAML files."""

import logging
from pathlib import Path

import pytest
import yaml

from termtext.config import TermTextConfig, _interpolate_env, get_config, load_config
from termtext.exceptions import ConfigurationError


class TestTermTextConfig:
    def test_defaults(self):
        cfg = TermTextConfig()
        assert cfg.locale == ""
        assert cfg.home_dir == Path.home()
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "json"
        assert cfg.log_level_value == logging.INFO

    def test_normalizes_case(self):
        cfg = TermTextConfig(log_level="debug", log_format="TEXT")
        assert cfg.log_level == "DEBUG"
        assert cfg.log_format == "text"

    def test_home_dir_coerced_to_path(self):
        assert TermTextConfig(home_dir="/tmp/h").home_dir == Path("/tmp/h")

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            TermTextConfig(log_level="LOUD")

    def test_invalid_log_format(self):
        with pytest.raises(ConfigurationError):
            TermTextConfig(log_format="xml")

    def test_non_string_locale_rejected(self):
        with pytest.raises(ConfigurationError, match="Invalid locale"):
            TermTextConfig(locale=5)


class TestFromEnv:
    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOCALE", "*")
        monkeypatch.setenv("TERMTEXT_HOME", "/home/tester")
        monkeypatch.setenv("TERMTEXT_LOG_LEVEL", "warning")
        monkeypatch.setenv("TERMTEXT_LOG_FORMAT", "text")
        cfg = get_config()
        assert cfg.locale == "*"
        assert cfg.home_dir == Path("/home/tester")
        assert cfg.log_level == "WARNING"
        assert cfg.log_format == "text"

    def test_empty_locale_is_kept(self, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOCALE", "")
        assert TermTextConfig.from_env().locale == ""

    def test_invalid_level_from_env(self, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError):
            TermTextConfig.from_env()


class TestInterpolateEnv:
    def test_simple_var(self, monkeypatch):
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}/x") == "hello/x"

    def test_missing_var_empty(self):
        assert _interpolate_env("${SURELY_NOT_SET_12345}") == ""

    def test_no_vars(self):
        assert _interpolate_env("plain") == "plain"


class TestLoadConfig:
    def test_load_valid_yaml(self, tmp_path):
        config_file = tmp_path / "termtext.yaml"
        config_file.write_text('locale: "en-US"\nlog_level: debug\n')
        cfg = load_config(config_file)
        assert cfg.locale == "en-US"
        assert cfg.log_level == "DEBUG"

    def test_env_interpolation(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SOME_HOME", "/data/home")
        config_file = tmp_path / "termtext.yaml"
        config_file.write_text("home_dir: '${SOME_HOME}'\n")
        assert load_config(str(config_file)).home_dir == Path("/data/home")

    def test_file_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOCALE", "de-DE")
        monkeypatch.setenv("TERMTEXT_LOG_FORMAT", "text")
        config_file = tmp_path / "termtext.yaml"
        config_file.write_text("locale: fr-FR\n")
        cfg = load_config(config_file)
        assert cfg.locale == "fr-FR"
        assert cfg.log_format == "text"

    def test_null_locale_means_disabled(self, tmp_path):
        config_file = tmp_path / "termtext.yaml"
        config_file.write_text("locale:\n")
        assert load_config(config_file).locale == ""

    def test_missing_config_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/termtext.yaml")

    def test_empty_yaml_returns_env_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOCALE", "*")
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config(config_file).locale == "*"

    def test_non_mapping_rejected(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_unknown_keys_rejected(self, tmp_path):
        config_file = tmp_path / "extra.yaml"
        config_file.write_text("colour: blue\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)
        assert "colour" in str(exc_info.value)

    def test_invalid_value_rejected(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("log_level: LOUD\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_numeric_locale_rejected(self, tmp_path):
        config_file = tmp_path / "num.yaml"
        config_file.write_text("locale: 123\n")
        with pytest.raises(ConfigurationError, match="123"):
            load_config(config_file)

    def test_invalid_yaml_raises(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("locale: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config(config_file)
