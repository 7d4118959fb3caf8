# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for urlsieve.config: defaults, YAML, environment, validation."""

from __future__ import annotations

import pytest

from urlsieve.config import ClassifierConfig, load_config
from urlsieve.errors import ConfigError, UrlSieveError


class TestDefaults:
    def test_documented_defaults(self):
        config = ClassifierConfig()
        assert config.threshold == 0.8
        assert config.min_segment_length == 8
        assert config.hex_ratio == 0.8
        assert config.digit_ratio == 0.8
        assert config.digit_min_length == 10

    def test_is_frozen(self):
        config = ClassifierConfig()
        with pytest.raises(AttributeError):
            config.threshold = 0.5  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_ratio_out_of_range(self, threshold):
        with pytest.raises(ConfigError, match="threshold"):
            ClassifierConfig(threshold=threshold)

    def test_ratio_must_be_number(self):
        with pytest.raises(ConfigError):
            ClassifierConfig(hex_ratio="high")  # type: ignore[arg-type]

    def test_bool_is_not_a_number(self):
        with pytest.raises(ConfigError):
            ClassifierConfig(threshold=True)

    def test_negative_length(self):
        with pytest.raises(ConfigError, match="min_segment_length"):
            ClassifierConfig(min_segment_length=-1)

    def test_length_must_be_integer(self):
        with pytest.raises(ConfigError):
            ClassifierConfig(digit_min_length=10.5)  # type: ignore[arg-type]

    def test_integer_ratio_accepted(self):
        assert ClassifierConfig(threshold=1).threshold == 1

    def test_config_error_is_urlsieve_error(self):
        assert issubclass(ConfigError, UrlSieveError)


class TestReplace:
    def test_none_values_ignored(self):
        assert ClassifierConfig().replace(threshold=None) == ClassifierConfig()

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown config keys: bogus"):
            ClassifierConfig().replace(bogus=1)


class TestFromEnv:
    def test_reads_variables(self):
        env = {"URLSIEVE_THRESHOLD": "0.5", "URLSIEVE_MIN_SEGMENT_LENGTH": "6"}
        config = ClassifierConfig.from_env(env)
        assert config.threshold == 0.5
        assert config.min_segment_length == 6

    def test_blank_values_ignored(self):
        assert ClassifierConfig.from_env({"URLSIEVE_THRESHOLD": "  "}) == ClassifierConfig()

    def test_unparseable_value(self):
        with pytest.raises(ConfigError, match="URLSIEVE_DIGIT_MIN_LENGTH"):
            ClassifierConfig.from_env({"URLSIEVE_DIGIT_MIN_LENGTH": "ten"})

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("URLSIEVE_HEX_RATIO", "0.9")
        assert ClassifierConfig.from_env().hex_ratio == 0.9


class TestFromYaml:
    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "urlsieve.yaml"
        path.write_text("threshold: 0.5\ndigit_min_length: 12\n", encoding="utf-8")
        config = ClassifierConfig.from_yaml(path)
        assert config.threshold == 0.5
        assert config.digit_min_length == 12
        assert config.hex_ratio == 0.8

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ClassifierConfig.from_yaml(path) == ClassifierConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("treshold: 0.5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="treshold"):
            ClassifierConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 0.5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            ClassifierConfig.from_yaml(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("threshold: [0.5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            ClassifierConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read config file"):
            ClassifierConfig.from_yaml(tmp_path / "nope.yaml")


class TestLoadConfig:
    def test_precedence(self, tmp_path):
        path = tmp_path / "urlsieve.yaml"
        path.write_text("threshold: 0.5\nhex_ratio: 0.7\nmin_segment_length: 6\n", encoding="utf-8")
        env = {"URLSIEVE_THRESHOLD": "0.6", "URLSIEVE_HEX_RATIO": "0.75"}
        config = load_config(path, environ=env, threshold=0.9)
        assert config.threshold == 0.9  # override beats env and file
        assert config.hex_ratio == 0.75  # env beats file
        assert config.min_segment_length == 6  # file beats default

    def test_no_sources(self):
        assert load_config(environ={}) == ClassifierConfig()
