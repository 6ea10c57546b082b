"""
Tests for transform configuration loading.
"""

import pytest
from xmltransforms.config import (
    DEFAULT_CONFIG,
    JoinPolicy,
    TransformConfig,
    config_from_dict,
    config_from_yaml,
    config_to_yaml,
    load_config,
)
from xmltransforms.exceptions import ConfigError


def test_defaults():
    assert DEFAULT_CONFIG.indent == 2
    assert DEFAULT_CONFIG.unmatched_orders is JoinPolicy.DROP
    assert DEFAULT_CONFIG.csv_field_count == 10


def test_policy_from_string():
    config = TransformConfig(unmatched_orders="error")
    assert config.unmatched_orders is JoinPolicy.ERROR


def test_from_yaml():
    config = config_from_yaml("indent: 0\nunmatched_orders: error\n")
    assert config.indent == 0
    assert config.unmatched_orders is JoinPolicy.ERROR


def test_empty_yaml_gives_defaults():
    assert config_from_yaml("") == DEFAULT_CONFIG


def test_yaml_roundtrip():
    config = TransformConfig(indent=4, unmatched_orders=JoinPolicy.ERROR)
    assert config_from_yaml(config_to_yaml(config)) == config


def test_unknown_key():
    with pytest.raises(ConfigError, match="colour"):
        config_from_dict({"colour": "blue"})


def test_not_a_mapping():
    with pytest.raises(ConfigError):
        config_from_yaml("- indent\n- 2\n")


def test_invalid_yaml():
    with pytest.raises(ConfigError):
        config_from_yaml("indent: [unclosed")


@pytest.mark.parametrize("indent", [-1, "2", True])
def test_bad_indent(indent):
    with pytest.raises(ConfigError):
        TransformConfig(indent=indent)


def test_bad_policy():
    with pytest.raises(ConfigError, match="drop, error"):
        TransformConfig(unmatched_orders="ignore")


def test_field_count_is_fixed():
    with pytest.raises(ConfigError):
        config_from_dict({"csv_field_count": 11})


def test_load_config(tmp_path):
    path = tmp_path / "transforms.yaml"
    path.write_text("unmatched_orders: error\n", encoding="utf-8")
    assert load_config(path).unmatched_orders is JoinPolicy.ERROR


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="missing.yaml"):
        load_config(tmp_path / "missing.yaml")
