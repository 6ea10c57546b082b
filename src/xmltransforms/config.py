"""
Transform configuration.

A small, explicit settings object shared by every transform, loadable from
YAML. Defaults keep unmatched orders out of the total and pretty print
with two spaces.

Example YAML:
    indent: 2
    unmatched_orders: drop   # or: error
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from xmltransforms.exceptions import ConfigError
from xmltransforms.model import RECORD_WIDTH


class JoinPolicy(Enum):
    """What to do with orders naming a product that does not exist."""

    DROP = "drop"     # inner join: the order contributes nothing
    ERROR = "error"   # StructureError listing the unmatched products


@dataclass(frozen=True)
class TransformConfig:
    """
    Settings for the transforms.

    Properties:
        indent:
            Spaces per level in XML output; 0 writes the flat form

        unmatched_orders:
            JoinPolicy applied by get_orders_value

        csv_field_count:
            Width of a customer CSV record. Fixed at RECORD_WIDTH; present
            so a config file can state it and fail loudly if it disagrees.
    """

    indent: int = 2
    unmatched_orders: JoinPolicy = JoinPolicy.DROP
    csv_field_count: int = RECORD_WIDTH

    def __post_init__(self):
        if not isinstance(self.indent, int) or isinstance(self.indent, bool) or self.indent < 0:
            raise ConfigError(f"indent must be a non-negative integer, got {self.indent!r}")
        if not isinstance(self.unmatched_orders, JoinPolicy):
            try:
                object.__setattr__(self, "unmatched_orders", JoinPolicy(self.unmatched_orders))
            except ValueError:
                allowed = ", ".join(p.value for p in JoinPolicy)
                raise ConfigError(
                    f"unmatched_orders must be one of: {allowed}; got {self.unmatched_orders!r}"
                )
        if self.csv_field_count != RECORD_WIDTH:
            raise ConfigError(
                f"csv_field_count is fixed at {RECORD_WIDTH}, got {self.csv_field_count!r}"
            )


DEFAULT_CONFIG = TransformConfig()


def config_to_dict(config: TransformConfig) -> Dict[str, Any]:
    return {
        "indent": config.indent,
        "unmatched_orders": config.unmatched_orders.value,
        "csv_field_count": config.csv_field_count,
    }


def config_from_dict(d: Dict[str, Any] | None) -> TransformConfig:
    """
    Build a TransformConfig from a plain mapping.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    if d is None:
        return DEFAULT_CONFIG
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(TransformConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {unknown}")
    return TransformConfig(**d)


def config_from_yaml(s: str) -> TransformConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML configuration: {e}") from e
    return config_from_dict(d)


def config_to_yaml(config: TransformConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def load_config(filepath: Union[str, Path]) -> TransformConfig:
    """
    Load a TransformConfig from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the content is invalid
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")
    return config_from_yaml(content)


__all__ = [
    "JoinPolicy",
    "TransformConfig",
    "DEFAULT_CONFIG",
    "config_from_dict",
    "config_from_yaml",
    "config_to_dict",
    "config_to_yaml",
    "load_config",
]
