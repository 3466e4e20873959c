"""
Runtime Configuration

Central configuration for tree construction and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from sparse_merkle.crypto.hashing import DEFAULT_ZERO_LEAF, from_hex, to_field_element
from sparse_merkle.schemas.errors import ConfigurationException, SMTException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "SMT_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_field_element(raw: Any, field_path: str) -> int:
    """
    Parse a field element from config input.

    Accepts an int, a decimal string, or a 0x-prefixed hex string.
    """
    try:
        if isinstance(raw, str):
            text = raw.strip()
            value = from_hex(text) if text.startswith("0x") else int(text, 10)
        else:
            value = raw
        return to_field_element(value)
    except (ValueError, SMTException) as e:
        raise ConfigurationException(
            f"Invalid field element for {field_path}: {raw!r}",
            field_path=field_path,
        ) from e


def parse_depth(raw: Any) -> int:
    """Parse a tree depth from config input (range is checked by the tree)."""
    if isinstance(raw, bool):
        raise ConfigurationException(
            f"Invalid depth: {raw!r}", field_path="depth"
        )
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationException(
            f"Invalid depth: {raw!r}", field_path="depth"
        ) from e


def normalize_log_level(level: str) -> str:
    """Upper-case a log level name and check it is one logging knows."""
    normalized = level.upper()
    if normalized not in _LOG_LEVELS:
        raise ConfigurationException(
            f"Unknown log level: {level}",
            field_path="log_level",
            details={"allowed": list(_LOG_LEVELS)},
        )
    return normalized


@dataclass
class SMTConfig:
    """
    Complete configuration for building a sparse Merkle tree.

    Can be loaded from:
    - Environment variables (and a .env file)
    - YAML file
    - Programmatic construction
    """
    depth: int = 32
    zero_leaf: int = DEFAULT_ZERO_LEAF
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.log_level = normalize_log_level(self.log_level)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SMT_DEPTH: Tree depth
        - SMT_ZERO_LEAF: Zero leaf digest (decimal or 0x hex)
        - SMT_LOG_LEVEL: Log level (default: INFO)
        - SMT_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}DEPTH"):
            overrides["depth"] = os.getenv(f"{ENV_PREFIX}DEPTH")
        if os.getenv(f"{ENV_PREFIX}ZERO_LEAF"):
            overrides["zero_leaf"] = os.getenv(f"{ENV_PREFIX}ZERO_LEAF")
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "SMTConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SMTConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Config file must contain a mapping: {path}"
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SMTConfig":
        """Load configuration from a dictionary (supports partial data)."""
        config = cls(
            log_level=data.get("log_level") or "INFO",
            log_file=data.get("log_file"),
            extra=data.get("extra", {}),
        )
        if data.get("depth") is not None:
            config.depth = parse_depth(data["depth"])
        if data.get("zero_leaf") is not None:
            config.zero_leaf = parse_field_element(data["zero_leaf"], "zero_leaf")
        return config

    def with_env_overrides(self) -> "SMTConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        if "depth" in overrides:
            new_config.depth = parse_depth(overrides["depth"])
        if "zero_leaf" in overrides:
            new_config.zero_leaf = parse_field_element(
                overrides["zero_leaf"], "zero_leaf"
            )
        if "log_level" in overrides:
            new_config.log_level = normalize_log_level(overrides["log_level"])
        if "log_file" in overrides:
            new_config.log_file = overrides["log_file"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "depth": self.depth,
            "zero_leaf": self.zero_leaf,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[SMTConfig] = None


def get_default_config() -> SMTConfig:
    """Get the default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = SMTConfig.from_env()
    return _default_config


def set_default_config(config: SMTConfig | None) -> None:
    """Set (or with None, reset) the default configuration."""
    global _default_config
    _default_config = config
