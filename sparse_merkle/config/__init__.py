"""
Runtime Configuration Module

Provides configuration loading and logging setup for the sparse Merkle tree.
"""

from .runtime import SMTConfig, get_default_config, set_default_config
from .log_setup import setup_logging, setup_logging_from_config

__all__ = [
    "SMTConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
    "setup_logging_from_config",
]
