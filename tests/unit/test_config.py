"""
Configuration Unit Tests
Tests for sparse_merkle/config/runtime.py and log_setup.py
"""
import logging

import pytest

from sparse_merkle.config import (
    SMTConfig,
    get_default_config,
    set_default_config,
    setup_logging,
    setup_logging_from_config,
)
from sparse_merkle.crypto.hashing import DEFAULT_ZERO_LEAF, to_hex
from sparse_merkle.schemas.errors import ConfigurationException


class TestDefaults:

    def test_defaults(self):
        config = SMTConfig()

        assert config.depth == 32
        assert config.zero_leaf == DEFAULT_ZERO_LEAF
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_log_level_normalized(self):
        assert SMTConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ConfigurationException):
            SMTConfig(log_level="LOUD")


class TestFromDict:

    def test_partial_data(self):
        config = SMTConfig.from_dict({"depth": 8})

        assert config.depth == 8
        assert config.zero_leaf == DEFAULT_ZERO_LEAF

    def test_zero_leaf_forms(self):
        assert SMTConfig.from_dict({"zero_leaf": 7}).zero_leaf == 7
        assert SMTConfig.from_dict({"zero_leaf": "7"}).zero_leaf == 7
        assert SMTConfig.from_dict({"zero_leaf": "0x07"}).zero_leaf == 7

    @pytest.mark.parametrize("raw", ["seven", "0xzz", -3, "-3"])
    def test_bad_zero_leaf_rejected(self, raw):
        with pytest.raises(ConfigurationException) as exc_info:
            SMTConfig.from_dict({"zero_leaf": raw})

        assert exc_info.value.details["field_path"] == "zero_leaf"

    @pytest.mark.parametrize("raw", ["deep", True, [4]])
    def test_bad_depth_rejected(self, raw):
        with pytest.raises(ConfigurationException):
            SMTConfig.from_dict({"depth": raw})

    def test_to_dict_round_trip(self):
        config = SMTConfig(depth=12, zero_leaf=3, log_level="WARNING")

        assert SMTConfig.from_dict(config.to_dict()) == config


class TestFromEnv:

    def test_env_defaults(self, clean_smt_env):
        assert SMTConfig.from_env() == SMTConfig()

    def test_env_values(self, clean_smt_env):
        clean_smt_env.setenv("SMT_DEPTH", "20")
        clean_smt_env.setenv("SMT_ZERO_LEAF", to_hex(99))
        clean_smt_env.setenv("SMT_LOG_LEVEL", "debug")

        config = SMTConfig.from_env()

        assert config.depth == 20
        assert config.zero_leaf == 99
        assert config.log_level == "DEBUG"

    def test_with_env_overrides(self, clean_smt_env):
        base = SMTConfig(depth=4, zero_leaf=1)
        clean_smt_env.setenv("SMT_DEPTH", "6")

        overridden = base.with_env_overrides()

        assert overridden.depth == 6
        assert overridden.zero_leaf == 1
        assert base.depth == 4

    def test_no_overrides_returns_same_object(self, clean_smt_env):
        base = SMTConfig()

        assert base.with_env_overrides() is base

    def test_default_config_cached(self, clean_smt_env):
        set_default_config(None)
        try:
            clean_smt_env.setenv("SMT_DEPTH", "9")
            first = get_default_config()
            clean_smt_env.setenv("SMT_DEPTH", "10")

            assert get_default_config() is first
            assert first.depth == 9

            custom = SMTConfig(depth=3)
            set_default_config(custom)
            assert get_default_config() is custom
        finally:
            set_default_config(None)


class TestFromYaml:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "smt.yaml"
        path.write_text("depth: 16\nzero_leaf: '0x2a'\nlog_level: error\n")

        config = SMTConfig.from_yaml(path)

        assert config.depth == 16
        assert config.zero_leaf == 42
        assert config.log_level == "ERROR"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert SMTConfig.from_yaml(path) == SMTConfig()

    def test_non_mapping_yaml_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigurationException):
            SMTConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SMTConfig.from_yaml(tmp_path / "nope.yaml")


class TestLoggingSetup:

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_setup_logging_sets_level(self):
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "smt.log"
        setup_logging_from_config(SMTConfig(log_level="INFO", log_file=str(log_file)))

        logging.getLogger("sparse_merkle.test").info("hello tree")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello tree" in log_file.read_text()
        assert "[INFO] sparse_merkle.test" in log_file.read_text()
