"""
tests/unit/test_config.py - Tests for configuration loading and logging setup.
"""

import json
import logging

import pytest

from hullscope.bootstrap import (
    HullScopeConfig,
    LoggingConfig,
    setup_logging,
)
from hullscope.bootstrap import config as config_module
from hullscope.bootstrap.logging_setup import JSONFormatter
from hullscope.surrogate import GridConfig, SweepConfig, TrainingConfig


class TestSurrogateConfigFromEnv:
    """Test environment-driven surrogate settings."""

    def test_training_defaults(self):
        config = TrainingConfig()
        assert config.epochs == 50
        assert config.batch_size == 64
        assert config.learning_rate == 1e-3
        assert config.validation_split == 0.1
        assert config.hidden_layers == (64, 32, 16)

    def test_training_from_env(self, monkeypatch):
        monkeypatch.setenv("HULLSCOPE_TRAIN_EPOCHS", "12")
        monkeypatch.setenv("HULLSCOPE_TRAIN_BATCH_SIZE", "128")
        monkeypatch.setenv("HULLSCOPE_TRAIN_LEARNING_RATE", "0.005")
        monkeypatch.setenv("HULLSCOPE_TRAIN_SEED", "3")
        config = TrainingConfig.from_env()
        assert config.epochs == 12
        assert config.batch_size == 128
        assert config.learning_rate == 0.005
        assert config.seed == 3

    def test_sweep_from_env(self, monkeypatch):
        monkeypatch.setenv("HULLSCOPE_SWEEP_DEADRISE", "18")
        assert SweepConfig.from_env().deadrise == 18.0

    def test_grid_from_env(self, monkeypatch):
        assert GridConfig.from_env().resolution == 40
        monkeypatch.setenv("HULLSCOPE_GRID_RESOLUTION", "25")
        assert GridConfig.from_env().resolution == 25


class TestHullScopeConfig:
    """Test root configuration."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HULLSCOPE_ENVIRONMENT", "production")
        monkeypatch.setenv("HULLSCOPE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HULLSCOPE_JSON_LOGS", "true")
        config = HullScopeConfig.from_env()
        assert config.environment == "production"
        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is True

    def test_from_file_overrides(self, tmp_path):
        path = tmp_path / "hullscope.json"
        path.write_text(json.dumps({
            "environment": "test",
            "training": {"epochs": 7, "hidden_layers": [32, 16], "sweep": {"deadrise": 10}},
            "grid": {"resolution": 20},
            "logging": {"level": "WARNING"},
        }))

        config = HullScopeConfig.from_file(str(path))

        assert config.environment == "test"
        assert config.training.epochs == 7
        assert config.training.hidden_layers == (32, 16)
        assert config.training.sweep.deadrise == 10
        assert config.grid.resolution == 20
        assert config.logging.level == "WARNING"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = HullScopeConfig.from_file(str(tmp_path / "absent.json"))
        assert config.training.epochs == TrainingConfig.from_env().epochs

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "hullscope.json"
        path.write_text(json.dumps({"grid": {"resolution": 30, "colour_map": "viridis"}}))
        config = HullScopeConfig.from_file(str(path))
        assert config.grid.resolution == 30

    def test_unknown_top_level_keys_warned(self, tmp_path, caplog):
        path = tmp_path / "hullscope.json"
        path.write_text(json.dumps({"environment": "test", "settings": {"units": "metric"}}))

        with caplog.at_level(logging.WARNING, logger="bootstrap.config"):
            config = HullScopeConfig.from_file(str(path))

        assert config.environment == "test"
        assert not hasattr(config, "settings")
        assert "settings" not in config.to_dict()
        assert "Ignoring unknown config keys: ['settings']" in caplog.text

    def test_to_dict(self):
        data = HullScopeConfig().to_dict()
        assert data["training"]["epochs"] == 50
        assert data["training"]["generation_chunk"] == 4096
        assert data["training"]["sweep"]["sample_count"] == 43_560
        assert data["grid"]["resolution"] == 40

    def test_load_and_get_config(self, tmp_path, monkeypatch):
        path = tmp_path / "hullscope.json"
        path.write_text(json.dumps({"environment": "staging"}))
        monkeypatch.setattr(config_module, "_config", None)

        loaded = config_module.load_config(str(path))
        assert loaded.environment == "staging"
        assert config_module.get_config() is loaded


class TestLoggingSetup:
    """Test logging configuration."""

    def setup_method(self):
        self.root = logging.getLogger()
        self.handlers = list(self.root.handlers)
        self.level = self.root.level

    def teardown_method(self):
        for handler in self.root.handlers:
            if handler not in self.handlers:
                handler.close()
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def test_level_applied(self):
        setup_logging(level="WARNING")
        assert self.root.level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "hullscope.log"
        setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("hullscope.test").info("hello")
        for handler in self.root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_json_formatter(self):
        record = logging.LogRecord("hullscope", logging.INFO, __file__, 1, "trained %d", (5,), None)
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "trained 5"
        assert data["level"] == "INFO"
        assert data["logger"] == "hullscope"

    def test_logging_config_from_env(self, monkeypatch):
        monkeypatch.setenv("HULLSCOPE_LOG_FILE", "/tmp/hs.log")
        assert LoggingConfig.from_env().log_file == "/tmp/hs.log"
