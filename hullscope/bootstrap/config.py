"""
bootstrap/config.py - Application configuration

Loads configuration from a JSON file, environment variables and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from hullscope.surrogate.config import GridConfig, SweepConfig, TrainingConfig

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Top-level keys understood in a config file
_SECTIONS = {"environment", "debug", "training", "grid", "logging"}


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("HULLSCOPE_LOG_LEVEL", "INFO"),
            format=os.getenv("HULLSCOPE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("HULLSCOPE_LOG_FILE"),
            json_logs=os.getenv("HULLSCOPE_JSON_LOGS", "false").lower() == "true",
        )


def _override(section, values: Dict[str, Any]):
    """Copy of a frozen section with the known keys from values applied."""
    known = {f.name for f in fields(section)}
    unknown = set(values) - known
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
    return replace(section, **{k: v for k, v in values.items() if k in known})


@dataclass
class HullScopeConfig:
    """Root configuration for HullScope."""

    environment: str = "development"
    debug: bool = False
    version: str = "0.3.0"

    training: TrainingConfig = field(default_factory=TrainingConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "HullScopeConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("HULLSCOPE_ENVIRONMENT", "development"),
            debug=os.getenv("HULLSCOPE_DEBUG", "false").lower() == "true",
            training=TrainingConfig.from_env(),
            grid=GridConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "HullScopeConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "HullScopeConfig":
        """Create config from dictionary, layered over the environment."""
        config = cls.from_env()

        unknown = set(data) - _SECTIONS
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "training" in data:
            training_data = dict(data["training"])
            sweep_data = training_data.pop("sweep", None)
            if "hidden_layers" in training_data:
                training_data["hidden_layers"] = tuple(training_data["hidden_layers"])
            config.training = _override(config.training, training_data)
            if sweep_data:
                config.training = replace(
                    config.training,
                    sweep=_override(config.training.sweep, sweep_data),
                )

        if "grid" in data:
            config.grid = _override(config.grid, data["grid"])

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        sweep: SweepConfig = self.training.sweep
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "training": {
                "epochs": self.training.epochs,
                "batch_size": self.training.batch_size,
                "learning_rate": self.training.learning_rate,
                "validation_split": self.training.validation_split,
                "shuffle": self.training.shuffle,
                "seed": self.training.seed,
                "generation_chunk": self.training.generation_chunk,
                "hidden_layers": list(self.training.hidden_layers),
                "sweep": {
                    "deadrise": sweep.deadrise,
                    "ballast_height": sweep.ballast_height,
                    "crew_fraction": sweep.crew_fraction,
                    "crew_ceiling_kg": sweep.crew_ceiling_kg,
                    "sample_count": sweep.sample_count,
                },
            },
            "grid": {
                "resolution": self.grid.resolution,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[HullScopeConfig] = None


def load_config(filepath: str = None) -> HullScopeConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        HullScopeConfig instance
    """
    global _config

    if filepath:
        _config = HullScopeConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./hullscope.json",
            "./config/hullscope.json",
            os.path.expanduser("~/.hullscope/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = HullScopeConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = HullScopeConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> HullScopeConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
