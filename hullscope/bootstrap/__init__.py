"""
bootstrap/ - Configuration and logging setup

Loads HullScopeConfig from file or environment and configures logging.
"""

from .config import (
    HullScopeConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .logging_setup import (
    JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)

__all__ = [
    # Config
    "HullScopeConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
