"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_configured_checker, load_configuration
from .runtime_settings import CheckerConfiguration

__all__ = [
    "CheckerConfiguration",
    "ConfigurationError",
    "load_configuration",
    "build_configured_checker",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
