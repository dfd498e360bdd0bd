"""
TOPOFORGE INFRASTRUCTURE - System-Level Modules

This package contains infrastructure components:
- config: Generator settings loaded from config/topoforge.toml
- logger: Structured generation event log (ring buffer + JSONL files)
"""

from infrastructure.config import GeneratorSettings, get_settings, reset_settings
from infrastructure.logger import (
    GenerationLogger,
    GenerationEvent,
    LoggerConfig,
    get_logger,
    configure_logger,
)

__all__ = [
    "GeneratorSettings",
    "get_settings",
    "reset_settings",
    "GenerationLogger",
    "GenerationEvent",
    "LoggerConfig",
    "get_logger",
    "configure_logger",
]
