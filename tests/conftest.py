"""
Pytest configuration and shared fixtures for the TopoForge test suite.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset cached settings and the global event logger around each test."""
    from infrastructure.config import GeneratorSettings, set_settings
    from infrastructure.logger import LoggerConfig, configure_logger, reset_logger

    set_settings(GeneratorSettings())
    configure_logger(LoggerConfig(enable_file_log=False))

    yield

    reset_logger()
    set_settings(None)


@pytest.fixture
def fresh_store():
    """Provide an empty GraphStore."""
    from core.graph_store import GraphStore
    return GraphStore()


@pytest.fixture
def services(fresh_store):
    """Collaborator bundle over fresh_store."""
    from core.interfaces import GraphServices
    return GraphServices.from_store(fresh_store)


@pytest.fixture
def rng():
    """Deterministic random source."""
    from forge.random_source import RandomSource
    return RandomSource(seed=42)


@pytest.fixture
def event_logger():
    """Isolated in-memory generation logger."""
    from infrastructure.logger import GenerationLogger, LoggerConfig
    return GenerationLogger(LoggerConfig(enable_file_log=False))
