"""
TOPOFORGE CONFIG - Generator settings loaded from config/topoforge.toml.

Configuration is read once and cached. Components ask get_settings() for
their defaults instead of hard-coding label names or limits.

Usage:
    from infrastructure.config import get_settings

    settings = get_settings()
    settings.default_vertex_label   # "_ag_label_vertex"
"""
import msgspec
from typing import Any, Dict, Optional
from pathlib import Path
import warnings

from core.ontology import DEFAULT_EDGE_LABEL, DEFAULT_VERTEX_LABEL


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "topoforge.toml"


# =============================================================================
# SETTINGS SCHEMA
# =============================================================================

class GeneratorSettings(msgspec.Struct, kw_only=True, frozen=True):
    """
    Flattened view of the [generation] and [logging] sections.

    Attributes:
        default_vertex_label: Vertex label used when a caller omits one
        default_edge_label: Edge label used when a caller omits one
        default_bidirectional: Bidirectional flag used when a caller omits it
        max_working_vertices: Largest vertex count one generator call may buffer
        event_buffer_size: Ring buffer size of the generation event log
        enable_file_log: Append generation events to daily JSONL files
        log_path: Directory for the JSONL files
    """
    default_vertex_label: str = DEFAULT_VERTEX_LABEL
    default_edge_label: str = DEFAULT_EDGE_LABEL
    default_bidirectional: bool = True
    max_working_vertices: int = 10_000_000
    event_buffer_size: int = 10_000
    enable_file_log: bool = False
    log_path: str = "./workspace/logs"


# =============================================================================
# LOADING
# =============================================================================

def load_toml_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from topoforge.toml.

    Returns:
        Dict with all configuration sections (empty if the file is unusable)
    """
    try:
        import tomllib
        config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        warnings.warn(f"Failed to load config from TOML: {e}")
        return {}


def settings_from_dict(config_dict: Dict[str, Any]) -> GeneratorSettings:
    """
    Build settings from parsed TOML sections.

    Unknown keys are ignored; wrongly typed values fall back to defaults with
    a warning rather than breaking start-up.
    """
    merged: Dict[str, Any] = {}
    for section in ("generation", "logging"):
        merged.update(config_dict.get(section, {}) or {})

    known = set(GeneratorSettings.__struct_fields__)
    merged = {k: v for k, v in merged.items() if k in known}

    try:
        return msgspec.convert(merged, type=GeneratorSettings)
    except msgspec.ValidationError as e:
        warnings.warn(f"Invalid generator settings, using defaults: {e}")
        return GeneratorSettings()


# Global settings instance
_settings: Optional[GeneratorSettings] = None


def get_settings() -> GeneratorSettings:
    """Get or load the global settings."""
    global _settings
    if _settings is None:
        _settings = settings_from_dict(load_toml_config())
    return _settings


def set_settings(settings: Optional[GeneratorSettings]) -> None:
    """Replace the global settings (None forces a reload on next access)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop cached settings."""
    set_settings(None)
