"""
Unit tests for infrastructure/config.py - GeneratorSettings loading
"""
import pytest

from infrastructure.config import (
    DEFAULT_CONFIG_PATH,
    GeneratorSettings,
    get_settings,
    load_toml_config,
    reset_settings,
    set_settings,
    settings_from_dict,
)


def test_shipped_config_loads():
    """
    Validate config/topoforge.toml.

    Verifies:
    - The file parses and has both sections
    - Its values match the built-in defaults
    """
    raw = load_toml_config(DEFAULT_CONFIG_PATH)

    assert "generation" in raw
    assert "logging" in raw
    assert settings_from_dict(raw) == GeneratorSettings()


def test_missing_file_warns_and_returns_empty(tmp_path):
    with pytest.warns(UserWarning, match="Failed to load config"):
        assert load_toml_config(tmp_path / "absent.toml") == {}


def test_sections_are_merged(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text(
        "[generation]\n"
        'default_vertex_label = "Node"\n'
        "default_bidirectional = false\n"
        "unknown_key = 1\n"
        "[logging]\n"
        "event_buffer_size = 50\n"
    )

    settings = settings_from_dict(load_toml_config(path))

    assert settings.default_vertex_label == "Node"
    assert settings.default_bidirectional is False
    assert settings.event_buffer_size == 50
    assert settings.default_edge_label == "_ag_label_edge"


def test_wrong_types_fall_back_to_defaults():
    with pytest.warns(UserWarning, match="Invalid generator settings"):
        settings = settings_from_dict({"generation": {"max_working_vertices": "lots"}})

    assert settings == GeneratorSettings()


def test_settings_cache():
    """Validate set_settings / reset_settings on the cached instance."""
    custom = GeneratorSettings(max_working_vertices=5)
    set_settings(custom)
    assert get_settings() is custom

    reset_settings()
    reloaded = get_settings()
    assert reloaded is not custom
    assert reloaded.max_working_vertices == 10_000_000
