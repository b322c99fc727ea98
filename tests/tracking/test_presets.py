"""Tests for named drag aim presets."""

import logging

import pytest

from dragaim.core.config import ConfigError
from dragaim.tracking.drag_aim import DragAimEngine
from dragaim.tracking.presets import (
    BUILTIN_PRESETS,
    create_engine_with_preset,
    load_presets,
    preset_config,
)


class TestBuiltinPresets:
    """Test the three built-in bundles."""

    def test_smooth(self) -> None:
        """Test smooth preset values."""
        config = create_engine_with_preset("smooth").config
        assert config.drag_speed == 0.01
        assert config.smoothing_factor == 0.9
        assert config.adaptive_speed is True
        assert config.head_lock_threshold == 0.03

    def test_responsive(self) -> None:
        """Test responsive preset values."""
        config = create_engine_with_preset("responsive").config
        assert config.drag_speed == 0.25
        assert config.smoothing_factor == 0.7
        assert config.adaptive_speed is True
        assert config.head_lock_threshold == 0.08

    def test_precise(self) -> None:
        """Test precise preset values."""
        config = create_engine_with_preset("precise").config
        assert config.drag_speed == 0.3
        assert config.smoothing_factor == 0.95
        assert config.adaptive_speed is False
        assert config.head_lock_threshold == 0.02

    def test_presets_keep_other_defaults(self) -> None:
        """Test unspecified fields take the engine defaults."""
        config = preset_config("precise")
        assert config.max_drag_distance == 999.0
        assert config.velocity_threshold == 0.01

    def test_unknown_falls_back_to_smooth(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test an unknown name logs a warning and uses smooth."""
        with caplog.at_level(logging.WARNING, logger="dragaim.tracking.presets"):
            engine = create_engine_with_preset("aggressive")
        assert isinstance(engine, DragAimEngine)
        assert engine.config == preset_config("smooth")
        assert "Unknown drag aim preset 'aggressive'" in caplog.text

    def test_engines_are_independent(self) -> None:
        """Test each call builds a fresh engine."""
        assert create_engine_with_preset("smooth") is not create_engine_with_preset("smooth")


class TestPresetFiles:
    """Test presets loaded from YAML."""

    def test_load_and_use_custom_preset(self, tmp_path) -> None:
        """Test a custom preset extends the built-in ones."""
        path = tmp_path / "presets.yaml"
        path.write_text(
            "presets:\n"
            "  sniper:\n"
            "    drag_speed: 0.4\n"
            "    smoothing_factor: 0.5\n"
            "  smooth:\n"
            "    drag_speed: 0.02\n",
            encoding="utf-8",
        )

        presets = load_presets(path)

        assert set(presets) == {"sniper", "smooth"}
        assert create_engine_with_preset("sniper", presets).config.drag_speed == 0.4
        assert create_engine_with_preset("smooth", presets).config.drag_speed == 0.02
        assert create_engine_with_preset("precise", presets).config.drag_speed == 0.3
        assert BUILTIN_PRESETS["smooth"]["drag_speed"] == 0.01

    def test_invalid_preset_fails_at_load(self, tmp_path) -> None:
        """Test a preset with a bad value is rejected."""
        path = tmp_path / "presets.yaml"
        path.write_text("presets:\n  broken:\n    smoothing_factor: 1.5\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_presets(path)

    def test_missing_section(self, tmp_path) -> None:
        """Test a file without a presets section is rejected."""
        path = tmp_path / "presets.yaml"
        path.write_text("drag_aim: {}\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="presets"):
            load_presets(path)
