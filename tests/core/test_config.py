"""Tests for the drag aim settings loader."""

import pytest

from dragaim.core.config import ConfigError, ConfigLoader


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings file with an engine section and presets."""
    path = tmp_path / "drag_aim.yaml"
    path.write_text(
        "drag_aim:\n"
        "  drag_speed: 0.05\n"
        "  adaptive_speed: true\n"
        "presets:\n"
        "  sniper:\n"
        "    drag_speed: 0.4\n"
        "  label: not-a-section\n",
        encoding="utf-8",
    )
    return path


class TestConfigLoader:
    """Test loading and section lookup."""

    def test_load_engine_section(self, settings_file) -> None:
        """Test the engine section is returned as a mapping."""
        loader = ConfigLoader.load(settings_file)
        assert loader.get_section("drag_aim") == {"drag_speed": 0.05, "adaptive_speed": True}

    def test_dotted_section(self, settings_file) -> None:
        """Test nested preset lookup."""
        loader = ConfigLoader.load(settings_file)
        assert loader.get_section("presets.sniper") == {"drag_speed": 0.4}

    def test_missing_file(self, tmp_path) -> None:
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("drag_aim: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_non_mapping_root(self, tmp_path) -> None:
        """Test a list document is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_empty_file_has_no_sections(self, tmp_path) -> None:
        """Test an empty file loads but has no engine section."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        loader = ConfigLoader.load(path)
        with pytest.raises(ConfigError, match="not found"):
            loader.get_section("drag_aim")

    def test_missing_section(self, settings_file) -> None:
        """Test unknown sections raise ConfigError."""
        loader = ConfigLoader.load(settings_file)
        with pytest.raises(ConfigError, match="not found: presets.precise"):
            loader.get_section("presets.precise")
        with pytest.raises(ConfigError, match="not found"):
            loader.get_section("drag_aim.drag_speed.deeper")

    def test_scalar_is_not_a_section(self, settings_file) -> None:
        """Test scalar values are rejected as sections."""
        loader = ConfigLoader.load(settings_file)
        with pytest.raises(ConfigError, match="not a section"):
            loader.get_section("presets.label")
