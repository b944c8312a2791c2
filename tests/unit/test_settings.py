"""Tests for settings loading."""

import json
from pathlib import Path

import pytest

from cabinet_studio.application.settings import (
    ConfigError,
    StudioSettings,
    load_settings,
    load_settings_from_dict,
)
from cabinet_studio.domain import (
    AspectRatio,
    DoorState,
    FloorFinish,
    LightTemperature,
    ScaleConfig,
)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_file(self) -> None:
        settings = load_settings()

        assert settings == StudioSettings()
        assert settings.scale_config() == ScaleConfig()
        assert settings.render.jpeg_quality == 90

    def test_file_values(self, tmp_path: Path) -> None:
        path = tmp_path / "studio.json"
        path.write_text(
            json.dumps(
                {
                    "drawing": {"scale": 2, "cabinet_gap": 0},
                    "render": {"light_temperature": "3000K", "door_state": "open"},
                    "storage_dir": str(tmp_path / "designs"),
                    "vendor_specs": {"board": "18 mm MDF"},
                }
            )
        )

        settings = load_settings(path)

        assert settings.scale_config() == ScaleConfig(scale=2, cabinet_gap=0)
        assert settings.storage_dir == tmp_path / "designs"
        environment = settings.environment(FloorFinish.POLISHED)
        assert environment.floor is FloorFinish.POLISHED
        assert environment.light_temperature is LightTemperature.WARM
        assert environment.door_state is DoorState.OPEN
        assert environment.aspect_ratio is AspectRatio.WIDE

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "studio.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert exc_info.value.error_type == "json_parse"

    def test_non_object_root(self, tmp_path: Path) -> None:
        path = tmp_path / "studio.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert exc_info.value.error_type == "validation"


class TestValidation:
    """Tests for settings validation."""

    def test_negative_scale(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings_from_dict({"drawing": {"scale": -1}})

        assert exc_info.value.details[0]["path"] == "drawing.scale"

    def test_jpeg_quality_bounds(self) -> None:
        with pytest.raises(ConfigError):
            load_settings_from_dict({"render": {"jpeg_quality": 100}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="colour"):
            load_settings_from_dict({"colour": "red"})
