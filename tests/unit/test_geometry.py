"""Tests for the centimeter to pixel transform and hit-testing."""

import pytest

from cabinet_studio.domain import CabinetArchetype, DesignEditor, ScaleConfig, new_design
from cabinet_studio.domain.geometry import (
    cabinet_at,
    cabinet_offsets,
    cabinet_top_y,
    ceiling_line_y,
    floor_line_y,
    surface_size,
)


@pytest.fixture
def two_cabinets():
    design = new_design()
    DesignEditor(design).add_cabinet(CabinetArchetype.TALL, 80)
    return design


class TestScaleConfig:
    """Tests for ScaleConfig."""

    def test_round_trip(self) -> None:
        config = ScaleConfig(scale=2.5)
        assert config.to_pixels(60) == 150
        assert config.to_centimeters(150) == 60

    def test_rejects_non_positive_scale(self) -> None:
        with pytest.raises(ValueError):
            ScaleConfig(scale=0)

    def test_rejects_negative_gap(self) -> None:
        with pytest.raises(ValueError):
            ScaleConfig(cabinet_gap=-1)


class TestSurface:
    """Tests for surface size and vertical lines."""

    def test_single_cabinet_surface(self) -> None:
        design = new_design()
        assert surface_size(design) == (290, 828)

    def test_dimension_band_only_with_several_cabinets(self, two_cabinets) -> None:
        width, height = surface_size(two_cabinets)
        assert width == 70 + 180 + 12 + 240 + 40
        assert height == 828 + 36

    def test_lines(self) -> None:
        design = new_design()
        assert ceiling_line_y() == 64
        assert floor_line_y(design) == 64 + 720
        assert cabinet_top_y(design, design.cabinets[0]) == 784 - 660

    def test_abutting_layout(self, two_cabinets) -> None:
        config = ScaleConfig(cabinet_gap=0)
        assert cabinet_offsets(two_cabinets, config) == [70, 250]


class TestCabinetAt:
    """Tests for pointer hit-testing."""

    def test_offsets(self, two_cabinets) -> None:
        assert cabinet_offsets(two_cabinets) == [70, 262]

    @pytest.mark.parametrize(
        "x, expected",
        [
            (10, None),
            (70, 0),
            (150, 0),
            (250, 0),
            (256, None),
            (262, 1),
            (400, 1),
            (502, 1),
            (503, None),
        ],
    )
    def test_hit(self, two_cabinets, x: float, expected: int | None) -> None:
        assert cabinet_at(two_cabinets, x) == expected
