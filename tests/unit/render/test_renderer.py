"""Unit tests for inkboard.render.renderer module."""

from unittest.mock import Mock

import pytest
from PIL import Image, ImageChops

from inkboard.config.settings import RenderSettings
from inkboard.layout.exceptions import StructuralError
from inkboard.layout.nodes import Container, Leaf, SplitDirection, WidgetKind
from inkboard.layout.region import Region
from inkboard.layout.size import Pixels, Units
from inkboard.render.output import load_channels
from inkboard.render.renderer import DashboardRenderer


@pytest.fixture
def renderer() -> DashboardRenderer:
    return DashboardRenderer(RenderSettings(width=610, height=400))


class TestDashboardRenderer:
    """Test rendering whole dashboards."""

    def test_render_when_defaults_then_uses_full_panel_size(self) -> None:
        renderer = DashboardRenderer()

        assert renderer.bounds == Region(0, 0, 1200, 825)

    def test_render_returns_rgb_image_of_configured_size(
        self, renderer, sample_layout, dashboard_data
    ) -> None:
        image = renderer.render(sample_layout, dashboard_data)

        assert image.size == (610, 400)
        assert image.mode == "RGB"

    def test_render_records_placements_in_layout_order(
        self, renderer, sample_layout, dashboard_data
    ) -> None:
        renderer.render(sample_layout, dashboard_data)

        assert [placement.kind for placement in renderer.last_placements] == [
            WidgetKind.HEADER,
            WidgetKind.TODO,
            WidgetKind.VERTICAL_RULE,
            WidgetKind.COUNTDOWN,
        ]

    def test_render_draws_something_in_every_widget_region(
        self, renderer, sample_layout, dashboard_data
    ) -> None:
        image = renderer.render(sample_layout, dashboard_data)

        for placement in renderer.last_placements:
            region = placement.region
            crop = image.crop(
                (region.x, region.y, region.x + region.width, region.y + region.height)
            )
            blank = Image.new("RGB", crop.size, "white")
            assert ImageChops.difference(crop, blank).getbbox() is not None, placement.path

    def test_render_when_no_data_then_placeholders_drawn(self, renderer, sample_layout) -> None:
        image = renderer.render(sample_layout, None)

        assert ImageChops.difference(image, Image.new("RGB", image.size, "white")).getbbox()

    def test_render_when_root_is_leaf_then_raises(self, renderer) -> None:
        with pytest.raises(StructuralError):
            renderer.render(Leaf(kind=WidgetKind.DATE, size=Units(1)))

    def test_render_when_logger_given_then_used_for_walk(self, sample_layout) -> None:
        logger = Mock()
        renderer = DashboardRenderer(RenderSettings(width=200, height=120), logger=logger)

        renderer.render(sample_layout, None)

        logger.info.assert_called_once()
        assert logger.log.call_count >= 4

    def test_render_to_files_writes_png_and_channels(
        self, tmp_path, renderer, sample_layout, dashboard_data
    ) -> None:
        # Arrange
        png = tmp_path / "board.png"
        channels = tmp_path / "board.inkb"

        # Act
        renderer.render_to_files(sample_layout, dashboard_data, png, channels)

        # Assert
        with Image.open(png) as saved:
            assert saved.size == (610, 400)
        planes = load_channels(channels)
        assert (planes.width, planes.height) == (610, 400)
        assert planes.red is not None

    def test_render_to_files_when_red_disabled_then_black_only_channels(
        self, tmp_path, sample_layout, dashboard_data
    ) -> None:
        renderer = DashboardRenderer(RenderSettings(width=300, height=200, use_red=False))
        channels = tmp_path / "board.inkb"

        renderer.render_to_files(sample_layout, dashboard_data, tmp_path / "b.png", channels)

        assert load_channels(channels).red is None

    def test_render_when_pixel_leaves_exceed_canvas_then_clipped(self) -> None:
        # Arrange
        layout = Container(
            size=Units(1),
            split=SplitDirection.HORIZONTAL,
            entries=(
                Leaf(kind=WidgetKind.BATTERY, size=Pixels(3_000_000_000)),
                Leaf(kind=WidgetKind.DATE, size=Pixels(200_000)),
            ),
        )
        renderer = DashboardRenderer(RenderSettings(width=300, height=200))

        # Act
        image = renderer.render(layout, None)

        # Assert
        assert image.size == (300, 200)
        assert [placement.region for placement in renderer.last_placements] == [
            Region(0, 0, 3_000_000_000, 200),
            Region(3_000_000_000, 0, 200_000, 200),
        ]
        assert ImageChops.difference(image, Image.new("RGB", image.size, "white")).getbbox()
