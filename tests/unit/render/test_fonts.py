"""Unit tests for inkboard.render.fonts module."""

from inkboard.render import fonts as fonts_module
from inkboard.render.fonts import FontManager


class TestFontManager:
    """Test font loading and caching."""

    def test_get_when_same_request_then_returns_cached_font(self) -> None:
        manager = FontManager()

        assert manager.get(14) is manager.get(14)

    def test_get_when_bold_then_cached_separately(self) -> None:
        manager = FontManager()

        assert manager.get(14) is not manager.get(14, bold=True)

    def test_get_when_tiny_size_then_clamped(self) -> None:
        manager = FontManager()

        assert manager.get(1) is manager.get(6)

    def test_get_when_font_dir_missing_then_falls_back_to_default(self, tmp_path) -> None:
        manager = FontManager(font_dir=tmp_path / "no-fonts")

        font = manager.get(20)

        assert font is not None
        assert manager._warned_fallback is True

    def test_get_when_cache_full_then_evicts_least_recently_used(self, monkeypatch) -> None:
        # Arrange
        monkeypatch.setattr(fonts_module, "MAX_FONT_CACHE_SIZE", 2)
        manager = FontManager()
        first = manager.get(10)
        manager.get(11)

        # Act
        manager.get(10)
        manager.get(12)

        # Assert
        assert (False, 10) in manager._font_cache
        assert (False, 11) not in manager._font_cache
        assert manager.get(10) is first
