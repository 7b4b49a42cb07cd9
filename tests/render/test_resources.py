"""Tests for piece sprite resolution, decoding and scaling."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor, QImage

from chessimage.core.fen import PIECE_SYMBOLS
from chessimage.errors import AssetError
from chessimage.render.options import Resampler
from chessimage.render.resources import (
    PIECE_FILES,
    load_sprite,
    piece_sprite,
    scale_sprite,
    sprite_location,
)

pytestmark = pytest.mark.usefixtures("qapp")


class TestSpriteNames:
    def test_every_symbol_has_a_file(self) -> None:
        assert sorted(PIECE_FILES) == sorted(PIECE_SYMBOLS)

    def test_names_encode_piece_and_colour(self) -> None:
        assert PIECE_FILES["b"] == "bd.png"
        assert PIECE_FILES["B"] == "bl.png"
        assert PIECE_FILES["K"] == "kl.png"

    def test_bundled_location(self) -> None:
        _root, path = sprite_location("q", None)
        assert path == "assets/qd.svg"

    def test_custom_location_uses_prefix(self, tmp_path) -> None:
        root, path = sprite_location("N", tmp_path, "set1/")
        assert root == tmp_path
        assert path == "set1/nl.png"

    def test_string_source_is_a_directory(self, tmp_path) -> None:
        root, path = sprite_location("N", str(tmp_path))
        assert root == tmp_path
        assert path == "nl.png"

    def test_string_source_loads(self, png_asset_dir) -> None:
        sprite = load_sprite("k", str(png_asset_dir))
        assert (sprite.width(), sprite.height()) == (16, 16)

    def test_unknown_symbol_raises(self) -> None:
        with pytest.raises(AssetError, match="symbol"):
            sprite_location("x", None)


class TestLoadSprite:
    @pytest.mark.parametrize("symbol", list(PIECE_SYMBOLS))
    def test_bundled_sprites_decode(self, symbol: str) -> None:
        sprite = load_sprite(symbol)
        assert not sprite.isNull()
        assert sprite.width() > 0 and sprite.height() > 0

    def test_png_from_directory(self, png_asset_dir) -> None:
        sprite = load_sprite("k", png_asset_dir)
        assert (sprite.width(), sprite.height()) == (16, 16)
        assert sprite.pixelColor(8, 8).getRgb()[:3] == (0, 0, 255)

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(AssetError) as info:
            load_sprite("p", tmp_path)
        assert info.value.path == "pd.png"
        assert isinstance(info.value, OSError)

    def test_undecodable_file_raises(self, tmp_path) -> None:
        (tmp_path / "pd.png").write_bytes(b"not an image")
        with pytest.raises(AssetError, match="decode"):
            load_sprite("p", tmp_path)


class TestScaling:
    def test_zero_size_is_null(self) -> None:
        source = QImage(10, 10, QImage.Format.Format_ARGB32)
        assert scale_sprite(source, 0, Resampler.SMOOTH).isNull()

    @pytest.mark.parametrize("resampler", list(Resampler))
    def test_scaled_to_square(self, resampler: Resampler) -> None:
        source = QImage(10, 30, QImage.Format.Format_ARGB32)
        source.fill(QColor(0, 255, 0))
        scaled = scale_sprite(source, 57, resampler)
        assert (scaled.width(), scaled.height()) == (57, 57)
        assert scaled.pixelColor(28, 28).getRgb() == (0, 255, 0, 255)

    def test_uncached_sprites_are_fresh(self, png_asset_dir) -> None:
        first = piece_sprite("q", 20, Resampler.SMOOTH, png_asset_dir)
        second = piece_sprite("q", 20, Resampler.SMOOTH, png_asset_dir)
        assert first is not second
        assert first == second

    def test_cached_sprite_is_reused(self, png_asset_dir) -> None:
        first = piece_sprite("q", 20, Resampler.SMOOTH, png_asset_dir, cached=True)
        second = piece_sprite("q", 20, Resampler.SMOOTH, png_asset_dir, cached=True)
        assert first is second

    def test_cache_is_keyed_by_size(self, png_asset_dir) -> None:
        small = piece_sprite("q", 20, Resampler.SMOOTH, png_asset_dir, cached=True)
        large = piece_sprite("q", 40, Resampler.SMOOTH, png_asset_dir, cached=True)
        assert small.width() == 20
        assert large.width() == 40
