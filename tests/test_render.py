"""Tests for oreworld.render — canvas and grid renderer."""

import numpy as np
import pytest

from oreworld.render.canvas import Canvas
from oreworld.render.renderer import BACKGROUND, PALETTE, Renderer
from oreworld.world.cell import CellCode
from oreworld.world.grid import GridStore


class TestCanvas:
    """Tests for the density-scaled pixel buffer."""

    def test_buffer_shape_scaled_by_density(self) -> None:
        canvas = Canvas(width=10, height=6, density=2)
        assert canvas.pixels.shape == (12, 20, 4)
        assert canvas.size == (20, 12)

    def test_rejects_zero_density(self) -> None:
        with pytest.raises(ValueError):
            Canvas(width=4, height=4, density=0)

    def test_clear(self) -> None:
        canvas = Canvas(width=4, height=3)
        canvas.clear(BACKGROUND)
        assert canvas.pixel(0, 0) == BACKGROUND
        assert canvas.pixel(3, 2) == BACKGROUND

    def test_set_pixel_fills_block(self) -> None:
        canvas = Canvas(width=4, height=3, density=2)
        canvas.set_pixel((10, 20, 30, 255), 1, 1)
        block = canvas.pixels[2:4, 2:4]
        assert np.all(block == [10, 20, 30, 255])
        assert canvas.pixel(1, 1) == (0, 0, 0, 0)
        assert canvas.pixel(4, 2) == (0, 0, 0, 0)

    def test_light_scales_all_channels(self) -> None:
        canvas = Canvas(width=2, height=2)
        canvas.set_pixel((200, 100, 50, 255), 0, 0, light=0)
        assert canvas.pixel(0, 0) == (0, 0, 0, 0)
        canvas.set_pixel((200, 100, 50, 254), 1, 0, light=255)
        assert canvas.pixel(1, 0) == (200, 100, 50, 254)

    def test_off_canvas_writes_dropped(self) -> None:
        canvas = Canvas(width=4, height=4)
        canvas.set_pixel((255, 255, 255, 255), -1, 0)
        canvas.set_pixel((255, 255, 255, 255), 4, 0)
        canvas.set_pixel((255, 255, 255, 255), 0, 4)
        assert not canvas.pixels.any()

    def test_to_bytes_length(self) -> None:
        canvas = Canvas(width=3, height=2, density=2)
        assert len(canvas.to_bytes()) == 6 * 4 * 4


class TestRenderer:
    """Tests for mapping cell codes to colour blocks."""

    def test_palette_colours(self) -> None:
        renderer = Renderer()
        assert renderer.colour_of(0) == (0, 0, 0, 255)
        assert renderer.colour_of(1) == (220, 210, 180, 255)
        assert renderer.colour_of(2) == (220, 180, 30, 255)
        assert renderer.colour_of(3) == (30, 50, 210, 255)
        assert renderer.colour_of(4) == (98, 40, 30, 255)

    def test_each_code_draws_its_colour(self) -> None:
        grid = GridStore(width=5, height=1)
        for code in CellCode:
            grid.set(int(code), 0, code)
        canvas = Canvas(width=5, height=1, density=3)
        Renderer().draw_grid(grid, canvas)
        for code in CellCode:
            x0 = int(code) * 3
            block = canvas.pixels[0:3, x0 : x0 + 3]
            assert np.all(block == PALETTE[code])

    def test_empty_grid_is_black(self) -> None:
        grid = GridStore(width=6, height=4)
        canvas = Canvas(width=6, height=4)
        canvas.clear(BACKGROUND)
        Renderer().draw_grid(grid, canvas)
        assert np.all(canvas.pixels == [0, 0, 0, 255])

    def test_light_dims_grid(self) -> None:
        grid = GridStore(width=3, height=3)
        grid.fill(CellCode.GOLD)
        canvas = Canvas(width=3, height=3)
        Renderer().draw_grid(grid, canvas, light=0)
        assert not canvas.pixels.any()

    def test_size_mismatch(self) -> None:
        grid = GridStore(width=4, height=4)
        canvas = Canvas(width=5, height=4)
        with pytest.raises(ValueError):
            Renderer().draw_grid(grid, canvas)
