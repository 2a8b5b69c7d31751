from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.ui.layout import cell_center, hexagon_points

if TYPE_CHECKING:
    from hexmosaic.components.palette import PixelPalette
    from hexmosaic.systems.render import RenderSystem

HIGHLIGHT_COLOR = (255, 255, 255)
HIGHLIGHT_WIDTH = 3


class BoardRenderer:
    """Draws one hexagon per cell, outlining the hovered cell."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, board: HexBoard, palette: PixelPalette, left: float, bottom: float,
               headless: bool) -> None:
        rs = self._rs
        layout: Dict[Tuple[int, int], dict] = {}
        for x, y in HexBoard.iter_cells():
            cx, cy = cell_center(x, y, left, bottom)
            pixel = board.get(x, y)
            layout[(x, y)] = {"center": (cx, cy), "pixel": pixel}
            if headless:
                continue
            points = hexagon_points(cx, cy)
            arcade.draw_polygon_filled(points, palette.background_for(pixel))
            if rs.hovered == (x, y):
                arcade.draw_polygon_outline(points, HIGHLIGHT_COLOR, HIGHLIGHT_WIDTH)
        rs._last_cell_layout = layout
