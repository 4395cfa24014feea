from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from blackout.components.tile import TileColor

if TYPE_CHECKING:
    from blackout.systems.render import RenderSystem

# Visual lookup lives here, never on the board.
TILE_COLORS: Dict[TileColor, Tuple[int, int, int]] = {
    TileColor.WHITE: (235, 235, 235),
    TileColor.DARK_BLUE: (32, 56, 140),
    TileColor.LIGHT_BLUE: (110, 170, 230),
    TileColor.LIGHT_ORANGE: (245, 185, 110),
    TileColor.DARK_ORANGE: (200, 95, 30),
    TileColor.WHITE_ORANGE: (250, 225, 195),
    TileColor.BLACK: (0, 0, 0),
}
EMPTY_COLOR = (40, 40, 40)
SELECTION_COLOR = (255, 255, 0)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, headless: bool) -> None:
        rs = self._rs
        board = rs.board()
        mapper = rs.mapper
        size = mapper.cell_size
        window_h = rs.window.height
        rs._last_cell_rects = {}
        for row, col in board.positions():
            left, top = mapper.to_pixel(row, col)
            # Arcade draws bottom-up.
            bottom = window_h - top - size
            rs._last_cell_rects[(row, col)] = (left, bottom, size, size)
            if headless:
                continue
            color = board.color_at(row, col)
            fill = TILE_COLORS.get(color, EMPTY_COLOR) if color is not None else EMPTY_COLOR
            inner = size - self._padding * 2
            arcade.draw_lbwh_rectangle_filled(left + self._padding, bottom + self._padding, inner, inner, fill)
        if rs.selected is not None and rs.selected in rs._last_cell_rects and not headless:
            left, bottom, width, height = rs._last_cell_rects[rs.selected]
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, SELECTION_COLOR, border_width=2)
