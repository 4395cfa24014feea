from __future__ import annotations

from typing import TYPE_CHECKING

from blackout.components.game_state import GameMode
from blackout.utils.game_state import get_game_state, get_score, get_timer

if TYPE_CHECKING:
    from blackout.systems.render import RenderSystem


class HudRenderer:
    """Score, countdown and the game-over banner."""

    def __init__(self, render_system: RenderSystem, margin: int = 8):
        self._rs = render_system
        self._margin = margin

    def lines(self) -> list[str]:
        world = self._rs.world
        score = get_score(world).value
        remaining = get_timer(world).remaining()
        lines = [f"Score: {score}", f"Time: {remaining:0.0f}"]
        if get_game_state(world).mode == GameMode.GAME_OVER:
            lines.append("GAME OVER")
            lines.append("R to restart")
        return lines

    def render(self, arcade, headless: bool) -> None:
        lines = self.lines()
        if headless:
            return
        top = self._rs.window.height - self._margin
        for index, text in enumerate(lines):
            arcade.draw_text(text, self._margin, top - 20 * (index + 1), (255, 255, 255), 12)
