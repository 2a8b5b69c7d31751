from __future__ import annotations

from typing import TYPE_CHECKING, List

from hexmosaic.components.pixel import PixelColor
from hexmosaic.constants import BOARD_WIDTH_PCT, INFO_LINE_HEIGHT, INFO_PANEL_MARGIN

if TYPE_CHECKING:
    from hexmosaic.components.solver_settings import SolverSettings
    from hexmosaic.systems.render import RenderSystem
    from hexmosaic.systems.scoring import ScoreSnapshot

TEXT_COLOR = (230, 230, 230)
FONT_SIZE = 13


def describe_panel(score: ScoreSnapshot, counts: dict, settings: SolverSettings) -> List[str]:
    """Text lines for the side panel: score breakdown, pixel supply and solver settings."""
    lines = [
        f"Total Score: {score.total}",
        f"Pixel Score: {score.pixel_score}",
        f"Artist Bonus: {score.artist_bonus}",
        f"Set Bonus: {score.set_bonus}",
        "",
    ]
    for pixel, (count, capacity) in counts.items():
        lines.append(f"{PixelColor(pixel).name.title()}: {count}/{capacity}")
    lines.append("")
    lines.append(f"Height penalty: {settings.height_penalty:g}")
    pixel_filter = settings.pixel_filter.name.title() if settings.pixel_filter is not None else "Any"
    lines.append(f"Pixel filter: {pixel_filter}")
    return lines


class InfoPanelRenderer:
    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, lines: List[str], headless: bool) -> None:
        rs = self._rs
        rs._last_panel_lines = list(lines)
        if headless:
            return
        left = rs.window.width * BOARD_WIDTH_PCT + INFO_PANEL_MARGIN
        top = rs.window.height - INFO_PANEL_MARGIN - INFO_LINE_HEIGHT
        for index, line in enumerate(lines):
            if not line:
                continue
            arcade.draw_text(line, left, top - index * INFO_LINE_HEIGHT, TEXT_COLOR, FONT_SIZE)
