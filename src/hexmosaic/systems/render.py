from typing import Dict, List, Optional, Tuple

from esper import World

from hexmosaic.events.bus import EventBus, EVENT_CELL_HOVER, EVENT_SCORE_UPDATED
from hexmosaic.rendering.board_renderer import BoardRenderer
from hexmosaic.rendering.info_panel_renderer import InfoPanelRenderer, describe_panel
from hexmosaic.systems.scoring import ScoreSnapshot
from hexmosaic.ui.layout import compute_board_geometry
from hexmosaic.world import get_board, get_palette, get_settings


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_CELL_HOVER, self.on_cell_hover)
        self.event_bus.subscribe(EVENT_SCORE_UPDATED, self.on_score_updated)
        self.hovered: Optional[Tuple[int, int]] = None
        self.score = ScoreSnapshot()
        self.counts: dict = {}
        self._last_cell_layout: Dict[Tuple[int, int], dict] = {}
        self._last_panel_lines: List[str] = []
        self._board_renderer = BoardRenderer(self)
        self._info_panel_renderer = InfoPanelRenderer(self)

    def on_cell_hover(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        self.hovered = None if x is None or y is None else (x, y)

    def on_score_updated(self, sender, **kwargs):
        score = kwargs.get('score')
        if score is not None:
            self.score = score
        self.counts = kwargs.get('counts') or {}

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: with no active Arcade window (unit tests) skip draw calls but still build layout caches.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        left, bottom = compute_board_geometry(self.window.width, self.window.height)
        board = get_board(self.world)
        self._board_renderer.render(arcade, board, get_palette(self.world), left, bottom, headless=headless)
        lines = describe_panel(self.score, self.counts, get_settings(self.world))
        self._info_panel_renderer.render(arcade, lines, headless=headless)
