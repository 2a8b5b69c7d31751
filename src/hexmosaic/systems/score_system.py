from esper import World

from hexmosaic.api import pixel_counts
from hexmosaic.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_SCORE_UPDATED
from hexmosaic.systems.scoring import ScoreSnapshot, compute_score
from hexmosaic.world import get_board


class ScoreSystem:
    """Recomputes the score whenever the board changes and caches it for display."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.last_score: ScoreSnapshot = ScoreSnapshot()
        self.last_counts = {}
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.refresh()

    def on_board_changed(self, sender, **kwargs):
        self.refresh()

    def refresh(self) -> ScoreSnapshot:
        board = get_board(self.world)
        self.last_score = compute_score(board)
        self.last_counts = pixel_counts(board)
        self.event_bus.emit(EVENT_SCORE_UPDATED, score=self.last_score, counts=dict(self.last_counts))
        return self.last_score
