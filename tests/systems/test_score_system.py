from hexmosaic.components.pixel import PixelColor
from hexmosaic.events.bus import EventBus, EVENT_CELL_SET_REQUEST, EVENT_SCORE_UPDATED
from hexmosaic.systems.board import BoardSystem
from hexmosaic.systems.score_system import ScoreSystem
from hexmosaic.world import create_world


def test_score_published_on_start_and_after_board_change():
    bus = EventBus()
    world = create_world(bus)
    updates = []
    bus.subscribe(EVENT_SCORE_UPDATED, lambda sender, **kw: updates.append(kw))
    BoardSystem(world, bus)
    score_system = ScoreSystem(world, bus)
    assert len(updates) == 1
    assert updates[0]["score"].total == 0
    assert updates[0]["counts"][PixelColor.WHITE] == (0, 30)

    bus.emit(EVENT_CELL_SET_REQUEST, x=0, y=3, color=PixelColor.WHITE)
    assert score_system.last_score.pixel_count == 1
    assert score_system.last_score.total == 13
    assert score_system.last_counts[PixelColor.WHITE] == (1, 30)
    assert updates[-1]["score"] is score_system.last_score
