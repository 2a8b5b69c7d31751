from typing import Optional

from esper import World

from hexmosaic.components.board import HexBoard
from hexmosaic.components.palette import PaletteRegistry, PixelPalette
from hexmosaic.components.pixel import PixelColor
from hexmosaic.components.solver_settings import SolverSettings
from hexmosaic.constants import REALISTIC_HEIGHT_PENALTY
from hexmosaic.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    height_penalty: float = REALISTIC_HEIGHT_PENALTY,
    pixel_filter: Optional[PixelColor] = None,
    board: Optional[HexBoard] = None,
) -> World:
    """Build a world holding the board entity, solver settings and the palette registry.

    ``event_bus`` is accepted so callers wire systems against the same bus they
    created the world for; the world itself does not subscribe to anything.
    """
    world = World()

    # Board plus the user's solver choices live on a single entity.
    world.create_entity(
        board if board is not None else HexBoard(),
        SolverSettings(height_penalty=height_penalty, pixel_filter=pixel_filter),
    )

    world.create_entity(PaletteRegistry(), PixelPalette())
    return world


def get_board(world: World) -> HexBoard:
    for _, board in world.get_component(HexBoard):
        return board
    raise RuntimeError("HexBoard not found")


def get_settings(world: World) -> SolverSettings:
    for _, settings in world.get_component(SolverSettings):
        return settings
    raise RuntimeError("SolverSettings not found")


def get_palette(world: World) -> PixelPalette:
    for entity, _ in world.get_component(PaletteRegistry):
        return world.component_for_entity(entity, PixelPalette)
    raise RuntimeError("PixelPalette definitions not found")
