from esper import World

from jumpboard.components.advisory_message import AdvisoryMessage
from jumpboard.components.board import BoardGrid
from jumpboard.components.milestone_tracker import MilestoneTracker
from jumpboard.components.move_history import MoveHistory
from jumpboard.components.selection import Selection
from jumpboard.components.viewport import Viewport
from jumpboard.constants import ROWS, START_ROW, TOTAL_COLS, VISIBLE_COLS
from jumpboard.systems.board_ops import create_initial_board


def default_viewport_offset(total_cols: int, visible_cols: int) -> int:
    return max(0, total_cols - visible_cols) // 2


def create_world(
    *,
    rows: int = ROWS,
    total_cols: int = TOTAL_COLS,
    visible_cols: int = VISIBLE_COLS,
    start_row: int = START_ROW,
) -> World:
    """Build a world with a single game entity carrying all board state."""
    world = World()
    setattr(world, "start_row", start_row)
    world.create_entity(
        BoardGrid(rows=rows, cols=total_cols, cells=create_initial_board(rows, total_cols, start_row=start_row)),
        Selection(),
        MoveHistory(),
        Viewport(
            offset=default_viewport_offset(total_cols, visible_cols),
            visible_cols=min(visible_cols, total_cols),
            total_cols=total_cols,
        ),
        MilestoneTracker(highest_row=start_row),
        AdvisoryMessage(),
    )
    return world


def game_entity(world: World) -> int:
    for entity, _ in world.get_component(BoardGrid):
        return entity
    raise RuntimeError("Board state not found; build the world with create_world")


def board_grid(world: World) -> BoardGrid:
    return world.component_for_entity(game_entity(world), BoardGrid)


def selection_state(world: World) -> Selection:
    return world.component_for_entity(game_entity(world), Selection)


def move_history(world: World) -> MoveHistory:
    return world.component_for_entity(game_entity(world), MoveHistory)


def viewport_state(world: World) -> Viewport:
    return world.component_for_entity(game_entity(world), Viewport)


def milestone_tracker(world: World) -> MilestoneTracker:
    return world.component_for_entity(game_entity(world), MilestoneTracker)


def advisory_message(world: World) -> AdvisoryMessage:
    return world.component_for_entity(game_entity(world), AdvisoryMessage)
