import logging

from esper import World

from jumpboard.events.bus import (
    EventBus,
    EVENT_CELL_ACTIVATED,
    EVENT_PAN_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_VIEWPORT_CHANGED,
)
from jumpboard.constants import PAN_STEP
from jumpboard.world import viewport_state

logger = logging.getLogger(__name__)

PAN_LEFT = 'left'
PAN_RIGHT = 'right'


class ViewportSystem:
    """Owns the scrolling column window and the visible-to-absolute mapping.

    Every cell interaction arrives as EVENT_CELL_ACTIVATED in visible
    coordinates and leaves as EVENT_TILE_CLICK in absolute coordinates.
    """

    def __init__(self, world: World, event_bus: EventBus, *, step: int = PAN_STEP):
        self.world = world
        self.event_bus = event_bus
        self.step = step
        self.event_bus.subscribe(EVENT_PAN_REQUEST, self.on_pan_request)
        self.event_bus.subscribe(EVENT_CELL_ACTIVATED, self.on_cell_activated)

    def to_absolute(self, visible_col: int) -> int:
        return visible_col + viewport_state(self.world).offset

    def is_visible_col(self, visible_col: int) -> bool:
        return 0 <= visible_col < viewport_state(self.world).visible_cols

    def can_pan_left(self) -> bool:
        return viewport_state(self.world).offset > 0

    def can_pan_right(self) -> bool:
        viewport = viewport_state(self.world)
        return viewport.offset < viewport.max_offset

    def on_cell_activated(self, sender, **kwargs):
        row = kwargs.get('row')
        visible_col = kwargs.get('visible_col')
        if row is None or visible_col is None:
            return
        try:
            row = int(row)
            visible_col = int(visible_col)
        except (TypeError, ValueError, OverflowError):
            return
        if not self.is_visible_col(visible_col):
            return
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=self.to_absolute(visible_col))

    def on_pan_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction == PAN_LEFT:
            self.pan(-self.step)
        elif direction == PAN_RIGHT:
            self.pan(self.step)

    def pan(self, delta: int) -> int:
        viewport = viewport_state(self.world)
        previous = viewport.offset
        viewport.offset = min(viewport.max_offset, max(0, previous + delta))
        if viewport.offset != previous:
            logger.debug("Viewport offset %d -> %d", previous, viewport.offset)
            self.event_bus.emit(EVENT_VIEWPORT_CHANGED, offset=viewport.offset, previous=previous)
        return viewport.offset
