import logging

from esper import World

from jumpboard.constants import MILESTONE_MESSAGES, VICTORY_ROW
from jumpboard.events.bus import (
    EventBus,
    EVENT_ADVISORY_CLEARED,
    EVENT_ADVISORY_DISMISS,
    EVENT_ADVISORY_SHOWN,
    EVENT_JUMP_APPLIED,
    EVENT_MILESTONE_REACHED,
)
from jumpboard.world import advisory_message, milestone_tracker

logger = logging.getLogger(__name__)


class MilestoneSystem:
    """Tracks the best row reached and publishes one-time advisory messages."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_JUMP_APPLIED, self.on_jump_applied)
        self.event_bus.subscribe(EVENT_ADVISORY_DISMISS, self.on_advisory_dismiss)

    def on_jump_applied(self, sender, **kwargs):
        dst = kwargs.get('dst')
        if not dst:
            return
        row = dst[0]
        tracker = milestone_tracker(self.world)
        if row >= tracker.highest_row:
            return
        tracker.highest_row = row
        message = MILESTONE_MESSAGES.get(row)
        if message is None:
            return
        logger.info("Milestone reached at row %d", row)
        advisory_message(self.world).text = message
        self.event_bus.emit(EVENT_MILESTONE_REACHED, row=row, message=message, victory=row == VICTORY_ROW)
        self.event_bus.emit(EVENT_ADVISORY_SHOWN, message=message)

    def on_advisory_dismiss(self, sender, **kwargs):
        advisory = advisory_message(self.world)
        if advisory.text is None:
            return
        advisory.text = None
        self.event_bus.emit(EVENT_ADVISORY_CLEARED, reason=kwargs.get('reason') or 'dismissed')
