"""Entry point for the Summit Jump peg-jump puzzle.

Sets up the board engine, presentation systems, and the Arcade window.
"""
import logging
import os

from arcade import Window, run, set_background_color, color
from jumpboard.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from jumpboard.engine import BoardEngine
from jumpboard.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from jumpboard.systems.input import InputSystem
from jumpboard.systems.message_timer import MessageTimerSystem
from jumpboard.systems.render import RenderSystem

logger = logging.getLogger(__name__)


class SummitJumpWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.engine = BoardEngine(self.event_bus)

        # Presentation systems
        self.message_timer_system = MessageTimerSystem(self.event_bus)
        self.engine.attach_timer(self.message_timer_system)
        self.render_system = RenderSystem(self.event_bus, self, self.engine)
        self.input_system = InputSystem(self.event_bus, self, self.engine)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        self.engine.close()
        super().on_close()


def main():
    logging.basicConfig(
        level=os.environ.get("JUMPBOARD_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s", WINDOW_TITLE)
    SummitJumpWindow()
    run()

if __name__ == "__main__":
    main()
