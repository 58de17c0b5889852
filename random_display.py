# random_display.py
import logging

from config import (COLOR_FADED, COLOR_BEAM, STROKE_WIDTH, HIGHLIGHT_STROKE_WIDTH,
                    DEFAULT_SIMULATION_SPEED, EMPTY_INPUT_MESSAGE)
from model import Readout, IDLE_READOUT
from pacing import random_tick_delay, clamp_speed
from player import Ticker
from states import SimState
from surface import Surface

log = logging.getLogger(__name__)


class RandomScanSimulator:
    """Vector display: every refresh tick re-strokes the whole display file
    and highlights the segment under the beam, then moves the beam on."""

    def __init__(self, surface, scheduler, segments, speed=DEFAULT_SIMULATION_SPEED,
                 color=COLOR_FADED, beam_color=COLOR_BEAM,
                 width=STROKE_WIDTH, beam_width=HIGHLIGHT_STROKE_WIDTH):
        if not isinstance(surface, Surface):
            raise TypeError(f"random-scan display needs a Surface, got {type(surface).__name__}")
        self.surface = surface
        self.segments = segments
        self.ticker = Ticker(scheduler, 'random-scan')
        self.speed = clamp_speed(speed)
        self.color = color
        self.beam_color = beam_color
        self.width = width
        self.beam_width = beam_width
        self.segment_index = 0
        self.state = SimState.IDLE
        self.refreshes_completed = 0
        self.readout = IDLE_READOUT
        self.status = 'Idle'
        self.on_refresh = None

    def tick_delay(self):
        return random_tick_delay(self.speed)

    def set_speed(self, speed):
        self.speed = clamp_speed(speed)

    def tick(self):
        """One refresh step. Returns True when the beam wraps to the first segment."""
        n = len(self.segments)
        if n == 0:
            self.segment_index = 0
            if self.state is SimState.SWEEPING:
                self.stop(clear=False)
                self.status = EMPTY_INPUT_MESSAGE
            return False
        if self.segment_index >= n:
            self.segment_index = 0
        self.surface.clear_region()
        for seg in self.segments:
            self.surface.draw_line(*seg.coords, self.color, self.width)
        active = self.segments[self.segment_index]
        self.surface.draw_line(*active.coords, self.beam_color, self.beam_width)
        self.readout = Readout(f"Line {self.segment_index + 1}", str(active),
                               'Tracing line segment')
        self.segment_index += 1
        if self.segment_index < n:
            return False
        self.segment_index = 0
        self.refreshes_completed += 1
        self.readout = Readout('Done', 'Done', 'Random scan refresh complete!')
        if self.on_refresh is not None:
            self.on_refresh(self.refreshes_completed)
        return True

    def start(self):
        self.stop()
        self.segment_index = 0
        if not self.segments:
            self.status = EMPTY_INPUT_MESSAGE
            return False
        self.state = SimState.SWEEPING
        self.status = 'Refreshing'
        self.ticker.start(self.tick, self.tick_delay)
        log.debug("random scan started over %d segments", len(self.segments))
        return True

    def stop(self, clear=True):
        self.ticker.cancel()
        self.state = SimState.IDLE
        self.status = 'Idle'
        if clear:
            self.surface.clear_region()

    def reset(self):
        self.stop()
        self.segment_index = 0
        self.refreshes_completed = 0
        self.readout = IDLE_READOUT
