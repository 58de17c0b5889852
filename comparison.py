# comparison.py
import logging

from algorithms import InvalidParameter, require_int
from config import DEFAULT_SIMULATION_SPEED, EMPTY_INPUT_MESSAGE
from model import LineSegment, SegmentList
from pacing import clamp_speed
from random_display import RandomScanSimulator
from raster_display import RasterDisplaySimulator

log = logging.getLogger(__name__)


class DisplayComparison:
    """Drives a raster and a random-scan display side by side from one
    shared display file of user-drawn segments."""

    def __init__(self, raster_surface, random_surface, scheduler,
                 speed=DEFAULT_SIMULATION_SPEED):
        self.segments = SegmentList()
        self.speed = clamp_speed(speed)
        self.raster = RasterDisplaySimulator(raster_surface, scheduler, self.speed)
        self.random = RandomScanSimulator(random_surface, scheduler, self.segments, self.speed)
        self.simulating = False
        self.message = ''

    @property
    def status(self):
        if self.message:
            return self.message
        if self.simulating:
            return f'Simulating {len(self.segments)} segment(s) at {self.speed} ms'
        return 'Paused' if self.segments else 'Idle'

    def add_segment(self, x0, y0, x1, y1):
        """Append a segment. Raises InvalidParameter (with .message set) for
        non-integral coordinates and leaves the display file untouched."""
        try:
            coords = [require_int(name, v) for name, v in
                      zip(('x0', 'y0', 'x1', 'y1'), (x0, y0, x1, y1))]
        except InvalidParameter as e:
            self.message = str(e)
            log.warning("rejected segment: %s", e)
            raise
        segment = self.segments.add(LineSegment.from_coords(*coords))
        log.info("segment %d added: %s", len(self.segments), segment)
        self.message = ''
        if self.simulating:
            # stale runs must not draw over the rebuilt framebuffer
            self._restart()
        return segment

    def start(self):
        if not self.segments:
            self.message = EMPTY_INPUT_MESSAGE
            log.warning("start requested with an empty display file")
            return False
        self.message = ''
        self._restart()
        log.info("simulation started with %d segments", len(self.segments))
        return True

    def _restart(self):
        self.raster.start(self.segments)
        self.random.start()
        self.simulating = True

    def pause(self):
        self.raster.stop()
        self.random.stop()
        self.simulating = False
        log.info("simulation paused")

    def clear_all(self):
        self.pause()
        self.segments.clear()
        self.raster.reset()
        self.random.reset()
        self.message = ''
        log.info("display file cleared")

    def set_speed(self, speed):
        self.speed = clamp_speed(speed)
        self.raster.set_speed(self.speed)
        self.random.set_speed(self.speed)

    def surface_resized(self):
        if self.simulating:
            self._restart()
