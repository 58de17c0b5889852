# visualizer.py
import logging

from algorithms import rasterize, InvalidParameter, ALGORITHMS
from config import (DEFAULT_ALGORITHM, DEFAULT_PARAMS, DEFAULT_ANIMATION_DELAY,
                    COLOR_LINE, COLOR_STEP_HIGHLIGHT, PIXEL_SIZE, HIGHLIGHT_PIXEL_SIZE)
from model import Readout, IDLE_READOUT
from player import StepPlayer
from states import PlaybackState
from surface import Surface

log = logging.getLogger(__name__)

DONE_READOUT = Readout('Done', 'Done', 'Algorithm complete!')


class AlgorithmVisualizer:
    """Animates one scan-conversion run pixel by pixel on a surface.

    The current pixel is drawn large in the highlight color; when the next
    one arrives the previous pixel is redrawn at normal size and color.
    """

    def __init__(self, surface, scheduler, speed=DEFAULT_ANIMATION_DELAY):
        if not isinstance(surface, Surface):
            raise TypeError(f"visualizer needs a Surface, got {type(surface).__name__}")
        self.surface = surface
        self.player = StepPlayer(scheduler, name='algorithm')
        self.player.set_interval(speed)
        self.algorithm = DEFAULT_ALGORITHM
        self.params = dict(DEFAULT_PARAMS)
        self.pixels = ()
        self.readout = IDLE_READOUT
        self.message = ''
        # called with no arguments after every visible change
        self.on_change = None

    @property
    def speed(self):
        return self.player.interval

    @property
    def animating(self):
        return self.player.state is PlaybackState.RUNNING

    @property
    def state(self):
        return self.player.state

    def _changed(self):
        if self.on_change is not None:
            self.on_change()

    def set_algorithm(self, algorithm):
        if algorithm not in ALGORITHMS:
            raise InvalidParameter(f"Unknown algorithm {algorithm!r}")
        self.algorithm = algorithm
        self.clear()

    def set_params(self, **params):
        self.params.update(params)

    def set_speed(self, speed):
        self.player.set_interval(speed)

    def start(self, algorithm=None, **params):
        """Validate, rasterize and start animating. Raises InvalidParameter
        (with .message set) before touching the surface if the input is bad."""
        algorithm = algorithm or self.algorithm
        merged = dict(self.params, **params)
        try:
            pixels = rasterize(algorithm, merged)
        except InvalidParameter as e:
            self.message = str(e)
            log.warning("rejected %s input: %s", algorithm, e)
            raise
        self.clear()
        self.algorithm = algorithm
        self.params = merged
        self.message = ''
        self.pixels = pixels
        log.info("visualizing %s: %d pixels every %s ms", self.algorithm, len(pixels), self.speed)
        self.player.start(pixels, self.speed, self._on_step, self._on_done)
        return pixels

    def _on_step(self, step, index):
        if index > 0:
            prev = self.pixels[index - 1]
            self.surface.set_pixel(prev.x, prev.y, COLOR_LINE, PIXEL_SIZE)
        self.surface.set_pixel(step.x, step.y, COLOR_STEP_HIGHLIGHT, HIGHLIGHT_PIXEL_SIZE)
        self.readout = Readout(step.x, step.y, step.description)
        self._changed()

    def _on_done(self):
        if self.pixels:
            last = self.pixels[-1]
            self.surface.set_pixel(last.x, last.y, COLOR_LINE, PIXEL_SIZE)
        self.readout = DONE_READOUT
        log.info("%s complete", self.algorithm)
        self._changed()

    def pause(self):
        return self.player.pause()

    def resume(self):
        return self.player.resume()

    def clear(self):
        self.player.cancel()
        self.surface.clear_region()
        self.pixels = ()
        self.readout = IDLE_READOUT
        self._changed()

    def reset(self):
        self.clear()
        self.algorithm = DEFAULT_ALGORITHM
        self.params = dict(DEFAULT_PARAMS)
        self.player.set_interval(DEFAULT_ANIMATION_DELAY)
        self.message = ''
