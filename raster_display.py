# raster_display.py
import logging
from dataclasses import dataclass

import numpy as np

from algorithms import bresenham_line
from config import (COLOR_BACKGROUND, COLOR_LINE, PIXEL_SIZE,
                    DEFAULT_SIMULATION_SPEED, EMPTY_INPUT_MESSAGE)
from model import Readout, IDLE_READOUT
from pacing import raster_tick_delay, clamp_speed
from player import Ticker
from states import SimState
from surface import Surface

log = logging.getLogger(__name__)


@dataclass
class RasterCursor:
    scanline: int = 0
    column: int = 0
    frame_done: bool = False

    def reset(self):
        self.scanline = 0
        self.column = 0
        self.frame_done = False


def build_framebuffer(segments, width, height, background=COLOR_BACKGROUND,
                      foreground=COLOR_LINE):
    """(h, w, 3) uint8 grid: background everywhere, foreground along each
    segment's Bresenham pixels in list order. Off-surface pixels are clipped."""
    if width <= 0 or height <= 0:
        raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
    fb = np.empty((height, width, 3), dtype=np.uint8)
    fb[...] = background[:3]
    for seg in segments:
        for step in bresenham_line(*seg.coords):
            x, y = step.position
            if 0 <= x < width and 0 <= y < height:
                fb[y, x] = foreground[:3]
    return fb


class RasterDisplaySimulator:
    """Sweeps a framebuffer onto a surface one cell per tick, row-major,
    and starts over forever: clear, back to (0, 0), next frame."""

    def __init__(self, surface, scheduler, speed=DEFAULT_SIMULATION_SPEED,
                 background=COLOR_BACKGROUND, foreground=COLOR_LINE,
                 pixel_size=PIXEL_SIZE):
        if not isinstance(surface, Surface):
            raise TypeError(f"raster display needs a Surface, got {type(surface).__name__}")
        self.surface = surface
        self.ticker = Ticker(scheduler, 'raster-scan')
        self.speed = clamp_speed(speed)
        self.background = background
        self.foreground = foreground
        self.pixel_size = pixel_size
        self.framebuffer = None
        self.cursor = RasterCursor()
        self.state = SimState.IDLE
        self.frames_completed = 0
        self.readout = IDLE_READOUT
        self.status = 'Idle'
        self.on_frame = None

    @property
    def width(self):
        return 0 if self.framebuffer is None else self.framebuffer.shape[1]

    @property
    def height(self):
        return 0 if self.framebuffer is None else self.framebuffer.shape[0]

    def rebuild(self, segments, surface_size=None):
        """Replace the framebuffer and reset the cursor in one step.

        Safe while sweeping: ticks only run between calls, and the surface is
        cleared so no half of the old frame stays on screen."""
        width, height = surface_size or self.surface.dimensions()
        self.framebuffer = build_framebuffer(segments, width, height,
                                             self.background, self.foreground)
        self.cursor.reset()
        self.surface.clear_region()
        log.debug("raster framebuffer rebuilt: %dx%d, %d segments", width, height, len(segments))

    def tick_delay(self):
        return raster_tick_delay(self.speed, self.width, self.height)

    def set_speed(self, speed):
        self.speed = clamp_speed(speed)

    def tick(self):
        """Draw one cell, or finish the frame. Returns True on frame completion."""
        if self.framebuffer is None:
            return False
        c = self.cursor
        if c.scanline < self.height:
            color = tuple(int(v) for v in self.framebuffer[c.scanline, c.column])
            self.surface.set_pixel(c.column, c.scanline, color, self.pixel_size)
            self.readout = Readout(c.column, c.scanline,
                                   f"Scanline: {c.scanline}, Pixel: {c.column}")
            c.column += 1
            if c.column >= self.width:
                c.column = 0
                c.scanline += 1
            c.frame_done = False
            return False
        self.surface.clear_region()
        c.reset()
        c.frame_done = True
        self.frames_completed += 1
        self.readout = Readout('Done', 'Done', 'Raster refresh complete!')
        if self.on_frame is not None:
            self.on_frame(self.frames_completed)
        return True

    def start(self, segments):
        """Rebuild from `segments` and sweep from (0, 0). Empty input stays idle."""
        self.stop()
        if not segments:
            self.status = EMPTY_INPUT_MESSAGE
            return False
        self.rebuild(segments)
        self.state = SimState.SWEEPING
        self.status = 'Sweeping'
        self.ticker.start(self.tick, self.tick_delay)
        log.debug("raster sweep started, %.4f ms per cell", self.tick_delay())
        return True

    def stop(self):
        self.ticker.cancel()
        self.state = SimState.IDLE
        self.status = 'Idle'

    def reset(self):
        self.stop()
        self.framebuffer = None
        self.cursor.reset()
        self.frames_completed = 0
        self.readout = IDLE_READOUT
        self.surface.clear_region()
