# pacing.py
"""Speed-to-delay functions shared by the player and both display simulators.

`speed` is the user-facing slider value in milliseconds. The algorithm player
uses it directly as the per-step interval. The raster display spreads one
speed unit over the whole surface so a full sweep takes roughly the same time
whatever the resolution; the random-scan display pays per segment, not per
pixel, so its delay ignores the surface size.
"""
import math

from algorithms import InvalidParameter
from config import (SPEED_MIN_MS, SPEED_MAX_MS, RASTER_SWEEP_CONSTANT,
                    RANDOM_SCAN_FACTOR)

def clamp_speed(speed_ms, lo=SPEED_MIN_MS, hi=SPEED_MAX_MS):
    if isinstance(speed_ms, bool) or not isinstance(speed_ms, (int, float)):
        raise InvalidParameter(f"speed must be a number, got {speed_ms!r}")
    if not math.isfinite(speed_ms) or speed_ms <= 0:
        raise InvalidParameter(f"speed must be > 0, got {speed_ms!r}")
    return max(lo, min(hi, speed_ms))

def raster_tick_delay(speed_ms, width, height, constant=RASTER_SWEEP_CONSTANT):
    """Delay in ms between two framebuffer cells: speed / (w*h) * constant."""
    if width <= 0 or height <= 0:
        raise InvalidParameter(f"surface size must be positive, got {width}x{height}")
    return clamp_speed(speed_ms) / (width * height) * constant

def random_tick_delay(speed_ms, factor=RANDOM_SCAN_FACTOR):
    """Delay in ms between two display-file refresh ticks."""
    return clamp_speed(speed_ms) * factor
