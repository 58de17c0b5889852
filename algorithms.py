# algorithms.py
import logging
import math
import numbers

from model import Point, PixelStep

log = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    """Raised before rasterization when an input is non-numeric or out of domain."""


def _round_half_up(v):
    return int(math.floor(v + 0.5))

def require_int(name, value):
    """Accept ints and integral floats; reject bools, strings, NaN/inf and fractions."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise InvalidParameter(f"{name} must be a whole pixel coordinate, got {value!r}")
    return int(value)

def dda_line(x0, y0, x1, y1):
    """Digital Differential Analyzer line algorithm.

    Emits steps+1 pixels where steps = max(|dx|, |dy|). Rounded positions are
    not deduplicated, so shallow slopes can revisit a pixel."""
    x0, y0 = require_int('x0', x0), require_int('y0', y0)
    x1, y1 = require_int('x1', x1), require_int('y1', y1)
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return (PixelStep(Point(x0, y0), f"Step 0: x={x0:.2f}, y={y0:.2f}"),)
    x_inc = dx / steps
    y_inc = dy / steps
    x, y = float(x0), float(y0)
    pts = []
    for i in range(steps + 1):
        pts.append(PixelStep(Point(_round_half_up(x), _round_half_up(y)),
                             f"Step {i}: x={x:.2f}, y={y:.2f}"))
        x += x_inc
        y += y_inc
    return tuple(pts)

def bresenham_line(x0, y0, x1, y1):
    """Integer Bresenham line algorithm. Inclusive of both endpoints."""
    x0, y0 = require_int('x0', x0), require_int('y0', y0)
    x1, y1 = require_int('x1', x1), require_int('y1', y1)
    pts = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0
    i = 0
    while True:
        pts.append(PixelStep(Point(x, y), f"Step {i}: Pixel({x}, {y}), Error={err}"))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        i += 1
    return tuple(pts)

def _octants(cx, cy, x, y, info):
    return [
        PixelStep(Point(cx + x, cy + y), info),
        PixelStep(Point(cx + y, cy + x), info),
        PixelStep(Point(cx - x, cy + y), info),
        PixelStep(Point(cx - y, cy + x), info),
        PixelStep(Point(cx - x, cy - y), info),
        PixelStep(Point(cx - y, cy - x), info),
        PixelStep(Point(cx + x, cy - y), info),
        PixelStep(Point(cx + y, cy - x), info),
    ]

def midpoint_circle(cx, cy, r):
    """Midpoint circle algorithm; 8 symmetric points per (x, y) pair, generation order."""
    cx, cy = require_int('cx', cx), require_int('cy', cy)
    r = require_int('r', r)
    if r <= 0:
        raise InvalidParameter("Radius must be a positive number.")
    x = 0
    y = r
    p = 1 - r
    pts = _octants(cx, cy, x, y, f"Initial: x={x}, y={y}, p={p}")
    i = 0
    while x < y:
        x += 1
        if p < 0:
            p = p + 2*x + 1
        else:
            y -= 1
            p = p + 2*x + 1 - 2*y
        i += 1
        pts.extend(_octants(cx, cy, x, y, f"Step {i}: x={x}, y={y}, p={p}"))
    return tuple(pts)


ALGORITHMS = {
    'dda': (dda_line, ('x0', 'y0', 'x1', 'y1')),
    'bresenham': (bresenham_line, ('x0', 'y0', 'x1', 'y1')),
    'midpointCircle': (midpoint_circle, ('cx', 'cy', 'r')),
}

def rasterize(algorithm, params):
    """Run `algorithm` ('dda', 'bresenham' or 'midpointCircle') with the
    parameters it needs taken from `params`; extra keys are ignored."""
    if algorithm not in ALGORITHMS:
        raise InvalidParameter(f"Unknown algorithm {algorithm!r}")
    func, names = ALGORITHMS[algorithm]
    missing = [n for n in names if n not in params]
    if missing:
        raise InvalidParameter(f"Missing parameter(s) for {algorithm}: {', '.join(missing)}")
    pixels = func(*(params[n] for n in names))
    log.debug("%s produced %d pixels", algorithm, len(pixels))
    return pixels
