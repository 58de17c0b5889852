# surface.py
import numpy as np

from algorithms import bresenham_line
from config import COLOR_BACKGROUND


class Surface:
    """Pixel-addressable drawing target used by the visualizer and simulators.

    Backends implement set_pixel / clear_region / dimensions. draw_line is the
    vector stroke used by the random-scan display; backends with a native
    line primitive override it.
    """

    def set_pixel(self, x, y, color, size=1):
        """Fill a size x size block anchored at (x, y)."""
        raise NotImplementedError

    def clear_region(self):
        raise NotImplementedError

    def dimensions(self):
        """Return (width, height) in pixels."""
        raise NotImplementedError

    def draw_line(self, x0, y0, x1, y1, color, width=1):
        for step in bresenham_line(x0, y0, x1, y1):
            self.set_pixel(step.x, step.y, color, width)


def _blend(dst, color):
    """Write `color` into the dst view, alpha-blending if it carries an alpha."""
    if len(color) == 4 and color[3] < 255:
        a = color[3] / 255.0
        src = np.array(color[:3], dtype=np.float32)
        dst[...] = (src * a + dst.astype(np.float32) * (1.0 - a)).astype(np.uint8)
    else:
        dst[...] = color[:3]


class ArraySurface(Surface):
    """Headless surface backed by an (h, w, 3) uint8 numpy array."""

    def __init__(self, width, height, background=COLOR_BACKGROUND):
        self.background = background
        self.resize(width, height)

    def set_pixel(self, x, y, color, size=1):
        x0 = max(0, x); x1 = min(self.width, x + size)
        y0 = max(0, y); y1 = min(self.height, y + size)
        if x1 <= x0 or y1 <= y0:
            return
        _blend(self.array[y0:y1, x0:x1], color)

    def clear_region(self):
        self.array[...] = self.background[:3]

    def dimensions(self):
        return self.width, self.height

    def resize(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.array = np.empty((height, width, 3), dtype=np.uint8)
        self.clear_region()

    def pixel(self, x, y):
        return tuple(int(c) for c in self.array[y, x])

    def lit_pixels(self):
        """Set of (x, y) whose color differs from the background."""
        mask = np.any(self.array != np.array(self.background[:3], dtype=np.uint8), axis=2)
        ys, xs = np.nonzero(mask)
        return set(zip(xs.tolist(), ys.tolist()))
