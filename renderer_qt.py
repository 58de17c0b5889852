# renderer_qt.py
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QImage, QPainter, QPen

from config import COLOR_BACKGROUND
from surface import Surface


def to_qcolor(color):
    if len(color) == 4:
        return QColor(color[0], color[1], color[2], color[3])
    return QColor(color[0], color[1], color[2])


class QImageSurface(Surface):
    """Surface adapter over a QImage; widgets blit it in paintEvent."""

    def __init__(self, width, height, background=COLOR_BACKGROUND):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.background = background
        self.image = QImage(width, height, QImage.Format_ARGB32)
        self.clear_region()

    def set_pixel(self, x, y, color, size=1):
        c = to_qcolor(color)
        if size == 1 and c.alpha() == 255:
            if 0 <= x < self.image.width() and 0 <= y < self.image.height():
                self.image.setPixel(x, y, c.rgba())
            return
        qp = QPainter(self.image)
        qp.fillRect(x, y, size, size, c)
        qp.end()

    def clear_region(self):
        self.image.fill(to_qcolor(self.background))

    def dimensions(self):
        return self.image.width(), self.image.height()

    def resize(self, width, height):
        self.image = QImage(width, height, QImage.Format_ARGB32)
        self.clear_region()

    def draw_line(self, x0, y0, x1, y1, color, width=1):
        qp = QPainter(self.image)
        pen = QPen(to_qcolor(color))
        pen.setWidth(width)
        pen.setCapStyle(Qt.RoundCap)
        qp.setPen(pen)
        qp.drawLine(x0, y0, x1, y1)
        qp.end()

    def pixel(self, x, y):
        c = QColor(self.image.pixel(x, y))
        return c.red(), c.green(), c.blue()
