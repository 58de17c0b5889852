# model.py
from dataclasses import dataclass
from typing import NamedTuple

from config import IDLE_INFO


class Point(NamedTuple):
    x: int
    y: int


class PixelStep(NamedTuple):
    """One rasterizer output: the pixel plus the algorithm state that produced it."""
    position: Point
    description: str

    @property
    def x(self):
        return self.position.x

    @property
    def y(self):
        return self.position.y


class Readout(NamedTuple):
    """(x, y, info) triple shown next to a canvas; x/y may be labels like 'Done'."""
    x: object
    y: object
    info: str


IDLE_READOUT = Readout('--', '--', IDLE_INFO)


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x0, y0, x1, y1):
        return cls(Point(x0, y0), Point(x1, y1))

    @property
    def coords(self):
        return self.start.x, self.start.y, self.end.x, self.end.y

    def __str__(self):
        return f'({self.start.x},{self.start.y}) to ({self.end.x},{self.end.y})'


class SegmentList:
    """Insertion-ordered display file of user-drawn segments."""

    def __init__(self, segments=()):
        self._segments = list(segments)

    def add(self, segment):
        if not isinstance(segment, LineSegment):
            raise TypeError(f'expected LineSegment, got {type(segment).__name__}')
        self._segments.append(segment)
        return segment

    def clear(self):
        self._segments.clear()

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __getitem__(self, index):
        return self._segments[index]

    def __bool__(self):
        return bool(self._segments)
