# particles.py
import random
from typing import NamedTuple

from config import PARTICLE_COUNT, PARTICLE_GRAY


class Particle(NamedTuple):
    x: float
    y: float
    size: float
    vx: float
    vy: float
    alpha: float
    shape: str  # 'circle' or 'square'

    @property
    def color(self):
        return (PARTICLE_GRAY, PARTICLE_GRAY, PARTICLE_GRAY, int(self.alpha * 255))


def spawn(bounds, rng=random):
    w, h = bounds
    return Particle(
        x=rng.random() * w,
        y=rng.random() * h,
        size=rng.random() * 5 + 1,
        vx=rng.random() - 0.5,
        vy=rng.random() - 0.5,
        alpha=rng.random() * 0.3 + 0.1,
        shape='circle' if rng.random() > 0.5 else 'square',
    )

def advance(p, bounds, rng=random):
    """Move one step; bounce at the edges, respawn if it drifted too far out."""
    w, h = bounds
    x, y = p.x + p.vx, p.y + p.vy
    vx = -p.vx if (x < 0 or x > w) else p.vx
    vy = -p.vy if (y < 0 or y > h) else p.vy
    if x < -p.size or x > w + p.size or y < -p.size or y > h + p.size:
        x, y = rng.random() * w, rng.random() * h
    return p._replace(x=x, y=y, vx=vx, vy=vy)


class ParticleField:
    def __init__(self, bounds, count=PARTICLE_COUNT, rng=None):
        self.bounds = bounds
        self.rng = rng or random.Random()
        self.particles = tuple(spawn(bounds, self.rng) for _ in range(count))

    def update(self, bounds=None):
        if bounds is not None:
            self.bounds = bounds
        self.particles = tuple(advance(p, self.bounds, self.rng) for p in self.particles)
