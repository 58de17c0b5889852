# renderer.py
import pygame

from config import COLOR_BACKGROUND, COLOR_TEXT
from surface import Surface


class PygameSurface(Surface):
    """Surface adapter over a pygame.Surface (often a subsurface of the window)."""

    def __init__(self, target, background=COLOR_BACKGROUND):
        if not isinstance(target, pygame.Surface):
            raise TypeError(f"expected pygame.Surface, got {type(target).__name__}")
        self.target = target
        self.background = background

    def set_pixel(self, x, y, color, size=1):
        if len(color) == 4 and color[3] < 255:
            block = pygame.Surface((size, size), pygame.SRCALPHA)
            block.fill(color)
            self.target.blit(block, (x, y))
        else:
            self.target.fill(color[:3], pygame.Rect(x, y, size, size))

    def clear_region(self):
        self.target.fill(self.background)

    def dimensions(self):
        return self.target.get_size()

    def draw_line(self, x0, y0, x1, y1, color, width=1):
        if len(color) == 4 and color[3] < 255:
            # pygame.draw ignores alpha on opaque targets; draw through a layer
            layer = pygame.Surface(self.target.get_size(), pygame.SRCALPHA)
            pygame.draw.line(layer, color, (x0, y0), (x1, y1), width)
            self.target.blit(layer, (0, 0))
        else:
            pygame.draw.line(self.target, color[:3], (x0, y0), (x1, y1), width)


# ------------------ drawing helpers ------------------

def draw_particles(screen, particles):
    layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    for p in particles:
        if p.shape == 'circle':
            pygame.draw.circle(layer, p.color, (int(p.x), int(p.y)), max(1, int(p.size)))
        else:
            pygame.draw.rect(layer, p.color, pygame.Rect(int(p.x), int(p.y), int(p.size), int(p.size)))
    screen.blit(layer, (0, 0))

def draw_panel(screen, font, lines, pos, title_color=(255, 255, 0)):
    """Text block on a translucent dark panel; first line is the title."""
    surf_w = max(font.size(line)[0] for line in lines) + 12
    surf_h = 20 * len(lines) + 10
    surf = pygame.Surface((surf_w, surf_h), flags=pygame.SRCALPHA)
    surf.fill((0, 0, 0, 150))
    for i, line in enumerate(lines):
        col = title_color if i == 0 else COLOR_TEXT
        txt = font.render(line, True, col)
        surf.blit(txt, (6, 6 + i * 20))
    screen.blit(surf, pos)
    return surf.get_rect(topleft=pos)

def draw_frame(screen, rect, color=(75, 85, 99)):
    pygame.draw.rect(screen, color, rect.inflate(4, 4), 2)

def draw_dashed_line(screen, color, start, end, dash=5, width=2):
    x0, y0 = start
    x1, y1 = end
    length = max(abs(x1 - x0), abs(y1 - y0))
    if length == 0:
        return
    for i in range(0, length, dash * 2):
        t0 = i / length
        t1 = min(i + dash, length) / length
        a = (x0 + (x1 - x0) * t0, y0 + (y1 - y0) * t0)
        b = (x0 + (x1 - x0) * t1, y0 + (y1 - y0) * t1)
        pygame.draw.line(screen, color, a, b, width)
