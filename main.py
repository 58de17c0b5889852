# main.py
"""Raster vs random-scan display comparison (pygame).

Drag on the input canvas to add line segments to the display file.
SPACE start/pause, C clear all, +/- simulation speed, ESC quit.
"""
import logging
import os
import sys

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
import pygame
from pygame.locals import *

from comparison import DisplayComparison
from config import (FPS, WINDOW_TITLE, INPUT_CANVAS, DISPLAY_CANVAS, PANEL_GAP,
                    COLOR_WINDOW, COLOR_BACKGROUND, COLOR_INPUT, COLOR_PREVIEW,
                    SPEED_STEP_MS, SPEED_MIN_MS, SPEED_MAX_MS, MESSAGE_TIMEOUT_MS,
                    LOG_LEVEL, LOG_FORMAT)
from particles import ParticleField
from player import LoopScheduler
from renderer import PygameSurface, draw_particles, draw_panel, draw_frame, draw_dashed_line

log = logging.getLogger(__name__)

# callbacks fired per frame at most; keeps a slow machine from stalling on raster backlog
MAX_TICKS_PER_FRAME = 20000

def layout():
    iw, ih = INPUT_CANVAS
    dw, dh = DISPLAY_CANVAS
    top = 40
    input_rect = pygame.Rect(PANEL_GAP, top, iw, ih)
    raster_rect = pygame.Rect(PANEL_GAP, top + ih + PANEL_GAP * 2, dw, dh)
    random_rect = pygame.Rect(raster_rect.right + PANEL_GAP, raster_rect.top, dw, dh)
    size = (random_rect.right + PANEL_GAP, raster_rect.bottom + PANEL_GAP)
    return size, input_rect, raster_rect, random_rect

def init_pygame(size):
    pygame.init()
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption(WINDOW_TITLE + ' - Raster vs Random Scan')
    return screen

def readout_lines(title, readout, status):
    return [title, f"X: {readout.x}", f"Y: {readout.y}", f"Info: {readout.info}", status]

def draw_input(canvas, segments, preview):
    canvas.fill(COLOR_BACKGROUND)
    for seg in segments:
        pygame.draw.line(canvas, COLOR_INPUT, seg.start, seg.end, 2)
    if preview:
        draw_dashed_line(canvas, COLOR_PREVIEW, preview[0], preview[1])

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    size, input_rect, raster_rect, random_rect = layout()
    screen = init_pygame(size)
    font = pygame.font.Font(None, 20)

    input_canvas = pygame.Surface(input_rect.size)
    raster_canvas = pygame.Surface(raster_rect.size)
    random_canvas = pygame.Surface(random_rect.size)
    raster_surface = PygameSurface(raster_canvas)
    random_surface = PygameSurface(random_canvas)
    raster_surface.clear_region()
    random_surface.clear_region()

    scheduler = LoopScheduler(now=pygame.time.get_ticks())
    sim = DisplayComparison(raster_surface, random_surface, scheduler)
    field = ParticleField(size)

    clock = pygame.time.Clock()
    running = True
    drawing_from = None
    preview = None
    banner = None   # (text, expires_at_ms)
    log.info("comparison window %dx%d", *size)

    while running:
        clock.tick(FPS)
        now = pygame.time.get_ticks()

        for ev in pygame.event.get():
            if ev.type == QUIT:
                running = False
            elif ev.type == KEYDOWN:
                if ev.key == K_ESCAPE:
                    running = False
                elif ev.key == K_SPACE:
                    if sim.simulating:
                        sim.pause()
                    elif not sim.start():
                        banner = (sim.message, now + MESSAGE_TIMEOUT_MS)
                elif ev.key == K_c:
                    sim.clear_all()
                    drawing_from = preview = None
                elif ev.key in (K_PLUS, K_EQUALS, K_KP_PLUS):
                    sim.set_speed(min(SPEED_MAX_MS, sim.speed + SPEED_STEP_MS))
                elif ev.key in (K_MINUS, K_KP_MINUS):
                    sim.set_speed(max(SPEED_MIN_MS, sim.speed - SPEED_STEP_MS))
            elif ev.type == MOUSEBUTTONDOWN and ev.button == 1:
                if input_rect.collidepoint(ev.pos):
                    drawing_from = (ev.pos[0] - input_rect.x, ev.pos[1] - input_rect.y)
                    preview = (drawing_from, drawing_from)
            elif ev.type == MOUSEMOTION and drawing_from is not None:
                x = min(max(ev.pos[0], input_rect.left), input_rect.right - 1) - input_rect.x
                y = min(max(ev.pos[1], input_rect.top), input_rect.bottom - 1) - input_rect.y
                preview = (drawing_from, (x, y))
            elif ev.type == MOUSEBUTTONUP and ev.button == 1 and drawing_from is not None:
                (x0, y0), (x1, y1) = preview
                if (x0, y0) != (x1, y1):
                    sim.add_segment(x0, y0, x1, y1)
                drawing_from = preview = None

        scheduler.run_until(now, limit=MAX_TICKS_PER_FRAME)
        field.update(size)

        screen.fill(COLOR_WINDOW)
        draw_particles(screen, field.particles)
        draw_input(input_canvas, sim.segments, preview)
        for rect, canvas in ((input_rect, input_canvas), (raster_rect, raster_canvas),
                             (random_rect, random_canvas)):
            draw_frame(screen, rect)
            screen.blit(canvas, rect)

        screen.blit(font.render('Input (drag to draw)', True, COLOR_INPUT), (input_rect.x, input_rect.y - 18))
        screen.blit(font.render('Raster scan', True, COLOR_INPUT), (raster_rect.x, raster_rect.y - 18))
        screen.blit(font.render('Random scan', True, COLOR_INPUT), (random_rect.x, random_rect.y - 18))

        px = input_rect.right + PANEL_GAP
        rect = draw_panel(screen, font, readout_lines('RASTER', sim.raster.readout,
                                                      f"Frames: {sim.raster.frames_completed}"),
                          (px, input_rect.y))
        rect = draw_panel(screen, font, readout_lines('RANDOM', sim.random.readout,
                                                      f"Refreshes: {sim.random.refreshes_completed}"),
                          (rect.right + PANEL_GAP, input_rect.y))
        draw_panel(screen, font, [
            'CONTROLS:',
            'Drag: draw segment',
            'SPACE: start / pause',
            'C: clear all',
            f'+/-: speed ({sim.speed} ms)',
            f'Status: {sim.status}',
        ], (px, rect.bottom + PANEL_GAP))

        if banner and now < banner[1]:
            draw_panel(screen, font, ['NOTICE', banner[0]], (px, input_rect.bottom - 50),
                       title_color=(239, 68, 68))

        pygame.display.flip()

    sim.pause()
    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
