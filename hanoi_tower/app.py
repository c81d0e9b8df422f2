"""Window, rendering and event loop for the playable game."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

import pygame

from hanoi_tower.controller import (
    DEFAULT_DISKS,
    MAX_DISKS,
    MIN_DISKS,
    Controller,
    Key,
)
from hanoi_tower.layout import (
    BASE_HEIGHT,
    BASE_WIDTH,
    DISK_HEIGHT,
    MAX_DISK_WIDTH,
    PEG_HEIGHT,
    PEG_WIDTH,
    PEG_Y_BASE,
    PEG_Z,
    WINDOW_H,
    WINDOW_W,
    camera_scale,
    peg_x,
)
from hanoi_tower.logic import Peg

TITLE = "Tower of Hanoi"
HELP_TEXT = (
    "[1/2/3] Select peg  |  Click peg  |  Drag disk  |  "
    "[+/-] Disks  |  [S] Solve  |  [R] Reset  |  [Esc] Cancel"
)

BACKGROUND = (43, 43, 43)
BASE_COLOR = (89, 64, 38)
PEG_COLOR = (115, 82, 51)
SELECTION_COLOR = (255, 255, 77, 64)
LABEL_COLOR = (179, 179, 179)
LABEL_ALPHA = 179
HELP_COLOR = (204, 204, 204)
HELP_ALPHA = 230
WHITE = (255, 255, 255)
STATUS_COLOR = (0xFD, 0xE0, 0x47)

BASE_Z = 2.0
SELECTION_Z = 0.5
LABEL_Z = 10.0
FPS = 60

_KEY_MAP: dict[int, Key] = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_s: Key.SOLVE,
    pygame.K_r: Key.RESET,
    pygame.K_EQUALS: Key.MORE_DISKS,
    pygame.K_KP_PLUS: Key.MORE_DISKS,
    pygame.K_MINUS: Key.FEWER_DISKS,
    pygame.K_KP_MINUS: Key.FEWER_DISKS,
    pygame.K_1: Key.PEG_1,
    pygame.K_KP1: Key.PEG_1,
    pygame.K_2: Key.PEG_2,
    pygame.K_KP2: Key.PEG_2,
    pygame.K_3: Key.PEG_3,
    pygame.K_KP3: Key.PEG_3,
}


def screen_to_world(
    pos: tuple[float, float], window_size: tuple[float, float]
) -> tuple[float, float]:
    """Convert a pixel position to world coordinates (origin at window centre, y up)."""
    width, height = window_size
    scale = camera_scale(width, height)
    sx, sy = pos
    return (sx - width / 2.0) * scale, (height / 2.0 - sy) * scale


def world_to_screen(
    pos: tuple[float, float], window_size: tuple[float, float]
) -> tuple[float, float]:
    """Convert world coordinates to a pixel position."""
    width, height = window_size
    scale = camera_scale(width, height)
    wx, wy = pos
    return wx / scale + width / 2.0, height / 2.0 - wy / scale


def key_from_pygame(key: int) -> Optional[Key]:
    """The game command bound to a pygame key code, if any."""
    return _KEY_MAP.get(key)


def _world_rect(
    center: tuple[float, float],
    size: tuple[float, float],
    window_size: tuple[int, int],
) -> pygame.Rect:
    cx, cy = center
    w, h = size
    left, top = world_to_screen((cx - w / 2.0, cy + h / 2.0), window_size)
    scale = camera_scale(*window_size)
    return pygame.Rect(round(left), round(top), max(1, round(w / scale)), max(1, round(h / scale)))


class _Fonts:
    """Fonts cached by pixel size."""

    def __init__(self) -> None:
        self._cache: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        size = max(1, size)
        font = self._cache.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._cache[size] = font
        return font


def _render_text(
    fonts: _Fonts, text: str, size: int, color: tuple[int, int, int], alpha: int = 255
) -> pygame.Surface:
    surface = fonts.get(size).render(text, True, color)
    if alpha < 255:
        surface.set_alpha(alpha)
    return surface


def _draw_world(screen: pygame.Surface, controller: Controller, fonts: _Fonts) -> None:
    window_size = screen.get_size()
    scale = camera_scale(*window_size)
    layers: list[tuple[float, Callable[[], None]]] = []

    def draw_rect(center, size, color):
        rect = _world_rect(center, size, window_size)
        return lambda: pygame.draw.rect(screen, color, rect)

    layers.append(
        (BASE_Z, draw_rect((0.0, PEG_Y_BASE), (BASE_WIDTH, BASE_HEIGHT), BASE_COLOR))
    )
    for peg in Peg:
        layers.append(
            (
                PEG_Z,
                draw_rect(
                    (peg_x(peg), PEG_Y_BASE + PEG_HEIGHT / 2.0),
                    (PEG_WIDTH, PEG_HEIGHT),
                    PEG_COLOR,
                ),
            )
        )

    selection_x = controller.selection_x()
    if selection_x is not None:
        rect = _world_rect(
            (selection_x, PEG_Y_BASE + PEG_HEIGHT / 2.0),
            (MAX_DISK_WIDTH + 40.0, PEG_HEIGHT + DISK_HEIGHT * 2.0),
            window_size,
        )
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(SELECTION_COLOR)
        layers.append((SELECTION_Z, lambda: screen.blit(overlay, rect.topleft)))

    for sprite in controller.disk_sprites():
        layers.append(
            (sprite.z, draw_rect((sprite.x, sprite.y), (sprite.width, DISK_HEIGHT), sprite.color))
        )

    label_size = round(28 / scale)
    for number, peg in enumerate(Peg, start=1):
        label = _render_text(fonts, str(number), label_size, LABEL_COLOR, LABEL_ALPHA)
        centre = world_to_screen((peg_x(peg), PEG_Y_BASE - 45.0), window_size)
        rect = label.get_rect(center=(round(centre[0]), round(centre[1])))
        layers.append((LABEL_Z, lambda label=label, rect=rect: screen.blit(label, rect)))

    for _, draw in sorted(layers, key=lambda layer: layer[0]):
        draw()


def _draw_ui(screen: pygame.Surface, controller: Controller, fonts: _Fonts) -> None:
    width, height = screen.get_size()

    counter = _render_text(fonts, controller.move_counter_text(), 28, WHITE)
    screen.blit(counter, (16, 16))

    status = controller.status_text()
    if status:
        surface = _render_text(fonts, status, 32, STATUS_COLOR)
        screen.blit(surface, surface.get_rect(topright=(width - 16, 16)))

    help_surface = _render_text(fonts, HELP_TEXT, 18, HELP_COLOR, HELP_ALPHA)
    screen.blit(help_surface, help_surface.get_rect(midbottom=(width // 2, height - 12)))

    count = _render_text(fonts, controller.disk_count_text(), 24, WHITE)
    screen.blit(count, count.get_rect(bottomright=(width - 16, height - 40)))


def _finger_pixels(event: pygame.event.Event, window_size: tuple[int, int]) -> tuple[float, float]:
    return event.x * window_size[0], event.y * window_size[1]


def _handle_event(
    event: pygame.event.Event, controller: Controller, window_size: tuple[int, int]
) -> bool:
    """Apply one event; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        key = key_from_pygame(event.key)
        if key is not None:
            controller.press_key(key)
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
        if getattr(event, "touch", False):
            return True
        if event.type == pygame.MOUSEMOTION:
            controller.pointer_motion(screen_to_world(event.pos, window_size))
        elif event.button == 1 and event.type == pygame.MOUSEBUTTONDOWN:
            controller.pointer_down(screen_to_world(event.pos, window_size))
        elif event.button == 1:
            inside = pygame.Rect((0, 0), window_size).collidepoint(event.pos)
            controller.pointer_up(
                screen_to_world(event.pos, window_size) if inside else None
            )
    elif event.type == pygame.FINGERDOWN:
        controller.pointer_down(screen_to_world(_finger_pixels(event, window_size), window_size))
    elif event.type == pygame.FINGERUP:
        controller.pointer_up(screen_to_world(_finger_pixels(event, window_size), window_size))
    elif event.type == pygame.FINGERMOTION:
        controller.pointer_motion(
            screen_to_world(_finger_pixels(event, window_size), window_size)
        )
    elif event.type == pygame.WINDOWFOCUSLOST:
        controller.cancel_drag()
    return True


def run(num_disks: int = DEFAULT_DISKS) -> None:
    """Open the game window and play until it is closed."""
    controller = Controller(num_disks)
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_W), int(WINDOW_H)), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        fonts = _Fonts()
        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(FPS) / 1000.0
            window_size = screen.get_size()
            for event in pygame.event.get():
                if not _handle_event(event, controller, window_size):
                    running = False
                    break
            controller.tick(dt)
            screen.fill(BACKGROUND)
            _draw_world(screen, controller, fonts)
            _draw_ui(screen, controller, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="hanoi-tower", description="Play the Tower of Hanoi.")
    parser.add_argument(
        "--disks",
        type=int,
        default=DEFAULT_DISKS,
        help=f"number of disks to start with ({MIN_DISKS}-{MAX_DISKS})",
    )
    args = parser.parse_args(argv)
    if not MIN_DISKS <= args.disks <= MAX_DISKS:
        parser.error(f"--disks must be between {MIN_DISKS} and {MAX_DISKS}")
    run(args.disks)
    return 0