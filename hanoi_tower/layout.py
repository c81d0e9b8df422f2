"""World-space geometry of the board: pegs, disks, colours and hit testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hanoi_tower.logic import HanoiGame, Peg

WINDOW_W = 1200.0
WINDOW_H = 750.0

PEG_SPACING = 350.0
PEG_WIDTH = 12.0
PEG_HEIGHT = 300.0
PEG_Y_BASE = -100.0

BASE_WIDTH = 1100.0
BASE_HEIGHT = 18.0

DISK_HEIGHT = 30.0
DISK_GAP = 2.0
MIN_DISK_WIDTH = 50.0
MAX_DISK_WIDTH = 200.0

DISK_Z = 5.0
PEG_Z = 1.0
DRAG_Z = 20.0

SELECTED_LIFT = 15.0

# The design area the board is laid out in; the view scales to fit it.
WORLD_W = 1200.0
WORLD_H = 700.0

Color = tuple[int, int, int]

PALETTE: tuple[Color, ...] = (
    (0xEF, 0x44, 0x44),  # red
    (0xF9, 0x73, 0x16),  # orange
    (0xFB, 0xBF, 0x24),  # amber
    (0x84, 0xCC, 0x16),  # lime
    (0x10, 0xB9, 0x81),  # emerald
    (0x22, 0xD3, 0xEE),  # cyan
    (0x3B, 0x82, 0xF6),  # blue
    (0x63, 0x66, 0xF1),  # indigo
    (0xA8, 0x55, 0xF7),  # purple
    (0xEC, 0x48, 0x99),  # pink
)


@dataclass
class DiskSprite:
    """Where and how a disk is drawn in world space."""

    disk: int
    x: float
    y: float
    z: float
    width: float
    color: Color


def disk_color(disk: int, total: int) -> Color:
    """Colour of a disk; spread across the palette when there are many disks."""
    if total <= len(PALETTE):
        idx = disk - 1
    else:
        idx = int((disk - 1) / max(total - 1, 1) * (len(PALETTE) - 1))
    return PALETTE[min(idx, len(PALETTE) - 1)]


def disk_width(disk: int, total: int) -> float:
    """Width of a disk, growing linearly from the smallest to the largest."""
    t = (disk - 1) / max(total - 1, 1)
    return MIN_DISK_WIDTH + t * (MAX_DISK_WIDTH - MIN_DISK_WIDTH)


def peg_x(peg: Peg) -> float:
    """Horizontal centre of a peg."""
    return (peg.index() - 1) * PEG_SPACING


def disk_y_on_peg(position_from_bottom: int) -> float:
    """Vertical centre of a disk at the given stack position."""
    return (
        PEG_Y_BASE
        + BASE_HEIGHT / 2.0
        + DISK_HEIGHT / 2.0
        + position_from_bottom * (DISK_HEIGHT + DISK_GAP)
    )


def world_pos_to_peg(x: float) -> Optional[Peg]:
    """The peg whose column contains ``x``, if any."""
    half_spacing = PEG_SPACING / 2.0
    return next((peg for peg in Peg if abs(x - peg_x(peg)) < half_spacing), None)


def camera_scale(window_width: float, window_height: float) -> float:
    """World units per pixel so the whole design area fits the window."""
    return max(WORLD_W / window_width, WORLD_H / window_height)


def find_top_disk_at(
    world_pos: tuple[float, float],
    game: HanoiGame,
    sprites,
) -> Optional[tuple[int, Peg, tuple[float, float]]]:
    """The top disk under ``world_pos`` as (disk, peg, grab offset), if any."""
    px, py = world_pos
    half_h = DISK_HEIGHT / 2.0
    for sprite in sprites:
        half_w = disk_width(sprite.disk, game.num_disks) / 2.0
        inside = (
            sprite.x - half_w <= px <= sprite.x + half_w
            and sprite.y - half_h <= py <= sprite.y + half_h
        )
        if not inside:
            continue
        peg = world_pos_to_peg(sprite.x)
        if peg is not None and game.top_disk(peg) == sprite.disk:
            return sprite.disk, peg, (px - sprite.x, py - sprite.y)
    return None