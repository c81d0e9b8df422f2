import pygame
import pytest

from hanoi_tower.app import key_from_pygame, main, screen_to_world, world_to_screen
from hanoi_tower.controller import Key
from hanoi_tower.layout import WINDOW_H, WINDOW_W, peg_x, world_pos_to_peg
from hanoi_tower.logic import Peg

DEFAULT_SIZE = (WINDOW_W, WINDOW_H)


def test_window_centre_is_world_origin():
    centre = (WINDOW_W / 2.0, WINDOW_H / 2.0)
    assert screen_to_world(centre, DEFAULT_SIZE) == pytest.approx((0.0, 0.0))


@pytest.mark.parametrize("size", [(1200, 750), (800, 600), (1920, 1080), (400, 900)])
@pytest.mark.parametrize("pos", [(0.0, 0.0), (123.0, 456.0), (399.5, 10.25)])
def test_screen_world_round_trip(size, pos):
    world = screen_to_world(pos, size)
    assert world_to_screen(world, size) == pytest.approx(pos)


@pytest.mark.parametrize("size", [(1200, 750), (640, 480), (2000, 500)])
def test_world_to_screen_round_trip(size):
    for world in [(peg_x(peg), -100.0) for peg in Peg]:
        screen = world_to_screen(world, size)
        assert screen_to_world(screen, size) == pytest.approx(world)


def test_screen_y_points_down_world_y_points_up():
    top = screen_to_world((WINDOW_W / 2.0, 0.0), DEFAULT_SIZE)
    bottom = screen_to_world((WINDOW_W / 2.0, WINDOW_H), DEFAULT_SIZE)
    assert top[1] > 0 > bottom[1]
    assert top[1] == pytest.approx(-bottom[1])


def test_design_area_fits_in_any_window():
    for size in [(1200, 750), (600, 700), (2400, 400)]:
        left, top = screen_to_world((0.0, 0.0), size)
        right, bottom = screen_to_world(size, size)
        assert right - left >= 1200.0 - 1e-6
        assert top - bottom >= 700.0 - 1e-6


def test_peg_centres_map_back_to_their_pegs():
    size = (900, 600)
    for peg in Peg:
        screen = world_to_screen((peg_x(peg), 0.0), size)
        world = screen_to_world(screen, size)
        assert world_pos_to_peg(world[0]) == peg


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_s, Key.SOLVE),
        (pygame.K_r, Key.RESET),
        (pygame.K_EQUALS, Key.MORE_DISKS),
        (pygame.K_KP_PLUS, Key.MORE_DISKS),
        (pygame.K_MINUS, Key.FEWER_DISKS),
        (pygame.K_KP_MINUS, Key.FEWER_DISKS),
        (pygame.K_1, Key.PEG_1),
        (pygame.K_KP1, Key.PEG_1),
        (pygame.K_2, Key.PEG_2),
        (pygame.K_KP2, Key.PEG_2),
        (pygame.K_3, Key.PEG_3),
        (pygame.K_KP3, Key.PEG_3),
    ],
)
def test_key_bindings(code, key):
    assert key_from_pygame(code) is key


@pytest.mark.parametrize("code", [pygame.K_a, pygame.K_4, pygame.K_SPACE, pygame.K_RETURN])
def test_unbound_keys(code):
    assert key_from_pygame(code) is None


@pytest.mark.parametrize("disks", ["1", "11", "0"])
def test_main_rejects_out_of_range_disk_count(disks):
    with pytest.raises(SystemExit) as excinfo:
        main(["--disks", disks])
    assert excinfo.value.code == 2


def test_main_rejects_non_numeric_disk_count():
    with pytest.raises(SystemExit) as excinfo:
        main(["--disks", "many"])
    assert excinfo.value.code == 2