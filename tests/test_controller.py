import pytest

from hanoi_tower.controller import (
    AUTO_SOLVE_INTERVAL,
    MAX_DISKS,
    MIN_DISKS,
    Controller,
    Key,
)
from hanoi_tower.layout import DRAG_Z, disk_y_on_peg, peg_x
from hanoi_tower.logic import Peg


def _run_auto_solve(c):
    for _ in range(10_000):
        if not c.auto_solve.active:
            break
        c.tick(AUTO_SOLVE_INTERVAL)
    assert not c.auto_solve.active


def test_initial_texts():
    c = Controller()
    assert c.move_counter_text() == "Moves: 0 / 31 optimal"
    assert c.disk_count_text() == "Disks: 5"
    assert c.status_text() == ""


def test_rejects_bad_disk_count():
    with pytest.raises(ValueError):
        Controller(MIN_DISKS - 1)
    with pytest.raises(ValueError):
        Controller(MAX_DISKS + 1)


def test_click_click_move():
    c = Controller(3)
    c.select_peg(Peg.LEFT)
    assert c.selected_peg == Peg.LEFT
    assert c.selection_x() == peg_x(Peg.LEFT)
    c.select_peg(Peg.RIGHT)
    assert c.selected_peg is None
    assert c.selection_x() is None
    assert c.game.disks_on(Peg.RIGHT) == (1,)
    assert c.game.move_count == 1


def test_select_same_peg_deselects():
    c = Controller(3)
    c.select_peg(Peg.LEFT)
    c.select_peg(Peg.LEFT)
    assert c.selected_peg is None
    assert c.game.move_count == 0


def test_select_empty_peg_ignored():
    c = Controller(3)
    c.select_peg(Peg.MIDDLE)
    assert c.selected_peg is None


def test_invalid_move_clears_selection():
    c = Controller(3)
    c.press_key(Key.PEG_1)
    c.press_key(Key.PEG_3)
    c.press_key(Key.PEG_1)
    c.press_key(Key.PEG_3)
    assert c.selected_peg is None
    assert c.game.move_count == 1
    assert c.game.disks_on(Peg.LEFT) == (3, 2)


def test_disk_count_keys_clamp():
    c = Controller()
    for _ in range(MAX_DISKS + 3):
        c.press_key(Key.MORE_DISKS)
    assert c.disk_count == MAX_DISKS
    assert c.game.num_disks == MAX_DISKS
    for _ in range(MAX_DISKS + 3):
        c.press_key(Key.FEWER_DISKS)
    assert c.disk_count == MIN_DISKS
    assert c.game.num_disks == MIN_DISKS
    assert c.disk_count_text() == f"Disks: {MIN_DISKS}"


def test_reset_key():
    c = Controller(3)
    c.select_peg(Peg.LEFT)
    c.select_peg(Peg.MIDDLE)
    c.select_peg(Peg.LEFT)
    c.press_key(Key.RESET)
    assert c.game.disks_on(Peg.LEFT) == (3, 2, 1)
    assert c.game.move_count == 0
    assert c.selected_peg is None


def test_auto_solve_perfect():
    c = Controller()
    c.press_key(Key.SOLVE)
    assert c.auto_solve.active
    assert c.status_text() == "Auto-solving..."
    _run_auto_solve(c)
    assert c.game.is_solved()
    assert c.game.move_count == c.game.minimum_moves
    assert c.status_text() == "Solved! Perfect score!"


def test_auto_solve_accumulates_time():
    c = Controller(3)
    c.press_key(Key.SOLVE)
    c.tick(AUTO_SOLVE_INTERVAL / 2)
    assert c.game.move_count == 0
    c.tick(AUTO_SOLVE_INTERVAL / 2)
    assert c.game.move_count == 1


def test_auto_solve_blocks_input_and_escape_stops():
    c = Controller(3)
    c.press_key(Key.SOLVE)
    c.press_key(Key.PEG_1)
    assert c.selected_peg is None
    c.pointer_down((peg_x(Peg.LEFT), disk_y_on_peg(2)))
    assert c.drag is None
    c.press_key(Key.ESCAPE)
    assert not c.auto_solve.active
    c.tick(AUTO_SOLVE_INTERVAL)
    assert c.game.move_count == 0


def test_solve_key_ignored_when_solved():
    c = Controller(2)
    c.press_key(Key.SOLVE)
    _run_auto_solve(c)
    c.press_key(Key.SOLVE)
    assert not c.auto_solve.active


def test_solved_non_optimal_status():
    c = Controller(2)
    for src, dst in [
        (Peg.LEFT, Peg.RIGHT),
        (Peg.RIGHT, Peg.MIDDLE),
        (Peg.LEFT, Peg.RIGHT),
        (Peg.MIDDLE, Peg.RIGHT),
    ]:
        c.select_peg(src)
        c.select_peg(dst)
    assert c.game.is_solved()
    assert c.game.move_count > c.game.minimum_moves
    assert c.status_text() == (
        f"Solved in {c.game.move_count} moves! (optimal: {c.game.minimum_moves})"
    )


def test_drag_and_drop():
    c = Controller(3)
    start = (peg_x(Peg.LEFT), disk_y_on_peg(2))
    c.pointer_down(start)
    assert c.drag is not None and c.drag.disk == 1
    target = (peg_x(Peg.RIGHT) + 10, start[1] + 40)
    c.pointer_motion(target)
    sprite = next(s for s in c.disk_sprites() if s.disk == 1)
    assert (sprite.x, sprite.y, sprite.z) == (target[0], target[1], DRAG_Z)
    c.pointer_up(target)
    assert c.drag is None
    assert c.game.disks_on(Peg.RIGHT) == (1,)
    sprite = next(s for s in c.disk_sprites() if s.disk == 1)
    assert (sprite.x, sprite.y) == (peg_x(Peg.RIGHT), disk_y_on_peg(0))


def test_drop_on_same_peg_or_outside_does_nothing():
    c = Controller(3)
    start = (peg_x(Peg.LEFT), disk_y_on_peg(2))
    c.pointer_down(start)
    c.pointer_up(start)
    assert c.game.move_count == 0
    c.pointer_down(start)
    c.pointer_up(None)
    assert c.game.move_count == 0
    assert c.drag is None


def test_cancel_drag():
    c = Controller(3)
    c.pointer_down((peg_x(Peg.LEFT), disk_y_on_peg(2)))
    c.cancel_drag()
    assert c.drag is None
    c.pointer_up((peg_x(Peg.RIGHT), 0.0))
    assert c.game.move_count == 0


def test_click_peg_area_selects_and_lifts():
    c = Controller(3)
    c.pointer_down((peg_x(Peg.LEFT), disk_y_on_peg(6)))
    assert c.selected_peg == Peg.LEFT
    top = next(s for s in c.disk_sprites() if s.disk == 1)
    assert top.y > disk_y_on_peg(2)
    bottom = next(s for s in c.disk_sprites() if s.disk == 3)
    assert bottom.y == disk_y_on_peg(0)
    c.pointer_down((peg_x(Peg.MIDDLE), 0.0))
    assert c.selected_peg is None
    assert c.game.disks_on(Peg.MIDDLE) == (1,)


def test_disk_sprites_cover_all_disks():
    c = Controller()
    sprites = c.disk_sprites()
    assert [s.disk for s in sprites] == list(range(1, c.game.num_disks + 1))
    widths = [s.width for s in sprites]
    assert widths == sorted(widths)