"""Player interaction: selection, dragging, auto-solving and on-screen text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from hanoi_tower.layout import (
    DISK_Z,
    DRAG_Z,
    SELECTED_LIFT,
    DiskSprite,
    disk_color,
    disk_width,
    disk_y_on_peg,
    find_top_disk_at,
    peg_x,
    world_pos_to_peg,
)
from hanoi_tower.logic import HanoiGame, Move, MoveError, Peg, solve_from_current

DEFAULT_DISKS = 5
MIN_DISKS = 2
MAX_DISKS = 10

AUTO_SOLVE_INTERVAL = 0.35


class Key(Enum):
    """Keyboard commands the game understands."""

    ESCAPE = auto()
    SOLVE = auto()
    RESET = auto()
    MORE_DISKS = auto()
    FEWER_DISKS = auto()
    PEG_1 = auto()
    PEG_2 = auto()
    PEG_3 = auto()


_PEG_KEYS = {Key.PEG_1: Peg.LEFT, Key.PEG_2: Peg.MIDDLE, Key.PEG_3: Peg.RIGHT}


@dataclass
class Drag:
    """A disk being dragged and where it currently is."""

    disk: int
    source: Peg
    offset: tuple[float, float]
    x: float
    y: float
    z: float


@dataclass
class AutoSolve:
    """Progress of an automatic solution being played back."""

    active: bool = False
    moves: list[Move] = field(default_factory=list)
    move_index: int = 0
    timer: float = 0.0


class Controller:
    """Holds the game and turns player input into moves."""

    def __init__(self, num_disks: int = DEFAULT_DISKS) -> None:
        if not MIN_DISKS <= num_disks <= MAX_DISKS:
            raise ValueError(f"disk count must be {MIN_DISKS}..={MAX_DISKS}")
        self.game = HanoiGame(num_disks)
        self.disk_count = num_disks
        self.selected_peg: Optional[Peg] = None
        self.drag: Optional[Drag] = None
        self.auto_solve = AutoSolve()

    def _try_move(self, source: Peg, target: Peg) -> None:
        try:
            self.game.make_move(Move(source, target))
        except MoveError:
            pass

    def _reset(self, num_disks: int) -> None:
        self.game.reset_with(num_disks)
        self.auto_solve.active = False
        self.selected_peg = None
        self.drag = None

    def press_key(self, key: Key) -> None:
        """Handle one key press."""
        if key is Key.ESCAPE:
            self.selected_peg = None
            self.auto_solve.active = False
            self.drag = None
            return
        if key is Key.SOLVE:
            if not self.game.is_solved():
                self.auto_solve = AutoSolve(active=True, moves=solve_from_current(self.game))
                self.selected_peg = None
            return
        if key is Key.RESET:
            self._reset(self.game.num_disks)
            return
        if key is Key.MORE_DISKS:
            self.disk_count = min(self.disk_count + 1, MAX_DISKS)
            self._reset(self.disk_count)
            return
        if key is Key.FEWER_DISKS:
            self.disk_count = max(self.disk_count - 1, MIN_DISKS)
            self._reset(self.disk_count)
            return
        if self.auto_solve.active:
            return
        peg = _PEG_KEYS.get(key)
        if peg is not None:
            self.select_peg(peg)

    def select_peg(self, peg: Peg) -> None:
        """Pick a source peg, or complete a move onto ``peg``."""
        source = self.selected_peg
        if source is not None:
            if source != peg:
                self._try_move(source, peg)
            self.selected_peg = None
        elif self.game.top_disk(peg) is not None:
            self.selected_peg = peg

    def pointer_down(self, world_pos: tuple[float, float]) -> None:
        """Mouse button or touch pressed at a world position."""
        if self.auto_solve.active:
            return
        if self.selected_peg is not None:
            peg = world_pos_to_peg(world_pos[0])
            if peg is not None:
                self.select_peg(peg)
            return
        sprites = self.disk_sprites()
        hit = find_top_disk_at(world_pos, self.game, sprites)
        if hit is not None:
            disk, source, offset = hit
            sprite = next(s for s in sprites if s.disk == disk)
            self.drag = Drag(disk, source, offset, sprite.x, sprite.y, sprite.z)
            return
        peg = world_pos_to_peg(world_pos[0])
        if peg is not None and self.game.top_disk(peg) is not None:
            self.selected_peg = peg

    def pointer_up(self, world_pos: Optional[tuple[float, float]]) -> None:
        """Release; drop a dragged disk on the peg under ``world_pos``."""
        if self.auto_solve.active:
            return
        drag, self.drag = self.drag, None
        if drag is None or world_pos is None:
            return
        target = world_pos_to_peg(world_pos[0])
        if target is not None and target != drag.source:
            self._try_move(drag.source, target)

    def pointer_motion(self, world_pos: tuple[float, float]) -> None:
        """Pointer moved; carry a dragged disk along."""
        if self.drag is None:
            return
        self.drag.x = world_pos[0] - self.drag.offset[0]
        self.drag.y = world_pos[1] - self.drag.offset[1]
        self.drag.z = DRAG_Z

    def cancel_drag(self) -> None:
        """Abandon a drag without moving."""
        self.drag = None

    def tick(self, dt: float) -> None:
        """Advance the auto-solver by ``dt`` seconds."""
        solver = self.auto_solve
        if not solver.active:
            return
        solver.timer += dt
        if solver.timer < AUTO_SOLVE_INTERVAL:
            return
        solver.timer = 0.0
        if solver.move_index < len(solver.moves):
            move = solver.moves[solver.move_index]
            self._try_move(move.source, move.target)
            solver.move_index += 1
        else:
            solver.active = False

    def disk_sprites(self) -> list[DiskSprite]:
        """Where every disk is drawn, smallest first."""
        total = self.game.num_disks
        sprites = []
        for peg in Peg:
            disks = self.game.disks_on(peg)
            for pos, disk in enumerate(disks):
                if self.drag is not None and self.drag.disk == disk:
                    x, y, z = self.drag.x, self.drag.y, self.drag.z
                else:
                    x, y, z = peg_x(peg), disk_y_on_peg(pos), DISK_Z
                    if self.selected_peg == peg and pos == len(disks) - 1:
                        y += SELECTED_LIFT
                        z = DISK_Z + 1.0
                sprites.append(
                    DiskSprite(disk, x, y, z, disk_width(disk, total), disk_color(disk, total))
                )
        sprites.sort(key=lambda s: s.disk)
        return sprites

    def selection_x(self) -> Optional[float]:
        """Centre of the highlighted peg, or None when nothing is selected."""
        return None if self.selected_peg is None else peg_x(self.selected_peg)

    def move_counter_text(self) -> str:
        return f"Moves: {self.game.move_count} / {self.game.minimum_moves} optimal"

    def status_text(self) -> str:
        if self.game.is_solved():
            moves, optimal = self.game.move_count, self.game.minimum_moves
            if moves == optimal:
                return "Solved! Perfect score!"
            return f"Solved in {moves} moves! (optimal: {optimal})"
        if self.auto_solve.active:
            return "Auto-solving..."
        return ""

    def disk_count_text(self) -> str:
        return f"Disks: {self.disk_count}"