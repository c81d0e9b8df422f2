"""Tower of Hanoi game rules and solvers, independent of any rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_DISKS = 20


class Peg(Enum):
    """One of the three pegs, left to right."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2

    @classmethod
    def from_index(cls, i: int) -> Optional["Peg"]:
        """Return the peg for a 0-based index, or None if out of range."""
        try:
            return cls(i)
        except ValueError:
            return None

    def index(self) -> int:
        """The 0-based position of this peg."""
        return self.value


@dataclass(frozen=True)
class Move:
    """Take the top disk from ``source`` and place it on ``target``."""

    source: Peg
    target: Peg


class MoveError(Exception):
    """A move that the rules do not allow."""


class EmptySourceError(MoveError):
    """The source peg has no disks."""


class InvalidPlacementError(MoveError):
    """A larger disk cannot go on a smaller one."""


class SamePegError(MoveError):
    """Source and destination are the same peg."""


class HanoiGame:
    """Game state: disks are sizes (1 is smallest), each peg listed bottom to top."""

    def __init__(self, n: int) -> None:
        if not 0 < n <= MAX_DISKS:
            raise ValueError(f"disk count must be 1..={MAX_DISKS}")
        self._pegs: list[list[int]] = [list(range(n, 0, -1)), [], []]
        self._num_disks = n
        self._move_count = 0

    def __repr__(self) -> str:
        return (
            f"HanoiGame(num_disks={self._num_disks}, "
            f"pegs={self._pegs!r}, move_count={self._move_count})"
        )

    @property
    def num_disks(self) -> int:
        """Number of disks in this game."""
        return self._num_disks

    @property
    def move_count(self) -> int:
        """Number of moves made so far."""
        return self._move_count

    @property
    def minimum_moves(self) -> int:
        """Fewest moves that solve the game from its starting position."""
        return (1 << self._num_disks) - 1

    def disks_on(self, peg: Peg) -> tuple[int, ...]:
        """The disks on a peg, bottom to top."""
        return tuple(self._pegs[peg.index()])

    def top_disk(self, peg: Peg) -> Optional[int]:
        """The top disk on a peg, or None if it is empty."""
        stack = self._pegs[peg.index()]
        return stack[-1] if stack else None

    def is_solved(self) -> bool:
        """True when every disk is on the right peg."""
        return len(self._pegs[Peg.RIGHT.index()]) == self._num_disks

    def _check(self, move: Move) -> int:
        if move.source == move.target:
            raise SamePegError(f"cannot move from {move.source.name} to itself")
        disk = self.top_disk(move.source)
        if disk is None:
            raise EmptySourceError(f"peg {move.source.name} is empty")
        top = self.top_disk(move.target)
        if top is not None and disk > top:
            raise InvalidPlacementError(
                f"cannot place disk {disk} on disk {top}"
            )
        return disk

    def make_move(self, move: Move) -> int:
        """Move the top disk; return the disk moved or raise MoveError."""
        disk = self._check(move)
        self._pegs[move.source.index()].pop()
        self._pegs[move.target.index()].append(disk)
        self._move_count += 1
        return disk

    def is_valid_move(self, move: Move) -> bool:
        """Whether the move is allowed, without performing it."""
        try:
            self._check(move)
        except MoveError:
            return False
        return True

    def reset(self) -> None:
        """Return to the starting position with the same number of disks."""
        self.reset_with(self._num_disks)

    def reset_with(self, n: int) -> None:
        """Return to the starting position with ``n`` disks."""
        fresh = HanoiGame(n)
        self._pegs = fresh._pegs
        self._num_disks = fresh._num_disks
        self._move_count = 0

    def copy(self) -> "HanoiGame":
        """An independent copy of this game."""
        clone = HanoiGame.__new__(HanoiGame)
        clone._pegs = [list(stack) for stack in self._pegs]
        clone._num_disks = self._num_disks
        clone._move_count = self._move_count
        return clone


def solve(n: int, source: Peg, target: Peg, aux: Peg) -> list[Move]:
    """All moves that carry ``n`` disks from ``source`` to ``target`` via ``aux``."""
    moves: list[Move] = []

    def recurse(k: int, src: Peg, dst: Peg, via: Peg) -> None:
        if k == 0:
            return
        recurse(k - 1, src, via, dst)
        moves.append(Move(src, dst))
        recurse(k - 1, via, dst, src)

    recurse(n, source, target, aux)
    return moves


def _find_disk(state: HanoiGame, disk: int) -> Peg:
    for peg in Peg:
        if disk in state.disks_on(peg):
            return peg
    raise LookupError(f"disk {disk} not found")


def _other_peg(a: Peg, b: Peg) -> Peg:
    return next(p for p in Peg if p not in (a, b))


def solve_from_current(game: HanoiGame) -> list[Move]:
    """The moves that finish the game from its current position."""
    state = game.copy()
    moves: list[Move] = []

    def move_to(n: int, target: Peg) -> None:
        if n == 0:
            return
        disk_peg = _find_disk(state, n)
        if disk_peg == target:
            move_to(n - 1, target)
            return
        move_to(n - 1, _other_peg(disk_peg, target))
        move = Move(disk_peg, target)
        state.make_move(move)
        moves.append(move)
        move_to(n - 1, target)

    move_to(state.num_disks, Peg.RIGHT)
    return moves