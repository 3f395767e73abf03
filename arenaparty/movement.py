"""Eight-way movement for players and computer-controlled fighters."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable
from dataclasses import dataclass


class Direction(enum.IntEnum):
    R = 0
    L = 1
    U = 2
    D = 3
    RU = 4
    RD = 5
    LU = 6
    LD = 7
    ST = 8


_RIGHT_KEYS = frozenset({"d", "right"})
_LEFT_KEYS = frozenset({"a", "left"})
_UP_KEYS = frozenset({"w", "up"})
_DOWN_KEYS = frozenset({"s", "down"})

_STRAIGHT = 4.0
_DIAGONAL = 2.828

# direction -> (dx, dy, flip_x); flip_x is None when facing is unchanged
_STEPS: dict[int, tuple[float, float, bool | None]] = {
    Direction.R: (_STRAIGHT, 0.0, False),
    Direction.L: (-_STRAIGHT, 0.0, True),
    Direction.U: (0.0, _STRAIGHT, None),
    Direction.D: (0.0, -_STRAIGHT, None),
    Direction.RU: (_DIAGONAL, _DIAGONAL, False),
    Direction.RD: (_DIAGONAL, -_DIAGONAL, False),
    Direction.LU: (-_DIAGONAL, _DIAGONAL, True),
    Direction.LD: (-_DIAGONAL, -_DIAGONAL, True),
}

_SEARCH_LIMIT = 100


def direction_from_keys(pressed: Iterable[str]) -> Direction:
    """Map the held keys (``w a s d`` or arrow names) to a direction."""
    keys = {key.lower() for key in pressed}
    right = bool(keys & _RIGHT_KEYS)
    left = bool(keys & _LEFT_KEYS)
    up = bool(keys & _UP_KEYS)
    down = bool(keys & _DOWN_KEYS)
    if right and up:
        return Direction.RU
    if right and down:
        return Direction.RD
    if left and up:
        return Direction.LU
    if left and down:
        return Direction.LD
    if right:
        return Direction.R
    if left:
        return Direction.L
    if up:
        return Direction.U
    if down:
        return Direction.D
    return Direction.ST


@dataclass
class AIState:
    """Steering memory of a computer-controlled fighter.

    ``direction`` is a plain integer: turning back from a diagonal can
    produce codes outside :class:`Direction`, which then make no move.
    """

    direction: int = Direction.ST
    search_times: int = 0
    back_direct_changed: bool = False


def choose_ai_direction(state: AIState, in_safe_area: bool, rng: random.Random | None = None) -> int:
    """Advance the fighter's steering by one frame and return its direction."""
    rng = rng if rng is not None else random.Random()
    if not in_safe_area:
        state.search_times += 1
        if state.search_times <= _SEARCH_LIMIT:
            if not state.back_direct_changed:
                if state.direction <= 1:
                    state.direction = 1 - state.direction
                else:
                    state.direction = 5 - state.direction
                state.back_direct_changed = True
        else:
            state.back_direct_changed = False
            pick = rng.randrange(60)
            if pick <= 7:
                state.direction = pick
    else:
        state.search_times = 0
        state.back_direct_changed = False
        pick = rng.randrange(120)
        if pick <= 7:
            state.direction = pick
    return state.direction


@dataclass(frozen=True)
class Step:
    """Outcome of one frame of movement."""

    x: float
    y: float
    moving: bool
    flip_x: bool | None = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def step(position: tuple[float, float], direction: int) -> Step:
    """Move ``position`` one frame in ``direction``."""
    x, y = position
    try:
        dx, dy, flip = _STEPS[direction]
    except KeyError:
        return Step(x, y, moving=False)
    return Step(x + dx, y + dy, moving=True, flip_x=flip)