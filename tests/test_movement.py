import random

import pytest

from arenaparty.movement import AIState, Direction, choose_ai_direction, direction_from_keys, step


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({"d", "w"}, Direction.RU),
        ({"right", "up"}, Direction.RU),
        ({"d", "s"}, Direction.RD),
        ({"a", "w"}, Direction.LU),
        ({"left", "down"}, Direction.LD),
        ({"d"}, Direction.R),
        ({"LEFT"}, Direction.L),
        ({"w"}, Direction.U),
        ({"s"}, Direction.D),
        (set(), Direction.ST),
        ({"a", "d"}, Direction.R),
        ({"w", "s"}, Direction.U),
        ({"d", "w", "s"}, Direction.RU),
    ],
)
def test_direction_from_keys(keys, expected):
    assert direction_from_keys(keys) is expected


def test_outside_safe_area_turns_back_once():
    state = AIState(direction=Direction.R)
    assert choose_ai_direction(state, False, FixedRandom(0)) == Direction.L
    assert state.back_direct_changed is True
    assert choose_ai_direction(state, False, FixedRandom(0)) == Direction.L
    assert state.search_times == 2


def test_outside_safe_area_vertical_turn():
    state = AIState(direction=Direction.U)
    assert choose_ai_direction(state, False, FixedRandom(0)) == Direction.D


def test_search_limit_switches_to_random_choice():
    state = AIState(direction=Direction.L, search_times=100, back_direct_changed=True)
    rng = FixedRandom(3)
    assert choose_ai_direction(state, False, rng) == 3
    assert rng.calls == [60]
    assert state.back_direct_changed is False


def test_search_limit_keeps_direction_on_large_roll():
    state = AIState(direction=Direction.L, search_times=100)
    assert choose_ai_direction(state, False, FixedRandom(30)) == Direction.L


def test_safe_area_resets_and_rolls():
    state = AIState(direction=Direction.D, search_times=50, back_direct_changed=True)
    rng = FixedRandom(5)
    assert choose_ai_direction(state, True, rng) == 5
    assert rng.calls == [120]
    assert state.search_times == 0
    assert state.back_direct_changed is False


def test_safe_area_mostly_keeps_direction():
    state = AIState(direction=Direction.U)
    assert choose_ai_direction(state, True, FixedRandom(119)) == Direction.U


def test_random_choices_stay_in_range():
    state = AIState(direction=Direction.ST)
    rng = random.Random(7)
    for _ in range(500):
        assert choose_ai_direction(state, True, rng) in range(9)


def test_step_straight():
    result = step((10.0, 20.0), Direction.R)
    assert result.position == (14.0, 20.0)
    assert result.moving is True
    assert result.flip_x is False
    assert step((10.0, 20.0), Direction.L).flip_x is True


def test_step_vertical_keeps_facing():
    result = step((0.0, 0.0), Direction.D)
    assert result.position == (0.0, -4.0)
    assert result.flip_x is None


def test_step_diagonal():
    result = step((0.0, 0.0), Direction.LU)
    assert result.x == pytest.approx(-2.828)
    assert result.y == pytest.approx(2.828)
    assert result.flip_x is True


@pytest.mark.parametrize("direction", [Direction.ST, -1, 42])
def test_step_without_movement(direction):
    result = step((3.0, 4.0), direction)
    assert result.position == (3.0, 4.0)
    assert result.moving is False