import random

import pytest

from cube_config import FACES_INIT_STATE
from cube_errors import AmbiguousOrMissingCenterError, InvariantViolationError
from cube_moves import MOVES, Move, invert_moves
from cube_trace import apply, apply_all, trace
from helpers import random_scramble_moves

SOLVED = FACES_INIT_STATE
SEXY = ["R", "U", "R'", "U'"]


def test_quarter_turn_four_times_is_identity():
    for face in "URFDLB":
        s = SOLVED
        for i in range(4):
            s = apply(s, face)
            if i < 3:
                assert s != SOLVED
        assert s == SOLVED


def test_move_then_inverse_is_identity():
    scrambled = apply_all(SOLVED, random_scramble_moves(20, random.Random(31)))
    for mv in MOVES:
        assert apply(apply(scrambled, mv), mv.inverse()) == scrambled


def test_half_turn_twice_is_identity():
    for face in "URFDLB":
        assert apply_all(SOLVED, [face + "2", face + "2"]) == SOLVED


def test_blank_move_leaves_cube_unchanged():
    s = apply(SOLVED, "R")
    assert apply(s, "") == s
    assert apply(s, "   ") == s


def test_sexy_move_has_order_six():
    s = SOLVED
    for n in range(1, 7):
        s = apply_all(s, SEXY)
        if n < 6:
            assert s != SOLVED
    assert s == SOLVED


def test_trace_length_and_endpoints():
    states = trace(SOLVED, ["U", "R"])
    assert len(states) == 3
    assert states[0] == SOLVED
    assert states[1] == apply(SOLVED, "U")
    assert states[2] == apply_all(SOLVED, ["U", "R"])


def test_trace_of_no_moves():
    assert trace(SOLVED, []) == [SOLVED]


def test_trace_returns_a_fresh_list():
    first = trace(SOLVED, ["F"])
    first.append("junk")
    assert trace(SOLVED, ["F"]) == [SOLVED, apply(SOLVED, "F")]


def test_trace_accepts_move_objects():
    assert trace(SOLVED, [Move("L", 2)]) == trace(SOLVED, ["L2"])


def test_trace_of_scramble_and_its_inverse_returns_home():
    moves = random_scramble_moves(15, random.Random(32))
    scrambled = apply_all(SOLVED, moves)
    states = trace(scrambled, invert_moves(moves))
    assert len(states) == 16
    assert states[-1] == SOLVED


def test_move_and_inverse_cannot_repair_a_bad_cube():
    bad = SOLVED[:4] + "R" + SOLVED[5:13] + "U" + SOLVED[14:]
    with pytest.raises(AmbiguousOrMissingCenterError):
        apply(bad, "U")


def test_blank_move_still_validates_the_cube():
    twisted = SOLVED[:8] + "F" + "U" + SOLVED[10:20] + "R" + SOLVED[21:]
    with pytest.raises(InvariantViolationError):
        trace(twisted, [""])
    with pytest.raises(InvariantViolationError):
        apply(twisted, "  ")
