"""Shared test helpers: random scrambles and a sticker-level move simulator.

The simulator moves stickers through 3D space and does not use the cubie
model at all, so it can be compared against it.
"""

import random
from typing import List, Optional

FACES = ['U', 'R', 'F', 'D', 'L', 'B']
MODS = ['', "'", '2']  # normal, inverse, double

SOLVED = "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"

NORMALS = {
    'U': (0, 1, 0),
    'R': (1, 0, 0),
    'F': (0, 0, 1),
    'D': (0, -1, 0),
    'L': (-1, 0, 0),
    'B': (0, 0, -1),
}


def _sticker_position(face: str, r: int, c: int):
    if face == 'U':
        return (c - 1, 1, r - 1)
    if face == 'R':
        return (1, 1 - r, 1 - c)
    if face == 'F':
        return (c - 1, 1 - r, 1)
    if face == 'D':
        return (c - 1, -1, 1 - r)
    if face == 'L':
        return (-1, 1 - r, c - 1)
    return (1 - c, 1 - r, -1)   # B


STICKERS = [
    (_sticker_position(face, k // 3, k % 3), NORMALS[face])
    for face in FACES for k in range(9)
]
STICKER_INDEX = {s: i for i, s in enumerate(STICKERS)}


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _rotate_cw(v, n):
    """Quarter turn of v about n, clockwise seen from the tip of n."""
    cross = (n[1] * v[2] - n[2] * v[1], n[2] * v[0] - n[0] * v[2], n[0] * v[1] - n[1] * v[0])
    d = _dot(n, v)
    return (n[0] * d - cross[0], n[1] * d - cross[1], n[2] * d - cross[2])


def _quarter_turn_targets(face: str) -> List[int]:
    n = NORMALS[face]
    targets = []
    for pos, normal in STICKERS:
        if _dot(pos, n) == 1:
            targets.append(STICKER_INDEX[(_rotate_cw(pos, n), _rotate_cw(normal, n))])
        else:
            targets.append(STICKER_INDEX[(pos, normal)])
    return targets


QUARTER_TURN = {face: _quarter_turn_targets(face) for face in FACES}


def sim_apply(facelets: str, token: str) -> str:
    power = {'': 1, '2': 2, "'": 3}[token[1:]]
    cur = list(facelets)
    for _ in range(power):
        new = [''] * 54
        for i, j in enumerate(QUARTER_TURN[token[0]]):
            new[j] = cur[i]
        cur = new
    return ''.join(cur)


def sim_apply_all(facelets: str, tokens: List[str]) -> str:
    for tok in tokens:
        facelets = sim_apply(facelets, tok)
    return facelets


def random_scramble_moves(length: int = 25, rng: Optional[random.Random] = None) -> List[str]:
    """Random scramble as move tokens; never turns the same face twice in a row."""
    rng = rng or random.Random()
    moves = []
    prev_face = None
    for _ in range(length):
        face = rng.choice(FACES)
        while face == prev_face:
            face = rng.choice(FACES)
        moves.append(face + rng.choice(MODS))
        prev_face = face
    return moves
