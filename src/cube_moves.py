"""
Face turns on the cubie level and the move notation.

The six clockwise quarter turns are built once at import as CubieCube
constants. A half turn or an inverse quarter turn is the generator
multiplied with itself two or three times.
"""

import re
from typing import Iterable, List, NamedTuple, Sequence, Union

from cube_config import FACE_ORDER, MOVE_INDEX
from cube_defs import (
    URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB,
    UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR,
)
from cube_errors import InvalidMoveError
from cubie_cube import CubieCube

# ************************ Moves on the cubie level ****************************

cpU = [UBR, URF, UFL, ULB, DFR, DLF, DBL, DRB]
coU = [0, 0, 0, 0, 0, 0, 0, 0]
epU = [UB, UR, UF, UL, DR, DF, DL, DB, FR, FL, BL, BR]
eoU = [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]

cpR = [DFR, UFL, ULB, URF, DRB, DLF, DBL, UBR]
coR = [2, 0, 0, 1, 1, 0, 0, 2]
epR = [FR, UF, UL, UB, BR, DF, DL, DB, DR, FL, BL, UR]
eoR = [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]

cpF = [UFL, DLF, ULB, UBR, URF, DFR, DBL, DRB]
coF = [1, 2, 0, 0, 2, 1, 0, 0]
epF = [UR, FL, UL, UB, DR, FR, DL, DB, UF, DF, BL, BR]
eoF = [0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0]

cpD = [URF, UFL, ULB, UBR, DLF, DBL, DRB, DFR]
coD = [0, 0, 0, 0, 0, 0, 0, 0]
epD = [UR, UF, UL, UB, DF, DL, DB, DR, FR, FL, BL, BR]
eoD = [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]

cpL = [URF, ULB, DBL, UBR, DFR, UFL, DLF, DRB]
coL = [0, 1, 2, 0, 0, 2, 1, 0]
epL = [UR, UF, BL, UB, DR, DF, FL, DB, FR, UL, DL, BR]
eoL = [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]

cpB = [URF, UFL, UBR, DRB, DFR, DLF, ULB, DBL]
coB = [0, 0, 1, 2, 0, 0, 2, 1]
epB = [UR, UF, UL, BR, DR, DF, DL, BL, FR, FL, UB, DB]
eoB = [0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 1]

# the 6 basic cube moves, indexed like MOVE_INDEX
MOVE_CUBE = (
    CubieCube(cp=cpU, co=coU, ep=epU, eo=eoU),
    CubieCube(cp=cpR, co=coR, ep=epR, eo=eoR),
    CubieCube(cp=cpF, co=coF, ep=epF, eo=eoF),
    CubieCube(cp=cpD, co=coD, ep=epD, eo=eoD),
    CubieCube(cp=cpL, co=coL, ep=epL, eo=eoL),
    CubieCube(cp=cpB, co=coB, ep=epB, eo=eoB),
)

# ************************ Move notation ****************************

_SUFFIX = {1: "", 2: "2", 3: "'"}
_POWER = {"": 1, "2": 2, "'": 3}

# a single canonical token: face letter, optional ' or 2
MOVE_RE = re.compile(r"^([URFDLB])(['2]?)$")

# typographic quotes typed instead of the apostrophe
_QUOTES = {"’": "'", "′": "'"}


class Move(NamedTuple):
    face: str
    power: int = 1

    @property
    def axis(self) -> int:
        return MOVE_INDEX[self.face]

    def inverse(self) -> "Move":
        return Move(self.face, 4 - self.power)

    def to_cubie_cube(self) -> CubieCube:
        """The group element of this move."""
        cc = MOVE_CUBE[self.axis]
        for _ in range(self.power - 1):
            cc = cc.multiply(MOVE_CUBE[self.axis])
        return cc

    def __str__(self):
        return self.face + _SUFFIX[self.power]


MOVES = tuple(Move(face, power) for face in FACE_ORDER for power in (1, 2, 3))

MoveLike = Union[Move, str]


def _canonical_token(token: str) -> str:
    token = token.strip().upper()
    for quote, apostrophe in _QUOTES.items():
        token = token.replace(quote, apostrophe)
    return token


def parse_move(token: MoveLike) -> Move:
    """Parse one move token like R, U', F2 (case-insensitive)."""
    if isinstance(token, Move):
        return token
    m = MOVE_RE.match(_canonical_token(token))
    if not m:
        raise InvalidMoveError(f"Bad move: {token!r}", expected="[URFDLB]('|2)?", found=token)
    return Move(m.group(1), _POWER[m.group(2)])


def parse_moves(text: str) -> List[Move]:
    """Lenient tokenizer for move-sequence text.

    Characters outside the notation are dropped, tokens that still do not
    match the grammar are skipped. Returns an empty list if nothing matches.
    """
    text = text.upper()
    for quote, apostrophe in _QUOTES.items():
        text = text.replace(quote, apostrophe)
    cleaned = re.sub(r"[^URFDLB'2\s]", " ", text)
    moves = []
    for token in cleaned.split():
        m = MOVE_RE.match(token)
        if m:
            moves.append(Move(m.group(1), _POWER[m.group(2)]))
    return moves


def format_moves(moves: Iterable[MoveLike]) -> str:
    return ' '.join(str(parse_move(mv)) for mv in moves)


def invert_moves(moves: Sequence[MoveLike]) -> List[Move]:
    """The sequence that undoes `moves`."""
    return [parse_move(mv).inverse() for mv in reversed(moves)]


def apply_move(cc: CubieCube, move: MoveLike) -> CubieCube:
    """Apply a move to a cubie cube by repeated multiplication with its generator."""
    mv = parse_move(move)
    for _ in range(mv.power):
        cc = cc.multiply(MOVE_CUBE[mv.axis])
    return cc


def apply_moves(cc: CubieCube, moves: Iterable[MoveLike]) -> CubieCube:
    for mv in moves:
        cc = apply_move(cc, mv)
    return cc
