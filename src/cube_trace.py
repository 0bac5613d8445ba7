"""Apply moves to facelet strings and record the intermediate states."""

from typing import Iterable, List, Sequence

from cube_moves import MoveLike, apply_move, parse_move
from face_cube import decode, encode


def apply(facelets: str, move: MoveLike) -> str:
    """Facelet string after one move.

    The cube is decoded and verified even for a blank move, which then
    returns it unchanged.
    """
    cc = decode(facelets)
    if isinstance(move, str) and not move.strip():
        return facelets
    return encode(apply_move(cc, parse_move(move)))


def apply_all(facelets: str, moves: Iterable[MoveLike]) -> str:
    cur = facelets
    for mv in moves:
        cur = apply(cur, mv)
    return cur


def trace(facelets: str, moves: Sequence[MoveLike]) -> List[str]:
    """
    The start state followed by the state after each move.

    The result always has len(moves) + 1 entries and is a fresh list on
    every call.
    """
    out = [facelets]
    cur = facelets
    for mv in moves:
        cur = apply(cur, mv)
        out.append(cur)
    return out
