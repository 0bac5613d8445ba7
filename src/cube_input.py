"""
Turn user-supplied cube text into a canonical facelet string.

Three input shapes are recognised, tried in this order:

1. a 9x12 unfolded net drawn with one letter per sticker (any six letters;
   the face centers define which letter belongs to which face),
2. a compact 54-sticker string, either face letters (URFDLB) or color
   letters (BOYGRW) relabelled through the 6 center stickers,
3. a scramble in move notation such as ``R U R' U'``, replayed from the
   solved cube.

Empty input is the solved cube.
"""

import logging
import re
from typing import Dict, List, Optional

from cube_config import (
    CENTER_INDICES, COLOR_ORDER, FACE_ORDER, FACE_TO_COLOR, FACELET_COUNT,
    FACES_INIT_STATE, NET_COLS, NET_FACE_ANCHORS, NET_ROWS,
)
from cube_errors import (
    AmbiguousOrMissingCenterError, MalformedLengthError, NoValidMovesError, UnknownColorSymbolError,
)
from cube_moves import parse_moves
from cube_trace import apply_all

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

FACE_LETTERS = ''.join(FACE_ORDER)
COLOR_LETTERS = ''.join(COLOR_ORDER)

# shortest letters-only input still reported as a broken sticker string
# rather than as a scramble without valid moves
MIN_STICKER_LIKE = 9


def parse_to_facelets(raw: Optional[str]) -> str:
    """Classify `raw` and return the canonical 54-character facelet string.

    Raises a CubeInputError subclass when the text fits no shape.
    """
    raw = "" if raw is None else raw.replace("\r\n", "\n").replace("\r", "\n")
    raw = raw.rstrip()
    if not raw.strip():
        logger.debug("Empty input, using the solved cube")
        return FACES_INIT_STATE

    lines = [ln for ln in raw.split("\n") if ln.strip()]
    if len(lines) >= NET_ROWS and max(len(ln) for ln in lines) >= 9:
        logger.debug("Input looks like a net diagram (%d lines)", len(lines))
        return parse_net(lines[:NET_ROWS])

    compact = re.sub(r"\s+", "", raw)
    if len(compact) == FACELET_COUNT:
        logger.debug("Input looks like a 54-sticker string")
        return normalize54(compact)

    moves = parse_moves(raw)
    if moves:
        logger.debug("Input parsed as %d moves", len(moves))
        return apply_all(FACES_INIT_STATE, moves)

    if compact.isalpha() and len(compact) >= MIN_STICKER_LIKE:
        raise MalformedLengthError(
            f"Cube string must have {FACELET_COUNT} stickers, got {len(compact)}",
            expected=FACELET_COUNT, found=len(compact),
        )
    raise NoValidMovesError("No valid moves found. Example: R U R' U'", found=raw)


def normalize54(s: str) -> str:
    """Relabel a 54-sticker string to face letters."""
    if len(s) != FACELET_COUNT:
        raise MalformedLengthError(
            f"Cube string must have {FACELET_COUNT} stickers, got {len(s)}",
            expected=FACELET_COUNT, found=len(s),
        )
    # already uses URFDLB
    if all(c in FACE_LETTERS for c in s):
        return s

    # report unknown symbols against the alphabet the string mostly uses
    alphabet = max((FACE_LETTERS, COLOR_LETTERS), key=lambda a: sum(c in a for c in s))
    unknown = sorted(set(c for c in s if c not in alphabet))
    if unknown:
        raise UnknownColorSymbolError(
            f"Unknown color(s) found: {''.join(unknown)}",
            expected=alphabet, found=''.join(unknown),
        )

    color_to_face = _center_mapping({face: s[idx] for face, idx in CENTER_INDICES.items()})
    out = []
    for c in s:
        face = color_to_face.get(c)
        if face is None:
            raise UnknownColorSymbolError(
                f"Unknown color found: {c}; centers define {''.join(color_to_face)}",
                expected=''.join(color_to_face), found=c,
            )
        out.append(face)
    return ''.join(out)


def parse_net(lines_in: List[str]) -> str:
    """Read a 9x12 unfolded net. Short rows are padded with spaces."""
    lines = [ln.ljust(NET_COLS) for ln in lines_in[:NET_ROWS]]
    while len(lines) < NET_ROWS:
        lines.append(" " * NET_COLS)

    centers = {}
    for face in FACE_ORDER:
        r0, c0 = NET_FACE_ANCHORS[face]
        center = _at(lines, r0 + 1, c0 + 1)
        if center == " ":
            raise AmbiguousOrMissingCenterError(
                f"Net format looks wrong (missing {face} center color at row {r0 + 1} col {c0 + 1})",
                found=face,
            )
        centers[face] = center
    color_to_face = _center_mapping(centers)

    out = []
    for face in FACE_ORDER:
        r0, c0 = NET_FACE_ANCHORS[face]
        for r in range(r0, r0 + 3):
            for c in range(c0, c0 + 3):
                ch = _at(lines, r, c)
                if ch == " ":
                    raise UnknownColorSymbolError(
                        f"Missing color in net at row {r} col {c}",
                        expected=''.join(color_to_face), found=ch,
                    )
                mapped = color_to_face.get(ch)
                if mapped is None:
                    raise UnknownColorSymbolError(
                        f"Unknown color '{ch}' in net at row {r} col {c}. Centers define expected colors.",
                        expected=''.join(color_to_face), found=ch,
                    )
                out.append(mapped)
    return ''.join(out)


def build_net_text(facelets: str, face_to_color: Optional[Dict[str, str]] = None) -> str:
    """Render a facelet string as a 9x12 net, one letter per sticker.

    Face letters are kept unless `face_to_color` maps them to color letters.
    """
    if len(facelets) != FACELET_COUNT:
        raise MalformedLengthError(
            f"Cube string must have {FACELET_COUNT} stickers, got {len(facelets)}",
            expected=FACELET_COUNT, found=len(facelets),
        )
    mapping = face_to_color or {f: f for f in FACE_ORDER}
    grid = [[" "] * NET_COLS for _ in range(NET_ROWS)]
    for fi, face in enumerate(FACE_ORDER):
        r0, c0 = NET_FACE_ANCHORS[face]
        block = facelets[fi * 9:(fi + 1) * 9]
        for k, ch in enumerate(block):
            grid[r0 + k // 3][c0 + k % 3] = mapping[ch]
    return '\n'.join(''.join(row).rstrip() for row in grid)


def build_color_net_text(facelets: str) -> str:
    return build_net_text(facelets, FACE_TO_COLOR)


def _center_mapping(centers: Dict[str, str]) -> Dict[str, str]:
    """face -> center color  ==>  center color -> face; centers must differ."""
    color_to_face: Dict[str, str] = {}
    for face, color in centers.items():
        if color in color_to_face:
            raise AmbiguousOrMissingCenterError(
                f"Center color '{color}' used by both {color_to_face[color]} and {face}",
                found=color,
            )
        color_to_face[color] = face
    return color_to_face


def _at(lines: List[str], r: int, c: int) -> str:
    if r < 0 or r >= len(lines):
        return " "
    ln = lines[r]
    if c < 0 or c >= len(ln):
        return " "
    return ln[c]
