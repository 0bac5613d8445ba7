"""cube_config.py — project configuration
------------------------------------------

This file centralizes the constants shared by the cube model, the input
normalizer and the HTTP shell. Keep in mind these are *defaults*; the
server entry point lets you override host/port/debug from the command line.

Notes
- Face order is always U, R, F, D, L, B (kociemba order) and every face is
  read row-major, top-left to bottom-right.
- `SERVER_PORT` is read from the `PORT` environment variable at import time.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

import os
from typing import Dict, List, Tuple

# ---------------- Rubik cube configurations ----------------

# 54-character flattened strings describing the solved sticker layout.
# Each character is a color-letter (B,O,Y,G,R,W) or face-letter (U,R,F,D,L,B).
COLOR_INIT_STATE: str = "BBBBBBBBBOOOOOOOOOYYYYYYYYYGGGGGGGGGRRRRRRRRRWWWWWWWWW"
FACES_INIT_STATE: str = "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"

FACELET_COUNT: int = 54

# Map face letter -> index of its generator move.
MOVE_INDEX: Dict[str, int] = {'U': 0, 'R': 1, 'F': 2, 'D': 3, 'L': 4, 'B': 5}

# CENTER_INDICES maps face letter -> index of that face's center
# in the flattened 54-sticker array.
CENTER_INDICES: Dict[str, int] = {'U': 4, 'R': 13, 'F': 22, 'D': 31, 'L': 40, 'B': 49}

# Canonical color and face orderings
COLOR_ORDER: List[str] = ['B', 'O', 'Y', 'G', 'R', 'W']
FACE_ORDER: List[str] = ['U', 'R', 'F', 'D', 'L', 'B']
FACE_TO_COLOR: Dict[str, str] = {'U': 'B', 'R': 'O', 'F': 'Y', 'D': 'G', 'L': 'R', 'B': 'W'}
COLOR_TO_FACE: Dict[str, str] = {c: f for f, c in FACE_TO_COLOR.items()}


# ---------------- Net diagram layout ----------------
# The unfolded cross is 9 rows x 12 columns:
#
#        UUU
#        UUU
#        UUU
#     LLLFFFRRRBBB
#     LLLFFFRRRBBB
#     LLLFFFRRRBBB
#        DDD
#        DDD
#        DDD
#
# NET_FACE_ANCHORS gives the (row, col) of each face's top-left sticker.
NET_ROWS: int = 9
NET_COLS: int = 12
NET_FACE_ANCHORS: Dict[str, Tuple[int, int]] = {
    'U': (0, 3),
    'R': (3, 6),
    'F': (3, 3),
    'D': (6, 3),
    'L': (3, 0),
    'B': (3, 9),
}


# ---------------- External search ----------------
# Maximum solution length handed to kociemba.solve.
SEARCH_MAX_DEPTH: int = 24

# Replies of the external search starting with this prefix signal an
# unsolvable or invalid cube.
SEARCH_ERROR_PREFIX: str = "Error"


# ---------------- HTTP server ----------------

def _env_port(default: int = 8080) -> int:
    value = os.environ.get("PORT", "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


SERVER_HOST: str = "127.0.0.1"
SERVER_PORT: int = _env_port()
# How many consecutive ports to try when the configured one is busy.
PORT_ATTEMPTS: int = 10
