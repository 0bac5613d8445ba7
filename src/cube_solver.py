"""
cube_solver.py — adapter to the external two-phase search
==========================================================

The cube model in this project never searches for solutions itself. This
module normalizes the user input, checks that the cube can be solved at all
and hands the canonical facelet string to the external search (the
`kociemba` package by default).

Reply contract of the search
- an empty string: the cube is already solved,
- a space separated move sequence (``R U R' U'``),
- a string starting with ``Error``: the search rejected the cube. The text is
  passed on verbatim inside a `SearchError`, never reinterpreted.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import kociemba

from cube_config import FACES_INIT_STATE, SEARCH_ERROR_PREFIX, SEARCH_MAX_DEPTH
from cube_errors import SearchError
from cube_input import parse_to_facelets
from cube_moves import format_moves, parse_move
from cube_trace import trace
from face_cube import decode

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

ALREADY_SOLVED = "Already solved"

SearchFn = Callable[[str], str]


def kociemba_search(facelets: str, max_depth: int = SEARCH_MAX_DEPTH) -> str:
    """Run kociemba.solve and turn its ValueError into an Error-prefixed reply."""
    try:
        return kociemba.solve(facelets, max_depth=max_depth)
    except ValueError as e:
        msg = str(e).strip() or "invalid cube"
        if not msg.startswith(SEARCH_ERROR_PREFIX):
            msg = f"{SEARCH_ERROR_PREFIX}: {msg}"
        return msg


@dataclass
class SolveResult:
    facelets: str
    solution: str
    moves: List[str] = field(default_factory=list)
    trace: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "facelets": self.facelets,
            "solution": self.solution,
            "moves": list(self.moves),
            "trace": list(self.trace),
        }


class CubeSolver:
    """Normalize -> verify -> search -> trace."""

    def __init__(self, search: Optional[SearchFn] = None):
        self._search: SearchFn = search or kociemba_search

    def search(self, facelets: str) -> str:
        """
        Raw reply of the external search for a canonical facelet string.

        The cube is decoded and verified first, so an impossible cube raises
        InvariantViolationError before the search ever sees it.
        """
        decode(facelets)
        if facelets == FACES_INIT_STATE:
            return ""
        raw = self._search(facelets)
        return (raw or "").strip()

    def solve_facelets(self, facelets: str) -> SolveResult:
        raw = self.search(facelets)
        if raw.startswith(SEARCH_ERROR_PREFIX):
            logger.info("Search rejected %s: %s", facelets, raw)
            raise SearchError(raw)

        moves = [str(parse_move(tok)) for tok in raw.split()]
        logger.debug("Solution for %s: %s", facelets, raw or ALREADY_SOLVED)
        return SolveResult(
            facelets=facelets,
            solution=format_moves(moves) if moves else ALREADY_SOLVED,
            moves=moves,
            trace=trace(facelets, moves),
        )

    def solve(self, raw_text: Optional[str]) -> SolveResult:
        """Solve any input shape accepted by parse_to_facelets."""
        return self.solve_facelets(parse_to_facelets(raw_text))
