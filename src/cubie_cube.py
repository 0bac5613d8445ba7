"""
Cube on the cubie level.

A CubieCube describes a cube state by the permutation and orientation of its
8 corners and 12 edges: cp[i] is the corner cubie sitting in corner position
i and co[i] its orientation, ep/eo the same for edges. Instances are
immutable; every group operation returns a new cube.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import cube_coord as coord
from cube_defs import corner_values, edge_values
from cube_errors import InvariantViolationError

SOLVED_CP: Tuple[int, ...] = tuple(corner_values)
SOLVED_CO: Tuple[int, ...] = (0,) * 8
SOLVED_EP: Tuple[int, ...] = tuple(edge_values)
SOLVED_EO: Tuple[int, ...] = (0,) * 12


class VerifyStatus(IntEnum):
    OK = 0
    EDGE_MISSING = -2
    FLIP_ERROR = -3
    CORNER_MISSING = -4
    TWIST_ERROR = -5
    PARITY_ERROR = -6


VERIFY_MESSAGES = {
    VerifyStatus.OK: "Cube OK",
    VerifyStatus.EDGE_MISSING: "Not all 12 edges exist exactly once",
    VerifyStatus.FLIP_ERROR: "Flip error: One edge has to be flipped",
    VerifyStatus.CORNER_MISSING: "Not all corners exist exactly once",
    VerifyStatus.TWIST_ERROR: "Twist error: One corner has to be twisted",
    VerifyStatus.PARITY_ERROR: "Parity error: Two corners or two edges have to be exchanged",
}


def corner_multiply(a: "CubieCube", b: "CubieCube") -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Multiply cube a with cube b, restricted to the corners.

    Reflections of the whole cube are described by permutations too, which
    complicates the corners: the orientations of mirrored corners are the
    numbers 3, 4 and 5, and the composition of orientations is an addition
    in the dihedral group D3 with 6 elements instead of addition modulo 3.
    """
    c_perm = []
    c_ori = []
    for i in corner_values:
        c_perm.append(a.cp[b.cp[i]])

        ori_a = a.co[b.cp[i]]
        ori_b = b.co[i]

        if ori_a < 3 and ori_b < 3:     # both cubes are regular cubes
            ori = ori_a + ori_b
            if ori >= 3:
                ori -= 3                # the composition is a regular cube
        elif ori_a < 3 and ori_b >= 3:  # cube b is in a mirrored state
            ori = ori_a + ori_b
            if ori >= 6:
                ori -= 3                # the composition is a mirrored cube
        elif ori_a >= 3 and ori_b < 3:  # cube a is in a mirrored state
            ori = ori_a - ori_b
            if ori < 3:
                ori += 3                # the composition is a mirrored cube
        else:                           # both cubes are in mirrored states
            ori = ori_a - ori_b
            if ori < 0:
                ori += 3                # the composition is a regular cube

        c_ori.append(ori)
    return tuple(c_perm), tuple(c_ori)


def edge_multiply(a: "CubieCube", b: "CubieCube") -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Multiply cube a with cube b, restricted to the edges."""
    e_perm = []
    e_ori = []
    for i in edge_values:
        j = b.ep[i]
        e_perm.append(a.ep[j])
        e_ori.append((b.eo[i] + a.eo[j]) % 2)
    return tuple(e_perm), tuple(e_ori)


@dataclass(frozen=True)
class CubieCube:
    """Cube on the cubie level. The default is the solved (identity) cube."""

    cp: Tuple[int, ...] = SOLVED_CP
    co: Tuple[int, ...] = SOLVED_CO
    ep: Tuple[int, ...] = SOLVED_EP
    eo: Tuple[int, ...] = SOLVED_EO

    def __post_init__(self):
        for name, size in (("cp", 8), ("co", 8), ("ep", 12), ("eo", 12)):
            value = tuple(getattr(self, name))
            if len(value) != size:
                raise ValueError(f"{name} must have {size} entries, got {len(value)}")
            object.__setattr__(self, name, value)

    # ********************* Group operations ***************************

    def multiply(self, b: "CubieCube") -> "CubieCube":
        """Return this cube multiplied with b (apply b after self)."""
        cp, co = corner_multiply(self, b)
        ep, eo = edge_multiply(self, b)
        return CubieCube(cp, co, ep, eo)

    __mul__ = multiply

    def inverse(self) -> "CubieCube":
        """Return the cube c with self * c == c * self == identity."""
        ep = [0] * 12
        eo = [0] * 12
        for i in edge_values:
            ep[self.ep[i]] = i
        for i in edge_values:
            eo[i] = self.eo[ep[i]]

        cp = [0] * 8
        co = [0] * 8
        for i in corner_values:
            cp[self.cp[i]] = i
        for i in corner_values:
            ori = self.co[cp[i]]
            if ori >= 3:
                # mirrored orientations are their own inverse
                co[i] = ori
            else:
                co[i] = -ori
                if co[i] < 0:
                    co[i] += 3
        return CubieCube(cp, co, ep, eo)

    def is_solved(self) -> bool:
        return self == SOLVED_CUBE

    # ********************* Verification ***************************

    def corner_parity(self) -> int:
        """Parity of the corner permutation"""
        return coord.corner_parity(self.cp)

    def edge_parity(self) -> int:
        """Parity of the edges permutation. Parity of corners and edges are the same if the cube is solvable."""
        return coord.edge_parity(self.ep)

    def verify(self) -> VerifyStatus:
        """
        Check a cubiecube for solvability. Return the status code.
        0: Cube is solvable
        -2: Not all 12 edges exist exactly once
        -3: Flip error: One edge has to be flipped
        -4: Not all corners exist exactly once
        -5: Twist error: One corner has to be twisted
        -6: Parity error: Two corners or two edges have to be exchanged
        """
        if sorted(self.ep) != list(edge_values):
            return VerifyStatus.EDGE_MISSING

        if sum(self.eo) % 2 != 0:
            return VerifyStatus.FLIP_ERROR

        if sorted(self.cp) != list(corner_values):
            return VerifyStatus.CORNER_MISSING   # missing corners

        if sum(self.co) % 3 != 0:
            return VerifyStatus.TWIST_ERROR      # twisted corner

        if self.edge_parity() != self.corner_parity():
            return VerifyStatus.PARITY_ERROR

        return VerifyStatus.OK

    def check(self) -> "CubieCube":
        """Return self if solvable, raise InvariantViolationError otherwise."""
        status = self.verify()
        if status != VerifyStatus.OK:
            raise InvariantViolationError(int(status), VERIFY_MESSAGES[status])
        return self

    # ********************* Get and set coordinates ***************************
    # get_* returns the coordinate, with_* a copy of this cube whose
    # sub-structure is replaced by the one the coordinate describes.

    def get_twist(self) -> int:
        return coord.get_twist(self.co)

    def with_twist(self, twist: int) -> "CubieCube":
        return CubieCube(self.cp, coord.set_twist(twist), self.ep, self.eo)

    def get_flip(self) -> int:
        return coord.get_flip(self.eo)

    def with_flip(self, flip: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, self.ep, coord.set_flip(flip))

    def get_fr_to_br(self) -> int:
        return coord.get_fr_to_br(self.ep)

    def with_fr_to_br(self, idx: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, coord.set_fr_to_br(idx), self.eo)

    def get_slice(self) -> int:
        return coord.get_slice(self.ep)

    def get_urf_to_dlf(self) -> int:
        return coord.get_urf_to_dlf(self.cp)

    def with_urf_to_dlf(self, idx: int) -> "CubieCube":
        return CubieCube(coord.set_urf_to_dlf(idx), self.co, self.ep, self.eo)

    def get_ur_to_df(self) -> int:
        return coord.get_ur_to_df(self.ep)

    def with_ur_to_df(self, idx: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, coord.set_ur_to_df(idx), self.eo)

    def get_ur_to_ul(self) -> int:
        return coord.get_ur_to_ul(self.ep)

    def with_ur_to_ul(self, idx: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, coord.set_ur_to_ul(idx), self.eo)

    def get_ub_to_df(self) -> int:
        return coord.get_ub_to_df(self.ep)

    def with_ub_to_df(self, idx: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, coord.set_ub_to_df(idx), self.eo)

    def get_urf_to_dlb(self) -> int:
        return coord.get_urf_to_dlb(self.cp)

    def with_urf_to_dlb(self, idx: int) -> "CubieCube":
        return CubieCube(coord.set_urf_to_dlb(idx), self.co, self.ep, self.eo)

    def get_ur_to_br(self) -> int:
        return coord.get_ur_to_br(self.ep)

    def with_ur_to_br(self, idx: int) -> "CubieCube":
        return CubieCube(self.cp, self.co, coord.set_ur_to_br(idx), self.eo)


SOLVED_CUBE = CubieCube()
