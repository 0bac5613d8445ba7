"""
Coordinates of the cubie level.

Every coordinate compresses one sub-structure of a cube (orientations, the
places and order of a group of pieces) into a small integer and back. The
functions work on plain sequences so they can be used without a CubieCube:

- get_*(seq) -> int        rank of the sub-structure found in seq
- set_*(idx) -> list       a permutation/orientation list with that rank

Permutation coordinates combine two numbers: the rank `a` of the subset of
slots holding the tracked pieces (a sum of binomial coefficients) and the
rank `b` of their relative order (factorial base, obtained by rotating the
tracked pieces until each one is home and counting the rotations). The
coordinate is `a * k! + b` for k tracked pieces.
"""

from typing import List, Sequence, Tuple

from cube_defs import (
    URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB,
    UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR,
)

# ranges of the coordinates
N_TWIST = 2187          # 3^7 possible corner orientations
N_FLIP = 2048           # 2^11 possible edge orientations
N_SLICE = 495           # 12 choose 4 places of the UD-slice edges
N_FR_TO_BR = 11880      # 12!/(12-4)! places and order of the UD-slice edges
N_URF_TO_DLF = 20160    # 8!/(8-6)! places and order of corners URF..DLF
N_UR_TO_DF = 665280     # 12!/(12-6)! places and order of edges UR..DF
N_UR_TO_DF_PHASE2 = 20160  # the same, restricted to the 8 U/D-layer slots
N_UR_TO_UL = 1320       # 12!/(12-3)! places and order of edges UR,UF,UL
N_UB_TO_DF = 1320       # 12!/(12-3)! places and order of edges UB,DR,DF
N_URF_TO_DLB = 40320    # 8! corner permutations
N_UR_TO_BR = 479001600  # 12! edge permutations
N_PARITY = 2


# n choose k
def cnk(n: int, k: int) -> int:
    if n < k:
        return 0
    if k > n // 2:
        k = n - k
    s = 1
    i = n
    j = 1
    while i != n - k:
        s *= i
        s //= j
        i -= 1
        j += 1
    return s


def rotate_left(arr: List[int], l: int, r: int) -> None:
    """Left rotation of all array elements between l and r"""
    temp = arr[l]
    for i in range(l, r):
        arr[i] = arr[i + 1]
    arr[r] = temp


def rotate_right(arr: List[int], l: int, r: int) -> None:
    """Right rotation of all array elements between l and r"""
    temp = arr[r]
    for i in range(r, l, -1):
        arr[i] = arr[i - 1]
    arr[l] = temp


def _check_range(name: str, idx: int, n: int) -> None:
    if not 0 <= idx < n:
        raise ValueError(f"{name} coordinate {idx} out of range [0, {n})")


def _order_rank(pieces: Sequence[int], first: int) -> int:
    """Rank of the order of `pieces`, a permutation of first..first+len-1."""
    perm = list(pieces)
    b = 0
    for j in range(len(perm) - 1, 0, -1):
        k = 0
        while perm[j] != first + j:
            rotate_left(perm, 0, j)
            k += 1
        b = (j + 1) * b + k
    return b


def _order_unrank(b: int, pieces: Sequence[int]) -> List[int]:
    perm = list(pieces)
    for j in range(1, len(perm)):
        k = b % (j + 1)
        b //= j + 1
        while k > 0:
            k -= 1
            rotate_right(perm, 0, j)
    return perm


def _subset_rank(perm: Sequence[int], low: int, high: int) -> Tuple[int, List[int]]:
    """Combination rank of the slots holding pieces low..high, scanning upwards."""
    a = 0
    x = 0
    chosen = []
    for j, piece in enumerate(perm):
        if low <= piece <= high:
            a += cnk(j, x + 1)
            chosen.append(piece)
            x += 1
    return a, chosen


def _subset_place(a: int, pieces: Sequence[int], size: int, filler: int) -> List[int]:
    perm = [filler] * size
    x = len(pieces) - 1
    for j in range(size - 1, -1, -1):
        if x >= 0 and a - cnk(j, x + 1) >= 0:
            perm[j] = pieces[x]
            a -= cnk(j, x + 1)
            x -= 1
    return perm


def _fill(perm: List[int], filler: int, others: Sequence[int]) -> List[int]:
    x = 0
    for j in range(len(perm)):
        if perm[j] == filler:
            perm[j] = others[x]
            x += 1
    return perm


# ********************* Orientation coordinates ***************************

def get_twist(co: Sequence[int]) -> int:
    """return the twist of the 8 corners. 0 <= twist < 3^7"""
    ret = 0
    for i in range(URF, DRB):
        ret = 3 * ret + co[i]
    return ret


def set_twist(twist: int) -> List[int]:
    _check_range("twist", twist, N_TWIST)
    co = [0] * 8
    twist_parity = 0
    for i in range(DRB - 1, URF - 1, -1):
        co[i] = twist % 3
        twist_parity += co[i]
        twist //= 3
    co[DRB] = (3 - twist_parity % 3) % 3
    return co


def get_flip(eo: Sequence[int]) -> int:
    """return the flip of the 12 edges. 0 <= flip < 2^11"""
    ret = 0
    for i in range(UR, BR):
        ret = 2 * ret + eo[i]
    return ret


def set_flip(flip: int) -> List[int]:
    _check_range("flip", flip, N_FLIP)
    eo = [0] * 12
    flip_parity = 0
    for i in range(BR - 1, UR - 1, -1):
        eo[i] = flip % 2
        flip_parity += eo[i]
        flip //= 2
    eo[BR] = (2 - flip_parity % 2) % 2
    return eo


# ********************* Parity ***************************

def permutation_parity(perm: Sequence[int]) -> int:
    """0 for an even permutation, 1 for an odd one (inversion count mod 2)."""
    s = 0
    for i in range(len(perm) - 1, 0, -1):
        for j in range(i - 1, -1, -1):
            if perm[j] > perm[i]:
                s += 1
    return s % 2


def corner_parity(cp: Sequence[int]) -> int:
    """Parity of the corner permutation"""
    return permutation_parity(cp)


def edge_parity(ep: Sequence[int]) -> int:
    """Parity of the edge permutation. Parity of corners and edges are the same if the cube is solvable."""
    return permutation_parity(ep)


# ********************* Permutation coordinates ***************************

def get_fr_to_br(ep: Sequence[int]) -> int:
    """Places and order of the UD-slice edges FR, FL, BL and BR."""
    a = 0
    x = 0
    edge4 = [0] * 4
    # the combination is ranked from the BR end of the array
    for j in range(BR, UR - 1, -1):
        if FR <= ep[j] <= BR:
            a += cnk(11 - j, x + 1)
            edge4[3 - x] = ep[j]
            x += 1
    return 24 * a + _order_rank(edge4, FR)


def set_fr_to_br(idx: int) -> List[int]:
    _check_range("FRtoBR", idx, N_FR_TO_BR)
    slice_edge = _order_unrank(idx % 24, [FR, FL, BL, BR])
    a = idx // 24
    ep = [-1] * 12
    x = 3
    for j in range(UR, BR + 1):
        if x >= 0 and a - cnk(11 - j, x + 1) >= 0:
            ep[j] = slice_edge[3 - x]
            a -= cnk(11 - j, x + 1)
            x -= 1
    return _fill(ep, -1, [UR, UF, UL, UB, DR, DF, DL, DB])


def get_slice(ep: Sequence[int]) -> int:
    """Places of the UD-slice edges, ignoring their order."""
    return get_fr_to_br(ep) // 24


def get_urf_to_dlf(cp: Sequence[int]) -> int:
    """Permutation of all corners except DBL and DRB"""
    a, corner6 = _subset_rank(cp, URF, DLF)
    return 720 * a + _order_rank(corner6, URF)


def set_urf_to_dlf(idx: int) -> List[int]:
    _check_range("URFtoDLF", idx, N_URF_TO_DLF)
    corner6 = _order_unrank(idx % 720, [URF, UFL, ULB, UBR, DFR, DLF])
    cp = _subset_place(idx // 720, corner6, 8, -1)
    return _fill(cp, -1, [DBL, DRB])


def get_ur_to_df(ep: Sequence[int]) -> int:
    """Permutation of the six edges UR, UF, UL, UB, DR, DF."""
    a, edge6 = _subset_rank(ep, UR, DF)
    return 720 * a + _order_rank(edge6, UR)


def set_ur_to_df(idx: int) -> List[int]:
    _check_range("URtoDF", idx, N_UR_TO_DF)
    edge6 = _order_unrank(idx % 720, [UR, UF, UL, UB, DR, DF])
    ep = _subset_place(idx // 720, edge6, 12, -1)
    return _fill(ep, -1, [DL, DB, FR, FL, BL, BR])


def get_ur_to_ul(ep: Sequence[int]) -> int:
    """Permutation of the three edges UR, UF, UL"""
    a, edge3 = _subset_rank(ep, UR, UL)
    return 6 * a + _order_rank(edge3, UR)


def set_ur_to_ul(idx: int) -> List[int]:
    """Only UR, UF and UL are placed; every other slot is left holding BR."""
    _check_range("URtoUL", idx, N_UR_TO_UL)
    edge3 = _order_unrank(idx % 6, [UR, UF, UL])
    return _subset_place(idx // 6, edge3, 12, BR)


def get_ub_to_df(ep: Sequence[int]) -> int:
    """Permutation of the three edges UB, DR, DF"""
    a, edge3 = _subset_rank(ep, UB, DF)
    return 6 * a + _order_rank(edge3, UB)


def set_ub_to_df(idx: int) -> List[int]:
    """Only UB, DR and DF are placed; every other slot is left holding BR."""
    _check_range("UBtoDF", idx, N_UB_TO_DF)
    edge3 = _order_unrank(idx % 6, [UB, DR, DF])
    return _subset_place(idx // 6, edge3, 12, BR)


def merge_ur_to_df(ur_to_ul: int, ub_to_df: int) -> int:
    """Combine the two 3-edge coordinates into the 6-edge URtoDF coordinate.

    Both edge triples must lie in the 8 U/D-layer slots. Returns -1 if the
    two triples claim the same slot.
    """
    a = set_ur_to_ul(ur_to_ul)
    b = set_ub_to_df(ub_to_df)
    for i in range(8):
        if a[i] != BR:
            if b[i] != BR:   # collision
                return -1
            b[i] = a[i]
    return get_ur_to_df(b)


def get_urf_to_dlb(cp: Sequence[int]) -> int:
    """Rank of the full corner permutation. 0 <= idx < 8!"""
    return _order_rank(cp, URF)


def set_urf_to_dlb(idx: int) -> List[int]:
    _check_range("URFtoDLB", idx, N_URF_TO_DLB)
    return _order_unrank(idx, [URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB])


def get_ur_to_br(ep: Sequence[int]) -> int:
    """Rank of the full edge permutation. 0 <= idx < 12!"""
    return _order_rank(ep, UR)


def set_ur_to_br(idx: int) -> List[int]:
    _check_range("URtoBR", idx, N_UR_TO_BR)
    return _order_unrank(idx, [UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR])
