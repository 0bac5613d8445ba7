"""
Cube on the facelet level and its conversion to and from the cubie level.

`decode` turns a 54-character facelet string into a CubieCube, `encode`
does the opposite. The two are inverse to each other on every string that
describes a solvable cube.
"""

from typing import List

from cube_config import CENTER_INDICES, FACELET_COUNT, FACES_INIT_STATE
from cube_defs import (
    U, D, color_keys, colors, corner_values, edge_values,
    corner_facelet, edge_facelet, corner_color, edge_color,
)
from cube_errors import (
    AmbiguousOrMissingCenterError, MalformedLengthError, UnknownColorSymbolError, UnresolvableColorPairError,
)
from cubie_cube import CubieCube


class FaceCube:
    """Cube on the facelet level"""

    def __init__(self, cube_string: str = FACES_INIT_STATE):
        if len(cube_string) != FACELET_COUNT:
            raise MalformedLengthError(
                f"Facelet string must have {FACELET_COUNT} characters, got {len(cube_string)}",
                expected=FACELET_COUNT, found=len(cube_string),
            )
        unknown = sorted(set(c for c in cube_string if c not in colors))
        if unknown:
            raise UnknownColorSymbolError(
                f"Unknown facelet symbol(s) {''.join(unknown)!r}; expected only {''.join(color_keys)}",
                expected=''.join(color_keys), found=''.join(unknown),
            )
        self.f: List[int] = [colors[c] for c in cube_string]

    def to_string(self) -> str:
        """Gives string representation of a facelet cube"""
        return ''.join(color_keys[c] for c in self.f)

    def __str__(self):
        return self.to_string()

    def to_cubie_cube(self) -> CubieCube:
        """Gives CubieCube representation of a faceletcube"""
        # centers never move, so each one must show its own face
        for face, idx in CENTER_INDICES.items():
            if self.f[idx] != colors[face]:
                found = color_keys[self.f[idx]]
                raise AmbiguousOrMissingCenterError(
                    f"Center of face {face} shows {found}",
                    expected=face, found=found,
                )

        cp = [0] * 8
        co = [0] * 8
        ep = [0] * 12
        eo = [0] * 12

        for i in corner_values:
            # get the colors of the cubie at corner i, starting with U/D
            for ori in range(3):
                if self.f[corner_facelet[i][ori]] in (U, D):
                    break
            else:
                raise UnresolvableColorPairError(
                    f"Corner position {i} has no U or D colored facelet",
                    found=self._corner_colors(i),
                )
            col1 = self.f[corner_facelet[i][(ori + 1) % 3]]
            col2 = self.f[corner_facelet[i][(ori + 2) % 3]]

            for j in corner_values:
                if col1 == corner_color[j][1] and col2 == corner_color[j][2]:
                    # in corner position i we have corner cubie j
                    cp[i] = j
                    co[i] = ori
                    break
            else:
                raise UnresolvableColorPairError(
                    f"Corner position {i} has colors {self._corner_colors(i)} matching no corner cubie",
                    found=self._corner_colors(i),
                )

        for i in edge_values:
            col0 = self.f[edge_facelet[i][0]]
            col1 = self.f[edge_facelet[i][1]]
            for j in edge_values:
                if col0 == edge_color[j][0] and col1 == edge_color[j][1]:
                    ep[i] = j
                    eo[i] = 0
                    break
                if col0 == edge_color[j][1] and col1 == edge_color[j][0]:
                    ep[i] = j
                    eo[i] = 1
                    break
            else:
                found = color_keys[col0] + color_keys[col1]
                raise UnresolvableColorPairError(
                    f"Edge position {i} has colors {found} matching no edge cubie",
                    found=found,
                )

        return CubieCube(cp, co, ep, eo)

    @classmethod
    def from_cubie_cube(cls, cc: CubieCube) -> "FaceCube":
        """return cube in facelet representation"""
        fc = cls()
        for i in corner_values:
            j = cc.cp[i]    # corner cubie with index j is at corner position with index i
            ori = cc.co[i]  # orientation of this cubie
            for n in range(3):
                fc.f[corner_facelet[i][(n + ori) % 3]] = corner_color[j][n]
        for i in edge_values:
            ori = cc.eo[i]
            for n in range(2):
                fc.f[edge_facelet[i][(n + ori) % 2]] = edge_color[cc.ep[i]][n]
        return fc

    def _corner_colors(self, i: int) -> str:
        return ''.join(color_keys[self.f[k]] for k in corner_facelet[i])


def decode(facelets: str, verify: bool = True) -> CubieCube:
    """Facelet string -> CubieCube.

    With `verify` the decoded cube is checked for solvability and an
    InvariantViolationError is raised for impossible cubes.
    """
    cc = FaceCube(facelets).to_cubie_cube()
    if verify:
        cc.check()
    return cc


def encode(cc: CubieCube) -> str:
    """CubieCube -> facelet string."""
    return FaceCube.from_cubie_cube(cc).to_string()
