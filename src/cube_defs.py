"""
Index names for facelets, colors, corners and edges.

The names of the facelet positions of the cube::

                 |************|
                 |*U1**U2**U3*|
                 |************|
                 |*U4**U5**U6*|
                 |************|
                 |*U7**U8**U9*|
                 |************|
    |************|************|************|************|
    |*L1**L2**L3*|*F1**F2**F3*|*R1**R2**R3*|*B1**B2**B3*|
    |************|************|************|************|
    |*L4**L5**L6*|*F4**F5**F6*|*R4**R5**R6*|*B4**B5**B6*|
    |************|************|************|************|
    |*L7**L8**L9*|*F7**F8**F9*|*R7**R8**R9*|*B7**B8**B9*|
    |************|************|************|************|
                 |************|
                 |*D1**D2**D3*|
                 |************|
                 |*D4**D5**D6*|
                 |************|
                 |*D7**D8**D9*|
                 |************|

A cube definition string "UBL..." means for example: in position U1 we have
the U-color, in position U2 we have the B-color, in position U3 we have the
L-color etc. according to the order U1..U9, R1..R9, F1..F9, D1..D9, L1..L9,
B1..B9.
"""

U1, U2, U3, U4, U5, U6, U7, U8, U9 = range(0, 9)
R1, R2, R3, R4, R5, R6, R7, R8, R9 = range(9, 18)
F1, F2, F3, F4, F5, F6, F7, F8, F9 = range(18, 27)
D1, D2, D3, D4, D5, D6, D7, D8, D9 = range(27, 36)
L1, L2, L3, L4, L5, L6, L7, L8, L9 = range(36, 45)
B1, B2, B3, B4, B5, B6, B7, B8, B9 = range(45, 54)

facelet_values = tuple(range(54))

# ++++++++++++++++++++++++++++++ Names the colors of the cube facelets ++++++++++++++++++++++++++++++++++++++++++++++++

U, R, F, D, L, B = range(6)

color_values = (U, R, F, D, L, B)
color_keys = ('U', 'R', 'F', 'D', 'L', 'B')
colors = {key: value for key, value in zip(color_keys, color_values)}

# +++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++
# The names of the corner positions of the cube. Corner URF e.g., has an U(p), a R(ight) and a F(ront) facelet

URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB = range(8)

corner_values = (URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB)
corner_keys = ('URF', 'UFL', 'ULB', 'UBR', 'DFR', 'DLF', 'DBL', 'DRB')

# +++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++
# The names of the edge positions of the cube. Edge UR e.g., has an U(p) and R(ight) facelet.

UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR = range(12)

edge_values = (UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR)
edge_keys = ('UR', 'UF', 'UL', 'UB', 'DR', 'DF', 'DL', 'DB', 'FR', 'FL', 'BL', 'BR')

# +++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++
# Map the corner positions to facelet positions. corner_facelet[URF][0] e.g. gives the position of the facelet in
# the URF corner position which defines the orientation. corner_facelet[URF][1] and corner_facelet[URF][2] give the
# position of the other two facelets of the URF corner (clockwise).

corner_facelet = (
    (U9, R1, F3), (U7, F1, L3), (U1, L1, B3), (U3, B1, R3),
    (D3, F9, R7), (D1, L9, F7), (D7, B9, L7), (D9, R9, B7),
)

# Map the edge positions to facelet positions. edge_facelet[UR][0] e.g. gives the position of the facelet in
# the UR edge position which defines the orientation. edge_facelet[UR][1] gives the position of the other facelet.

edge_facelet = (
    (U6, R2), (U8, F2), (U4, L2), (U2, B2), (D6, R8), (D2, F8),
    (D4, L8), (D8, B8), (F6, R4), (F4, L6), (B6, L4), (B4, R6),
)

# Map the corner positions to facelet colors.
corner_color = (
    (U, R, F), (U, F, L), (U, L, B), (U, B, R),
    (D, F, R), (D, L, F), (D, B, L), (D, R, B),
)

# Map the edge positions to facelet colors.
edge_color = (
    (U, R), (U, F), (U, L),
    (U, B), (D, R), (D, F),
    (D, L), (D, B), (F, R),
    (F, L), (B, L), (B, R),
)
