import numpy as np

"""
Facelet colours of a cube
"""
C_UP    = 'W'
C_RIGHT = 'R'
C_FRONT = 'G'
C_DOWN  = 'Y'
C_LEFT  = 'O'
C_BACK  = 'B'

"""
Ordered colours of a cube, same order as faces in the cube state
"""
DEFAULT_COLORS = (C_UP, C_RIGHT, C_FRONT, C_DOWN, C_LEFT, C_BACK)
FILLER_COLOR   = C_UP

"""
Colours used to draw each facelet symbol
"""
FACELET_COLORS = {
    'W': '#f7f5f5',
    'O': '#ffa500',
    'G': '#008000',
    'R': '#ff0000',
    'Y': '#ffff00',
    'B': '#0000ff',
}
CUBIE_COLOR = '#000000'

"""
Cube state layout: U1..U9, R1..R9, F1..F9, D1..D9, L1..L9, B1..B9
"""
FACES          = ('U', 'R', 'F', 'D', 'L', 'B')
FACELETS_COUNT = 54
SOLVED_CUBE    = ''.join(color*9 for color in DEFAULT_COLORS)
CENTER_FACELETS = (4, 13, 22, 31, 40, 49)

"""
Possible cube turns notations
"""
ROTATION_FACES = ('F', 'B', 'R', 'L', 'U', 'D')
PRIME_TURN     = "'"
HALF_TURN      = '2'
MOVES          = tuple(face + modifier for face in ROTATION_FACES for modifier in ('', PRIME_TURN, HALF_TURN))

SKIP_TURN = '-' # no turn at all, marks the end of a solution

"""
Cubie lattice. Each cubie has its home offset and facelet index per (x, y, z) axis.
"""
CUBIE_POSITIONS = {
    'DLB': ((-1, -1, -1), (42,   33,   53)),
    'DLF': ((-1, -1,  1), (44,   27,   24)),
    'ULB': ((-1,  1, -1), (36,   0,    47)),
    'ULF': ((-1,  1,  1), (38,   6,    18)),
    'DRB': (( 1, -1, -1), (17,   35,   51)),
    'DRF': (( 1, -1,  1), (15,   29,   26)),
    'URB': (( 1,  1, -1), (11,   2,    45)),
    'URF': (( 1,  1,  1), (9,    8,    20)),
    'UR':  (( 1,  1,  0), (10,   5,    None)),
    'UF':  (( 0,  1,  1), (None, 7,    19)),
    'UL':  ((-1,  1,  0), (37,   3,    None)),
    'UB':  (( 0,  1, -1), (None, 1,    46)),
    'DR':  (( 1, -1,  0), (16,   32,   None)),
    'DF':  (( 0, -1,  1), (None, 28,   25)),
    'DL':  ((-1, -1,  0), (43,   30,   None)),
    'DB':  (( 0, -1, -1), (None, 34,   52)),
    'FR':  (( 1,  0,  1), (12,   None, 23)),
    'FL':  ((-1,  0,  1), (41,   None, 21)),
    'BL':  ((-1,  0, -1), (39,   None, 50)),
    'BR':  (( 1,  0, -1), (14,   None, 48)),
    'U':   (( 0,  1,  0), (None, 4,    None)),
    'D':   (( 0, -1,  0), (None, 31,   None)),
    'L':   ((-1,  0,  0), (40,   None, None)),
    'R':   (( 1,  0,  0), (13,   None, None)),
    'F':   (( 0,  0,  1), (None, None, 22)),
    'B':   (( 0,  0, -1), (None, None, 49)),
}

AXES = ('x', 'y', 'z')
AXIS_X = np.array([1.0, 0.0, 0.0])
AXIS_Y = np.array([0.0, 1.0, 0.0])
AXIS_Z = np.array([0.0, 0.0, 1.0])

"""
Cubies turned by each face and the world axis of the turn
"""
ROTATIONS = {
    'F': (('ULF', 'URF', 'DLF', 'DRF', 'UF', 'DF', 'FR', 'FL', 'F'), AXIS_Z),
    'B': (('URB', 'ULB', 'DRB', 'DLB', 'UB', 'DB', 'BL', 'BR', 'B'), AXIS_Z),
    'R': (('URF', 'URB', 'DRF', 'DRB', 'UR', 'DR', 'FR', 'BR', 'R'), AXIS_X),
    'L': (('ULB', 'ULF', 'DLB', 'DLF', 'UL', 'DL', 'FL', 'BL', 'L'), AXIS_X),
    'U': (('ULB', 'URB', 'ULF', 'URF', 'UR', 'UF', 'UL', 'UB', 'U'), AXIS_Y),
    'D': (('DLF', 'DRF', 'DLB', 'DRB', 'DR', 'DF', 'DL', 'DB', 'D'), AXIS_Y),
}
REVERSED_FACES = ('D', 'L', 'B') # faces looking along the negative axis

"""
Animation defaults
"""
DEFAULT_ANIMATION_SPEED = 1.0
STEP_FACTOR             = 0.05
DEFAULT_SCRAMBLE_TURNS  = 100

"""
Facelet geometry defaults
"""
FACELET_SIZE   = 0.88
FACELET_RADIUS = 0.0
FACELET_SEGMENTS = 5

"""
Cubie body geometry defaults
"""
CUBIE_SIZE     = 1.0
CUBIE_RADIUS   = 0.08
CUBIE_SEGMENTS = 5
