import typing

CubeState      = typing.NewType('CubeState', str)
CubeState.__doc__ = \
    """
    String representation of the cube: 54 facelet colours ordered
    U1..U9, R1..R9, F1..F9, D1..D9, L1..L9, B1..B9.
    Possible colours: W, R, G, Y, O, B.
    """

MoveStr        = typing.NewType('MoveStr', str)
MoveStr.__doc__ = \
    """
    String representation of a single face turn.
    Possible values for clockwise turns:
        U - up,
        D - down,
        R - right,
        L - left,
        F - front,
        B - back.
    For counter-clockwise turns add ' sign at the end of the turn,
    for half turns add 2:
        U' - up counter-clockwise turn,
        R2 - right half turn,
    etc.
    """

Position       = typing.NewType('Position', str)
Position.__doc__ = \
    """
    Identifier of a cubie by the faces it touches, e.g. URF, UR or U.
    """

# facelet colour letter, None when a cubie has no sticker on an axis
Color = typing.Optional[str]


class MoveTransition(typing.NamedTuple):
    """
    One step of a solution

    Parameters
    ----------
    `move` : MoveStr
        Turn to apply
    `start_state` : CubeState
        Cube state before the turn
    `end_state` : CubeState
        Cube state after the turn
    """
    move        : MoveStr
    start_state : CubeState
    end_state   : CubeState


Solution = typing.List[MoveTransition]
