import re
import typing

from collections import Counter

from cubetyping import CubeState, Color, Position
from defaults   import DEFAULT_COLORS, FILLER_COLOR, FACELETS_COUNT, SOLVED_CUBE, CENTER_FACELETS, CUBIE_POSITIONS, FACES


UNKNOWN_COLORS_PATTERN = re.compile(rf'[^{"".join(DEFAULT_COLORS)}]')


class InvalidStateError(ValueError):
    """
    Raised when a cube state can not describe a real cube
    """


def sanitize_state(text : str) -> CubeState:
    """
    Turn free text into a candidate cube state.
    Text is uppercased and every character outside the colour alphabet is dropped.
    Length is not checked.

    Parameters
    ----------
    `text` : str
        Text typed by the user

    Returns
    -------
    `state` : CubeState
        Sanitized state
    """
    return CubeState(UNKNOWN_COLORS_PATTERN.sub('', text.upper()))


def pad_state(state : str) -> CubeState:
    """
    Pad state with filler colour or truncate it to exactly 54 facelets
    """
    return CubeState(state[:FACELETS_COUNT].ljust(FACELETS_COUNT, FILLER_COLOR))


def cubie_colours(state : str) -> typing.Dict[Position, typing.Tuple[Color, Color, Color]]:
    """
    Get colours of every cubie in the lattice.

    Parameters
    ----------
    `state` : str
        Cube state, may be shorter or longer than 54 facelets

    Returns
    -------
    `colours` : dict
        Cubie position to its (x, y, z) colours. None on axes without sticker.
    """
    state = pad_state(state)
    colours = {}
    for name, (_, facelets) in CUBIE_POSITIONS.items():
        colours[Position(name)] = tuple(None if idx is None else state[idx] for idx in facelets)
    return colours


def group_state(state : str, size : int = 4) -> str:
    """
    Split state in groups of `size` facelets separated by spaces, as shown in the text field
    """
    return ' '.join(state[i:i+size] for i in range(0, len(state), size))


def format_net(state : str) -> str:
    """
    Render the cube state as unfolded net.
    Layout is
            U
          L F R B
            D

    Parameters
    ----------
    `state` : str
        Cube state, padded before rendering

    Returns
    -------
    `net` : str
        Multiline text
    """
    state = pad_state(state)
    faces = {face: state[9*i:9*i+9] for i, face in enumerate(FACES)}
    rows  = lambda face: [faces[face][3*r:3*r+3] for r in range(3)]
    lines = []
    for row in rows('U'):
        lines.append(' '*4 + row)
    for r in range(3):
        lines.append(' '.join(rows(face)[r] for face in ('L', 'F', 'R', 'B')))
    for row in rows('D'):
        lines.append(' '*4 + row)
    return '\n'.join(lines)


def validate_state(state : str):
    """
    Check that state can be handed to a solver.

    Raises
    ------
    `InvalidStateError`
        If length is wrong, unknown colours are used, any colour is not used exactly 9 times
        or centres are not in their solved places
    """
    if len(state) != FACELETS_COUNT:
        raise InvalidStateError(f'Cube state must have {FACELETS_COUNT} facelets, got {len(state)}')
    unknown = set(state) - set(DEFAULT_COLORS)
    if unknown:
        raise InvalidStateError(f'Unknown facelet colours: {"".join(sorted(unknown))}')
    counts = Counter(state)
    for color in DEFAULT_COLORS:
        if counts[color] != 9:
            raise InvalidStateError(f'Colour {color} is used {counts[color]} times instead of 9')
    for idx in CENTER_FACELETS:
        if state[idx] != SOLVED_CUBE[idx]:
            raise InvalidStateError(f'Centre facelet {idx} must be {SOLVED_CUBE[idx]}, got {state[idx]}')
