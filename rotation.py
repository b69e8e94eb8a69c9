import typing
import numpy as np

from numpy.typing import ArrayLike

from cubies     import CubieRegistry
from cubetyping import MoveStr
from defaults   import ROTATIONS, REVERSED_FACES, PRIME_TURN, HALF_TURN, STEP_FACTOR, DEFAULT_ANIMATION_SPEED


class InvalidMoveError(ValueError):
    """
    Raised for a move outside of the face turn notation
    """


def parse_move(move : MoveStr) -> typing.Tuple[str, int, int]:
    """
    Split move into its face, direction sign and amount of quarter turns

    Parameters
    ----------
    `move` : MoveStr
        Face letter with optional ' or 2 suffix

    Returns
    -------
    `face` : str
        Face letter
    `direction` : int
        Sign of the angle around the face axis, 1 or -1
    `quarter_turns` : int
        1 for quarter turn, 2 for half turn
    """
    if not isinstance(move, str) or not 1 <= len(move) <= 2 or move[0] not in ROTATIONS:
        raise InvalidMoveError(f'Unknown move {move!r}')
    face, extra = move[0], move[1:]
    if extra not in ('', PRIME_TURN, HALF_TURN):
        raise InvalidMoveError(f'Unknown move {move!r}')
    direction = 1 if extra == PRIME_TURN else -1
    if face in REVERSED_FACES:
        direction = -direction
    quarter_turns = 2 if extra == HALF_TURN else 1
    return face, direction, quarter_turns


def axis_angle_matrix(axis : ArrayLike, angle : float) -> np.ndarray:
    """
    Rotation matrix for rotation by `angle` radians around unit `axis` (Rodrigues' formula)
    """
    x, y, z = axis
    K = np.array([
        [ 0, -z,  y],
        [ z,  0, -x],
        [-y,  x,  0],
    ], dtype=np.float64)
    return np.eye(3) + np.sin(angle)*K + (1 - np.cos(angle))*(K @ K)


class RotationAnimation:
    """
    Frame step of a face turn.
    Every call rotates the cubies of the turned face by a small angle and
    returns True while the turn is in progress, False once it is finished.

    Angular step follows cosine shaped profile over remaining angle:
        theta = (1.1 - ((2*remaining - target)/target)^2) * step_factor
    so the turn accelerates at the start and slows down at the end.

    Parameters
    ----------
    `registry` : CubieRegistry
        Cubies of the cube
    `move` : MoveStr
        Turn to animate
    `speed` : float, optional
        Animation speed factor
    """
    def __init__(self, registry : CubieRegistry, move : MoveStr, speed : float = DEFAULT_ANIMATION_SPEED):
        face, direction, quarter_turns = parse_move(move)
        positions, axis = ROTATIONS[face]
        self.move        = move
        self.axis        = axis
        self.direction   = direction
        self.cubies      = registry.select(positions)
        self.step_factor = STEP_FACTOR * quarter_turns * speed
        self.target      = quarter_turns * np.pi / 2
        self.remaining   = self.target
        if self.step_factor <= 0:
            raise ValueError(f'Animation speed must be positive, got {speed}')

    @property
    def applied(self) -> float:
        """
        Angle already applied to the cubies
        """
        return self.target - self.remaining

    def __call__(self) -> bool:
        if self.remaining <= 0:
            return False

        theta = (1.1 - ((2*self.remaining - self.target) / self.target)**2) * self.step_factor
        theta = min(theta, self.remaining)
        self.remaining -= theta

        rotation = axis_angle_matrix(self.axis, theta * self.direction)
        for cubie in self.cubies:
            cubie.rotate(rotation)

        return True


def animate_rotation(registry : CubieRegistry, move : MoveStr, speed : float = DEFAULT_ANIMATION_SPEED) -> RotationAnimation:
    """
    Create repeatable step function rotating cubies of the face by `move`
    """
    return RotationAnimation(registry, move, speed)
