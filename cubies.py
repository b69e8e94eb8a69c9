import typing
import numpy as np

from numpy.typing import ArrayLike

from cubetyping import Position
from defaults   import CUBIE_POSITIONS


class Cubie:
    """
    Transform state of one cubie

    Parameters
    ----------
    `name` : Position
        Stable identifier of the cubie
    `home` : ArrayLike
        Offset of the cubie in the static lattice
    `facelets` : tuple
        Facelet indices of the cubie per (x, y, z) axis
    """
    def __init__(self, name : Position, home : ArrayLike, facelets : typing.Tuple = (None, None, None)):
        self.name     = name
        self.home     = np.array(home, dtype=np.float64)
        self.facelets = tuple(facelets)
        self.position    = self.home.copy()
        self.orientation = np.eye(3)

    def __repr__(self):
        return f'Cubie({self.name}, position={self.position.round(3).tolist()})'

    def reset(self):
        """
        Move cubie back to its home offset with no rotation
        """
        self.position    = self.home.copy()
        self.orientation = np.eye(3)

    def rotate(self, rotation : ArrayLike):
        """
        Orbit the cubie around the origin and spin it in place by rotation matrix
        """
        self.position    = rotation @ self.position
        self.orientation = rotation @ self.orientation

    def lattice_position(self) -> typing.Tuple[int, int, int]:
        """
        Current position snapped to the lattice
        """
        return tuple(int(v) for v in np.rint(self.position))


class CubieRegistry:
    """
    Registry of all cubies of the cube, keyed by cubie identifier.
    """
    def __init__(self, positions : typing.Dict = CUBIE_POSITIONS):
        self._cubies = {Position(name): Cubie(name, home, facelets) for name, (home, facelets) in positions.items()}

    def __len__(self):
        return len(self._cubies)

    def __iter__(self) -> typing.Iterator[Cubie]:
        return iter(self._cubies.values())

    def __getitem__(self, name : Position) -> Cubie:
        return self._cubies[name]

    def __contains__(self, name : Position) -> bool:
        return name in self._cubies

    def select(self, names : typing.Iterable[Position]) -> typing.List[Cubie]:
        """
        Get mounted cubies whose identifiers are in `names`
        """
        names = set(names)
        return [cubie for cubie in self if cubie.name in names]

    def reset(self):
        """
        Put every cubie back to its home offset. Safe to call at any time.
        """
        for cubie in self:
            cubie.reset()
