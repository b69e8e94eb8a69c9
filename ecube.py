import typing

from rubik.cube import Cube

from rotation   import InvalidMoveError
from cubetyping import CubeState, MoveStr
from defaults   import FACES, FACELETS_COUNT, SOLVED_CUBE, MOVES, PRIME_TURN, HALF_TURN


def _net_indices() -> typing.Tuple[int, ...]:
    """
    Index in the Cube net string of every facelet of the cube state.
    Net string of Cube class is
            UUU
            UUU
            UUU
        LLL FFF RRR BBB
        LLL FFF RRR BBB
        LLL FFF RRR BBB
            DDD
            DDD
            DDD
    read row by row.
    """
    band_offset = {'L': 0, 'F': 3, 'R': 6, 'B': 9}
    indices = []
    for face in FACES:
        for r in range(3):
            for c in range(3):
                if face == 'U':
                    indices.append(r*3 + c)
                elif face == 'D':
                    indices.append(45 + r*3 + c)
                else:
                    indices.append(9 + r*12 + band_offset[face] + c)
    return tuple(indices)


NET_INDICES = _net_indices()


class ECube(Cube):
    """
    Expand of Cube class working with cube states ordered U, R, F, D, L, B
    and face turns in ', 2 notation.
    """
    def __init__(self, cube_str : str = None):
        super().__init__(cube_str if cube_str is not None else ECube.state_to_net(SOLVED_CUBE))

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other : Cube) -> bool:
        return self.flat_str() == other.flat_str()

    @staticmethod
    def state_to_net(state : CubeState) -> str:
        """
        Convert cube state to the net string accepted by Cube class

        Parameters
        ----------
        `state` : CubeState
            Cube state of 54 facelets

        Returns
        -------
        `net` : str
            Cube net string
        """
        net = [''] * FACELETS_COUNT
        for i, net_idx in enumerate(NET_INDICES):
            net[net_idx] = state[i]
        return ''.join(net)

    @staticmethod
    def net_to_state(net : str) -> CubeState:
        """
        Convert net string of Cube class to cube state
        """
        return CubeState(''.join(net[net_idx] for net_idx in NET_INDICES))

    @classmethod
    def from_state(cls, state : CubeState) -> 'ECube':
        return cls(ECube.state_to_net(state))

    def to_state(self) -> CubeState:
        """
        Get cube state of the cube
        """
        return ECube.net_to_state(self.flat_str())

    def copy(self) -> 'ECube':
        """
        Get a copy of cube
        """
        return ECube(self.flat_str())

    @staticmethod
    def _prepare_turns(moves : typing.Iterable[MoveStr] | str) -> typing.List[str]:
        """
        Translate face turns into names of Cube turn methods, e.g. R' -> Ri, R2 -> R R
        """
        if isinstance(moves, str):
            moves = moves.split()
        turns = []
        for move in moves:
            if move not in MOVES:
                raise InvalidMoveError(f'Unknown move {move!r}')
            face, extra = move[0], move[1:]
            if extra == PRIME_TURN:
                turns.append(face + 'i')
            elif extra == HALF_TURN:
                turns.extend([face, face])
            else:
                turns.append(face)
        return turns

    def turn(self, moves : typing.Iterable[MoveStr] | str) -> 'ECube':
        """
        Apply turns to copy of cube and return it

        Parameters
        ----------
        `moves` : list | str
            Turns in face turn notation, list or space separated string

        Returns
        -------
        `cube` : ECube
            Cube with applied moves
        """
        cube = self.copy()
        cube.turn_(moves)
        return cube

    def turn_(self, moves : typing.Iterable[MoveStr] | str):
        """
        Apply turns to cube itself
        """
        for turn in ECube._prepare_turns(moves):
            getattr(Cube, turn)(self)
