import typing
import numpy as np

from rubik.cube  import Cube
from rubik.solve import Solver

from ecube      import ECube
from cubetyping import CubeState, MoveStr
from facelets   import InvalidStateError, validate_state
from defaults   import MOVES, SOLVED_CUBE, PRIME_TURN, HALF_TURN, DEFAULT_SCRAMBLE_TURNS


class SolverError(RuntimeError):
    """
    Raised when a cube can not be solved
    """


@typing.runtime_checkable
class SolverCapability(typing.Protocol):
    """
    Operations of a cube solving engine used by the view layer
    """
    def solve_cube(self, state : CubeState) -> typing.List[MoveStr]:
        ...

    def apply_cube_moves(self, state : CubeState, moves : typing.Sequence[MoveStr]) -> CubeState:
        ...

    def rand_cube(self) -> CubeState:
        ...


"""
Whole cube rotations: content moves from position to the next one in the cycle
"""
ROTATION_CYCLES = {
    'X': ('F', 'U', 'B', 'D'), # as R
    'Y': ('F', 'L', 'B', 'R'), # as U
    'Z': ('U', 'R', 'D', 'L'), # as F
}

"""
Slice turns expressed as outer face turns followed by whole cube rotation
"""
SLICE_TURNS = {
    'M':  (('R', "L'"), 'Xi'),
    'Mi': (("R'", 'L'), 'X'),
    'E':  (('U', "D'"), 'Yi'),
    'Ei': (("U'", 'D'), 'Y'),
    'S':  (("F'", 'B'), 'Z'),
    'Si': (('F', "B'"), 'Zi'),
}


def _rotate_frame(frame : typing.Dict[str, str], rotation : str) -> typing.Dict[str, str]:
    """
    Get faces seen on each position after whole cube rotation
    """
    cycle = ROTATION_CYCLES[rotation[0]]
    if rotation.endswith('i'):
        cycle = tuple(reversed(cycle))
    new_frame = dict(frame)
    for i, position in enumerate(cycle):
        new_frame[cycle[(i + 1) % len(cycle)]] = frame[position]
    return new_frame


def translate_solver_moves(turns : typing.Iterable[str]) -> typing.List[MoveStr]:
    """
    Translate moves of rubik Solver into face turns of cube with fixed centres.
    Slice turns (M, E, S) and whole cube rotations (X, Y, Z) are expressed through
    the faces currently seen on each position.

    Parameters
    ----------
    `turns` : Iterable
        Turn names as Cube methods, e.g. R, Ri, M, Yi

    Returns
    -------
    `moves` : list
        Face turns in ', 2 notation
    """
    frame = {face: face for face in 'UDLRFB'}
    moves = []
    for turn in turns:
        name, inverse = turn[0].upper(), turn.endswith('i')
        if name in 'UDLRFB':
            moves.append(MoveStr(frame[name] + (PRIME_TURN if inverse else '')))
        elif name in ROTATION_CYCLES:
            frame = _rotate_frame(frame, turn)
        elif turn in SLICE_TURNS:
            outer, rotation = SLICE_TURNS[turn]
            moves.extend(MoveStr(frame[move[0]] + move[1:]) for move in outer)
            frame = _rotate_frame(frame, rotation)
        else:
            raise SolverError(f'Unknown solver turn {turn!r}')
    return moves


def simplify_moves(moves : typing.Iterable[MoveStr]) -> typing.List[MoveStr]:
    """
    Merge consecutive turns of the same face, dropping turns that cancel out
    """
    to_quarter_turns = {'': 1, HALF_TURN: 2, PRIME_TURN: 3}
    to_modifier      = {1: '', 2: HALF_TURN, 3: PRIME_TURN}
    simplified = []
    for move in moves:
        if simplified and simplified[-1][0] == move[0]:
            last = simplified.pop()
            quarter_turns = (to_quarter_turns[last[1:]] + to_quarter_turns[move[1:]]) % 4
            if quarter_turns:
                simplified.append(MoveStr(move[0] + to_modifier[quarter_turns]))
        else:
            simplified.append(move)
    return simplified


class RubikSolver:
    """
    Solver capability backed by rubik-cube package

    Parameters
    ----------
    `scramble_turns` : int, optional
        Amount of random turns used to generate random cube
    `seed` : int, optional
        Seed of random generator for random cubes
    """
    def __init__(self, scramble_turns : int = DEFAULT_SCRAMBLE_TURNS, seed : int = None):
        self.scramble_turns = scramble_turns
        self._rng = np.random.default_rng(seed)

    def rand_cube(self) -> CubeState:
        """
        Get solved cube scrambled by random turns
        """
        scramble = self._rng.choice(MOVES, self.scramble_turns).tolist()
        return ECube.from_state(SOLVED_CUBE).turn(scramble).to_state()

    def apply_cube_moves(self, state : CubeState, moves : typing.Sequence[MoveStr]) -> CubeState:
        """
        Apply face turns to cube state

        Parameters
        ----------
        `state` : CubeState
            Cube state
        `moves` : Sequence
            Face turns to apply in order

        Returns
        -------
        `state` : CubeState
            Cube state after all turns
        """
        try:
            validate_state(state)
        except InvalidStateError as e:
            raise SolverError(str(e)) from e
        return ECube.from_state(state).turn(list(moves)).to_state()

    def solve_cube(self, state : CubeState) -> typing.List[MoveStr]:
        """
        Find face turns leading cube to solved state

        Parameters
        ----------
        `state` : CubeState
            Cube state to solve

        Returns
        -------
        `moves` : list
            Face turns solving the cube, empty for solved cube

        Raises
        ------
        `SolverError`
            If the state is not a valid cube or it can not be solved
        """
        try:
            validate_state(state)
        except InvalidStateError as e:
            raise SolverError(str(e)) from e
        if state == SOLVED_CUBE:
            return []

        solver = Solver(Cube(ECube.state_to_net(state)))
        try:
            solver.solve()
        except Exception as e:
            raise SolverError(f'Cube is unsolvable: {e}') from e

        moves = simplify_moves(translate_solver_moves(solver.moves))
        if ECube.from_state(state).turn(moves).to_state() != SOLVED_CUBE:
            raise SolverError('Cube is unsolvable')
        return moves
