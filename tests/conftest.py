import pytest

from solver   import RubikSolver
from defaults import SOLVED_CUBE

SCRAMBLE = ['R', 'U', "F'"]
SOLUTION = ['F', "U'", "R'"]


class StubSolver:
    """
    Deterministic solver returning known solution of SCRAMBLE
    """
    def __init__(self, moves=SOLUTION, error=None):
        self.moves  = list(moves)
        self.error  = error
        self.calls  = []
        self._rubik = RubikSolver(scramble_turns=0)
        self.scrambled = self._rubik.apply_cube_moves(SOLVED_CUBE, SCRAMBLE)

    def solve_cube(self, state):
        self.calls.append(state)
        if self.error is not None:
            raise self.error
        return list(self.moves)

    def apply_cube_moves(self, state, moves):
        return self._rubik.apply_cube_moves(state, moves)

    def rand_cube(self):
        return self.scrambled


@pytest.fixture
def stub_solver():
    return StubSolver()


@pytest.fixture
def scrambled_state(stub_solver):
    return stub_solver.scrambled
