import typing

from solver     import SolverCapability
from defaults   import SKIP_TURN, SOLVED_CUBE
from cubetyping import CubeState, MoveStr, MoveTransition, Solution


COMPLETION = MoveTransition(MoveStr(SKIP_TURN), SOLVED_CUBE, SOLVED_CUBE)


def build_solution(solver : SolverCapability, state : CubeState) -> Solution:
    """
    Solve the cube and replay the solution against the state.
    Transition i starts from the state after the first i moves and ends
    after the first i+1 moves. The solution ends with completion transition
    whose start and end states are the solved cube.

    Errors of the solver are not handled here.

    Parameters
    ----------
    `solver` : SolverCapability
        Solving engine
    `state` : CubeState
        Cube state to solve

    Returns
    -------
    `solution` : Solution
        Transitions of the solution
    """
    moves : typing.List[MoveStr] = list(solver.solve_cube(state))
    solution = [
        MoveTransition(
            move,
            solver.apply_cube_moves(state, moves[:idx]),
            solver.apply_cube_moves(state, moves[:idx + 1]),
        )
        for idx, move in enumerate(moves)
    ]
    solution.append(COMPLETION)
    return solution
