import pytest

from conftest   import StubSolver, SOLUTION
from solution   import build_solution, COMPLETION
from solver     import RubikSolver, SolverError
from defaults   import SOLVED_CUBE, SKIP_TURN
from cubetyping import MoveTransition


def test_transitions_replay_solution(stub_solver, scrambled_state):
    solution = build_solution(stub_solver, scrambled_state)
    assert [t.move for t in solution] == SOLUTION + [SKIP_TURN]
    assert solution[0].start_state == scrambled_state
    for previous, transition in zip(solution, solution[1:]):
        assert transition.start_state == previous.end_state
    assert solution[-2].end_state == SOLVED_CUBE


def test_solution_ends_with_completion(stub_solver, scrambled_state):
    last = build_solution(stub_solver, scrambled_state)[-1]
    assert last == COMPLETION
    assert last.start_state == last.end_state == SOLVED_CUBE


def test_transition_states_follow_moves(stub_solver, scrambled_state):
    for idx, transition in enumerate(build_solution(stub_solver, scrambled_state)[:-1]):
        assert isinstance(transition, MoveTransition)
        assert transition.end_state == stub_solver.apply_cube_moves(scrambled_state, SOLUTION[:idx + 1])


def test_solved_cube_has_only_completion():
    assert build_solution(StubSolver(moves=[]), SOLVED_CUBE) == [COMPLETION]


def test_solver_error_is_not_handled(scrambled_state):
    error  = SolverError('Cube is unsolvable')
    solver = StubSolver(error=error)
    with pytest.raises(SolverError) as info:
        build_solution(solver, scrambled_state)
    assert info.value is error


def test_solution_with_rubik_solver():
    solver   = RubikSolver()
    state    = solver.apply_cube_moves(SOLVED_CUBE, ['L', 'D2', "B'"])
    solution = build_solution(solver, state)
    assert solution[0].start_state == state
    assert solution[-2].end_state == SOLVED_CUBE
