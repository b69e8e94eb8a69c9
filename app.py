import typing

from view       import CubeView
from logger     import Logger
from solution   import build_solution
from solver     import SolverCapability
from facelets   import sanitize_state, group_state
from cubetyping import CubeState, MoveTransition, Solution
from defaults   import SOLVED_CUBE, DEFAULT_ANIMATION_SPEED, FACELET_SIZE, FACELET_RADIUS


class CubeApp:
    """
    Cube solver application: state text field, Random and Solve actions,
    solution move selector with auto play and the displayed cube.

    Parameters
    ----------
    `solver` : SolverCapability
        Solving engine
    `speed` : float, optional
        Animation speed of turns
    `notify` : Callable, optional
        Called with the error when solving fails. Errors are logged if not passed.
    `logger` : Logger, optional
        Logger to report actions
    `facelet_size` : float, optional
        Width and height of displayed facelets
    `facelet_radius` : float, optional
        Corner radius of displayed facelets
    """
    def __init__(
            self,
            solver         : SolverCapability,
            speed          : float = DEFAULT_ANIMATION_SPEED,
            notify         : typing.Callable[[BaseException], None] = None,
            logger         : Logger = None,
            facelet_size   : float = FACELET_SIZE,
            facelet_radius : float = FACELET_RADIUS,
        ):
        self.solver = solver
        self.logger = logger if logger is not None else Logger(verbose=False)
        self.notify = notify if notify is not None else self.logger.alert
        self.view   = CubeView(SOLVED_CUBE, speed, facelet_size, facelet_radius)

        self._state       : CubeState = SOLVED_CUBE
        self.solution     : Solution  = []
        self.solution_idx : int       = 0
        self.is_auto_play : bool      = True

    @property
    def state(self) -> CubeState:
        return self._state

    @state.setter
    def state(self, state : CubeState):
        self._state = state
        self.view.state = state

    @property
    def state_text(self) -> str:
        """
        State as shown in the text field
        """
        return group_state(self._state)

    @property
    def moves(self) -> typing.List[str]:
        """
        Moves of the solution selector, the last one is the completion marker
        """
        return [transition.move for transition in self.solution]

    @property
    def current(self) -> typing.Optional[MoveTransition]:
        if 0 <= self.solution_idx < len(self.solution):
            return self.solution[self.solution_idx]
        return None

    def change_state(self, text : str) -> CubeState:
        """
        Set state from the text field. Characters outside of colour alphabet are dropped.
        """
        self.state = sanitize_state(text)
        return self._state

    def random(self) -> CubeState:
        """
        Show random cube and drop current solution
        """
        self.view.cancel()
        self.state = self.solver.rand_cube()
        self.solution = []
        self.solution_idx = 0
        self.logger.tqdmlog(f'Random cube {self._state}', to_file=True)
        return self._state

    def solve(self) -> typing.Optional[Solution]:
        """
        Solve displayed cube and start playing the solution.
        Solver errors are passed to `notify`, the previous solution is kept then.

        Returns
        -------
        `solution` : Solution | None
            New solution, None if solving failed
        """
        try:
            solution = build_solution(self.solver, self._state)
        except Exception as e:
            self.notify(e)
            return None

        self.view.cancel()
        self.solution = solution
        self.solution_idx = 0
        self.is_auto_play = True
        moves = ' '.join(transition.move for transition in solution)
        self.logger.tqdmlog(f'Solution of {len(solution) - 1} moves: {moves}', to_file=True)
        return solution

    def select_move(self, idx : int):
        """
        Jump to the move of the solution: show its start state and continue from it
        """
        if not 0 <= idx < len(self.solution):
            raise IndexError(f'Move {idx} is out of solution of {len(self.solution)} moves')
        self.view.cancel()
        self.state = self.solution[idx].start_state
        self.solution_idx = idx

    def set_auto_play(self, enabled : bool):
        if not enabled:
            self.view.cancel()
        self.is_auto_play = enabled

    def _on_rotation_completion(self, transition : MoveTransition):
        self.state = transition.end_state
        if self.solution_idx + 1 < len(self.solution):
            self.solution_idx += 1

    def tick(self) -> bool:
        """
        Process one frame.

        Returns
        -------
        `is_playing` : bool
            True while there are turns left to animate
        """
        if self.view.is_rotating:
            self.view.tick()
            return True

        transition = self.current
        if not self.is_auto_play or transition is None or transition.start_state == SOLVED_CUBE:
            return False

        self.view.rotate(transition.move, lambda: self._on_rotation_completion(transition))
        self.view.tick()
        return True

    def play(self, max_frames : int = None, on_frame : typing.Callable[[int], None] = None) -> int:
        """
        Drive frames until the solution is played or `max_frames` frames passed

        Parameters
        ----------
        `max_frames` : int, optional
            Limit of frames
        `on_frame` : Callable, optional
            Called with the frame number after every frame

        Returns
        -------
        `frames` : int
            Amount of processed frames
        """
        frames = 0
        while max_frames is None or frames < max_frames:
            if not self.tick():
                break
            frames += 1
            if on_frame is not None:
                on_frame(frames)
        return frames
