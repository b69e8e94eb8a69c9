import argparse

from app      import CubeApp
from yparams  import YParams
from solver   import RubikSolver
from facelets import format_net
from utils    import get_logf, play_solution, player_logger_preprocessing


def start_playing(
        params_path : str = None,
        state       : str = None,
        random      : bool = False,
        moves       : str = None,
        solve       : bool = True,
        speed       : float = None,
        max_frames  : int = None,
    ) -> CubeApp:
    """
    Set up cube, solve it and play the solution headlessly

    Parameters
    ----------
    `params_path` : str, optional
        path to file with player parameters
    `state` : str, optional
        cube state text, solved cube is used if not passed
    `random` : bool, optional
        start from random cube
    `moves` : str, optional
        space separated turns applied to the cube before solving
    `solve` : bool, optional
        whether solve the cube and play the solution
    `speed` : float, optional
        animation speed, overrides config
    `max_frames` : int, optional
        limit of frames, overrides config

    Returns
    -------
    `app` : CubeApp
        Application after playback
    """
    params = YParams(params_path, {'animation_speed': speed, 'max_frames': max_frames})
    logger = player_logger_preprocessing(params)
    logf   = get_logf(logger)

    logf('='*60, f=False)
    params.display(lambda message: logf(message, f=False))
    logf('='*60, f=False)

    solver = RubikSolver(params.scramble_turns)
    app    = CubeApp(
        solver, params.animation_speed, logger=logger,
        facelet_size=params.facelet_size, facelet_radius=params.facelet_radius,
    )

    if random:
        app.random()
    elif state:
        app.change_state(state)
    if moves:
        app.change_state(solver.apply_cube_moves(app.state, sanitize_moves(moves)))

    logf(f'Cube state: {app.state_text}')
    logf(format_net(app.state), f=False)

    if not solve:
        return app
    if app.solve() is None:
        return app

    frames = play_solution(app, params.max_frames, logger)
    logf(f'Played {len(app.solution) - 1} moves in {frames} frames', a=True)
    logf(format_net(app.state), f=False)
    return app


def sanitize_moves(moves : str) -> list:
    return moves.replace(',', ' ').split()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('-p', '--params_path', type=str, default=None,
        help='path to file with player parameters')
    parser.add_argument('-s', '--state', type=str, default=None,
        help='cube state, 54 facelets of colours W, R, G, Y, O, B ordered U, R, F, D, L, B')
    parser.add_argument('--random', action='store_true',
        help='start from random cube')
    parser.add_argument('-m', '--moves', type=str, default=None,
        help="turns applied before solving, e.g. \"R U R' U'\"")
    parser.add_argument('--speed', type=float, default=None,
        help='animation speed')
    parser.add_argument('--max_frames', type=int, default=None,
        help='limit of frames to play')
    parser.add_argument('--no_solve', action='store_true',
        help='only show the cube')

    args = parser.parse_args()

    start_playing(args.params_path, args.state, args.random, args.moves, not args.no_solve, args.speed, args.max_frames)


if __name__ == '__main__':
    main()
