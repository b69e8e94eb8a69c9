import typing

from tqdm import tqdm

from app      import CubeApp
from logger   import Logger
from yparams  import YParams
from facelets import format_net


def get_logf(logger : Logger) -> typing.Optional[typing.Callable]:
    if logger:
        return lambda message, f=True, a=False, e=False: logger.tqdmlog(message, to_file=f, attention=a, add_iter_num=e)
    return None


def player_logger_preprocessing(params : YParams, pbar : tqdm = None) -> Logger:
    """
    Prepare logger using player parameters

    Parameters
    ----------
    `params` : YParams
        player parameters
    `pbar` : tqdm, optional
        progress bar of the playback

    Returns
    -------
    `logger` : Logger
        Logger object for logging during playback
    """
    return Logger(
        log_dir=params.log_path, log_filename=params.log_filename,
        clear=params.clear_log, pbar=pbar,
    )


def play_solution(app : CubeApp, max_frames : int = None, logger : Logger = None, show_net : bool = False) -> int:
    """
    Play solution of the application frame by frame with tqdm progress bar over moves

    Parameters
    ----------
    `app` : CubeApp
        Application with a solution
    `max_frames` : int, optional
        Limit of frames
    `logger` : Logger, optional
        logger to log finished moves
    `show_net` : bool, optional
        whether log cube net after each move

    Returns
    -------
    `frames` : int
        Amount of processed frames
    """
    logf  = get_logf(logger)
    moves = max(len(app.solution) - 1, 0)
    pbar  = tqdm(total=moves, initial=min(app.solution_idx, moves), unit='move')
    done  = app.solution_idx

    def on_frame(_):
        nonlocal done
        if app.solution_idx != done:
            transition = app.solution[done]
            done = app.solution_idx
            pbar.update(1)
            if logf:
                logf(f'{transition.move:3} -> {transition.end_state}', e=True)
                if show_net:
                    logf(format_net(transition.end_state), f=False)

    if logger:
        logger.pbar = pbar
    try:
        frames = app.play(max_frames, on_frame)
    finally:
        pbar.close()
        if logger:
            logger.pbar = None
    return frames
