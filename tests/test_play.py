from app      import CubeApp
from logger   import Logger
from play     import start_playing, sanitize_moves
from yparams  import YParams
from defaults import SOLVED_CUBE
from utils    import get_logf, play_solution, player_logger_preprocessing


def test_filelog(tmp_path):
    logger = Logger(str(tmp_path / 'logs'), 'player.log', verbose=False)
    logger.tqdmlog('first', to_file=True)
    logger.tqdmlog('not saved')
    logger.filelog('second')
    assert (tmp_path / 'logs' / 'player.log').read_text() == 'first\nsecond\n'


def test_clear_log(tmp_path):
    (tmp_path / 'player.log').write_text('old\n')
    logger = Logger(str(tmp_path), 'player.log', clear=True, verbose=False)
    logger.alert(ValueError('boom'))
    assert (tmp_path / 'player.log').read_text() == 'Error: boom\n'


def test_get_logf(tmp_path):
    assert get_logf(None) is None
    logger = Logger(str(tmp_path), 'player.log', verbose=False)
    get_logf(logger)('message')
    assert (tmp_path / 'player.log').read_text() == 'message\n'


def test_player_logger_preprocessing(tmp_path):
    params = YParams(overrides={'log_path': str(tmp_path), 'log_filename': 'a.log'})
    logger = player_logger_preprocessing(params)
    assert logger.filepath == str(tmp_path / 'a.log')


def test_play_solution_logs_moves(stub_solver, tmp_path):
    logger = Logger(str(tmp_path), 'player.log', verbose=False)
    app    = CubeApp(stub_solver, speed=4.0)
    app.random()
    app.solve()
    frames = play_solution(app, 10000, logger)
    assert frames > 0
    assert app.state == SOLVED_CUBE
    lines = (tmp_path / 'player.log').read_text().splitlines()
    assert len(lines) == len(app.solution) - 1
    assert lines[-1].endswith(SOLVED_CUBE)
    assert logger.pbar is None


def test_sanitize_moves():
    assert sanitize_moves("R, U R'") == ['R', 'U', "R'"]


def test_start_playing_solves_scramble(tmp_path):
    path = tmp_path / 'player.yaml'
    path.write_text(f'animation_speed: 4.0\nlog_path: {tmp_path}\nlog_filename: player.log\n')
    app = start_playing(str(path), moves="R U F'")
    assert app.state == SOLVED_CUBE
    assert len(app.solution) > 1
    assert (tmp_path / 'player.log').exists()


def test_start_playing_without_solving():
    app = start_playing(state='wwwwoooogggg', solve=False)
    assert app.state == 'WWWWOOOOGGGG'
    assert app.solution == []


def test_start_playing_invalid_state_is_reported(tmp_path):
    path = tmp_path / 'player.yaml'
    path.write_text(f'log_path: {tmp_path}\nlog_filename: player.log\n')
    app = start_playing(str(path), state='RRR')
    assert app.solution == []
    assert 'Error:' in (tmp_path / 'player.log').read_text()


def test_start_playing_facelet_geometry(tmp_path):
    path = tmp_path / 'player.yaml'
    path.write_text('facelet_size: 0.5\nfacelet_radius: 0.1\n')
    app = start_playing(str(path), solve=False)
    assert app.view.facelet_size == 0.5
    assert app.view.facelet_radius == 0.1
