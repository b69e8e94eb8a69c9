import numpy as np
import pytest

from cubies   import CubieRegistry
from defaults import MOVES
from rotation import animate_rotation, parse_move, axis_angle_matrix, InvalidMoveError


def run(animation, limit=10000):
    frames = 0
    while animation():
        frames += 1
        assert frames < limit
    return frames


@pytest.mark.parametrize('move, expected', [
    ('F',  ('F', -1, 1)),
    ("F'", ('F',  1, 1)),
    ('B',  ('B',  1, 1)),
    ("L'", ('L', -1, 1)),
    ('U2', ('U', -1, 2)),
    ('D2', ('D',  1, 2)),
])
def test_parse_move(move, expected):
    assert parse_move(move) == expected


@pytest.mark.parametrize('move', ['', 'X', 'F3', "FF'", 'r', "R'2", '-'])
def test_parse_invalid_move(move):
    with pytest.raises(InvalidMoveError):
        parse_move(move)


@pytest.mark.parametrize('move', MOVES)
def test_rotation_applies_target_angle(move):
    animation = animate_rotation(CubieRegistry(), move)
    run(animation)
    quarter_turns = 2 if move.endswith('2') else 1
    assert animation.applied == pytest.approx(quarter_turns * np.pi / 2)
    assert animation.remaining == 0
    assert animation() is False


@pytest.mark.parametrize('move', MOVES)
def test_rotation_ends_on_lattice(move):
    registry = CubieRegistry()
    run(animate_rotation(registry, move))
    for cubie in registry:
        assert np.allclose(cubie.position, np.rint(cubie.position), atol=1e-9)
        assert np.allclose(cubie.orientation, np.rint(cubie.orientation), atol=1e-9)


def test_rotation_turns_only_face_cubies():
    registry  = CubieRegistry()
    animation = animate_rotation(registry, 'F')
    assert sorted(c.name for c in animation.cubies) == sorted(['ULF', 'URF', 'DLF', 'DRF', 'UF', 'DF', 'FR', 'FL', 'F'])
    run(animation)
    assert registry['URB'].lattice_position() == (1, 1, -1)
    assert np.allclose(registry['B'].orientation, np.eye(3))


def test_right_turn_moves_front_up():
    registry = CubieRegistry()
    run(animate_rotation(registry, 'R'))
    assert registry['URF'].lattice_position() == (1, 1, -1)
    assert registry['DRF'].lattice_position() == (1, 1, 1)


def test_prime_turn_reverses_direction():
    registry = CubieRegistry()
    run(animate_rotation(registry, "U'"))
    assert registry['UF'].lattice_position() == (1, 1, 0)
    registry.reset()
    run(animate_rotation(registry, 'U'))
    assert registry['UF'].lattice_position() == (-1, 1, 0)


def test_faster_animation_takes_fewer_frames():
    slow = run(animate_rotation(CubieRegistry(), 'R', speed=1.0))
    fast = run(animate_rotation(CubieRegistry(), 'R', speed=2.0))
    assert fast < slow


def test_half_turn_takes_same_frames_as_quarter_turn():
    quarter = run(animate_rotation(CubieRegistry(), 'R'))
    half    = run(animate_rotation(CubieRegistry(), 'R2'))
    assert abs(quarter - half) <= 1


def test_speed_must_be_positive():
    with pytest.raises(ValueError):
        animate_rotation(CubieRegistry(), 'R', speed=0)


def test_axis_angle_matrix_is_counter_clockwise():
    rotation = axis_angle_matrix(np.array([0.0, 0.0, 1.0]), np.pi / 2)
    assert np.allclose(rotation @ np.array([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0])


def test_registry_reset_is_idempotent():
    registry = CubieRegistry()
    run(animate_rotation(registry, 'R'))
    registry.reset()
    registry.reset()
    for cubie in registry:
        assert np.array_equal(cubie.position, cubie.home)
        assert np.array_equal(cubie.orientation, np.eye(3))
