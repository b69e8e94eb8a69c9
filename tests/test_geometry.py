import numpy as np
import pytest

from geometry import rounded_rect, rounded_box, facelet_placement, facelet_outline, transform_points


def test_sharp_rectangle():
    points = rounded_rect(0.88, 0.88)
    assert points.shape == (4, 2)
    assert np.allclose(np.abs(points), 0.44)


def test_rounded_rectangle_stays_in_bounds():
    points = rounded_rect(1.0, 0.5, radius=0.1, segments=5)
    assert points.shape == (24, 2)
    assert points[:, 0].max() == pytest.approx(0.5)
    assert points[:, 1].max() == pytest.approx(0.25)
    assert np.all(np.abs(points[:, 0]) <= 0.5 + 1e-12)
    assert np.all(np.abs(points[:, 1]) <= 0.25 + 1e-12)


@pytest.mark.parametrize('axis', ['x', 'y', 'z'])
@pytest.mark.parametrize('inverse', [False, True])
def test_facelet_placement(axis, inverse):
    offset, u, v = facelet_placement(axis, inverse)
    assert np.linalg.norm(offset) == pytest.approx(0.5)
    assert offset['xyz'.index(axis)] == pytest.approx(-0.5 if inverse else 0.5)
    assert np.dot(u, v) == pytest.approx(0.0)
    assert np.dot(u, offset) == pytest.approx(0.0)
    assert np.dot(v, offset) == pytest.approx(0.0)


def test_unknown_axis():
    with pytest.raises(ValueError):
        facelet_placement('w', False)


def test_facelet_outline_lies_on_cubie_side():
    outline = facelet_outline('y', True)
    assert np.allclose(outline[:, 1], -0.5)


def test_transform_points():
    rotation = np.array([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    points   = transform_points([[1.0, 0.0, 0.0]], [0.0, 0.0, 2.0], rotation)
    assert np.allclose(points, [[0.0, 1.0, 2.0]])


def test_sharp_box():
    vertices, quads = rounded_box(radius=0.0)
    assert np.allclose(np.abs(vertices), 0.5)
    assert quads.shape[1] == 4


def test_rounded_box_stays_in_bounds():
    vertices, quads = rounded_box(1.0, 1.0, 1.0, radius=0.08, segments=5)
    assert vertices.shape == (6 * 12 * 12, 3)
    assert quads.shape == (6 * 11 * 11, 4)
    assert np.all(np.abs(vertices) <= 0.5 + 1e-12)
    assert np.abs(vertices).max() == pytest.approx(0.5)
    norms = np.linalg.norm(vertices, axis=1)
    assert norms.max() == pytest.approx(np.sqrt(3) * 0.42 + 0.08)
    assert norms.max() < np.sqrt(3) * 0.5
