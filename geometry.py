import typing
import numpy as np

from numpy.typing import ArrayLike

from defaults import FACELET_SIZE, FACELET_RADIUS, FACELET_SEGMENTS, CUBIE_SIZE, CUBIE_RADIUS, CUBIE_SEGMENTS, AXES

EPS = 1e-5


def rounded_rect(width : float, height : float, radius : float = 0.0, segments : int = FACELET_SEGMENTS) -> np.ndarray:
    """
    Outline of rectangle with rounded corners centred in the origin.

    Parameters
    ----------
    `width` : float
        Width of rectangle
    `height` : float
        Height of rectangle
    `radius` : float, optional
        Radius of the corners. Corners are sharp when it is zero.
    `segments` : int, optional
        Amount of segments per rounded corner

    Returns
    -------
    `points` : np.ndarray
        Counter-clockwise outline of size (N, 2)
    """
    radius = min(max(radius, 0.0), width/2, height/2)
    hw, hh = width/2, height/2
    if radius < EPS:
        return np.array([[-hw, -hh], [hw, -hh], [hw, hh], [-hw, hh]])
    corners = (
        ( hw - radius, -hh + radius, -np.pi/2),
        ( hw - radius,  hh - radius,  0.0),
        (-hw + radius,  hh - radius,  np.pi/2),
        (-hw + radius, -hh + radius,  np.pi),
    )
    points = []
    for cx, cy, start in corners:
        angles = start + np.linspace(0.0, np.pi/2, segments + 1)
        points.append(np.stack([cx + radius*np.cos(angles), cy + radius*np.sin(angles)], axis=1))
    return np.concatenate(points)


def facelet_placement(axis : str, inverse : bool) -> typing.Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Place facelet on the side of cubie looking along `axis`.

    Parameters
    ----------
    `axis` : str
        One of x, y, z
    `inverse` : bool
        True when facelet is on the negative side of the cubie

    Returns
    -------
    `offset` : np.ndarray
        Centre of the facelet relative to the centre of cubie
    `u`, `v` : np.ndarray
        Unit vectors spanning the facelet plane
    """
    if axis not in AXES:
        raise ValueError(f'Unknown axis {axis!r}')
    i = AXES.index(axis)
    normal = np.zeros(3)
    normal[i] = -1.0 if inverse else 1.0
    u = np.zeros(3)
    u[(i + 1) % 3] = 1.0
    v = np.cross(normal, u)
    return normal * 0.5, u, v


def facelet_outline(axis : str, inverse : bool, size : float = FACELET_SIZE, radius : float = FACELET_RADIUS, segments : int = FACELET_SEGMENTS) -> np.ndarray:
    """
    Facelet polygon in cubie local coordinates, size (N, 3)
    """
    offset, u, v = facelet_placement(axis, inverse)
    outline = rounded_rect(size, size, radius, segments)
    return offset + outline[:, :1]*u + outline[:, 1:]*v


def transform_points(points : ArrayLike, position : ArrayLike, orientation : ArrayLike) -> np.ndarray:
    """
    Move local points of cubie to world coordinates
    """
    return np.asarray(points) @ np.asarray(orientation).T + np.asarray(position)


def rounded_box(width : float = CUBIE_SIZE, height : float = CUBIE_SIZE, depth : float = CUBIE_SIZE, radius : float = CUBIE_RADIUS, segments : int = CUBIE_SEGMENTS) -> typing.Tuple[np.ndarray, np.ndarray]:
    """
    Mesh of box with rounded edges and corners centred in the origin.
    Every side is a grid pushed out from the inner box by `radius`.

    Parameters
    ----------
    `width`, `height`, `depth` : float, optional
        Size of box along x, y and z
    `radius` : float, optional
        Radius of the edges
    `segments` : int, optional
        Amount of segments per rounded edge

    Returns
    -------
    `vertices` : np.ndarray
        Vertices of size (N, 3)
    `quads` : np.ndarray
        Vertex indices of faces of size (M, 4)
    """
    half   = np.array([width, height, depth]) / 2
    radius = min(max(radius, 0.0), half.min())
    inner  = half - radius
    angles = np.linspace(0.0, np.pi/2, segments + 1)
    ticks  = [np.concatenate([-h - radius*np.sin(angles[::-1]), h + radius*np.sin(angles)]) for h in inner]

    vertices, quads = [], []
    for i in range(3):
        for sign in (-1.0, 1.0):
            j, k   = (i + 1) % 3, (i + 2) % 3
            tj, tk = ticks[j], ticks[k]
            grid = np.zeros((len(tj), len(tk), 3))
            grid[:, :, i] = sign * half[i]
            grid[:, :, j] = tj[:, None]
            grid[:, :, k] = tk[None, :]
            grid = grid.reshape(-1, 3)

            core   = np.clip(grid, -inner, inner)
            normal = grid - core
            length = np.linalg.norm(normal, axis=1, keepdims=True)
            if radius >= EPS:
                grid = core + radius * normal / np.maximum(length, EPS)

            start = sum(len(v) for v in vertices)
            rows, cols = len(tj), len(tk)
            for r in range(rows - 1):
                for c in range(cols - 1):
                    a = start + r*cols + c
                    quads.append((a, a + 1, a + cols + 1, a + cols))
            vertices.append(grid)
    return np.concatenate(vertices), np.array(quads, dtype=np.int64)
