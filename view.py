import typing
import numpy as np

from cubies     import CubieRegistry
from rotation   import RotationAnimation, animate_rotation
from facelets   import pad_state, cubie_colours
from geometry   import facelet_outline, rounded_box, transform_points
from cubetyping import CubeState, MoveStr, Position, Color
from defaults   import SOLVED_CUBE, FACELETS_COUNT, FACELET_COLORS, FACELET_SIZE, FACELET_RADIUS, CUBIE_COLOR, CUBIE_RADIUS, AXES, DEFAULT_ANIMATION_SPEED


class CubeView:
    """
    Cube as it is displayed: cubie transforms, colours from state and the current turn animation.
    At most one turn is animated at a time. The host loop calls `tick` once per frame.

    Parameters
    ----------
    `state` : CubeState, optional
        Displayed state
    `speed` : float, optional
        Default animation speed of turns
    `facelet_size` : float, optional
        Width and height of facelets
    `facelet_radius` : float, optional
        Corner radius of facelets
    """
    def __init__(
            self,
            state          : CubeState = SOLVED_CUBE,
            speed          : float = DEFAULT_ANIMATION_SPEED,
            facelet_size   : float = FACELET_SIZE,
            facelet_radius : float = FACELET_RADIUS,
        ):
        self.registry       = CubieRegistry()
        self.speed          = speed
        self.facelet_size   = facelet_size
        self.facelet_radius = facelet_radius
        self._state         = pad_state(state)
        self._rotation : typing.Optional[typing.Tuple[RotationAnimation, typing.Callable[[], None]]] = None
        self._lattice       = {cubie.lattice_position(): cubie for cubie in self.registry}

    @property
    def state(self) -> CubeState:
        return self._state

    @state.setter
    def state(self, state : str):
        state = pad_state(state)
        if state != self._state:
            self._state = state
            self.reset()

    @property
    def is_rotating(self) -> bool:
        return self._rotation is not None

    def reset(self):
        """
        Put all cubies to their home offsets
        """
        self.registry.reset()

    def rotate(self, move : MoveStr, on_completion : typing.Callable[[], None] = None, speed : float = None) -> RotationAnimation:
        """
        Start animation of `move`, replacing the animation in progress if any.

        Parameters
        ----------
        `move` : MoveStr
            Turn to animate
        `on_completion` : Callable, optional
            Called once the turn is finished
        `speed` : float, optional
            Animation speed, view default is used if not passed

        Returns
        -------
        `animation` : RotationAnimation
            Step function of the turn
        """
        animation = animate_rotation(self.registry, move, self.speed if speed is None else speed)
        self._rotation = (animation, on_completion or (lambda: None))
        return animation

    def cancel(self):
        """
        Drop animation in progress and put cubies back
        """
        self._rotation = None
        self.reset()

    def tick(self) -> bool:
        """
        Advance animation by one frame.

        Returns
        -------
        `is_rotating` : bool
            True if animation is still in progress after this frame
        """
        if self._rotation is None:
            return False

        do_step, on_completion = self._rotation
        if not do_step():
            self._rotation = None
            on_completion()
        return self._rotation is not None

    def colours(self) -> typing.Dict[Position, typing.Tuple[Color, Color, Color]]:
        return cubie_colours(self._state)

    def facelet_polygons(self, size : float = None, radius : float = None) -> typing.List[typing.Tuple[str, np.ndarray]]:
        """
        World space polygons of all visible facelets.

        Parameters
        ----------
        `size` : float, optional
            Width and height of facelet, view `facelet_size` if not passed
        `radius` : float, optional
            Corner radius of facelet, view `facelet_radius` if not passed

        Returns
        -------
        `polygons` : list
            Pairs of colour code and (N, 3) polygon points
        """
        size     = self.facelet_size if size is None else size
        radius   = self.facelet_radius if radius is None else radius
        colours  = self.colours()
        polygons = []
        for cubie in self.registry:
            for i, axis in enumerate(AXES):
                colour = colours[cubie.name][i]
                if colour is None:
                    continue
                outline = facelet_outline(axis, cubie.home[i] < 0, size, radius)
                polygons.append((FACELET_COLORS[colour], transform_points(outline, cubie.position, cubie.orientation)))
        return polygons

    def cubie_meshes(self, radius : float = CUBIE_RADIUS) -> typing.List[typing.Tuple[str, np.ndarray, np.ndarray]]:
        """
        World space rounded bodies of all cubies under the facelets.

        Returns
        -------
        `meshes` : list
            Triples of colour code, (N, 3) vertices and (M, 4) quads
        """
        vertices, quads = rounded_box(radius=radius)
        return [
            (CUBIE_COLOR, transform_points(vertices, cubie.position, cubie.orientation), quads)
            for cubie in self.registry
        ]

    def snapshot(self) -> CubeState:
        """
        Read the state from the current cubie transforms.
        Valid between animations, when every cubie sits on the lattice.

        Returns
        -------
        `state` : CubeState
            State the displayed cubies show
        """
        facelets = [None] * FACELETS_COUNT
        for cubie in self.registry:
            for i, idx in enumerate(cubie.facelets):
                if idx is None:
                    continue
                normal = np.zeros(3)
                normal[i] = np.sign(cubie.home[i])
                normal = cubie.orientation @ normal
                axis   = int(np.argmax(np.abs(normal)))
                target = self._lattice[cubie.lattice_position()].facelets[axis]
                facelets[target] = self._state[idx]
        return CubeState(''.join(facelets))
