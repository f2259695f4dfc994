"""
NxNxN sticker cube
state is a (N**3, 6) array
row (z*N + y)*N + x holds the piece at position (x, y, z), x fastest
columns are the piece's sticker slots, one per face (see pieces.py)
axes are x: right, y: up, z: forward (Front at z = 0)
"""
import logging
import itertools as it
from collections import namedtuple
import numpy as np
from matplotlib.patches import Polygon
from pieces import Axis, Face, NONE, LETTERS, RGB, DEFAULT_COLOR, rotate_pieces

logger = logging.getLogger(__name__)

class IndexOutOfRange(IndexError):
    pass

def index(N, x, y, z):
    for c in (x, y, z):
        if not 0 <= c < N:
            raise IndexOutOfRange("coordinate %d outside [0, %d)" % (c, N))
    return (z*N + y)*N + x

def coordinates(N, idx):
    if not 0 <= idx < N**3:
        raise IndexOutOfRange("index %d outside [0, %d)" % (idx, N**3))
    z, rem = divmod(idx, N*N)
    y, x = divmod(rem, N)
    return x, y, z

# depth is the layer's position along axis
Layer = namedtuple("Layer", ("axis", "depth"))

# faces sit at depth 0 or N-1 of their axis
_FACE_LAYERS = {
    Face.TOP: (Axis.Y, True),
    Face.LEFT: (Axis.X, False),
    Face.FRONT: (Axis.Z, False),
    Face.RIGHT: (Axis.X, True),
    Face.BACK: (Axis.Z, True),
    Face.BOTTOM: (Axis.Y, False),
}

def face_layer(face, N):
    axis, far = _FACE_LAYERS[Face(face)]
    return Layer(axis, N-1 if far else 0)

def middle_layer(axis, N):
    return Layer(Axis(axis), N // 2)

def first_half(N, depth):
    # the middle layer of odd N belongs to the first half, even N splits evenly
    return depth <= (N-1) // 2

# base coordinate, x stride and y stride of each layer's plane in the linear index space
# the plane is seen from outside the cube, looking at the depth-0 face of the axis
# for first-half layers and at the depth-N-1 face for second-half layers
# rows run top to bottom and columns left to right, as in the unfolded net
_PLANES = {
    (Axis.X, True): lambda N, d: ((d, N-1, N-1), -N*N, -N), # from Left
    (Axis.X, False): lambda N, d: ((d, N-1, 0), N*N, -N), # from Right
    (Axis.Y, True): lambda N, d: ((0, d, 0), 1, N*N), # from Bottom
    (Axis.Y, False): lambda N, d: ((0, d, N-1), 1, -N*N), # from Top
    (Axis.Z, True): lambda N, d: ((0, N-1, d), 1, -N), # from Front
    (Axis.Z, False): lambda N, d: ((N-1, N-1, d), -1, -N), # from Back
}

def plane_strides(N, layer):
    axis, depth = layer
    if not 0 <= depth < N:
        raise IndexOutOfRange("layer depth %d outside [0, %d)" % (depth, N))
    base, x_stride, y_stride = _PLANES[Axis(axis), first_half(N, depth)](N, depth)
    return index(N, *base), x_stride, y_stride

def plane_to_cube(N, layer):
    # returns mapping from layer-local (lx, ly) to cube (x, y, z)
    base, x_stride, y_stride = plane_strides(N, layer)
    def mapping(lx, ly):
        if not (0 <= lx < N and 0 <= ly < N):
            raise IndexOutOfRange("plane coordinate (%d, %d) outside [0, %d)" % (lx, ly, N))
        return coordinates(N, base + ly*y_stride + lx*x_stride)
    return mapping

def layer_indices(N, layer):
    # plane[ly, lx] is the linear index of plane_to_cube(N, layer)(lx, ly)
    base, x_stride, y_stride = plane_strides(N, layer)
    l = np.arange(N)
    return base + l[:, np.newaxis]*y_stride + l[np.newaxis, :]*x_stride

# unfolded net placement of each face, in (column, row) blocks of N stickers
_NET_BLOCKS = {
    Face.TOP: (1, 0),
    Face.LEFT: (0, 1),
    Face.FRONT: (1, 1),
    Face.RIGHT: (2, 1),
    Face.BACK: (3, 1),
    Face.BOTTOM: (1, 2),
}

class CubeDomain:

    def __init__(self, N):
        # N is side-length of cube
        if N < 1: raise ValueError("cube size must be positive, got %d" % N)

        # memoize index plane of every layer
        planes = {}
        for axis, depth in it.product(Axis, range(N)):
            planes[Layer(axis, depth)] = layer_indices(N, Layer(axis, depth))
        face_planes = {face: planes[face_layer(face, N)] for face in Face}

        # build solved state: each face layer gets its color in its own slot
        solved_state = np.full((N**3, len(Face)), NONE, dtype=int)
        for face in Face:
            solved_state[face_planes[face].ravel(), face] = DEFAULT_COLOR[face]

        self.N = N
        self._planes = planes
        self._face_planes = face_planes
        self._solved_state = solved_state

    def state_size(self):
        return self._solved_state.shape[0]

    def solved_state(self):
        return self._solved_state.copy()

    def plane(self, layer):
        try:
            return self._planes[tuple(layer)]
        except KeyError:
            raise IndexOutOfRange("no layer %s in %d-cube" % (tuple(layer), self.N)) from None

    def rotate(self, state, layer, clockwise):
        # quarter turn of one layer, clockwise as seen looking at its plane
        # returns new state, input is not modified
        axis, depth = layer
        plane = self.plane(layer)
        state = state.copy()

        # flip then transpose rotates the plane by 90 degrees
        if clockwise:
            state[plane] = state[plane[::-1, :]]
        else:
            state[plane] = state[plane[:, ::-1]]
        state[plane] = state[plane.T]

        # reorient the moved pieces, mirrored for planes seen from the far side
        piece_clockwise = bool(clockwise) != (not first_half(self.N, depth))
        state[plane] = rotate_pieces(state[plane], Axis(axis), piece_clockwise)

        logger.debug("rotate %s[%d] %s", Axis(axis).name, depth, "cw" if clockwise else "ccw")
        return state

    def execute(self, turns, state):
        # turns are (layer, clockwise) pairs
        for layer, clockwise in turns: state = self.rotate(state, layer, clockwise)
        return state

    def solved_faces(self, state):
        return {
            face: bool((state[self._face_planes[face], face] == DEFAULT_COLOR[face]).all())
            for face in Face}

    def validate(self, state):
        return all(self.solved_faces(state).values())

    def face_colors(self, state, face):
        # (N, N) sticker colors of one face as seen in the net
        return state[self._face_planes[face], face]

    def net(self, state):
        N = self.N
        def row(face, ly):
            return "".join(LETTERS[c] + " " for c in self.face_colors(state, face)[ly])
        indent = " " * (2*N)
        lines = [indent + row(Face.TOP, ly) for ly in range(N)]
        for ly in range(N):
            lines.append("".join(row(face, ly) for face in (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)))
        lines += [indent + row(Face.BOTTOM, ly) for ly in range(N)]
        return "\n".join(lines)

    def render(self, state, ax, x0=0, y0=0):
        # ax is matplotlib Axes object
        # draws the unfolded net, one square patch per sticker
        N = self.N
        for face, (col, row) in _NET_BLOCKS.items():
            colors = self.face_colors(state, face)
            for ly, lx in it.product(range(N), repeat=2):
                x = x0 + col*N + lx
                y = y0 + (2-row)*N + (N-1-ly)
                xy = [(x, y), (x+1, y), (x+1, y+1), (x, y+1)]
                ax.add_patch(Polygon(xy, facecolor=RGB[colors[ly, lx]], edgecolor='k'))

if __name__ == "__main__":

    import matplotlib.pyplot as pt

    #### inspect the plane of a middle layer
    N = 3
    mapping = plane_to_cube(N, middle_layer(Axis.Y, N))
    for ly, lx in it.product(range(N), repeat=2):
        print("(%d, %d) -> (%d, %d, %d)" % ((lx, ly) + mapping(lx, ly)))

    #### turn the back face and show the result
    domain = CubeDomain(N)
    state = domain.solved_state()
    print("Valid: %s" % domain.validate(state))
    state = domain.rotate(state, face_layer(Face.BACK, N), False)
    print(domain.net(state))
    print("Valid: %s" % domain.validate(state))

    ax = pt.gca()
    domain.render(state, ax)
    ax.axis("equal")
    ax.axis('off')
    pt.show()
