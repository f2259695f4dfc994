"""
Pieces of an NxNxN sticker cube
a piece is a length-6 color array, one slot per face
slot order is Top, Left, Front, Right, Back, Bottom
slots are NONE unless the piece touches that face's outer layer
"""
from enum import IntEnum
import numpy as np

# Set up color enum, display letters and rgb tuples
NONE = 0
WHITE, ORANGE, GREEN, RED, BLUE, YELLOW = range(1,7)
LETTERS = {
    NONE: "-",
    WHITE: "W",
    ORANGE: "O",
    GREEN: "G",
    RED: "R",
    BLUE: "B",
    YELLOW: "Y",
}
RGB = {
    NONE: (0.2, 0.2, 0.2), # dark grey
    WHITE: (1.0, 1.0, 1.0), # white
    ORANGE: (1.0, 0.6, 0.0), # orange
    GREEN: (0.0, 1.0, 0.0), # green
    RED: (1.0, 0.0, 0.0), # red
    BLUE: (0.0, 0.0, 1.0), # blue
    YELLOW: (1.0, 1.0, 0.0), # yellow
}

class Axis(IntEnum):
    X = 0 # right
    Y = 1 # up
    Z = 2 # forward

class Face(IntEnum):
    TOP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    BOTTOM = 5

DEFAULT_COLOR = {
    Face.TOP: WHITE,
    Face.LEFT: ORANGE,
    Face.FRONT: GREEN,
    Face.RIGHT: RED,
    Face.BACK: BLUE,
    Face.BOTTOM: YELLOW,
}

# slots perpendicular to each axis, in the order they cycle
# a clockwise step (seen from the depth-0 face) moves each color one slot back:
# new[cycle[i]] = old[cycle[i+1]]
CYCLES = {
    Axis.X: np.array([Face.TOP, Face.BACK, Face.BOTTOM, Face.FRONT]),
    Axis.Y: np.array([Face.FRONT, Face.LEFT, Face.BACK, Face.RIGHT]),
    Axis.Z: np.array([Face.TOP, Face.LEFT, Face.BOTTOM, Face.RIGHT]),
}

def default_color(face):
    return DEFAULT_COLOR[Face(face)]

def default_piece():
    return np.full(len(Face), NONE, dtype=int)

def with_color(face, color=None, piece=None):
    # color defaults to the face's canonical color
    piece = default_piece() if piece is None else piece.copy()
    piece[face] = default_color(face) if color is None else color
    return piece

def has(piece, face):
    return piece[face] != NONE

def cycle_source(axis, clockwise):
    # slot indices to read from when writing CYCLES[axis]
    return np.roll(CYCLES[axis], -1 if clockwise else 1)

def rotate_pieces(pieces, axis, clockwise):
    # pieces is a (..., 6) array; returns reoriented copy
    pieces = np.array(pieces)
    pieces[..., CYCLES[axis]] = pieces[..., cycle_source(axis, clockwise)]
    return pieces

def rotate_piece(piece, axis, clockwise):
    return rotate_pieces(piece, axis, clockwise)

def piece_string(piece):
    # draws a piece as a small cross:
    #   T
    # L F R B
    #   D
    letters = [LETTERS[c] for c in piece]
    return "\n".join([
        "  " + letters[Face.TOP],
        " ".join(letters[Face.LEFT:Face.BOTTOM]),
        "  " + letters[Face.BOTTOM],
    ])

if __name__ == "__main__":

    # corner touching top, front and left, turned twice around x
    piece = with_color(Face.TOP)
    piece = with_color(Face.FRONT, piece=piece)
    piece = with_color(Face.LEFT, piece=piece)
    print(piece_string(piece))
    for _ in range(2): piece = rotate_piece(piece, Axis.X, True)
    print(piece_string(piece))
    assert piece[Face.BOTTOM] == WHITE and piece[Face.BACK] == GREEN
