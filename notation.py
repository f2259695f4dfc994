"""
Outer-layer move notation
a token is a face letter (F, U, R, B, L, D) with an optional suffix:
none for a clockwise quarter turn, ' for counter-clockwise, 2 for two clockwise turns
"""
import logging
from pieces import Face
from cube import face_layer

logger = logging.getLogger(__name__)

FACE_LETTERS = {
    "F": Face.FRONT,
    "U": Face.TOP,
    "R": Face.RIGHT,
    "B": Face.BACK,
    "L": Face.LEFT,
    "D": Face.BOTTOM,
}

# suffix -> clockwise flag of each quarter turn
SUFFIXES = {
    "": (True,),
    "'": (False,),
    "2": (True, True),
}

# letter order used for scrambles
SCRAMBLE_LETTERS = "LRDUFB"

class InvalidMoveToken(ValueError):
    pass

def parse_move(token, N):
    # returns list of (layer, clockwise) quarter turns
    face = FACE_LETTERS.get(token[:1])
    suffix = SUFFIXES.get(token[1:])
    if face is None or suffix is None:
        raise InvalidMoveToken("unrecognized move %r" % token)
    layer = face_layer(face, N)
    return [(layer, clockwise) for clockwise in suffix]

def parse_moves(notation, N):
    # invalid tokens contribute no turns
    turns = []
    for token in notation.split():
        try:
            turns.extend(parse_move(token, N))
        except InvalidMoveToken as err:
            logger.debug("skipping %s", err)
    return turns

def apply_moves(domain, state, notation):
    return domain.execute(parse_moves(notation, domain.N), state)

def invert(notation):
    # notation that undoes the given one; invalid tokens are dropped
    inverse = {"": "'", "'": "", "2": "2"}
    tokens = []
    for token in reversed(notation.split()):
        if token[:1] in FACE_LETTERS and token[1:] in inverse:
            tokens.append(token[:1] + inverse[token[1:]])
    return " ".join(tokens)

def random_scramble(length, rng):
    # rng is a numpy Generator
    letters = rng.choice(list(SCRAMBLE_LETTERS), size=length)
    suffixes = rng.choice(list(SUFFIXES), size=length)
    return " ".join(letter + suffix for letter, suffix in zip(letters, suffixes))

if __name__ == "__main__":

    import numpy as np
    from cube import CubeDomain

    domain = CubeDomain(3)
    scramble = random_scramble(20, np.random.default_rng())
    print(scramble)
    state = apply_moves(domain, domain.solved_state(), scramble)
    print(domain.net(state))
    state = apply_moves(domain, state, invert(scramble))
    assert domain.validate(state)
