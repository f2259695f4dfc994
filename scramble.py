"""
Scramble a solved cube and print its net
usage: scramble.py cube_size scramble_length [-v] [--plot]
"""
import sys
import logging
import argparse
import numpy as np
from cube import CubeDomain
from notation import random_scramble, apply_moves

logger = logging.getLogger(__name__)

class UsageError(Exception):
    pass

class _Parser(argparse.ArgumentParser):
    # report bad arguments to main instead of exiting with argparse's status
    def error(self, message):
        raise UsageError(message)

def _positive(text):
    value = int(text)
    if value < 1: raise ValueError(text)
    return value

def _non_negative(text):
    value = int(text)
    if value < 0: raise ValueError(text)
    return value

def build_parser():
    parser = _Parser(prog="scramble.py", description="Scramble a solved NxNxN cube and print its net")
    parser.add_argument("cube_size", type=_positive, help="side length N of the cube")
    parser.add_argument("scramble_length", type=_non_negative, help="number of random moves")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every layer turn")
    parser.add_argument("--plot", action="store_true", help="also draw the net with matplotlib")
    return parser

def run(cube_size, scramble_length, rng, out=None, plot=False):
    out = sys.stdout if out is None else out

    domain = CubeDomain(cube_size)
    scramble = random_scramble(scramble_length, rng)
    print(scramble, file=out)

    state = apply_moves(domain, domain.solved_state(), scramble)
    print(domain.net(state), file=out)
    logger.info("solved after scramble: %s", domain.validate(state))

    if plot:
        import matplotlib.pyplot as pt
        ax = pt.gca()
        domain.render(state, ax)
        ax.axis("equal")
        ax.axis('off')
        pt.show()

    return state

def main(argv=None, rng=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as err:
        print("%s: error: %s" % (parser.prog, err), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    if rng is None: rng = np.random.default_rng()
    run(args.cube_size, args.scramble_length, rng, plot=args.plot)
    return 0

if __name__ == "__main__":
    sys.exit(main())
