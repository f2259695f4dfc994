import itertools as it
import pytest
import numpy as np
from pieces import Axis, Face, NONE, DEFAULT_COLOR
from cube import (
    CubeDomain, Layer, IndexOutOfRange, index, coordinates, face_layer, middle_layer,
    first_half, plane_to_cube, layer_indices)


def on_boundary(N, x, y, z, face):
    return {
        Face.LEFT: x == 0,
        Face.RIGHT: x == N-1,
        Face.BOTTOM: y == 0,
        Face.TOP: y == N-1,
        Face.FRONT: z == 0,
        Face.BACK: z == N-1,
    }[face]


def test_index_is_x_fastest():
    assert index(3, 1, 2, 0) == 7
    assert coordinates(3, 7) == (1, 2, 0)
    for N in range(1, 5):
        order = [index(N, x, y, z) for z, y, x in it.product(range(N), repeat=3)]
        assert order == list(range(N**3))


@pytest.mark.parametrize("coords", [(3, 0, 0), (0, 3, 0), (0, 0, 3), (-1, 0, 0)])
def test_index_out_of_range(coords):
    with pytest.raises(IndexOutOfRange):
        index(3, *coords)


def test_coordinates_out_of_range():
    with pytest.raises(IndexError):
        coordinates(2, 8)


def test_face_layers():
    N = 4
    assert face_layer(Face.TOP, N) == Layer(Axis.Y, 3)
    assert face_layer(Face.BOTTOM, N) == Layer(Axis.Y, 0)
    assert face_layer(Face.LEFT, N) == Layer(Axis.X, 0)
    assert face_layer(Face.RIGHT, N) == Layer(Axis.X, 3)
    assert face_layer(Face.FRONT, N) == Layer(Axis.Z, 0)
    assert face_layer(Face.BACK, N) == Layer(Axis.Z, 3)
    assert middle_layer(Axis.Z, 5) == Layer(Axis.Z, 2)


def test_first_half():
    assert [first_half(3, d) for d in range(3)] == [True, True, False]
    assert [first_half(4, d) for d in range(4)] == [True, True, False, False]
    assert [first_half(2, d) for d in range(2)] == [True, False]
    assert first_half(1, 0)


def test_top_layer_mapping():
    mapping = plane_to_cube(3, Layer(Axis.Y, 2))
    coords = [mapping(lx, ly) for ly, lx in it.product(range(3), repeat=2)]
    assert len(set(coords)) == 9
    assert set(coords) == {(x, 2, z) for x, z in it.product(range(3), repeat=2)}


@pytest.mark.parametrize("N", [1, 2, 3, 4, 5])
def test_mapping_enumerates_each_layer(N):
    for axis, depth in it.product(Axis, range(N)):
        mapping = plane_to_cube(N, Layer(axis, depth))
        coords = [mapping(lx, ly) for ly, lx in it.product(range(N), repeat=2)]
        expected = {c for c in it.product(range(N), repeat=3) if c[axis] == depth}
        assert len(coords) == N*N
        assert set(coords) == expected

        plane = layer_indices(N, Layer(axis, depth))
        assert plane.shape == (N, N)
        for ly, lx in it.product(range(N), repeat=2):
            assert plane[ly, lx] == index(N, *mapping(lx, ly))


def test_face_planes_are_seen_from_outside():
    # top-left corner of each face in the unfolded net
    N = 3
    corners = {
        Face.TOP: (0, 2, 2),
        Face.LEFT: (0, 2, 2),
        Face.FRONT: (0, 2, 0),
        Face.RIGHT: (2, 2, 0),
        Face.BACK: (2, 2, 2),
        Face.BOTTOM: (0, 0, 0),
    }
    for face, expected in corners.items():
        mapping = plane_to_cube(N, face_layer(face, N))
        assert mapping(0, 0) == expected

    # neighbouring faces share edges across the net
    front = plane_to_cube(N, face_layer(Face.FRONT, N))
    right = plane_to_cube(N, face_layer(Face.RIGHT, N))
    top = plane_to_cube(N, face_layer(Face.TOP, N))
    bottom = plane_to_cube(N, face_layer(Face.BOTTOM, N))
    for k in range(N):
        assert front(N-1, k) == right(0, k)
        assert front(k, 0) == top(k, N-1)
        assert front(k, N-1) == bottom(k, 0)


def test_mapping_rejects_bad_input():
    with pytest.raises(IndexOutOfRange):
        plane_to_cube(3, Layer(Axis.X, 3))
    with pytest.raises(IndexOutOfRange):
        layer_indices(3, Layer(Axis.Y, -1))
    mapping = plane_to_cube(3, Layer(Axis.Z, 1))
    with pytest.raises(IndexOutOfRange):
        mapping(3, 0)


def test_domain_rejects_bad_size_and_layers():
    with pytest.raises(ValueError):
        CubeDomain(0)
    domain = CubeDomain(3)
    with pytest.raises(IndexOutOfRange):
        domain.plane(Layer(Axis.X, 3))
    with pytest.raises(IndexOutOfRange):
        domain.rotate(domain.solved_state(), Layer(Axis.Y, 5), True)


@pytest.mark.parametrize("N", [1, 2, 3, 4, 5])
def test_solved_state(N):
    domain = CubeDomain(N)
    state = domain.solved_state()
    assert state.shape == (N**3, 6)
    assert domain.state_size() == N**3
    assert domain.validate(state)
    assert all(domain.solved_faces(state).values())


@pytest.mark.parametrize("N", [2, 3, 4])
def test_solved_state_slots_follow_boundaries(N):
    state = CubeDomain(N).solved_state()
    for idx in range(N**3):
        x, y, z = coordinates(N, idx)
        for face in Face:
            if on_boundary(N, x, y, z, face):
                assert state[idx, face] == DEFAULT_COLOR[face]
            else:
                assert state[idx, face] == NONE


def test_piece_kinds_of_3_cube():
    state = CubeDomain(3).solved_state()
    counts = (state != NONE).sum(axis=1)
    assert [(counts == k).sum() for k in range(4)] == [1, 6, 12, 8]


def test_single_piece_cube():
    state = CubeDomain(1).solved_state()
    np.testing.assert_array_equal(state, [[DEFAULT_COLOR[f] for f in Face]])


def test_validate_is_pure():
    domain = CubeDomain(3)
    state = domain.rotate(domain.solved_state(), face_layer(Face.FRONT, 3), True)
    before = state.copy()
    assert domain.validate(state) == domain.validate(state) == False
    np.testing.assert_array_equal(state, before)


def test_solved_state_returns_copies():
    domain = CubeDomain(2)
    state = domain.solved_state()
    state[:] = NONE
    assert domain.validate(domain.solved_state())
