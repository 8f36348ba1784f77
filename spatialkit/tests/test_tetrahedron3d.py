"""Tests for Tetrahedron3D: construction, signed volume, circumsphere, containment."""
import dataclasses
import math

import numpy as np
import pytest

from spatialkit.core.errors import InvalidArgumentError, InvalidShapeError
from spatialkit.core.shapes import VertexShape
from spatialkit.core.sphere3d import Sphere3D
from spatialkit.core.tetrahedron3d import Tetrahedron3D

REGULAR = [(1, 1, 1), (-1, -1, 1), (-1, 1, -1), (1, -1, -1)]
CORNER = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]


def make_skewed():
    return Tetrahedron3D([(1.0, 2.0, 3.0), (2.0, 4.0, 4.0), (4.0, 1.0, 2.0), (3.0, 2.0, 5.0)])


class TestConstruction:

    def test_vertices_kept_in_order(self):
        tet = Tetrahedron3D(REGULAR)
        assert tet.vertices.tolist() == [list(map(float, p)) for p in REGULAR]
        assert not tet.vertices.flags.writeable

    def test_accepts_generator(self):
        tet = Tetrahedron3D(np.array(p) for p in CORNER)
        assert tet.vertices.shape == (4, 3)

    def test_frozen(self):
        tet = Tetrahedron3D(CORNER)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tet.signed_volume = 1.0

    @pytest.mark.parametrize("points", [
        [(0, 0, 0), (1, 0, 0), (2, 0, 0), (1, 1, 1)],
        [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)],
        [(0, 0, 5), (1, 0, 5), (0, 1, 5), (3, 7, 5)],
    ])
    def test_coplanar_points_rejected(self, points):
        with pytest.raises(InvalidShapeError, match="same plane"):
            Tetrahedron3D(points)

    @pytest.mark.parametrize("i,j", [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
    def test_every_repeated_pair_rejected(self, i, j):
        points = list(CORNER)
        points[j] = points[i]
        with pytest.raises(InvalidShapeError, match="distinct"):
            Tetrahedron3D(points)

    @pytest.mark.parametrize("points", [
        CORNER[:3],
        CORNER + [(1, 1, 1)],
        [(0, 0), (1, 0), (0, 1), (1, 1)],
        [(0, 0, 0), (1, 0, 0), (0, 1, 0), ('a', 0, 1)],
    ])
    def test_bad_vertex_input_rejected(self, points):
        with pytest.raises(InvalidShapeError):
            Tetrahedron3D(points)

    def test_satisfies_vertex_shape_protocol(self):
        assert isinstance(Tetrahedron3D(CORNER), VertexShape)


@pytest.mark.parametrize("points,volume", [
    ([(1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, 0)], 1.0 / 6.0),
    ([(1, 2, 3), (2, 4, 4), (4, 1, 2), (3, 2, 5)], 8.0 / 3.0),
    ([(1, 2, 3), (2, 2, 3), (1, 3, 3), (1, 2, 9)], -1.0),
])
def test_signed_volume(points, volume):
    tet = Tetrahedron3D(points)
    assert tet.signed_volume == volume
    assert tet.volume == abs(volume)


def test_signed_volume_under_permutations():
    a, b, c, d = make_skewed().vertices
    base = Tetrahedron3D([a, b, c, d]).signed_volume
    # transpositions flip the sign
    for perm in ([b, a, c, d], [a, c, b, d], [a, b, d, c], [d, b, c, a]):
        assert Tetrahedron3D(perm).signed_volume == pytest.approx(-base)
    # even permutations keep it
    for perm in ([b, c, a, d], [c, a, b, d], [b, a, d, c], [c, d, a, b]):
        assert Tetrahedron3D(perm).signed_volume == pytest.approx(base)


@pytest.mark.parametrize("points,center,radius", [
    (CORNER, (0.5, 0.5, 0.5), math.sqrt(3.0) / 2.0),
    ([(-15, 0, 0), (15, 0, 0), (0, 10, 0.01), (0, -10, 0.01)], (0.0, 0.0, -6249.995), 6250.0129999884794),
])
def test_circum_sphere(points, center, radius):
    sphere = Tetrahedron3D(points).circum_sphere()
    assert isinstance(sphere, Sphere3D)
    assert sphere.center.tolist() == pytest.approx(list(center), abs=1e-6)
    assert sphere.radius == pytest.approx(radius, rel=1e-9)


def test_circum_sphere_passes_through_vertices():
    tet = make_skewed()
    sphere = tet.circum_sphere()
    for v in tet.vertices:
        assert np.linalg.norm(v - sphere.center) == pytest.approx(sphere.radius, rel=1e-9)


def test_circum_sphere_recomputed_each_call():
    tet = Tetrahedron3D(CORNER)
    first = tet.circum_sphere()
    second = tet.circum_sphere()
    assert first == second
    assert first is not second


class TestContains:

    @pytest.mark.parametrize("point,expected", [
        ((0, 0, 0), True),                      # on vertex
        ((1, 0, 0), True),                      # on vertex
        ((0, 1, 0), True),                      # on vertex
        ((0, 0, 1), True),                      # on vertex
        ((0.5, 0, 0), True),                    # on edge
        ((0.5, 0.5, 0), True),                  # on edge
        ((0, 0.5, 0), True),                    # on edge
        ((0.25, 0.25, 0.5), True),              # on face
        ((0.2, 0.2, 0.2), True),                # inside
        ((1.0, 1.0, 1.0), False),
        ((-0.000001, -0.000001, -0.000001), False),
        ((0.5, 0.5, 0.5), False),
        ((-0.1, 0.3, 0.3), False),
    ])
    def test_unit_corner(self, point, expected):
        assert Tetrahedron3D(CORNER).contains(point) is expected

    def test_inverted_orientation(self):
        tet = Tetrahedron3D([CORNER[1], CORNER[0], CORNER[2], CORNER[3]])
        assert tet.signed_volume == -Tetrahedron3D(CORNER).signed_volume
        assert tet.contains((0.2, 0.2, 0.2))
        assert not tet.contains((0.5, 0.5, 0.5))

    def test_skewed_tetrahedron(self):
        tet = make_skewed()
        centroid = tet.vertices.mean(axis=0)
        assert tet.contains(centroid)
        # just past vertex A along the centroid -> A direction
        outside = tet.vertices[0] + 0.01 * (tet.vertices[0] - centroid)
        assert not tet.contains(outside)
        # a face barycentre, nudged inwards
        face = tet.vertices[:3].mean(axis=0)
        assert tet.contains(face + 1e-6 * (centroid - face))
        assert not tet.contains(face - 1e-3 * (centroid - face))

    def test_vertices_contained_with_zero_tolerance(self):
        tet = make_skewed()
        for v in tet.vertices:
            assert tet.contains(v, tolerance=0.0)

    def test_tolerance_is_monotonic(self):
        tet = Tetrahedron3D(CORNER)
        point = (0.3, 0.3, -0.004)
        flags = [tet.contains(point, tolerance=t) for t in (0.0, 1e-3, 5e-3, 1e-1)]
        assert flags == [False, False, True, True]

    def test_early_reject_only_when_outside_on_every_axis(self):
        tet = Tetrahedron3D([(0, 0, 0), (10, 0, 0), (0, 10, 0), (0, 0, 10)])
        assert tet.contains((-0.5, 3.0, 3.0), tolerance=0.1)
        assert not tet.contains((-0.5, -0.5, -0.5), tolerance=0.1)

    def test_negative_tolerance_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Tetrahedron3D(CORNER).contains((0.2, 0.2, 0.2), tolerance=-1.0)


def test_equality():
    t1 = Tetrahedron3D(CORNER)
    t2 = Tetrahedron3D([tuple(map(float, p)) for p in CORNER])
    assert t1 == t2
    assert hash(t1) == hash(t2)
    assert t1 != Tetrahedron3D([CORNER[1], CORNER[0], CORNER[2], CORNER[3]])
    nudged = Tetrahedron3D([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1 + 1e-11)])
    assert t1 != nudged
    assert t1.equals(nudged, 1e-9)
    assert not t1.equals(nudged, 1e-12)
    with pytest.raises(InvalidArgumentError):
        t1.equals(nudged, -1e-9)
