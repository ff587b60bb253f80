"""Tests for sdf3d geometry classes."""

import numpy as np
import numpy.testing as npt
import pytest

from sdf3d import Box3D, Geometry3D, Sphere3D


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p(*xyz) -> np.ndarray:
    return np.array([list(xyz)], dtype=float)


def _grid(n: int = 8) -> np.ndarray:
    lin = np.linspace(-1.0, 1.0, n)
    Z, Y, X = np.meshgrid(lin, lin, lin, indexing="ij")
    return np.stack([X, Y, Z], axis=-1)


# ===========================================================================
# Base class
# ===========================================================================

class TestGeometry3D:
    def test_is_3d(self):
        assert Geometry3D(lambda p: p[..., 0]).is_3d is True

    def test_call_matches_sdf(self):
        s = Sphere3D(0.3)
        p = _grid(4)
        npt.assert_array_equal(s(p), s.sdf(p))

    def test_bounds_default_none(self):
        g = Geometry3D(lambda p: p[..., 0])
        assert g.bounds is None
        with pytest.raises(ValueError):
            g.corners

    def test_bounds_stored_as_floats(self):
        g = Geometry3D(lambda p: p[..., 0], [(0, 1), (2, 3), (4, 5)])
        assert g.bounds == ((0.0, 1.0), (2.0, 3.0), (4.0, 5.0))
        assert all(isinstance(v, float) for pair in g.bounds for v in pair)

    def test_translate_moves_origin(self):
        s = Sphere3D(0.3)
        moved = s.translate(0.5, 0.0, 0.0)
        npt.assert_allclose(moved.sdf(_p(0.5, 0, 0)), [-0.3], atol=1e-10)

    def test_translate_moves_bounds(self):
        moved = Box3D((0.1, 0.2, 0.3)).translate(1.0, -1.0, 2.0)
        npt.assert_allclose(moved.bounds, [(0.9, 1.1), (-1.2, -0.8), (1.7, 2.3)])

    def test_round_grows_surface(self):
        b = Box3D((0.2, 0.2, 0.2))
        r = b.round(0.05)
        p = _p(0.25, 0, 0)
        npt.assert_allclose(r.sdf(p), b.sdf(p) - 0.05, atol=1e-10)
        npt.assert_allclose(r.bounds, [(-0.25, 0.25)] * 3)

    def test_onion_creates_shell(self):
        s = Sphere3D(0.3)
        shell = s.onion(0.02)
        assert shell.sdf(_p(1.0, 0, 0))[0] > 0
        assert shell.sdf(_p(0.3, 0, 0))[0] < 0
        assert shell.sdf(_p(0, 0, 0))[0] > 0


# ===========================================================================
# Primitive shapes
# ===========================================================================

class TestSphere3D:
    def test_inside_origin(self):
        npt.assert_allclose(Sphere3D(0.3).sdf(_p(0, 0, 0)), [-0.3], atol=1e-10)

    def test_on_surface(self):
        npt.assert_allclose(Sphere3D(0.3).sdf(_p(0.3, 0, 0)), [0.0], atol=1e-10)

    def test_outside(self):
        npt.assert_allclose(Sphere3D(0.3).sdf(_p(0.5, 0, 0)), [0.2], atol=1e-10)

    def test_batch_shape(self):
        phi = Sphere3D(0.3).sdf(_grid(4))
        assert phi.shape == (4, 4, 4)

    def test_bounds(self):
        assert Sphere3D(0.3).bounds == ((-0.3, 0.3),) * 3


class TestBox3D_:
    def test_inside(self):
        npt.assert_allclose(Box3D((0.3, 0.3, 0.3)).sdf(_p(0, 0, 0)), [-0.3], atol=1e-10)

    def test_on_face(self):
        npt.assert_allclose(Box3D((0.3, 0.3, 0.3)).sdf(_p(0.3, 0, 0)), [0.0], atol=1e-10)

    def test_outside(self):
        npt.assert_allclose(Box3D((0.3, 0.3, 0.3)).sdf(_p(0.4, 0, 0)), [0.1], atol=1e-10)

    def test_outside_corner(self):
        npt.assert_allclose(Box3D((0.3, 0.3, 0.3)).sdf(_p(0.4, 0.4, 0.4)), [np.sqrt(0.03)])

    def test_corners(self):
        lo, hi = Box3D((0.1, 0.2, 0.3)).corners
        npt.assert_allclose(lo, [-0.1, -0.2, -0.3])
        npt.assert_allclose(hi, [0.1, 0.2, 0.3])


# ===========================================================================
# Boolean operations
# ===========================================================================

class TestBoolean3D:
    def test_union_includes_both(self):
        a = Sphere3D(0.3)
        b = Box3D((0.2, 0.2, 0.2)).translate(0.5, 0, 0)
        u = a.union(b)
        assert u.sdf(_p(0, 0, 0))[0] < 0      # inside sphere
        assert u.sdf(_p(0.5, 0, 0))[0] < 0    # inside box

    def test_union_bounds_hull(self):
        a = Sphere3D(0.3)
        b = Box3D((0.2, 0.2, 0.2)).translate(0.5, 0, 0)
        npt.assert_allclose(a.union(b).bounds, [(-0.3, 0.7), (-0.3, 0.3), (-0.3, 0.3)])

    def test_union_with_unbounded_is_unbounded(self):
        plane = Geometry3D(lambda p: p[..., 2])
        assert Sphere3D(0.3).union(plane).bounds is None

    def test_intersection_requires_both(self):
        a = Sphere3D(0.3)
        b = Sphere3D(0.3).translate(0.4, 0, 0)
        i = a.intersect(b)
        assert i.sdf(_p(0, 0, 0))[0] > 0      # in a but not b
        assert i.sdf(_p(0.2, 0, 0))[0] < 0

    def test_intersection_bounds_overlap(self):
        a = Sphere3D(0.3)
        b = Sphere3D(0.3).translate(0.4, 0, 0)
        npt.assert_allclose(a.intersect(b).bounds, [(0.1, 0.3), (-0.3, 0.3), (-0.3, 0.3)])

    def test_intersection_with_unbounded_keeps_bounds(self):
        half_space = Geometry3D(lambda p: p[..., 2])
        assert Sphere3D(0.3).intersect(half_space).bounds == Sphere3D(0.3).bounds

    def test_subtraction_removes_cutter(self):
        a = Sphere3D(0.4)
        b = Sphere3D(0.2)
        s = a.subtract(b)
        assert s.sdf(_p(0, 0, 0))[0] > 0      # origin inside both → removed
        assert s.sdf(_p(0.3, 0, 0))[0] < 0    # in a, outside b
        assert s.bounds == a.bounds

    def test_union_is_pointwise_min(self):
        a = Sphere3D(0.3)
        b = Box3D((0.2, 0.2, 0.2))
        p = _grid(4)
        npt.assert_allclose(a.union(b).sdf(p), np.minimum(a.sdf(p), b.sdf(p)))

    def test_chained_union(self):
        a, b, c = [Sphere3D(0.2).translate(i * 0.5, 0, 0) for i in range(3)]
        u = a.union(b).union(c)
        for i in range(3):
            assert u.sdf(_p(i * 0.5, 0, 0))[0] < 0
        npt.assert_allclose(u.bounds[0], (-0.2, 1.2))
