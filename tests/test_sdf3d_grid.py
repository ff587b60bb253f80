"""Tests for sdf3d grid utilities."""

import os
import tempfile

import numpy as np
import numpy.testing as npt
import pytest

from polyhedron import catalog
from sdf3d import Box3D, Geometry3D, Sphere3D, padded_bounds, sample_levelset_3d, save_npy


class TestPaddedBounds:
    def test_grows_by_largest_extent(self):
        b = padded_bounds(catalog.prism([(0, 0), (4, 0), (4, 1), (0, 1)], 2.0), pad=0.25)
        npt.assert_allclose(b, [(-1.0, 5.0), (-1.0, 2.0), (-1.0, 3.0)])

    def test_zero_pad(self):
        assert padded_bounds(Sphere3D(0.5), pad=0.0) == ((-0.5, 0.5),) * 3

    def test_unbounded_raises(self):
        with pytest.raises(ValueError):
            padded_bounds(Geometry3D(lambda p: p[..., 0]))


class TestSampleLevelset3D:
    def test_output_shape(self):
        g = Sphere3D(0.3)
        phi = sample_levelset_3d(g, ((-1, 1), (-1, 1), (-1, 1)), (16, 16, 16))
        assert phi.shape == (16, 16, 16)

    def test_non_cube(self):
        g = Sphere3D(0.3)
        phi = sample_levelset_3d(g, ((-1, 1), (-1, 1), (-1, 1)), (8, 16, 32))
        assert phi.shape == (32, 16, 8)

    def test_cell_centred_near_minus_r(self):
        n = 65
        g = Sphere3D(0.3)
        phi = sample_levelset_3d(g, ((-1, 1), (-1, 1), (-1, 1)), (n, n, n))
        centre = phi[32, 32, 32]
        npt.assert_allclose(centre, -0.3, atol=0.02)

    def test_inside_negative_outside_positive(self):
        g = Sphere3D(0.3)
        phi = sample_levelset_3d(g, ((-1, 1), (-1, 1), (-1, 1)), (16, 16, 16))
        assert (phi < 0).any()
        assert (phi > 0).any()

    def test_default_bounds_from_geometry(self):
        cube = catalog.cube(0.5).to_geometry()
        phi = sample_levelset_3d(cube, resolution=(7, 7, 7))
        explicit = sample_levelset_3d(cube, padded_bounds(cube), (7, 7, 7))
        npt.assert_array_equal(phi, explicit)
        assert phi[0, 0, 0] > 0
        assert phi[3, 3, 3] == pytest.approx(-0.5)

    def test_polyhedral_cube_matches_box(self):
        bounds = ((-1, 1), (-1, 1), (-1, 1))
        phi = sample_levelset_3d(catalog.cube(0.4).to_geometry(), bounds, (12, 10, 8))
        box = sample_levelset_3d(Box3D((0.4, 0.4, 0.4)), bounds, (12, 10, 8))
        npt.assert_allclose(phi, box, atol=1e-12)


class TestSaveNpy3D:
    def test_round_trip(self):
        phi = np.random.rand(4, 4, 4)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "phi3d.npy")
            save_npy(path, phi)
            loaded = np.load(path)
        npt.assert_array_equal(phi, loaded)

    def test_creates_nested_dirs(self):
        phi = np.zeros((4, 4, 4))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "a", "b", "phi.npy")
            save_npy(path, phi)
            assert os.path.isfile(path)
