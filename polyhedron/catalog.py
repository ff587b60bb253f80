"""Ready-made solids with outward, counter-clockwise face winding.

Implemented solids
------------------
:func:`tetrahedron`, :func:`cube`, :func:`octahedron`
    Regular solids centred at the origin.
:func:`prism`, :func:`pyramid`
    Extrusion / cone over an arbitrary simple 2-D profile, convex or not.
"""

from __future__ import annotations

import itertools
import logging
from typing import List, Sequence, Tuple

import numpy as np

from .solid import Polyhedron

logger = logging.getLogger(__name__)

__all__ = ["tetrahedron", "cube", "octahedron", "prism", "pyramid"]


def tetrahedron(scale: float = 1.0) -> Polyhedron:
    """Regular tetrahedron on alternate corners of the cube ``[-scale, scale]³``."""
    coords = [(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)]
    faces = [(0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)]
    return Polyhedron(np.array(coords, dtype=float) * scale, faces)


def cube(half_size: float = 1.0) -> Polyhedron:
    """Axis-aligned cube ``[-half_size, half_size]³``.

    Vertex ``i`` sits at ``+half_size`` along x, y, z where bit 0, 1, 2 of
    ``i`` is set.
    """
    coords = [
        (
            1 if (idx & 1) else -1,
            1 if (idx & 2) else -1,
            1 if (idx & 4) else -1,
        )
        for idx in range(8)
    ]
    faces = [
        (0, 2, 3, 1),   # -Z
        (4, 5, 7, 6),   # +Z
        (0, 4, 6, 2),   # -X
        (1, 3, 7, 5),   # +X
        (0, 1, 5, 4),   # -Y
        (2, 6, 7, 3),   # +Y
    ]
    return Polyhedron(np.array(coords, dtype=float) * half_size, faces)


def octahedron(radius: float = 1.0) -> Polyhedron:
    """Regular octahedron with vertices at distance *radius* on each axis."""
    coords = [
        (1, 0, 0), (-1, 0, 0),
        (0, 1, 0), (0, -1, 0),
        (0, 0, 1), (0, 0, -1),
    ]
    faces = []
    for sx, sy, sz in itertools.product((1, -1), repeat=3):
        x, y, z = (0 if sx > 0 else 1), (2 if sy > 0 else 3), (4 if sz > 0 else 5)
        # (x, y, z) runs counter-clockwise in octants with an even number of minus signs
        faces.append((x, y, z) if sx * sy * sz > 0 else (x, z, y))
    return Polyhedron(np.array(coords, dtype=float) * radius, faces)


def _ccw_profile(profile: Sequence[Sequence[float]]) -> np.ndarray:
    p = np.asarray(profile, dtype=float)
    if p.ndim != 2 or p.shape[1] != 2 or len(p) < 3:
        raise ValueError(f"expected an (n >= 3, 2) profile, got shape {p.shape}")
    x, y = p[:, 0], p[:, 1]
    signed_area = 0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)
    if signed_area < 0:
        logger.debug("profile is clockwise; reversing")
        p = p[::-1]
    return p


def prism(profile: Sequence[Sequence[float]], height: float = 1.0) -> Polyhedron:
    """Extrude a simple 2-D *profile* from ``z = 0`` to ``z = height``.

    The profile may be given in either winding.  Side faces are quads,
    the caps are the profile itself (possibly non-convex).
    """
    p = _ccw_profile(profile)
    n = len(p)
    bottom = np.column_stack([p, np.zeros(n)])
    top = np.column_stack([p, np.full(n, float(height))])

    faces: List[Tuple[int, ...]] = [
        tuple(range(n - 1, -1, -1)),
        tuple(range(n, 2 * n)),
    ]
    for i in range(n):
        j = (i + 1) % n
        faces.append((i, j, j + n, i + n))
    return Polyhedron(np.vstack([bottom, top]), faces)


def pyramid(profile: Sequence[Sequence[float]], height: float = 1.0) -> Polyhedron:
    """Cone over a 2-D *profile* with its apex above the vertex mean.

    The profile must be star-shaped about its vertex mean, otherwise side
    faces intersect each other.
    """
    p = _ccw_profile(profile)
    n = len(p)
    base = np.column_stack([p, np.zeros(n)])
    apex = np.append(p.mean(axis=0), float(height))

    faces: List[Tuple[int, ...]] = [tuple(range(n - 1, -1, -1))]
    for i in range(n):
        faces.append((i, (i + 1) % n, n))
    return Polyhedron(np.vstack([base, apex]), faces)
