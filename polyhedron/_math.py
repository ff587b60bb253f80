"""Planar-polygon math behind the polyhedron distance field.

All symbols here are re-exported from :mod:`polyhedron`; the module itself
is internal.  Query points are ``(..., 3)`` arrays and every function is
vectorised over the leading axes; polygons are ``(n, 3)`` arrays.

Algorithms
----------
Face normal: Newell's method.
    Sums ``((y1-y2)(z1+z2), (z1-z2)(x1+x2), (x1-x2)(y1+y2))`` over
    consecutive vertex pairs.  Exact for planar polygons of any convexity.

Classification: crossing number (PNPOLY, W. R. Franklin).
    The polygon and the query points are projected onto the coordinate
    plane obtained by dropping the axis along which the polygon is
    thinnest.  When that axis lies in the polygon's plane, the axis of the
    largest normal component is dropped instead.  Points on the boundary may classify either way.

Distance: projection onto the face plane.
    If the foot of the perpendicular lies inside the polygon, the distance
    is the height above the plane; otherwise the nearest edge wins.  The
    sign is the side of the plane the point is on.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from _sdf_common import as_points, clamp, dot, dot2, length
from .errors import DegenerateFaceError

_F = npt.NDArray[np.floating]
_Segment = Union[Tuple[Sequence[float], Sequence[float]], _F]

# Newell magnitude below this fraction of the squared bbox diagonal is
# treated as a zero-area polygon.
NORMAL_EPS = 1e-12

# A projection axis whose unit-normal component is below this lies (nearly)
# in the face plane and would flatten the polygon onto a line.
PROJECTION_EPS = 1e-6


class Axis(IntEnum):
    """Coordinate axis, as used for the dominant projection."""

    X = 0
    Y = 1
    Z = 2


# Remaining (A, B) coordinates once an axis is dropped
_PLANE_AXES = {Axis.X: (1, 2), Axis.Y: (2, 0), Axis.Z: (0, 1)}


def _unwrap(a: np.ndarray):
    """Return a Python scalar for 0-d results, the array otherwise."""
    return a if a.ndim else a.item()


# ---------------------------------------------------------------------------
# Geometry primitives
# ---------------------------------------------------------------------------

def distance_point_to_segment(segment: _Segment, point) -> _F:
    """Unsigned distance from *point* to the closed segment ``(a, b)``.

    The projection parameter ``t = dot(p - a, b - a) / |b - a|²`` is clamped
    to ``[0, 1]``.  The segment must not be degenerate (``a != b``).
    """
    a, b = np.asarray(segment, dtype=np.float64)
    p = as_points(point)
    d = b - a
    t = np.asarray(clamp(dot(p - a, d) / dot2(d), 0.0, 1.0))
    return _unwrap(np.asarray(length(p - (a + t[..., None] * d))))


def polygon_normal(vertices) -> _F:
    """Unit normal of a planar polygon by Newell's method.

    Counter-clockwise vertices (seen from the tip of the normal) give the
    right-handed normal.  Raises :class:`DegenerateFaceError` for
    collinear or zero-area input.
    """
    v = np.asarray(vertices, dtype=np.float64)
    w = np.roll(v, -1, axis=0)
    n = np.array([
        np.sum((v[:, 1] - w[:, 1]) * (v[:, 2] + w[:, 2])),
        np.sum((v[:, 2] - w[:, 2]) * (v[:, 0] + w[:, 0])),
        np.sum((v[:, 0] - w[:, 0]) * (v[:, 1] + w[:, 1])),
    ])
    mag = float(length(n))
    if not mag > NORMAL_EPS * float(dot2(np.ptp(v, axis=0))):
        raise DegenerateFaceError(f"polygon normal is undefined (|n| = {mag:.3g})")
    return n / mag


# ---------------------------------------------------------------------------
# Planar projection & classification
# ---------------------------------------------------------------------------

def dominant_projection_axis(vertices) -> Axis:
    """Axis along which *vertices* have the smallest extent.

    Dropping it when projecting to 2-D keeps the projected polygon as
    undistorted as possible.  Ties resolve in the order X, Y, Z.
    """
    extent = np.ptp(np.asarray(vertices, dtype=np.float64), axis=0)
    return Axis(int(np.argmin(extent)))


def face_projection_axis(vertices, normal) -> Axis:
    """Projection axis for a planar polygon with unit *normal*.

    The smallest-extent axis of :func:`dominant_projection_axis`, unless
    that axis lies in the polygon's plane (a wall running diagonally to
    the coordinate axes, say).  Then the axis of the largest normal
    component is used instead, which never projects the polygon onto a
    line.
    """
    axis = dominant_projection_axis(vertices)
    n = np.abs(np.asarray(normal, dtype=np.float64))
    if n[axis] < PROJECTION_EPS:
        axis = Axis(int(np.argmax(n)))
    return axis


def point_in_polygon(polygon, axis: Axis, point):
    """Crossing-number test of *point* against *polygon* projected along *axis*.

    Returns a boolean (or a boolean array for ``(..., 3)`` input).  The
    result is independent of which vertex the polygon starts at.
    """
    poly = np.asarray(polygon, dtype=np.float64)
    p = as_points(point)
    ia, ib = _PLANE_AXES[Axis(axis)]
    pa, pb = p[..., ia], p[..., ib]

    inside = np.zeros(pa.shape, dtype=bool)
    j = len(poly) - 1
    for i in range(len(poly)):
        ai, bi = poly[i, ia], poly[i, ib]
        aj, bj = poly[j, ia], poly[j, ib]
        if bi != bj:
            straddles = (bi > pb) != (bj > pb)
            inside ^= straddles & (pa < (aj - ai) * (pb - bi) / (bj - bi) + ai)
        j = i
    return _unwrap(inside)


# ---------------------------------------------------------------------------
# Signed distance to one face
# ---------------------------------------------------------------------------

def distance_point_to_polygon(polygon, normal, axis: Axis, point):
    """Signed distance from *point* to a planar *polygon*.

    Positive on the side *normal* points to (including the plane itself),
    negative on the other side.
    """
    poly = np.asarray(polygon, dtype=np.float64)
    n = np.asarray(normal, dtype=np.float64)
    p = as_points(point)

    t = np.asarray(dot(p - poly[0], n))
    projection = p - t[..., None] * n
    inside = np.asarray(point_in_polygon(poly, axis, projection))

    d = np.abs(t)
    if not inside.all():
        edge = np.full(t.shape, np.inf)
        for a, b in zip(poly, np.roll(poly, -1, axis=0)):
            edge = np.minimum(edge, distance_point_to_segment((a, b), p))
        d = np.where(inside, d, edge)
    return _unwrap(np.where(t < 0.0, -d, d))
