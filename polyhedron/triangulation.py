"""Ear-clipping triangulation of planar polygons."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
import numpy.typing as npt

from _sdf_common import cross, length
from ._math import Axis, face_projection_axis, point_in_polygon, polygon_normal
from .errors import TriangulationError

logger = logging.getLogger(__name__)

_F = npt.NDArray[np.floating]


def triangulate(vertices) -> _F:
    """Split a simple planar polygon into triangles by ear clipping.

    Parameters
    ----------
    vertices:
        ``(n, 3)`` boundary, ``n >= 3``, convex or not.

    Returns
    -------
    numpy.ndarray
        ``(n - 2, 3, 3)`` triangles with the winding of the input polygon.
        The output is deterministic: ears are searched from the start of
        the remaining boundary after every clip.

    Raises
    ------
    TriangulationError
        When no ear exists, i.e. the boundary is self-intersecting.
    """
    v = np.asarray(vertices, dtype=np.float64)
    if v.ndim != 2 or v.shape[1] != 3 or len(v) < 3:
        raise ValueError(f"expected an (n >= 3, 3) polygon, got shape {v.shape}")
    if len(v) == 3:
        return v[None].copy()

    normal = polygon_normal(v)
    axis = face_projection_axis(v, normal)
    remaining = list(range(len(v)))
    triangles: List[_F] = []
    while len(remaining) > 3:
        k = _find_ear(v, remaining, normal, axis)
        if k is None:
            raise TriangulationError(
                f"no ear among {len(remaining)} remaining vertices; polygon is not simple"
            )
        m = len(remaining)
        triangles.append(v[[remaining[k - 1], remaining[k], remaining[(k + 1) % m]]])
        del remaining[k]
    triangles.append(v[remaining])

    logger.debug("triangulated %d-gon into %d triangles", len(v), len(triangles))
    return np.stack(triangles)


def _find_ear(v: _F, remaining: List[int], normal: _F, axis: Axis) -> Optional[int]:
    """Position in *remaining* of the first clippable ear, or ``None``.

    Candidate triangles lie in the polygon's plane, so they are tested
    for emptiness along the polygon's own projection *axis*.
    """
    m = len(remaining)
    for k in range(m):
        trio = (remaining[k - 1], remaining[k], remaining[(k + 1) % m])
        a, b, c = v[list(trio)]

        # Convex: the next vertex turns away from the outward side of (a, b)
        side = cross(b - a, normal)
        if not np.dot(side, c - b) < 0.0:
            continue

        others = v[[i for i in remaining if i not in trio]]
        if not np.any(point_in_polygon(np.stack([a, b, c]), axis, others)):
            return k
    return None


def triangle_area(triangles) -> _F:
    """Area of each triangle in a ``(..., 3, 3)`` array."""
    t = np.asarray(triangles, dtype=np.float64)
    return 0.5 * length(cross(t[..., 1, :] - t[..., 0, :], t[..., 2, :] - t[..., 0, :]))
