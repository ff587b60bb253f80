"""Closed polyhedra and their exact signed distance field."""

from __future__ import annotations

import logging
import operator
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from _sdf_common import as_points
from sdf3d.geometry import Geometry3D
from ._math import (
    Axis,
    _unwrap,
    distance_point_to_polygon,
    face_projection_axis,
    polygon_normal,
)
from .errors import DegenerateFaceError, MalformedPolyhedronError

logger = logging.getLogger(__name__)

_F = npt.NDArray[np.floating]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]


def face_edges(indices: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Directed edges ``(i, j)`` of a face in boundary order, wrapping."""
    for k in range(len(indices)):
        yield indices[k], indices[(k + 1) % len(indices)]


@dataclass(frozen=True, eq=False)
class Face:
    """One face of a :class:`Polyhedron` with its cached plane data."""

    indices: Tuple[int, ...]
    points: _F
    normal: _F
    axis: Axis

    def distance(self, p: _F):
        """Signed distance from *p* to this face (positive on the normal side)."""
        return distance_point_to_polygon(self.points, self.normal, self.axis, p)


class Polyhedron:
    """Closed, oriented, 2-manifold polyhedron.

    Parameters
    ----------
    vertices:
        ``(V, 3)`` vertex coordinates; row order defines the indices.
    faces:
        Sequence of index sequences, one per face, each listing a planar
        polygon counter-clockwise as seen from outside the solid.

    Every undirected edge must be used by exactly two faces, once in each
    direction.  Face normals and projection axes are computed here once
    and reused by every distance query.

    Raises
    ------
    MalformedPolyhedronError
        If the vertex array or the face lists violate the contract above.
    DegenerateFaceError
        If a face has zero area.
    """

    is_3d = True

    def __init__(self, vertices, faces: Sequence[Sequence[int]]) -> None:
        v = np.array(vertices, dtype=np.float64)
        if v.ndim != 2 or v.shape[1] != 3 or len(v) < 4:
            raise MalformedPolyhedronError(f"expected (V >= 4, 3) vertices, got shape {v.shape}")
        if not np.all(np.isfinite(v)):
            raise MalformedPolyhedronError("vertex coordinates must be finite")
        v.flags.writeable = False

        self.vertices: _F = v
        self.faces: Tuple[Tuple[int, ...], ...] = tuple(
            self._check_face(k, f, len(v)) for k, f in enumerate(faces)
        )
        self._n_edges = _check_manifold(self.faces)

        polygons = []
        for k, indices in enumerate(self.faces):
            points = v[list(indices)]
            points.flags.writeable = False
            try:
                normal = polygon_normal(points)
            except DegenerateFaceError as err:
                raise DegenerateFaceError(f"face {k}: {err}", face=k) from err
            normal.flags.writeable = False
            polygons.append(Face(indices, points, normal, face_projection_axis(points, normal)))
        self.polygons: Tuple[Face, ...] = tuple(polygons)

        logger.debug(
            "polyhedron: %d vertices, %d edges, %d faces",
            len(v), self._n_edges, len(self.faces),
        )

    @staticmethod
    def _check_face(k: int, face: Sequence[int], n_vertices: int) -> Tuple[int, ...]:
        try:
            indices = tuple(operator.index(i) for i in face)
        except TypeError as err:
            raise MalformedPolyhedronError(f"face {k}: indices must be integers") from err
        if len(indices) < 3:
            raise MalformedPolyhedronError(f"face {k}: needs at least 3 vertices, got {len(indices)}")
        for i in indices:
            if not 0 <= i < n_vertices:
                raise MalformedPolyhedronError(
                    f"face {k}: vertex index {i} out of range [0, {n_vertices})"
                )
        return indices

    def __repr__(self) -> str:
        return f"Polyhedron(V={len(self.vertices)}, E={self._n_edges}, F={len(self.faces)})"

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def bounds(self) -> _Bounds3D:
        """``((x0, x1), (y0, y1), (z0, z1))`` of the vertices."""
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return tuple((float(a), float(b)) for a, b in zip(lo, hi))  # type: ignore[return-value]

    @property
    def centroid(self) -> _F:
        """Mean of the vertex positions."""
        return self.vertices.mean(axis=0)

    def face_normals(self) -> _F:
        """``(F, 3)`` outward unit normals in face order."""
        return np.stack([face.normal for face in self.polygons])

    def euler_characteristic(self) -> int:
        """``V - E + F``; 2 for a solid without holes."""
        return len(self.vertices) - self._n_edges + len(self.faces)

    # ------------------------------------------------------------------
    # Distance field
    # ------------------------------------------------------------------

    def distance(self, p):
        """Signed distance from *p* (``(..., 3)``) to the surface.

        Negative inside, positive outside.  Each point takes the face
        distance of smallest magnitude; on exact ties the earlier face in
        ``faces`` wins.
        """
        p = as_points(p)
        best = np.full(p.shape[:-1], np.inf)
        for face in self.polygons:
            d = face.distance(p)
            best = np.where(np.abs(d) < np.abs(best), d, best)
        return _unwrap(best)

    def to_geometry(self) -> Geometry3D:
        """Wrap the distance field and bounds as a :class:`sdf3d.Geometry3D`."""
        return Geometry3D(self.distance, self.bounds)


def distance_point_to_polyhedron(polyhedron: Polyhedron, point):
    """Signed distance from *point* to *polyhedron*; see :meth:`Polyhedron.distance`."""
    return polyhedron.distance(point)


def _check_manifold(faces: Sequence[Tuple[int, ...]]) -> int:
    """Verify edge pairing and orientation; return the undirected edge count."""
    directed: Counter = Counter()
    for k, indices in enumerate(faces):
        for i, j in face_edges(indices):
            if i == j:
                raise MalformedPolyhedronError(f"face {k}: repeated vertex {i}")
            directed[i, j] += 1

    for (i, j), count in directed.items():
        if count != 1 or directed.get((j, i)) != 1:
            raise MalformedPolyhedronError(
                f"edge ({i}, {j}) is not shared by exactly two oppositely oriented faces"
            )
    return len(directed) // 2
