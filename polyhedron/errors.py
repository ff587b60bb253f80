"""Exceptions raised by the polyhedron kernel."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "PolyhedronError",
    "MalformedPolyhedronError",
    "DegenerateFaceError",
    "TriangulationError",
]


class PolyhedronError(ValueError):
    """Base class for every error raised by :mod:`polyhedron`."""


class MalformedPolyhedronError(PolyhedronError):
    """Vertex/face data violates the input contract.

    Raised at construction for bad array shapes, non-finite coordinates,
    faces with fewer than three indices, out-of-range indices, and edges
    that are not shared by exactly two faces in opposite directions.
    """


class DegenerateFaceError(MalformedPolyhedronError):
    """A face has (near) zero area, so its normal is undefined."""

    def __init__(self, message: str, face: Optional[int] = None) -> None:
        super().__init__(message)
        self.face = face


class TriangulationError(PolyhedronError):
    """Ear clipping found no ear: the polygon is not simple."""

    def __init__(self, message: str, face: Optional[int] = None) -> None:
        super().__init__(message)
        self.face = face
