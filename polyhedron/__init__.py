"""polyhedron — exact signed distance fields and triangulation for polyhedra.

Builds a signed distance field for any closed, oriented, 2-manifold
polyhedron given as vertices plus planar (possibly non-convex) polygon
faces, and splits its faces into triangles for STL export.

Quick start
-----------
>>> from polyhedron import Polyhedron, to_stl
>>> from polyhedron import catalog
>>> box = catalog.cube(1.0)
>>> box.distance([0.0, 0.0, 0.0])
-1.0
>>> geom = box.to_geometry()          # sdf3d.Geometry3D, composable
>>> text = to_stl(box, name="cube")   # 12 triangles, ASCII STL

Distance
--------
Each face contributes the signed distance to its planar polygon: height
above the plane when the foot point falls inside the polygon (crossing-
number test in the face's least-distorting coordinate plane), otherwise
the distance to the nearest edge.  The face with the smallest magnitude
wins.  The result is exact, negative inside and positive outside.

Triangulation
-------------
Ear clipping, O(n²) per face.  Suitable for the polygon sizes of
architectural and solid-modelling faces, not for dense meshes.
"""

from . import catalog
from ._math import (
    NORMAL_EPS,
    PROJECTION_EPS,
    Axis,
    distance_point_to_polygon,
    distance_point_to_segment,
    dominant_projection_axis,
    face_projection_axis,
    point_in_polygon,
    polygon_normal,
)
from .errors import (
    DegenerateFaceError,
    MalformedPolyhedronError,
    PolyhedronError,
    TriangulationError,
)
from .export import (
    load_stl,
    to_stl,
    to_triangles,
    unique_edges,
    wireframe,
    wireframe_sdf,
    write_stl,
)
from .solid import Face, Polyhedron, distance_point_to_polyhedron
from .triangulation import triangle_area, triangulate

__all__ = [
    # Solid
    "Polyhedron",
    "Face",
    "distance_point_to_polyhedron",
    "catalog",

    # Planar math
    "Axis",
    "NORMAL_EPS",
    "PROJECTION_EPS",
    "distance_point_to_segment",
    "polygon_normal",
    "dominant_projection_axis",
    "face_projection_axis",
    "point_in_polygon",
    "distance_point_to_polygon",

    # Triangulation
    "triangulate",
    "triangle_area",

    # Export
    "unique_edges",
    "wireframe",
    "wireframe_sdf",
    "to_triangles",
    "to_stl",
    "write_stl",
    "load_stl",

    # Errors
    "PolyhedronError",
    "MalformedPolyhedronError",
    "DegenerateFaceError",
    "TriangulationError",
]
