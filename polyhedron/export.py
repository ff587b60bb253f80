"""Mesh export and derived geometry for :class:`~polyhedron.solid.Polyhedron`.

STL output
----------
ASCII output follows the minimal grammar::

    solid <name>
    facet normal 0 0 0
    outer loop
    vertex x y z      (x3)
    endloop
    endfacet
    endsolid <name>

Lines carry no indentation.

Facet normals are written as zero; readers recompute them from the vertex
winding, which is counter-clockwise seen from outside.  Coordinates are
written with :func:`repr` so a written file reads back bit-for-bit.
Binary output uses the standard 80-byte header / uint32 count / 50-byte
record layout, also with zero normals.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from _sdf_common import as_points
from sdf3d.geometry import Geometry3D
from ._math import _unwrap, distance_point_to_segment
from .errors import TriangulationError
from .solid import face_edges
from .triangulation import triangle_area, triangulate

if TYPE_CHECKING:
    from .solid import Polyhedron

logger = logging.getLogger(__name__)

_F = npt.NDArray[np.floating]
_Edge = Tuple[_F, _F]

_STL_RECORD = np.dtype([
    ("normal", "<f4", (3,)),
    ("vertices", "<f4", (3, 3)),
    ("attr", "<u2"),
])


# ---------------------------------------------------------------------------
# Edges and wireframe
# ---------------------------------------------------------------------------

def unique_edges(polyhedron: "Polyhedron") -> List[_Edge]:
    """Each edge of *polyhedron* once, as a pair of vertex positions.

    An edge is emitted from the face that traverses it from the lower to
    the higher vertex index.  Because the two faces sharing an edge run
    along it in opposite directions, exactly one of them qualifies.
    """
    v = polyhedron.vertices
    return [(v[i], v[j]) for face in polyhedron.faces for i, j in face_edges(face) if i < j]


def wireframe_sdf(edges: Sequence[_Edge], thickness: float, point):
    """Distance from *point* to the nearest edge, minus *thickness*."""
    if not thickness > 0:
        raise ValueError(f"thickness must be positive, got {thickness}")
    p = as_points(point)
    d = np.full(p.shape[:-1], np.inf)
    for edge in edges:
        d = np.minimum(d, distance_point_to_segment(edge, p))
    return _unwrap(np.asarray(d - thickness))


def wireframe(polyhedron: "Polyhedron", thickness: float) -> Geometry3D:
    """Rounded-rod skeleton of *polyhedron* with rod radius *thickness*."""
    if not thickness > 0:
        raise ValueError(f"thickness must be positive, got {thickness}")
    edges = unique_edges(polyhedron)
    bounds = tuple((lo - thickness, hi + thickness) for lo, hi in polyhedron.bounds)
    return Geometry3D(lambda p: wireframe_sdf(edges, thickness, p), bounds)


# ---------------------------------------------------------------------------
# Triangles and STL
# ---------------------------------------------------------------------------

def to_triangles(polyhedron: "Polyhedron") -> _F:
    """``(T, 3, 3)`` triangles of every face, in face order.

    Raises :class:`TriangulationError` tagged with the face index when a
    face is not a simple polygon.
    """
    out = []
    for k, face in enumerate(polyhedron.polygons):
        try:
            out.append(triangulate(face.points))
        except TriangulationError as err:
            raise TriangulationError(f"face {k}: {err}", face=k) from err
    triangles = np.concatenate(out)
    logger.debug(
        "%d faces -> %d triangles, surface area %.6g",
        len(out), len(triangles), float(triangle_area(triangles).sum()),
    )
    return triangles


def to_stl(polyhedron: "Polyhedron", name: str = "polyhedron") -> str:
    """Triangulate *polyhedron* and render it as ASCII STL text."""
    lines = [f"solid {name}"]
    for tri in to_triangles(polyhedron):
        lines.append("facet normal 0 0 0")
        lines.append("outer loop")
        for x, y, z in tri.tolist():
            lines.append(f"vertex {x!r} {y!r} {z!r}")
        lines.append("endloop")
        lines.append("endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines) + "\n"


def _to_binary_stl(polyhedron: "Polyhedron", name: str) -> bytes:
    triangles = to_triangles(polyhedron)
    records = np.zeros(len(triangles), dtype=_STL_RECORD)
    records["vertices"] = triangles
    header = name.encode("ascii", errors="replace")[:80].ljust(80, b"\x00")
    return header + struct.pack("<I", len(triangles)) + records.tobytes()


def write_stl(
    polyhedron: "Polyhedron",
    path: Union[str, Path],
    *,
    name: str = "polyhedron",
    binary: bool = False,
) -> Path:
    """Write *polyhedron* to *path* as ASCII (default) or binary STL.

    Parent directories are created as needed.  Returns the path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if binary:
        path.write_bytes(_to_binary_stl(polyhedron, name))
    else:
        path.write_text(to_stl(polyhedron, name), encoding="ascii")
    logger.info("wrote %s STL to %s", "binary" if binary else "ASCII", path)
    return path


def load_stl(path: Union[str, Path]) -> _F:
    """Load an STL file and return its triangles as a ``(F, 3, 3)`` float64 array.

    Supports both binary and ASCII STL.  Normals are discarded.  A file is
    treated as binary when its size matches ``84 + 50 * count``, since some
    binary writers also start the header with ``solid``.
    """
    raw = Path(path).read_bytes()
    if len(raw) >= 84:
        count = struct.unpack_from("<I", raw, 80)[0]
        if len(raw) == 84 + 50 * count:
            records = np.frombuffer(raw, dtype=_STL_RECORD, count=count, offset=84)
            return records["vertices"].astype(np.float64)

    verts: List[List[float]] = []
    for line in raw.decode("ascii", errors="replace").splitlines():
        parts = line.split()
        if parts and parts[0] == "vertex":
            verts.append([float(c) for c in parts[1:4]])
    return np.array(verts, dtype=np.float64).reshape(-1, 3, 3)
