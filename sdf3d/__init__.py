"""
sdf3d — shape framework for 3D signed distance fields
======================================================

The seam between distance-field producers (such as
:class:`polyhedron.Polyhedron`) and anything that samples or renders them.

Implemented features
--------------------
- :class:`Geometry3D`: distance callable + bounding box + ``is_3d`` flag
- Analytic shapes: :class:`Sphere3D`, :class:`Box3D`
- Boolean operations: ``union``, ``intersect``, ``subtract``
- Modifiers and transforms: ``round``, ``onion``, ``translate``
- Grid sampling: :func:`sample_levelset_3d`, :func:`save_npy`

Quick start
-----------

::

    from polyhedron import catalog
    from sdf3d import Sphere3D, sample_levelset_3d

    cube  = catalog.cube(0.5).to_geometry()
    shape = cube.subtract(Sphere3D(0.6))
    phi   = sample_levelset_3d(shape, resolution=(64, 64, 64))
"""

from .geometry import (
    Geometry3D,
    Sphere3D,
    Box3D,
)
from .grid import padded_bounds, sample_levelset_3d, save_npy

__version__ = "0.3.0"

__all__ = [
    # Base
    "Geometry3D",

    # Shapes
    "Sphere3D",
    "Box3D",

    # Grid utilities
    "padded_bounds",
    "sample_levelset_3d",
    "save_npy",
]
