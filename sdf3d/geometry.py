"""3D geometry wrapper for signed distance functions.

A :class:`Geometry3D` is what the renderers and grid samplers consume: a
distance callable, an axis-aligned bounding box and a dimensionality flag.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

import _sdf_common as sdf

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]


def _expand(bounds: Optional[_Bounds3D], r: float) -> Optional[_Bounds3D]:
    if bounds is None:
        return None
    return tuple((lo - r, hi + r) for lo, hi in bounds)  # type: ignore[return-value]


def _hull(a: Optional[_Bounds3D], b: Optional[_Bounds3D]) -> Optional[_Bounds3D]:
    if a is None or b is None:
        return None
    return tuple((min(p[0], q[0]), max(p[1], q[1])) for p, q in zip(a, b))  # type: ignore[return-value]


def _overlap(a: Optional[_Bounds3D], b: Optional[_Bounds3D]) -> Optional[_Bounds3D]:
    if a is None:
        return b
    if b is None:
        return a
    return tuple((max(p[0], q[0]), min(p[1], q[1])) for p, q in zip(a, b))  # type: ignore[return-value]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry3D:
    """Base class for 3D signed-distance-function geometries.

    A ``Geometry3D`` wraps a callable ``func(p) -> distances`` where *p* is
    a ``(..., 3)`` array of 3D points and the return value is a ``(...)``
    array of signed distances, together with the ``bounds`` of the solid
    as ``((x0, x1), (y0, y1), (z0, z1))``.  ``bounds`` is ``None`` for
    geometry with no finite extent.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
    - Modifiers:          :meth:`round`, :meth:`onion`
    - Transforms:         :meth:`translate`

    Each operation carries the bounding box along.
    """

    is_3d = True

    def __init__(self, func: _SDFFunc, bounds: Optional[_Bounds3D] = None) -> None:
        self._func = func
        self.bounds = None if bounds is None else tuple(
            (float(lo), float(hi)) for lo, hi in bounds
        )

    def sdf(self, p: _Array) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 3)``)."""
        return self._func(p)

    def __call__(self, p: _Array) -> _Array:
        return self._func(p)

    @property
    def corners(self) -> Tuple[_Array, _Array]:
        """Bounding box as ``(min_corner, max_corner)`` arrays."""
        if self.bounds is None:
            raise ValueError("geometry has no finite bounds")
        b = np.asarray(self.bounds, dtype=float)
        return b[:, 0], b[:, 1]

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: Geometry3D) -> Geometry3D:
        """Return the union (min) of this shape and *other*."""
        return Geometry3D(
            lambda p: sdf.opUnion(self.sdf(p), other.sdf(p)),
            _hull(self.bounds, other.bounds),
        )

    def subtract(self, other: Geometry3D) -> Geometry3D:
        """Subtract *other* from this shape."""
        return Geometry3D(
            lambda p: sdf.opSubtraction(other.sdf(p), self.sdf(p)), self.bounds
        )

    def intersect(self, other: Geometry3D) -> Geometry3D:
        """Return the intersection (max) of this shape and *other*."""
        return Geometry3D(
            lambda p: sdf.opIntersection(self.sdf(p), other.sdf(p)),
            _overlap(self.bounds, other.bounds),
        )

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def round(self, rad: float) -> Geometry3D:
        """Round the surface outward by *rad*."""
        return Geometry3D(lambda p: sdf.opRound(p, self.sdf, rad), _expand(self.bounds, rad))

    def onion(self, thickness: float) -> Geometry3D:
        """Turn the solid into a hollow shell of *thickness*."""
        return Geometry3D(
            lambda p: sdf.opOnion(self.sdf(p), thickness), _expand(self.bounds, thickness)
        )

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, tx: float, ty: float, tz: float) -> Geometry3D:
        """Translate by ``(tx, ty, tz)``."""
        t = np.array([tx, ty, tz])
        bounds = None
        if self.bounds is not None:
            bounds = tuple((lo + d, hi + d) for (lo, hi), d in zip(self.bounds, t))
        return Geometry3D(lambda p: self.sdf(p - t), bounds)


# ===========================================================================
# Analytic shapes
# ===========================================================================

class Sphere3D(Geometry3D):
    """Sphere centred at origin with given *radius*."""

    def __init__(self, radius: float) -> None:
        r = float(radius)
        super().__init__(lambda p: sdf.length(p) - r, ((-r, r),) * 3)


class Box3D(Geometry3D):
    """Axis-aligned box with *half_size* ``(hx, hy, hz)`` centred at origin."""

    def __init__(self, half_size: Sequence[float]) -> None:
        b = np.array(half_size, dtype=float)

        def _sdf(p: _Array) -> _Array:
            q = np.abs(p) - b
            return sdf.length(np.maximum(q, 0.0)) + np.minimum(np.max(q, axis=-1), 0.0)

        super().__init__(_sdf, tuple((-h, h) for h in b))

