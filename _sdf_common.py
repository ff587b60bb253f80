"""Shared vector helpers used by sdf3d and the polyhedron kernel.

This module provides:

* **Type alias**: :data:`_F`
* **Point coercion**: :func:`as_points`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`dot2`, :func:`cross`,
  :func:`clamp`
* **Boolean/domain operators** used by :class:`sdf3d.geometry.Geometry3D`:
  :func:`opUnion`, :func:`opSubtraction`, :func:`opIntersection`,
  :func:`opRound`, :func:`opOnion`

Not meant to be imported directly by end users; import from ``sdf3d`` or
``polyhedron`` instead.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "as_points",
    "length", "dot", "dot2", "cross", "clamp",
    "opUnion", "opSubtraction", "opIntersection",
    "opRound", "opOnion",
]


# ===========================================================================
# Point coercion
# ===========================================================================

def as_points(p) -> _F:
    """Coerce *p* to a float64 array whose last axis has length 3."""
    p = np.asarray(p, dtype=np.float64)
    if p.shape[-1:] != (3,):
        raise ValueError(f"expected points of shape (..., 3), got {p.shape}")
    return p


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def cross(a: _F, b: _F) -> _F:
    """Cross product along the last axis."""
    return np.cross(a, b)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


# ===========================================================================
# Boolean / domain operators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Subtract *d1* from *d2*: ``max(-d1, d2)``."""
    return np.maximum(-d1, d2)


def opIntersection(d1: _F, d2: _F) -> _F:
    """Intersection of two SDFs: ``max(d1, d2)``."""
    return np.maximum(d1, d2)


def opRound(p: _F, primitive: "_SDFFunc", rad: float) -> _F:  # type: ignore[name-defined]
    """Round a primitive outward by *rad*."""
    return primitive(p) - rad


def opOnion(sdf_val: _F, thickness: float) -> _F:
    """Turn a solid into a shell of *thickness*."""
    return np.abs(sdf_val) - thickness
