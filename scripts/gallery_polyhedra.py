"""Render every catalog solid and its wireframe as isosurfaces on one page.

Uses marching cubes (scikit-image) to extract the SDF=0 surface of each
polyhedron distance field and matplotlib's 3-D axes to display it.

Usage::

    python scripts/gallery_polyhedra.py                   # saves gallery_polyhedra.png
    python scripts/gallery_polyhedra.py --out my_file.png
    python scripts/gallery_polyhedra.py --res 32          # faster, lower quality

Requirements: numpy, matplotlib, scikit-image
    pip install -e .[gallery]
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
import warnings

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from polyhedron import catalog, wireframe
from sdf3d import Geometry3D, sample_levelset_3d

logger = logging.getLogger("gallery_polyhedra")

_LO, _HI = -1.3, 1.3


# ---------------------------------------------------------------------------
# Shape catalogue  (label, geometry)
# ---------------------------------------------------------------------------

def _make_shapes() -> list[tuple[str, Geometry3D]]:
    l_profile = [(0, 0), (3, 0), (3, 1), (1, 1), (1, 3), (0, 3)]
    star = [
        (np.cos(a) * r, np.sin(a) * r)
        for a, r in zip(np.linspace(0, 2 * np.pi, 10, endpoint=False), [1.0, 0.45] * 5)
    ]
    l_prism = catalog.prism(l_profile, height=1.0)

    return [
        ("tetrahedron",        catalog.tetrahedron(0.8).to_geometry()),
        ("cube",               catalog.cube(0.7).to_geometry()),
        ("octahedron",         catalog.octahedron(1.0).to_geometry()),
        ("L prism",            l_prism.to_geometry().translate(-1.0, -1.0, -0.5)),
        ("star pyramid",       catalog.pyramid(star, 1.0).to_geometry().translate(0, 0, -0.5)),
        ("cube wireframe",     wireframe(catalog.cube(0.7), 0.06)),
        ("octahedron frame",   wireframe(catalog.octahedron(1.0), 0.05)),
        ("cube - octahedron",  catalog.cube(0.7).to_geometry().subtract(
                                   catalog.octahedron(1.1).to_geometry().onion(0.05))),
    ]


# ---------------------------------------------------------------------------
# Evaluation + marching cubes
# ---------------------------------------------------------------------------

def _eval_surface(geom: Geometry3D, n: int):
    """Return (verts, faces) of the zero isosurface, or None on failure."""
    try:
        from skimage import measure
    except ImportError:
        raise SystemExit(
            "scikit-image is required for 3-D rendering.\n"
            "  pip install scikit-image"
        )
    bounds = ((_LO, _HI),) * 3
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        vals = sample_levelset_3d(geom, bounds, (n, n, n)).astype(float)
    # marching cubes needs at least one pos and neg value
    if vals.max() <= 0 or vals.min() >= 0:
        return None
    spacing = (_HI - _LO) / n
    verts, faces, _, _ = measure.marching_cubes(vals, level=0.0, spacing=(spacing,) * 3)
    # volume is (z, y, x); cell centres start half a cell in
    verts = verts[:, ::-1] + _LO + spacing / 2
    return verts, faces


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_gallery(shapes, out_path: str, ncols: int = 4, res: int = 48) -> None:
    nrows = (len(shapes) + ncols - 1) // ncols
    fig = plt.figure(figsize=(ncols * 3.0, nrows * 3.0), facecolor="#111111")

    _FACE_COLOR = np.array([0.35, 0.75, 1.0])
    _VIEW_ELEV  = 20
    _VIEW_AZIM  = 35

    for idx, (label, geom) in enumerate(shapes):
        ax = fig.add_subplot(nrows, ncols, idx + 1, projection="3d")
        ax.set_facecolor("#111111")
        ax.set_axis_off()
        ax.set_title(label, color="white", fontsize=8, pad=1)

        logger.info("sampling %s at %d^3", label, res)
        result = _eval_surface(geom, res)
        if result is None:
            ax.text2D(0.5, 0.5, "no surface", ha="center", va="center",
                      color="gray", transform=ax.transAxes, fontsize=7)
            continue

        verts, faces = result
        tris  = verts[faces]
        norms = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
        nlen  = np.linalg.norm(norms, axis=1, keepdims=True)
        norms = norms / np.where(nlen > 0, nlen, 1.0)
        shade = 0.3 + 0.7 * np.clip(norms @ np.array([0.577, 0.577, 0.577]), 0.0, 1.0)
        ax.add_collection3d(Poly3DCollection(
            tris, facecolors=np.outer(shade, _FACE_COLOR), edgecolors="none"))

        ax.set_xlim(_LO, _HI); ax.set_ylim(_LO, _HI); ax.set_zlim(_LO, _HI)
        ax.set_box_aspect([1, 1, 1])
        ax.view_init(elev=_VIEW_ELEV, azim=_VIEW_AZIM)

    fig.suptitle("polyhedron: signed distance field gallery", color="white",
                 fontsize=13, y=1.002)
    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render the polyhedron catalog to a single PNG gallery."
    )
    parser.add_argument("--out",  default="gallery_polyhedra.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=4, help="Number of columns (default 4)")
    parser.add_argument("--res",  type=int, default=48, help="Grid resolution per axis (default 48)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(asctime)s - %(message)s", datefmt="%H:%M:%S")
    render_gallery(_make_shapes(), args.out, ncols=args.cols, res=args.res)


if __name__ == "__main__":
    main()
