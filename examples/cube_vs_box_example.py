"""Polyhedral cube against the analytic box SDF.

Demonstrates: catalog.cube, Polyhedron.to_geometry, Box3D, sample_levelset_3d
Output:       examples/cube_vs_box_example.png

Mathematical identity verified:
    cube(h).distance(p) == Box3D((h, h, h)).sdf(p)   for every p
(the face-distance field of a convex polyhedron is exact, so it must agree
with the closed-form box distance inside and outside.)
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from polyhedron import catalog
from sdf3d import Box3D, sample_levelset_3d

_BOUNDS = ((-1.0, 1.0), (-1.0, 1.0), (-1.0, 1.0))
_RES    = (32, 32, 32)
_OUT    = os.path.join(os.path.dirname(__file__), "cube_vs_box_example.png")


def _render_png(phi, out_path, title=""):
    try:
        import matplotlib.pyplot as plt
        from mpl_toolkits.mplot3d.art3d import Poly3DCollection
        from skimage import measure
    except ImportError:
        print("  scikit-image / matplotlib not available, skipping PNG")
        return

    lo = _BOUNDS[0][0]
    spacing = (_BOUNDS[0][1] - lo) / phi.shape[0]
    if phi.min() >= 0 or phi.max() <= 0:
        print("  No zero crossing, cannot render isosurface.")
        return

    verts, faces, _, _ = measure.marching_cubes(phi, level=0, spacing=(spacing,) * 3)
    verts = verts[:, ::-1] + lo

    tris  = verts[faces]
    norms = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    nlen  = np.linalg.norm(norms, axis=1, keepdims=True)
    norms = norms / np.where(nlen > 0, nlen, 1.0)
    shade = 0.3 + 0.7 * np.clip(norms @ np.array([0.577, 0.577, 0.577]), 0, 1)
    fc    = np.column_stack([shade * 0.35, shade * 0.75, shade, np.ones_like(shade)])

    fig = plt.figure(figsize=(5, 5), facecolor="#111")
    ax  = fig.add_subplot(111, projection="3d")
    ax.set_facecolor("#111"); ax.set_axis_off(); ax.set_box_aspect([1, 1, 1])
    ax.add_collection3d(Poly3DCollection(tris, facecolors=fc, edgecolors="none"))
    hi = _BOUNDS[0][1]
    ax.set_xlim(lo, hi); ax.set_ylim(lo, hi); ax.set_zlim(lo, hi)
    ax.set_title(title, color="white", fontsize=10)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor="#111")
    plt.close()
    print(f"  Saved: {out_path}")


def main():
    print("=" * 60)
    print("CUBE: polyhedral face distance vs analytic box")
    print("  half size 0.5, 8 vertices, 6 quad faces")
    print("=" * 60)

    poly = catalog.cube(0.5)
    geom = poly.to_geometry()
    box  = Box3D((0.5, 0.5, 0.5))

    phi     = sample_levelset_3d(geom, _BOUNDS, _RES)
    phi_box = sample_levelset_3d(box,  _BOUNDS, _RES)
    max_diff = np.abs(phi - phi_box).max()

    print(f"\n{poly!r}")
    print(f"bounds    : {geom.bounds}")
    print(f"SDF range : [{phi.min():.4f}, {phi.max():.4f}]")
    print(f"max |polyhedron - box| = {max_diff:.2e}  (should be ~0)")

    # --- spot checks ---
    for p, expected in [((0, 0, 0), -0.5), ((1, 0, 0), 0.5), ((1, 1, 0), np.sqrt(0.5))]:
        v = poly.distance(p)
        print(f"  d{p} = {v:+.4f}  (expected {expected:+.4f})")

    ok = max_diff < 1e-9 and phi.min() < 0 and phi.max() > 0
    print("\n" + ("PASSED" if ok else "FAILED"))

    _render_png(phi, _OUT, "Polyhedral cube")


if __name__ == "__main__":
    main()
