"""Triangulate a catalog solid and write it as STL.

Usage::

    python scripts/export_stl.py cube                    # writes cube.stl (ASCII)
    python scripts/export_stl.py octahedron --binary --out out/oct.stl
    python scripts/export_stl.py l-prism --height 2.5
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from polyhedron import PolyhedronError, catalog, load_stl, write_stl

_L_PROFILE = [(0, 0), (3, 0), (3, 1), (1, 1), (1, 3), (0, 3)]

_SOLIDS = {
    "tetrahedron": lambda args: catalog.tetrahedron(args.scale),
    "cube":        lambda args: catalog.cube(args.scale),
    "octahedron":  lambda args: catalog.octahedron(args.scale),
    "l-prism":     lambda args: catalog.prism(
        [(x * args.scale, y * args.scale) for x, y in _L_PROFILE], args.height),
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export a catalog polyhedron to STL.")
    parser.add_argument("solid", choices=sorted(_SOLIDS), help="Solid to export")
    parser.add_argument("--out", default=None, help="Output path (default <solid>.stl)")
    parser.add_argument("--scale", type=float, default=1.0, help="Size factor (default 1)")
    parser.add_argument("--height", type=float, default=1.0, help="Prism height (default 1)")
    parser.add_argument("--binary", action="store_true", help="Write binary instead of ASCII STL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(asctime)s - %(message)s", datefmt="%H:%M:%S")

    try:
        poly = _SOLIDS[args.solid](args)
        path = write_stl(poly, args.out or f"{args.solid}.stl",
                         name=args.solid, binary=args.binary)
    except PolyhedronError as err:
        logging.getLogger("export_stl").error("%s", err)
        return 1

    print(f"Saved: {path}  ({len(load_stl(path))} triangles)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
