#!/usr/bin/env python3
"""
Print loop counts, orbits and cospectral non-similar pairs for graphs stored
as CSV adjacency matrices.

Usage:
  python3 ncvs_report.py examples/ncvs/ncvs1.csv [more.csv ...] [--draw]
"""

import argparse
import os

from cospectraltools.io.csv_matrix import load_csv
from cospectraltools.io.graph6 import graph_to_g6
from cospectraltools.spectral import cospectral_profile


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("paths", nargs="+")
    parser.add_argument("--draw", action="store_true", help="save a PNG next to each CSV")
    args = parser.parse_args()

    for path in args.paths:
        G = load_csv(path)
        prof = cospectral_profile(G)

        print(f"== {path}  (g6 {graph_to_g6(G)}, degrees {G.degrees()})")
        for u, row in enumerate(prof.loops):
            print(f"  {u}: {list(row)}")
        print("  orbits:", [sorted(o) for o in prof.orbits])
        print("  cospectral classes:", [list(c) for c in prof.classes if len(c) > 1])
        print("  NCVS pairs:", list(prof.ncvs))
        print(f"  walk-regular: {prof.walk_regular}  vertex-transitive: {prof.vertex_transitive}")

        if args.draw:
            from cospectraltools.viz.draw import draw_ncvs

            draw_ncvs(G, title=os.path.basename(path), save_path=os.path.splitext(path)[0] + ".png")


if __name__ == "__main__":
    main()
