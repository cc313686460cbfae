#!/usr/bin/env python3
"""
Run one of the example searches and write each graph found as a CSV file.

  ncvs     graphs on N vertices with cospectral non-similar vertices (N=8)
  reg      regular graphs on N vertices with such vertices (N=10)
  walkreg  walk-regular, non-vertex-transitive regular graphs (N=12, days)

Usage:
  python3 save_examples.py ncvs
  python3 save_examples.py reg -n 10 --degrees 3 4
  python3 save_examples.py walkreg -n 12 --out /data/examples
"""

import argparse
import sys
import time

from cospectraltools.catalog import save_ncvs_examples, save_reg_examples, save_walkreg_examples


DEFAULT_N = {"ncvs": 8, "reg": 10, "walkreg": 12}


def main():
    parser = argparse.ArgumentParser(description="Save example graphs as CSV adjacency matrices.")
    parser.add_argument("search", choices=sorted(DEFAULT_N))
    parser.add_argument("-n", type=int, default=None, help="number of vertices")
    parser.add_argument("--degrees", type=int, nargs="*", default=None,
                        help="degrees to search (regular searches only; default all)")
    parser.add_argument("--out", default=None,
                        help="examples directory (default $COSPECTRAL_EXAMPLES_DIR or ./examples)")
    parser.add_argument("-q", "--quiet", action="store_true")
    args = parser.parse_args()

    n = args.n if args.n is not None else DEFAULT_N[args.search]
    verbose = not args.quiet

    t0 = time.time()
    if args.search == "ncvs":
        paths = save_ncvs_examples(n, examples_dir=args.out, verbose=verbose)
    elif args.search == "reg":
        paths = save_reg_examples(n, args.degrees, examples_dir=args.out, verbose=verbose)
    else:
        paths = save_walkreg_examples(n, args.degrees, examples_dir=args.out, verbose=verbose)

    print(f"Saved {len(paths)} graphs in {time.time() - t0:.1f}s", file=sys.stderr)
    for p in paths:
        print(p)


if __name__ == "__main__":
    main()
