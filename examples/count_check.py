#!/usr/bin/env python3
"""
Check generator counts against OEIS A000088 (all graphs) and A005176
(regular graphs), optionally also against nauty's geng.

Usage:
  python3 count_check.py --n-max 7
  python3 count_check.py --regular --n-max 10
  python3 count_check.py --geng 9 4
"""

import argparse
import sys
import time

from cospectraltools.external.nauty import nauty_available
from cospectraltools.validation import (
    check_graph_counts,
    check_regular_against_geng,
    check_regular_graph_counts,
)


def main():
    parser = argparse.ArgumentParser(description="Validate graph counts.")
    parser.add_argument("--n-max", type=int, default=None)
    parser.add_argument("--regular", action="store_true", help="check regular graph counts")
    parser.add_argument("--geng", type=int, nargs=2, metavar=("N", "D"),
                        help="compare d-regular graphs on n vertices with geng")
    args = parser.parse_args()

    t0 = time.time()
    if args.geng:
        if not nauty_available():
            sys.exit("geng not found (set NAUTY_GENG).")
        n, d = args.geng
        chk = check_regular_against_geng(n, d)
        print(f"n = {n}, d = {d}: geng {chk.expected}, ours {chk.actual}: "
              + ("SUCCESS" if chk.ok else "FAILED"))
        ok = chk.ok
    elif args.regular:
        ok = all(c.ok for c in check_regular_graph_counts(args.n_max, verbose=True))
    else:
        ok = all(c.ok for c in check_graph_counts(args.n_max, verbose=True))

    print(f"Done in {time.time() - t0:.1f}s", file=sys.stderr)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
