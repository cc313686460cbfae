"""Bridge to nauty's geng, used to cross-check generator counts."""
from __future__ import annotations

import os
import shutil
import subprocess
from typing import Iterable, Iterator

from cospectraltools.graph import SimpleGraph
from cospectraltools.io.graph6 import g6_to_graph


NAUTY_GENG = os.environ.get("NAUTY_GENG", "geng")


def nauty_available() -> bool:
    """Returns True iff geng appears runnable."""
    return shutil.which(NAUTY_GENG) is not None


def _require_geng() -> None:
    if not nauty_available():
        raise RuntimeError("nauty not available (need 'geng' in PATH, or set NAUTY_GENG).")


def geng_g6(
    n: int,
    *,
    connected: bool = False,
    min_degree: int | None = None,
    max_degree: int | None = None,
) -> Iterable[str]:
    """Stream graph6 strings from geng for all graphs on n vertices.

    min_degree / max_degree map to geng's -d / -D; equal values give the
    regular graphs of that degree.
    """
    _require_geng()

    cmd = [NAUTY_GENG, "-q", "-g"]
    if connected:
        cmd.append("-c")
    if min_degree is not None:
        cmd.append(f"-d{min_degree}")
    if max_degree is not None:
        cmd.append(f"-D{max_degree}")
    cmd.append(str(n))

    p = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    if p.stdout is None or p.stderr is None:
        p.kill()
        p.wait()
        raise RuntimeError("geng started without output pipes.")

    try:
        for line in p.stdout:
            s = line.strip()
            if not s or s.startswith(">"):
                continue
            yield s

        err = p.stderr.read()
        p.wait()
        if p.returncode != 0:
            raise RuntimeError(f"geng failed for n={n} with return code {p.returncode}: {err.strip()}")
    finally:
        # The caller may stop iterating early; do not leave geng running.
        if p.poll() is None:
            p.kill()
            p.wait()
        p.stdout.close()
        p.stderr.close()


def geng_graphs(n: int, **kwargs) -> Iterator[SimpleGraph]:
    for g6 in geng_g6(n, **kwargs):
        yield g6_to_graph(g6)


def geng_count(n: int, **kwargs) -> int:
    """Number of graphs geng produces for the given options."""
    return sum(1 for _ in geng_g6(n, **kwargs))
