"""Cross-checks against nauty's geng (skipped when geng is not installed)."""
import subprocess
import sys

import pytest

from cospectraltools.external.nauty import geng_count, geng_graphs, nauty_available
from cospectraltools.oracle import is_isomorphic
from cospectraltools.search.enumeration import generate_all, generate_regular
from cospectraltools.validation import check_regular_against_geng


needs_geng = pytest.mark.skipif(not nauty_available(), reason="nauty not available")


@needs_geng
def test_geng_count_graphs_on_5():
    assert geng_count(5) == 34


@needs_geng
def test_geng_connected_on_4():
    assert geng_count(4, connected=True) == 6


@needs_geng
def test_generate_all_matches_geng_classes():
    ours = generate_all(5)
    theirs = list(geng_graphs(5))
    assert len(ours) == len(theirs)
    for G in theirs:
        assert any(is_isomorphic(G, H) for H in ours if H.degree_sequence() == G.degree_sequence())


@needs_geng
@pytest.mark.parametrize("n,d", [(6, 2), (8, 3), (9, 4)])
def test_regular_matches_geng(n, d):
    assert check_regular_against_geng(n, d).ok


@needs_geng
def test_geng_regular_graphs_are_regular():
    for G in geng_graphs(6, min_degree=3, max_degree=3):
        assert G.degrees() == [3] * 6
    assert len(generate_regular(6, 3)) == 2


def test_missing_geng_raises(monkeypatch):
    import cospectraltools.external.nauty as nauty

    monkeypatch.setattr(nauty, "NAUTY_GENG", "definitely-not-a-real-geng-binary")
    with pytest.raises(RuntimeError):
        nauty.geng_count(4)


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
def test_early_stop_kills_geng(tmp_path, monkeypatch):
    import cospectraltools.external.nauty as nauty

    # Stand-in geng that never finishes on its own.
    script = tmp_path / "endless-geng"
    script.write_text("#!/bin/sh\nwhile true; do echo Bw; done\n")
    script.chmod(0o755)
    monkeypatch.setattr(nauty, "NAUTY_GENG", str(script))

    started = []
    real_popen = subprocess.Popen

    def recording_popen(*args, **kwargs):
        p = real_popen(*args, **kwargs)
        started.append(p)
        return p

    monkeypatch.setattr(nauty.subprocess, "Popen", recording_popen)

    it = nauty.geng_g6(3)
    assert next(it) == "Bw"
    it.close()

    assert len(started) == 1
    assert started[0].poll() is not None
