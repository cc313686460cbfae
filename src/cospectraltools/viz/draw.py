from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from cospectraltools.graph import SimpleGraph
from cospectraltools.spectral import cospectral_profile


def draw_ncvs(
    G: SimpleGraph,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    title: str | None = None,
    save_path: str | None = None,
):
    """
    Draw G with vertices coloured by Aut(G)-orbit and each cospectral but
    not similar pair joined by a dashed red line.

    If save_path is set, saves a PNG there; otherwise shows the figure.
    Returns the CospectralProfile that was drawn.
    """
    profile = cospectral_profile(G)
    H = G.to_nx()

    if nx.check_planarity(H)[0]:
        pos = nx.planar_layout(H)
    else:
        pos = nx.spring_layout(H, seed=seed, iterations=300)

    orbit_of = {}
    for k, orb in enumerate(profile.orbits):
        for u in orb:
            orbit_of[u] = k
    node_color = [orbit_of[u] for u in H.nodes()]

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(title or f"|V|={G.n}  |E|={G.num_edges()}  NCVS pairs={len(profile.ncvs)}")

    nx.draw_networkx(
        H,
        pos=pos,
        ax=ax,
        with_labels=True,
        node_size=node_size,
        width=edge_width,
        node_color=node_color,
        cmap=plt.cm.tab10,
    )
    if profile.ncvs:
        nx.draw_networkx_edges(
            nx.Graph(list(profile.ncvs)),
            pos=pos,
            ax=ax,
            style="dashed",
            edge_color="red",
            width=edge_width,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return profile
