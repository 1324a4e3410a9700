import collections
from typing import TypeVar

import matplotlib.pyplot as plt
import networkx as nx

import mamba_problems_explainer as mpe

N = TypeVar("N")
E = TypeVar("E")


def plot_dag(
    graph: nx.DiGraph,
    node_labels: dict[N, str] | None = None,
    edge_labels: dict[E, str] | None = None,
    scale: float | None = None,
):
    fig, ax = plt.subplots(figsize=(10, 6), dpi=300)

    if scale is None:
        scale = min(200 / max(len(graph), 1), 10)

    # Position using levels
    pos = {}
    for level, nodes in enumerate(nx.topological_generations(graph)):
        nodes = sorted(nodes, key=lambda n: (node_labels or {}).get(n, ""))
        length = max(len(nodes) - 1, 1)
        pos.update({node: (j / length, -level - 0.2 * (j % 2)) for j, node in enumerate(nodes)})

    options = {"node_size": 100 * scale, "alpha": 0.5}
    nx.draw_networkx_nodes(graph, pos, node_color="blue", **options, ax=ax)
    nx.draw_networkx_edges(graph, pos, **options, ax=ax)

    if node_labels is not None:
        nx.draw_networkx_labels(
            graph, pos, collections.defaultdict(lambda: "unknown", node_labels), font_size=scale, ax=ax
        )
    if edge_labels is not None:
        nx.draw_networkx_edge_labels(graph, pos, edge_labels, font_size=scale, ax=ax)

    fig.tight_layout()
    ax.set_axis_off()
    return fig, ax


def group_repr(node: "mpe.conflicts.GroupNode") -> str:
    versions = mpe.utils.sorted_versions(node.package_versions)
    if len(versions) == 0:
        return node.name()
    if len(versions) == 1:
        return f"{node.name()} {versions[0]}"
    return f"{node.name()} [{mpe.utils.repr_trunc(versions, sep='|')}]"


def plot_conflict_graph(graph: "mpe.conflicts.ConflictGraph", *args, **kwargs):
    multi = graph.to_networkx()
    node_labels = {n: group_repr(data) for n, data in multi.nodes(data="data")}
    # Parallel edges are drawn once, with their dependencies joined
    deps = collections.defaultdict(list)
    for a, b, data in multi.edges(data="data"):
        deps[a, b] += data.deps
    edge_labels = {e: ", ".join(mpe.utils.unique(d)) for e, d in deps.items()}
    g = nx.DiGraph(multi)
    return plot_dag(g, node_labels=node_labels, edge_labels=edge_labels, *args, **kwargs)
