import pandas as pd

from .conflicts import ConflictGraph


def nodes_df(graph: ConflictGraph) -> pd.DataFrame:
    nodes = []
    for node_id, node in enumerate(graph.get_node_list()):
        nodes.append(
            {
                "id": node_id,
                "name": node.name(),
                "versions": list(node.package_versions),
                "is_conflict": node.is_conflict(),
                "problem_type": node.problem_type.name if node.problem_type is not None else None,
                "level": graph.levels[node_id],
                "is_root": graph.levels[node_id] == 0,
                "is_leaf": len(graph.get_edge_list(node_id)) == 0,
            }
        )
    return pd.DataFrame(nodes, columns=["id", "name", "versions", "is_conflict", "problem_type", "level", "is_root", "is_leaf"])


def edges_df(graph: ConflictGraph) -> pd.DataFrame:
    edges = []
    for from_id, edge_list in enumerate(graph.get_adj_list()):
        for to_id, info in edge_list:
            edges.append(
                {
                    "from_id": from_id,
                    "to_id": to_id,
                    "from_name": graph.get_node(from_id).name(),
                    "to_name": graph.get_node(to_id).name(),
                    "dependencies": str(info),
                }
            )
    return pd.DataFrame(edges, columns=["from_id", "to_id", "from_name", "to_name", "dependencies"])


def paths_df(graph: ConflictGraph) -> pd.DataFrame:
    """One row per leaf edge of every root-to-leaf record, along with its root edge."""
    paths = []
    for root_child_id, edges in graph.get_parents_to_leaves().items():
        for (_, root_info), leaves in graph.split_root_path(root_child_id, edges):
            for leaf_id, leaf_info in leaves:
                paths.append(
                    {
                        "root_child_id": root_child_id,
                        "root_child_name": graph.get_node(root_child_id).name(),
                        "root_dependencies": str(root_info),
                        "leaf_id": leaf_id,
                        "leaf_name": graph.get_node(leaf_id).name(),
                        "leaf_dependencies": str(leaf_info),
                    }
                )
    return pd.DataFrame(
        paths,
        columns=["root_child_id", "root_child_name", "root_dependencies", "leaf_id", "leaf_name", "leaf_dependencies"],
    )
