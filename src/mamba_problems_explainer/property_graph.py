from __future__ import annotations

import dataclasses
import logging
import typing as T

import networkx as nx

logger = logging.getLogger(__name__)

NodeId = T.NewType("NodeId", int)


class Mergeable(T.Protocol):
    """Payload that can absorb another payload of the same type."""

    def add(self, other: T.Any) -> None:
        ...


N = T.TypeVar("N", bound=Mergeable)
E = T.TypeVar("E", bound=Mergeable)

Edge = tuple[NodeId, E]
EdgeList = list[tuple[NodeId, E]]
NodePath = dict[NodeId, list[tuple[NodeId, E]]]


class PropertyGraphError(Exception):
    pass


class NodeNotFoundError(PropertyGraphError, KeyError):
    def __init__(self, node_id: int, size: int) -> None:
        super().__init__(node_id)
        self.node_id = node_id
        self.size = size

    def __str__(self) -> str:
        return f"Node {self.node_id} is not in the graph (valid ids are [0, {self.size}))"


class CycleError(PropertyGraphError, RuntimeError):
    def __init__(self, node_id: int) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Cycle detected through node {self.node_id}"


@dataclasses.dataclass
class PropertyGraph(T.Generic[N, E]):
    """Directed graph with dense integer node ids and mergeable node and edge payloads.

    Nodes and edges are only ever added or merged.
    ``levels[i]`` counts the ``add_edge`` calls targeting ``i``, a node is a root when it is zero.
    Parallel edges are kept as separate entries, merging only happens in ``update_edge_if_present``.
    Traversals assume the graph is acyclic and raise ``CycleError`` otherwise.
    """

    node_list: list[N] = dataclasses.field(default_factory=list)
    adjacency_list: list[EdgeList] = dataclasses.field(default_factory=list)
    # Dicts used as insertion ordered sets
    rev_adjacency_list: list[dict[NodeId, None]] = dataclasses.field(default_factory=list)
    levels: list[int] = dataclasses.field(default_factory=list)

    def __len__(self) -> int:
        return len(self.node_list)

    def number_of_nodes(self) -> int:
        return len(self.node_list)

    def has_node(self, node_id: int) -> bool:
        return 0 <= node_id < len(self.node_list)

    def _check(self, node_id: int) -> None:
        if not self.has_node(node_id):
            raise NodeNotFoundError(node_id, len(self.node_list))

    def get_node_list(self) -> list[N]:
        return self.node_list

    def get_adj_list(self) -> list[EdgeList]:
        return self.adjacency_list

    def get_node(self, node_id: NodeId) -> N:
        self._check(node_id)
        return self.node_list[node_id]

    def get_edge_list(self, node_id: NodeId) -> EdgeList:
        self._check(node_id)
        return self.adjacency_list[node_id]

    def get_rev_edge_list(self, node_id: NodeId) -> list[NodeId]:
        self._check(node_id)
        if node_id >= len(self.rev_adjacency_list):
            return []
        return list(self.rev_adjacency_list[node_id])

    def add_node(self, value: N) -> NodeId:
        self.node_list.append(value)
        self.adjacency_list.append([])
        self.levels.append(0)
        return NodeId(len(self.node_list) - 1)

    def add_edge(self, from_id: NodeId, to_id: NodeId, info: E) -> None:
        self._check(from_id)
        self._check(to_id)
        self.adjacency_list[from_id].append((to_id, info))
        if len(self.rev_adjacency_list) <= to_id:
            self.rev_adjacency_list.extend({} for _ in range(to_id + 1 - len(self.rev_adjacency_list)))
        self.rev_adjacency_list[to_id][from_id] = None
        self.levels[to_id] += 1

    def update_node(self, node_id: NodeId, value: N) -> None:
        self.get_node(node_id).add(value)

    def update_edge_if_present(self, from_id: NodeId, to_id: NodeId, value: E) -> bool:
        for target, info in self.get_edge_list(from_id):
            if target == to_id:
                info.add(value)
                return True
        return False

    def get_roots(self) -> list[NodeId]:
        return [NodeId(i) for i, level in enumerate(self.levels) if level == 0]

    def get_leaves(self, edge: Edge) -> EdgeList:
        """Return every edge ending on a leaf below ``edge``, in depth first order.

        If ``edge`` itself points to a leaf, it is the only element.
        Leaves reachable through several paths are repeated once per path.
        """
        node_id, _ = edge
        if len(self.get_edge_list(node_id)) == 0:
            return [edge]

        leaves: EdgeList = []
        on_path = {node_id}
        to_visit = [(node_id, iter(self.adjacency_list[node_id]))]
        while len(to_visit) > 0:
            current, edges = to_visit[-1]
            child = next(edges, None)
            if child is None:
                to_visit.pop()
                on_path.discard(current)
                continue
            child_id = child[0]
            if child_id in on_path:
                raise CycleError(child_id)
            if len(self.adjacency_list[child_id]) == 0:
                leaves.append(child)
            else:
                on_path.add(child_id)
                to_visit.append((child_id, iter(self.adjacency_list[child_id])))
        return leaves

    def _paths_from_edges(self, edges: T.Iterable[Edge]) -> NodePath:
        paths: NodePath = {}
        for edge in edges:
            path = paths.setdefault(edge[0], [])
            path.append(edge)
            path.extend(self.get_leaves(edge))
        return paths

    def get_paths_from(self, node_id: NodeId) -> NodePath:
        return self._paths_from_edges(self.get_edge_list(node_id))

    def get_parents_to_leaves(self) -> NodePath:
        """Map every child of a root to the root edge followed by the edges to its leaves."""
        roots = self.get_roots()
        logger.debug("Collecting leaves below roots %s", roots)
        return self._paths_from_edges(edge for r in roots for edge in self.adjacency_list[r])

    def split_root_path(self, node_id: NodeId, path: EdgeList) -> T.Iterator[tuple[Edge, EdgeList]]:
        """Split a root-to-leaf record into each root edge and the leaf edges that follow it.

        A record gathers one such segment per root depending on ``node_id``.
        """
        is_leaf = len(self.get_edge_list(node_id)) == 0
        i = 0
        while i < len(path):
            root_edge = path[i]
            i += 1
            # A leaf child is its own and only leaf
            if is_leaf:
                yield root_edge, path[i : i + 1]
                i += 1
                continue
            start = i
            while i < len(path) and path[i][0] != node_id:
                i += 1
            yield root_edge, path[start:i]

    def to_networkx(self) -> nx.MultiDiGraph:
        graph = nx.MultiDiGraph()
        graph.add_nodes_from((i, {"data": n}) for i, n in enumerate(self.node_list))
        for from_id, edges in enumerate(self.adjacency_list):
            for to_id, info in edges:
                graph.add_edge(from_id, to_id, data=info)
        return graph
