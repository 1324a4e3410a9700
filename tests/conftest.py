"""Shared fixtures for mamba_problems_explainer tests."""

import pytest

from mamba_problems_explainer.conflicts import GroupEdgeInfo, GroupNode
from mamba_problems_explainer.problems import ConflictGraphBuilder
from mamba_problems_explainer.property_graph import PropertyGraph


@pytest.fixture
def graph() -> PropertyGraph:
    return PropertyGraph()


@pytest.fixture
def builder() -> ConflictGraphBuilder:
    return ConflictGraphBuilder()


@pytest.fixture
def chain(graph):
    """Graph A -> B -> C, returning the graph, node ids and edge infos."""
    a = graph.add_node(GroupNode("A"))
    b = graph.add_node(GroupNode("B"))
    c = graph.add_node(GroupNode("C"))
    ab = GroupEdgeInfo.of("B>=1")
    bc = GroupEdgeInfo.of("C<2")
    graph.add_edge(a, b, ab)
    graph.add_edge(b, c, bc)
    return graph, (a, b, c), (ab, bc)
