from __future__ import annotations

import dataclasses
import typing as T

from .conflicts import ConflictGraph, GroupEdgeInfo, GroupNode, RuleKind
from .property_graph import NodeId, PropertyGraph


@dataclasses.dataclass
class ConflictGraphBuilder:
    """Incrementally build a conflict graph the way the solver integration does.

    Groups registered twice under the same name and key are merged.
    Dependencies repeated between the same groups are merged into a single edge.
    """

    graph: ConflictGraph = dataclasses.field(default_factory=PropertyGraph)
    group_ids: dict[tuple[str, str | None], NodeId] = dataclasses.field(default_factory=dict)

    def add_root(self, name: str = "root") -> NodeId:
        return self.graph.add_node(GroupNode(name))

    def add_group(
        self,
        name: str,
        versions: T.Sequence[str] = (),
        key: str | None = None,
        conflict: bool = False,
        problem_type: RuleKind | None = None,
    ) -> NodeId:
        node = GroupNode(name, list(versions), conflict=conflict, problem_type=problem_type)
        if (grp_id := self.group_ids.get((name, key))) is not None:
            self.graph.update_node(grp_id, node)
            return grp_id
        grp_id = self.graph.add_node(node)
        self.group_ids[(name, key)] = grp_id
        return grp_id

    def add_dependency(self, from_id: NodeId, to_id: NodeId, *deps: str) -> None:
        info = GroupEdgeInfo.of(*deps)
        if not self.graph.update_edge_if_present(from_id, to_id, info):
            self.graph.add_edge(from_id, to_id, info)


def create_basic_conflict() -> ConflictGraph:
    """Request a version of A that does not exist."""
    builder = ConflictGraphBuilder()
    root = builder.add_root()
    a = builder.add_group("A", problem_type=RuleKind.JOB_NOTHING_PROVIDES_DEP)
    builder.add_dependency(root, a, "A=0.4.0")
    return builder.graph


def create_version_clash() -> ConflictGraph:
    """Request A and B, which need incompatible versions of X."""
    builder = ConflictGraphBuilder()
    root = builder.add_root()
    a = builder.add_group("A", ["1.0"])
    b = builder.add_group("B", ["1.0"])
    x2 = builder.add_group("X", ["2.0"], key="2", conflict=True)
    x1 = builder.add_group("X", ["1.0"], key="1", conflict=True)
    builder.add_dependency(root, a, "A")
    builder.add_dependency(root, b, "B")
    builder.add_dependency(a, x2, "X>=2")
    builder.add_dependency(b, x1, "X<2")
    return builder.graph


def create_pubgrub() -> ConflictGraph:
    """Request menu, icons=1.* and intl=5.* from the menu/dropdown/icons/intl index."""
    builder = ConflictGraphBuilder()
    root = builder.add_root()
    menu_new = builder.add_group("menu", ["1.1.0", "1.2.0", "1.3.0", "1.4.0", "1.5.0"], key="new")
    menu_old = builder.add_group("menu", ["1.0.0"], key="old")
    dropdown_new = builder.add_group("dropdown", ["2.0.0", "2.1.0", "2.2.0", "2.3.0"], key="new")
    dropdown_old = builder.add_group("dropdown", ["1.8.0"], key="old")
    icons_new = builder.add_group("icons", ["2.0.0"], key="new", conflict=True)
    icons_old = builder.add_group("icons", ["1.0.0"], key="old", conflict=True)
    intl_old = builder.add_group("intl", ["3.0.0"], key="old", conflict=True)
    intl_new = builder.add_group("intl", ["5.0.0"], key="new", conflict=True)

    builder.add_dependency(root, menu_new, "menu")
    builder.add_dependency(root, menu_old, "menu")
    builder.add_dependency(root, icons_old, "icons=1.*")
    builder.add_dependency(root, intl_new, "intl=5.*")
    builder.add_dependency(menu_new, dropdown_new, "dropdown=2.*")
    builder.add_dependency(menu_old, dropdown_old, "dropdown=1.*")
    builder.add_dependency(dropdown_new, icons_new, "icons=2.*")
    builder.add_dependency(dropdown_old, icons_old, "icons=1.*")
    builder.add_dependency(dropdown_old, intl_old, "intl=3.*")
    return builder.graph
