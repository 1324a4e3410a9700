from __future__ import annotations

import dataclasses
import logging
import typing as T

import mamba_problems_explainer as mpe
from .conflicts import ConflictGraph, GroupEdgeInfo, GroupNode, RuleKind

logger = logging.getLogger(__name__)

NodeEdge = tuple[GroupNode, GroupEdgeInfo]


class NoColor:
    @staticmethod
    def available(msg: str) -> str:
        return msg

    @staticmethod
    def unavailable(msg: str) -> str:
        return msg


class ColorSet:
    @staticmethod
    def available(msg: str) -> str:
        return mpe.color.color(msg, fg="green", style="bold")

    @staticmethod
    def unavailable(msg: str) -> str:
        return mpe.color.color(msg, fg="red", style="bold")


PROBLEM_CLAUSES: dict[RuleKind, str] = {
    RuleKind.JOB_NOTHING_PROVIDES_DEP: "{} which can't be found in the configured channels",
    RuleKind.PKG_NOTHING_PROVIDES_DEP: "{} which can't be found in the configured channels",
    RuleKind.JOB_UNKNOWN_PACKAGE: "{} which can't be found in the configured channels",
    RuleKind.BEST: "{} that can not be installed",
    RuleKind.BLACK: "{} that can only be installed by a direct request",
    RuleKind.DISTUPGRADE: "{} that does not belong to a distupgrade repository",
    RuleKind.INFARCH: "{} that has an inferior architecture",
    RuleKind.UPDATE: "{} that is disabled/has incompatible arch/is not installable",
    RuleKind.PKG_NOT_INSTALLABLE: "{} that is disabled/has incompatible arch/is not installable",
    RuleKind.STRICT_REPO_PRIORITY: "{} that is excluded by strict repo priority",
}
FALLBACK_CLAUSE = "{} which is problematic"


@dataclasses.dataclass
class ProblemsExplainer:
    """Summarize the conflicts of a problem graph per conflicting package name.

    Every path from a requested package down to a leaf of the graph is collected, then grouped
    by the name of the leaf.
    Names are reported in alphabetical order, everything else in the order it is encountered.
    """

    graph: ConflictGraph
    conflicts_adj_list: T.Any = None
    color_set: type = NoColor
    delimiter: str = "\n"

    def explain(self) -> str:
        root_to_leaves = self.graph.get_parents_to_leaves()

        # Bottom line up front: the leaves reached per conflicting name, with the root edge info
        bluf_problems_packages: dict[str, list[NodeEdge]] = {}
        # Per conflicting name and dependency leading to it, the root children involved
        conflict_to_root_info: dict[str, dict[str, list[NodeEdge]]] = {}

        for root_child_id, edges in root_to_leaves.items():
            root_node = self.graph.get_node(root_child_id)
            for (_, root_edge_info), leaves in self.graph.split_root_path(root_child_id, edges):
                logger.debug("Root child %s required by %s", root_node, root_edge_info)
                self._collect(
                    root_node, root_edge_info, leaves, bluf_problems_packages, conflict_to_root_info
                )

        return "".join(
            self.explain_conflict(name, bluf_problems_packages[name], conflict_to_root_info[name])
            for name in sorted(bluf_problems_packages)
        )

    def _collect(
        self,
        root_node: GroupNode,
        root_edge_info: GroupEdgeInfo,
        leaves: list[tuple[int, GroupEdgeInfo]],
        bluf_problems_packages: dict[str, list[NodeEdge]],
        conflict_to_root_info: dict[str, dict[str, list[NodeEdge]]],
    ) -> None:
        for conflict_id, conflict_edge_info in leaves:
            conflict_node = self.graph.get_node(conflict_id)
            conflict_name = conflict_node.name()
            logger.debug("Conflict node %s reached through %s", conflict_node, conflict_edge_info)
            conflict_to_root_info.setdefault(conflict_name, {}).setdefault(
                str(conflict_edge_info), []
            ).append((root_node, root_edge_info))
            bluf_problems_packages.setdefault(conflict_name, []).append((conflict_node, root_edge_info))

    def explain_conflict(
        self,
        conflict_name: str,
        conflict_to_root_deps: list[NodeEdge],
        deps_to_root_info: dict[str, list[NodeEdge]],
    ) -> str:
        # Only the first node is needed, they all share the same name
        conflict_node = conflict_to_root_deps[0][0]
        requested = mpe.utils.unique(d for _, edge_info in conflict_to_root_deps for d in edge_info.deps)
        message = [
            "Requested packages ",
            self.explain_requested(requested),
            " cannot be installed because they depend on",
        ]
        if conflict_node.is_conflict():
            conflicts = mpe.utils.unique(
                self.explain_root_info(root_info, conflict_dep)
                for conflict_dep, root_infos in deps_to_root_info.items()
                for root_info in root_infos
            )
            message += [
                " different versions of ",
                self.color_set.unavailable(conflict_name),
                "\n",
                self.delimiter.join("\t" + c for c in conflicts),
            ]
        else:
            message += ["\n\t", self.explain_problem(conflict_node)]
        message.append("\n")
        return "".join(message)

    def explain_problem(self, node: GroupNode) -> str:
        clause = PROBLEM_CLAUSES.get(node.problem_type)
        if clause is None:
            logger.warning("Unexpected problem type %r for %s", node.problem_type, node)
            clause = FALLBACK_CLAUSE
        return clause.format(self.color_set.unavailable(node.name()))

    def explain_requested(self, requested_packages: T.Iterable[str]) -> str:
        return ",".join(requested_packages)

    def explain_root_info(self, node_to_edge: NodeEdge, conflict_dep: str) -> str:
        group_node, group_node_edge = node_to_edge
        return "{edge} versions: [{versions}] depend on {dep}".format(
            edge=group_node_edge, versions=", ".join(group_node.package_versions), dep=conflict_dep
        )
