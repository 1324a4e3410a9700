from __future__ import annotations

import dataclasses
import enum
import typing as T

from .property_graph import PropertyGraph


class RuleKind(enum.IntEnum):
    """Kinds of solver rules, numbered as libsolv ``SolverRuleinfo``."""

    UNKNOWN = 0x000
    PKG = 0x100
    PKG_NOT_INSTALLABLE = 0x101
    PKG_NOTHING_PROVIDES_DEP = 0x102
    PKG_REQUIRES = 0x103
    PKG_SELF_CONFLICT = 0x104
    PKG_CONFLICTS = 0x105
    PKG_SAME_NAME = 0x106
    PKG_OBSOLETES = 0x107
    PKG_IMPLICIT_OBSOLETES = 0x108
    PKG_INSTALLED_OBSOLETES = 0x109
    PKG_RECOMMENDS = 0x10A
    PKG_CONSTRAINS = 0x10B
    UPDATE = 0x200
    FEATURE = 0x300
    JOB = 0x400
    JOB_NOTHING_PROVIDES_DEP = 0x401
    JOB_PROVIDED_BY_SYSTEM = 0x402
    JOB_UNKNOWN_PACKAGE = 0x403
    JOB_UNSUPPORTED = 0x404
    DISTUPGRADE = 0x500
    INFARCH = 0x600
    CHOICE = 0x700
    LEARNT = 0x800
    BEST = 0x900
    YUMOBS = 0xA00
    RECOMMENDS = 0xB00
    BLACK = 0xC00
    STRICT_REPO_PRIORITY = 0xD00


def _union(into: list[str], items: T.Iterable[str]) -> None:
    for i in items:
        if i not in into:
            into.append(i)


@dataclasses.dataclass
class GroupNode:
    """All the versions of a package name that take part in a problem.

    The group is a conflict when it gathers incompatible versions.
    ``problem_type`` is only set on groups that are themselves the cause of the failure.
    """

    package_name: str
    package_versions: list[str] = dataclasses.field(default_factory=list)
    conflict: bool = False
    problem_type: RuleKind | None = None

    def __post_init__(self) -> None:
        versions, self.package_versions = self.package_versions, []
        _union(self.package_versions, versions)

    def name(self) -> str:
        return self.package_name

    def is_conflict(self) -> bool:
        return self.conflict

    def add(self, other: GroupNode) -> None:
        _union(self.package_versions, other.package_versions)
        self.conflict |= other.conflict
        if self.problem_type is None:
            self.problem_type = other.problem_type

    def __str__(self) -> str:
        return f"{self.package_name} [{', '.join(self.package_versions)}]"


@dataclasses.dataclass
class GroupEdgeInfo:
    """Dependency specs responsible for an edge."""

    deps: list[str] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        deps, self.deps = self.deps, []
        _union(self.deps, deps)

    @classmethod
    def of(cls, *deps: str) -> GroupEdgeInfo:
        return cls(list(deps))

    def add(self, other: GroupEdgeInfo) -> None:
        _union(self.deps, other.deps)

    def __str__(self) -> str:
        return ", ".join(self.deps)


ConflictGraph = PropertyGraph[GroupNode, GroupEdgeInfo]
