import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from mamba_problems_explainer import analysis, messaging, plot, problems, utils  # noqa: E402
from mamba_problems_explainer.conflicts import GroupNode  # noqa: E402
from mamba_problems_explainer.explainer import ProblemsExplainer  # noqa: E402


def test_error_report():
    report = messaging.error_report(ProblemsExplainer(problems.create_basic_conflict()))
    assert report == (
        "Mamba failed to solve. The reported errors are:\n"
        "   Requested packages A=0.4.0 cannot be installed because they depend on\n"
        "   \tA which can't be found in the configured channels"
    )


def test_nodes_df():
    df = analysis.nodes_df(problems.create_version_clash())
    assert list(df["name"]) == ["root", "A", "B", "X", "X"]
    assert list(df["is_root"]) == [True, False, False, False, False]
    assert list(df["is_leaf"]) == [False, False, False, True, True]
    assert df["is_conflict"].sum() == 2


def test_edges_df():
    df = analysis.edges_df(problems.create_version_clash())
    assert len(df) == 4
    assert list(df[df["to_name"] == "X"]["dependencies"]) == ["X>=2", "X<2"]


def test_paths_df():
    df = analysis.paths_df(problems.create_pubgrub())
    assert set(df["leaf_name"]) == {"icons", "intl"}
    assert len(df) == 5


def test_empty_frames(graph):
    assert analysis.nodes_df(graph).empty
    assert analysis.edges_df(graph).empty
    assert analysis.paths_df(graph).empty


def test_group_repr():
    assert plot.group_repr(GroupNode("root")) == "root"
    assert plot.group_repr(GroupNode("x", ["1.10", "1.9"])) == "x [1.9|1.10]"
    versions = ["1.0", "1.1", "1.2", "1.3", "1.4"]
    assert plot.group_repr(GroupNode("x", versions)) == "x [1.0|1.1|...|1.4]"


def test_plot_conflict_graph():
    fig, ax = plot.plot_conflict_graph(problems.create_pubgrub())
    assert fig is not None
    plt.close("all")


def test_utils():
    assert utils.unique(["b", "a", "b"]) == ["b", "a"]
    assert utils.sorted_versions(["2.0", "10.0", "1.0", "2.0"]) == ["1.0", "2.0", "10.0"]
    assert utils.repr_trunc(["a", "b"]) == "a, b"
