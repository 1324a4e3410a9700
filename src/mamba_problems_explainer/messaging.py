import mamba_problems_explainer as mpe


def error_report(explainer: "mpe.explainer.ProblemsExplainer") -> str:
    message = ["Mamba failed to solve. The reported errors are:"]
    message += ["   " + l for l in explainer.explain().rstrip("\n").split("\n")]
    return "\n".join(message)
