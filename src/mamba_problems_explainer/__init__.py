import importlib

__all__ = ["analysis", "color", "conflicts", "explainer", "messaging", "plot", "problems", "property_graph", "utils"]


def __getattr__(name: str):
    if name in __all__:
        return importlib.import_module("." + name, __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
