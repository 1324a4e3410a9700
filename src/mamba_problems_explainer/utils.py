from typing import Iterable, TypeVar

import packaging.version

T = TypeVar("T")


def unique(iterable: Iterable[T]) -> list[T]:
    """Return the elements of an iterable without duplicates, in order of first appearance."""
    return list(dict.fromkeys(iterable))


def sorted_versions(versions: Iterable[str]) -> list[str]:
    def key(v: str):
        try:
            return (0, packaging.version.parse(v), v)
        except packaging.version.InvalidVersion:
            return (1, packaging.version.Version("0"), v)

    return sorted(set(versions), key=key)


def repr_trunc(seq: list[str], sep: str = ", ", etc: str = "...", threshold: int = 5, show: tuple[int, int] = (2, 1)) -> str:
    if len(seq) < threshold:
        return sep.join(seq)
    show_head, show_tail = show
    return sep.join(seq[:show_head] + [etc] + seq[-show_tail:])
