"""Spreadsheet-style label sequences: A, B, ..., Z, A1, B1, ..."""

from __future__ import annotations

from typing import Iterator, List


class LabelSequencer:
    """Deterministic label generator over the symbol range ``start..end``.

    The label is a pure function of ``counter``; :meth:`next` is the only
    mutation.  Build a fresh instance to restart from the first symbol.
    """

    def __init__(self, start: str = "A", end: str = "Z", counter: int = 0):
        if len(start) != 1 or len(end) != 1:
            raise ValueError("label range bounds must be single characters")
        if ord(end) < ord(start):
            raise ValueError(f"label range {start!r}..{end!r} is empty")
        if counter < 0:
            raise ValueError("label counter must be non-negative")
        self.start = start
        self.end = end
        self.counter = counter

    @property
    def symbol_count(self) -> int:
        return ord(self.end) - ord(self.start) + 1

    def label_at(self, counter: int) -> str:
        if counter < 0:
            raise ValueError("label counter must be non-negative")
        cycle, offset = divmod(counter, self.symbol_count)
        label = chr(ord(self.start) + offset)
        if cycle:
            label += str(cycle)
        return label

    def peek(self) -> str:
        return self.label_at(self.counter)

    def next(self) -> str:
        label = self.label_at(self.counter)
        self.counter += 1
        return label

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()


def vertex_labels(count: int, start: str = "A", end: str = "Z") -> List[str]:
    seq = LabelSequencer(start, end)
    return [seq.next() for _ in range(count)]


def side_labels(count: int, start: str = "A", end: str = "Z") -> List[str]:
    """Names of the ``count`` sides of a closed figure: ``AB, BC, ..., <last>A``."""

    if count <= 1:
        return []
    names = vertex_labels(count, start, end)
    return [names[i] + names[(i + 1) % count] for i in range(count)]


__all__ = ["LabelSequencer", "side_labels", "vertex_labels"]
