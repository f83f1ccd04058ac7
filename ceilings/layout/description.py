"""Ordered key/value notes printed beside a drawing."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..errors import InvalidDescriptionError

NoteItem = Tuple[str, str]


class Description:
    """Ordered list of ``(key, value)`` notes; keys may repeat."""

    def __init__(self, items: Iterable[Sequence[str]] = ()):
        self.items: List[NoteItem] = []
        for item in items:
            if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
                raise InvalidDescriptionError(f"description item must be a (key, value) pair, got {item!r}")
            self.push_back(item[0], item[1])

    @classmethod
    def union(cls, *descriptions: "Description") -> "Description":
        out = cls()
        for description in descriptions:
            out.items.extend(description.items)
        return out

    def push_back(self, key: str, value: str) -> None:
        self.items.append((str(key), str(value)))

    def to_string_list(self) -> List[str]:
        return [f"{key}: {value}" for key, value in self.items]

    def __iter__(self) -> Iterator[NoteItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"Description({self.items!r})"


__all__ = ["Description", "NoteItem"]
