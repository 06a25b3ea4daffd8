"""An in-memory B+ tree keyed by ordered keys, holding serialized string data."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, TypeVar, Union

from bplustree.errors import BuildError

K = TypeVar("K")

_LEAF_MAX_ENTRIES = 4
_MAX_CHILDREN = 4


@dataclass(frozen=True, order=True)
class DataEntry(Generic[K]):
    """A key with its data; entries compare and order by key alone."""

    key: Any
    data: str = field(compare=False)


@dataclass
class _Leaf:
    entries: list[DataEntry]
    next: _Leaf | None = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def max_key(self) -> Any:
        if not self.entries:
            raise ValueError("leaf node is empty")
        return self.entries[-1].key

    def split(self) -> _Leaf:
        mid = len(self.entries) // 2
        right = _Leaf(self.entries[mid:], self.next)
        del self.entries[mid:]
        self.next = right
        return right


@dataclass
class _Internal:
    # keys[i] is the largest key under children[i]
    keys: list[Any]
    children: list[_Node]

    def __len__(self) -> int:
        return len(self.children)

    @property
    def max_key(self) -> Any:
        if not self.keys:
            raise ValueError("internal node is empty")
        return self.keys[-1]

    def split(self) -> _Internal:
        mid = len(self.keys) // 2
        right = _Internal(self.keys[mid:], self.children[mid:])
        del self.keys[mid:]
        del self.children[mid:]
        return right


_Node = Union[_Leaf, _Internal]


def _chunks(items: list, size: int) -> Iterator[list]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


class BPlusTree(Generic[K]):
    """A B+ tree built from entries that are already sorted by key."""

    def __init__(
        self,
        entries: Iterable[DataEntry],
        max_data_length: int = 0,
        key_size: int = 0,
    ) -> None:
        data = list(entries)
        if not data:
            raise BuildError()
        self.max_data_length = max_data_length
        self.key_size = key_size
        self.leaf_max_entries = _LEAF_MAX_ENTRIES
        self.max_children = _MAX_CHILDREN

        leaves = [_Leaf(chunk) for chunk in _chunks(data, self.leaf_max_entries)]
        for left, right in zip(leaves, leaves[1:]):
            left.next = right

        level: list[_Node] = self._build_level(leaves)
        while len(level) != 1:
            level = self._build_level(level)
        self._root: _Node = level[0]

    def _build_level(self, nodes: list) -> list[_Node]:
        return [
            _Internal([node.max_key for node in chunk], list(chunk))
            for chunk in _chunks(nodes, self.max_children)
        ]

    def _first_leaf(self) -> _Leaf:
        node = self._root
        while isinstance(node, _Internal):
            node = node.children[0]
        return node

    def __iter__(self) -> Iterator[DataEntry]:
        leaf: _Leaf | None = self._first_leaf()
        while leaf is not None:
            yield from leaf.entries
            leaf = leaf.next

    def entries(self) -> list[DataEntry]:
        """Return every entry in key order."""
        return list(self)

    def get(self, key: Any) -> DataEntry | None:
        """Return the entry stored under ``key``, or None."""
        node = self._root
        while isinstance(node, _Internal):
            index = bisect_left(node.keys, key)
            if index == len(node.keys):
                return None
            node = node.children[index]
        return next((entry for entry in node.entries if entry.key == key), None)

    def insert(self, entry: DataEntry) -> None:
        """Insert ``entry``, splitting nodes that overflow."""
        sibling = self._insert(self._root, entry)
        if sibling is not None:
            old_root = self._root
            self._root = _Internal(
                [old_root.max_key, sibling.max_key], [old_root, sibling]
            )

    def _insert(self, node: _Node, entry: DataEntry) -> _Node | None:
        if isinstance(node, _Leaf):
            keys = [e.key for e in node.entries]
            node.entries.insert(bisect_left(keys, entry.key), entry)
            if len(node.entries) > self.leaf_max_entries:
                return node.split()
            return None

        pos = min(bisect_left(node.keys, entry.key), len(node.keys) - 1)
        child = node.children[pos]
        sibling = self._insert(child, entry)
        if sibling is None:
            return None

        node.keys[pos] = child.max_key
        node.keys.insert(pos + 1, sibling.max_key)
        node.children.insert(pos + 1, sibling)
        if len(node.keys) > self.max_children:
            return node.split()
        return None