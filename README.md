# bplustree

An in-memory B+ tree that maps ordered keys to string data.

The tree is built in bulk from entries that are already sorted by key. Once
built, it supports lookups by key, traversal of every entry in key order
through the linked leaves, and insertion of new entries. Nodes split when
they fill up.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bplustree.tree import BPlusTree, DataEntry
from bplustree.errors import BuildError

entries = [DataEntry(key=i, data=f"value-{i}") for i in range(10)]
tree = BPlusTree(entries)

tree.get(3)            # DataEntry(key=3, data='value-3')
tree.get(-1)           # None

tree.insert(DataEntry(key=42, data="answer"))

[entry.key for entry in tree]   # keys in ascending order
tree.entries()                  # the same entries as a list
```

`DataEntry` is a frozen dataclass holding a `key` and a `data` string.
Entries compare and sort by key alone, so two entries with the same key are
equal whatever their data.

`BPlusTree(entries, max_data_length=0, key_size=0)` takes any iterable of
entries. The entries must already be sorted by key. `max_data_length` and
`key_size` are kept on the tree as attributes and do not change how it is
built: leaves hold at most four entries and internal nodes at most four
children.

An empty set of entries cannot be built into a tree:

```python
try:
    BPlusTree([])
except BuildError as exc:
    print(exc)   # No data received.
```

## Errors

`bplustree.errors` defines `BPlusTreeError` and its two subclasses,
`BuildError` and `InsertError`, so a single `except BPlusTreeError` catches
either. The tree raises `BuildError` when it is given no entries;
`insert` does not currently raise `InsertError`.

## Limitations

- Entries cannot be removed from a tree.
- Inserting an entry whose key is already present adds a second entry beside
  the first rather than replacing it; `get` returns one of them.
- The tree lives in memory only; nothing is written to or read from disk.