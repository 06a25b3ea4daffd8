"""An in-memory B+ tree keyed store: the tree in ``tree``, its exceptions in ``errors``."""

__version__ = "0.1.0"
__all__ = ["errors", "tree"]