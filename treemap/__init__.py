from treemap.errors import InvalidOperation, LEAF_ONLY_MESSAGE, TreeMapError
from treemap.indexing import BinarySearchTreeMap, SortedMap

__all__ = [
    "BinarySearchTreeMap",
    "InvalidOperation",
    "LEAF_ONLY_MESSAGE",
    "SortedMap",
    "TreeMapError",
]
