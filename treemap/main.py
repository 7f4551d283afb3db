import sys

from treemap.errors import InvalidOperation, LEAF_ONLY_MESSAGE
from treemap.indexing import BinarySearchTreeMap

SCENARIO = [
    (4, "four"),
    (5, "five"),
    (3, "three"),
    (1, "one"),
    (6, "six"),
    (0, "zero"),
    (7, "seven"),
    (2, "two"),
]

EXPECTED_RENDERING = "[ (0, zero) (1, one) (3, three) (4, four) (5, five) (6, six) (7, seven) ]"


class SmokeTestFailure(AssertionError):
    """Raised when the tree map does not behave as the scenario expects."""


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise SmokeTestFailure(message)


def run_smoke_test() -> str:
    """Replay the reference put/remove/get scenario and return the rendering."""
    tree = BinarySearchTreeMap()
    _check(tree.size() == 0, "new map is not empty")

    for key, value in SCENARIO:
        tree.put(key, value)
    _check(tree.size() == 8, f"expected 8 entries after inserts, got {tree.size()}")

    _check(tree.remove(2) == "two", "remove(2) did not return 'two'")
    _check(tree.size() == 7, "size did not drop after removing a leaf")

    _check(tree.remove(8) is None, "remove(8) found a key that was never inserted")
    _check(tree.size() == 7, "size changed after removing an absent key")

    try:
        tree.remove(4)
    except InvalidOperation as e:
        _check(str(e) == LEAF_ONLY_MESSAGE, f"unexpected error message: {e}")
    else:
        raise SmokeTestFailure("remove(4) succeeded on a node with children")
    _check(tree.size() == 7, "size changed after a rejected removal")

    _check(tree.get(5) == "five", "get(5) did not return 'five'")
    _check(tree.get(8) is None, "get(8) found a key that was never inserted")

    rendered = tree.to_string()
    _check(rendered == EXPECTED_RENDERING, f"unexpected rendering: {rendered}")
    print(rendered)
    return rendered


def main() -> int:
    try:
        run_smoke_test()
    except SmokeTestFailure as e:
        print(f"[smoke_test] FAILED: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
