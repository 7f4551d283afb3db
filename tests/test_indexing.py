import random

import pytest

from treemap import BinarySearchTreeMap, InvalidOperation, LEAF_ONLY_MESSAGE

SCENARIO = [
    (4, "four"), (5, "five"), (3, "three"), (1, "one"),
    (6, "six"), (0, "zero"), (7, "seven"), (2, "two"),
]


@pytest.fixture
def tree():
    t = BinarySearchTreeMap()
    for k, v in SCENARIO:
        t.put(k, v)
    return t


def test_new_map_is_empty():
    t = BinarySearchTreeMap()
    assert t.size() == 0
    assert len(t) == 0
    assert t.is_empty()
    assert t.to_string() == "[ ]"


def test_put_new_key_returns_none_and_grows():
    t = BinarySearchTreeMap()
    assert t.put(1, "one") is None
    assert t.size() == 1
    assert not t.is_empty()


def test_put_existing_key_overwrites_and_returns_previous():
    t = BinarySearchTreeMap()
    t.put("k", "v1")
    assert t.put("k", "v2") == "v1"
    assert t.size() == 1
    assert t.get("k") == "v2"
    assert t.to_string() == "[ (k, v2) ]"


def test_get_missing_key_returns_none(tree):
    assert tree.get(5) == "five"
    assert tree.get(8) is None
    assert tree.get(-1) is None


def test_get_on_empty_map():
    assert BinarySearchTreeMap().get(0) is None


def test_remove_leaf(tree):
    assert tree.remove(2) == "two"
    assert tree.size() == 7
    assert tree.get(2) is None


def test_remove_absent_key_leaves_map_unchanged(tree):
    before = tree.to_string()
    assert tree.remove(8) is None
    assert tree.size() == 8
    assert tree.to_string() == before


def test_remove_on_empty_map():
    t = BinarySearchTreeMap()
    assert t.remove(1) is None
    assert t.size() == 0


@pytest.mark.parametrize("key", [4, 3, 1, 5, 6])
def test_remove_internal_node_raises_and_keeps_state(tree, key):
    before = tree.to_string()
    with pytest.raises(InvalidOperation) as excinfo:
        tree.remove(key)
    assert str(excinfo.value) == LEAF_ONLY_MESSAGE
    assert tree.size() == 8
    assert tree.to_string() == before


def test_invalid_operation_is_a_value_error(tree):
    with pytest.raises(ValueError):
        tree.remove(4)


def test_remove_only_root_empties_map():
    t = BinarySearchTreeMap()
    t.put(10, "ten")
    assert t.remove(10) == "ten"
    assert t.is_empty()
    assert t.to_string() == "[ ]"
    t.put(3, "three")
    assert t.to_string() == "[ (3, three) ]"


def test_leaves_can_be_removed_bottom_up():
    t = BinarySearchTreeMap()
    for k in (2, 1, 3):
        t.put(k, str(k))
    assert t.remove(1) == "1"
    assert t.remove(3) == "3"
    assert t.remove(2) == "2"
    assert t.is_empty()


def test_reference_scenario(tree):
    assert tree.size() == 8
    assert tree.remove(2) == "two"
    assert tree.size() == 7
    assert tree.remove(8) is None
    assert tree.size() == 7
    with pytest.raises(InvalidOperation):
        tree.remove(4)
    assert tree.size() == 7
    assert tree.get(5) == "five"
    assert tree.get(8) is None
    assert str(tree) == "[ (0, zero) (1, one) (3, three) (4, four) (5, five) (6, six) (7, seven) ]"


def test_rendering_is_in_ascending_key_order():
    rng = random.Random(1234)
    keys = rng.sample(range(1000), 200)
    t = BinarySearchTreeMap()
    for k in keys:
        t.put(k, k * 2)
    expected = "[ " + "".join(f"({k}, {k * 2}) " for k in sorted(keys)) + "]"
    assert t.to_string() == expected
    assert t.size() == len(keys)


def test_size_tracks_distinct_keys():
    rng = random.Random(99)
    t = BinarySearchTreeMap()
    seen = {}
    for _ in range(1000):
        k = rng.randrange(50)
        if rng.random() < 0.6:
            v = rng.randrange(1000)
            assert t.put(k, v) == seen.get(k)
            seen[k] = v
        else:
            try:
                removed = t.remove(k)
            except InvalidOperation:
                assert k in seen
            else:
                assert removed == seen.pop(k, None)
        assert t.size() == len(seen)
        expected = "[ " + "".join(f"({key}, {seen[key]}) " for key in sorted(seen)) + "]"
        assert t.to_string() == expected
    for k, v in seen.items():
        assert t.get(k) == v


def test_degenerate_tree_does_not_recurse():
    # sorted input makes a right-leaning chain deeper than the recursion limit
    n = 2000
    t = BinarySearchTreeMap()
    for k in range(n):
        t.put(k, "x")
    assert t.size() == n
    assert t.get(n - 1) == "x"
    assert t.to_string().count("(") == n
    assert t.remove(n - 1) == "x"
    with pytest.raises(InvalidOperation):
        t.remove(0)
    assert t.size() == n - 1
