# pylint:disable=redefined-outer-name

from random import Random
from pytest import fixture, mark, raises
from treebench.bst import BST, Node
from treebench.errors import InvariantViolation
from treebench.record import Record


@fixture
def tree() -> BST[int]:
    """index test subject"""

    return BST[int]()


def test_empty(tree: BST[int]):
    assert tree.is_empty()
    assert tree.height() == -1
    assert tree.search(1) is None
    assert not tree.contains(1)
    assert tree.in_order() == []


def test_basic(tree: BST[int]):
    for key in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(key)

    assert tree.search(4) == 4
    assert tree.contains(4)
    assert not tree.contains(6)
    assert tree.search(6) is None
    assert tree.height() == 2
    assert len(tree) == 7
    assert tree.root and tree.root.key == 5
    tree.validate()


def test_none_is_noop(tree: BST[int]):
    tree.insert(None)

    assert tree.is_empty()
    assert tree.search(None) is None
    assert not tree.contains(None)


def test_duplicate_overwrites():
    tree = BST[Record](comparator=lambda a, b: (a.title > b.title) - (a.title < b.title))
    tree.insert(Record("Alien", 1.0))
    tree.insert(Record("Alien", 9.0))

    assert tree.size() == 1
    assert tree.search(Record("Alien")) == Record("Alien", 9.0)


def test_sorted_input_degenerates(tree: BST[int]):
    count = 5000

    for key in range(count):
        tree.insert(key)

    assert tree.height() == count - 1
    assert tree.contains(count - 1)
    assert tree.in_order() == list(range(count))
    tree.validate()


@mark.parametrize("seed", [0, 1, 2, 3])
def test_random_membership(seed: int):
    rng = Random(seed)
    keys = rng.sample(range(10000), 500)
    missing = set(range(10000)) - set(keys)
    tree = BST[int]()

    for key in keys:
        tree.insert(key)
        assert tree.contains(key)
        tree.validate()
    assert tree.size() == len(keys)
    assert all(tree.contains(key) for key in keys)
    assert not any(tree.contains(key) for key in rng.sample(sorted(missing), 200))


def test_search_does_not_mutate(tree: BST[int]):
    for key in [4, 2, 6]:
        tree.insert(key)

    before = (tree.in_order(), tree.height(), tree.size())
    first = [tree.search(k) for k in range(8)]
    second = [tree.search(k) for k in range(8)]

    assert first == second
    assert (tree.in_order(), tree.height(), tree.size()) == before


def test_validate_detects_broken_order(tree: BST[int]):
    tree.insert(2)
    assert tree.root
    tree.root.left = Node(key=3)
    tree._size += 1  # pylint:disable=protected-access

    with raises(InvariantViolation):
        tree.validate()


def test_nan_rated_records_are_duplicates():
    tree = BST[Record]()
    tree.insert(Record("Alien", float("nan")))
    tree.insert(Record("Alien", float("nan")))

    assert tree.size() == 1
    assert tree.contains(Record("Alien", float("nan")))
    tree.validate()
