import pytest

from structkit.linkedlist import LinkedList, ListIterator

ITEMS = ("s1", "s2", "s3")


def build(*items, push="rpush"):
    lst = LinkedList()
    for item in items:
        getattr(lst, push)(item)
    return lst


def test_clear():
    lst = build(*ITEMS, push="lpush")
    assert len(lst) == 3
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    for peek in (lst.head, lst.tail):
        with pytest.raises(IndexError):
            peek()


@pytest.mark.parametrize(
    ("push", "heads", "tails"),
    [
        ("lpush", ITEMS, ("s1", "s1", "s1")),
        ("rpush", ("s1", "s1", "s1"), ITEMS),
    ],
)
def test_push_ends(push, heads, tails):
    lst = LinkedList()
    seen = []
    for item in ITEMS:
        getattr(lst, push)(item)
        seen.append((lst.head(), lst.tail(), len(lst)))
    assert seen == list(zip(heads, tails, (1, 2, 3)))


@pytest.mark.parametrize(
    ("pop", "fill", "peek"),
    [("lpop", "rpush", "head"), ("rpop", "lpush", "tail")],
)
def test_pop_ends(pop, fill, peek):
    lst = build(*ITEMS, push=fill)
    for remaining, item in zip((2, 1, 0), ITEMS):
        assert getattr(lst, peek)() is item
        assert getattr(lst, pop)() is item
        assert len(lst) == remaining
    with pytest.raises(IndexError):
        getattr(lst, peek)()


@pytest.mark.parametrize("pop", ["lpop", "rpop"])
def test_pop_empty_raises(pop):
    with pytest.raises(IndexError):
        getattr(LinkedList(), pop)()


def test_iter():
    lst = build(*ITEMS, push="push")
    it = lst.iterator()
    assert isinstance(it, ListIterator)
    assert [next(it) for _ in ITEMS] == list(ITEMS)
    it.seek_tail()
    assert [it.prev() for _ in ITEMS] == list(reversed(ITEMS))
    assert list(lst) == list(ITEMS)
    assert len(lst) == 3


def test_iterator_exhaustion():
    it = build("a").iterator()
    assert next(it) == "a"
    with pytest.raises(StopIteration):
        next(it)
    it.seek_head()
    assert it.prev() == "a"
    with pytest.raises(IndexError):
        it.prev()


def test_iterator_seek_head_restarts():
    it = ListIterator(build(1, 2, 3))
    assert list(it) == [1, 2, 3]
    it.seek_head()
    assert list(it) == [1, 2, 3]


def test_reversed():
    assert list(reversed(build(1, 2, 3))) == [3, 2, 1]


def test_mixed_pushes_and_pops():
    lst = build(2)
    lst.lpush(1)
    lst.rpush(3)
    assert list(lst) == [1, 2, 3]
    assert (lst.rpop(), lst.lpop()) == (3, 1)
    assert list(lst) == [2]
    assert lst.head() == lst.tail() == 2