import pytest

from structkit.hashmap import MAP_CAP_INIT, HashMap
from structkit.strings import rand_string


def test_set_and_get():
    m = HashMap()
    m["key"] = "val"
    assert len(m) == 1
    assert m["key"] == "val"


def test_set_many_random_keys():
    m = HashMap()
    m["key"] = "val"
    expected = {"key": "val"}
    for _ in range(10000):
        key = rand_string(10)
        val = rand_string(20)
        m[key] = val
        expected[key] = val
        assert m[key] == val
    assert len(m) == len(expected)
    assert dict(m.items()) == expected


def test_overwrite_keeps_length():
    m = HashMap()
    m["key"] = "val"
    m["key"] = "val_"
    assert len(m) == 1
    assert m["key"] == "val_"


def test_get_missing():
    m = HashMap()
    m["key"] = "val"
    assert m.get("key") == "val"
    assert m.get("not exist") is None
    assert m.get("not exist", 7) == 7
    with pytest.raises(KeyError):
        m["not exist"]


def test_get_on_empty_map():
    m = HashMap()
    assert m.get("anything", "dflt") == "dflt"
    assert "anything" not in m


def test_pop():
    m = HashMap()
    m["key"] = "val"
    assert m.pop("key") == "val"
    assert len(m) == 0
    assert m.pop("not-exist", None) is None
    with pytest.raises(KeyError):
        m.pop("not-exist")


def test_has():
    m = HashMap()
    m["key"] = "val"
    assert "not exist" not in m
    assert "key" in m


def test_clear():
    m = HashMap()
    for i in range(1, 6):
        m[f"key{i}"] = f"val{i}"
    assert len(m) == 5
    m.clear()
    assert len(m) == 0
    assert m.cap() == 0
    assert "key1" not in m


def test_iter_yields_every_key_once():
    m = HashMap()
    keys = [f"key{i}" for i in range(1, 7)]
    for k in keys:
        m[k] = "val" + k[-1]
    it = iter(m)
    seen = [next(it) for _ in range(6)]
    with pytest.raises(StopIteration):
        next(it)
    assert sorted(seen) == keys
    assert all(len(v) == 4 for _, v in m.items())


def test_capacity_growth():
    m = HashMap()
    assert m.cap() == 0
    m["k0"] = 0
    assert m.cap() == MAP_CAP_INIT
    for i in range(1, 12):
        m[f"k{i}"] = i
    assert len(m) == 12
    assert m.cap() == 16
    m["k12"] = 12
    assert m.cap() == 32
    assert all(m[f"k{i}"] == i for i in range(13))


def test_pop_keeps_other_keys_reachable():
    m = HashMap()
    for i in range(500):
        m[f"item-{i}"] = i
    for i in range(0, 500, 2):
        assert m.pop(f"item-{i}") == i
    assert len(m) == 250
    for i in range(500):
        if i % 2:
            assert m[f"item-{i}"] == i
        else:
            assert f"item-{i}" not in m


def test_str_and_bytes_share_keys():
    m = HashMap()
    m["abc"] = 1
    assert m[b"abc"] == 1
    m["\u00e9t\u00e9"] = 2
    assert m["\u00e9t\u00e9".encode("utf-8")] == 2


def test_non_string_key_rejected():
    m = HashMap()
    with pytest.raises(TypeError):
        m[3] = "x"
    assert 3 not in m