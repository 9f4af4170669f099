import random

import pytest

from campusnet.hashtable import IntHashTable


def test_sample_session_from_source():
    rng = random.Random(1234)
    table = IntHashTable(101)
    table.add(909)
    table.add(808)
    table.add(1)
    added = {909, 808, 1}
    for _ in range(99):
        value = rng.randrange(1001)
        table.add(value)
        added.add(value)
    assert sorted(table) == sorted(added)
    assert len(table) == len(added)

    table.remove(1)
    added.discard(1)
    assert 1 not in table
    extra = rng.randrange(1001)
    table.add(extra)
    added.add(extra)
    assert sorted(table) == sorted(added)
    assert len(table) == len(added)


def test_iteration_follows_buckets_then_chains():
    table = IntHashTable(101)
    for value in (105, 4, 3):
        table.add(value)
    assert list(table) == [3, 105, 4]


def test_duplicates_are_ignored():
    table = IntHashTable(101)
    table.add(7)
    table.add(108)
    table.add(7)
    table.add(108)
    assert len(table) == 2
    assert list(table) == [7, 108]


def test_grows_when_overfull():
    table = IntHashTable(101)
    for value in range(101):
        table.add(value)
    assert table.size == 101
    table.add(101)
    assert table.size == 211
    assert sorted(table) == list(range(102))


def test_shrinks_when_quarter_full():
    table = IntHashTable(101)
    for value in range(102):
        table.add(value)
    assert table.size == 211
    for value in range(101, 52, -1):
        table.remove(value)
    assert len(table) == 53
    assert table.size == 211
    table.remove(52)
    assert table.size == 101
    assert len(table) == 52
    assert sorted(table) == list(range(52))


def test_remove_missing_raises_key_error():
    table = IntHashTable(101)
    table.add(5)
    with pytest.raises(KeyError):
        table.remove(106)
    assert list(table) == [5]


def test_contains():
    table = IntHashTable(11)
    table.add(22)
    assert 22 in table
    assert 11 not in table
    assert "22" not in table


def test_explicit_resize_keeps_elements():
    table = IntHashTable(101)
    for value in (1, 102, 203):
        table.add(value)
    table.resize(401)
    assert table.size == 401
    assert list(table) == [1, 102, 203]


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        IntHashTable(0)