"""Tests for the open-addressing hash table."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from hashspell.stats import RunStatistics
from hashspell.table import HashTable, OverflowPolicy, TableOverflowError


def same_bucket(bucket):
    """Hash function that sends every word to one bucket."""
    return lambda word, size, end=None: bucket % size


def test_lookup_after_insert():
    table = HashTable(101)
    for word in ['cat', 'dog', 'run', 'zebra', "it's"]:
        table.insert(word)
        assert table.lookup(word)
    assert len(table) == 5
    assert 'cat' in table
    assert 'cow' not in table


def test_capacity_has_spare_slot():
    table = HashTable(7)
    assert table.size == 7
    assert table.capacity == 8


def test_rejects_bad_size():
    with pytest.raises(ValueError):
        HashTable(0)


def test_colliding_words_form_contiguous_run():
    table = HashTable(10, hash_func=same_bucket(3))
    slots = [table.insert(w) for w in ['a', 'b', 'c']]
    assert slots == [3, 4, 5]
    assert table.slot_of('b') == 4
    assert table.slot_of('z') is None


def test_home_slot_lookups_cost_no_probes():
    table = HashTable(101)
    table.insert('cat')
    stats = RunStatistics()
    for _ in range(10):
        assert table.lookup('cat', stats=stats)
    assert stats.probe_count == 0


def test_collision_chain_probe_count():
    table = HashTable(20, hash_func=same_bucket(0))
    words = ['w%d' % i for i in range(6)]
    for w in words:
        table.insert(w)
    stats = RunStatistics()
    assert table.lookup(words[-1], stats=stats)
    assert stats.probe_count == len(words) - 1


def test_miss_counts_every_occupied_slot():
    table = HashTable(10, hash_func=same_bucket(0))
    for w in ['a', 'b', 'c']:
        table.insert(w)
    stats = RunStatistics()
    assert not table.lookup('z', stats=stats)
    assert stats.probe_count == 3


def test_lookup_of_prefix():
    table = HashTable(101)
    table.insert('cat')
    assert table.lookup('cats', end=3)
    assert not table.lookup('cats', end=2)
    assert not table.lookup('cats')


def test_reject_policy_raises_at_end_of_table():
    table = HashTable(2, hash_func=same_bucket(1))
    table.insert('a')
    table.insert('b')  # spare slot
    with pytest.raises(TableOverflowError):
        table.insert('c')
    assert len(table) == 2
    assert 'c' not in table


def test_reject_policy_lookup_stops_at_end():
    table = HashTable(2, hash_func=same_bucket(1))
    table.insert('a')
    table.insert('b')
    stats = RunStatistics()
    assert not table.lookup('z', stats=stats)
    assert stats.probe_count == 2


def test_wrap_policy_uses_front_of_table():
    table = HashTable(2, hash_func=same_bucket(1), overflow=OverflowPolicy.WRAP)
    assert [table.insert(w) for w in ['a', 'b', 'c']] == [1, 2, 0]
    assert 'c' in table
    with pytest.raises(TableOverflowError):
        table.insert('d')


def test_wrap_policy_miss_on_full_table_terminates():
    table = HashTable(2, hash_func=same_bucket(0), overflow='wrap')
    for w in ['a', 'b', 'c']:
        table.insert(w)
    stats = RunStatistics()
    assert not table.lookup('z', stats=stats)
    assert stats.probe_count == 3


def test_grow_policy_rehashes():
    table = HashTable(2, hash_func=same_bucket(1), overflow=OverflowPolicy.GROW)
    for w in ['a', 'b', 'c']:
        table.insert(w)
    assert table.size == 5
    assert len(table) == 3
    assert all(w in table for w in ['a', 'b', 'c'])
    assert sorted(table) == ['a', 'b', 'c']


def test_grow_policy_with_real_hash():
    table = HashTable(3, overflow='grow')
    words = ['word%d' % i for i in range(50)]
    for w in words:
        table.insert(w)
    assert len(table) == 50
    assert all(table.lookup(w) for w in words)


def test_duplicates_are_stored_twice():
    table = HashTable(101)
    table.insert('cat')
    table.insert('cat')
    assert len(table) == 2
    assert table.lookup('cat')


def test_policy_parse():
    assert OverflowPolicy.parse('GROW') is OverflowPolicy.GROW
    assert OverflowPolicy.parse(OverflowPolicy.WRAP) is OverflowPolicy.WRAP
    with pytest.raises(ValueError):
        OverflowPolicy.parse('resize')


def test_grow_doubles_to_next_prime():
    table = HashTable(1, hash_func=same_bucket(0), overflow=OverflowPolicy.GROW)
    for w in ['a', 'b', 'c']:
        table.insert(w)
    # 2 * 1 == 2 is already prime
    assert table.size == 2
    table.insert('d')
    # next prime at or above 4
    assert table.size == 5
