"""Tests for table sizing."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from hashspell.sizing import (
    DEFAULT_TABLE_SIZE, choose_table_size, expected_probes,
    is_prime, load_factor_for, next_prime,
)


def test_expected_probes_empty_table():
    assert expected_probes(0.0) == 1.0


def test_expected_probes_half_full():
    # (1 + 1 / 0.25) / 2
    assert expected_probes(0.5) == pytest.approx(2.5)


def test_expected_probes_rejects_full_table():
    with pytest.raises(ValueError):
        expected_probes(1.0)
    with pytest.raises(ValueError):
        expected_probes(-0.1)


def test_load_factor_inverts_expected_probes():
    for target in (1.5, 2.0, 3.0, 10.0):
        assert expected_probes(load_factor_for(target)) == pytest.approx(target)


def test_load_factor_for_three_probes():
    assert load_factor_for(3.0) == pytest.approx(0.5528, abs=1e-4)


def test_load_factor_rejects_impossible_target():
    with pytest.raises(ValueError):
        load_factor_for(1.0)


def test_primes():
    assert [n for n in range(30) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert not is_prime(45487)  # 13 * 3499
    assert is_prime(45491)
    assert next_prime(45486) == 45491
    assert next_prime(0) == 2
    assert next_prime(13) == 13


def test_default_size_for_reference_dictionary():
    assert choose_table_size(25144) == DEFAULT_TABLE_SIZE == 45491


def test_small_dictionaries_get_a_prime_size():
    assert choose_table_size(0) == 2
    size = choose_table_size(3)
    assert is_prime(size)
    assert 3 / size <= load_factor_for(3.0)
