import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import arrow_testkit
from arrow_testkit.constants import SEED


def test_random_bytes_empty():
    assert arrow_testkit.random_bytes(0) == b""


def test_random_bytes_deterministic():
    first = arrow_testkit.random_bytes(64)
    second = arrow_testkit.random_bytes(64)
    assert first == second
    assert isinstance(first, bytes)


def test_random_bytes_matches_seeded_generator():
    rng = random.Random(SEED)
    expected = bytes(rng.randrange(255) for _ in range(16))
    assert arrow_testkit.random_bytes(16) == expected


def test_random_bytes_not_constant():
    assert len(set(arrow_testkit.random_bytes(256))) > 1


def test_random_bytes_never_255():
    assert 255 not in arrow_testkit.random_bytes(10_000)


def test_random_bytes_negative():
    with pytest.raises(ValueError):
        arrow_testkit.random_bytes(-1)


def test_seedable_rng_fresh_instances():
    a = arrow_testkit.seedable_rng()
    b = arrow_testkit.seedable_rng()
    assert a is not b
    a.random()
    assert b.random() == arrow_testkit.seedable_rng().random()


def test_random_bytes_ignores_global_state():
    random.seed(1234)
    expected = arrow_testkit.random_bytes(8)
    random.seed(5678)
    assert arrow_testkit.random_bytes(8) == expected


@given(st.integers(min_value=0, max_value=512))
@settings(max_examples=50)
def test_random_bytes_length_and_range(n):
    data = arrow_testkit.random_bytes(n)
    assert len(data) == n
    assert all(0 <= b <= 254 for b in data)


@given(st.integers(min_value=0, max_value=256), st.integers(min_value=0, max_value=256))
@settings(max_examples=50)
def test_random_bytes_prefix(m, n):
    short, long = sorted((m, n))
    assert arrow_testkit.random_bytes(long)[:short] == arrow_testkit.random_bytes(short)
