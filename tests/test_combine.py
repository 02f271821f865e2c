"""
Tests for the homomorphic combination law.
"""

import pytest
from charm.toolbox.pairinggroup import ZR

from gtcommit import (
    Commitment, Values, Randomness, DimensionMismatch,
    commit, verify, combine_commitments, combine_values, combine_randomness,
)


@pytest.fixture
def three_openings(small_key, group):
    values = [Values.random(4, group) for _ in range(3)]
    openings = [commit(small_key, v) for v in values]
    return values, [c for c, _ in openings], [r for _, r in openings]


def test_multiplicatively_homomorphic(small_key, group):
    v1 = Values.random(4, group)
    C1, r1 = commit(small_key, v1)
    v2 = Values.random(4, group)
    C2, r2 = commit(small_key, v2)

    assert verify(small_key, C1 * C2, v1 * v2, r1 + r2)


def test_homomorphic_negative(small_key, group):
    v1 = Values.random(4, group)
    C1, r1 = commit(small_key, v1)
    v2 = Values.random(4, group)
    C2, r2 = commit(small_key, v2)

    assert not verify(small_key, C1 * C2, v1 * v2, r1)
    assert not verify(small_key, C1 * C2, v1, r1 + r2)


def test_unit_key_homomorphic(unit_key, group):
    v1 = Values.random(1, group)
    C1, r1 = commit(unit_key, v1)
    v2 = Values.random(1, group)
    C2, r2 = commit(unit_key, v2)
    assert verify(unit_key, C1 * C2, v1 * v2, r1 + r2)


def test_repeated_combination(small_key, group):
    v = Values.random(4, group)
    C, r = commit(small_key, v)
    assert verify(small_key, C ** 3, v ** 3, r * 3)
    assert C ** 3 == C * C * C
    assert r * 3 == r + r + r

    k = group.random(ZR)
    assert verify(small_key, C ** k, v ** k, r * k)


def test_commitment_associative_commutative(three_openings):
    _, (a, b, c), _ = three_openings
    assert (a * b) * c == a * (b * c)
    assert a * b == b * a


def test_values_associative_commutative(three_openings):
    (a, b, c), _, _ = three_openings
    assert (a * b) * c == a * (b * c)
    assert a * b == b * a


def test_randomness_associative_commutative(three_openings):
    _, _, (a, b, c) = three_openings
    assert (a + b) + c == a + (b + c)
    assert a + b == b + a


def test_combine_many(small_key, three_openings):
    values, commitments, randomness = three_openings
    C = combine_commitments(*commitments)
    V = combine_values(*values)
    r = combine_randomness(*randomness)
    assert verify(small_key, C, V, r)


def test_identity_elements(small_key, group, three_openings):
    values, commitments, randomness = three_openings
    assert commitments[0] * Commitment.identity(group) == commitments[0]
    assert values[0] * Values.identity(4, group) == values[0]
    assert randomness[0] + Randomness.zero(group) == randomness[0]

    assert combine_commitments(group=group) == Commitment.identity(group)
    assert combine_values(n=4, group=group) == Values.identity(4, group)
    assert combine_randomness(group=group) == Randomness.zero(group)
    assert verify(small_key, Commitment.identity(group), Values.identity(4, group), Randomness.zero(group))


def test_combine_values_length_mismatch(group):
    with pytest.raises(DimensionMismatch):
        Values.random(2, group) * Values.random(3, group)
    with pytest.raises(DimensionMismatch):
        combine_values(Values.random(2, group), n=3)
    with pytest.raises(ValueError):
        combine_values()
