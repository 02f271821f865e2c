"""
Tests for the canonical byte encodings and their error handling.
"""

import pytest
from charm.toolbox.pairinggroup import ZR, G1

from gtcommit import (
    CommitmentKey, Commitment, Randomness, Values,
    MalformedEncoding, MalformedKey, InvalidKeyLength, commit, verify,
)
from gtcommit.utils import (
    frame, unframe, scalar_width, encode_scalar, decode_scalar, encode_element, decode_element,
)

# first chunk's type digit: 4-byte count + 2-byte length precede it
FIRST_TYPE_DIGIT = 6


def _retag(data: bytes, digit: bytes) -> bytes:
    return data[:FIRST_TYPE_DIGIT] + digit + data[FIRST_TYPE_DIGIT + 1:]


# ============================================================================
# Round trips
# ============================================================================

def test_key_round_trip(small_key, group):
    data = small_key.to_bytes()
    decoded = CommitmentKey.from_bytes(data, 4, group)
    assert decoded == small_key
    assert decoded.validate()
    assert decoded.to_bytes() == data


def test_commitment_round_trip(small_key, group):
    C, _ = commit(small_key, Values.random(4, group))
    assert Commitment.from_bytes(C.to_bytes(), group) == C


def test_randomness_round_trip(group):
    r = Randomness.generate(group)
    data = r.to_bytes()
    assert len(data) == 2 * scalar_width(group)
    assert Randomness.from_bytes(data, group) == r


def test_decoded_opening_verifies(small_key, group):
    v = Values.random(4, group)
    C, r = commit(small_key, v)
    key = CommitmentKey.from_bytes(small_key.to_bytes(), 4, group)
    C2 = Commitment.from_bytes(C.to_bytes(), group)
    r2 = Randomness.from_bytes(r.to_bytes(), group)
    assert verify(key, C2, v, r2)


# ============================================================================
# Malformed input
# ============================================================================

def test_key_wrong_length(small_key, group):
    with pytest.raises(InvalidKeyLength) as exc:
        CommitmentKey.from_bytes(small_key.to_bytes(), 5, group)
    assert exc.value.expected == 14
    assert exc.value.actual == 12
    assert isinstance(exc.value, MalformedKey)


def test_key_wrong_element_type(small_key, group):
    with pytest.raises(MalformedKey):
        CommitmentKey.from_bytes(_retag(small_key.to_bytes(), b'2'), 4, group)


def test_key_truncated(small_key, group):
    with pytest.raises(MalformedEncoding):
        CommitmentKey.from_bytes(small_key.to_bytes()[:-1], 4, group)


def test_key_trailing_bytes(small_key, group):
    with pytest.raises(MalformedEncoding):
        CommitmentKey.from_bytes(small_key.to_bytes() + b'\x00', 4, group)


def test_commitment_wrong_element_type(small_key, group):
    C, _ = commit(small_key, Values.random(4, group))
    with pytest.raises(MalformedEncoding):
        Commitment.from_bytes(_retag(C.to_bytes(), b'1'), group)


def test_commitment_wrong_count(small_key, group):
    C, _ = commit(small_key, Values.random(4, group))
    chunks = unframe(C.to_bytes())
    with pytest.raises(MalformedEncoding):
        Commitment.from_bytes(frame(chunks[:1]), group)


def test_randomness_out_of_range(group):
    """A scalar with its high bits forced on lies outside Z_p."""
    width = scalar_width(group)
    data = bytearray(Randomness.generate(group).to_bytes())
    data[:width] = b'\xff' * width
    with pytest.raises(MalformedEncoding):
        Randomness.from_bytes(bytes(data), group)


def test_randomness_wrong_width(group):
    data = Randomness.generate(group).to_bytes()
    with pytest.raises(MalformedEncoding):
        Randomness.from_bytes(data[:-1], group)


def test_scalar_order_rejected(group):
    order = int(group.order())
    with pytest.raises(MalformedEncoding):
        decode_scalar(order.to_bytes(scalar_width(group), 'big'), group)
    assert int(decode_scalar((order - 1).to_bytes(scalar_width(group), 'big'), group)) == order - 1


def test_scalar_encoding_fixed_width(group):
    assert len(encode_scalar(group.init(ZR, 1), group)) == scalar_width(group)


def test_unframe_rejects_garbage():
    with pytest.raises(MalformedEncoding):
        unframe(b'\x00')
    with pytest.raises(MalformedEncoding):
        unframe(b'\x00\x00\x00\x01\x00\x05ab')
    assert unframe(frame([b'ab', b''])) == [b'ab', b'']


# ============================================================================
# Corrupted element payloads
# ============================================================================

# first chunk's payload starts after its "<type>:" prefix
FIRST_PAYLOAD = FIRST_TYPE_DIGIT + 2


def _flip_high_bit(data: bytes, offset: int) -> bytes:
    return data[:offset] + bytes([data[offset] | 0x80]) + data[offset + 1:]


def _extend_first_chunk(data: bytes, extra: bytes) -> bytes:
    chunks = unframe(data)
    chunks[0] = chunks[0] + extra
    return frame(chunks)


def test_key_flipped_payload_bit(small_key, group):
    """A flipped high bit inside an element payload never yields a different valid key."""
    data = small_key.to_bytes()
    for offset in (FIRST_PAYLOAD, FIRST_PAYLOAD + 3, FIRST_PAYLOAD + 10):
        with pytest.raises(MalformedKey):
            CommitmentKey.from_bytes(_flip_high_bit(data, offset), 4, group)


def test_commitment_flipped_payload_bit(small_key, group):
    C, _ = commit(small_key, Values.random(4, group))
    data = C.to_bytes()
    for offset in (FIRST_PAYLOAD, FIRST_PAYLOAD + 7):
        with pytest.raises(MalformedEncoding):
            Commitment.from_bytes(_flip_high_bit(data, offset), group)


def test_commitment_short_element(group):
    with pytest.raises(MalformedEncoding):
        Commitment.from_bytes(frame([b'3:AA==', b'3:AA==']), group)


def test_key_short_element(small_key, group):
    chunks = unframe(small_key.to_bytes())
    chunks[0] = b'1:AA=='
    with pytest.raises(MalformedKey):
        CommitmentKey.from_bytes(frame(chunks), 4, group)


def test_appended_base64_quad(small_key, group):
    with pytest.raises(MalformedKey):
        CommitmentKey.from_bytes(_extend_first_chunk(small_key.to_bytes(), b'AAAA'), 4, group)

    C, _ = commit(small_key, Values.random(4, group))
    with pytest.raises(MalformedEncoding):
        Commitment.from_bytes(_extend_first_chunk(C.to_bytes(), b'AAAA'), group)


def test_element_round_trip_is_canonical(small_key, group):
    for chunk in unframe(small_key.to_bytes()):
        assert encode_element(decode_element(chunk, G1, group), group) == chunk


@pytest.mark.parametrize("n", [0, -2, 1.5, True])
def test_key_from_bytes_rejects_bad_length(n, group):
    with pytest.raises(ValueError):
        CommitmentKey.from_bytes(frame([]), n, group)
