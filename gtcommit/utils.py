"""
Utility Functions
=================

This module provides the group and encoding helpers shared by the key,
commit and verify code.

Key Operations:
- Pairing products: Compute ∏ e(a_i, b_i)
- Multi-exponentiation: Compute ∏ a_i^{e_i} in G1
- Canonical encodings: group elements, fixed-width scalars, framed sequences

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Pairing is computed as pair(g1_elem, g2_elem)
- group.serialize()/group.deserialize() give a per-type canonical encoding
  of the form b'<type>:<base64>'
"""

import base64
import binascii
import logging
import struct
from functools import lru_cache
from typing import List, Sequence

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .errors import MalformedEncoding

logger = logging.getLogger(__name__)

_COUNT = struct.Struct('>I')
_LENGTH = struct.Struct('>H')


def pair_prod(g1_elems: Sequence[G1], g2_elems: Sequence[G2], group: PairingGroup) -> GT:
    """
    Compute product of pairings: ∏ e(g1_elems[i], g2_elems[i]).

    Notes
    -----
    - If the sequences are empty, returns the identity element 1_GT
    - g1_elems and g2_elems must have the same length
    """
    if len(g1_elems) != len(g2_elems):
        raise ValueError(f"g1_elems and g2_elems must have same length: {len(g1_elems)} != {len(g2_elems)}")

    result = group.init(GT, 1)
    for a, b in zip(g1_elems, g2_elems):
        result *= pair(a, b)
    return result


def multiexp_g1(bases: Sequence[G1], exponents: Sequence[ZR], group: PairingGroup) -> G1:
    """
    Compute multi-exponentiation in G1: ∏ bases[i]^{exponents[i]}.

    If bases is empty, returns the identity element 1_G1.
    """
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(G1, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp
    return result


def random_nonzero(group: PairingGroup) -> ZR:
    """Uniform scalar in Z_p^*."""
    zero = group.init(ZR, 0)
    while True:
        s = group.random(ZR)
        if s != zero:
            return s


def to_scalar(k, group: PairingGroup) -> ZR:
    """Coerce an int exponent to ZR; ZR values pass through."""
    if isinstance(k, int):
        return group.init(ZR, k)
    return k


# ============================================================================
# Encodings
# ============================================================================

def scalar_width(group: PairingGroup) -> int:
    """Byte width of a canonical scalar: ceil(bits(p) / 8)."""
    return (int(group.order()).bit_length() + 7) // 8


def encode_scalar(s: ZR, group: PairingGroup) -> bytes:
    """Fixed-width big-endian encoding of a scalar in [0, p)."""
    return (int(s) % int(group.order())).to_bytes(scalar_width(group), 'big')


def decode_scalar(data: bytes, group: PairingGroup) -> ZR:
    """
    Decode a fixed-width scalar.

    Raises
    ------
    MalformedEncoding
        If the width is wrong or the value is not below the group order.
    """
    width = scalar_width(group)
    if len(data) != width:
        raise MalformedEncoding(f"scalar must be {width} bytes, got {len(data)}")
    value = int.from_bytes(data, 'big')
    if value >= int(group.order()):
        raise MalformedEncoding("scalar out of range")
    return group.init(ZR, value)


def encode_element(elem, group: PairingGroup) -> bytes:
    """Canonical compressed encoding of a G1, G2 or GT element."""
    return group.serialize(elem, compression=True)


@lru_cache(maxsize=None)
def element_width(group: PairingGroup, group_type) -> int:
    """Raw byte length of the canonical payload for ``group_type``, taken from a sample element."""
    if int(group_type) == int(GT):
        sample = pair(group.random(G1), group.random(G2))
    else:
        sample = group.random(group_type)
    _, _, payload = encode_element(sample, group).partition(b':')
    return len(base64.b64decode(payload))


def decode_element(data: bytes, group_type, group: PairingGroup):
    """
    Decode an element and check that it belongs to ``group_type``.

    The payload is base64-decoded strictly and its length checked before the
    backend sees it; the backend decoder skips stray characters and reads a
    fixed number of bytes regardless of the buffer it is given.

    Raises
    ------
    MalformedEncoding
        If the type prefix is wrong, the payload is not strict base64 of the
        fixed width, the backend rejects the bytes, the decoded element fails
        the membership check, or re-encoding does not reproduce ``data``.
    """
    prefix, sep, payload = data.partition(b':')
    if not sep or prefix != str(int(group_type)).encode():
        raise MalformedEncoding(f"expected element of group type {int(group_type)}")
    try:
        raw = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise MalformedEncoding("element payload is not base64") from e
    width = element_width(group, group_type)
    if len(raw) != width:
        raise MalformedEncoding(f"element payload must be {width} bytes, got {len(raw)}")
    try:
        elem = group.deserialize(data, compression=True)
    except Exception as e:
        logger.debug("backend rejected element encoding: %s", e)
        raise MalformedEncoding("element does not decode") from e
    if elem is None or not group.ismember(elem):
        raise MalformedEncoding("decoded element is not a group member")
    if encode_element(elem, group) != data:
        raise MalformedEncoding("element encoding is not canonical")
    return elem


def frame(chunks: Sequence[bytes]) -> bytes:
    """Length-prefix every chunk and prefix the chunk count."""
    parts = [_COUNT.pack(len(chunks))]
    for chunk in chunks:
        parts.append(_LENGTH.pack(len(chunk)))
        parts.append(chunk)
    return b''.join(parts)


def unframe(data: bytes) -> List[bytes]:
    """
    Inverse of :func:`frame`.

    Raises
    ------
    MalformedEncoding
        On truncated input or trailing bytes.
    """
    if len(data) < _COUNT.size:
        raise MalformedEncoding("truncated sequence header")
    (count,) = _COUNT.unpack_from(data, 0)
    offset = _COUNT.size
    chunks = []
    for _ in range(count):
        if offset + _LENGTH.size > len(data):
            raise MalformedEncoding("truncated element header")
        (length,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if offset + length > len(data):
            raise MalformedEncoding("truncated element")
        chunks.append(data[offset:offset + length])
        offset += length
    if offset != len(data):
        raise MalformedEncoding(f"{len(data) - offset} trailing bytes")
    return chunks
