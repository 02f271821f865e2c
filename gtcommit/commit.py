"""
Commitment Generation
=====================

This module implements Groth's commitment to a vector of G2 elements.

Formula (Commitment):
---------------------
For key ck = (g_r, h_r, g_s, h_s, g_1..g_n, h_1..h_n), values v ∈ G2^n and
blinding elements r = ĝ^ρ, s = ĝ^σ:

    c = e(g_r, r) · e(g_s, s) · ∏_{i=1}^n e(g_i, v_i)
    d = e(h_r, r) · e(h_s, s) · ∏_{i=1}^n e(h_i, v_i)

The commitment is (c, d) ∈ GT². By bilinearity the map
(v, ρ, σ) ↦ (c, d) is a group homomorphism, so

    commit(v1; ρ1, σ1) · commit(v2; ρ2, σ2) = commit(v1 · v2; ρ1 + ρ2, σ1 + σ2)

Security:
- Perfectly hiding: r and s are uniform in G2
- Computationally binding under the double pairing assumption
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from charm.toolbox.pairinggroup import PairingGroup, GT

from .errors import DimensionMismatch, MalformedEncoding
from .groups import default_group, identity
from .key import CommitmentKey
from .randomness import Randomness
from .utils import decode_element, encode_element, frame, pair_prod, unframe
from .values import Values

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Commitment:
    """A commitment (c, d) ∈ GT². Compared only by equality."""

    group: PairingGroup
    c: GT
    d: GT

    @classmethod
    def identity(cls, group: Optional[PairingGroup] = None) -> 'Commitment':
        """The neutral element for ``*``: a commitment to the identity vector with zero randomness."""
        group = group or default_group()
        return cls(group, identity(group, GT), identity(group, GT))

    def __mul__(self, other: 'Commitment') -> 'Commitment':
        if not isinstance(other, Commitment):
            return NotImplemented
        return Commitment(self.group, self.c * other.c, self.d * other.d)

    def __pow__(self, k) -> 'Commitment':
        return Commitment(self.group, self.c ** k, self.d ** k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commitment):
            return NotImplemented
        return self.c == other.c and self.d == other.d

    __hash__ = None

    def __repr__(self) -> str:
        return "Commitment(...)"

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Framed sequence of the two canonical GT encodings."""
        return frame([encode_element(self.c, self.group), encode_element(self.d, self.group)])

    @classmethod
    def from_bytes(cls, data: bytes, group: Optional[PairingGroup] = None) -> 'Commitment':
        """
        Raises
        ------
        MalformedEncoding
            If the framing does not parse, there are not exactly two
            elements, or either is not a member of GT.
        """
        group = group or default_group()
        chunks = unframe(data)
        if len(chunks) != 2:
            raise MalformedEncoding(f"commitment must have 2 elements, got {len(chunks)}")
        return cls(group, decode_element(chunks[0], GT, group), decode_element(chunks[1], GT, group))


def commit_with_randomness(key: CommitmentKey, values: Values, randomness: Randomness) -> Commitment:
    """
    Compute the commitment to ``values`` for a given opening.

    Parameters
    ----------
    key : CommitmentKey
        The commitment key for vector length n
    values : Values
        The committed vector (v_1, ..., v_n) ∈ G2^n
    randomness : Randomness
        The blinding scalars (ρ, σ)

    Returns
    -------
    Commitment
        (c, d) as in the module formula

    Raises
    ------
    DimensionMismatch
        If len(values) != key.n
    """
    if len(values) != key.n:
        raise DimensionMismatch(key.n, len(values))

    group = key.group
    r, s = randomness.blinding_elements()

    c = pair_prod((key.g_r, key.g_s) + key.g, (r, s) + values.elements, group)
    d = pair_prod((key.h_r, key.h_s) + key.h, (r, s) + values.elements, group)
    return Commitment(group, c, d)


def commit(key: CommitmentKey, values: Values) -> Tuple[Commitment, Randomness]:
    """
    Commit to ``values`` with fresh randomness.

    Returns
    -------
    (Commitment, Randomness)
        The commitment and the opening randomness; keep the latter secret
        until opening and never reuse it.

    Examples
    --------
    >>> ck = CommitmentKey.generate(4)
    >>> v = Values.random(4, ck.group)
    >>> C, r = commit(ck, v)
    >>> verify(ck, C, v, r)
    True
    """
    randomness = Randomness.generate(key.group)
    commitment = commit_with_randomness(key, values, randomness)
    logger.debug("committed to %d values", key.n)
    return commitment, randomness
