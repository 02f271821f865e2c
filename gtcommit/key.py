"""
Commitment Key Generation
=========================

This module generates the public commitment key of Groth's scheme for
vectors of n elements of G2.

The key consists of 2n + 4 elements of G1:

    ck = (g_r, h_r, g_s, h_s, g_1, h_1, ..., g_n, h_n)

with
    g_r = g^{a_r},  h_r = g^{b_r},  g_s = g^{a_s},  h_s = g^{b_s}
    g_i = g_r^{x_i} · g_s^{y_i}
    h_i = h_r^{x_i} · h_s^{y_i}     for i ∈ [n]

Mathematical Notation:
----------------------
- g ∈ G1 is a random generator
- a_r, b_r, a_s, b_s, x_i, y_i ∈ Z_p^* are sampled at setup and discarded
- (x_i, y_i) is the trapdoor: it allows opening a commitment to any value,
  which is what the security argument needs and what honest parties never use

Security:
- All setup scalars live in a trapdoor scope and are wiped before
  generate() returns; the key holds no reference to them
- The key is public and may be shared freely
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from charm.toolbox.pairinggroup import PairingGroup, G1

from .errors import InvalidKeyLength, MalformedEncoding, MalformedKey
from .groups import default_group, identity
from .trapdoor import trapdoor_scope
from .utils import decode_element, encode_element, frame, multiexp_g1, unframe

logger = logging.getLogger(__name__)

# g_r, h_r, g_s, h_s
BASE_ELEMENTS = 4


def _check_length(n) -> None:
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")


def key_size(n: int) -> int:
    """Number of G1 elements in a key for vectors of length n."""
    return 2 * n + BASE_ELEMENTS


@dataclass(frozen=True, eq=False)
class CommitmentKey:
    """
    Public parameters for committing to exactly ``n`` elements of G2.

    Attributes
    ----------
    group : PairingGroup
        The pairing group all elements belong to
    n : int
        The vector length this key commits to
    g_r, h_r, g_s, h_s : G1
        Bases paired with the blinding elements r and s
    g, h : Tuple[G1, ...]
        Per-coordinate bases g_1..g_n and h_1..h_n
    """

    group: PairingGroup
    n: int
    g_r: G1
    h_r: G1
    g_s: G1
    h_s: G1
    g: Tuple[G1, ...]
    h: Tuple[G1, ...]

    @classmethod
    def generate(cls, n: int, group: Optional[PairingGroup] = None) -> 'CommitmentKey':
        """
        Generate a fresh commitment key for vector length n.

        Parameters
        ----------
        n : int
            The vector length, n >= 1
        group : PairingGroup, optional
            The pairing group. Defaults to :func:`groups.default_group`.

        Returns
        -------
        CommitmentKey
            A key whose 2n + 4 elements are all non-identity members of G1

        Examples
        --------
        >>> ck = CommitmentKey.generate(10)
        >>> ck.n
        10
        """
        _check_length(n)
        group = group or default_group()
        one = identity(group, G1)

        g = group.random(G1)
        while g == one:
            g = group.random(G1)

        # t[0..3] = a_r, b_r, a_s, b_s; t[4 + 2i], t[5 + 2i] = x_i, y_i
        with trapdoor_scope(group, key_size(n)) as t:
            g_r = g ** t[0]
            h_r = g ** t[1]
            g_s = g ** t[2]
            h_s = g ** t[3]
            g_list = []
            h_list = []
            for i in range(n):
                x = BASE_ELEMENTS + 2 * i
                g_list.append(multiexp_g1((g_r, g_s), t[x:x + 2], group))
                h_list.append(multiexp_g1((h_r, h_s), t[x:x + 2], group))

        key = cls(group, n, g_r, h_r, g_s, h_s, tuple(g_list), tuple(h_list))
        if not key.validate():
            # only reachable if g_i or h_i collapsed to the identity,
            # which happens with negligible probability
            logger.debug("degenerate key sampled for n=%d, retrying", n)
            return cls.generate(n, group)

        logger.debug("generated commitment key for n=%d", n)
        return key

    def elements(self) -> Tuple[G1, ...]:
        """All key elements in canonical order: g_r, h_r, g_s, h_s, g_1, h_1, ..., g_n, h_n."""
        interleaved = []
        for g_i, h_i in zip(self.g, self.h):
            interleaved.append(g_i)
            interleaved.append(h_i)
        return (self.g_r, self.h_r, self.g_s, self.h_s) + tuple(interleaved)

    def validate(self) -> bool:
        """
        Validate that the key is well-formed.

        Checks:
        - g and h each have n elements
        - every element is a member of G1
        - no element is the identity
        """
        if len(self.g) != self.n or len(self.h) != self.n:
            return False
        one = identity(self.group, G1)
        for elem in self.elements():
            if not self.group.ismember(elem) or elem == one:
                return False
        return True

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Framed sequence of the 2n + 4 canonical G1 encodings."""
        return frame([encode_element(e, self.group) for e in self.elements()])

    @classmethod
    def from_bytes(cls, data: bytes, n: int, group: Optional[PairingGroup] = None) -> 'CommitmentKey':
        """
        Decode a key for vector length n.

        Raises
        ------
        ValueError
            If n is not a positive integer
        MalformedEncoding
            If the framing does not parse
        InvalidKeyLength
            If the element count is not 2n + 4
        MalformedKey
            If an element is not a non-identity member of G1
        """
        _check_length(n)
        group = group or default_group()
        chunks = unframe(data)
        if len(chunks) != key_size(n):
            raise InvalidKeyLength(key_size(n), len(chunks))

        one = identity(group, G1)
        elems = []
        for index, chunk in enumerate(chunks):
            try:
                elem = decode_element(chunk, G1, group)
            except MalformedEncoding as e:
                logger.debug("key element %d rejected: %s", index, e)
                raise MalformedKey(f"key element {index}: {e}") from e
            if elem == one:
                raise MalformedKey(f"key element {index} is the identity")
            elems.append(elem)

        g_r, h_r, g_s, h_s = elems[:BASE_ELEMENTS]
        rest = elems[BASE_ELEMENTS:]
        return cls(group, n, g_r, h_r, g_s, h_s, tuple(rest[0::2]), tuple(rest[1::2]))

    # comparison -------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommitmentKey):
            return NotImplemented
        if self.n != other.n:
            return False
        return all(a == b for a, b in zip(self.elements(), other.elements()))

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"CommitmentKey(n={self.n})"
