"""
Blinding randomness.

An opening's randomness is a pair of scalars (ρ, σ) ∈ Z_p². The commit
algorithm lifts them to the G2 blinding elements r = ĝ^ρ and s = ĝ^σ, so
adding randomness corresponds to multiplying the blinding elements.
"""

from dataclasses import dataclass
from typing import Optional

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .errors import MalformedEncoding
from .groups import default_group, randomness_base
from .utils import decode_scalar, encode_scalar, scalar_width, to_scalar


@dataclass(frozen=True, eq=False)
class Randomness:
    """
    The committer's secret blinding scalars.

    Never reuse one Randomness for two different value vectors under the
    same key: the two commitments would reveal the quotient of the values.
    """

    group: PairingGroup
    rho: ZR
    sigma: ZR

    @classmethod
    def generate(cls, group: Optional[PairingGroup] = None) -> 'Randomness':
        """Sample (ρ, σ) uniformly from Z_p²."""
        group = group or default_group()
        return cls(group, group.random(ZR), group.random(ZR))

    @classmethod
    def zero(cls, group: Optional[PairingGroup] = None) -> 'Randomness':
        """The neutral element for ``+``."""
        group = group or default_group()
        return cls(group, group.init(ZR, 0), group.init(ZR, 0))

    def blinding_elements(self):
        """(r, s) = (ĝ^ρ, ĝ^σ) ∈ G2²."""
        base = randomness_base(self.group)
        return base ** self.rho, base ** self.sigma

    def __add__(self, other: 'Randomness') -> 'Randomness':
        if not isinstance(other, Randomness):
            return NotImplemented
        return Randomness(self.group, self.rho + other.rho, self.sigma + other.sigma)

    def __mul__(self, k) -> 'Randomness':
        k = to_scalar(k, self.group)
        return Randomness(self.group, self.rho * k, self.sigma * k)

    __rmul__ = __mul__

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Two fixed-width big-endian scalars, ρ then σ."""
        return encode_scalar(self.rho, self.group) + encode_scalar(self.sigma, self.group)

    @classmethod
    def from_bytes(cls, data: bytes, group: Optional[PairingGroup] = None) -> 'Randomness':
        """
        Raises
        ------
        MalformedEncoding
            If the length is wrong or either scalar is out of range.
        """
        group = group or default_group()
        width = scalar_width(group)
        if len(data) != 2 * width:
            raise MalformedEncoding(f"randomness must be {2 * width} bytes, got {len(data)}")
        return cls(group, decode_scalar(data[:width], group), decode_scalar(data[width:], group))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Randomness):
            return NotImplemented
        return self.rho == other.rho and self.sigma == other.sigma

    __hash__ = None

    def __repr__(self) -> str:
        # never print the secret scalars
        return "Randomness(...)"
