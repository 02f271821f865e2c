"""
Committed values: fixed-length vectors of G2 elements.

The coordinate-wise product V1 * V2 is the operation that commitments
respect: commit(V1; r1) * commit(V2; r2) == commit(V1 * V2; r1 + r2).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from charm.toolbox.pairinggroup import PairingGroup, G2

from .errors import DimensionMismatch
from .groups import default_group, identity


@dataclass(frozen=True, eq=False)
class Values:
    """An immutable vector (v_1, ..., v_n) of G2 elements."""

    elements: Tuple[G2, ...]

    @classmethod
    def new(cls, elements: Iterable[G2], n: Optional[int] = None) -> 'Values':
        """
        Wrap the given G2 elements.

        When ``n`` is given the length is checked once here, so a vector
        that does not fit a key of size n cannot be constructed.
        """
        elements = tuple(elements)
        if n is not None and len(elements) != n:
            raise DimensionMismatch(n, len(elements))
        return cls(elements)

    @classmethod
    def random(cls, n: int, group: Optional[PairingGroup] = None) -> 'Values':
        """n uniformly random G2 elements."""
        group = group or default_group()
        return cls(tuple(group.random(G2) for _ in range(n)))

    @classmethod
    def identity(cls, n: int, group: Optional[PairingGroup] = None) -> 'Values':
        """The all-identity vector, neutral for ``*``."""
        group = group or default_group()
        return cls(tuple(identity(group, G2) for _ in range(n)))

    @property
    def n(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[G2]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> G2:
        return self.elements[index]

    def __mul__(self, other: 'Values') -> 'Values':
        if not isinstance(other, Values):
            return NotImplemented
        if len(other) != len(self):
            raise DimensionMismatch(len(self), len(other))
        return Values(tuple(a * b for a, b in zip(self.elements, other.elements)))

    def __pow__(self, k) -> 'Values':
        return Values(tuple(v ** k for v in self.elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Values):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self.elements, other.elements))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Values(n={self.n})"
