"""
Homomorphic combination.

For commitments produced under the same key,

    verify(ck, C1 * C2, V1 * V2, r1 + r2) == True

Folding helpers combine any number of operands starting from the neutral
element. The combinator cannot detect commitments made under different
keys; combining those yields a commitment with no meaningful opening.
"""

import logging
from functools import reduce
from typing import Optional, Tuple

from charm.toolbox.pairinggroup import PairingGroup

from .commit import Commitment, commit
from .errors import DimensionMismatch
from .key import CommitmentKey
from .randomness import Randomness
from .values import Values

logger = logging.getLogger(__name__)


def combine_commitments(*commitments: Commitment, group: Optional[PairingGroup] = None) -> Commitment:
    """∏ C_i. With no operands, the identity commitment of ``group``."""
    if not commitments:
        return Commitment.identity(group)
    return reduce(lambda a, b: a * b, commitments)


def combine_values(*values: Values, n: Optional[int] = None, group: Optional[PairingGroup] = None) -> Values:
    """
    Coordinate-wise ∏ V_i.

    With no operands, the identity vector of length ``n``.

    Raises
    ------
    DimensionMismatch
        If the operands have different lengths, or differ from ``n`` when given.
    """
    if not values:
        if n is None:
            raise ValueError("n is required to combine zero value vectors")
        return Values.identity(n, group)
    if n is not None and len(values[0]) != n:
        raise DimensionMismatch(n, len(values[0]))
    return reduce(lambda a, b: a * b, values)


def combine_randomness(*randomness: Randomness, group: Optional[PairingGroup] = None) -> Randomness:
    """Σ r_i in Z_p². With no operands, zero randomness of ``group``."""
    if not randomness:
        return Randomness.zero(group)
    return reduce(lambda a, b: a + b, randomness)


def rerandomize(key: CommitmentKey, commitment: Commitment) -> Tuple[Commitment, Randomness]:
    """
    Refresh the blinding of ``commitment`` without knowing its opening.

    Multiplies in a fresh commitment to the identity vector. If
    ``commitment`` opens to (V, r), the result opens to (V, r + delta),
    where delta is the returned randomness.
    """
    blank, delta = commit(key, Values.identity(key.n, key.group))
    logger.debug("rerandomized commitment for n=%d", key.n)
    return commitment * blank, delta
