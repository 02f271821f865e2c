"""
Opening Verification
====================

verify() recomputes the commitment from (key, values, randomness) and
compares it with the claimed commitment:

    c == e(g_r, ĝ^ρ) · e(g_s, ĝ^σ) · ∏ e(g_i, v_i)
    d == e(h_r, ĝ^ρ) · e(h_s, ĝ^σ) · ∏ e(h_i, v_i)

A rejected opening is a plain False. Malformed or mismatched inputs are
rejected the same way, so callers cannot learn why an opening failed.
"""

import logging

from .commit import Commitment, commit_with_randomness
from .key import CommitmentKey
from .randomness import Randomness
from .values import Values

logger = logging.getLogger(__name__)


def _well_formed(key, commitment, values, randomness) -> bool:
    return (
        isinstance(key, CommitmentKey)
        and isinstance(commitment, Commitment)
        and isinstance(values, Values)
        and isinstance(randomness, Randomness)
        and len(values) == key.n
    )


def verify(key: CommitmentKey, commitment: Commitment, values: Values, randomness: Randomness) -> bool:
    """
    Check that ``commitment`` opens to ``values`` with ``randomness``.

    Returns
    -------
    bool
        True iff the recomputed commitment equals ``commitment``.
        Never raises.
    """
    try:
        if not _well_formed(key, commitment, values, randomness):
            raise TypeError("opening does not match the key")
        expected = commit_with_randomness(key, values, randomness)
        return expected == commitment
    except Exception as e:
        # e.g. a G1 element among the values, or elements of another group
        logger.debug("opening rejected: %s", e)
        return False
