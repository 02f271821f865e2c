"""
Homomorphic Trapdoor Commitments to Group Elements
==================================================

An implementation of the commitment scheme of J. Groth, "Homomorphic
Trapdoor Commitments to Group Elements" (https://eprint.iacr.org/2009/007),
using charm-crypto with Type-3 asymmetric pairing curves.

A committer binds to a vector of n elements of G2. Commitments under the
same key multiply into a commitment to the coordinate-wise product of the
values, opened by the sum of the randomness.

Modules:
--------
- groups: Pairing group setup and the randomness base ĝ
- key: Commitment key generation and encoding
- trapdoor: Setup-time scoped trapdoor scalars
- values: Committed vectors of G2 elements
- randomness: Blinding scalars
- commit: Commitment type and the commit algorithm
- verify: Opening verification
- combine: Homomorphic combination helpers
- utils: Pairing products and canonical encodings

Usage:
------
    from gtcommit import setup, CommitmentKey, Values, commit, verify

    group = setup('MNT224')['group']
    ck = CommitmentKey.generate(4, group)

    v1, v2 = Values.random(4, group), Values.random(4, group)
    C1, r1 = commit(ck, v1)
    C2, r2 = commit(ck, v2)

    assert verify(ck, C1, v1, r1)
    assert verify(ck, C1 * C2, v1 * v2, r1 + r2)
"""

import logging

__version__ = "0.1.0"

from .groups import setup, default_group, randomness_base
from .errors import (
    CommitmentError,
    MalformedEncoding,
    MalformedKey,
    InvalidKeyLength,
    DimensionMismatch,
)
from .key import CommitmentKey
from .values import Values
from .randomness import Randomness
from .commit import Commitment, commit, commit_with_randomness
from .verify import verify
from .combine import combine_commitments, combine_values, combine_randomness, rerandomize
from .config import config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'setup', 'default_group', 'randomness_base',
    'CommitmentError', 'MalformedEncoding', 'MalformedKey', 'InvalidKeyLength', 'DimensionMismatch',
    'CommitmentKey', 'Values', 'Randomness', 'Commitment',
    'commit', 'commit_with_randomness', 'verify',
    'combine_commitments', 'combine_values', 'combine_randomness', 'rerandomize',
    'config',
]
