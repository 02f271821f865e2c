"""
Group Initialization and Setup
===============================

This module handles the initialization of Type-3 asymmetric pairing groups
for the commitment scheme.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('MNT224') provides asymmetric Type-3 pairings with 224-bit base field
- Alternative curve: 'BN254'
- G1 holds the commitment key, G2 holds the committed values, GT holds commitments
- Pairing operation: pair(g1_elem, g2_elem) -> GT element

Groth's scheme needs an asymmetric pairing: the committed values live in G2
and the key in G1, so a symmetric curve such as 'SS512' is not offered as a
fallback.
"""

import logging
from functools import lru_cache

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config

logger = logging.getLogger(__name__)

# Asymmetric curves tried in order when the requested one is unavailable
FALLBACK_CURVES = ('MNT224', 'BN254')


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group for the commitment scheme.

    This function sets up the Type-3 asymmetric bilinear pairing groups:
    - G1: source group of the commitment key
    - G2: source group of the committed values and blinding elements
    - GT: target group of the commitment
    - Bilinear map e: G1 × G2 → GT (implemented as pair function)

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to ``config.pairing_curve``.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'G1', 'G2', 'GT', 'ZR': The group type constants
        - 'pair': The pairing function

    Examples
    --------
    >>> params = setup('MNT224')
    >>> group = params['group']
    >>> e_result = pair(group.random(G1), group.random(G2))  # in GT
    """
    group_name = group_name or config.pairing_curve
    candidates = [group_name] + [c for c in FALLBACK_CURVES if c != group_name]

    group = None
    last_error = None
    for name in candidates:
        try:
            group = PairingGroup(name)
        except Exception as e:
            logger.warning("pairing curve %s not available (%s), trying fallback", name, e)
            last_error = e
            continue
        group_name = name
        break

    if group is None:
        raise RuntimeError(f"no asymmetric pairing curve available: {last_error}")

    logger.debug("initialized pairing group %s", group_name)
    return {
        'group': group,
        'group_name': group_name,
        'G1': G1,
        'G2': G2,
        'GT': GT,
        'ZR': ZR,
        'pair': pair,
    }


@lru_cache(maxsize=None)
def _default_params(group_name: str) -> dict:
    return setup(group_name)


def default_group() -> PairingGroup:
    """The process-wide pairing group for ``config.pairing_curve``."""
    return _default_params(config.pairing_curve)['group']


@lru_cache(maxsize=None)
def _hashed_base(group: PairingGroup, tag: str) -> G2:
    return group.hash(tag, G2)


def randomness_base(group: PairingGroup) -> G2:
    """
    The fixed base ĝ ∈ G2 that lifts blinding scalars into G2.

    Derived by hashing ``config.randomness_base_tag`` to G2, so every party
    using the same curve and tag obtains the same element and nobody knows
    its discrete logarithm with respect to any other generator.
    """
    return _hashed_base(group, config.randomness_base_tag)


def identity(group: PairingGroup, group_type) -> object:
    """The neutral element of ``group_type`` (written 1 in multiplicative notation)."""
    return group.init(group_type, 1)
