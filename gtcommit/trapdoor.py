"""
Setup-time trapdoor handling.

Groth's key derives every g_i, h_i from the public bases and secret scalars
(x_i, y_i). Knowing them allows equivocation, so they exist only inside
:func:`trapdoor_scope` and are overwritten before the scope exits, whether
it exits normally or by exception. Nothing else in the package holds or
returns trapdoor material.

Python cannot guarantee that no copy of a value survives elsewhere in
memory; the scope drops every reference this package holds and overwrites
the backend elements in place where charm allows it.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .utils import random_nonzero

logger = logging.getLogger(__name__)


def _wipe(scalars: List[ZR], group: PairingGroup) -> None:
    zero = group.init(ZR, 0)
    for i in range(len(scalars)):
        # overwrites the PBC element in place where charm implements
        # in-place multiply; the slot is rebound to zero either way
        scalars[i] *= zero
        scalars[i] = zero
    scalars.clear()


@contextmanager
def trapdoor_scope(group: PairingGroup, count: int) -> Iterator[List[ZR]]:
    """
    Yield ``count`` fresh uniform non-zero scalars, wiped on exit.

    Index into the yielded list rather than unpacking it, so that no
    reference outlives the scope.

    Examples
    --------
    >>> with trapdoor_scope(group, 2) as t:
    ...     g_i = g_r ** t[0] * g_s ** t[1]
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    scalars = [random_nonzero(group) for _ in range(count)]
    try:
        yield scalars
    finally:
        _wipe(scalars, group)
        logger.debug("wiped %d trapdoor scalars", count)
