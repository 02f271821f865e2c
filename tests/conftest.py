"""Shared fixtures: one pairing group and a few keys per test session."""

import pytest

from gtcommit import setup, CommitmentKey, config

config.setup_logging()


@pytest.fixture(scope="session")
def pairing_params():
    """Initialize pairing group."""
    return setup('MNT224')


@pytest.fixture(scope="session")
def group(pairing_params):
    return pairing_params['group']


@pytest.fixture(scope="module")
def small_key(group):
    """Commitment key for vector length n=4."""
    return CommitmentKey.generate(4, group)


@pytest.fixture(scope="module")
def unit_key(group):
    """Commitment key for vector length n=1."""
    return CommitmentKey.generate(1, group)
