"""Shared fixtures for exactpoly tests."""

import random
import pytest
from exactpoly.rational import Rational


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (large degree)")


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_rationals(rng):
    """10 random nonzero-denominator rationals with large parts."""
    out = []
    for _ in range(10):
        den = rng.randint(1, 2**80) * rng.choice([1, -1])
        out.append(Rational(rng.randint(-2**100, 2**100), den))
    return out


@pytest.fixture
def quadratic_problem():
    """x^2 + 3 sampled at 1, 2, 3 and checked at 6 (39 = '213' base 4)."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def large_problem():
    """Degree-6 problem with values far beyond 64 bits in mixed radices."""
    return {
        "keys": {"n": 10, "k": 7},
        "1": {"base": "6", "value": "13444211440455345511"},
        "2": {"base": "15", "value": "aed7015a346d635"},
        "3": {"base": "15", "value": "6aeeb69631c227c"},
        "4": {"base": "16", "value": "e1b5e05623d881f"},
        "5": {"base": "8", "value": "316034514573652620673"},
        "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
        "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
        "8": {"base": "6", "value": "20220554335330240002224253"},
        "9": {"base": "12", "value": "45153788322a1255483"},
        "10": {"base": "7", "value": "1101613130313526312514143"},
    }
