# -*- coding: utf-8 -*-
# License: BSD-3-Clause
"""
conftest.py

Seeds the random number generators once per test session so that random
starting rotations and random test matrices are reproducible. Set the
``GOROT_SEED`` environment variable to replay a given session.
"""

import pytest
import numpy as np
import random
import os

@pytest.fixture(scope='session', autouse=True)
def global_rng_seed():
    """Fixture to set a globally controllable seed for all tests in the session."""
    _random_seed = os.environ.get("GOROT_SEED", np.random.randint(0, 2**32 - 1, dtype=np.int64))
    print(f"I: Seeding RNGs for all tests with {_random_seed}")
    np.random.seed(int(_random_seed))
    random.seed(int(_random_seed))
