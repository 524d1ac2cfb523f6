# -*- coding: utf-8 -*-

from textbook_rsa.algo.rng import SecureRandom, seeded, get_rng
from textbook_rsa.utils import InvalidArgumentError

import numpy as np
import pytest


def test_secure_random_bytes():
    data = SecureRandom().bytes(16)
    assert isinstance(data, bytes)
    assert len(data) == 16

def test_get_rng_makes_fresh_secure_source():
    a = get_rng()
    b = get_rng(None)
    assert isinstance(a, SecureRandom)
    assert a is not b

def test_get_rng_accepts_numpy_sources():
    state = np.random.RandomState(1)
    assert get_rng(state) is state
    gen = np.random.default_rng(1)
    assert get_rng(gen) is gen
    assert get_rng(np.random) is np.random

def test_get_rng_rejects_other_objects():
    with pytest.raises(InvalidArgumentError):
        get_rng(object())

def test_seeded_is_deterministic():
    assert seeded(5).bytes(32) == seeded(5).bytes(32)
    assert seeded(5).bytes(32) != seeded(6).bytes(32)
