# -*- coding: utf-8 -*-

import numpy as np
import pytest


class ConstRandom:
    """random source returning the same byte over and over"""

    def __init__(self, byte=0):
        self._byte = byte

    def bytes(self, length):
        return bytes([self._byte]) * length


@pytest.fixture
def rng():
    return np.random.RandomState(1234)

@pytest.fixture
def zero_rng():
    return ConstRandom(0)

@pytest.fixture
def ones_rng():
    return ConstRandom(0xff)
