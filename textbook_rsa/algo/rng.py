# -*- coding: utf-8 -*-

"""random sources

A random source is any object with a ``bytes(n)`` method returning ``n``
random bytes. :class:`SecureRandom` is the default; the :mod:`numpy.random`
module, :class:`numpy.random.RandomState` and :class:`numpy.random.Generator`
all qualify as deterministic sources for tests.
"""

from ..utils import InvalidArgumentError

import numpy as np

import secrets

class SecureRandom:
    """random source backed by the OS CSPRNG"""

    def bytes(self, length):
        return secrets.token_bytes(length)

    def __repr__(self):
        return '{}()'.format(type(self).__name__)


def seeded(seed):
    """deterministic, not cryptographically secure source"""
    return np.random.RandomState(seed)

def get_rng(rng=None):
    """return ``rng`` itself, or a new :class:`SecureRandom` if it is None;
    there is no process-wide default instance"""
    if rng is None:
        return SecureRandom()
    if not callable(getattr(rng, 'bytes', None)):
        raise InvalidArgumentError(
            'random source must provide bytes(n): {!r}'.format(rng))
    return rng
