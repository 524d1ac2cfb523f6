# -*- coding: utf-8 -*-

"""number theory helper routines"""

from ..utils import (InvalidArgumentError, NotInvertibleError,
                     PrimeGenerationFailure)
from .rng import get_rng

import gmpy2

import logging
import numbers

logger = logging.getLogger(__name__)

MR_ROUNDS = 50
"""default Miller-Rabin rounds; false positive probability <= 4**-50"""

PRIME_TRIES_PER_BIT = 40
"""candidate budget of :func:`gen_prime` per requested bit"""

def check_int(name, val, lower=None):
    """make sure val is an integer no less than lower

    :return: val as :class:`int`
    """
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise InvalidArgumentError(
            '{} must be an integer, got {!r}'.format(name, val))
    val = int(val)
    if lower is not None and val < lower:
        raise InvalidArgumentError(
            '{} must be at least {}, got {}'.format(name, lower, val))
    return val

def powmod(a, p, m):
    """compute a ** p % m"""
    return pow(a, p, m)

def int2hex(iv):
    """convert int value to hex"""
    return hex(iv)[2:]

def bytes2int(bv, endian='big'):
    """convert bytes to large non-negative int"""
    return int.from_bytes(bv, endian)

def int2bytes(iv, length=None, endian='big'):
    """convert large non-negative int to bytes"""
    assert isinstance(iv, int) and iv >= 0, iv
    if length is None:
        length = ceil_div(iv.bit_length(), 8)
    return iv.to_bytes(length, endian)

def ceil_div(a, b):
    """ceil(a / b) for int"""
    return (a + b - 1) // b

def gcd(a, b):
    return int(gmpy2.gcd(a, b))


def primep(n, rounds=MR_ROUNDS):
    """probabilistic primality test"""
    rounds = check_int('rounds', rounds, 1)
    if n < 2:
        return False
    return bool(gmpy2.is_prime(n, rounds))

def random_odd(bits, rng):
    """random odd integer of exactly given bits long"""
    nbytes = ceil_div(bits, 8)
    n = bytes2int(rng.bytes(nbytes)) >> (nbytes * 8 - bits)
    return n | (1 << (bits - 1)) | 1

def gen_prime(bits, rng=None, rounds=MR_ROUNDS, max_tries=None,
              requirement=None):
    """generate a probable prime of exactly given bits long

    :param rng: random source, see :mod:`.rng`; a fresh
        :class:`.rng.SecureRandom` is used if it is None
    :param rounds: Miller-Rabin rounds of the primality test
    :param max_tries: number of candidates to test before giving up; default
        to ``PRIME_TRIES_PER_BIT * bits``
    :param requirement: optional extra predicate the prime must satisfy
    :raise PrimeGenerationFailure: if no candidate passes within max_tries
    """
    bits = check_int('bits', bits, 2)
    rng = get_rng(rng)
    if max_tries is None:
        max_tries = PRIME_TRIES_PER_BIT * bits
    max_tries = check_int('max_tries', max_tries, 1)

    for nr_try in range(1, max_tries + 1):
        n = random_odd(bits, rng)
        if primep(n, rounds) and (requirement is None or requirement(n)):
            logger.debug('%d-bit probable prime found after %d candidates',
                         bits, nr_try)
            return n
    raise PrimeGenerationFailure(bits, max_tries)


def xgcd(a, b):
    """extended gcd by a single forward pass of Euclid's algorithm

    :return: g, s, t such that s * a + t * b == g == gcd(a, b)
    """
    r0, r1 = a, b
    s0, s1 = 1, 0
    t0, t1 = 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0

def invmod(a, m):
    """solve x such that a*x === 1 (mod m) and return the least
    non-negative x

    :raise NotInvertibleError: if gcd(a, m) != 1
    """
    a = check_int('a', a)
    m = check_int('m', m, 2)
    a %= m
    g, s, _ = xgcd(a, m)
    if g != 1:
        raise NotInvertibleError(a, m, g)
    return s % m
