# -*- coding: utf-8 -*-

import pkgutil
import importlib
import os

SRC_ROOT = os.path.join(os.path.dirname(__file__), os.path.pardir)

_all_checks = []

def check(func):
    """decorator to mark a function as a self-check entrypoint"""
    _all_checks.append(func)
    return func

def discover_checks():
    pkg_name = __name__[:__name__.rfind('.')]
    for loader, module_name, is_pkg in pkgutil.walk_packages(
            [SRC_ROOT], pkg_name + '.'):
        if not is_pkg:
            importlib.import_module(module_name)
    _all_checks.sort(key=lambda x: x.__name__)
    return _all_checks

def assert_eq(a, b, msg=None):
    if msg is not None:
        msg = '; {}'.format(msg)
    else:
        msg = ''
    assert a == b, 'assert_eq failed: a={!r} b={!r}{}'.format(a, b, msg)

def summarize_str(s):
    """summarize a string for display"""
    if isinstance(s, bytes):
        s = s.decode('utf-8')
    assert isinstance(s, str)
    if len(s) <= 20:
        return s
    return '{}...{}'.format(s[:10], s[-10:])


class CipherError(RuntimeError):
    """exception class for cipher algorithms"""


class InvalidArgumentError(CipherError, ValueError):
    """malformed input: wrong type, negative value, degenerate modulus or
    bad configuration"""


class NotInvertibleError(CipherError, ArithmeticError):
    """a has no multiplicative inverse modulo m"""

    a = None
    m = None
    gcd = None

    def __init__(self, a, m, gcd):
        super().__init__(
            '{} is not invertible modulo {}: gcd={}'.format(a, m, gcd))
        self.a = a
        self.m = m
        self.gcd = gcd


class PrimeGenerationFailure(CipherError):
    """no probable prime found within the candidate budget"""

    bits = None
    tries = None

    def __init__(self, bits, tries):
        super().__init__(
            'no {}-bit probable prime found in {} candidates'.format(
                bits, tries))
        self.bits = bits
        self.tries = tries


class KeyGenerationFailure(CipherError):
    """retry budget exhausted while picking distinct primes or a coprime
    public exponent"""
