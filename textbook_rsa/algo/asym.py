# -*- coding: utf-8 -*-

"""textbook RSA: key generation and raw encryption/decryption

No padding is applied: messages are encrypted as bare integers, which must
be chunked or padded by the caller to stay below the modulus.
"""

from ..utils import (InvalidArgumentError, NotInvertibleError,
                     PrimeGenerationFailure, KeyGenerationFailure)
from .numt import MR_ROUNDS, powmod, gen_prime, invmod, gcd, check_int
from .rng import get_rng

import collections
import logging
import os

logger = logging.getLogger(__name__)


def _apply(exponent, modulus, x, what):
    exponent = check_int('exponent', exponent, 0)
    modulus = check_int('modulus', modulus, 2)
    x = check_int(what, x, 0)
    assert x < modulus, (
        '{} must be smaller than the modulus: {} >= {}'.format(
            what, x, modulus))
    return powmod(x, exponent, modulus)

def encrypt(key, message):
    """compute ``message ** e % n``

    ``message`` must satisfy ``0 <= message < n``. The upper bound is only
    checked while assertions are enabled; otherwise a larger message is
    silently reduced modulo n and decrypts to something else.

    :type key: :class:`PublicKey` or any ``(e, n)`` pair
    :raise InvalidArgumentError: on negative input or ``n <= 1``
    """
    e, n = key
    return _apply(e, n, message, 'message')

def decrypt(key, cipher):
    """compute ``cipher ** d % n``; ``0 <= cipher < n`` is required as in
    :func:`encrypt`

    :type key: :class:`PrivateKey` or any ``(d, n)`` pair
    """
    d, n = key
    return _apply(d, n, cipher, 'cipher')


class PublicKey(collections.namedtuple('PublicKey', ['e', 'n'])):
    """public key; calling it encrypts"""
    __slots__ = ()

    def __call__(self, message):
        return encrypt(self, message)


class PrivateKey(collections.namedtuple('PrivateKey', ['d', 'n'])):
    """private key; calling it decrypts"""
    __slots__ = ()

    def __call__(self, cipher):
        return decrypt(self, cipher)


def _env_int(environ, name, default):
    val = environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val, 0)
    except ValueError:
        raise InvalidArgumentError(
            'bad value for {}: {!r}'.format(name, val)) from None


class KeyGenParam:
    _fields = ('bits', 'rounds', 'key_tries', 'public_exponent',
               'exponent_bits')

    bits = 1024
    """bit length of each of the two primes; the modulus has about twice as
    many"""

    rounds = MR_ROUNDS
    """Miller-Rabin rounds used for every prime"""

    key_tries = 64
    """attempts to get two distinct primes, and to get an invertible public
    exponent"""

    public_exponent = None
    """fixed public exponent (e.g. 3 or 65537); a random probable prime below
    the totient is chosen if None"""

    exponent_bits = None
    """bit length of the random public exponent; default to one less than the
    bit length of the totient"""

    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            if k not in self._fields:
                raise InvalidArgumentError('unknown parameter: {}'.format(k))
            setattr(self, k, v)
        self.validate()

    @classmethod
    def from_env(cls, environ=None):
        """parameters with overrides from TEXTBOOK_RSA_* environment
        variables"""
        if environ is None:
            environ = os.environ
        self = cls()
        self.bits = _env_int(environ, 'TEXTBOOK_RSA_BITS', self.bits)
        self.rounds = _env_int(environ, 'TEXTBOOK_RSA_MR_ROUNDS', self.rounds)
        self.key_tries = _env_int(environ, 'TEXTBOOK_RSA_KEY_TRIES',
                                  self.key_tries)
        self.public_exponent = _env_int(
            environ, 'TEXTBOOK_RSA_PUBLIC_EXPONENT', self.public_exponent)
        return self.validate()

    def validate(self):
        """normalize the parameters to int in place

        :raise InvalidArgumentError: on a non-integer or out-of-range value
        """
        self.bits = check_int('bits', self.bits, 2)
        self.rounds = check_int('rounds', self.rounds, 1)
        self.key_tries = check_int('key_tries', self.key_tries, 1)
        if self.public_exponent is not None:
            self.public_exponent = check_int(
                'public_exponent', self.public_exponent, 2)
        if self.exponent_bits is not None:
            self.exponent_bits = check_int(
                'exponent_bits', self.exponent_bits, 2)
        return self

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(
            '{}={!r}'.format(k, getattr(self, k)) for k in self._fields))


class KeyPairGenerator:
    """makes (:class:`PublicKey`, :class:`PrivateKey`) pairs

    The primes and the totient only live inside :meth:`__call__`.
    """

    _param = None
    _rng = None

    def __init__(self, param=None, rng=None):
        if param is None:
            param = KeyGenParam()
        if not isinstance(param, KeyGenParam):
            raise InvalidArgumentError(
                'param must be a KeyGenParam, got {!r}'.format(param))
        self._param = param.validate()
        self._rng = get_rng(rng)

    def _gen_prime(self, bits):
        e = self._param.public_exponent
        requirement = None
        if e is not None:
            requirement = lambda p: gcd(e, p - 1) == 1
        try:
            return gen_prime(bits, self._rng, self._param.rounds,
                             requirement=requirement)
        except PrimeGenerationFailure as exc:
            raise KeyGenerationFailure(
                'failed to generate a {}-bit prime'.format(bits)) from exc

    def pick_primes(self, bits):
        """two distinct probable primes of given bits long"""
        bits = check_int('bits', bits, 2)
        p1 = self._gen_prime(bits)
        for nr_try in range(self._param.key_tries):
            p2 = self._gen_prime(bits)
            if p2 != p1:
                return p1, p2
            logger.debug('prime collision on try %d, regenerating', nr_try)
        raise KeyGenerationFailure(
            'no distinct {}-bit primes in {} tries'.format(
                bits, self._param.key_tries))

    def pick_exponent(self, phi):
        """choose the public exponent e and compute its inverse d modulo phi

        :return: e, d
        """
        phi = check_int('phi', phi, 3)
        e = self._param.public_exponent
        if e is not None:
            e = check_int('public_exponent', e, 2)
            if e >= phi:
                raise KeyGenerationFailure(
                    'public exponent {} is not below the totient'.format(e))
            try:
                return e, invmod(e, phi)
            except NotInvertibleError as exc:
                raise KeyGenerationFailure(
                    'public exponent {} is not coprime with the '
                    'totient'.format(e)) from exc

        ebits = self._param.exponent_bits
        if ebits is None:
            ebits = phi.bit_length() - 1
        if ebits < 2:
            raise KeyGenerationFailure(
                'totient {} leaves no room for a prime public '
                'exponent'.format(phi))
        for nr_try in range(self._param.key_tries):
            try:
                e = gen_prime(ebits, self._rng, self._param.rounds)
            except PrimeGenerationFailure as exc:
                raise KeyGenerationFailure(
                    'failed to generate the public exponent') from exc
            if e >= phi:
                logger.debug('exponent not below the totient, regenerating')
                continue
            try:
                d = invmod(e, phi)
            except NotInvertibleError:
                logger.debug('exponent %d divides the totient, regenerating',
                             e)
                continue
            return e, d
        raise KeyGenerationFailure(
            'no invertible public exponent in {} tries'.format(
                self._param.key_tries))

    def __call__(self, bits=None):
        if bits is None:
            bits = self._param.bits
        p1, p2 = self.pick_primes(bits)
        n = p1 * p2
        e, d = self.pick_exponent((p1 - 1) * (p2 - 1))
        logger.debug('generated %d-bit modulus', n.bit_length())
        return PublicKey(e, n), PrivateKey(d, n)


def generate_keypair(bits=None, rng=None, param=None):
    """generate a key pair whose primes are each ``bits`` long

    :return: (:class:`PublicKey`, :class:`PrivateKey`)
    :raise KeyGenerationFailure: if a retry budget is exhausted
    """
    return KeyPairGenerator(param, rng)(bits)
