# -*- coding: utf-8 -*-

"""textbook RSA: key generation and raw modular-exponentiation
encryption/decryption"""

from .algo.asym import (PublicKey, PrivateKey, KeyGenParam, KeyPairGenerator,
                        generate_keypair, encrypt, decrypt)
from .algo.numt import gen_prime, primep, xgcd, invmod
from .algo.rng import SecureRandom
from .utils import (CipherError, InvalidArgumentError, NotInvertibleError,
                    PrimeGenerationFailure, KeyGenerationFailure)

__version__ = '0.1'
