# -*- coding: utf-8 -*-

"""self checks runnable with ``main.py check``"""

from .utils import check, assert_eq, summarize_str, NotInvertibleError
from .algo.numt import bytes2int, int2bytes, int2hex, invmod, xgcd, primep
from .algo.asym import (PublicKey, PrivateKey, KeyGenParam, KeyPairGenerator,
                        generate_keypair, encrypt, decrypt)

import numpy as np
import gmpy2

import os

def _bits(small=128):
    if os.getenv('TEXTBOOK_RSA_BIGTEST'):
        return 1024
    return small

@check
def textbook_vector():
    p1, p2 = 61, 53
    n = p1 * p2
    phi = (p1 - 1) * (p2 - 1)
    assert_eq(n, 3233)
    assert_eq(phi, 3120)

    d = invmod(17, phi)
    assert_eq(d, 2753)
    assert_eq(17 * d % phi, 1)

    pub = PublicKey(17, n)
    priv = PrivateKey(d, n)
    assert_eq(encrypt(pub, 65), 2790)
    assert_eq(decrypt(priv, 2790), 65)

@check
def not_invertible():
    assert_eq(xgcd(6, 9)[0], 3)
    try:
        invmod(6, 9)
    except NotInvertibleError as exc:
        assert_eq(exc.gcd, 3)
    else:
        assert 0, 'invmod(6, 9) should fail'

@check
def hello_roundtrip():
    pub, priv = generate_keypair(_bits())
    msg = 'hello'.encode('utf-8')
    cipher = pub(bytes2int(msg))
    assert_eq(int2bytes(priv(cipher)), msg)
    return summarize_str(int2hex(cipher))

@check
def keypair_invariants():
    bits = _bits(64)
    gen = KeyPairGenerator()
    p1, p2 = gen.pick_primes(bits)
    assert p1 != p2
    assert primep(p1) and primep(p2)
    phi = (p1 - 1) * (p2 - 1)
    e, d = gen.pick_exponent(phi)
    assert 1 < e < phi and 0 < d < phi, (e, d, phi)
    assert_eq(int(gmpy2.gcd(e, phi)), 1)
    assert_eq(e * d % phi, 1)

@check
def boundary_messages():
    pub, priv = generate_keypair(_bits(64))
    n = pub.n
    assert_eq(encrypt(pub, 0), 0)
    assert_eq(decrypt(priv, 0), 0)
    assert_eq(priv(pub(n - 1)), n - 1)
    for i in range(8):
        msg = bytes2int(np.random.bytes(8)) % n
        assert_eq(priv(pub(msg)), msg)

@check
def cube_root_small_message():
    # with e=3 and m**3 < n there is no modular reduction at all, which is
    # why unpadded RSA must not be used as is
    param = KeyGenParam(public_exponent=3)
    pub, _ = generate_keypair(_bits(), param=param)
    msg = bytes2int(np.random.bytes(8))
    m, exact = gmpy2.iroot(pub(msg), 3)
    assert exact
    assert_eq(int(m), msg)
