#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from textbook_rsa.utils import discover_checks, CipherError, summarize_str
from textbook_rsa.algo.asym import KeyGenParam, generate_keypair
from textbook_rsa.algo.numt import bytes2int, int2bytes, int2hex
from textbook_rsa.algo.rng import seeded

import argparse
import logging
import sys

logger = logging.getLogger('textbook_rsa.main')

def run_demo(args):
    param = KeyGenParam.from_env()
    if args.bits is not None:
        param.bits = args.bits
    rng = None
    if args.seed is not None:
        logger.warning('using a seeded, insecure random source')
        rng = seeded(args.seed)

    pub, priv = generate_keypair(rng=rng, param=param)
    logger.info('generated %d-bit modulus, e=%s', pub.n.bit_length(),
                summarize_str(str(pub.e)))

    cipher = pub(bytes2int(args.message.encode('utf-8')))
    print(int2hex(cipher))
    print(int2bytes(priv(cipher)).decode('utf-8'))

def run_checks(args):
    all_ch = discover_checks()
    ch = args.checks
    if not ch:
        ch = all_ch
    else:
        all_ch = {i.__name__: i for i in all_ch}
        unknown = [i for i in ch if i not in all_ch]
        if unknown:
            raise SystemExit('unknown checks: {}'.format(', '.join(unknown)))
        ch = [all_ch[i] for i in ch]

    for i in ch:
        print('Run {}'.format(i.__name__), end='', flush=True)
        ret = i()
        if ret:
            print(': ', end='')
            print(repr(ret), end='')
        print()

def main(argv=None):
    parser = argparse.ArgumentParser(description='textbook RSA demo')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    sub = parser.add_subparsers(dest='command')

    demo = sub.add_parser('demo', help='generate a key pair, encrypt and '
                          'decrypt a message')
    demo.add_argument('--bits', type=int,
                      help='bit length of each prime; default from '
                      'TEXTBOOK_RSA_BITS or 1024')
    demo.add_argument('--message', default='hello',
                      help='text to encrypt; it must encode to an integer '
                      'smaller than the modulus')
    demo.add_argument('--seed', type=int,
                      help='use a deterministic random source (insecure)')
    demo.set_defaults(func=run_demo)

    chk = sub.add_parser('check', help='run self checks')
    chk.add_argument('checks', nargs='*',
                     help='names of checks to run; leave empty for all checks')
    chk.set_defaults(func=run_checks)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.command is None:
        parser.print_help()
        return 2

    try:
        args.func(args)
    except (CipherError, AssertionError):
        logger.exception('{} failed'.format(args.command))
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
