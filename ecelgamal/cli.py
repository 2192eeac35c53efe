#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line interface.

Sub-commands:

* genkey: print a base64 private/public key pair
* encrypt <pubkey> <msg>: print the base64 encrypted message
* decrypt <prikey> <msg>: print the decrypted message
"""

import argparse
import logging
import secrets
import sys
from random import Random
from typing import List, Optional

from ecelgamal import __version__
from ecelgamal.alias import RandomSource
from ecelgamal.curves import CURVE_PARAMS, CURVES, curve_params
from ecelgamal.elgamal import PrivateKey, PublicKey, gen_keys
from ecelgamal.encoding import decode_message_and_decrypt, encrypt_message_and_encode

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecelgamal", description="Elliptic curve ElGamal text encryption"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-c",
        "--curve",
        default="secp256k1",
        choices=sorted(CURVE_PARAMS),
        help="curve configuration (default: secp256k1)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="seed for a reproducible (insecure) randomness source",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="increase log verbosity"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("genkey", help="Generate a pair of keys")
    encrypt = subparsers.add_parser("encrypt", help="Encrypt a message")
    encrypt.add_argument("pubkey", help="base64 public key")
    encrypt.add_argument("msg", help="Message to encrypt")
    decrypt = subparsers.add_parser("decrypt", help="Decrypt a message")
    decrypt.add_argument("prikey", help="base64 private key")
    decrypt.add_argument("msg", help="Message to decrypt")
    return parser


def _rng(seed: Optional[int]) -> RandomSource:
    if seed is None:
        return secrets.SystemRandom()
    logger.warning("using a seeded randomness source: not for real use")
    return Random(seed)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    level = logging.DEBUG if args.verbose > 1 else logging.INFO
    logging.basicConfig(
        level=level if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    params = curve_params(args.curve)
    cfg = CURVES[args.curve]
    rng = _rng(args.seed)
    logger.info("%s on curve %s", args.command, args.curve)

    try:
        if args.command == "genkey":
            pri, pub = gen_keys(rng, cfg, params.scalar)
            print(f"PRIVATE: {pri.to_base64()}")
            print(f"PUBLIC: {pub.to_base64(cfg)}")
        elif args.command == "encrypt":
            key = PublicKey.from_base64(args.pubkey, cfg)
            print(encrypt_message_and_encode(key, args.msg, rng, cfg, params.scalar))
        else:
            prikey = PrivateKey.from_base64(args.prikey, params.scalar)
            print(decode_message_and_decrypt(prikey, args.msg, cfg))
    except (ValueError, TypeError, NotImplementedError) as e:
        logger.debug("failure", exc_info=True)
        print(f"ecelgamal: error: {e}", file=sys.stderr)
        return 1
    return 0
