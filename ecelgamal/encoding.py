#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Text to curve points encoding, and ElGamal message encryption.

A byte string is split in chunks of capacity(cfg) bytes,
i.e. the modulus byte length minus one reserved byte.
Each chunk becomes the low-order bytes of a little-endian x-coordinate,
then the reserved (most significant) byte is incremented
until x is a valid x-coordinate of the curve:
the encoding is deterministic, no randomness is involved.

Decoding takes back capacity(cfg) bytes from each x-coordinate,
stopping at the first null byte:
plaintext including null bytes is truncated.

Encrypted messages are transported as the base64 encoding of
the concatenated (C1, C2, C1, C2, ...) point serializations,
one pair per plaintext chunk.
"""

import logging
from typing import Iterable, List

from ecelgamal.alias import RandomSource, String
from ecelgamal.curve_group import Point, PointCfg
from ecelgamal.elgamal import PrivateKey, PublicKey
from ecelgamal.exceptions import ECElGamalValueError
from ecelgamal.mod_field import ModField
from ecelgamal.natural import Natural
from ecelgamal.utils import b64decode, b64encode

logger = logging.getLogger(__name__)


def capacity(cfg: PointCfg[ModField]) -> int:
    "Return the number of message bytes encoded in a single point."
    cap = cfg.cf.p_size - 1
    if cap < 1:
        raise ECElGamalValueError(f"modulus too small for encoding: {cfg.cf}")
    return cap


def _chunk_to_point(chunk: bytes, cfg: PointCfg[ModField]) -> Point[ModField]:
    cap = capacity(cfg)
    low = int.from_bytes(chunk, byteorder="little", signed=False)
    for padding in range(256):
        x = low + (padding << (8 * cap))
        if x >= cfg.cf.rem:
            break
        Q = Point.from_x(ModField.new(x, cfg.cf), cfg)
        if Q is not None:
            logger.debug("chunk %s encoded with padding %d", chunk.hex(), padding)
            return Q
    raise ECElGamalValueError(f"no curve point for chunk: {chunk.hex()}")


def text_to_points(text: String, cfg: PointCfg[ModField]) -> List[Point[ModField]]:
    "Return the curve points encoding the (utf-8 encoded) text."

    if isinstance(text, str):
        text = text.encode()
    cap = capacity(cfg)
    return [_chunk_to_point(text[i : i + cap], cfg) for i in range(0, len(text), cap)]


def points_to_text(points: Iterable[Point[ModField]], cap: int) -> str:
    "Return the text encoded by the x-coordinates of the points."

    mask = (1 << (8 * cap)) - 1
    result = b""
    for Q in points:
        chunk = (Q.x.nat() & mask).to_bytes(cap, byteorder="little", signed=False)
        # the first null byte terminates the chunk
        result += chunk.split(b"\x00", 1)[0]
    return result.decode()


def points_to_base64(points: Iterable[Point[ModField]], cfg: PointCfg[ModField]) -> str:
    "Return the base64 encoding of the concatenated point serializations."
    return b64encode(b"".join(Q.serialize(cfg) for Q in points))


def base64_to_points(data: String, cfg: PointCfg[ModField]) -> List[Point[ModField]]:
    "Return the points from their concatenated base64 serialization."

    data = b64decode(data)
    size = Point.size(cfg)
    if len(data) % size:
        err_msg = f"invalid size: {len(data)} bytes, not a multiple of {size}"
        raise ECElGamalValueError(err_msg)
    return [
        Point.deserialize(data[i : i + size], cfg) for i in range(0, len(data), size)
    ]


def encrypt_message_and_encode(
    key: PublicKey,
    msg: String,
    rng: RandomSource,
    cfg: PointCfg[ModField],
    nat: Natural,
) -> str:
    "Return the base64 encoded ElGamal encryption of the text message."

    encrypted: List[Point[ModField]] = []
    for M in text_to_points(msg, cfg):
        encrypted.extend(key.encrypt(M, rng, cfg, nat))
    return points_to_base64(encrypted, cfg)


def decode_message_and_decrypt(
    key: PrivateKey, msg_base64: String, cfg: PointCfg[ModField]
) -> str:
    "Return the text message from its base64 encoded ElGamal encryption."

    points = base64_to_points(msg_base64, cfg)
    if len(points) % 2:
        raise ECElGamalValueError(f"odd number of ciphertext points: {len(points)}")
    pairs = zip(points[0::2], points[1::2])
    return points_to_text((key.decrypt(pair, cfg) for pair in pairs), capacity(cfg))
