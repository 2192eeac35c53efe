#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal asymmetric encryption over an additive group.

The scheme is generic: it works for any additive group type P
(an Operation with Inverse, i.e. providing op, exp, and inv for Op.ADD)
whose configuration exposes the generator g.
The elliptic curve Point is the intended group.

* key generation: private scalar d, public point Q = d*G
* encryption of the group element M:
  ephemeral scalar t, ciphertext (C1, C2) = (t*G, t*Q + M)
* decryption: M = C2 - d*C1, as d*C1 = d*t*G = t*Q

Scalars are drawn non-zero from the injected RandomSource,
with the natural width chosen by the caller
(usually wider than the field, as a larger keyspace).
"""

from dataclasses import dataclass
from typing import Any, Tuple, Type, TypeVar

from ecelgamal.algebra import GroupCfg, Op
from ecelgamal.alias import RandomSource, String
from ecelgamal.natural import Natural
from ecelgamal.utils import b64decode, b64encode

P = TypeVar("P")

Ciphertext = Tuple[P, P]


@dataclass(frozen=True)
class PrivateKey:
    pri: int
    nat: Natural

    def __post_init__(self) -> None:
        self.nat.require(self.pri)

    def decrypt(self, ciphertext: Ciphertext, cfg: GroupCfg) -> P:
        "Return the plaintext group element: C2 - pri*C1."
        c1, c2 = ciphertext
        shared = c1.exp(self.pri, Op.ADD, cfg)
        return c2.op(Op.ADD, c2, shared.inv(Op.ADD, cfg), cfg)

    def serialize(self) -> bytes:
        "Return the fixed-length little-endian scalar."
        return self.nat.to_bytes(self.pri)

    def to_base64(self) -> str:
        return b64encode(self.serialize())

    @classmethod
    def from_base64(cls, data: String, nat: Natural) -> "PrivateKey":
        return cls(nat.from_bytes(b64decode(data)), nat)


_K = TypeVar("_K", bound="PublicKey")


@dataclass(frozen=True)
class PublicKey:
    pub: Any

    def encrypt(
        self, msg: P, rng: RandomSource, cfg: GroupCfg, nat: Natural
    ) -> Ciphertext:
        "Return the (C1, C2) ciphertext of the msg group element."
        t = nat.random_nonzero(rng)
        # C1 = t*G
        c1 = cfg.g.exp(t, Op.ADD, cfg)
        # C2 = t*Q + msg
        c2 = msg.op(Op.ADD, self.pub.exp(t, Op.ADD, cfg), msg, cfg)
        return c1, c2

    def serialize(self, cfg: GroupCfg) -> bytes:
        return self.pub.serialize(cfg)

    def to_base64(self, cfg: GroupCfg) -> str:
        return b64encode(self.serialize(cfg))

    @classmethod
    def from_base64(cls: Type[_K], data: String, cfg: GroupCfg) -> _K:
        "Return the public key; the group element is validated."
        return cls(type(cfg.g).deserialize(b64decode(data), cfg))


def gen_keys(
    rng: RandomSource, cfg: GroupCfg, nat: Natural
) -> Tuple[PrivateKey, PublicKey]:
    "Return a random (private, public) key pair, with pri of the given width."
    pri = nat.random_nonzero(rng)
    pub = cfg.g.exp(pri, Op.ADD, cfg)
    return PrivateKey(pri, nat), PublicKey(pub)
