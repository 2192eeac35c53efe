#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular field over fixed-width naturals.

A ModField element wraps a natural value v, with 0 <= v < rem,
where the modulus rem is taken from the ModFieldCfg configuration
(together with the natural width used to store values).
rem is assumed to be prime: this is not checked.

No operation ever needs a natural larger than the width maximum:

* addition is overflow-safe (see number_theory.mod_add)
* multiplication is the additive exponentiation of a by b,
  i.e. a added to itself b times by repeated doubling
* the multiplicative inverse is v^(rem-2) (Fermat's little theorem)
* the square root is available only for rem = 3 (mod 4)
"""

from dataclasses import dataclass
from math import ceil
from typing import Optional, Type, TypeVar

from ecelgamal.algebra import DiscreteRoot, Field, Op
from ecelgamal.alias import Octets, RandomSource
from ecelgamal.exceptions import (
    ECElGamalNotImplementedError,
    ECElGamalValueError,
)
from ecelgamal.natural import Natural, Serializable
from ecelgamal.number_theory import gcd, mod_add
from ecelgamal.utils import hex_string, int_string


@dataclass(frozen=True)
class ModFieldCfg:
    "Modular field configuration: the modulus and the natural width."

    rem: int
    nat: Natural

    def __post_init__(self) -> None:
        self.nat.require(self.rem)
        if self.rem < 2:
            raise ECElGamalValueError(f"invalid modulus: {self.rem}")

    def __str__(self) -> str:
        return f"ModFieldCfg({int_string(self.rem)}, {self.nat})"

    @property
    def p_size(self) -> int:
        "Byte length of the modulus."
        return ceil(self.rem.bit_length() / 8)


_M = TypeVar("_M", bound="ModField")


@dataclass(frozen=True)
class ModField(Field, DiscreteRoot, Serializable):
    v: int

    @classmethod
    def new(cls: Type[_M], v: int, cfg: ModFieldCfg) -> _M:
        "Return the element v reduced mod rem."
        return cls(cfg.nat.require(v) % cfg.rem)

    def __str__(self) -> str:
        return hex_string(self.v) if self.v > 0xFFFFFFFF else str(self.v)

    def nat(self) -> int:
        return self.v

    @classmethod
    def op(cls: Type[_M], tag: Op, a: _M, b: _M, cfg: ModFieldCfg) -> _M:
        if tag is Op.ADD:
            return cls(mod_add(a.v, b.v, cfg.rem, cfg.nat.max))
        # no double-width product available: a + a + ... + a, b times
        return a.exp(b.v, Op.ADD, cfg)

    @classmethod
    def identity(cls: Type[_M], tag: Op, cfg: ModFieldCfg) -> _M:
        if tag is Op.ADD:
            return cls(0)
        return cls.new(1, cfg)

    def inv(self: _M, tag: Op, cfg: ModFieldCfg) -> _M:
        if tag is Op.ADD:
            return self.new(cfg.rem - self.v, cfg)
        inverse = self.inv_nonzero(tag, cfg)
        if inverse is None:
            err_msg = f"no inverse for {self} mod {int_string(cfg.rem)}"
            raise ECElGamalValueError(err_msg)
        return inverse

    def inv_nonzero(self: _M, tag: Op, cfg: ModFieldCfg) -> Optional[_M]:
        if tag is Op.ADD:
            return self.inv(tag, cfg)
        if gcd(cfg.rem, self.v) != 1:
            return None
        # Fermat's little theorem: v^(p-1) = 1 (mod p)
        return self.pow(cfg.rem - 2, cfg)

    def sqrt(self: _M, cfg: ModFieldCfg) -> Optional[_M]:
        """Return a square root of the element, or None if it has none.

        Euler's criterion is checked first;
        then the closed form v^((rem+1)/4) is used, valid for rem = 3 (mod 4).
        Other moduli are not supported.
        """

        if self.pow(cfg.rem >> 1, cfg) != self.one(cfg):
            return None
        if cfg.rem % 4 == 3:
            # (rem + 1) // 4, without overflowing when rem is the width maximum
            return self.pow((cfg.rem >> 2) + 1, cfg)
        err_msg = "square root not implemented for modulus not equal to 3 mod 4: "
        err_msg += int_string(cfg.rem)
        raise ECElGamalNotImplementedError(err_msg)

    @classmethod
    def random(cls: Type[_M], rng: RandomSource, cfg: ModFieldCfg) -> _M:
        return cls.new(cfg.nat.random(rng), cfg)

    @classmethod
    def random_nonzero(cls: Type[_M], rng: RandomSource, cfg: ModFieldCfg) -> _M:
        res = cls.random(rng, cfg)
        return res.add(cls.one(cfg), cfg) if res == cls.zero(cfg) else res

    @classmethod
    def size(cls, cfg: ModFieldCfg) -> int:
        return cfg.nat.size

    def serialize(self, cfg: ModFieldCfg) -> bytes:
        "Return the little-endian natural-width serialization."
        return cfg.nat.to_bytes(self.v)

    @classmethod
    def deserialize(cls: Type[_M], data: Octets, cfg: ModFieldCfg) -> _M:
        return cls.new(cfg.nat.from_bytes(data), cfg)
