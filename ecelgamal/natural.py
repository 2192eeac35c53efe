#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Fixed-width natural numbers and the capability interfaces built on them.

Python int has no ceiling, but the arithmetic engine is written for
fixed-width unsigned integers: a Natural instance describes one such
type (its width, maximum value, byte layout, and how to draw a random
value from an injected RandomSource).
Values themselves are plain non-negative ints.

Serializable is the byte-serialization capability:
a fixed-length little-endian layout depending on a configuration,
plus the base64 transport encoding built on top of it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from ecelgamal.alias import Octets, RandomSource, String
from ecelgamal.exceptions import ECElGamalValueError
from ecelgamal.utils import b64decode, b64encode, bytes_from_octets, int_string


@dataclass(frozen=True)
class Natural:
    "Unsigned integer type of a given bit width."

    bits: int

    def __post_init__(self) -> None:
        if self.bits < 8 or self.bits % 8:
            err_msg = f"invalid natural width: {self.bits} bits"
            raise ECElGamalValueError(err_msg)

    def __str__(self) -> str:
        return f"U{self.bits}"

    @property
    def size(self) -> int:
        "Byte length of the serialized natural."
        return self.bits // 8

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def two(self) -> int:
        return 2

    @property
    def max(self) -> int:
        return (1 << self.bits) - 1

    def require(self, v: int) -> int:
        "Return v if it is representable in this width, raise otherwise."
        if v < 0:
            raise ECElGamalValueError(f"negative natural: {v}")
        if v > self.max:
            err_msg = f"natural overflows {self}: {int_string(v)}"
            raise ECElGamalValueError(err_msg)
        return v

    def random(self, rng: RandomSource) -> int:
        "Return a uniformly random value drawn from the injected source."
        return rng.getrandbits(self.bits)

    def random_nonzero(self, rng: RandomSource) -> int:
        v = self.random(rng)
        return v if v else self.one

    def to_bytes(self, v: int) -> bytes:
        return self.require(v).to_bytes(self.size, byteorder="little", signed=False)

    def from_bytes(self, data: Octets) -> int:
        data = bytes_from_octets(data, self.size)
        return int.from_bytes(data, byteorder="little", signed=False)


U8 = Natural(8)
U16 = Natural(16)
U32 = Natural(32)
U64 = Natural(64)
U128 = Natural(128)
U256 = Natural(256)
U512 = Natural(512)

NATURALS = {str(n): n for n in (U8, U16, U32, U64, U128, U256, U512)}


_S = TypeVar("_S", bound="Serializable")


class Serializable(ABC):
    """Fixed-length byte layout, depending on a configuration object."""

    @classmethod
    @abstractmethod
    def size(cls, cfg: Any) -> int:
        "Byte length of the serialization."

    @abstractmethod
    def serialize(self, cfg: Any) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls: Type[_S], data: Octets, cfg: Any) -> _S:
        ...

    def to_base64(self, cfg: Any) -> str:
        return b64encode(self.serialize(cfg))

    @classmethod
    def from_base64(cls: Type[_S], data: String, cfg: Any) -> _S:
        return cls.deserialize(b64decode(data), cfg)
