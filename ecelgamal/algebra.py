#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Algebraic capabilities, parametrized by an explicit configuration.

Each capability takes the owning type's configuration object
(e.g. the modulus for a modular field, the curve coefficients for
a curve group) as the last argument of every operation,
instead of baking constants into the type.

The abstract operator (additive or multiplicative) is selected by
an Op tag, so that a single type can provide both, as a field does.

* Operation: closed commutative binary operation, and exponentiation
  by repeated squaring, undefined for zero exponent
* Identity: identity element
* Inverse: always-invertible elements
* InverseNonZero: inverse that may not exist
* Monoid: Operation + Identity, with exponentiation defined for zero too
* AbelianGroup: Monoid + Inverse
* DiscreteRoot: square root, existing only for some elements
* Field: additive AbelianGroup + multiplicative Monoid + InverseNonZero,
  deriving the usual field operations from the primitive ones
* GroupCfg: configuration with a distinguished element (generator)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Protocol, Type, TypeVar

from ecelgamal.exceptions import ECElGamalValueError


class Op(Enum):
    "Abstract operator tag."

    ADD = "+"
    MUL = "*"


_T = TypeVar("_T", bound="Operation")


class Operation(ABC):
    @classmethod
    @abstractmethod
    def op(cls: Type[_T], tag: Op, a: _T, b: _T, cfg: Any) -> _T:
        "Return a (tag) b."

    def exp(self: _T, n: int, tag: Op, cfg: Any) -> _T:
        """Return self (tag) self (tag) ... (tag) self, n times.

        Square-and-multiply: self^1 is self, otherwise
        with r = self^(n//2), self^n is r*r for even n, r*(r*self) for odd n.
        The halving recursion is unrolled from the most significant bit,
        as field multiplication nests a whole exponentiation
        inside each operation.
        With no identity element, n must be positive.
        """

        if n < 0:
            raise ECElGamalValueError(f"negative exponent: {n}")
        if n == 0:
            raise ECElGamalValueError("zero exponent without identity element")
        r = self
        for bit in bin(n)[3:]:
            if bit == "0":
                r = self.op(tag, r, r, cfg)
            else:
                r = self.op(tag, r, self.op(tag, r, self, cfg), cfg)
        return r


class Identity(ABC):
    @classmethod
    @abstractmethod
    def identity(cls, tag: Op, cfg: Any) -> Any:
        ...


class Inverse(ABC):
    @abstractmethod
    def inv(self, tag: Op, cfg: Any) -> Any:
        ...


class InverseNonZero(ABC):
    @abstractmethod
    def inv_nonzero(self, tag: Op, cfg: Any) -> Optional[Any]:
        "Return the inverse, or None if it does not exist."


class Monoid(Operation, Identity):
    def exp(self: _T, n: int, tag: Op, cfg: Any) -> _T:
        if n == 0:
            return self.identity(tag, cfg)
        return super().exp(n, tag, cfg)


class AbelianGroup(Monoid, Inverse):
    pass


class DiscreteRoot(ABC):
    @abstractmethod
    def sqrt(self, cfg: Any) -> Optional[Any]:
        "Return a square root, or None if it does not exist."


_F = TypeVar("_F", bound="Field")


class Field(AbelianGroup, InverseNonZero):
    """Field operations derived from the primitive ones.

    Add is the additive group operation, Mul the multiplicative monoid one;
    the multiplicative inverse of non-zero elements is InverseNonZero.
    """

    def add(self: _F, other: _F, cfg: Any) -> _F:
        return self.op(Op.ADD, self, other, cfg)

    def sub(self: _F, other: _F, cfg: Any) -> _F:
        return self.op(Op.ADD, self, other.neg(cfg), cfg)

    def mul(self: _F, other: _F, cfg: Any) -> _F:
        return self.op(Op.MUL, self, other, cfg)

    def div(self: _F, other: _F, cfg: Any) -> _F:
        "Return self / other; other must be invertible."
        inverse = other.reciprocal(cfg)
        if inverse is None:
            raise ECElGamalValueError(f"no inverse for {other}")
        return self.mul(inverse, cfg)

    @classmethod
    def zero(cls: Type[_F], cfg: Any) -> _F:
        return cls.identity(Op.ADD, cfg)

    @classmethod
    def one(cls: Type[_F], cfg: Any) -> _F:
        return cls.identity(Op.MUL, cfg)

    @classmethod
    def two(cls: Type[_F], cfg: Any) -> _F:
        one = cls.one(cfg)
        return one.add(one, cfg)

    @classmethod
    def three(cls: Type[_F], cfg: Any) -> _F:
        return cls.two(cfg).add(cls.one(cfg), cfg)

    @classmethod
    def four(cls: Type[_F], cfg: Any) -> _F:
        two = cls.two(cfg)
        return two.add(two, cfg)

    def pow(self: _F, n: int, cfg: Any) -> _F:
        return self.exp(n, Op.MUL, cfg)

    def reciprocal(self: _F, cfg: Any) -> Optional[_F]:
        return self.inv_nonzero(Op.MUL, cfg)

    def neg(self: _F, cfg: Any) -> _F:
        return self.inv(Op.ADD, cfg)

    def sqr(self: _F, cfg: Any) -> _F:
        return self.mul(self, cfg)

    def cube(self: _F, cfg: Any) -> _F:
        return self.sqr(cfg).mul(self, cfg)


class GroupCfg(Protocol):
    "Configuration of a group with a distinguished generator g."

    g: Any
