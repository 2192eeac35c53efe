#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group of points over a generic field.

The elliptic curve is the set of points (x, y)
that are solutions to a short Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in a field F.

The group is defined by the chord-and-tangent addition law.
The point at infinity is not represented:
adding two points with the same x-coordinate and different
y-coordinates (the 'vertical pair') is an error,
so is doubling a point with zero y-coordinate.
As a consequence, Point is an additive Operation with Inverse but no Identity:
only positive scalar multiplication is available.

A Point value is always on the curve: Point.new validates it,
Point.new_unsafe must be reserved for points already known to be valid
(e.g. curve generators), never for untrusted input.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

from ecelgamal.algebra import Field, Inverse, Op, Operation
from ecelgamal.alias import Octets
from ecelgamal.exceptions import ECElGamalTypeError, ECElGamalValueError
from ecelgamal.natural import Serializable
from ecelgamal.utils import bytes_from_octets

F = TypeVar("F", bound=Field)


def _y2(x: F, a: F, b: F, cf: Any) -> F:
    "Return x^3 + a*x + b."
    return x.cube(cf).add(a.mul(x, cf), cf).add(b, cf)


@dataclass(frozen=True)
class PointCfg(Generic[F]):
    """Curve configuration: coefficients, generator, and field configuration.

    The generator g is checked to be on the curve
    and the discriminant 4*a^3 + 27*b^2 to be non-zero.
    """

    a: F
    b: F
    g: "Point[F]"
    cf: Any

    def __post_init__(self) -> None:
        field = type(self.a)
        if not isinstance(self.b, field):
            raise ECElGamalTypeError("curve coefficients from different fields")
        d = self.a.cube(self.cf).mul(field.four(self.cf), self.cf)
        twenty_seven = field.three(self.cf).pow(3, self.cf)
        d = d.add(self.b.sqr(self.cf).mul(twenty_seven, self.cf), self.cf)
        if d == field.zero(self.cf):
            raise ECElGamalValueError("zero discriminant")
        if not self.g.is_on_curve(self):
            raise ECElGamalValueError(f"generator not on curve: {self.g}")

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {self.cf}"
        result += f"\n a   = {self.a}"
        result += f"\n b   = {self.b}"
        result += f"\n G   = {self.g}"
        return result

    @property
    def field(self) -> Type[F]:
        "The field type of the coordinates."
        return type(self.a)


_P = TypeVar("_P", bound="Point")


@dataclass(frozen=True)
class Point(Operation, Inverse, Serializable, Generic[F]):
    x: F
    y: F

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @classmethod
    def new(cls: Type[_P], x: F, y: F, cfg: PointCfg[F]) -> _P:
        "Return the point (x, y), which must be on the curve."
        Q = cls(x, y)
        if not Q.is_on_curve(cfg):
            raise ECElGamalValueError(f"point not on curve: {Q}")
        return Q

    @classmethod
    def new_unsafe(cls: Type[_P], x: F, y: F) -> _P:
        "Return the point (x, y), not checked to be on the curve."
        return cls(x, y)

    @classmethod
    def from_x(cls: Type[_P], x: F, cfg: PointCfg[F]) -> Optional[_P]:
        """Return a point with the given x-coordinate.

        None is returned if x^3 + a*x + b has no square root,
        i.e. if x is not a valid x-coordinate (about half of the field).
        """
        y = _y2(x, cfg.a, cfg.b, cfg.cf).sqrt(cfg.cf)
        if y is None:
            return None
        return cls.new(x, y, cfg)

    def is_on_curve(self, cfg: PointCfg[F]) -> bool:
        "Return True if y^2 = x^3 + a*x + b."
        return self.y.sqr(cfg.cf) == _y2(self.x, cfg.a, cfg.b, cfg.cf)

    @classmethod
    def op(cls: Type[_P], tag: Op, a: _P, b: _P, cfg: PointCfg[F]) -> _P:
        "Return the sum of two points, using the chord-and-tangent law."

        if tag is not Op.ADD:
            raise ECElGamalTypeError(f"unsupported curve group operation: {tag}")

        cf = cfg.cf
        x1, y1 = a.x, a.y
        x2, y2 = b.x, b.y
        if x1 == x2 and y1 != y2:
            raise ECElGamalValueError("vertical pair: no point at infinity")
        if a != b:
            lam = y2.sub(y1, cf).div(x2.sub(x1, cf), cf)
        else:
            if y1 == y1.zero(cf):
                raise ECElGamalValueError("vertical tangent: no point at infinity")
            # (3*x^2 + a) / (2*y)
            num = x1.three(cf).mul(x1.sqr(cf), cf).add(cfg.a, cf)
            lam = num.div(y1.two(cf).mul(y1, cf), cf)
        x3 = lam.sqr(cf).sub(x1.add(x2, cf), cf)
        y3 = lam.mul(x3.sub(x1, cf), cf).add(y1, cf).neg(cf)
        return cls.new(x3, y3, cfg)

    def inv(self: _P, tag: Op, cfg: PointCfg[F]) -> _P:
        if tag is not Op.ADD:
            raise ECElGamalTypeError(f"unsupported curve group operation: {tag}")
        return type(self)(self.x, self.y.neg(cfg.cf))

    def add(self: _P, other: _P, cfg: PointCfg[F]) -> _P:
        return self.op(Op.ADD, self, other, cfg)

    def neg(self: _P, cfg: PointCfg[F]) -> _P:
        return self.inv(Op.ADD, cfg)

    def mult(self: _P, n: int, cfg: PointCfg[F]) -> _P:
        "Return n*self, n being a positive scalar."
        return self.exp(n, Op.ADD, cfg)

    @classmethod
    def size(cls, cfg: PointCfg[F]) -> int:
        return 2 * cfg.field.size(cfg.cf)

    def serialize(self, cfg: PointCfg[F]) -> bytes:
        "Return the x-coordinate bytes followed by the y-coordinate bytes."
        return self.x.serialize(cfg.cf) + self.y.serialize(cfg.cf)

    @classmethod
    def deserialize(cls: Type[_P], data: Octets, cfg: PointCfg[F]) -> _P:
        data = bytes_from_octets(data, cls.size(cfg))
        half = len(data) // 2
        x = cfg.field.deserialize(data[:half], cfg.cf)
        y = cfg.field.deserialize(data[half:], cfg.cf)
        return cls.new(x, y, cfg)
