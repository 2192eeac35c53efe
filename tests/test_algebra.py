#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.algebra` module."

from dataclasses import dataclass
from typing import Any

import pytest

from ecelgamal.algebra import Monoid, Op, Operation
from ecelgamal.exceptions import ECElGamalValueError


@dataclass(frozen=True)
class Semigroup(Operation):
    "Integers under addition, with no identity element."

    v: int

    @classmethod
    def op(cls, tag: Op, a: "Semigroup", b: "Semigroup", cfg: Any) -> "Semigroup":
        return cls(a.v + b.v)


@dataclass(frozen=True)
class AddMonoid(Monoid):
    "Integers under addition, counting the operations performed."

    v: int

    @classmethod
    def op(cls, tag: Op, a: "AddMonoid", b: "AddMonoid", cfg: Any) -> "AddMonoid":
        cfg.append(tag)
        return cls(a.v + b.v)

    @classmethod
    def identity(cls, tag: Op, cfg: Any) -> "AddMonoid":
        return cls(0)


@dataclass(frozen=True)
class MulMonoid(Monoid):
    "Integers under multiplication."

    v: int

    @classmethod
    def op(cls, tag: Op, a: "MulMonoid", b: "MulMonoid", cfg: Any) -> "MulMonoid":
        return cls(a.v * b.v)

    @classmethod
    def identity(cls, tag: Op, cfg: Any) -> "MulMonoid":
        return cls(1)


def test_operation_exp() -> None:
    s = Semigroup(7)
    assert s.exp(9, Op.ADD, None) == Semigroup(63)
    assert s.exp(6, Op.ADD, None) == Semigroup(42)
    assert s.exp(1, Op.ADD, None) == Semigroup(7)

    with pytest.raises(ECElGamalValueError, match="zero exponent without identity"):
        s.exp(0, Op.ADD, None)
    with pytest.raises(ECElGamalValueError, match="negative exponent: "):
        s.exp(-1, Op.ADD, None)


def test_monoid_exp() -> None:
    ops: list = []
    m = AddMonoid(7)
    assert m.exp(9, Op.ADD, ops) == AddMonoid(63)
    assert m.exp(6, Op.ADD, ops) == AddMonoid(42)
    assert m.exp(1, Op.ADD, ops) == AddMonoid(7)
    assert m.exp(0, Op.ADD, ops) == AddMonoid(0)

    for n in range(1, 300):
        assert m.exp(n, Op.ADD, ops) == AddMonoid(7 * n)

    # square-and-multiply: at most two operations per exponent bit
    ops.clear()
    n = 2**64 - 1
    assert m.exp(n, Op.ADD, ops) == AddMonoid(7 * n)
    assert len(ops) <= 2 * n.bit_length()
    assert set(ops) == {Op.ADD}


def test_mul_monoid_exp() -> None:
    m = MulMonoid(3)
    for n in range(50):
        assert m.exp(n, Op.MUL, None) == MulMonoid(3**n)
