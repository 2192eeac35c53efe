#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.mod_field` module."

from random import Random

import pytest

from ecelgamal.algebra import Op
from ecelgamal.curves import toy41
from ecelgamal.exceptions import (
    ECElGamalNotImplementedError,
    ECElGamalValueError,
)
from ecelgamal.mod_field import ModField, ModFieldCfg
from ecelgamal.natural import U8, U16, U64, U256

cf19 = ModFieldCfg(19, U8)


def F(v: int) -> ModField:
    return ModField.new(v, cf19)


def test_cfg() -> None:
    assert cf19.p_size == 1
    assert ModFieldCfg(0x144C3B27FF, U64).p_size == 5
    assert ModFieldCfg(2**256 - 2**32 - 977, U256).p_size == 32
    assert str(cf19) == "ModFieldCfg(19, U8)"

    with pytest.raises(ECElGamalValueError, match="invalid modulus: "):
        ModFieldCfg(1, U8)
    with pytest.raises(ECElGamalValueError, match="natural overflows U8: "):
        ModFieldCfg(257, U8)


def test_new() -> None:
    assert F(27) == F(8)
    assert F(19) == F(0)
    assert F(255).nat() == 255 % 19
    assert str(F(27)) == "8"
    big = ModField.new(0x0123456789, toy41.cf)
    assert str(big) == "01 23456789"

    with pytest.raises(ECElGamalValueError, match="natural overflows U8: "):
        F(256)


def test_vectors() -> None:
    assert F(7).add(F(13), cf19) == F(1)
    assert F(7).mul(F(13), cf19) == F(15)
    assert F(7).sub(F(13), cf19) == F(13)
    assert F(11).div(F(5), cf19) == F(6)
    assert F(11).reciprocal(cf19) == F(7)
    assert F(11).neg(cf19) == F(8)
    assert F(0).neg(cf19) == F(0)
    assert F(3).pow(0, cf19) == F(1)
    assert F(3).pow(3, cf19) == F(8)
    assert F(5).sqr(cf19) == F(6)
    assert F(5).cube(cf19) == F(11)


def test_small_constants() -> None:
    assert ModField.zero(cf19) == F(0)
    assert ModField.one(cf19) == F(1)
    assert ModField.two(cf19) == F(2)
    assert ModField.three(cf19) == F(3)
    assert ModField.four(cf19) == F(4)
    assert ModField.identity(Op.ADD, cf19) == F(0)
    assert ModField.identity(Op.MUL, cf19) == F(1)


def test_overflow_safe_addition() -> None:
    cf = ModFieldCfg(79, U8)
    assert ModField.new(11, cf).add(ModField.new(150, cf), cf) == ModField.new(3, cf)
    cf = ModFieldCfg(251, U8)
    assert ModField.new(110, cf).add(ModField.new(150, cf), cf) == ModField.new(9, cf)
    assert ModField.new(4, cf).add(ModField.new(255, cf), cf) == ModField.new(8, cf)

    # modulus equal to the natural maximum
    cf = ModFieldCfg(U16.max, U16)
    a = ModField.new(U16.max - 1, cf)
    assert a.add(a, cf) == ModField.new(U16.max - 2, cf)
    assert a.mul(a, cf) == ModField.new(1, cf)


def test_exhaustive_small_field() -> None:
    for a in range(19):
        for b in range(19):
            assert F(a).add(F(b), cf19) == F((a + b) % 19)
            assert F(a).sub(F(b), cf19) == F((a - b) % 19)
            assert F(a).mul(F(b), cf19) == F((a * b) % 19)
            if b:
                assert F(a).div(F(b), cf19).mul(F(b), cf19) == F(a)


def test_inverse() -> None:
    assert F(0).reciprocal(cf19) is None
    assert F(0).inv_nonzero(Op.MUL, cf19) is None
    with pytest.raises(ECElGamalValueError, match="no inverse for 0"):
        F(3).div(F(0), cf19)
    with pytest.raises(ECElGamalValueError, match="no inverse for 0 mod 19"):
        F(0).inv(Op.MUL, cf19)

    assert F(5).inv(Op.MUL, cf19) == F(4)
    assert F(5).inv_nonzero(Op.ADD, cf19) == F(14)

    # not a prime modulus: non coprime elements have no inverse
    cf = ModFieldCfg(21, U8)
    assert ModField.new(14, cf).reciprocal(cf) is None
    assert ModField.new(6, cf).reciprocal(cf) is None


def test_sqrt() -> None:
    squares = {i * i % 19 for i in range(1, 19)}
    for i in range(19):
        root = F(i).sqrt(cf19)
        if i in squares:
            assert root is not None
            assert root.sqr(cf19) == F(i)
        else:
            assert root is None

    # 13 = 1 (mod 4)
    cf13 = ModFieldCfg(13, U8)
    squares = {i * i % 13 for i in range(1, 13)}
    for i in range(1, 13):
        if i in squares:
            err_msg = "square root not implemented for modulus not equal to 3 mod 4"
            with pytest.raises(ECElGamalNotImplementedError, match=err_msg):
                ModField.new(i, cf13).sqrt(cf13)
        else:
            assert ModField.new(i, cf13).sqrt(cf13) is None


def test_div_circular() -> None:
    cf = toy41.cf
    rng = Random(1)
    for _ in range(100):
        a = ModField.random(rng, cf)
        b = ModField.random_nonzero(rng, cf)
        assert a.div(b, cf).mul(b, cf) == a, f"a: {a}, b: {b}"


def test_inv_circular() -> None:
    cf = toy41.cf
    rng = Random(1)
    for _ in range(100):
        a = ModField.random_nonzero(rng, cf)
        inverse = a.reciprocal(cf)
        assert inverse is not None
        assert inverse.mul(a, cf) == ModField.one(cf), f"a: {a}"


def test_sub_circular() -> None:
    cf = toy41.cf
    rng = Random(1)
    for _ in range(100):
        a = ModField.random(rng, cf)
        b = ModField.random(rng, cf)
        assert a.sub(b, cf).add(b, cf) == a, f"a: {a}, b: {b}"


def test_random() -> None:
    rng = Random(3)
    for _ in range(200):
        assert 0 <= ModField.random(rng, cf19).nat() < 19
        assert ModField.random_nonzero(rng, cf19) != F(0)


def test_serialization() -> None:
    cf = ModFieldCfg(0x144C3B27FF, U64)
    a = ModField.new(0x0102030405, cf)
    assert ModField.size(cf) == 8
    assert a.serialize(cf) == bytes.fromhex("0504030201000000")
    assert ModField.deserialize(a.serialize(cf), cf) == a
    assert ModField.from_base64(a.to_base64(cf), cf) == a

    # out of field values are reduced
    data = U64.to_bytes(0x144C3B27FF + 1)
    assert ModField.deserialize(data, cf) == ModField.one(cf)

    with pytest.raises(ECElGamalValueError, match="invalid size: "):
        ModField.deserialize(b"\x01\x02", cf)
    with pytest.raises(ECElGamalValueError, match="invalid base64 string: "):
        ModField.from_base64("not base64!", cf)
