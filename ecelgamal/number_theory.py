#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic on fixed-width naturals.

The functions here never produce an intermediate value
larger than the natural width maximum: they are the building blocks
of the ModField arithmetic, which cannot rely on a double-width type.
"""

from ecelgamal.exceptions import ECElGamalValueError


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two naturals.

    Euclid algorithm, using remainders only.
    gcd(0, 0) is 0 by convention.
    """

    if a < 0 or b < 0:
        raise ECElGamalValueError(f"negative input: {a}, {b}")
    while b:
        a, b = b, a % b
    return a


def mod_add(a: int, b: int, rem: int, max_: int) -> int:
    """Return (a + b) % rem without overflowing max_.

    a and b are naturals not greater than max_ (they do not have to be
    already reduced mod rem).
    If a + b would exceed max_, the sum is split as
    max_ + (b - (max_ - a)), with max_ reduced mod rem.
    """

    if not 0 < rem <= max_:
        raise ECElGamalValueError(f"invalid modulus: {rem}")
    if a > max_ - b:  # a + b > max_
        return ((max_ % rem) + (b - (max_ - a)) % rem) % rem
    return (a + b) % rem
