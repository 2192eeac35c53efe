#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.utils` module."

import pytest

from ecelgamal.exceptions import ECElGamalValueError
from ecelgamal.utils import (
    b64decode,
    b64encode,
    bytes_from_octets,
    hex_string,
    int_from_integer,
    int_string,
)


def test_int_from_integer() -> None:
    i = 0xDEADBEEF
    integers = (i, hex(i), hex(i)[2:], " " + hex(i).upper() + " ", b"\xde\xad\xbe\xef")
    for integer in integers:
        assert int_from_integer(integer) == i
    assert int_from_integer(-i) == -i
    assert int_from_integer(hex(-i)) == -i


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(0x1234) == "1234"
    assert hex_string(0x0123456789) == "01 23456789"
    assert hex_string("0x0123456789ABCDEF") == "01234567 89ABCDEF"
    with pytest.raises(ECElGamalValueError, match="negative integer: "):
        hex_string(-1)


def test_int_string() -> None:
    assert int_string(19) == "19"
    assert int_string(0xFFFFFFFF) == "4294967295"
    assert int_string(0x100000000) == "'01 00000000'"


def test_bytes_from_octets() -> None:
    assert bytes_from_octets("0a0b") == b"\x0a\x0b"
    assert bytes_from_octets(b"\x0a\x0b", 2) == b"\x0a\x0b"
    assert bytes_from_octets(b"\x0a\x0b", (1, 2)) == b"\x0a\x0b"
    with pytest.raises(ECElGamalValueError, match="invalid size: 2 bytes instead of 3"):
        bytes_from_octets(b"\x0a\x0b", 3)


def test_base64() -> None:
    assert b64encode(b"") == ""
    assert b64encode(b"Hello") == "SGVsbG8="
    assert b64decode("SGVsbG8=") == b"Hello"
    assert b64decode(" SGVsbG8=\n") == b"Hello"
    assert b64decode(b"SGVsbG8=") == b"Hello"
    for invalid in ("SGVsbG8", "SGVs*G8=", "SGVsbG8=!"):
        with pytest.raises(ECElGamalValueError, match="invalid base64 string: "):
            b64decode(invalid)
