#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curve configurations.

Curve parameters are stored in the data/curves.json file,
keyed by curve name, with integers as hex-strings:

* secp256k1, the Bitcoin curve, with 256-bit field and scalars
  https://www.secg.org/sec2-v2.pdf
* toy41, a 41-bit modulus curve with 64-bit field and 128-bit scalars,
  small enough for fast tests

Every configuration is built once, at import time,
and never mutated afterwards.
"""

import json
from dataclasses import dataclass, field
from os import path
from typing import Dict

from dataclasses_json import DataClassJsonMixin, config

from ecelgamal.curve_group import Point, PointCfg
from ecelgamal.exceptions import ECElGamalValueError
from ecelgamal.mod_field import ModField, ModFieldCfg
from ecelgamal.natural import Natural
from ecelgamal.utils import int_from_integer

# integers as hex-strings in json
_HEX = config(encoder=hex, decoder=int_from_integer)


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    "Serializable parameters of a curve over a modular field."

    p: int = field(metadata=_HEX)
    a: int = field(metadata=_HEX)
    b: int = field(metadata=_HEX)
    gx: int = field(metadata=_HEX)
    gy: int = field(metadata=_HEX)
    field_bits: int = 256
    scalar_bits: int = 256

    @property
    def field_nat(self) -> Natural:
        return Natural(self.field_bits)

    @property
    def scalar(self) -> Natural:
        "Natural width of private keys and ephemeral scalars."
        return Natural(self.scalar_bits)

    def cfg(self) -> PointCfg[ModField]:
        "Return the curve configuration; the generator is validated."
        cf = ModFieldCfg(self.p, self.field_nat)
        g = Point.new_unsafe(ModField.new(self.gx, cf), ModField.new(self.gy, cf))
        return PointCfg(ModField.new(self.a, cf), ModField.new(self.b, cf), g, cf)


datadir = path.join(path.dirname(__file__), "data")
filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    _params = json.load(file_)

CURVE_PARAMS: Dict[str, CurveParams] = {
    ec_name: CurveParams.from_dict(_params[ec_name]) for ec_name in _params
}
CURVES: Dict[str, PointCfg[ModField]] = {
    ec_name: params.cfg() for ec_name, params in CURVE_PARAMS.items()
}

secp256k1 = CURVES["secp256k1"]
toy41 = CURVES["toy41"]


def curve_params(ec_name: str) -> CurveParams:
    "Return the parameters of a named curve."
    try:
        return CURVE_PARAMS[ec_name]
    except KeyError as e:
        err_msg = f"unknown curve: {ec_name!r}, "
        err_msg += f"available curves are {', '.join(sorted(CURVE_PARAMS))}"
        raise ECElGamalValueError(err_msg) from e
