#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecelgamal from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and NotImplementedError
from which the ecelgamal versions are derived.
"""


class ECElGamalValueError(ValueError):
    pass


class ECElGamalTypeError(TypeError):
    pass


class ECElGamalNotImplementedError(NotImplementedError):
    pass
