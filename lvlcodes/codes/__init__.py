# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Result code registry: the enum, its lookups, and descriptions."""

from lvlcodes.codes.exceptions import InvalidNameError, ResultCodeError
from lvlcodes.codes.messages import describe, describe_code
from lvlcodes.codes.result_code import ResultCode, code_of, from_code, value_of

__all__ = [
    "InvalidNameError",
    "ResultCode",
    "ResultCodeError",
    "code_of",
    "describe",
    "describe_code",
    "from_code",
    "value_of",
]
