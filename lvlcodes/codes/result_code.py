# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Result codes reported by a license validation check.

The numeric values are part of the external contract with the licensing
server and must never be renumbered. Every member carries exactly one
integer, and no two members share one (enforced by @unique at import time).

Lookups go both ways:
  - name -> member:   ResultCode.value_of("LICENSED")
  - member -> number: ResultCode.LICENSED.code
  - number -> member: ResultCode.from_code(0x103)

Numeric lookups are total. Anything not in the table comes back as
UNKNOWN_RESPONSE_CODE, which is also a regular member with value 0x999.
Unknown is data here, not an exception.
"""

from enum import Enum, unique

from lvlcodes.codes.exceptions import InvalidNameError


@unique
class ResultCode(Enum):
    """Server response codes for a license check."""

    LICENSED = 0x0
    NOT_LICENSED = 0x1
    LICENSED_OLD_KEY = 0x2
    ERROR_NOT_MARKET_MANAGED = 0x3
    ERROR_SERVER_FAILURE = 0x4
    ERROR_OVER_QUOTA = 0x5
    ERROR_CONTACTING_SERVER = 0x101
    ERROR_INVALID_PACKAGE_NAME = 0x102
    ERROR_NON_MATCHING_UID = 0x103
    GOOGLE_PLAY_SERVICE_CONNECTION_FAILED = 0x851
    RESPONSE_DATA_UNEXPECTEDLY_NULL = 0x341
    ERROR_INVALID_PUBLIC_KEY = 0x501
    ERROR_MISSING_PERMISSION = 0x502
    ERROR_INVALID_SERVER_RESPONSE = 0x503
    UNKNOWN_RESPONSE_CODE = 0x999

    @property
    def code(self) -> int:
        """The raw integer the licensing server uses for this result."""
        return self.value

    @property
    def hex(self) -> str:
        """The code as upper-case hex with a 0x prefix, e.g. 0x103."""
        return f"0x{self.value:X}"

    @property
    def is_licensed(self) -> bool:
        """True when the server granted the license, with either key."""
        return self in _LICENSED

    @property
    def is_error(self) -> bool:
        """
        True when the check did not produce a definitive answer.

        LICENSED, NOT_LICENSED and LICENSED_OLD_KEY are answers from the
        server. Everything else means the check itself went wrong.
        """
        return self not in _ANSWERS

    @classmethod
    def value_of(cls, name: str) -> "ResultCode":
        """
        Return the member with exactly this symbolic name.

        Raises:
            InvalidNameError: If the name is not one of the fixed names.
        """
        if not isinstance(name, str):
            raise InvalidNameError(name)
        member = cls.__members__.get(name)
        if member is None:
            raise InvalidNameError(name)
        return member

    @classmethod
    def from_code(cls, code: int) -> "ResultCode":
        """
        Classify a raw integer from the licensing server.

        Exact match only. Any integer without a match, however large or
        negative, resolves to UNKNOWN_RESPONSE_CODE.

        Raises:
            TypeError: If code is not an integer at all.
        """
        if not isinstance(code, int):
            raise TypeError(f"Result code must be an int, got {type(code).__name__}")
        return _BY_CODE.get(code, cls.UNKNOWN_RESPONSE_CODE)


# Built once at import; the enum is immutable so these never change.
_BY_CODE: dict[int, ResultCode] = {member.value: member for member in ResultCode}

_LICENSED: frozenset[ResultCode] = frozenset(
    {ResultCode.LICENSED, ResultCode.LICENSED_OLD_KEY}
)

_ANSWERS: frozenset[ResultCode] = _LICENSED | {ResultCode.NOT_LICENSED}


def value_of(name: str) -> ResultCode:
    """Function form of ResultCode.value_of."""
    return ResultCode.value_of(name)


def code_of(result: ResultCode) -> int:
    """Return the fixed integer for a result code."""
    return result.code


def from_code(code: int) -> ResultCode:
    """Function form of ResultCode.from_code."""
    return ResultCode.from_code(code)
