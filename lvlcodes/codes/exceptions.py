# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Exceptions raised by the result code registry.

Kept apart from the enum so callers can catch registry failures without
importing the whole codes package.
"""


class ResultCodeError(Exception):
    """Base for all result code errors."""


class InvalidNameError(ResultCodeError, ValueError):
    """
    Raised when a symbolic name is not one of the fixed result code names.

    This is a programmer or configuration error. Numeric lookups never raise
    it, because unknown numbers resolve to UNKNOWN_RESPONSE_CODE.
    """

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown result code name: {name!r}")
