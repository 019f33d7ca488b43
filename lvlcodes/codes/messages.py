# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Human-readable descriptions for result codes.

One English sentence per member, suitable for showing to a user or putting
in a log line next to the raw code. LICENSED and LICENSED_OLD_KEY share a
description because users cannot act on the difference.
"""

from lvlcodes.codes.result_code import ResultCode

_DESCRIPTIONS: dict[ResultCode, str] = {
    ResultCode.LICENSED: "The application is licensed",
    ResultCode.NOT_LICENSED: "The application is not licensed for this user",
    ResultCode.LICENSED_OLD_KEY: "The application is licensed",
    ResultCode.ERROR_NOT_MARKET_MANAGED: "The package is not managed by Google Play",
    ResultCode.ERROR_SERVER_FAILURE: "The licensing server reported an internal failure",
    ResultCode.ERROR_OVER_QUOTA: (
        "The licensing server rejected the request because the quota was exceeded"
    ),
    ResultCode.ERROR_CONTACTING_SERVER: "The licensing server could not be reached",
    ResultCode.ERROR_INVALID_PACKAGE_NAME: (
        "The package name is not valid for this application"
    ),
    ResultCode.ERROR_NON_MATCHING_UID: (
        "The user could not be determined for this license check"
    ),
    ResultCode.GOOGLE_PLAY_SERVICE_CONNECTION_FAILED: (
        "Could not connect to Google Play services"
    ),
    ResultCode.RESPONSE_DATA_UNEXPECTEDLY_NULL: (
        "The license was granted but the response data was lost"
    ),
    ResultCode.ERROR_INVALID_PUBLIC_KEY: (
        "The public key used to verify licenses is invalid"
    ),
    ResultCode.ERROR_MISSING_PERMISSION: (
        "The permission required for license checks is missing"
    ),
    ResultCode.ERROR_INVALID_SERVER_RESPONSE: "The licensing server sent an invalid response",
    ResultCode.UNKNOWN_RESPONSE_CODE: (
        "The licensing server returned an unknown response code"
    ),
}


def describe(result: ResultCode) -> str:
    """Return the description for a result code."""
    return _DESCRIPTIONS[result]


def describe_code(raw: int) -> str:
    """Describe a raw integer, falling back to the unknown-code description."""
    return describe(ResultCode.from_code(raw))
