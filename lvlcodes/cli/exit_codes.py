# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI exit codes.

A numeric code that resolves to UNKNOWN_RESPONSE_CODE is still SUCCESS:
the lookup worked, the answer just happens to be "unknown".
"""

SUCCESS: int = 0
USER_ERROR: int = 1
CONFIG_ERROR: int = 2
RUNTIME_ERROR: int = 3
