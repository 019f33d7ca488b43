# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for result code descriptions."""

import pytest

from lvlcodes.codes import ResultCode, describe, describe_code


class TestDescribe:
    @pytest.mark.parametrize("result", list(ResultCode))
    def test_every_member_has_a_description(self, result: ResultCode) -> None:
        text = describe(result)
        assert isinstance(text, str)
        assert text.strip() != ""

    def test_both_licensed_variants_read_the_same(self) -> None:
        assert describe(ResultCode.LICENSED) == describe(ResultCode.LICENSED_OLD_KEY)

    def test_specific_texts(self) -> None:
        assert describe(ResultCode.ERROR_CONTACTING_SERVER) == (
            "The licensing server could not be reached"
        )
        assert describe(ResultCode.NOT_LICENSED) == (
            "The application is not licensed for this user"
        )


class TestDescribeCode:
    def test_known_code(self) -> None:
        assert describe_code(0x5) == describe(ResultCode.ERROR_OVER_QUOTA)

    def test_unknown_code_uses_unknown_description(self) -> None:
        assert describe_code(12345) == describe(ResultCode.UNKNOWN_RESPONSE_CODE)
