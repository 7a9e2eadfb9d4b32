from __future__ import annotations

import re

import pytest

from devtoolkit import codec
from devtoolkit.errors import (
    DecodeError,
    InvalidCharacter,
    InvalidEscape,
    InvalidPadding,
    InvalidUtf8,
)


class TestBase64:
    def test_encode_known_values(self) -> None:
        assert codec.base64_encode(b"") == ""
        assert codec.base64_encode(b"f") == "Zg=="
        assert codec.base64_encode(b"hello") == "aGVsbG8="
        assert codec.base64_encode("foobar") == "Zm9vYmFy"

    def test_encode_text_uses_utf8(self) -> None:
        assert codec.base64_encode("é") == "w6k="

    def test_decode_known_values(self) -> None:
        assert codec.base64_decode("aGVsbG8=") == b"hello"
        assert codec.base64_decode("Zm9vYmFy") == b"foobar"
        assert codec.base64_decode("") == b""

    def test_decode_accepts_missing_padding(self) -> None:
        assert codec.base64_decode("aGVsbG8") == b"hello"
        assert codec.base64_decode("Zg") == b"f"

    def test_decode_ignores_whitespace(self) -> None:
        assert codec.base64_decode(" aGVs\nbG8=\n") == b"hello"

    @pytest.mark.parametrize("text", ["aGVs*G8=", "aGVsbG8-", "aGVs_G8=", "ü"])
    def test_decode_rejects_foreign_characters(self, text: str) -> None:
        with pytest.raises(InvalidCharacter):
            codec.base64_decode(text)

    @pytest.mark.parametrize("text", ["YQ=a", "Y===", "YQ=", "A", "aGVsb", "YWJj="])
    def test_decode_rejects_bad_padding(self, text: str) -> None:
        with pytest.raises(InvalidPadding):
            codec.base64_decode(text)

    def test_errors_are_decode_errors(self) -> None:
        with pytest.raises(DecodeError):
            codec.base64_decode("!!!!")


class TestBase64Url:
    def test_encode_uses_url_alphabet_without_padding(self) -> None:
        assert codec.base64url_encode(b"\xfb\xff") == "-_8"
        assert codec.base64url_encode(b"hello") == "aGVsbG8"

    def test_decode(self) -> None:
        assert codec.base64url_decode("-_8") == b"\xfb\xff"
        assert codec.base64url_decode("eyJhbGciOiJIUzI1NiJ9") == b'{"alg":"HS256"}'

    def test_decode_tolerates_trailing_padding(self) -> None:
        assert codec.base64url_decode("-_8=") == b"\xfb\xff"

    @pytest.mark.parametrize("text", ["+/8", "ab/c", "a b"])
    def test_decode_rejects_standard_alphabet(self, text: str) -> None:
        with pytest.raises(InvalidCharacter):
            codec.base64url_decode(text)

    def test_decode_rejects_impossible_length(self) -> None:
        with pytest.raises(InvalidPadding):
            codec.base64url_decode("abcde")


class TestPercent:
    def test_unreserved_characters_pass_through(self) -> None:
        text = "AZaz09-_.~"
        assert codec.percent_encode(text) == text

    def test_reserved_and_non_ascii_are_escaped_uppercase(self) -> None:
        assert codec.percent_encode("a b/ü") == "a%20b%2F%C3%BC"
        assert codec.percent_encode("?&=+#") == "%3F%26%3D%2B%23"

    def test_output_alphabet(self) -> None:
        out = codec.percent_encode("héllo wörld! 你好 ~*'()")
        assert re.fullmatch(r"([A-Za-z0-9_.~-]|%[0-9A-F]{2})*", out)

    def test_decode(self) -> None:
        assert codec.percent_decode("%E4%BD%A0%E5%A5%BD") == "你好"
        assert codec.percent_decode("a%20b%2f") == "a b/"

    def test_decode_keeps_plus(self) -> None:
        assert codec.percent_decode("a+b") == "a+b"

    @pytest.mark.parametrize("text", ["%", "%4", "%zz", "abc%g1", "100%"])
    def test_decode_rejects_bad_escape(self, text: str) -> None:
        with pytest.raises(InvalidEscape):
            codec.percent_decode(text)

    @pytest.mark.parametrize("text", ["%FF", "%C3", "%C3%28"])
    def test_decode_rejects_invalid_utf8(self, text: str) -> None:
        with pytest.raises(InvalidUtf8):
            codec.percent_decode(text)


class TestHexHelpers:
    def test_to_hex_lowercase(self) -> None:
        assert codec.to_hex(b"\x00\xab\xff") == "00abff"

    def test_from_hex_strips_prefix_and_spaces(self) -> None:
        assert codec.from_hex("0x00 ab FF") == b"\x00\xab\xff"

    def test_from_hex_rejects_garbage(self) -> None:
        with pytest.raises(InvalidCharacter):
            codec.from_hex("zz")

    def test_to_bytes(self) -> None:
        assert codec.to_bytes(b"x") == b"x"
        assert codec.to_bytes(bytearray(b"x")) == b"x"
        assert codec.to_bytes("ü") == b"\xc3\xbc"
