from __future__ import annotations

import pytest

from srcbuffer import (
    BINARY,
    InvalidByteSequenceError,
    UnresolvableEncodingError,
    recognize_encoding,
    reencode,
    resolve_encoding,
)


def test_empty_input_has_no_encoding() -> None:
    assert recognize_encoding("") is None
    assert recognize_encoding(b"") is None


def test_magic_comment_on_first_line() -> None:
    assert recognize_encoding("# coding: utf-8\nputs 1\n") == "utf-8"
    assert recognize_encoding(b"# coding=koi8-r\n") == "koi8-r"
    assert recognize_encoding(b"# -*- coding: latin1 -*-\n") == "iso8859-1"
    assert recognize_encoding(b"# encoding: ascii\n") == "ascii"


def test_magic_comment_after_shebang_is_read_from_second_line() -> None:
    src = "#!/usr/bin/env x\n# coding: ISO-8859-1\n"
    assert recognize_encoding(src) == "iso8859-1"


def test_second_line_ignored_without_shebang() -> None:
    assert recognize_encoding(b"puts 1\n# coding: koi8-r\n") is None


def test_second_line_after_shebang_must_be_terminated() -> None:
    assert recognize_encoding(b"#!/bin/sh\n# coding: koi8-r") is None


def test_declaration_past_second_line_is_ignored() -> None:
    assert recognize_encoding(b"#!/bin/sh\nputs 1\n# coding: koi8-r\n") is None


def test_plain_text_has_no_encoding() -> None:
    assert recognize_encoding("plain text\nsecond line\n") is None


def test_bom_means_utf8() -> None:
    assert recognize_encoding(b"\xef\xbb\xbfputs 1\n") == "utf-8"
    assert recognize_encoding(b"\xef\xbb\xbf# coding: koi8-r\n") == "utf-8"


@pytest.mark.parametrize(
    "comment, expected",
    [
        ("# coding: utf-8-unix", "utf-8"),
        ("# coding: utf-8-dos", "utf-8"),
        ("# coding: iso-8859-15-mac", "iso8859-15"),
        ("# coding: utf8-mac", "utf-8"),
        ("# coding: binary", BINARY),
        ("# coding: ASCII-8BIT", BINARY),
    ],
)
def test_emacs_suffixes_and_aliases(comment: str, expected: str) -> None:
    assert recognize_encoding(comment + "\n") == expected


def test_unknown_encoding_is_an_error() -> None:
    with pytest.raises(UnresolvableEncodingError) as e:
        recognize_encoding(b"# coding: no-such-thing\n")
    assert "no-such-thing" in str(e.value)
    with pytest.raises(UnresolvableEncodingError) as e:
        recognize_encoding(b"# coding: base64\n")
    assert "base64" in str(e.value)


def test_resolve_encoding() -> None:
    assert resolve_encoding("UTF8") == "utf-8"
    assert resolve_encoding("Binary") == BINARY
    with pytest.raises(UnresolvableEncodingError):
        resolve_encoding("klingon")


def test_reencode_without_declaration_uses_declared_encoding() -> None:
    assert reencode("héllo\n".encode("utf-8")) == "héllo\n"
    assert reencode(b"caf\xe9\n", "latin-1") == "café\n"


def test_reencode_transcodes_detected_encoding() -> None:
    raw = "# coding: latin1\ncafé\n".encode("latin-1")
    assert reencode(raw) == "# coding: latin1\ncafé\n"


def test_reencode_binary_keeps_bytes() -> None:
    raw = b"# coding: binary\n\xff\xfe\x00\n"
    text = reencode(raw)
    assert len(text) == len(raw)
    assert text.encode("latin-1") == raw


def test_reencode_invalid_bytes() -> None:
    with pytest.raises(InvalidByteSequenceError):
        reencode(b"# coding: utf-8\n\xff\n")
    with pytest.raises(InvalidByteSequenceError):
        reencode(b"\xc3\x28")


def test_reencode_unknown_fallback_encoding() -> None:
    with pytest.raises(UnresolvableEncodingError):
        reencode(b"abc", "klingon")


def test_reencode_non_text_codec() -> None:
    with pytest.raises(UnresolvableEncodingError):
        reencode(b"# coding: base64\nabc\n")


def test_codec_that_rejects_all_input() -> None:
    assert recognize_encoding(b"# coding: undefined\n") == "undefined"
    with pytest.raises(InvalidByteSequenceError) as e:
        reencode(b"# coding: undefined\nputs 1\n")
    assert "undefined" in str(e.value)
