import base64
import logging
import re
import zlib

import pytest

from adapters.text_codec import decode_data, encode_data, try_decode

URL_SAFE = re.compile(r"[A-Za-z0-9_-]+")

SAMPLES = [
    "a",
    "hello world",
    "# Notes\n\n- one\n- two\n\n```py\nprint('hi')\n```\n",
    "讀取公開 GitHub Gist 內容",
    "emoji 🐕‍🦺 and accents: café, naïve",
    "symbols: ?&=#%/+ \t\r\n",
    "\x00 null byte",
    "a" * 10_000,
    "lorem ipsum dolor sit amet " * 500,
]


@pytest.mark.parametrize("text", SAMPLES, ids=lambda t: repr(t[:16]))
def test_roundtrip(text):
    token = encode_data(text)

    assert token
    assert URL_SAFE.fullmatch(token)
    assert decode_data(token) == text


def test_repetitive_text_gets_shorter():
    text = "lorem ipsum dolor sit amet " * 500

    assert len(encode_data(text)) < len(text) // 10


def test_token_is_raw_deflate_in_url_safe_base64():
    token = encode_data("hello world")

    raw = base64.urlsafe_b64decode(token + "=" * (-len(token) % 4))
    assert zlib.decompress(raw, -15) == b"hello world"
    assert "=" not in token


def test_empty_input_is_ambiguous_with_failure():
    # "" is both the encoding of "" and the failure sentinel
    assert encode_data("") == ""
    assert decode_data("") == ""
    assert decode_data("not-a-valid-token!!!") == ""

    # try_decode tells them apart
    assert try_decode("").ok is True
    assert try_decode("").text == ""
    assert try_decode("not-a-valid-token!!!").ok is False


def test_decode_invalid_token_does_not_raise(caplog):
    with caplog.at_level(logging.ERROR, logger="adapters.text_codec"):
        assert decode_data("not-a-valid-token!!!") == ""

    assert "Decoding failed" in caplog.text


@pytest.mark.parametrize(
    "token",
    [
        "abcde",  # impossible base64 length
        "AAAA",  # valid base64, not deflate
        "aGVsbG8",  # base64 of plain "hello"
        "a+b/",  # standard alphabet is rejected
    ],
)
def test_decode_garbage_returns_empty(token):
    assert decode_data(token) == ""
    assert try_decode(token).ok is False


def test_truncated_token_fails():
    token = encode_data("some text that compresses into several bytes " * 3)

    assert try_decode(token[: len(token) // 2]).ok is False


def test_decode_ignores_surrounding_whitespace():
    token = encode_data("hello")

    assert decode_data(f"  {token}\n") == "hello"


def test_encode_failure_returns_empty(caplog):
    with caplog.at_level(logging.ERROR, logger="adapters.text_codec"):
        assert encode_data(b"bytes are not text") == ""

    assert "Encoding failed" in caplog.text


@pytest.mark.parametrize("text", ["a\ud83d b", "\ud800", "tail \udfff", "\ud83d\ude00 pair kept apart"])
def test_lone_surrogates_roundtrip(text):
    token = encode_data(text)

    assert token
    assert decode_data(token) == text


def test_decoded_size_is_capped(caplog):
    token = encode_data("x" * 2_000)

    assert try_decode(token, max_bytes=2_000).text == "x" * 2_000
    with caplog.at_level(logging.ERROR, logger="adapters.text_codec"):
        assert try_decode(token, max_bytes=1_999).ok is False

    assert "exceeds" in caplog.text


def test_non_string_input_returns_empty():
    assert encode_data(None) == ""
    assert decode_data(None) == ""
