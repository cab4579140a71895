import json
import logging

import pytest

from sharecheck import document
from sharecheck.errors import InvalidShareError, ShareFormatError
from sharecheck.shares import Share


def test_parse_mixed_bases(sample_document):
    parsed = document.parse_document(sample_document)
    assert (parsed.n, parsed.k) == (4, 3)
    assert parsed.shares == (
        Share("1", 1, 4),
        Share("2", 2, 7),
        Share("3", 3, 12),
        Share("6", 6, 39),
    )


def test_loads_from_text(sample_document):
    parsed = document.loads(json.dumps(sample_document))
    assert [s.id for s in parsed.shares] == ["1", "2", "3", "6"]


def test_decode_value_bases():
    assert document.decode_value("ff", 16) == 255
    assert document.decode_value("ZZ", 36) == 36 * 36 - 1
    assert document.decode_value("1" * 200, 2) == 2**200 - 1
    for bad_value, base in (("2", 2), ("", 10), ("1_0", 10), ("-5", 10)):
        with pytest.raises(ShareFormatError):
            document.decode_value(bad_value, base)
    with pytest.raises(ShareFormatError):
        document.decode_value("1", 37)
    with pytest.raises(ShareFormatError):
        document.decode_value("1", 1)


def test_n_mismatch_only_warns(sample_document, caplog):
    sample_document["keys"]["n"] = 10
    with caplog.at_level(logging.WARNING, logger="sharecheck.document"):
        parsed = document.parse_document(sample_document)
    assert len(parsed.shares) == 4
    assert "n=10" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        "[1, 2]",
        "{not json",
        '{"1": {"base": "10", "value": "4"}}',
        '{"keys": {"n": 1, "k": "x"}, "1": {"base": "10", "value": "4"}}',
        '{"keys": {"n": 1, "k": 1}, "one": {"base": "10", "value": "4"}}',
        '{"keys": {"n": 1, "k": 1}, "1": {"value": "4"}}',
        '{"keys": {"n": 1, "k": 1}, "1": "4"}',
    ],
)
def test_malformed_documents(payload):
    with pytest.raises(ShareFormatError):
        document.loads(payload)


def test_zero_share_id_rejected():
    with pytest.raises(InvalidShareError):
        document.parse_document({"keys": {"n": 1, "k": 1}, "0": {"base": "10", "value": "4"}})


def test_values_beyond_default_digit_limit():
    digits = "7" * 5000
    assert document.decode_value(digits, 10) == (10**5000 - 1) // 9 * 7

    payload = {"keys": {"n": 1, "k": 1}, "1": {"base": "36", "value": "z" * 4500}}
    parsed = document.parse_document(payload)
    assert parsed.shares[0].y == 36**4500 - 1


@pytest.mark.parametrize("share_id", ["1_0", " 1", "+1", "-2", "٣"])
def test_share_ids_must_be_plain_digits(share_id):
    with pytest.raises(ShareFormatError):
        document.parse_document({"keys": {"n": 1, "k": 1}, share_id: {"base": "10", "value": "4"}})


def test_non_ascii_digits_in_base_rejected():
    with pytest.raises(ShareFormatError):
        document.loads('{"keys": {"n": 1, "k": 1}, "1": {"base": "²", "value": "1"}}')
    with pytest.raises(ShareFormatError):
        document.decode_value("٣", 10)


def test_bytes_input():
    raw = b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "4"}}'
    assert document.loads(raw).shares == (Share("1", 1, 4),)
    with pytest.raises(ShareFormatError):
        document.loads(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xff"}}')
