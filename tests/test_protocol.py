"""Tests for response envelope parsing."""

import json

import pytest

from bmcpage.page import protocol
from bmcpage.page.errors import ParseError, ShapeError
from bmcpage.page.protocol import parse_get_envelope, parse_mutation_outcome


def test_get_envelope_returns_first_body():
    assert parse_get_envelope('{"response":[{"x":1}]}') == {"x": 1}


def test_get_envelope_ignores_extra_bodies():
    raw = json.dumps({"response": [{"node": 1}, {"node": 2}]})
    assert parse_get_envelope(raw) == {"node": 1}


def test_get_envelope_invalid_json():
    with pytest.raises(ParseError):
        parse_get_envelope("<html>not json</html>")


@pytest.mark.parametrize("raw", ['{}', '{"response": []}', '{"response": {"x": 1}}', '[1, 2]'])
def test_get_envelope_bad_shape(raw):
    with pytest.raises(ShapeError):
        parse_get_envelope(raw)


def test_urlerr_short_circuits_without_decoding(monkeypatch):
    def boom(raw):
        raise AssertionError("should not decode")

    monkeypatch.setattr(protocol, "_decode", boom)
    assert parse_mutation_outcome("urlerr") == "err"


def test_mutation_ok():
    assert parse_mutation_outcome('{"power":[{"result":"ok"}]}') == "ok"


def test_mutation_failure_string():
    assert parse_mutation_outcome('{"power":[{"result":"failed"}]}') == "err"


def test_mutation_last_key_wins():
    assert parse_mutation_outcome('{"a":[{"result":"ok"}], "b":[{"result":"fail"}]}') == "err"
    assert parse_mutation_outcome('{"a":[{"result":"fail"}], "b":[{"result":"ok"}]}') == "ok"


def test_mutation_missing_result_is_err():
    assert parse_mutation_outcome('{"usb":[{"status":"done"}]}') == "err"


def test_mutation_empty_mapping_is_err():
    assert parse_mutation_outcome("{}") == "err"


def test_mutation_invalid_json():
    with pytest.raises(ParseError):
        parse_mutation_outcome("timeout")


@pytest.mark.parametrize("raw", ['[]', '{"a": []}', '{"a": "ok"}', '{"a": ["ok"]}'])
def test_mutation_bad_shape(raw):
    with pytest.raises(ShapeError):
        parse_mutation_outcome(raw)
