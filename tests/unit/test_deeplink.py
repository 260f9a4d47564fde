"""
Deep-link URL Tests

Encode/decode of scheme, path and query values.
"""

import json

import pytest

from unionevent import DeepLinkError, build_url, parse_url
from unionevent.deeplink import DECODING_FAILURE, ENCODING_FAILURE, key_values_from_query, path_components
from unionevent.deeplink.__main__ import main

RECORD_INDEX = "f3e0ee97-c3f4-4404-beb5-a2a52633b9ab"
UNUSUAL = "a!@#$%^&*()_-+={[}]|\"\\/?:;.<>,|≈ßÍ∑🇬🇷♥️⚠️🔗🛠🤔Z"


def test_build_url_shape():
    url = build_url("com.example.app", ["Children"], {"index": RECORD_INDEX})

    assert url == f"com.example.app:///Children?index={RECORD_INDEX}"


def test_build_url_defaults():
    assert build_url("com.example.app") == "com.example.app:///"
    assert build_url("com.example.app", [], {}) == "com.example.app:///"


def test_round_trip_uuid_index():
    url = build_url("com.example.app", ["Children"], {"index": RECORD_INDEX})
    link = parse_url(url)

    assert link.scheme == "com.example.app"
    assert link.path == ["/", "Children"]
    assert link.query == {"index": RECORD_INDEX}


@pytest.mark.parametrize("value", [
    "a?b&c=d/e",
    UNUSUAL,
    "e\u0301 combining \u0915\u094d\u0937",
    "space and+plus",
    "",
])
def test_round_trip_reserved_and_unicode_values(value):
    key_values = {"recordindex": RECORD_INDEX, "something": value}
    link = parse_url(build_url("com.example.app", ["This", "That"], key_values))

    assert link.path == ["/", "This", "That"]
    assert link.query == key_values


def test_reserved_characters_are_escaped():
    url = build_url("com.example.app", ["a/b"], {"k&": "v=?#"})

    assert url == "com.example.app:///a%2Fb?k%26=v%3D%3F%23"
    assert parse_url(url).path == ["/", "a/b"]


def test_scheme_case_is_preserved():
    link = parse_url(build_url("Com.Example.OpenThings", ["Children"], {"index": "1"}))

    assert link.scheme == "Com.Example.OpenThings"


def test_decoded_path_can_be_rebuilt():
    link = parse_url("com.example.app:///This/That?x=1")

    assert build_url(link.scheme, link.path, link.query) == "com.example.app:///This/That?x=1"
    assert link.to_url() == "com.example.app:///This/That?x=1"


def test_matches():
    link = parse_url(build_url("com.example.app", ["Children"], {"index": "1"}))

    assert link.matches("com.example.app", ["Children"])
    assert not link.matches("com.example.app", ["Parents"])
    assert not link.matches("org.other", ["Children"])


def test_path_components():
    assert path_components("/This/That") == ["/", "This", "That"]
    assert path_components("/This/That/") == ["/", "This", "That"]
    assert path_components("/") == ["/"]
    assert path_components("") == ["/"]


def test_query_parsing_keeps_plus_and_blank_values():
    assert key_values_from_query("?a=1+2&b=&c") == {"a": "1+2", "b": "", "c": ""}
    assert key_values_from_query("a=1&a=2") == {"a": "2"}
    assert key_values_from_query("") == {}


def test_encoding_failure_marker():
    url = build_url("com.example.app", None, {"bad": "\ud800"})

    assert url.endswith(f"bad={ENCODING_FAILURE}")
    assert parse_url(url).query == {"bad": DECODING_FAILURE}


def test_decoding_failure_marker():
    assert parse_url("com.example.app:///?bad=%FF").query == {"bad": DECODING_FAILURE}


def test_missing_scheme_raises():
    with pytest.raises(DeepLinkError):
        parse_url("/just/a/path")
    with pytest.raises(ValueError):
        parse_url("no scheme here")


def test_cli_build_and_parse(capsys):
    assert main(["build", "com.example.app", "Children", "-q", f"index={RECORD_INDEX}"]) == 0
    url = capsys.readouterr().out.strip()
    assert url == f"com.example.app:///Children?index={RECORD_INDEX}"

    assert main(["parse", url]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["path"] == ["/", "Children"]
    assert parsed["query"] == {"index": RECORD_INDEX}


def test_cli_parse_error(capsys):
    assert main(["parse", "nothing"]) == 2
    assert "No scheme" in capsys.readouterr().err
