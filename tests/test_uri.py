import pytest
from query_string import DecodeError, decode_component, encode_component
from query_string.uri import to_text


def test_encode_component():
    assert encode_component("abcXYZ019") == "abcXYZ019"
    assert encode_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_component(" ") == "%20"
    assert encode_component("&=?#/+:,;@$") == "%26%3D%3F%23%2F%2B%3A%2C%3B%40%24"
    assert encode_component("é€") == "%C3%A9%E2%82%AC"
    assert encode_component("\U0001F600") == "%F0%9F%98%80"


def test_decode_component():
    assert decode_component("plain") == "plain"
    assert decode_component("a%20b") == "a b"
    assert decode_component("%c3%a9") == "é"
    assert decode_component("%F0%9F%98%80") == "\U0001F600"

    # "+" stays, literal non-ascii passes through
    assert decode_component("a+b") == "a+b"
    assert decode_component("é%20") == "é "


@pytest.mark.parametrize("text", ["%", "%2", "%zz", "a%2g", "%FF", "%C3", "%E0%A4%A"])
def test_decode_component_malformed(text):
    with pytest.raises(DecodeError) as e:
        decode_component(text)
    assert e.value.value == text


@pytest.mark.parametrize(
    "value, text",
    [
        ("s", "s"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (1.0, "1"),
        (-0.0, "0"),
        (0.1, "0.1"),
        (-2.5, "-2.5"),
        (100.0, "100"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (1e-5, "0.00001"),
        (1e-7, "1e-7"),
        (-1.5e-7, "-1.5e-7"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (None, ""),
    ],
)
def test_to_text(value, text):
    assert to_text(value) == text
