import pytest

from mandelbrot import MalformedInputError, parse_bounds, parse_complex, parse_pair


@pytest.mark.parametrize(
    "text, separator, kind, expected",
    [
        ("10,20", ",", int, (10, 20)),
        ("0.5x1.5", "x", float, (0.5, 1.5)),
        ("-3,4", ",", int, (-3, 4)),
    ],
)
def test_parse_pair(text, separator, kind, expected) -> None:
    assert parse_pair(text, separator, kind) == expected


@pytest.mark.parametrize(
    "text, separator, kind",
    [
        ("", ",", int),
        ("10,", ",", int),
        (",10", ",", int),
        ("10,20xy", ",", int),
        ("0.5x", "x", float),
        ("10 20", ",", int),
        (" 10,20", ",", int),
        ("1.5,2", ",", int),
        ("1_0,2", ",", int),
        ("0.5x1_5.0", "x", float),
    ],
)
def test_parse_pair_rejects(text, separator, kind) -> None:
    with pytest.raises(MalformedInputError):
        parse_pair(text, separator, kind)


def test_malformed_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_pair("10,", ",")


def test_parse_complex() -> None:
    assert parse_complex("1.25,-0.0625") == complex(1.25, -0.0625)
    assert parse_complex("-2.0,1") == complex(-2.0, 1.0)


def test_parse_complex_rejects() -> None:
    with pytest.raises(MalformedInputError, match="malformed value"):
        parse_complex(",-0.0625")


def test_parse_bounds() -> None:
    assert parse_bounds("1280x960") == (1280, 960)


@pytest.mark.parametrize("text", ["0x10", "10x0", "-4x3", "1280x", "1280,960"])
def test_parse_bounds_rejects(text) -> None:
    with pytest.raises(MalformedInputError):
        parse_bounds(text)
