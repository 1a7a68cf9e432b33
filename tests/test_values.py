import pytest

from gridcsv.values import I64_MAX, I64_MIN, TypedValue, ValueKind, resolve, resolve_rows


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("-7", -7),
    ("0", 0),
    ("+5", 5),
    ("007", 7),
    ("9223372036854775807", I64_MAX),
    ("-9223372036854775808", I64_MIN),
])
def test_integer_literals(text, expected):
    v = resolve(text)
    assert v.kind is ValueKind.INTEGER
    assert v.value == expected
    assert isinstance(v.value, int)


@pytest.mark.parametrize("text, expected", [
    ("123.45", 123.45),
    ("-0.67", -0.67),
    ("1.23e-4", 0.000123),
    ("3.14159", 3.14159),
    (".5", 0.5),
    ("5.", 5.0),
    ("1E3", 1000.0),
])
def test_float_literals(text, expected):
    v = resolve(text)
    assert v.kind is ValueKind.FLOAT
    assert v.value == expected


def test_integer_beyond_64_bits_is_float():
    v = resolve("99999999999999999999")
    assert v.kind is ValueKind.FLOAT
    assert v.value == 1e20
    assert resolve("9223372036854775808").kind is ValueKind.FLOAT


def test_very_long_digit_string_does_not_fail():
    assert resolve("1" * 5000).kind is ValueKind.STRING


def test_zero_padded_integer_beyond_int_digit_limit():
    assert resolve("0" * 5000 + "1") == TypedValue(ValueKind.INTEGER, 1)
    assert resolve("-" + "0" * 5000 + "42") == TypedValue(ValueKind.INTEGER, -42)
    assert resolve("0" * 5000) == TypedValue(ValueKind.INTEGER, 0)


@pytest.mark.parametrize("text", ["NaN", "nan", "Infinity", "-Infinity", "inf", "1e400"])
def test_non_finite_stays_string(text):
    assert resolve(text) == TypedValue(ValueKind.STRING, text)


@pytest.mark.parametrize("text", [
    "hello", "123abc", "true", "1_000", " 42", "42 ", "0x1A", "1.5.2", "-", "e5", "١٢",
])
def test_non_numeric_text_stays_string(text):
    v = resolve(text)
    assert v.kind is ValueKind.STRING
    assert v.value == text


def test_empty_field_is_empty_string():
    assert resolve("") == TypedValue(ValueKind.STRING, "")


def test_to_native():
    assert resolve("3").to_native() == 3
    assert resolve("x").to_native() == "x"


def test_resolve_rows_keeps_shape():
    out = resolve_rows([["a", "1"], ["2.5", ""]])
    assert [[v.kind for v in row] for row in out] == [
        [ValueKind.STRING, ValueKind.INTEGER],
        [ValueKind.FLOAT, ValueKind.STRING],
    ]
