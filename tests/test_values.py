import pytest

from ezjson import JsonNumber, NumberConversionError, ValueKind, kind_of


def test_kind_of_classifies_decoded_values() -> None:
    assert kind_of(None) is ValueKind.NULL
    assert kind_of(False) is ValueKind.BOOLEAN
    assert kind_of(JsonNumber("1")) is ValueKind.NUMBER
    assert kind_of("x") is ValueKind.STRING
    assert kind_of([]) is ValueKind.ARRAY
    assert kind_of({}) is ValueKind.OBJECT


def test_kind_of_accepts_native_numbers_but_not_bool_as_number() -> None:
    assert kind_of(3) is ValueKind.NUMBER
    assert kind_of(0.5) is ValueKind.NUMBER
    assert kind_of(True) is ValueKind.BOOLEAN
    assert kind_of((1, 2)) is ValueKind.ARRAY


def test_kind_of_rejects_foreign_objects() -> None:
    with pytest.raises(TypeError, match="not a JSON value"):
        kind_of(object())


def test_value_kind_values_match_type_names() -> None:
    assert ValueKind("bool") is ValueKind.BOOLEAN
    assert ValueKind("array") is ValueKind.ARRAY


def test_json_number_keeps_text() -> None:
    number = JsonNumber("1.50")
    assert str(number) == "1.50"
    assert number.to_float() == 1.5


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("-17", -17),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
        ("0007", 7),
    ],
)
def test_json_number_to_int(text: str, expected: int) -> None:
    assert JsonNumber(text).to_int() == expected


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("12.34", "invalid syntax"),
        ("1e3", "invalid syntax"),
        ("", "invalid syntax"),
        ("9223372036854775808", "value out of range"),
        ("-9223372036854775809", "value out of range"),
        ("1" * 5000, "value out of range"),
    ],
)
def test_json_number_to_int_rejects(text: str, reason: str) -> None:
    with pytest.raises(NumberConversionError, match=reason) as exc_info:
        JsonNumber(text).to_int()
    assert exc_info.value.number == text
    assert exc_info.value.target == "int64"


def test_json_number_to_float() -> None:
    assert JsonNumber("12.34").to_float() == 12.34
    assert JsonNumber("-1e-3").to_float() == -0.001
    assert JsonNumber("42").to_float() == 42.0


def test_json_number_to_float_rejects_overflow_and_garbage() -> None:
    with pytest.raises(NumberConversionError, match="value out of range"):
        JsonNumber("1e400").to_float()
    with pytest.raises(NumberConversionError, match="invalid syntax"):
        JsonNumber("nan").to_float()
    with pytest.raises(NumberConversionError, match="invalid syntax"):
        JsonNumber("1_000").to_float()


def test_json_number_from_value() -> None:
    assert JsonNumber.from_value(5) == JsonNumber("5")
    assert JsonNumber.from_value(0.1) == JsonNumber("0.1")
    number = JsonNumber("2")
    assert JsonNumber.from_value(number) is number

    with pytest.raises(TypeError):
        JsonNumber.from_value(True)
    with pytest.raises(NumberConversionError, match="not finite"):
        JsonNumber.from_value(float("inf"))
