import pytest

from pwpulse.json import JsonObject, JsonParseError, JsonType, parse


@pytest.mark.parametrize(
    "text, kind, value",
    [
        ("null", JsonType.NULL, None),
        ("true", JsonType.BOOL, True),
        ("false", JsonType.BOOL, False),
        ("42", JsonType.INT, 42),
        ("-17", JsonType.INT, -17),
        ("0", JsonType.INT, 0),
        ("2147483647", JsonType.INT, 2147483647),
        ("-2147483648", JsonType.INT, -2147483648),
        ("1.5", JsonType.DOUBLE, 1.5),
        ("-0.25", JsonType.DOUBLE, -0.25),
        ('"hello"', JsonType.STRING, "hello"),
        ("  \t\n 7 \r\n", JsonType.INT, 7),
    ],
)
def test_scalars(text, kind, value):
    result = parse(text)
    assert result.type is kind
    assert result.value == value


def test_exponent_forms():
    assert parse("2e3").value == pytest.approx(2e3)
    assert parse("2E+3").value == pytest.approx(2e3)
    assert parse("25e-1").value == pytest.approx(25e-1)
    assert parse("1.5e2").type is JsonType.DOUBLE


def test_string_escapes():
    result = parse(r'"a\"b\\c\/d\be\ff\ng\rh\ti"')
    assert result.value == 'a"b\\c/d\be\ff\ng\rh\ti'


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("[")


def test_array_access():
    result = parse("[1, 2.5, \"x\", null, [true]]")
    assert result.type is JsonType.ARRAY
    assert len(result) == 5
    assert result.item(0).value == 1
    assert result.item(1).value == 2.5
    assert result.item(2).value == "x"
    assert result.item(3).type is JsonType.NULL
    assert result.item(4).item(0).value is True


def test_empty_and_trailing_comma_arrays():
    assert len(parse("[]")) == 0
    assert len(parse("[ ]")) == 0
    assert len(parse("[1,]")) == 1


def test_item_out_of_range():
    with pytest.raises(IndexError):
        parse("[1]").item(3)


def test_object_access():
    result = parse('{ "a" : 1 , "b": {"c": "d"}, "e": [1, 2] }')
    assert result.type is JsonType.OBJECT
    assert len(result) == 3
    assert result.member("a").value == 1
    assert result.member("b").member("c").value == "d"
    assert len(result.member("e")) == 2
    assert result.member("missing") is None


def test_duplicate_keys_first_wins():
    result = parse('{"k": 1, "k": 2}')
    assert result.member("k").value == 1
    assert len(result) == 2


def test_wrong_type_access():
    with pytest.raises(TypeError):
        parse("[1]").member("a")
    with pytest.raises(TypeError):
        parse('{"a": 1}').item(0)
    with pytest.raises(TypeError):
        len(parse("5"))


def test_nesting_limit():
    assert len(parse("[" * 21 + "]" * 21)) == 1
    with pytest.raises(JsonParseError):
        parse("[" * 22 + "]" * 22)


def test_nul_terminates_input():
    assert parse("12\0garbage").value == 12


def test_equal_scalars():
    assert parse("null").equal(parse(" null "))
    assert parse("true").equal(parse("true"))
    assert not parse("true").equal(parse("false"))
    assert parse("3").equal(parse("3"))
    assert not parse("3").equal(parse("3.0"))
    assert parse('"s"').equal(parse('"s"'))
    assert not parse('"s"').equal(parse('"t"'))


def test_equal_double_tolerance():
    assert parse("1.0000001").equal(parse("1.0"))
    assert not parse("1.1").equal(parse("1.0"))


def test_equal_arrays_are_ordered():
    assert parse("[1, 2]").equal(parse("[1,2]"))
    assert not parse("[1, 2]").equal(parse("[2, 1]"))
    assert not parse("[1, 2]").equal(parse("[1]"))


def test_equal_objects_ignore_order():
    a = parse('{"a": 1, "b": [true]}')
    b = parse('{"b": [true], "a": 1}')
    assert a.equal(b)
    assert a == b
    assert not a.equal(parse('{"a": 1}'))
    assert not a.equal(parse('{"a": 1, "c": [true]}'))


def test_eq_operator_with_other_types():
    assert parse("1") == JsonObject(JsonType.INT, 1)
    assert (parse("1") == 1) is False