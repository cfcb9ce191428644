import pytest

from codec_string_explain.diagnostics import error

from codec_string_explain.validation import (
    is_hex,
    is_decimal,
    check_arity,
    check_hex_fields,
    split_letter_number,
    showbit,
)


@pytest.mark.parametrize(
    "string,exp_hex,exp_decimal",
    [
        ("", False, False),
        ("0", True, True),
        ("0123456789", True, True),
        ("abcdef", True, False),
        ("ABCDEF", True, False),
        ("64002A", True, False),
        ("0x10", False, False),
        ("12g", False, False),
        (" 12", False, False),
        ("-1", False, False),
    ],
)
def test_is_hex_and_is_decimal(string, exp_hex, exp_decimal):
    assert is_hex(string) is exp_hex
    assert is_decimal(string) is exp_decimal


class TestCheckArity(object):
    @pytest.mark.parametrize("parts", [["avc1", "64002A"], ["a", ""]])
    def test_exact_ok(self, parts):
        assert check_arity(parts, 2) == []

    @pytest.mark.parametrize(
        "parts,exp_count", [(["avc1"], 1), (["avc1", "64", "00"], 3)]
    )
    def test_exact_wrong(self, parts, exp_count):
        assert check_arity(parts, 2, name="AVC") == [
            error("AVC requires 2 parts, got {}".format(exp_count))
        ]

    @pytest.mark.parametrize("num_parts", [5, 7, 10])
    def test_range_ok(self, num_parts):
        assert check_arity(["x"] * num_parts, 5, 10) == []

    def test_too_few(self):
        assert check_arity(["x"] * 2, 5, 10) == [
            error("codec string requires at least 5 parts, got 2")
        ]

    def test_too_many(self):
        assert check_arity(["x"] * 11, 5, 10, name="HEVC") == [
            error("HEVC allows at most 10 parts, got 11")
        ]


class TestCheckHexFields(object):
    def test_all_valid(self):
        assert check_hex_fields(["hvc1", "B0", "ff", "00"], [1, 2, 3], "byte") == []

    def test_invalid_fields_reported_in_order(self):
        assert check_hex_fields(["hvc1", "ZZ", "00", ""], [1, 2, 3], "byte") == [
            error("byte (1) must be hexadecimal, got 'ZZ'"),
            error("byte (3) must be hexadecimal, got ''"),
        ]

    def test_absent_fields_ignored(self):
        assert check_hex_fields(["hvc1", "00"], range(1, 10), "byte") == []


@pytest.mark.parametrize(
    "field,expected",
    [
        ("L153", ("L", 153)),
        ("h93", ("h", 93)),
        ("L0", ("L", 0)),
        ("153", None),
        ("L", None),
        ("LL153", None),
        ("L15x", None),
        ("", None),
    ],
)
def test_split_letter_number(field, expected):
    assert split_letter_number(field) == expected


@pytest.mark.parametrize(
    "flag,expected", [(True, "1"), (False, "0"), (1, "1"), (0, "0")]
)
def test_showbit(flag, expected):
    assert showbit(flag) == expected
