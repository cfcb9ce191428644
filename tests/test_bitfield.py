import pytest

from codec_string_explain.bitfield import BitfieldBuffer

from codec_string_explain.exceptions import BitfieldError


class TestPush(object):
    def test_empty(self):
        b = BitfieldBuffer()
        assert len(b) == 0
        assert str(b) == ""
        assert b.to_bit_string() == ""

    def test_values_masked_to_eight_bits(self):
        b = BitfieldBuffer()
        b.push(0x1A5)
        b.push(-1)
        assert len(b) == 2
        assert str(b) == "a5ff"

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_non_integers_rejected(self, value):
        b = BitfieldBuffer()
        with pytest.raises(BitfieldError):
            b.push(value)
        assert len(b) == 0

    def test_constructor(self):
        assert str(BitfieldBuffer([0x01, 0x23])) == "0123"


class TestCanonicalNumbering(object):
    @pytest.fixture
    def b(self):
        # 10100101
        return BitfieldBuffer([0xA5])

    @pytest.mark.parametrize(
        "bit,expected",
        [
            (0, True),
            (1, False),
            (2, True),
            (3, False),
            (4, False),
            (5, True),
            (6, False),
            (7, True),
        ],
    )
    def test_bitset_b(self, b, bit, expected):
        assert b.bitset_b(bit) is expected

    @pytest.mark.parametrize("bit", [-1, 8, 100])
    def test_bitset_b_out_of_range(self, b, bit):
        assert b.bitset_b(bit) is False

    def test_value_b(self, b):
        assert b.value_b(0, 4) == 0b1010
        assert b.value_b(4, 4) == 0b0101
        assert b.value_b(0, 8) == 0xA5
        assert b.value_b(2, 3) == 0b100

    def test_value_b_beyond_end_reads_zero(self, b):
        assert b.value_b(4, 8) == 0b01010000
        assert b.value_b(8, 4) == 0

    def test_spans_octets(self):
        b = BitfieldBuffer([0x01, 0x80])
        assert b.bitset_b(7) is True
        assert b.bitset_b(8) is True
        assert b.value_b(6, 4) == 0b0110


class TestLegacyNumbering(object):
    def test_counts_from_last_octet(self):
        b = BitfieldBuffer([0x80, 0x01])
        assert b.bitset(1) is True
        assert b.bitset(2) is False
        assert b.bitset(16) is True
        assert b.bitset(15) is False

    @pytest.mark.parametrize("bit", [0, -1, 17])
    def test_out_of_range(self, bit):
        b = BitfieldBuffer([0xFF, 0xFF])
        assert b.bitset(bit) is False

    def test_matches_canonical_numbering(self):
        b = BitfieldBuffer([0x12, 0x34, 0x56])
        for n in range(1, 25):
            assert b.bitset(n) == b.bitset_b(24 - n)


class TestHex(object):
    @pytest.mark.parametrize(
        "string,expected",
        [
            ("", ""),
            ("00", "00"),
            ("A5", "a5"),
            ("0a0B", "0a0b"),
            # Odd digit count: final digit is a high nibble
            ("abc", "abc0"),
        ],
    )
    def test_from_hex(self, string, expected):
        assert BitfieldBuffer.from_hex(string).to_hex() == expected

    def test_from_hex_invalid(self):
        with pytest.raises(ValueError):
            BitfieldBuffer.from_hex("xy")

    def test_to_bit_string(self):
        assert BitfieldBuffer([0xA5, 0x01]).to_bit_string() == "1010010100000001"

    def test_repr(self):
        assert repr(BitfieldBuffer([0x0F])) == "BitfieldBuffer.from_hex('0f')"
