"""
The :py:mod:`codec_string_explain.bitfield` module contains
:py:class:`BitfieldBuffer`, an octet buffer used by decoders which must
interpret packed constraint or capability flags carried (usually as hex) in a
codec string.

Bit numbering
-------------

Codec specifications disagree about how the bits of a packed flag field are
numbered, so :py:class:`BitfieldBuffer` offers two conventions side by side
rather than one unified one. When transcribing a table from a specification,
use whichever convention that specification uses.

*Legacy* numbering (:py:meth:`BitfieldBuffer.bitset`) counts from 1 at the
least significant bit of the most recently pushed octet, increasing towards
the first octet pushed. For a two octet buffer::

    octet:          first pushed            last pushed
    bit:       16 15 14 13 12 11 10  9   8  7  6  5  4  3  2  1

*Canonical* numbering (:py:meth:`BitfieldBuffer.bitset_b` and
:py:meth:`BitfieldBuffer.value_b`) counts from 0 at the most significant bit
of the first octet pushed::

    octet:          first pushed            last pushed
    bit:        0  1  2  3  4  5  6  7   8  9 10 11 12 13 14 15

Reads outside the buffer never fail: they read as unset (or zero) bits. This
lets decoders carry on interpreting a truncated flag field.

    >>> flags = BitfieldBuffer()
    >>> flags.push(0xA5)
    >>> flags.bitset_b(0), flags.bitset_b(1), flags.bitset(1)
    (True, False, True)
    >>> flags.value_b(0, 4)
    10
    >>> str(flags)
    'a5'
"""

from bitarray import bitarray

from bitarray.util import ba2hex

from codec_string_explain.exceptions import BitfieldError

__all__ = [
    "BitfieldBuffer",
]


class BitfieldBuffer(object):
    """
    An append-only sequence of octets with bitwise read access.
    """

    def __init__(self, octets=()):
        """
        Parameters
        ==========
        octets : iterable of int
            Optional. Initial octets to :py:meth:`push`.
        """
        self._bits = bitarray(endian="big")
        for octet in octets:
            self.push(octet)

    @classmethod
    def from_hex(cls, hex_string):
        """
        Create a buffer from a string of hexadecimal digits, two digits per
        octet. An odd final digit is treated as the high nibble of a last
        octet (i.e. the string is right-padded with a '0').

        Raises :py:exc:`ValueError` if the string contains non-hex characters.
        """
        if len(hex_string) % 2:
            hex_string += "0"
        return cls(bytearray.fromhex(hex_string))

    def push(self, octet):
        """
        Append an octet to the buffer. Only the low 8 bits of the value are
        kept.
        """
        if isinstance(octet, bool) or not isinstance(octet, int):
            raise BitfieldError("octet must be an int, not {!r}".format(octet))
        self._bits.frombytes(bytes([octet & 0xFF]))

    def __len__(self):
        """The number of octets in the buffer."""
        return len(self._bits) // 8

    def bitset(self, bit_number):
        """
        Test a bit using legacy numbering: bit 1 is the least significant bit
        of the most recently pushed octet. Out of range bit numbers (including
        zero and negative numbers) return False.
        """
        if bit_number <= 0 or bit_number > len(self._bits):
            return False
        return self.bitset_b(len(self._bits) - bit_number)

    def bitset_b(self, bit_number):
        """
        Test a bit using canonical numbering: bit 0 is the most significant bit
        of the first octet pushed. Out of range bit numbers return False.
        """
        if bit_number < 0 or bit_number >= len(self._bits):
            return False
        return bool(self._bits[bit_number])

    def value_b(self, bit_number, length):
        """
        Read ``length`` consecutive bits, starting at canonical bit
        ``bit_number``, as an unsigned integer (most significant bit first).
        Bits beyond the end of the buffer read as zero.
        """
        value = 0
        for offset in range(length):
            value = (value << 1) | int(self.bitset_b(bit_number + offset))
        return value

    def to_hex(self):
        """
        The buffer contents as lower case hexadecimal, two digits per octet,
        in the order pushed.
        """
        if not self._bits:
            return ""
        return ba2hex(self._bits)

    def to_bit_string(self):
        """The buffer contents as a string of '0' and '1' characters."""
        return self._bits.to01()

    def __str__(self):
        return self.to_hex()

    def __repr__(self):
        return "{}.from_hex({!r})".format(type(self).__name__, self.to_hex())
