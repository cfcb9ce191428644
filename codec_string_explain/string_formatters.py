r"""
The :py:mod:`codec_string_explain.string_formatters` module contains facilities
for formatting Python values as strings within diagnostic messages.

When we say 'string formatter' we mean a function/callable which takes a value
and returns a string representation of that value. Instances of the classes in
this module act as formatters. For example, the :py:class:`Hex` class may be
used as a formatter for n-digit hexadecimal integers::

    >>> from codec_string_explain.string_formatters import Hex

    >>> # Create a formatter for producing 6-digit hex numbers
    >>> hex24_formatter = Hex(6)

    >>> # Format some values
    >>> hex24_formatter(0)
    '0x000000'
    >>> hex24_formatter(0x1FFFFF)
    '0x1FFFFF'

Codec strings conventionally write hexadecimal fields in lower case without a
prefix, so decoders typically echo values using ``Hex(prefix="", upper=False)``.
"""

__all__ = [
    "Number",
    "Hex",
    "Dec",
]


class Number(object):
    """
    A formatter which uses Python's built-in :py:meth:`str.format` method to
    apply formatting.

    This formatter is quite low level, see :py:class:`Hex` and :py:class:`Dec`
    for ready to use derivatives.

    Parameters
    ==========
    format_code : str
        A python :py:meth:`str.format` code, e.g. "b" for binary.
    prefix : str
        A prefix to add before the formatted number
    num_digits : int
        The length to pad the number to.
    pad_digit : str
        The value to use to pad absent digits
    """

    def __init__(self, format_code, num_digits=0, pad_digit="0", prefix=""):
        self.format_code = format_code
        self.num_digits = num_digits
        self.pad_digit = pad_digit
        self.prefix = prefix

    def __call__(self, number):
        return "{}{}{:{}{}{}}".format(
            "-" if number < 0 else "",
            self.prefix,
            abs(number),
            self.pad_digit,
            self.num_digits,
            self.format_code,
        )


class Hex(Number):
    """
    Prints numbers in hexadecimal.

    Parameters
    ==========
    num_digits : int
        Minimum number of digits to show.
    pad_digit : str
        The value to use to pad absent digits
    prefix : str
        Defaults to "0x"
    upper : bool
        If True (the default) use upper case digits, otherwise lower case.
    """

    def __init__(self, num_digits=0, pad_digit="0", prefix="0x", upper=True):
        super(Hex, self).__init__("X" if upper else "x", num_digits, pad_digit, prefix)


class Dec(Number):
    """
    Prints numbers in decimal.

    Parameters
    ==========
    num_digits : int
        Minimum number of digits to show.
    pad_digit : str
        The value to use to pad absent digits
    prefix : str
        Defaults to ""
    """

    def __init__(self, num_digits=0, pad_digit="0", prefix=""):
        super(Dec, self).__init__("d", num_digits, pad_digit, prefix)
