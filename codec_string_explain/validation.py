"""
The :py:mod:`codec_string_explain.validation` module contains the small
structural checks shared by the codec decoders.

Checks which can fail return lists of
:py:func:`~codec_string_explain.diagnostics.error` diagnostics (empty when the
check passes) so that a decoder may accumulate every structural problem
before deciding whether to interpret any fields::

    >>> check_arity(["hev1", "1"], 5, 10, name="HEVC")
    [Diagnostic(kind=<DiagnosticKinds.error: 'error'>, text='HEVC requires at least 5 parts, got 2')]
"""

import re

from codec_string_explain.diagnostics import error

__all__ = [
    "is_hex",
    "is_decimal",
    "check_arity",
    "check_hex_fields",
    "split_letter_number",
    "showbit",
]


HEX_RE = re.compile(r"[0-9A-Fa-f]+")

DECIMAL_RE = re.compile(r"[0-9]+")

LETTER_NUMBER_RE = re.compile(r"([A-Za-z])([0-9]+)")


def is_hex(string):
    """True iff ``string`` is non-empty and consists only of hex digits."""
    return HEX_RE.fullmatch(string) is not None


def is_decimal(string):
    """True iff ``string`` is non-empty and consists only of decimal digits."""
    return DECIMAL_RE.fullmatch(string) is not None


def check_arity(parts, minimum, maximum=None, name="codec string"):
    """
    Check the number of '.' separated parts in a codec string.

    Parameters
    ==========
    parts : [str, ...]
        The parts of the codec string (including the identifier).
    minimum : int
    maximum : int or None
        If None, the number of parts must equal ``minimum`` exactly.
    name : str
        Name of the codec, used in the error message.

    Returns
    =======
    [:py:class:`~codec_string_explain.diagnostics.Diagnostic`, ...]
    """
    if maximum is None:
        if len(parts) != minimum:
            return [
                error(
                    "{} requires {} parts, got {}".format(name, minimum, len(parts))
                )
            ]
        return []

    if len(parts) < minimum:
        return [
            error(
                "{} requires at least {} parts, got {}".format(
                    name, minimum, len(parts)
                )
            )
        ]
    if len(parts) > maximum:
        return [
            error(
                "{} allows at most {} parts, got {}".format(name, maximum, len(parts))
            )
        ]
    return []


def check_hex_fields(parts, indices, description):
    """
    Check that the parts at each of the listed indices contain only hex
    digits. Indices beyond the end of ``parts`` (absent optional fields) are
    ignored.

    Returns a list of error diagnostics, one per invalid field.
    """
    out = []
    for index in indices:
        if index < len(parts) and not is_hex(parts[index]):
            out.append(
                error(
                    "{} ({}) must be hexadecimal, got '{}'".format(
                        description, index, parts[index]
                    )
                )
            )
    return out


def split_letter_number(field):
    """
    Split a field consisting of a single letter followed by decimal digits.

        >>> split_letter_number("L153")
        ('L', 153)
        >>> split_letter_number("153") is None
        True

    Returns None if the field does not have this form.
    """
    match = LETTER_NUMBER_RE.fullmatch(field)
    if match is None:
        return None
    return (match.group(1), int(match.group(2)))


def showbit(flag):
    return "1" if flag else "0"
