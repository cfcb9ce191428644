"""
:py:mod:`codec_string_explain.decoders.lcevc`: MPEG-5 LCEVC (ISO/IEC 23094-2)
=============================================================================

Codec strings of the form ``lvc1[.<key><value>]*`` (ISO/IEC 14496-15 Annex
G), using the same four character key fields as
:py:mod:`~codec_string_explain.decoders.evc`.
"""

from codec_string_explain.diagnostics import error

from codec_string_explain.key_value import (
    KeyValueField,
    KeyValueTable,
    parse_tokens,
    report,
)

__all__ = [
    "PROFILE_NAMES",
    "FIELDS",
    "decode_lcevc",
    "register_lcevc",
]


PROFILE_NAMES = {
    0: "Main profile",
    1: "Main 4:4:4 profile",
}
"""LCEVC profiles (ISO/IEC 23094-2 Annex A.3)."""

MIN_LEVEL = 1
MAX_LEVEL = 4


def describe_profile(value):
    if value in PROFILE_NAMES:
        return PROFILE_NAMES[value]
    return error("invalid Profile ({})".format(value))


def describe_level(value):
    if MIN_LEVEL <= value <= MAX_LEVEL:
        return "Level {}".format(value)
    return error("invalid Level ({})".format(value))


FIELDS = KeyValueTable(
    [
        KeyValueField("vprf", "Profile", 0, r"\d+", describe=describe_profile),
        KeyValueField("vlev", "Level", 4, r"\d+", describe=describe_level),
    ]
)


def decode_lcevc(component):
    values, out = parse_tokens(FIELDS, component.split(".")[1:])
    out.extend(report(values))
    return out


def register_lcevc(builder):
    builder.register("lvc1", "MPEG Low Complexity Enhancement Video Coding", decode_lcevc)
