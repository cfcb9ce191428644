"""
:py:mod:`codec_string_explain.decoders.ac4`: Dolby AC-4 and Enhanced AC-3
=========================================================================

AC-4 codec strings (ETSI TS 103 190-2 Annex E.13) take the form
``ac-4.<bitstream_version>.<presentation_version>.<mdcompat>`` with each
field in hexadecimal. Enhanced AC-3 is signalled by the bare identifier
``ec-3``.
"""

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.validation import check_arity, check_hex_fields

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "MAXIMUM_CHANNELS",
    "MAXIMUM_TRACKS",
    "decode_ac4",
    "decode_eac3",
    "register_ac4",
]


MAXIMUM_CHANNELS = {
    0: "2",
    1: "6",
    2: "9",
    3: "11",
    4: "13",
    7: "Unrestricted",
}
"""
mdcompat for presentation_version 0 (ETSI TS 103 190-1 clause 4.3.3.3.8).
Values 5 and 6 are reserved.
"""

MAXIMUM_TRACKS = {
    0: "2",
    1: "6",
    2: "9",
    3: "11",
    7: "Unrestricted",
}
"""
mdcompat for presentation_version 1 (ETSI TS 103 190-2 Table 77). Values 4
to 6 are reserved.
"""

MAX_MDCOMPAT = 7

MDCOMPAT_TABLES = {
    0: ("maximum channels", MAXIMUM_CHANNELS),
    1: ("maximum tracks", MAXIMUM_TRACKS),
}


def describe_mdcompat(presentation_version, mdcompat):
    """
    Return a diagnostic describing mdcompat, or None if the presentation
    version does not define its meaning.
    """
    if presentation_version not in MDCOMPAT_TABLES:
        return None

    name, table = MDCOMPAT_TABLES[presentation_version]
    if mdcompat in table:
        return normal("{}: {}".format(name, table[mdcompat]))
    if mdcompat <= MAX_MDCOMPAT:
        return warning("{}: Reserved ({})".format(name, mdcompat))
    return error("{}: invalid value ({})".format(name, mdcompat))


def decode_ac4(component):
    parts = component.split(".")

    errors = check_arity(parts, 4, name="AC-4")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1, 2, 3], "AC-4 parameter")
    if errors:
        return errors

    bitstream_version, presentation_version, mdcompat = (
        int(p, 16) for p in parts[1:]
    )

    out = [
        normal("bitstream_version: {}".format(bitstream_version)),
        normal("presentation_version: {}".format(presentation_version)),
    ]

    mdcompat_diagnostic = describe_mdcompat(presentation_version, mdcompat)
    if mdcompat_diagnostic is not None:
        out.append(mdcompat_diagnostic)

    out.extend(classification_terms({"type": "audio", "codec": parts[0]}))
    return out


def decode_eac3(component):
    if component.lower() != "ec-3":
        return [error("no additional parameters are permitted for Enhanced AC-3")]
    return classification_terms({"type": "audio", "codec": "AC3", "mode": "E-AC3"})


def register_ac4(builder):
    builder.register("ec-3", "Enhanced AC-3", decode_eac3)
    builder.register("ac-4", "Digital Audio Compression (AC-4)", decode_ac4)
