"""
:py:mod:`codec_string_explain.decoders.vp9`: VP9
================================================

VP9 codec strings (VP Codec ISO Media File Format Binding) take the form::

    vp09.<profile>.<level>.<bitDepth>[.<chromaSubsampling>.<colourPrimaries>
        .<transferCharacteristics>.<matrixCoefficients>.<videoFullRangeFlag>]

The first three fields are mandatory two digit decimal numbers. The optional
fields may be omitted or left empty, in which case the defaults in
:py:data:`DEFAULTS` apply. Colour fields are ISO/IEC 23091-2 code points.
"""

import re

from collections import OrderedDict

from codec_string_explain.diagnostics import normal, warning, error, default_used

from codec_string_explain.tables import (
    RESERVED,
    COLOUR_PRIMARIES,
    TRANSFER_CHARACTERISTICS,
    MATRIX_COEFFICIENTS,
)

__all__ = [
    "LEVELS",
    "CHROMA_SUBSAMPLINGS",
    "DEFAULTS",
    "decode_vp9",
    "register_vp9",
]


MAX_PROFILE = 3

LEVELS = OrderedDict(
    [
        (10, "1"),
        (11, "1.1"),
        (20, "2"),
        (21, "2.1"),
        (30, "3"),
        (31, "3.1"),
        (40, "4"),
        (41, "4.1"),
        (50, "5"),
        (51, "5.1"),
        (52, "5.2"),
        (60, "6"),
        (61, "6.1"),
        (62, "6.2"),
    ]
)
"""VP9 level codes (level x 10) and their level numbers."""

BIT_DEPTHS = (8, 10, 12)

CHROMA_420_VERTICAL = 0
CHROMA_420_COLOCATED = 1
CHROMA_422 = 2
CHROMA_444 = 3

CHROMA_SUBSAMPLINGS = {
    CHROMA_420_VERTICAL: "4:2:0 vertical",
    CHROMA_420_COLOCATED: "4:2:0 colocated with luma (0,0)",
    CHROMA_422: "4:2:2",
    CHROMA_444: "4:4:4",
}

RESERVED_CHROMA_SUBSAMPLINGS = (4, 5, 6, 7)

MATRIX_COEFFICIENTS_RGB = 0

DEFAULTS = OrderedDict(
    [
        ("chromaSubsampling", CHROMA_420_COLOCATED),
        ("colourPrimaries", 1),
        ("transferCharacteristics", 1),
        ("matrixCoefficients", 1),
        ("videoFullRangeFlag", 0),
    ]
)
"""Values used for optional fields which are absent or empty."""

VP9_FORMAT = (
    "<sample entry 4CC>.<profile>.<level>.<bitDepth>.<chromaSubsampling>"
    ".<colourPrimaries>.<transferCharacteristics>.<matrixCoefficients>"
    ".<videoFullRangeFlag>"
)

VP9_RE = re.compile(r"vp09(?:\.\d\d){3}(?:\.\d{0,2}){0,5}", re.IGNORECASE)


def check_bit_depth(profile, bit_depth):
    if bit_depth not in BIT_DEPTHS:
        return error("invalid bitDepth ({})".format(bit_depth))
    if bit_depth == 8 and profile >= 2:
        return warning("8 bit only possible with Profile 0 or 1")
    if bit_depth != 8 and profile <= 1:
        return warning("{} bit only possible with Profile 2 or 3".format(bit_depth))
    return normal("{} bit".format(bit_depth))


def check_chroma(profile, chroma, matrix_coefficients):
    """
    Returns a list of diagnostics describing the chromaSubsampling value and
    its consistency with the profile and matrixCoefficients.
    """
    if chroma in RESERVED_CHROMA_SUBSAMPLINGS:
        return [warning("chromaSubsampling: Reserved ({})".format(chroma))]
    if chroma not in CHROMA_SUBSAMPLINGS:
        return [error("invalid chromaSubsampling ({})".format(chroma))]

    out = [normal(CHROMA_SUBSAMPLINGS[chroma])]
    if profile in (0, 2) and chroma in (CHROMA_422, CHROMA_444):
        out.append(warning("Profile 0 and 2 must be 4:2:0"))
    elif profile in (1, 3) and chroma in (CHROMA_420_VERTICAL, CHROMA_420_COLOCATED):
        out.append(
            warning("4:2:0 chroma sampling is not permitted with Profile 1 and 3")
        )
    elif matrix_coefficients == MATRIX_COEFFICIENTS_RGB and chroma != CHROMA_444:
        out.append(
            warning("4:4:4 chroma sampling is required when matrixCoefficients=0 (RGB)")
        )
    return out


def describe_code_point(table, label, value):
    if value not in table:
        return warning("{}: {}".format(label, RESERVED))
    return normal("{}: {}".format(label, "; ".join(table[value])))


def decode_vp9(component):
    if VP9_RE.fullmatch(component) is None:
        return [
            error("invalid VP9 codec string ({})".format(component)),
            error(VP9_FORMAT),
        ]

    parts = component.split(".")
    profile, level, bit_depth = (int(p) for p in parts[1:4])

    optional = OrderedDict()
    defaulted = []
    for i, (name, default) in enumerate(DEFAULTS.items()):
        index = 4 + i
        if index < len(parts) and parts[index] != "":
            optional[name] = int(parts[index])
        else:
            optional[name] = default
            defaulted.append(name)

    out = []

    if profile <= MAX_PROFILE:
        out.append(normal("Profile {}".format(profile)))
    else:
        out.append(error("invalid profile ({})".format(profile)))

    if level in LEVELS:
        out.append(normal("Level {}".format(LEVELS[level])))
    else:
        out.append(error("unknown Level ({})".format(level)))

    out.append(check_bit_depth(profile, bit_depth))

    out.extend(
        check_chroma(
            profile, optional["chromaSubsampling"], optional["matrixCoefficients"]
        )
    )
    out.append(
        describe_code_point(
            COLOUR_PRIMARIES, "Colour primaries", optional["colourPrimaries"]
        )
    )
    out.append(
        describe_code_point(
            TRANSFER_CHARACTERISTICS,
            "Transfer characteristics",
            optional["transferCharacteristics"],
        )
    )
    out.append(
        describe_code_point(
            MATRIX_COEFFICIENTS, "Matrix coefficients", optional["matrixCoefficients"]
        )
    )

    full_range = optional["videoFullRangeFlag"]
    if full_range == 0:
        out.append(normal("legal range"))
    elif full_range == 1:
        out.append(normal("full-range chroma/luma encoding"))
    else:
        out.append(error("invalid videoFullRangeFlag ({})".format(full_range)))

    for name in defaulted:
        out.append(default_used("{}={}".format(name, DEFAULTS[name])))

    return out


def register_vp9(builder):
    builder.register("vp09", "VP9", decode_vp9)
