"""
:py:mod:`codec_string_explain.decoders.aom`: AV1 and IAMF (Alliance for Open Media)
===================================================================================

AV1 codec strings (AV1 Codec ISO Media File Format Binding, clause 5) take the
form::

    av01.<profile>.<level><tier>.<bitDepth>[.<monochrome>.<chromaSubsampling>
        .<colorPrimaries>.<transferCharacteristics>.<matrixCoefficients>
        .<videoFullRangeFlag>]

Every optional field may be left empty, in which case its default value
applies and is reported as such.

IAMF codec strings take the form ``iamf.<primary profile>.<secondary
profile>.<codec>`` where ``<codec>`` is ``Opus``, ``flaC``, ``ipcm`` or an
``mp4a`` codec string.
"""

import re

from codec_string_explain.diagnostics import normal, warning, error, default_used

from codec_string_explain.decoders.mpeg import decode_mpeg4_audio

__all__ = [
    "PROFILES",
    "COLOR_PRIMARIES",
    "TRANSFER_CHARACTERISTICS",
    "MATRIX_COEFFICIENTS",
    "level_version",
    "decode_av1",
    "decode_iamf",
    "register_aom",
]


PROFILES = {
    0: "Main Profile",
    1: "High Profile",
    2: "Professional Profile",
}

MAX_DEFINED_LEVEL = 23
"""seq_level_idx values 0 to 23 map to levels 2.0 to 7.3."""

MAX_LEVEL = 31
"""seq_level_idx 31 means no level constraints ('Max')."""

TIERS = {"M": "Main tier", "H": "High tier"}

BIT_DEPTHS = (8, 10, 12)

CHROMA_SAMPLE_POSITIONS = {
    0: normal("CSP_UNKNOWN"),
    1: normal("CSP_VERTICAL"),
    2: normal("CSP_COLOCATED"),
    3: warning("CSP_RESERVED"),
}

COLOR_PRIMARIES = {
    1: normal("CP_BT_709 - BT.709"),
    2: normal("CP_UNSPECIFIED"),
    4: normal("CP_BT_470_M"),
    5: normal("CP_BT_470_B_G"),
    6: normal("CP_BT_601"),
    7: normal("CP_SMPTE_240"),
    8: normal("CP_GENERIC_FILM"),
    9: normal("CP_BT_2020 - BT.2020, BT.2100"),
    10: normal("CP_XYZ"),
    11: normal("CP_SMPTE_431"),
    12: normal("CP_SMPTE_432"),
    22: normal("CP_EBU_3213"),
}
"""AV1 color_primaries (AV1 Bitstream clause 6.4.2)."""

TRANSFER_CHARACTERISTICS = {
    0: warning("TC_RESERVED_0"),
    1: normal("TC_BT_709"),
    2: normal("TC_UNSPECIFIED"),
    3: warning("TC_RESERVED_3"),
    4: normal("TC_BT_470_M"),
    5: normal("TC_BT_470_B_G"),
    6: normal("TC_BT_601"),
    7: normal("TC_SMPTE_240"),
    8: normal("TC_LINEAR"),
    9: normal("TC_LOG_100"),
    10: normal("TC_LOG_100_SQRT10"),
    11: normal("TC_IEC_61966"),
    12: normal("TC_BT_1361"),
    13: normal("TC_SRGB"),
    14: normal("TC_BT_2020_10_BIT"),
    15: normal("TC_BT_2020_12_BIT"),
    16: normal("TC_SMPTE_2084 - SMPTE ST 2084, ITU BT.2100 PQ"),
    17: normal("TC_SMPTE_428"),
    18: normal("TC_HLG - BT.2100 HLG, ARIB STD-B67"),
}
"""AV1 transfer_characteristics (AV1 Bitstream clause 6.4.2)."""

MATRIX_COEFFICIENTS = {
    0: normal("MC_IDENTITY"),
    1: normal("MC_BT_709"),
    2: normal("MC_UNSPECIFIED"),
    3: warning("MC_RESERVED_3"),
    4: normal("MC_FCC"),
    5: normal("MC_BT_470_B_G"),
    6: normal("MC_BT_601"),
    7: normal("MC_SMPTE_240"),
    8: normal("MC_SMPTE_YCGCO"),
    9: normal("MC_BT_2020_NCL"),
    10: normal("MC_BT_2020_CL"),
    11: normal("MC_SMPTE_2085"),
    12: normal("MC_CHROMAT_NCL"),
    13: normal("MC_CHROMAT_CL"),
    14: normal("MC_ICTCP"),
}
"""AV1 matrix_coefficients (AV1 Bitstream clause 6.4.2)."""

AV1_FORMAT = (
    "<sample entry 4CC>.<profile>.<level><tier>.<bitDepth>.<monochrome>"
    ".<chromaSubsampling>.<colorPrimaries>.<transferCharacteristics>"
    ".<matrixCoefficients>.<videoFullRangeFlag>"
)

AV1_RE = re.compile(
    r"av01\.(\d)\.(\d+)([MHmh])\.(\d{1,2})"
    r"(?:\.(\d?)"
    r"(?:\.(\d{3})?"
    r"(?:\.(\d{2})?"
    r"(?:\.(\d{2})?"
    r"(?:\.(\d{2})?"
    r"(?:\.(\d?))?)?)?)?)?)?",
    re.IGNORECASE,
)

IAMF_FORMAT = "<sample entry 4CC>.<primary profile>.<secondary profile>.<codec>"

IAMF_RE = re.compile(
    r"iamf\.(\d{3})\.(\d{3})\.(Opus|flaC|ipcm|mp4a\.[0-9A-Fa-f]{2}(?:\.\d+)?)",
    re.IGNORECASE,
)

IAMF_CODECS = {
    "opus": "Opus",
    "flac": "FLAC",
    "ipcm": "LPCM",
}


def level_version(seq_level_idx):
    """
    Return the level (e.g. '5.1') signalled by a seq_level_idx, or None if
    the value is reserved or out of range.

        >>> level_version(13)
        '5.1'
        >>> level_version(31)
        'Max'
    """
    if 0 <= seq_level_idx <= MAX_DEFINED_LEVEL:
        return "{}.{}".format(2 + seq_level_idx // 4, seq_level_idx % 4)
    if seq_level_idx == MAX_LEVEL:
        return "Max"
    return None


def describe_level(seq_level_idx):
    version = level_version(seq_level_idx)
    if version is not None:
        return normal("Level {}".format(version))
    if MAX_DEFINED_LEVEL < seq_level_idx < MAX_LEVEL:
        return warning("reserved level {}".format(seq_level_idx))
    return error("unknown level ({})".format(seq_level_idx))


def describe_chroma_subsampling(digits):
    subsampling_x, subsampling_y, position = (int(d) for d in digits)

    out = []
    if subsampling_x > 1:
        out.append(error("invalid value for subsampling_x ({})".format(subsampling_x)))
    if subsampling_y > 1:
        out.append(error("invalid value for subsampling_y ({})".format(subsampling_y)))
    if out:
        return out

    if position not in CHROMA_SAMPLE_POSITIONS:
        return [error("invalid value for chroma_sample_position ({})".format(position))]

    if not (subsampling_x == 1 and subsampling_y == 1) and position != 0:
        return [
            error(
                "third digit must be 0 when first or second digit are not set to 1"
            )
        ]

    return [CHROMA_SAMPLE_POSITIONS[position]]


def describe_table_value(table, value, name):
    if value in table:
        return table[value]
    return error("unknown value for {} ({})".format(name, value))


def decode_av1(component):
    match = AV1_RE.fullmatch(component)
    if match is None:
        return [
            error("invalid AV1 codec string ({})".format(component)),
            error(AV1_FORMAT),
        ]

    (
        profile,
        level,
        tier,
        bit_depth,
        monochrome,
        chroma_subsampling,
        color_primaries,
        transfer_characteristics,
        matrix_coefficients,
        full_range,
    ) = match.groups()

    out = []

    profile = int(profile)
    if profile in PROFILES:
        out.append(normal(PROFILES[profile]))
    else:
        out.append(error("unknown profile ({})".format(profile)))

    out.append(describe_level(int(level)))
    out.append(normal(TIERS[tier.upper()]))

    bit_depth = int(bit_depth)
    if bit_depth in BIT_DEPTHS:
        out.append(normal("{} bit".format(bit_depth)))
    else:
        out.append(error("unknown bit depth ({})".format(bit_depth)))

    if monochrome:
        if monochrome == "0":
            out.append(normal("Contains Y, U and V (colour)"))
        elif monochrome == "1":
            out.append(normal("No U or V (monochrome)"))
        else:
            out.append(error("invalid value for mono_chrome ({})".format(monochrome)))
    else:
        out.append(default_used("Monochrome: 0 (colour)"))

    if chroma_subsampling:
        out.extend(describe_chroma_subsampling(chroma_subsampling))
    else:
        out.append(default_used("Chroma subsampling: 110 (4:2:0)"))

    for value, table, name in [
        (color_primaries, COLOR_PRIMARIES, "color_primaries"),
        (
            transfer_characteristics,
            TRANSFER_CHARACTERISTICS,
            "transfer_characteristics",
        ),
        (matrix_coefficients, MATRIX_COEFFICIENTS, "matrix_coefficients"),
    ]:
        if value:
            out.append(describe_table_value(table, int(value), name))
        else:
            out.append(default_used("{}: 1 (ITU-R BT.709)".format(name)))

    if full_range == "1":
        out.append(normal("1 (full swing representation)"))
    elif full_range == "0":
        out.append(normal("0 (studio swing representation)"))
    elif full_range:
        out.append(
            error("invalid value for video_full_range_flag ({})".format(full_range))
        )
    else:
        out.append(
            default_used("video_full_range_flag: 0 (studio swing representation)")
        )

    return out


def decode_iamf(component):
    match = IAMF_RE.fullmatch(component)
    if match is None:
        return [
            error("invalid IAMF codec string ({})".format(component)),
            error(IAMF_FORMAT),
        ]

    primary, secondary, codec = match.groups()

    out = []
    for name, value in [("primary", primary), ("secondary", secondary)]:
        if int(value) <= 255:
            out.append(normal("{} profile: {}".format(name.capitalize(), int(value))))
        else:
            out.append(error("<{}_profile> must be in the range 0..255".format(name)))

    if codec.lower().startswith("mp4a"):
        out.append(normal("Codec: AAC-LC"))
        out.extend(decode_mpeg4_audio(codec))
    else:
        out.append(normal("Codec: {}".format(IAMF_CODECS[codec.lower()])))

    return out


def register_aom(builder):
    builder.register("av01", "AV1", decode_av1)
    builder.register("iamf", "IAMF/Eclipsa", decode_iamf)
