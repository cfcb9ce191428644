"""
:py:mod:`codec_string_explain.decoders.evc`: MPEG-5 EVC (ISO/IEC 23094-1)
=========================================================================

Codec strings of the form ``evc1[.<key><value>]*`` (ISO/IEC 14496-15 Annex
E.9) where each optional field is a four character key followed by its
value, in any order, e.g. ``evc1.vprf1.vlev51.vbit22``. Fields which are not
given take the default values listed in :py:data:`FIELDS`.

The video signal type fields (``vcpr``, ``vtrc``, ``vmac``, ``vsar``, ...)
use the ISO/IEC 23091-2 code points described in
:py:mod:`codec_string_explain.tables`.
"""

from codec_string_explain.diagnostics import error, warning, informative

from codec_string_explain.key_value import (
    KeyValueField,
    KeyValueTable,
    parse_tokens,
    report,
)

from codec_string_explain.profiles import LevelTable

from codec_string_explain.validation import showbit

from codec_string_explain.tables import (
    RESERVED,
    COLOUR_PRIMARIES,
    TRANSFER_CHARACTERISTICS,
    MATRIX_COEFFICIENTS,
    SAMPLE_ASPECT_RATIOS,
    VIDEO_FRAME_PACKING_TYPES,
    PACKED_CONTENT_INTERPRETATION_TYPES,
)

__all__ = [
    "BASELINE_PROFILE",
    "PROFILE_NAMES",
    "LEVELS",
    "TOOLSET",
    "FIELDS",
    "analyse_toolset",
    "decode_evc",
    "register_evc",
]


BASELINE_PROFILE = 0

PROFILE_NAMES = {
    0: "Baseline profile",
    1: "Main profile",
    2: "Baseline Still Picture profile",
    3: "Main Still Picture profile",
}
"""EVC profiles (ISO/IEC 23094-1 Annex A.3)."""

LEVELS = LevelTable(
    [
        (10, "1"),
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
"""EVC levels (ISO/IEC 23094-1 Annex A.4)."""

TOOLSET = [
    "sps_btt_flag",
    "sps_suco_flag",
    "sps_amvr_flag",
    "sps_mmvd_flag",
    "sps_affine_flag",
    "sps_dmvr_flag",
    "sps_alf_flag",
    "sps_admvp_flag",
    "sps_eipd_flag",
    "sps_adcc_flag",
    "sps_ibc_flag",
    "sps_iqt_flag",
    "sps_htdf_flag",
    "sps_addb_flag",
    "sps_cm_init_flag",
    "sps_ats_flag",
    "sps_rpl_flag",
    "sps_pocs_flag",
    "sps_dquant_flag",
    "sps_dra_flag",
    "sps_hmvp_flag",
]
"""
The tools signalled by the toolset fields. The tool at index *n* corresponds
to bit *n* (counting from the least significant bit) of ``vtoh`` and
``vtol``.
"""


def describe_profile(value):
    if value in PROFILE_NAMES:
        return PROFILE_NAMES[value]
    return error("invalid Profile ({})".format(value))


def describe_level(value):
    level = LEVELS.lookup(value)
    if level is not None:
        return "Level {}".format(level)
    return error("invalid Level ({})".format(value))


def describe_bit_depth(value):
    return "luma={}bit, chroma={}bit".format((value // 10) + 8, (value % 10) + 8)


def describe_chroma(value):
    return "{}:{}:{}".format(value // 100, (value // 10) % 10, value % 10)


def table_description(table, label):
    """
    Create a describe function for a field whose values are ISO/IEC 23091-2
    code points listed in ``table``. Unlisted values produce a warning.
    """

    def describe(value):
        if value > 255:
            return error("{}: invalid value ({})".format(label, value))
        if value not in table:
            return warning("{}: {}".format(label, RESERVED))
        return "; ".join(table[value])

    return describe


def describe_frame_packing(value):
    if value is None:
        return "no frame packing is used"
    quincunx_sampling_flag = value // 10
    packing_type = value % 10
    return "QuincunxSamplingFlag={}, VideoFramePackingType={}".format(
        quincunx_sampling_flag,
        "; ".join(VIDEO_FRAME_PACKING_TYPES.get(packing_type, (RESERVED,))),
    )


def describe_packed_content(value):
    if value is None:
        return "packed content is not used"
    return table_description(
        PACKED_CONTENT_INTERPRETATION_TYPES, "Packed Content Interpretation"
    )(value)


FIELDS = KeyValueTable(
    [
        KeyValueField("vprf", "Profile", 1, r"\d+", describe=describe_profile),
        KeyValueField("vlev", "Level", 51, r"\d+", describe=describe_level),
        KeyValueField("vtoh", "Toolset High", 0x1FFFFF, r"[0-9A-Fa-f]{6}", base=16),
        KeyValueField("vtol", "Toolset Low", 0x000000, r"[0-9A-Fa-f]{6}", base=16),
        KeyValueField("vbit", "Bit Depth", 0, r"\d\d", describe=describe_bit_depth),
        KeyValueField(
            "vcss", "Chroma Subsampling", 420, r"\d{3}", describe=describe_chroma
        ),
        KeyValueField(
            "vcpr",
            "Colour Primaries",
            1,
            r"\d{2}",
            describe=table_description(COLOUR_PRIMARIES, "Colour Primaries"),
        ),
        KeyValueField(
            "vtrc",
            "Transfer Characteristics",
            1,
            r"\d{2}",
            describe=table_description(
                TRANSFER_CHARACTERISTICS, "Transfer Characteristics"
            ),
        ),
        KeyValueField(
            "vmac",
            "Matrix Coefficients",
            1,
            r"\d{2}",
            describe=table_description(MATRIX_COEFFICIENTS, "Matrix Coefficients"),
        ),
        KeyValueField("vfrf", "Full Range Flag", 1, r"[01]"),
        KeyValueField(
            "vfpq",
            "Frame Packing Type",
            None,
            r"[01]\d",
            describe=describe_frame_packing,
        ),
        KeyValueField(
            "vpci",
            "Packed Content Interpretation",
            None,
            r"\d",
            describe=describe_packed_content,
        ),
        KeyValueField(
            "vsar",
            "Sample Aspect Ratio",
            1,
            r"\d{2}",
            describe=table_description(SAMPLE_ASPECT_RATIOS, "Sample Aspect Ratio"),
        ),
    ]
)
"""The EVC codec string fields, in the order they are reported."""


def analyse_toolset(toolset_high, toolset_low, profile):
    """
    Describe the tools enabled by the toolset fields.

    Returns one informative diagnostic per tool in :py:data:`TOOLSET` giving
    its high and low bits. Tools may not be used by the Baseline profile so,
    for that profile, an error follows any tool with either bit set.
    """
    out = []
    for bit, tool in enumerate(TOOLSET):
        high = (toolset_high >> bit) & 1
        low = (toolset_low >> bit) & 1
        out.append(
            informative("{} [h:{} l:{}]".format(tool, showbit(high), showbit(low)))
        )
        if profile == BASELINE_PROFILE and (high or low):
            out.append(
                error(
                    "{} must be 0 for {}".format(tool, PROFILE_NAMES[BASELINE_PROFILE])
                )
            )
    return out


def decode_evc(component):
    values, out = parse_tokens(FIELDS, component.split(".")[1:])

    out.extend(report(values))
    out.extend(
        analyse_toolset(
            values["vtoh"].value,
            values["vtol"].value,
            values["vprf"].value,
        )
    )

    return out


def register_evc(builder):
    builder.register("evc1", "MPEG Essential Video Coding", decode_evc)
