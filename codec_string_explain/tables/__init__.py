"""
:py:mod:`codec_string_explain.tables`: Tables of values
=======================================================

Descriptive lookup tables and classification rule tables, loaded from the CSV
files in this directory when the module is first imported. All tables are
treated as read-only once loaded.
"""

from codec_string_explain.classification import ClassificationScheme

from codec_string_explain.tables._csv_reading import (
    read_descriptions_from_csv,
    read_rules_from_csv,
)

__all__ = [
    "RESERVED",
    "COLOUR_PRIMARIES",
    "TRANSFER_CHARACTERISTICS",
    "MATRIX_COEFFICIENTS",
    "SAMPLE_ASPECT_RATIOS",
    "VIDEO_FRAME_PACKING_TYPES",
    "PACKED_CONTENT_INTERPRETATION_TYPES",
    "VIDEO_CODEC_CS",
    "CLASSIFICATION_SCHEMES",
]

################################################################################
# ISO/IEC 23091-2 Coding-independent code points for video signal type
################################################################################

RESERVED = "Reserved -- For future use by ITU-T | ISO/IEC"
"""
Description used for ISO/IEC 23091-2 code points which are not listed in a
table.
"""

COLOUR_PRIMARIES = read_descriptions_from_csv("colour_primaries.csv")
"""
ISO/IEC 23091-2 ColourPrimaries. Lookup from code point to a tuple of
description strings.
"""

TRANSFER_CHARACTERISTICS = read_descriptions_from_csv("transfer_characteristics.csv")
"""ISO/IEC 23091-2 TransferCharacteristics."""

MATRIX_COEFFICIENTS = read_descriptions_from_csv("matrix_coefficients.csv")
"""ISO/IEC 23091-2 MatrixCoefficients."""

SAMPLE_ASPECT_RATIOS = read_descriptions_from_csv("sample_aspect_ratios.csv")
"""ISO/IEC 23091-2 SampleAspectRatio."""

VIDEO_FRAME_PACKING_TYPES = read_descriptions_from_csv("video_frame_packing_types.csv")
"""ISO/IEC 23091-2 VideoFramePackingType."""

PACKED_CONTENT_INTERPRETATION_TYPES = read_descriptions_from_csv(
    "packed_content_interpretation_types.csv"
)
"""ISO/IEC 23091-2 PackedContentInterpretationType."""

################################################################################
# Classification schemes
################################################################################

VIDEO_CODEC_CS = ClassificationScheme(
    "urn:dvb:metadata:cs:VideoCodecCS:2022",
    read_rules_from_csv("dvb_video_codec_cs.csv"),
)
"""
DVB's VideoCodecCS classification scheme (AVC terms only).
"""

CLASSIFICATION_SCHEMES = {
    "video": VIDEO_CODEC_CS,
}
"""
The classification scheme used for each coding parameter ``type``. See
:py:func:`codec_string_explain.classification.classify`.
"""
