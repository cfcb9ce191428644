"""
:py:mod:`codec_string_explain.decoders.mpeg`: MPEG-1, MPEG-2 and MPEG-4 Part 2/3
=================================================================================

Codec strings in the RFC 6381 form ``<4CC>.<oti>[.<x>]`` where ``<oti>`` is
the hexadecimal MP4 Registration Authority ObjectTypeIndication (OTI).

``mp4a.40.<aot>``
    MPEG-4 audio. For OTI 0x40 the third part is the decimal MPEG-4 Audio
    Object Type (ISO/IEC 14496-3), e.g. ``mp4a.40.2`` for AAC-LC.

``mp4v.20.<pli>``
    MPEG-4 Part 2 visual. For OTI 0x20 the third part is the decimal
    profile_and_level_indication (ISO/IEC 14496-2 Annex G).

``mp2v.<oti>``, ``mp1v.<oti>``, ``mp2a.<oti>[.<layer>]``, ``mp1a.<oti>[.<layer>]``
    MPEG-1 and MPEG-2 streams carried in an MPEG-2 transport stream (ISO/IEC
    13818-1). Audio strings may carry the ISO/IEC 11172-3 ``layer`` field.
"""

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.validation import (
    check_arity,
    check_hex_fields,
    is_hex,
    is_decimal,
)

from codec_string_explain.decoders._common import describe_only

__all__ = [
    "OBJECT_TYPE_INDICATIONS",
    "AUDIO_OBJECT_TYPES",
    "PROFILE_LEVEL_INDICATIONS",
    "describe_object_type",
    "decode_mpeg4_audio",
    "decode_mpeg4_video",
    "decode_mpeg2_video",
    "decode_mpeg2_audio",
    "register_mpeg",
]


OBJECT_TYPE_INDICATIONS = {
    0x00: error("Forbidden"),
    0x01: normal("Systems ISO/IEC 14496-1 (a)"),
    0x02: normal("Systems ISO/IEC 14496-1 (b)"),
    0x03: normal("Interaction Stream"),
    0x04: normal("Extended BIFS"),
    0x05: normal("AFX Stream"),
    0x06: normal("Font Data Stream"),
    0x07: normal("Synthesized Texture Stream"),
    0x08: normal("Streaming Text Stream"),
    0x09: normal("LASeR Stream"),
    0x0A: normal("Simple Aggregation Format (SAF) Stream"),
    0x20: normal("Visual ISO/IEC 14496-2"),
    0x21: normal("Visual ITU-T Recommendation H.264 | ISO/IEC 14496-10"),
    0x22: normal("Parameter Sets for ITU-T Recommendation H.264 | ISO/IEC 14496-10"),
    0x23: normal("Visual ISO/IEC 23008-2 | ITU-T Recommendation H.265"),
    0x40: normal("Audio ISO/IEC 14496-3"),
    0x60: normal("Visual ISO/IEC 13818-2 Simple Profile"),
    0x61: normal("Visual ISO/IEC 13818-2 Main Profile"),
    0x62: normal("Visual ISO/IEC 13818-2 SNR Profile"),
    0x63: normal("Visual ISO/IEC 13818-2 Spatial Profile"),
    0x64: normal("Visual ISO/IEC 13818-2 High Profile"),
    0x65: normal("Visual ISO/IEC 13818-2 422 Profile"),
    0x66: normal("Audio ISO/IEC 13818-7 Main Profile"),
    0x67: normal("Audio ISO/IEC 13818-7 Low Complexity Profile"),
    0x68: normal("Audio ISO/IEC 13818-7 Scaleable Sampling Rate Profile"),
    0x69: normal("Audio ISO/IEC 13818-3"),
    0x6A: normal("Visual ISO/IEC 11172-2"),
    0x6B: normal("Audio ISO/IEC 11172-3"),
    0x6C: normal("Visual ISO/IEC 10918-1"),
    0x6D: normal("Portable Network Graphics"),
    0x6E: normal("Visual ISO/IEC 15444-1 (JPEG 2000)"),
    0xA0: normal("EVRC Voice"),
    0xA1: normal("SMV Voice"),
    0xA2: normal("3GPP2 Compact Multimedia Format (CMF)"),
    0xA3: normal("SMPTE VC-1 Video"),
    0xA4: normal("Dirac Video Coder"),
    0xA5: warning("withdrawn, unused, do not use (was AC-3)"),
    0xA6: warning("withdrawn, unused, do not use (was Enhanced AC-3)"),
    0xA7: normal("DRA Audio"),
    0xA8: normal("ITU G.719 Audio"),
    0xA9: normal("Core Substream"),
    0xAA: normal("Core Substream + Extension Substream"),
    0xAB: normal("Extension Substream containing only XLL"),
    0xAC: normal("Extension Substream containing only LBR"),
    0xAD: normal("Opus audio"),
    0xAE: warning("withdrawn, unused, do not use (was AC-4)"),
    0xAF: normal("Auro-Cx 3D audio"),
    0xB0: normal("RealVideo Codec 11"),
    0xB1: normal("VP9 Video"),
    0xB2: normal("DTS-UHD profile 2"),
    0xB3: normal("DTS-UHD profile 3 or higher"),
    0xE1: normal("13K Voice"),
    0xFF: normal("no object type specified"),
}
"""
MP4 Registration Authority ObjectTypeIndication values. Values 0xC0-0xFE
(other than 0xE1) are user private.
"""

USER_PRIVATE_OTIS = set(range(0xC0, 0xFF)) - {0xE1}

MPEG4_AUDIO_OTI = 0x40
MPEG4_VISUAL_OTI = 0x20

AUDIO_OBJECT_TYPES = {
    1: "AAC Main",
    2: "Low-Complexity AAC",
    3: "SSR AAC",
    4: "LTP AAC",
    5: "High-Efficiency (SBR) AAC",
    6: "MPEG-4 AAC-Scalable",
    7: "MPEG-4 TwinVQ",
    8: "MPEG-4 CELP",
    9: "MPEG-4 HVXC",
    12: "MPEG-4 TTSI",
    13: "MPEG-4 Main Synthetic",
    14: "MPEG-4 Wavetable Synthesis",
    15: "MPEG-4 General MIDI",
    16: "MPEG-4 Algorithmic Synthesis and Audio FX",
    17: "MPEG-4 ER AAC LC",
    19: "MPEG-4 ER AAC LTP",
    20: "MPEG-4 ER AAC Scalable",
    21: "MPEG-4 ER TwinVQ",
    22: "MPEG-4 ER BSAC",
    23: "MPEG-4 ER AAC LD",
    24: "MPEG-4 ER CELP",
    25: "MPEG-4 ER HVXC",
    26: "MPEG-4 ER HILN",
    27: "MPEG-4 ER Parametric",
    28: "MPEG-4 SSC",
    29: "High-Efficiency AAC v2 (PS)",
    32: "MPEG-4 Layer-1",
    33: "MPEG-4 Layer-2",
    34: "MPEG-4 Layer-3",
    35: "MPEG-4 DST",
    36: "MPEG-4 ALS",
    42: "MPEG-D USAC",
}
"""MPEG-4 Audio Object Types (ISO/IEC 14496-3 Table 1.17)."""

MPEG_AUDIO_DESCRIPTIONS = {
    0x66: "MPEG-2 AAC Main Profile (66)",
    0x67: "MPEG-2 AAC Low Complexity Profile (67)",
    0x68: "MPEG-2 AAC Scalable Sampling Rate Profile (68)",
    0x69: "MPEG-2 Audio Part 3 (69)",
    0x6B: "MPEG-1 Part 3 (6B)",
}

MPEG_VIDEO_OTIS = (0x20, 0x21, 0x22, 0x23, 0x60, 0x61, 0x62, 0x63, 0x64, 0x65)
"""The OTIs which may appear in an ``mp4v`` codec string."""

PROFILE_LEVEL_INDICATIONS = {
    0x01: "Simple Profile/Level 1",
    0x02: "Simple Profile/Level 2",
    0x03: "Simple Profile/Level 3",
    0x08: "Simple Profile/Level 0",
    0x10: "Simple Scalable Profile/Level 0",
    0x11: "Simple Scalable Profile/Level 1",
    0x12: "Simple Scalable Profile/Level 2",
    0x21: "Core Profile/Level 1",
    0x22: "Core Profile/Level 2",
    0x32: "Main Profile/Level 2",
    0x33: "Main Profile/Level 3",
    0x34: "Main Profile/Level 4",
    0x42: "N-bit Profile/Level 2",
    0x51: "Scalable Texture Profile/Level 1",
    0x61: "Simple Face Animation Profile/Level 1",
    0x62: "Simple Face Animation Profile/Level 2",
    0x63: "Simple FBA Profile/Level 1",
    0x64: "Simple FBA Profile/Level 2",
    0x71: "Basic Animated Texture Profile/Level 1",
    0x72: "Basic Animated Texture Profile/Level 2",
    0x81: "Hybrid Profile/Level 1",
    0x82: "Hybrid Profile/Level 2",
    0x91: "Advanced Real Time Simple Profile/Level 1",
    0x92: "Advanced Real Time Simple Profile/Level 2",
    0x93: "Advanced Real Time Simple Profile/Level 3",
    0x94: "Advanced Real Time Simple Profile/Level 4",
    0xA1: "Core Scalable Profile/Level 1",
    0xA2: "Core Scalable Profile/Level 2",
    0xA3: "Core Scalable Profile/Level 3",
    0xB1: "Advanced Coding Efficiency Profile/Level 1",
    0xB2: "Advanced Coding Efficiency Profile/Level 2",
    0xB3: "Advanced Coding Efficiency Profile/Level 3",
    0xB4: "Advanced Coding Efficiency Profile/Level 4",
    0xC1: "Advanced Core Profile/Level 1",
    0xC2: "Advanced Core Profile/Level 2",
    0xD1: "Advanced Scalable Texture/Level 1",
    0xD2: "Advanced Scalable Texture/Level 2",
    0xD3: "Advanced Scalable Texture/Level 3",
    0xE1: "Simple Studio Profile/Level 1",
    0xE2: "Simple Studio Profile/Level 2",
    0xE3: "Simple Studio Profile/Level 3",
    0xE4: "Simple Studio Profile/Level 4",
    0xE5: "Core Studio Profile/Level 1",
    0xE6: "Core Studio Profile/Level 2",
    0xE7: "Core Studio Profile/Level 3",
    0xE8: "Core Studio Profile/Level 4",
    0xF0: "Advanced Simple Profile/Level 0",
    0xF1: "Advanced Simple Profile/Level 1",
    0xF2: "Advanced Simple Profile/Level 2",
    0xF3: "Advanced Simple Profile/Level 3",
    0xF4: "Advanced Simple Profile/Level 4",
    0xF5: "Advanced Simple Profile/Level 5",
    0xF7: "Advanced Simple Profile/Level 3b",
    0xF8: "Fine Granularity Scalable Profile/Level 0",
    0xF9: "Fine Granularity Scalable Profile/Level 1",
    0xFA: "Fine Granularity Scalable Profile/Level 2",
    0xFB: "Fine Granularity Scalable Profile/Level 3",
    0xFC: "Fine Granularity Scalable Profile/Level 4",
    0xFD: "Fine Granularity Scalable Profile/Level 5",
}
"""MPEG-4 Visual profile_and_level_indication (ISO/IEC 14496-2 Table G.1)."""

ESCAPE_PROFILE_LEVEL_INDICATION = 0xFF

AUDIO_LAYERS = {
    3: "1",
    2: "2",
    1: "3",
}
"""The ISO/IEC 11172-3 ``layer`` field value to layer number."""


def describe_object_type(oti):
    """
    Return a diagnostic describing an MP4RA ObjectTypeIndication.

        >>> describe_object_type(0x61).text
        'ObjectTypeIndication=Visual ISO/IEC 13818-2 Main Profile'
    """
    if oti in USER_PRIVATE_OTIS:
        return normal("ObjectTypeIndication=user private")
    if oti not in OBJECT_TYPE_INDICATIONS:
        return error("unspecified object type ({:02x})".format(oti))

    diagnostic = OBJECT_TYPE_INDICATIONS[oti]
    return diagnostic._replace(
        text="ObjectTypeIndication={}".format(diagnostic.text)
    )


def describe_profile_level_indication(pli):
    if pli in PROFILE_LEVEL_INDICATIONS:
        return normal(PROFILE_LEVEL_INDICATIONS[pli])
    if pli == ESCAPE_PROFILE_LEVEL_INDICATION:
        return warning("Reserved for Escape")
    return warning("Reserved profile_and_level_indication ({})".format(pli))


def decode_mpeg4_audio(component):
    parts = component.split(".")

    errors = check_arity(parts, 2, 3, name="MPEG-4 audio")
    if errors:
        return errors

    if not is_hex(parts[1]):
        return [error("OTI must be expressed in hexadecimal ({})".format(parts[1]))]

    oti = int(parts[1], 16)
    if oti == MPEG4_AUDIO_OTI:
        out = [normal("MPEG-4 AAC (40)")]
        if len(parts) == 3:
            aot = parts[2]
            if is_decimal(aot) and int(aot) in AUDIO_OBJECT_TYPES:
                out.append(
                    normal("{} ({})".format(AUDIO_OBJECT_TYPES[int(aot)], int(aot)))
                )
            else:
                out.append(error("invalid MPEG-4 Audio Object Type ({})".format(aot)))
        return out

    if oti in MPEG_AUDIO_DESCRIPTIONS:
        return [normal(MPEG_AUDIO_DESCRIPTIONS[oti])]

    return [error("invalid MP4 audio ObjectTypeIndication ({})".format(parts[1]))]


def decode_mpeg4_video(component):
    parts = component.split(".")

    errors = check_arity(parts, 2, 3, name="MPEG-4 video")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1], "ObjectTypeIndication")
    if len(parts) == 3 and not is_decimal(parts[2]):
        errors.append(
            error(
                "profile_and_level_indication must be decimal, got '{}'".format(
                    parts[2]
                )
            )
        )
    if errors:
        return errors

    oti = int(parts[1], 16)
    if oti not in MPEG_VIDEO_OTIS:
        return [error("invalid value for ObjectTypeIndication ({})".format(parts[1]))]

    out = [OBJECT_TYPE_INDICATIONS[oti]]
    if oti == MPEG4_VISUAL_OTI and len(parts) == 3:
        out.append(describe_profile_level_indication(int(parts[2])))
    return out


def decode_mpeg2_video(component):
    """
    Decode an ``mp2v`` or ``mp1v`` codec string (OTI only).
    """
    parts = component.split(".")

    errors = check_arity(parts, 2, name="MPEG video")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1], "ObjectTypeIndication")
    if errors:
        return errors

    return [describe_object_type(int(parts[1], 16))]


def decode_mpeg2_audio(component):
    """
    Decode an ``mp2a`` or ``mp1a`` codec string: the OTI optionally followed
    by the ISO/IEC 11172-3 ``layer`` field.
    """
    parts = component.split(".")

    errors = check_arity(parts, 2, 3, name="MPEG audio")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1, 2], "MPEG audio parameter")
    if errors:
        return errors

    out = [describe_object_type(int(parts[1], 16))]
    if len(parts) == 3:
        layer = int(parts[2], 16)
        if layer in AUDIO_LAYERS:
            out.append(normal("Layer={}".format(AUDIO_LAYERS[layer])))
        else:
            out.append(error("invalid layer ({})".format(layer)))
    return out


def register_mpeg(builder):
    builder.register("mp4a", "AAC", decode_mpeg4_audio)
    builder.register("mp4v", "MPEG-4 video", decode_mpeg4_video)
    builder.register("mp2v", "MPEG-2 video", decode_mpeg2_video)
    builder.register("mp2a", "MPEG-2 audio", decode_mpeg2_audio)
    builder.register("mp1v", "MPEG-1 video", decode_mpeg2_video)
    builder.register("mp1a", "MPEG-1 audio", decode_mpeg2_audio)
    builder.register("tx3g", "3GPP timed text", describe_only("3GPP timed text"))
    builder.register("mjp2", "Motion JPEG 2000", describe_only("Motion JPEG 2000"))
