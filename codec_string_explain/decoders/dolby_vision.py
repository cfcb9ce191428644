"""
:py:mod:`codec_string_explain.decoders.dolby_vision`: Dolby Vision
==================================================================

Codec strings of the form ``<sample entry>.<profile>.<level>`` where the
bitstream profile ID and level ID are each two decimal digits, e.g.
``dvh1.08.06``.
"""

import re

from codec_string_explain.diagnostics import normal, error

__all__ = [
    "SAMPLE_ENTRIES",
    "PROFILE_IDS",
    "decode_dolby_vision",
    "register_dolby_vision",
]


SAMPLE_ENTRIES = {
    "dvhe": (
        "HEVC-based Dolby Vision codec.",
        "Parameter sets (VPS, PPS, or SPS) are stored either in the sample "
        "entries or as part of the samples, or in both.",
    ),
    "dvh1": (
        "HEVC-based Dolby Vision codec.",
        "Parameter sets (VPS, PPS, or SPS) are stored in the sample entries only.",
    ),
    "dvav": (
        "AVC-based Dolby Vision codec.",
        "Parameter sets (PPS or SPS) are stored either in the sample entries or "
        "as part of the samples, or in both.",
    ),
    "dva1": (
        "AVC-based Dolby Vision codec.",
        "Parameter sets (PPS or SPS) are stored either in the sample entries of "
        "the video stream or in the parameter set stream, but never in both.",
    ),
}
"""Description of each Dolby Vision sample entry type."""

PROFILE_IDS = (5, 7, 8, 9, 20)
"""Recognised bitstream profile IDs."""

MIN_LEVEL_ID = 1
MAX_LEVEL_ID = 13

DOLBY_VISION_FORMAT = "[Codec_type].[bitstream_profile_ID].[Dolby_Vision_Level_ID]"

DOLBY_VISION_RE = re.compile(r"(dvav|dvhe|dvh1|dva1)\.(\d{2})\.(\d{2})", re.IGNORECASE)


def decode_dolby_vision(component):
    match = DOLBY_VISION_RE.fullmatch(component)
    if match is None:
        return [
            error("invalid Dolby Vision codec string ({})".format(component)),
            error(DOLBY_VISION_FORMAT),
        ]

    sample_entry, profile, level = match.groups()

    out = [normal(text) for text in SAMPLE_ENTRIES[sample_entry.lower()]]

    if int(profile) in PROFILE_IDS:
        out.append(normal("Bitstream Profile ID: {}".format(profile)))
    else:
        out.append(error("Unrecognised bitstream_profile_id ({})".format(profile)))

    if MIN_LEVEL_ID <= int(level) <= MAX_LEVEL_ID:
        out.append(normal("Level ID: {}".format(level)))
    else:
        out.append(error("Unrecognised level_id ({})".format(level)))

    return out


def register_dolby_vision(builder):
    builder.register(
        ["dvhe", "dvh1", "dvav", "dva1"], "Dolby Vision stream", decode_dolby_vision
    )
