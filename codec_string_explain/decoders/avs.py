"""
:py:mod:`codec_string_explain.decoders.avs`: AVS3 video and AVS audio
=====================================================================

AVS3 video codec strings (T/AI 109.6) take the form
``avs3.<profile_id>.<level_id>`` (or ``lav3`` for a library track) with both
fields given as two hexadecimal digits.

AVS audio codec strings take the form ``av3a.<codec_id>`` (AVS3 audio) or
``cavs.<codec_id>`` (AVS2 audio).
"""

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.validation import check_arity, check_hex_fields

from codec_string_explain.profiles import LevelTable

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "PROFILES",
    "LEVELS",
    "decode_avs3_video",
    "decode_avs_audio",
    "register_avs",
]


PROFILES = {
    0x20: "Main 8-bit profile",
    0x22: "Main 10-bit profile",
    0x30: "High 8-bit profile",
    0x32: "High 10-bit profile",
}

MAIN_PROFILES = (0x20, 0x22)

FORBIDDEN_LEVEL_ID = 0x00


def level_entries():
    """
    Generate (level_id, "<level>.<sub level>.<frame rate>") pairs for every
    AVS3 level.
    """
    yield (0x10, "2.0.15")
    yield (0x12, "2.0.30")
    yield (0x14, "2.0.60")
    yield (0x20, "4.0.30")
    yield (0x22, "4.0.60")
    for level, base in [(6, 0x40), (8, 0x50), (10, 0x60)]:
        for frame_rate, frame_rate_offset in [(30, 0x0), (60, 0x4), (120, 0x8)]:
            for sub_level, sub_level_offset in [(0, 0), (2, 2), (4, 1), (6, 3)]:
                yield (
                    base + frame_rate_offset + sub_level_offset,
                    "{}.{}.{}".format(level, sub_level, frame_rate),
                )


LEVELS = LevelTable(level_entries())
"""AVS3 level_id values and their levels."""

HIGH_PROFILE_ONLY_SUB_LEVELS = ("4", "6")
"""Sub levels 4 and 6 are only permitted in the High profiles."""

AUDIO_CODEC_IDS = {
    "av3a": {
        0: "general high rate coding",
        1: "lossless coding",
        2: "general full rate coding",
    },
    "cavs": {
        0: "general high rate coding",
        1: "lossless coding",
    },
}


def profile_supports_level(profile_id, version):
    if profile_id not in MAIN_PROFILES:
        return True
    return version.split(".")[1] not in HIGH_PROFILE_ONLY_SUB_LEVELS


def decode_avs3_video(component):
    parts = component.split(".")

    errors = check_arity(parts, 3, name="AVS3 video")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1, 2], "AVS3 profile_id/level_id")
    if errors:
        return errors

    profile_id = int(parts[1], 16)
    level_id = int(parts[2], 16)
    coding_params = {"type": "video", "codec": parts[0]}

    out = []

    if profile_id in PROFILES:
        out.append(normal(PROFILES[profile_id]))
        coding_params["profile"] = PROFILES[profile_id]
    else:
        out.append(error("invalid profile_id ({})".format(parts[1])))

    version = LEVELS.lookup(level_id)
    if version is not None:
        out.append(normal("Level {}".format(version)))
        coding_params["level"] = version
    elif level_id == FORBIDDEN_LEVEL_ID:
        out.append(warning("level_id 0 is forbidden"))
    else:
        out.append(error("invalid level_id ({})".format(parts[2])))

    if (
        profile_id in PROFILES
        and version is not None
        and not profile_supports_level(profile_id, version)
    ):
        out.append(
            warning(
                "specified profile ({}) does not support the specified "
                "level ({})".format(parts[1], parts[2])
            )
        )

    out.extend(classification_terms(coding_params))
    return out


def decode_avs_audio(component):
    parts = component.split(".")

    errors = check_arity(parts, 2, name="AVS audio")
    if errors:
        return errors

    errors = check_hex_fields(parts, [1], "codec_id")
    if errors:
        return errors

    codec_ids = AUDIO_CODEC_IDS[parts[0].lower()]
    codec_id = int(parts[1], 16)
    if codec_id not in codec_ids:
        return [error("invalid codec_id ({})".format(parts[1]))]
    return [normal("codec_id {}: {}".format(codec_id, codec_ids[codec_id]))]


def register_avs(builder):
    builder.register("avs3", "AVS3 Video", decode_avs3_video)
    builder.register("lav3", "AVS3 Library Track", decode_avs3_video)
    builder.register("av3a", "AVS3 Audio", decode_avs_audio)
    builder.register("cavs", "AVS2 Audio", decode_avs_audio)
