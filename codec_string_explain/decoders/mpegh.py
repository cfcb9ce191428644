"""
:py:mod:`codec_string_explain.decoders.mpegh`: MPEG-H 3D Audio (ISO/IEC 23008-3)
================================================================================

Codec strings of the form ``mhm1.0x<LL>`` or ``mhm2.0x<LL>`` where ``LL`` is
the hexadecimal mpegh3daProfileLevelIndication (ISO/IEC 23000-19 Amd.2).
"""

import re

from codec_string_explain.diagnostics import normal, error

from codec_string_explain.validation import check_arity

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "PROFILE_LEVELS",
    "decode_mpegh",
    "register_mpegh",
]


PROFILE_LEVELS = {
    0x0B: ("LC", "1"),
    0x0C: ("LC", "2"),
    0x0D: ("LC", "3"),
    0x10: ("BL", "1"),
    0x11: ("BL", "2"),
    0x12: ("BL", "3"),
}
"""
Lookup from mpegh3daProfileLevelIndication to (profile, level) for the Low
Complexity (LC) and Baseline (BL) profiles.
"""

PROFILE_LEVEL_FIELD_RE = re.compile(r"(?:0[xX])?([0-9A-Fa-f]{1,2})")


def decode_mpegh(component):
    parts = component.split(".")

    errors = check_arity(parts, 2, name="MPEG-H audio")
    if errors:
        return errors

    match = PROFILE_LEVEL_FIELD_RE.fullmatch(parts[1])
    if match is None:
        return [error("invalid level ({})".format(parts[1]))]

    indication = int(match.group(1), 16)
    if indication not in PROFILE_LEVELS:
        return [error("invalid level ({})".format(parts[1]))]

    mode, level = PROFILE_LEVELS[indication]
    text = "{} Profile Level {}".format(mode, level)
    if parts[0].lower() == "mhm2":
        text += ", multi-stream"

    out = [normal(text)]
    out.extend(
        classification_terms(
            {"type": "audio", "codec": parts[0], "mode": mode, "level": level}
        )
    )
    return out


def register_mpegh(builder):
    builder.register(["mhm1", "mhm2"], "MPEG-H Audio", decode_mpegh)
