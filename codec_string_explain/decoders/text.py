"""
:py:mod:`codec_string_explain.decoders.text`: Timed text
========================================================

Subtitle and caption codec strings.

``stpp[.ttml[.<profile>]]``
    XML timed text (ISO/IEC 14496-30) where ``<profile>`` is a code from the
    W3C TTML Media Type Definition and Profile Registry.

``wvtt``
    WebVTT. No parameters are defined.
"""

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.decoders._common import describe_only

__all__ = [
    "TTML_PROFILES",
    "decode_stpp",
    "register_text",
]


TTML_PROFILES = {
    "cfi1": "DECE Image Subtitle Profile",
    "cft1": "DECE Text Subtitle Profile",
    "ede1": "IRT EBU-TT-D Basic DE",
    "etd1": "EBU-TT Distribution V1.0",
    "etd2": "EBU-TT Distribution V1.0.1",
    "etl1": "EBU-TT Live",
    "etx1": "EBU Subtitling Format v1.0",
    "etx2": "EBU Subtitling Format v1.1",
    "etx3": "EBU Subtitling Format v1.2",
    "im1i": "IMSC1 image",
    "im1t": "IMSC1 text",
    "im2i": "IMSC1.1 image",
    "im2t": "IMSC1.1 text",
    "im3t": "IMSC1.2 text",
    "rtp1": "RTP Payload for TTML",
    "tt1f": "TTML1 full",
    "tt1p": "TTML1 presentation",
    "tt1s": "TTML1 simple delivery for closed captions (US)",
    "tt1t": "TTML1 transformation",
    "tt2f": "TTML2 full",
    "tt2p": "TTML2 presentation",
    "tt2t": "TTML2 transformation",
}
"""TTML profile designators (W3C TTML Profile Registry)."""


def decode_stpp(component):
    parts = component.split(".")

    if len(parts) == 1:
        return [error("unknown format ({})".format(component))]

    if parts[1].lower() != "ttml":
        return [warning("unknown STPP mode ({})".format(parts[1]))]

    if len(parts) == 2:
        return [normal("generic timed text")]

    out = []
    for profile in parts[2:]:
        if profile.lower() in TTML_PROFILES:
            out.append(normal(TTML_PROFILES[profile.lower()]))
        else:
            out.append(warning("unknown TTML profile ({})".format(profile)))
    return out


def register_text(builder):
    builder.register("stpp", "XML timed-text subtitles", decode_stpp)
    builder.register("wvtt", "WebVTT", describe_only("WebVTT"))
