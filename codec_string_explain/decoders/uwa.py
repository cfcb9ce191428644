"""
:py:mod:`codec_string_explain.decoders.uwa`: HDR Vivid (T/UWA 005-2.1)
======================================================================

Codec strings of the form ``cuvv.<version bits>`` (T/UWA 005-2.1 clause 9.2)
where each ``1`` in the binary version string indicates that the
corresponding HDR Vivid version is present. The leftmost bit is the highest
version.
"""

import re

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "decode_hdr_vivid",
    "register_uwa",
]


HDR_VIVID_FORMAT = "cuvv.<version_bits>"

HDR_VIVID_RE = re.compile(r"cuvv\.([01]+)", re.IGNORECASE)


def decode_hdr_vivid(component):
    match = HDR_VIVID_RE.fullmatch(component)
    if match is None:
        return [
            error("invalid HDR Vivid codec string ({})".format(component)),
            error(HDR_VIVID_FORMAT),
        ]

    bits = match.group(1)

    out = []
    for i, bit in enumerate(bits):
        if bit == "1":
            out.append(
                normal("HDR Vivid version {} is present".format(len(bits) - i))
            )
    if not out:
        out.append(warning("No HDR Vivid versions present"))

    out.extend(classification_terms({"type": "video", "codec": "cuvv"}))
    return out


def register_uwa(builder):
    builder.register("cuvv", "HDR Vivid", decode_hdr_vivid)
