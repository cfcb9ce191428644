"""
:py:mod:`codec_string_explain.decoders.dts`: DTS audio
======================================================

DTS codec strings (ETSI TS 103 285 Table 10) consist of the sample entry
identifier alone; no parameters follow it.
"""

from codec_string_explain.diagnostics import normal, error

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "SAMPLE_ENTRIES",
    "decode_dts",
    "register_dts",
]


SAMPLE_ENTRIES = [
    ("dtsc", "DTS-HD Core"),
    ("dtsh", "DTS-HD (with legacy core)"),
    ("dtse", "DTS-HD Low Bit Rate"),
    ("dtsl", "DTS-HD (lossless, without legacy core)"),
    ("dtsx", "DTS UHD (Profile 2)"),
    ("dtsy", "DTS UHD (Profile 3)"),
]
"""Each DTS sample entry identifier and its label, in registration order."""

UHD_SAMPLE_ENTRIES = ("dtsx", "dtsy")


def decode_dts(component):
    if "." in component:
        return [error("no codec arguments should be provided for DTS audio")]

    sample_entry = component.lower()
    level = "UHD" if sample_entry in UHD_SAMPLE_ENTRIES else "HD"

    out = [normal("DTS-{}".format(level))]
    out.extend(
        classification_terms(
            {"type": "audio", "codec": "DTS", "level": level, "mode": sample_entry}
        )
    )
    return out


def register_dts(builder):
    for sample_entry, label in SAMPLE_ENTRIES:
        builder.register(sample_entry, label, decode_dts)
