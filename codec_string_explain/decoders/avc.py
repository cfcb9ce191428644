"""
:py:mod:`codec_string_explain.decoders.avc`: AVC/H.264 (ISO/IEC 14496-10)
=========================================================================

Codec strings of the form ``avc1.PPCCLL`` where ``PP``, ``CC`` and ``LL`` are
the hexadecimal ``profile_idc``, constraint_set flags and ``level_idc``
(RFC 6381). The same form is used by the ``avc2``-``avc4``, ``mvc1``,
``mvc2`` and ``svc1`` sample entries.

    >>> from codec_string_explain.diagnostics import texts
    >>> texts(decode_avc("avc1.42E01E"))[1:]
    ['profile=Constrained Baseline (42)', 'constraints=012---', 'level=3 (1e)']
"""

from codec_string_explain.bitfield import BitfieldBuffer

from codec_string_explain.diagnostics import normal, error

from codec_string_explain.string_formatters import Hex

from codec_string_explain.validation import check_arity, is_hex

from codec_string_explain.decoders._common import classification_terms

__all__ = [
    "LEVELS",
    "profile_name",
    "level_name",
    "decode_avc",
    "register_avc",
]


hex_lower = Hex(prefix="", upper=False)


LEVELS = {
    0x0A: "1",
    0x0B: "1.1",
    0x0C: "1.2",
    0x0D: "1.3",
    0x14: "2",
    0x15: "2.1",
    0x16: "2.2",
    0x1E: "3",
    0x1F: "3.1",
    0x20: "3.2",
    0x28: "4",
    0x29: "4.1",
    0x2A: "4.2",
    0x32: "5",
    0x33: "5.1",
    0x34: "5.2",
    0x3C: "6",
    0x3D: "6.1",
    0x3E: "6.2",
}
"""Lookup from ``level_idc`` to level name (ISO/IEC 14496-10 Table A-1)."""


def profile_name(profile_idc, constraints):
    """
    Return the name of an AVC profile, or None if ``profile_idc`` is unknown.

    Parameters
    ==========
    profile_idc : int
    constraints : :py:class:`~codec_string_explain.bitfield.BitfieldBuffer`
        The constraint_set flags octet. constraint_set\\ *i*\\ _flag is
        canonical bit *i*.
    """
    flag = constraints.bitset_b

    if profile_idc == 0x2C:
        return "CAVLC 4:4:4"
    elif profile_idc == 0x42:
        return "Constrained Baseline" if flag(1) else "Baseline"
    elif profile_idc == 0x4D:
        return "Constrained Main" if flag(1) else "Main"
    elif profile_idc == 0x53:
        return "Scalable Constrained Base" if flag(5) else "Scalable Base"
    elif profile_idc == 0x56:
        if flag(5) and not flag(3):
            return "Scalable Constrained High"
        elif flag(3) and not flag(5):
            return "Scalable Intra High"
        else:
            return "Scalable High"
    elif profile_idc == 0x58:
        return "Extended"
    elif profile_idc == 0x63:
        return "High 10 Intra" if flag(3) else "High 10"
    elif profile_idc == 0x64:
        if flag(4) and not flag(5):
            return "Progressive High"
        elif flag(5) and not flag(4):
            return "Constrained High"
        else:
            return "High"
    elif profile_idc == 0x76:
        return "Multiview High"
    elif profile_idc == 0x7A:
        return "High 4:2:2 Intra" if flag(3) else "High 4:2:2"
    elif profile_idc == 0x80:
        return "Stereo High"
    elif profile_idc == 0x86:
        return "MFC High"
    elif profile_idc == 0x87:
        return "MFC Depth High"
    elif profile_idc == 0x8A:
        return "Multiview Depth High"
    elif profile_idc == 0x8B:
        return "Enhanced Multiview Depth High"
    elif profile_idc == 0xF4:
        return "High 4:4:4 Intra" if flag(3) else "High 4:4:4 Predictive"
    else:
        return None


def level_name(level_idc, constraints):
    """
    Return the name of an AVC level, or None if ``level_idc`` is unknown.
    Level 1b is signalled as ``level_idc`` 11 with constraint_set3_flag set.
    """
    if level_idc == 0x0B and constraints.bitset_b(3):
        return "1b"
    return LEVELS.get(level_idc)


def decode_avc(component):
    parts = component.split(".")

    errors = check_arity(parts, 2, name="AVC")
    if errors:
        return errors

    params = parts[1]
    if len(params) != 6:
        return [
            error(
                "invalid parameters length ({}) - should be 6".format(len(params))
            )
        ]
    if not is_hex(params):
        return [error("parameters contains non-hex digits")]

    profile_idc = int(params[0:2], 16)
    constraint_set = int(params[2:4], 16)
    level_idc = int(params[4:6], 16)

    constraints = BitfieldBuffer([constraint_set])
    coding_params = {"type": "video", "codec": parts[0]}

    out = [
        normal(
            "profile_idc={} constraint_set={} level_idc={}".format(
                profile_idc, constraint_set, level_idc
            )
        )
    ]

    profile = profile_name(profile_idc, constraints)
    if profile is None:
        coding_params["profile"] = "unknown"
        out.append(error("unknown profile ({})".format(profile_idc)))
    else:
        coding_params["profile"] = profile
        out.append(normal("profile={} ({})".format(profile, hex_lower(profile_idc))))

    out.append(
        normal(
            "constraints={}".format(
                "".join(str(i) if constraints.bitset_b(i) else "-" for i in range(6))
            )
        )
    )

    level = level_name(level_idc, constraints)
    if level is None:
        coding_params["level"] = "undefined"
        out.append(error("level=undefined ({})".format(level_idc)))
    else:
        coding_params["level"] = level
        out.append(normal("level={} ({})".format(level, hex_lower(level_idc))))

    out.extend(classification_terms(coding_params))

    return out


def register_avc(builder):
    builder.register(["avc1", "avc2", "avc3", "avc4"], "AVC/H.264", decode_avc)
    builder.register(["mvc1", "mvc2"], "Multiview Coding", decode_avc)
    builder.register("svc1", "Scalable Video Coding", decode_avc)
