"""
:py:mod:`codec_string_explain.decoders.hevc`: HEVC/H.265 (ISO/IEC 23008-2)
==========================================================================

Codec strings of the form (ISO/IEC 14496-15 Annex E)::

    hvc1.[A|B|C]<profile_idc>.<compatibility flags>.<L|H><level>[.<constraint byte>]*

The profile may be given explicitly by ``general_profile_idc`` or by setting
the matching ``general_profile_compatibility_flag``; both are resolved using
:py:data:`PROFILES`. Which of the (up to six) constraint bytes' flags are
meaningful depends on the profile signalled, so the profile family is
determined before the constraint flags are interpreted.

Constraint flags are numbered as in the general_profile_tier_level syntax:
the 48 bits following ``general_profile_idc`` are counted from 48 (the first
bit of the first constraint byte) down to 1 (the last bit of the sixth), i.e.
:py:meth:`~codec_string_explain.bitfield.BitfieldBuffer.bitset` numbering.
"""

import re

from codec_string_explain.bitfield import BitfieldBuffer

from codec_string_explain.diagnostics import normal, error, informative

from codec_string_explain.profiles import (
    ProfileRule,
    ProfileTable,
    LevelTable,
    resolve_tier,
)

from codec_string_explain.validation import (
    check_arity,
    check_hex_fields,
    showbit,
    split_letter_number,
)

from codec_string_explain.decoders._common import classification_terms, describe_only

__all__ = [
    "PROFILES",
    "LEVELS",
    "PROFILE_SPACES",
    "ConstraintFlags",
    "read_constraint_flags",
    "decode_hevc",
    "register_hevc",
]


PROFILES = ProfileTable(
    [
        ProfileRule(1, 1, "Main", "Main"),
        ProfileRule(2, 2, "Main 10", "Main 10"),
        ProfileRule(3, 3, "Main Still Picture", "Main Still"),
        ProfileRule(4, 4, "Range Extensions", None),
        ProfileRule(5, 5, "High Throughput", "High Throughput"),
        ProfileRule(6, 6, "Multiview Main", "Multiview Main"),
        ProfileRule(7, 7, "Scalable Main", "Scalable Main"),
        ProfileRule(8, 8, "3D Main", "3D Main"),
        ProfileRule(9, 9, "Screen Content Coding", "Screen Content"),
        ProfileRule(10, 10, "Multiview", "Multiview"),
        ProfileRule(
            11,
            11,
            "High Throughput Screen Content Coding",
            "High Throughput Screen Content",
        ),
        ProfileRule(12, 12, "Multiview extended", "Multiview extended"),
        ProfileRule(13, 13, "Multiview extended 10", "Multiview extended 10"),
    ]
)
"""
HEVC profiles (ISO/IEC 23008-2 Annex A), in order of precedence.
general_profile_compatibility_flag[j] signals profile j.
"""

LEVELS = LevelTable(
    [
        (30, "1"),
        (60, "2"),
        (63, "2.1"),
        (90, "3"),
        (93, "3.1"),
        (120, "4"),
        (123, "4.1"),
        (150, "5"),
        (153, "5.1"),
        (156, "5.2"),
        (180, "6"),
        (183, "6.1"),
        (186, "6.2"),
    ]
)
"""HEVC ``general_level_idc`` values (30 times the level number)."""

PROFILE_SPACES = {"": 0, "A": 1, "B": 2, "C": 3}
"""``general_profile_space`` for each profile field prefix letter."""

# Profiles whose constraint flags include the max bit depth/chroma flags
FORMAT_RANGE_PROFILES = (4, 5, 6, 7, 8, 9, 10, 11)

# Profiles which additionally have general_max_14bit_constraint_flag
MAX_14BIT_PROFILES = (5, 9, 10, 11)

# Profiles which have general_inbld_flag
INBLD_PROFILES = (1, 2, 3, 4, 5, 9, 11)

PROFILE_FIELD_RE = re.compile(r"([ABCabc]?)([0-9]{1,3})")

COMPATIBILITY_FIELD_RE = re.compile(r"[0-9A-Fa-f]{1,8}")

TIER_LEVEL_FIELD_RE = re.compile(r"[A-Za-z][0-9]{1,3}")

NUM_CONSTRAINT_BYTES = 6


class ConstraintFlags(object):
    """
    The interpreted general constraint flags of an HEVC codec string.

    Parameters
    ==========
    flags : :py:class:`~codec_string_explain.bitfield.BitfieldBuffer`
        The six constraint bytes.
    profile_idc : int
    compatibility_mask : int
    """

    def __init__(self, flags, profile_idc, compatibility_mask):
        self.flags = flags
        self.diagnostics = []

        def in_family(idcs):
            return PROFILES.in_family(idcs, profile_idc, compatibility_mask)

        self.diagnostics.append(informative("constraintFlags={}".format(flags)))

        progressive = flags.bitset(48)
        interlaced = flags.bitset(47)
        if progressive and not interlaced:
            self.diagnostics.append(normal("scan=progressive"))
        elif interlaced and not progressive:
            self.diagnostics.append(normal("scan=interlaced"))
        elif progressive and interlaced:
            self.diagnostics.append(normal("scan=source_scan_type in SEI"))
        else:
            self.diagnostics.append(error("scan=unknown or unspecified"))

        self._flag("general_non_packed_constraint_flag", 46)
        self._flag("general_frame_only_constraint_flag", 45)

        self.one_picture_only = False
        self.max_8bit = False
        if in_family(FORMAT_RANGE_PROFILES):
            self._flag("general_max_12bit_constraint_flag", 44)
            self._flag("general_max_10bit_constraint_flag", 43)
            self.max_8bit = self._flag("general_max_8bit_constraint_flag", 42)
            self._flag("general_max_422chroma_constraint_flag", 41)
            self._flag("general_max_420chroma_constraint_flag", 40)
            self._flag("general_max_monochrome_constraint_flag", 39)
            self._flag("general_intra_constraint_flag", 38)
            self.one_picture_only = self._flag(
                "general_one_picture_only_constraint_flag", 37
            )
            self._flag("general_lower_bit_rate_constraint_flag", 36)
            if in_family(MAX_14BIT_PROFILES):
                self._flag("general_max_14bit_constraint_flag", 35)
        elif in_family((2,)):
            self.one_picture_only = self._flag(
                "general_one_picture_only_constraint_flag", 37
            )

        if in_family(INBLD_PROFILES):
            self._flag("general_inbld_flag", 1)

    def _flag(self, name, bit):
        value = self.flags.bitset(bit)
        self.diagnostics.append(normal("{}={}".format(name, showbit(value))))
        return value


def read_constraint_flags(parts):
    """
    Return a :py:class:`~codec_string_explain.bitfield.BitfieldBuffer`
    containing the six constraint bytes given in ``parts`` (which must already
    be validated as hex). Absent bytes are zero.
    """
    flags = BitfieldBuffer()
    for part in (parts + [""] * NUM_CONSTRAINT_BYTES)[:NUM_CONSTRAINT_BYTES]:
        flags.push(int(part, 16) if part else 0)
    return flags


def validate(parts):
    """Return structural errors for a split HEVC codec string."""
    errors = check_arity(parts, 5, 4 + NUM_CONSTRAINT_BYTES, name="HEVC codec")
    if errors:
        return errors

    if PROFILE_FIELD_RE.fullmatch(parts[1]) is None:
        errors.append(error("invalid general_profile_idc ({})".format(parts[1])))
    if COMPATIBILITY_FIELD_RE.fullmatch(parts[2]) is None:
        errors.append(
            error(
                "general_profile_compatibility_flag not expressed in hexadecimal ({})".format(
                    parts[2]
                )
            )
        )
    if TIER_LEVEL_FIELD_RE.fullmatch(parts[3]) is None:
        errors.append(error("invalid tier and level ({})".format(parts[3])))

    for i, part in enumerate(parts[4:], 4):
        if len(part) > 2:
            errors.append(error("constraint byte ({}) too long ({})".format(i, part)))
    errors.extend(
        check_hex_fields(parts, range(4, len(parts)), "constraint flags byte")
    )

    return errors


def decode_hevc(component):
    parts = component.split(".")

    errors = validate(parts)
    if errors:
        return errors

    prefix, profile_idc = PROFILE_FIELD_RE.fullmatch(parts[1]).groups()
    profile_idc = int(profile_idc)
    profile_space = PROFILE_SPACES[prefix.upper()]
    compatibility_mask = int(parts[2], 16)

    coding_params = {"type": "video", "codec": parts[0]}
    out = []

    constraints = ConstraintFlags(
        read_constraint_flags(parts[4:]), profile_idc, compatibility_mask
    )

    out.append(normal("general_profile_space={}".format(profile_space)))

    profile = PROFILES.resolve(profile_idc, compatibility_mask)
    if profile is None:
        out.append(error("unknown profile"))
    else:
        name = profile.name
        if profile.idc == 2 and constraints.one_picture_only:
            name = "Main 10 Still Picture"
        elif profile.idc == 7 and not constraints.max_8bit:
            name = "Scalable Main 10"
        out.append(normal("general_profile_idc={} ({})".format(name, profile.idc)))
        if profile.family is not None:
            coding_params["profile"] = profile.family

    tier_letter, level_idc = split_letter_number(parts[3])
    tier = resolve_tier(tier_letter)
    if tier is None:
        out.append(error("unknown Tier ({})".format(tier_letter)))
    else:
        out.append(normal("{} Tier ({})".format(tier, tier_letter.upper())))
        coding_params["tier"] = tier

    level = LEVELS.lookup(level_idc)
    if level is None:
        out.append(error("unknown Level ({})".format(level_idc)))
    else:
        out.append(normal("Level {}".format(level)))
        coding_params["level"] = level

    out.extend(constraints.diagnostics)
    out.extend(classification_terms(coding_params))

    return out


def register_hevc(builder):
    builder.register(["hev1", "hvc1"], "HEVC/H.265", decode_hevc)
    builder.register("lhv1", "Layered HEVC", describe_only("Layered HEVC"))
