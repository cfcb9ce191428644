"""
:py:mod:`codec_string_explain.decoders.vvc`: VVC/H.266 (ISO/IEC 23090-3)
========================================================================

Codec strings of the form (ISO/IEC 14496-15 Annex E)::

    vvc1.<profile_idc>.<L|H><op_level_idc>[.C<gci>][.S<sub profile>[+<sub profile>]*][.O<OlsIdx>[+<MaxTid>]]

The optional general constraint info (``C``) field is the
general_constraints_info() syntax structure, RFC 4648 base32 encoded with
trailing zero bits (and padding) omitted. Its flags are numbered from the
first bit of the structure, i.e. using
:py:meth:`~codec_string_explain.bitfield.BitfieldBuffer.bitset_b` numbering,
as listed in :py:data:`GENERAL_CONSTRAINTS`.
"""

import re

from collections import namedtuple

from bitarray.util import base2ba

from codec_string_explain.bitfield import BitfieldBuffer

from codec_string_explain.diagnostics import normal, error, informative

from codec_string_explain.exceptions import (
    TableDefinitionError,
    OverlappingBitsError,
    DuplicateKeyError,
)

from codec_string_explain.profiles import (
    ProfileRule,
    ProfileTable,
    LevelTable,
    resolve_tier,
)

from codec_string_explain.validation import check_arity, split_letter_number

from codec_string_explain.decoders._common import classification_terms, describe_only

__all__ = [
    "PROFILES",
    "LEVELS",
    "ConstraintField",
    "ConstraintTable",
    "GENERAL_CONSTRAINTS",
    "decode_general_constraint_info",
    "decode_vvc",
    "register_vvc",
]


PROFILES = ProfileTable(
    [
        ProfileRule(1, None, "Main 10", "Main 10"),
        ProfileRule(65, None, "Main 10 Still Picture", "Main 10 Still Picture"),
        ProfileRule(33, None, "Main 10 4:4:4", "Main 10 4:4:4"),
        ProfileRule(
            97, None, "Main 10 4:4:4 Still Picture", "Main 10 4:4:4 Still Picture"
        ),
        ProfileRule(17, None, "Multilayer Main 10", "Multilayer Main 10"),
        ProfileRule(49, None, "Multilayer Main 10 4:4:4", "Multilayer Main 10 4:4:4"),
    ]
)
"""VVC profiles (ISO/IEC 23090-3 Annex A)."""

LEVELS = LevelTable(
    [
        (16, "1.0"),
        (32, "2.0"),
        (35, "2.1"),
        (48, "3.0"),
        (51, "3.1"),
        (64, "4.0"),
        (67, "4.1"),
        (80, "5.0"),
        (83, "5.1"),
        (86, "5.2"),
        (96, "6.0"),
        (99, "6.1"),
        (102, "6.2"),
    ]
)
"""VVC ``general_level_idc`` values (ISO/IEC 23090-3 Table A.8)."""


ConstraintField = namedtuple("ConstraintField", "bit,name,length")
"""
A field in a packed constraint structure.

Parameters
==========
bit : int
    The (canonical) number of the field's first bit.
name : str
length : int
    The field's width in bits. Single bit fields are flags.
"""


class ConstraintTable(object):
    """
    An ordered, read-only table of :py:class:`ConstraintField`. Raises
    :py:exc:`~codec_string_explain.exceptions.OverlappingBitsError` if two
    fields claim the same bit,
    :py:exc:`~codec_string_explain.exceptions.DuplicateKeyError` if a name
    appears twice and
    :py:exc:`~codec_string_explain.exceptions.TableDefinitionError` if a
    field has a negative bit number or a zero length.
    """

    def __init__(self, fields):
        self._fields = tuple(fields)

        owners = {}
        names = set()
        for field in self._fields:
            if field.name in names:
                raise DuplicateKeyError("{} listed twice".format(field.name))
            names.add(field.name)

            if field.bit < 0 or field.length < 1:
                raise TableDefinitionError(
                    "{} has invalid bit span ({}, {})".format(
                        field.name, field.bit, field.length
                    )
                )

            for bit in range(field.bit, field.bit + field.length):
                if bit in owners:
                    raise OverlappingBitsError(
                        "bit {} claimed by both {} and {}".format(
                            bit, owners[bit], field.name
                        )
                    )
                owners[bit] = field.name

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)


def _flag(bit, name):
    return ConstraintField(bit, "gci_{}_constraint_flag".format(name), 1)


def _idc(bit, name, length):
    return ConstraintField(bit, "gci_{}_constraint_idc".format(name), length)


GENERAL_CONSTRAINTS = ConstraintTable(
    [
        ConstraintField(0, "gci_present_flag", 1),
        _flag(1, "intra_only"),
        _flag(2, "all_layers_independent"),
        _flag(3, "one_au_only"),
        _idc(4, "sixteen_minus_max_bitdepth", 4),
        _idc(8, "three_minus_max_chroma_format", 2),
        _flag(10, "no_mixed_nalu_types_in_pic"),
        _flag(11, "no_trail"),
        _flag(12, "no_stsa"),
        _flag(13, "no_rasl"),
        _flag(14, "no_radl"),
        _flag(15, "no_idr"),
        _flag(16, "no_cra"),
        _flag(17, "no_gdr"),
        _flag(18, "no_aps"),
        _flag(19, "no_idr_rpl"),
        _flag(20, "one_tile_per_pic"),
        _flag(21, "pic_header_in_slice_header"),
        _flag(22, "one_slice_per_pic"),
        _flag(23, "no_rectangular_slice"),
        _flag(24, "one_slice_per_subpic"),
        _flag(25, "no_subpic_info"),
        _idc(26, "three_minus_max_log2_ctu_size", 2),
        _flag(28, "no_partition_constraints_override"),
        _flag(29, "no_mtt"),
        _flag(30, "no_qtbtt_dual_tree_intra"),
        _flag(31, "no_palette"),
        _flag(32, "no_ibc"),
        _flag(33, "no_isp"),
        _flag(34, "no_mrl"),
        _flag(35, "no_mip"),
        _flag(36, "no_cclm"),
        _flag(37, "no_ref_pic_resampling"),
        _flag(38, "no_res_change_in_clvs"),
        _flag(39, "no_weighted_prediction"),
        _flag(40, "no_ref_wraparound"),
        _flag(41, "no_temporal_mvp"),
        _flag(42, "no_sbtmvp"),
        _flag(43, "no_amvr"),
        _flag(44, "no_bdof"),
        _flag(45, "no_smvd"),
        _flag(46, "no_dmvr"),
        _flag(47, "no_mmvd"),
        _flag(48, "no_affine_motion"),
        _flag(49, "no_prof"),
        _flag(50, "no_bcw"),
        _flag(51, "no_ciip"),
        _flag(52, "no_gpm"),
        _flag(53, "no_luma_transform_size_64"),
        _flag(54, "no_transform_skip"),
        _flag(55, "no_bdpcm"),
        _flag(56, "no_mts"),
        _flag(57, "no_lfnst"),
        _flag(58, "no_joint_cbcr"),
        _flag(59, "no_sbt"),
        _flag(60, "no_act"),
        _flag(61, "no_explicit_scaling_list"),
        _flag(62, "no_dep_quant"),
        _flag(63, "no_sign_data_hiding"),
        _flag(64, "no_cu_qp_delta"),
        _flag(65, "no_chroma_qp_offset"),
        _flag(66, "no_sao"),
        _flag(67, "no_alf"),
        _flag(68, "no_ccalf"),
        _flag(69, "no_lmcs"),
        _flag(70, "no_ladf"),
        _flag(71, "no_virtual_boundaries"),
        ConstraintField(72, "gci_num_reserved_bits", 8),
    ]
)
"""
The fields of general_constraints_info() (ISO/IEC 23090-3 section 7.3.3.2).
Field 0 (gci_present_flag) indicates whether the remaining fields are
present.
"""

VVC_FORMAT = (
    "<sample entry 4CC>.<general_profile_idc>.[LH]<op_level_idc>"
    "{.C<general_constraint_info>}{.S<general_sub_profile_idc>}"
    "{.O{<OlsIdx>}{+<MaxTid>}}"
)

PROFILE_FIELD_RE = re.compile(r"[0-9]+")

TIER_LEVEL_FIELD_RE = re.compile(r"[A-Za-z][0-9]+")

# Optional fields, in the order they must appear
OPTIONAL_FIELD_RES = [
    ("C", re.compile(r"[Cc]([A-Za-z2-7]+)")),
    ("S", re.compile(r"[Ss]([0-9A-Fa-f]{1,8}(?:\+[0-9A-Fa-f]{1,8})*)")),
    ("O", re.compile(r"[Oo]([0-9]+)?(?:\+([0-9]+))?")),
]


def decode_general_constraint_info(gci):
    """
    Decode a base32 general constraint info field (without its 'C' prefix).

    Returns a list of diagnostics: the constraint bytes in hex and binary
    (informative), gci_present_flag and, if that flag is set, each set
    constraint flag and the value of each multi-bit field.
    """
    bits = base2ba(32, gci.upper(), endian="big")
    bits.fill()
    flags = BitfieldBuffer(bits.tobytes())

    out = [
        informative(flags.to_hex()),
        informative(flags.to_bit_string()),
    ]

    fields = iter(GENERAL_CONSTRAINTS)
    present_field = next(fields)
    present = flags.bitset_b(present_field.bit)
    out.append(normal("{}={}".format(present_field.name, int(present))))

    if present:
        for field in fields:
            if field.length == 1:
                if flags.bitset_b(field.bit):
                    out.append(normal(field.name))
            else:
                out.append(
                    normal(
                        "{}={}".format(
                            field.name, flags.value_b(field.bit, field.length)
                        )
                    )
                )

    return out


def decode_sub_profiles(sub_profiles):
    return [
        normal("Sub profile ({})={}".format(i, int(sub_profile, 16)))
        for i, sub_profile in enumerate(sub_profiles.split("+"), 1)
    ]


def decode_output_layers(ols_idx, max_tid):
    out = []
    if ols_idx is not None:
        out.append(normal("Output Layer Set index ('OlsIdx')={}".format(int(ols_idx))))
    if max_tid is not None:
        out.append(normal("Maximum Temporal Id ('MaxTid')={}".format(int(max_tid))))
    return out


def validate(parts):
    """
    Return structural errors for a split VVC codec string, followed by a
    description of the expected format if there were any.
    """
    errors = check_arity(parts, 3, 6, name="VVC codec")
    if not errors:
        if PROFILE_FIELD_RE.fullmatch(parts[1]) is None:
            errors.append(error("invalid general_profile_idc ({})".format(parts[1])))
        if TIER_LEVEL_FIELD_RE.fullmatch(parts[2]) is None:
            errors.append(error("invalid tier and level ({})".format(parts[2])))

        next_field = 0
        for part in parts[3:]:
            prefixes = [prefix for prefix, _ in OPTIONAL_FIELD_RES]
            prefix = part[:1].upper()
            if prefix not in prefixes:
                errors.append(error("unrecognised field ({})".format(part)))
                continue

            index = prefixes.index(prefix)
            if index < next_field:
                errors.append(error("field out of order ({})".format(part)))
            elif OPTIONAL_FIELD_RES[index][1].fullmatch(part) is None:
                errors.append(error("invalid field ({})".format(part)))
            next_field = index + 1

    if errors:
        errors.append(error(VVC_FORMAT))
    return errors


def decode_vvc(component):
    parts = component.split(".")

    errors = validate(parts)
    if errors:
        return errors

    coding_params = {"type": "video", "codec": parts[0]}
    out = []

    profile_idc = int(parts[1])
    profile = PROFILES.resolve(profile_idc)
    if profile is None:
        coding_params["profile"] = ""
        out.append(error("unknown Profile ({})".format(profile_idc)))
    else:
        coding_params["profile"] = profile.family
        out.append(normal("general_profile_idc={} ({})".format(profile.name, profile_idc)))

    tier_letter, level_idc = split_letter_number(parts[2])
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

    for part in parts[3:]:
        prefix = part[0].upper()
        if prefix == "C":
            out.extend(decode_general_constraint_info(part[1:]))
        elif prefix == "S":
            out.extend(decode_sub_profiles(part[1:]))
        elif prefix == "O":
            match = OPTIONAL_FIELD_RES[2][1].fullmatch(part)
            out.extend(decode_output_layers(*match.groups()))

    out.extend(classification_terms(coding_params))

    return out


def register_vvc(builder):
    builder.register(["vvc1", "vvi1"], "MPEG Versatile Video Coding", decode_vvc)
    builder.register("vvcN", "VVC non-VCL track", describe_only("VVC non-VCL track"))
    builder.register(
        "vvs1", "VVC subpicture track", describe_only("VVC subpicture track")
    )
