import pytest

from codec_string_explain.diagnostics import (
    normal,
    error,
    informative,
    texts,
)

from codec_string_explain.exceptions import (
    TableDefinitionError,
    OverlappingBitsError,
    DuplicateKeyError,
)

from codec_string_explain.decoders.vvc import (
    PROFILES,
    ConstraintField,
    ConstraintTable,
    GENERAL_CONSTRAINTS,
    VVC_FORMAT,
    decode_general_constraint_info,
    decode_vvc,
)


class TestDecodeVVC(object):
    def test_minimal(self):
        assert decode_vvc("vvc1.1.L51") == [
            normal("general_profile_idc=Main 10 (1)"),
            normal("Main Tier (L)"),
            normal("Level 3.1"),
        ]

    def test_high_tier(self):
        assert texts(decode_vvc("vvi1.65.h83")) == [
            "general_profile_idc=Main 10 Still Picture (65)",
            "High Tier (H)",
            "Level 5.1",
        ]

    @pytest.mark.parametrize(
        "component,exp_diagnostics",
        [
            (
                "vvc1.2.L51",
                [
                    error("unknown Profile (2)"),
                    normal("Main Tier (L)"),
                    normal("Level 3.1"),
                ],
            ),
            (
                "vvc1.1.X51",
                [
                    normal("general_profile_idc=Main 10 (1)"),
                    error("unknown Tier (X)"),
                    normal("Level 3.1"),
                ],
            ),
            (
                "vvc1.1.L52",
                [
                    normal("general_profile_idc=Main 10 (1)"),
                    normal("Main Tier (L)"),
                    error("unknown Level (52)"),
                ],
            ),
        ],
    )
    def test_unresolved_fields(self, component, exp_diagnostics):
        assert decode_vvc(component) == exp_diagnostics

    def test_all_optional_fields(self):
        assert texts(decode_vvc("vvc1.1.L51.CQA.S1+ff.O1+3"))[3:] == [
            "8000",
            "1000000000000000",
            "gci_present_flag=1",
            "gci_sixteen_minus_max_bitdepth_constraint_idc=0",
            "gci_three_minus_max_chroma_format_constraint_idc=0",
            "gci_three_minus_max_log2_ctu_size_constraint_idc=0",
            "gci_num_reserved_bits=0",
            "Sub profile (1)=1",
            "Sub profile (2)=255",
            "Output Layer Set index ('OlsIdx')=1",
            "Maximum Temporal Id ('MaxTid')=3",
        ]

    @pytest.mark.parametrize(
        "output_layers,exp_texts",
        [
            ("O1", ["Output Layer Set index ('OlsIdx')=1"]),
            ("O+2", ["Maximum Temporal Id ('MaxTid')=2"]),
            ("o0+0", ["Output Layer Set index ('OlsIdx')=0",
                      "Maximum Temporal Id ('MaxTid')=0"]),
            ("O", []),
        ],
    )
    def test_output_layers(self, output_layers, exp_texts):
        assert texts(decode_vvc("vvc1.1.L51.{}".format(output_layers)))[3:] == (
            exp_texts
        )

    def test_lower_case_prefixes(self):
        assert decode_vvc("vvc1.1.L51.cqa.s1") == decode_vvc("vvc1.1.L51.CQA.S1")

    @pytest.mark.parametrize(
        "component,exp_errors",
        [
            ("vvc1", ["VVC codec requires at least 3 parts, got 1"]),
            ("vvc1.1", ["VVC codec requires at least 3 parts, got 2"]),
            (
                "vvc1.1.L51.CA.S1.O1.O2",
                ["VVC codec allows at most 6 parts, got 7"],
            ),
            ("vvc1.x.L51", ["invalid general_profile_idc (x)"]),
            ("vvc1.1.51", ["invalid tier and level (51)"]),
            ("vvc1.1.L51.X1", ["unrecognised field (X1)"]),
            ("vvc1.1.L51.", ["unrecognised field ()"]),
            ("vvc1.1.L51.O1.C2", ["field out of order (C2)"]),
            ("vvc1.1.L51.CA.CA", ["field out of order (CA)"]),
            ("vvc1.1.L51.C1", ["invalid field (C1)"]),
            ("vvc1.1.L51.C", ["invalid field (C)"]),
            ("vvc1.1.L51.Sxyz", ["invalid field (Sxyz)"]),
            ("vvc1.1.L51.S123456789", ["invalid field (S123456789)"]),
            (
                "vvc1.x.51.X1",
                [
                    "invalid general_profile_idc (x)",
                    "invalid tier and level (51)",
                    "unrecognised field (X1)",
                ],
            ),
        ],
    )
    def test_structural_errors(self, component, exp_errors):
        assert decode_vvc(component) == [error(e) for e in exp_errors] + [
            error(VVC_FORMAT)
        ]


class TestDecodeGeneralConstraintInfo(object):
    def test_not_present(self):
        assert decode_general_constraint_info("CQA") == [
            informative("1400"),
            informative("0001010000000000"),
            normal("gci_present_flag=0"),
        ]

    def test_flags_and_fields(self):
        assert texts(decode_general_constraint_info("7")) == [
            "f8",
            "11111000",
            "gci_present_flag=1",
            "gci_intra_only_constraint_flag",
            "gci_all_layers_independent_constraint_flag",
            "gci_one_au_only_constraint_flag",
            "gci_sixteen_minus_max_bitdepth_constraint_idc=8",
            "gci_three_minus_max_chroma_format_constraint_idc=0",
            "gci_three_minus_max_log2_ctu_size_constraint_idc=0",
            "gci_num_reserved_bits=0",
        ]

    def test_case_insensitive(self):
        assert decode_general_constraint_info("cqa") == (
            decode_general_constraint_info("CQA")
        )


class TestConstraintTable(object):
    def test_overlapping_bits(self):
        with pytest.raises(OverlappingBitsError):
            ConstraintTable([ConstraintField(0, "a", 2), ConstraintField(1, "b", 1)])

    def test_duplicate_names(self):
        with pytest.raises(DuplicateKeyError):
            ConstraintTable([ConstraintField(0, "a", 1), ConstraintField(1, "a", 1)])

    @pytest.mark.parametrize("bit,length", [(-1, 1), (0, 0)])
    def test_invalid_span(self, bit, length):
        with pytest.raises(TableDefinitionError):
            ConstraintTable([ConstraintField(bit, "a", length)])

    def test_adjacent_fields(self):
        table = ConstraintTable(
            [ConstraintField(0, "a", 2), ConstraintField(2, "b", 1)]
        )
        assert len(table) == 2
        assert [field.name for field in table] == ["a", "b"]

    def test_general_constraints(self):
        fields = list(GENERAL_CONSTRAINTS)
        assert fields[0] == ConstraintField(0, "gci_present_flag", 1)
        assert ConstraintField(59, "gci_no_sbt_constraint_flag", 1) in fields
        assert fields[-1] == ConstraintField(72, "gci_num_reserved_bits", 8)
        # Contiguous from the first bit
        bit = 0
        for field in fields:
            assert field.bit == bit
            bit += field.length


def test_profiles_have_no_compatibility_bits():
    assert all(rule.bit is None for rule in PROFILES)
