import pytest

from codec_string_explain.diagnostics import (
    normal,
    warning,
    error,
    default_used,
    has_errors,
)

from codec_string_explain.decoders.aom import (
    AV1_FORMAT,
    IAMF_FORMAT,
    level_version,
    decode_av1,
    decode_iamf,
)


@pytest.mark.parametrize(
    "seq_level_idx,exp_version",
    [
        (0, "2.0"),
        (3, "2.3"),
        (4, "3.0"),
        (13, "5.1"),
        (23, "7.3"),
        (24, None),
        (30, None),
        (31, "Max"),
        (32, None),
    ],
)
def test_level_version(seq_level_idx, exp_version):
    assert level_version(seq_level_idx) == exp_version


class TestDecodeAV1(object):
    def test_all_fields(self):
        assert decode_av1("av01.0.04M.10.0.112.09.16.09.0") == [
            normal("Main Profile"),
            normal("Level 3.0"),
            normal("Main tier"),
            normal("10 bit"),
            normal("Contains Y, U and V (colour)"),
            normal("CSP_COLOCATED"),
            normal("CP_BT_2020 - BT.2020, BT.2100"),
            normal("TC_SMPTE_2084 - SMPTE ST 2084, ITU BT.2100 PQ"),
            normal("MC_BT_2020_NCL"),
            normal("0 (studio swing representation)"),
        ]

    def test_defaults(self):
        assert decode_av1("av01.1.13H.08") == [
            normal("High Profile"),
            normal("Level 5.1"),
            normal("High tier"),
            normal("8 bit"),
            default_used("Monochrome: 0 (colour)"),
            default_used("Chroma subsampling: 110 (4:2:0)"),
            default_used("color_primaries: 1 (ITU-R BT.709)"),
            default_used("transfer_characteristics: 1 (ITU-R BT.709)"),
            default_used("matrix_coefficients: 1 (ITU-R BT.709)"),
            default_used("video_full_range_flag: 0 (studio swing representation)"),
        ]

    def test_empty_optional_fields_use_defaults(self):
        diagnostics = decode_av1("av01.2.31m.12.1..22...1")
        assert diagnostics == [
            normal("Professional Profile"),
            normal("Level Max"),
            normal("Main tier"),
            normal("12 bit"),
            normal("No U or V (monochrome)"),
            default_used("Chroma subsampling: 110 (4:2:0)"),
            normal("CP_EBU_3213"),
            default_used("transfer_characteristics: 1 (ITU-R BT.709)"),
            default_used("matrix_coefficients: 1 (ITU-R BT.709)"),
            normal("1 (full swing representation)"),
        ]

    @pytest.mark.parametrize(
        "component,index,exp_diagnostic",
        [
            ("av01.3.04M.08", 0, error("unknown profile (3)")),
            ("av01.0.24M.08", 1, warning("reserved level 24")),
            ("av01.0.40M.08", 1, error("unknown level (40)")),
            ("av01.0.04M.9", 3, error("unknown bit depth (9)")),
            ("av01.0.04M.08.2", 4, error("invalid value for mono_chrome (2)")),
            ("av01.0.04M.08.0.100", 5, normal("CSP_UNKNOWN")),
            ("av01.0.04M.08.0.113", 5, warning("CSP_RESERVED")),
            (
                "av01.0.04M.08.0.011",
                5,
                error(
                    "third digit must be 0 when first or second digit are not set to 1"
                ),
            ),
            (
                "av01.0.04M.08.0.114",
                5,
                error("invalid value for chroma_sample_position (4)"),
            ),
            (
                "av01.0.04M.08.0.110.03",
                6,
                error("unknown value for color_primaries (3)"),
            ),
            ("av01.0.04M.08.0.110.01.00", 7, warning("TC_RESERVED_0")),
            (
                "av01.0.04M.08.0.110.01.01.15",
                8,
                error("unknown value for matrix_coefficients (15)"),
            ),
            (
                "av01.0.04M.08.0.110.01.01.01.2",
                9,
                error("invalid value for video_full_range_flag (2)"),
            ),
        ],
    )
    def test_field_values(self, component, index, exp_diagnostic):
        assert decode_av1(component)[index] == exp_diagnostic

    def test_both_subsampling_digits_invalid(self):
        assert decode_av1("av01.0.04M.08.0.220")[5:7] == [
            error("invalid value for subsampling_x (2)"),
            error("invalid value for subsampling_y (2)"),
        ]

    @pytest.mark.parametrize(
        "component",
        [
            "av01",
            "av01.0.04M",
            "av01.0.04X.08",
            "av01.00.04M.08",
            "av01.0.04M.123",
            "av01.0.04M.08.0.11",
            "av01.0.04M.08.0.110.01.01.01.0.0",
        ],
    )
    def test_invalid(self, component):
        assert decode_av1(component) == [
            error("invalid AV1 codec string ({})".format(component)),
            error(AV1_FORMAT),
        ]


class TestDecodeIAMF(object):
    @pytest.mark.parametrize(
        "component,exp_codec",
        [
            ("iamf.000.000.Opus", "Opus"),
            ("iamf.000.000.flaC", "FLAC"),
            ("iamf.000.000.ipcm", "LPCM"),
        ],
    )
    def test_codecs(self, component, exp_codec):
        assert decode_iamf(component) == [
            normal("Primary profile: 0"),
            normal("Secondary profile: 0"),
            normal("Codec: {}".format(exp_codec)),
        ]

    def test_aac(self):
        assert decode_iamf("iamf.001.000.mp4a.40.2") == [
            normal("Primary profile: 1"),
            normal("Secondary profile: 0"),
            normal("Codec: AAC-LC"),
            normal("MPEG-4 AAC (40)"),
            normal("Low-Complexity AAC (2)"),
        ]

    def test_profile_out_of_range(self):
        diagnostics = decode_iamf("iamf.300.256.Opus")
        assert diagnostics[:2] == [
            error("<primary_profile> must be in the range 0..255"),
            error("<secondary_profile> must be in the range 0..255"),
        ]
        assert has_errors(diagnostics)

    @pytest.mark.parametrize(
        "component", ["iamf", "iamf.0.0.Opus", "iamf.000.000", "iamf.000.000.mp3"]
    )
    def test_invalid(self, component):
        assert decode_iamf(component) == [
            error("invalid IAMF codec string ({})".format(component)),
            error(IAMF_FORMAT),
        ]
