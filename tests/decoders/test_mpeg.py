import pytest

from codec_string_explain.diagnostics import normal, warning, error

from codec_string_explain.decoders.mpeg import (
    describe_object_type,
    decode_mpeg4_audio,
    decode_mpeg4_video,
    decode_mpeg2_video,
    decode_mpeg2_audio,
)


@pytest.mark.parametrize(
    "oti,exp_diagnostic",
    [
        (0x61, normal("ObjectTypeIndication=Visual ISO/IEC 13818-2 Main Profile")),
        (0xE1, normal("ObjectTypeIndication=13K Voice")),
        (0xC0, normal("ObjectTypeIndication=user private")),
        (0xFE, normal("ObjectTypeIndication=user private")),
        (0xFF, normal("ObjectTypeIndication=no object type specified")),
        (0x00, error("ObjectTypeIndication=Forbidden")),
        (
            0xA5,
            warning("ObjectTypeIndication=withdrawn, unused, do not use (was AC-3)"),
        ),
        (0x30, error("unspecified object type (30)")),
    ],
)
def test_describe_object_type(oti, exp_diagnostic):
    assert describe_object_type(oti) == exp_diagnostic


class TestDecodeMPEG4Audio(object):
    @pytest.mark.parametrize(
        "component,exp_diagnostics",
        [
            (
                "mp4a.40.2",
                [normal("MPEG-4 AAC (40)"), normal("Low-Complexity AAC (2)")],
            ),
            (
                "mp4a.40.5",
                [normal("MPEG-4 AAC (40)"), normal("High-Efficiency (SBR) AAC (5)")],
            ),
            (
                "mp4a.40.29",
                [normal("MPEG-4 AAC (40)"), normal("High-Efficiency AAC v2 (PS) (29)")],
            ),
            ("mp4a.40", [normal("MPEG-4 AAC (40)")]),
            ("mp4a.67", [normal("MPEG-2 AAC Low Complexity Profile (67)")]),
            ("mp4a.6B", [normal("MPEG-1 Part 3 (6B)")]),
            ("MP4A.69", [normal("MPEG-2 Audio Part 3 (69)")]),
        ],
    )
    def test_valid(self, component, exp_diagnostics):
        assert decode_mpeg4_audio(component) == exp_diagnostics

    @pytest.mark.parametrize(
        "component,exp_error",
        [
            ("mp4a", "MPEG-4 audio requires at least 2 parts, got 1"),
            ("mp4a.40.2.1", "MPEG-4 audio allows at most 3 parts, got 4"),
            ("mp4a.zz", "OTI must be expressed in hexadecimal (zz)"),
            ("mp4a.a5", "invalid MP4 audio ObjectTypeIndication (a5)"),
        ],
    )
    def test_invalid(self, component, exp_error):
        assert decode_mpeg4_audio(component) == [error(exp_error)]

    @pytest.mark.parametrize("aot", ["10", "0", "x"])
    def test_invalid_audio_object_type(self, aot):
        assert decode_mpeg4_audio("mp4a.40.{}".format(aot)) == [
            normal("MPEG-4 AAC (40)"),
            error("invalid MPEG-4 Audio Object Type ({})".format(aot)),
        ]


class TestDecodeMPEG4Video(object):
    @pytest.mark.parametrize(
        "component,exp_diagnostics",
        [
            (
                "mp4v.20.240",
                [
                    normal("Visual ISO/IEC 14496-2"),
                    normal("Advanced Simple Profile/Level 0"),
                ],
            ),
            (
                "mp4v.20.8",
                [normal("Visual ISO/IEC 14496-2"), normal("Simple Profile/Level 0")],
            ),
            (
                "mp4v.20.9",
                [
                    normal("Visual ISO/IEC 14496-2"),
                    warning("Reserved profile_and_level_indication (9)"),
                ],
            ),
            (
                "mp4v.20.255",
                [normal("Visual ISO/IEC 14496-2"), warning("Reserved for Escape")],
            ),
            ("mp4v.20", [normal("Visual ISO/IEC 14496-2")]),
            (
                "mp4v.21",
                [normal("Visual ITU-T Recommendation H.264 | ISO/IEC 14496-10")],
            ),
            ("mp4v.65", [normal("Visual ISO/IEC 13818-2 422 Profile")]),
        ],
    )
    def test_valid(self, component, exp_diagnostics):
        assert decode_mpeg4_video(component) == exp_diagnostics

    @pytest.mark.parametrize(
        "component,exp_error",
        [
            ("mp4v", "MPEG-4 video requires at least 2 parts, got 1"),
            ("mp4v.40", "invalid value for ObjectTypeIndication (40)"),
            (
                "mp4v.20.f0",
                "profile_and_level_indication must be decimal, got 'f0'",
            ),
            ("mp4v.2g", "ObjectTypeIndication (1) must be hexadecimal, got '2g'"),
        ],
    )
    def test_invalid(self, component, exp_error):
        assert decode_mpeg4_video(component) == [error(exp_error)]


class TestDecodeMPEG2Video(object):
    @pytest.mark.parametrize(
        "component,exp_text",
        [
            ("mp2v.61", "ObjectTypeIndication=Visual ISO/IEC 13818-2 Main Profile"),
            ("mp1v.6a", "ObjectTypeIndication=Visual ISO/IEC 11172-2"),
        ],
    )
    def test_valid(self, component, exp_text):
        assert decode_mpeg2_video(component) == [normal(exp_text)]

    @pytest.mark.parametrize(
        "component,exp_error",
        [
            ("mp2v", "MPEG video requires 2 parts, got 1"),
            ("mp2v.61.1", "MPEG video requires 2 parts, got 3"),
            ("mp2v.6x", "ObjectTypeIndication (1) must be hexadecimal, got '6x'"),
        ],
    )
    def test_invalid(self, component, exp_error):
        assert decode_mpeg2_video(component) == [error(exp_error)]


class TestDecodeMPEG2Audio(object):
    @pytest.mark.parametrize(
        "component,exp_diagnostics",
        [
            ("mp2a.69", [normal("ObjectTypeIndication=Audio ISO/IEC 13818-3")]),
            (
                "mp2a.67",
                [
                    normal(
                        "ObjectTypeIndication=Audio ISO/IEC 13818-7 Low Complexity "
                        "Profile"
                    )
                ],
            ),
            (
                "mp2a.69.2",
                [
                    normal("ObjectTypeIndication=Audio ISO/IEC 13818-3"),
                    normal("Layer=2"),
                ],
            ),
            (
                "mp1a.6b.1",
                [
                    normal("ObjectTypeIndication=Audio ISO/IEC 11172-3"),
                    normal("Layer=3"),
                ],
            ),
            (
                "mp1a.6b.3",
                [
                    normal("ObjectTypeIndication=Audio ISO/IEC 11172-3"),
                    normal("Layer=1"),
                ],
            ),
            (
                "mp1a.6b.0",
                [
                    normal("ObjectTypeIndication=Audio ISO/IEC 11172-3"),
                    error("invalid layer (0)"),
                ],
            ),
        ],
    )
    def test_valid(self, component, exp_diagnostics):
        assert decode_mpeg2_audio(component) == exp_diagnostics

    @pytest.mark.parametrize(
        "component,exp_error",
        [
            ("mp2a", "MPEG audio requires at least 2 parts, got 1"),
            ("mp2a.69.1.1", "MPEG audio allows at most 3 parts, got 4"),
            ("mp2a.69.z", "MPEG audio parameter (2) must be hexadecimal, got 'z'"),
        ],
    )
    def test_invalid(self, component, exp_error):
        assert decode_mpeg2_audio(component) == [error(exp_error)]
