import pytest

from codec_string_explain.diagnostics import (
    normal,
    error,
    default_used,
)

from codec_string_explain.decoders.lcevc import decode_lcevc


class TestDecodeLCEVC(object):
    def test_defaults(self):
        assert decode_lcevc("lvc1") == [
            default_used("Profile (vprf)=0: Main profile"),
            default_used("Level (vlev)=4: Level 4"),
        ]

    def test_explicit(self):
        assert decode_lcevc("lvc1.vprf1.vlev2") == [
            normal("Profile (vprf)=1: Main 4:4:4 profile"),
            normal("Level (vlev)=2: Level 2"),
        ]

    @pytest.mark.parametrize("level", [0, 5, 10])
    def test_level_out_of_range(self, level):
        assert decode_lcevc("lvc1.vlev{}".format(level))[1:] == [
            normal("Level (vlev)={}".format(level)),
            error("invalid Level ({})".format(level)),
        ]

    def test_unknown_profile(self):
        assert decode_lcevc("lvc1.vprf2")[:2] == [
            normal("Profile (vprf)=2"),
            error("invalid Profile (2)"),
        ]

    def test_unknown_key(self):
        assert decode_lcevc("lvc1.vbit22") == [
            error("invalid key specified (vbit)"),
            default_used("Profile (vprf)=0: Main profile"),
            default_used("Level (vlev)=4: Level 4"),
        ]
