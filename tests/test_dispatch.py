import pytest

from codec_string_explain.diagnostics import (
    DiagnosticKinds,
    normal,
    error,
    texts,
)

from codec_string_explain.registry import RegistryBuilder

from codec_string_explain.dispatch import (
    ComponentResult,
    split_components,
    codec_identifier,
    dispatch,
    explain,
    default_registry,
)


def decode_echo(component):
    return [normal(component)]


@pytest.fixture
def registry():
    builder = RegistryBuilder()
    builder.register(["aaa1", "aaa2"], "Codec A", decode_echo)
    return builder.build()


@pytest.mark.parametrize(
    "codecs,expected",
    [
        ("avc1.64002A", ["avc1.64002A"]),
        ("avc1.64002A,mp4a.40.2", ["avc1.64002A", "mp4a.40.2"]),
        (" avc1.64002A , mp4a.40.2 ", ["avc1.64002A", "mp4a.40.2"]),
        ("avc1. 640 02A", ["avc1.64002A"]),
        ("a\t,\nb", ["a", "b"]),
        ("", [""]),
    ],
)
def test_split_components(codecs, expected):
    assert split_components(codecs) == expected


@pytest.mark.parametrize(
    "component,expected",
    [
        ("avc1.64002A", "avc1"),
        ("hvc1.1.6.L93.B0", "hvc1"),
        ("evc1", "evc1"),
        ("", ""),
    ],
)
def test_codec_identifier(component, expected):
    assert codec_identifier(component) == expected


class TestDispatch(object):
    def test_known_identifier(self, registry):
        results = dispatch("aaa1.foo", registry)
        assert results == [
            ComponentResult(
                "aaa1.foo", "aaa1", "Codec A", [normal("aaa1.foo")], None
            )
        ]

    def test_case_insensitive_lookup(self, registry):
        (result,) = dispatch("AAA2.foo", registry)
        assert result.label == "Codec A"
        assert result.identifier == "AAA2"
        assert texts(result.diagnostics) == ["AAA2.foo"]

    def test_unknown_identifier(self, registry):
        results = dispatch("unknownFourCC.1.2", registry)
        assert len(results) == 1
        assert results[0].label is None
        assert results[0].render is None
        assert results[0].diagnostics == [error("unsupported codec=unknownfourcc")]

    def test_components_isolated_and_ordered(self, registry):
        results = dispatch("aaa1.x, bbb1.y ,aaa2.z", registry)
        assert [r.component for r in results] == ["aaa1.x", "bbb1.y", "aaa2.z"]
        assert results[0] == dispatch("aaa1.x", registry)[0]
        assert results[1] == dispatch("bbb1.y", registry)[0]
        assert results[2] == dispatch("aaa2.z", registry)[0]

    def test_empty_input(self, registry):
        (result,) = dispatch("", registry)
        assert result.diagnostics == [error("unsupported codec=")]


class TestExplain(object):
    def test_default_registry_cached(self):
        assert default_registry() is default_registry()

    def test_uses_default_registry(self):
        (result,) = explain("avc1.64002A")
        assert result.label == "AVC/H.264"

    def test_explicit_registry(self, registry):
        (result,) = explain("avc1.64002A", registry)
        assert result.label is None

    @pytest.mark.parametrize(
        "codecs",
        [
            "avc1.64002A,hvc1.2.4.L153.B0",
            "evc1.vprf0.vbit08,lvc1.vprf1",
            "vvc1.1.L51.CQA.O1+3",
            "mhm1.0x0D,dvh1.08.06",
            "av01.0.04M.10.0.112.09.16.09.0,iamf.000.000.Opus",
            "vp09.02.10.10.01.09.16.09.01,mp4a.40.2,ac-4.02.01.02",
        ],
    )
    def test_deterministic(self, codecs):
        assert explain(codecs) == explain(codecs)

    def test_mixed_video_and_audio(self):
        video, audio = explain("avc1.64002A, mp4a.40.2")
        assert video.label == "AVC/H.264"
        assert audio.label == "AAC"
        assert audio.diagnostics == [
            normal("MPEG-4 AAC (40)"),
            normal("Low-Complexity AAC (2)"),
        ]

    def test_multi_codec_isolation(self):
        a = "avc1.64002A"
        b = "hvc1.2.4.L153.B0"
        assert explain("{},{}".format(a, b)) == explain(a) + explain(b)

    @pytest.mark.parametrize(
        "codecs",
        [
            "",
            ",",
            ".",
            "...",
            "avc1",
            "avc1.",
            "avc1.zzzzzz",
            "hvc1",
            "hvc1.....",
            "hvc1.Z.Z.Z.Z",
            "hvc1.1.6.L93.B0.0.0.0.0.0.0",
            "vvc1",
            "vvc1.1.L51.C",
            "vvc1.1.L51.O1.C2",
            "evc1.",
            "evc1.vprf",
            "lvc1.xxxx1",
            "mhm1.0xZZ",
            "dvhe.1.1",
            "av01",
            "av01.0.99M.99.9.999.99.99.99.9",
            "iamf.999.999.mp4a.40.99",
            "vp09.99.99.99.99.99.99.99.99",
            "mp4a.",
            "mp4v.20.",
            "mp2a.69.",
            "ac-4...",
            "ec-3.",
            "dtsc.",
            "avs3.zz.zz",
            "cavs.ff",
            "stpp..",
            "cuvv.",
            "éè.à",
        ],
    )
    def test_never_raises(self, codecs):
        results = explain(codecs)
        assert len(results) >= 1
        for result in results:
            assert all(d.kind in DiagnosticKinds for d in result.diagnostics)
