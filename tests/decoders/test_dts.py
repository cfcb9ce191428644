import pytest

from codec_string_explain.diagnostics import normal, error

from codec_string_explain.registry import RegistryBuilder

from codec_string_explain.decoders.dts import SAMPLE_ENTRIES, decode_dts, register_dts


@pytest.mark.parametrize(
    "component,exp_text",
    [
        ("dtsc", "DTS-HD"),
        ("dtsh", "DTS-HD"),
        ("dtse", "DTS-HD"),
        ("dtsl", "DTS-HD"),
        ("dtsx", "DTS-UHD"),
        ("DTSY", "DTS-UHD"),
    ],
)
def test_decode_dts(component, exp_text):
    assert decode_dts(component) == [normal(exp_text)]


def test_parameters_rejected():
    assert decode_dts("dtsc.1") == [
        error("no codec arguments should be provided for DTS audio")
    ]


def test_register_dts():
    builder = RegistryBuilder()
    register_dts(builder)
    registry = builder.build()
    assert [entry.identifier for entry in registry] == [
        sample_entry for sample_entry, _ in SAMPLE_ENTRIES
    ]
    assert registry.lookup("dtsx").label == "DTS UHD (Profile 2)"
