import pytest

from codec_string_explain.diagnostics import (
    DiagnosticKinds,
    Diagnostic,
    normal,
    warning,
    error,
    informative,
    default_used,
    cross_reference_term,
    has_errors,
    texts,
)


@pytest.mark.parametrize(
    "constructor,kind",
    [
        (normal, DiagnosticKinds.normal),
        (warning, DiagnosticKinds.warning),
        (error, DiagnosticKinds.error),
        (informative, DiagnosticKinds.informative),
        (default_used, DiagnosticKinds.default_used),
        (cross_reference_term, DiagnosticKinds.cross_reference_term),
    ],
)
def test_constructors(constructor, kind):
    d = constructor("hello")
    assert d == Diagnostic(kind, "hello")
    assert d.kind is kind
    assert d.text == "hello"


def test_immutable():
    d = normal("foo")
    with pytest.raises(AttributeError):
        d.text = "bar"


def test_has_errors():
    assert has_errors([]) is False
    assert has_errors([normal("a"), warning("b")]) is False
    assert has_errors([normal("a"), error("b")]) is True


def test_texts():
    diagnostics = [normal("a"), error("b"), normal("c")]
    assert texts(diagnostics) == ["a", "b", "c"]
    assert texts(diagnostics, DiagnosticKinds.normal) == ["a", "c"]
    assert texts(diagnostics, DiagnosticKinds.warning) == []
