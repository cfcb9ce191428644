"""
The :py:mod:`codec_string_explain.renderers` module formats diagnostic
sequences for display.

Decoders never format their own output: a renderer is a callable taking a
codec label and a diagnostic sequence and returning a string. Each
:py:class:`~codec_string_explain.registry.DecoderEntry` may supply its own
renderer; :py:func:`render_text` is used otherwise::

    >>> from codec_string_explain.diagnostics import normal
    >>> print(render_text("AVC/H.264", [normal("profile=High (64)")]))
    AVC/H.264
      profile=High (64)

:py:func:`render_json` produces a single JSON document for a list of
:py:class:`~codec_string_explain.dispatch.ComponentResult`.
"""

import json

from codec_string_explain.diagnostics import DiagnosticKinds

__all__ = [
    "KIND_PREFIXES",
    "render_text",
    "render_result",
    "render_json",
]


KIND_PREFIXES = {
    DiagnosticKinds.normal: "",
    DiagnosticKinds.warning: "WARNING: ",
    DiagnosticKinds.error: "ERROR: ",
    DiagnosticKinds.informative: "  ",
    DiagnosticKinds.default_used: "(default) ",
    DiagnosticKinds.cross_reference_term: "term: ",
}
"""
Prefix used by :py:func:`render_text` for each kind of diagnostic.
Informative diagnostics are indented beneath their neighbours.
"""


def render_text(label, diagnostics):
    """
    Render a diagnostic sequence as plain text: the label (if any) followed
    by one indented line per diagnostic.
    """
    lines = []
    if label:
        lines.append(label)
    for diagnostic in diagnostics:
        lines.append(
            "  {}{}".format(KIND_PREFIXES[diagnostic.kind], diagnostic.text)
        )
    return "\n".join(lines)


def render_result(result, default_render=render_text):
    """
    Render a :py:class:`~codec_string_explain.dispatch.ComponentResult` using
    its own renderer, falling back on ``default_render``.
    """
    render = result.render or default_render
    label = result.label
    if label is None:
        label = result.component
    return render(label, result.diagnostics)


def render_json(results):
    """
    Render a list of :py:class:`~codec_string_explain.dispatch.ComponentResult`
    as a JSON document of the form::

        [
            {
                "component": "avc1.64002A",
                "label": "AVC/H.264",
                "diagnostics": [{"kind": "normal", "text": "..."}, ...]
            },
            ...
        ]
    """
    return json.dumps(
        [
            {
                "component": result.component,
                "label": result.label,
                "diagnostics": [
                    {"kind": diagnostic.kind.value, "text": diagnostic.text}
                    for diagnostic in result.diagnostics
                ],
            }
            for result in results
        ],
        indent=2,
    )
