"""
The :py:mod:`codec_string_explain.dispatch` module explains a complete
``codecs`` value, which may list several comma separated codec strings.

    >>> results = explain("avc1.64002A, mp4a.40.2")
    >>> [r.identifier for r in results]
    ['avc1', 'mp4a']
    >>> [r.label for r in results]
    ['AVC/H.264', 'AAC']

Each component is decoded independently: a component whose identifier is not
registered produces a single error diagnostic without affecting the others,
and results are always returned in input order. Neither :py:func:`dispatch`
nor :py:func:`explain` raise exceptions for any input string.
"""

import re
import logging

from collections import namedtuple

from codec_string_explain.diagnostics import error

__all__ = [
    "ComponentResult",
    "split_components",
    "codec_identifier",
    "dispatch",
    "explain",
]


ComponentResult = namedtuple(
    "ComponentResult", "component,identifier,label,diagnostics,render"
)
"""
The result of decoding one component of a ``codecs`` value.

Parameters
==========
component : str
    The component with whitespace removed.
identifier : str
    The component's codec identifier (as given, not lower-cased).
label : str or None
    The registered label for the codec, or None if unregistered.
diagnostics : [:py:class:`~codec_string_explain.diagnostics.Diagnostic`, ...]
render : callable or None
    The registered render function, if any.
"""


WHITESPACE_RE = re.compile(r"\s+")


def split_components(codecs):
    """
    Split a comma separated ``codecs`` value into its components, removing
    all whitespace from each.
    """
    return [WHITESPACE_RE.sub("", component) for component in codecs.split(",")]


def codec_identifier(component):
    """Return the text before the first '.' of a component."""
    return component.partition(".")[0]


def dispatch(codecs, registry):
    """
    Decode every component of a ``codecs`` value.

    Parameters
    ==========
    codecs : str
    registry : :py:class:`~codec_string_explain.registry.DecoderRegistry`

    Returns
    =======
    [:py:class:`ComponentResult`, ...]
        One result per component, in input order.
    """
    results = []
    for component in split_components(codecs):
        identifier = codec_identifier(component)
        entry = registry.lookup(identifier)
        logging.debug("dispatch: %r (identifier %r)", component, identifier)

        if entry is None:
            results.append(
                ComponentResult(
                    component,
                    identifier,
                    None,
                    [error("unsupported codec={}".format(identifier.lower()))],
                    None,
                )
            )
        else:
            results.append(
                ComponentResult(
                    component,
                    identifier,
                    entry.label,
                    entry.decode(component),
                    entry.render,
                )
            )

    return results


_default_registry = None


def default_registry():
    """
    Return the registry built by
    :py:func:`codec_string_explain.decoders.build_default_registry`. It is
    built on first use and reused thereafter.
    """
    global _default_registry
    if _default_registry is None:
        # Imported here since the decoders depend on this package's modules
        from codec_string_explain.decoders import build_default_registry

        _default_registry = build_default_registry()
    return _default_registry


def explain(codecs, registry=None):
    """
    As :py:func:`dispatch` but using the default registry unless another is
    given.
    """
    if registry is None:
        registry = default_registry()
    return dispatch(codecs, registry)
