"""
The :py:mod:`codec_string_explain.diagnostics` module defines the result
model every decoder produces.

A decoder returns a *diagnostic sequence*: an ordinary Python :py:class:`list`
of :py:class:`Diagnostic` tuples. The order of the list is significant; it is
the order in which fields were decoded and the order in which they should be
displayed.

Each :py:class:`Diagnostic` carries a :py:class:`DiagnosticKinds` tag and a
text message::

    >>> error("unknown Level (999)")
    Diagnostic(kind=<DiagnosticKinds.error: 'error'>, text='unknown Level (999)')

Problems with the input are always reported this way rather than by raising
exceptions, so that one malformed field (or codec) never hides the
information available from the rest.

.. autoclass:: DiagnosticKinds
    :members:

.. autoclass:: Diagnostic

The following constructors are provided for convenience:

.. autofunction:: normal
.. autofunction:: warning
.. autofunction:: error
.. autofunction:: informative
.. autofunction:: default_used
.. autofunction:: cross_reference_term
"""

from enum import Enum

from collections import namedtuple

__all__ = [
    "DiagnosticKinds",
    "Diagnostic",
    "normal",
    "warning",
    "error",
    "informative",
    "default_used",
    "cross_reference_term",
    "has_errors",
    "texts",
]


class DiagnosticKinds(Enum):
    """
    The kinds of :py:class:`Diagnostic`.
    """

    normal = "normal"
    """A successfully decoded value."""

    warning = "warning"
    """A reserved, deprecated or deliberately uninterpreted value."""

    error = "error"
    """A structural problem or a field value which could not be resolved."""

    informative = "informative"
    """Supporting detail (e.g. an echo of raw flag values)."""

    default_used = "default_used"
    """A field which was not given and so takes its default value."""

    cross_reference_term = "cross_reference_term"
    """A term from an external classification scheme matching the codec."""


Diagnostic = namedtuple("Diagnostic", "kind,text")
"""
A single diagnostic message.

Parameters
==========
kind : :py:class:`DiagnosticKinds`
text : str
"""


def normal(text):
    return Diagnostic(DiagnosticKinds.normal, text)


def warning(text):
    return Diagnostic(DiagnosticKinds.warning, text)


def error(text):
    return Diagnostic(DiagnosticKinds.error, text)


def informative(text):
    return Diagnostic(DiagnosticKinds.informative, text)


def default_used(text):
    return Diagnostic(DiagnosticKinds.default_used, text)


def cross_reference_term(text):
    return Diagnostic(DiagnosticKinds.cross_reference_term, text)


def has_errors(diagnostics):
    """
    Return True if any of the diagnostics in the sequence is an error.
    """
    return any(d.kind is DiagnosticKinds.error for d in diagnostics)


def texts(diagnostics, kind=None):
    """
    Return the texts of a diagnostic sequence (optionally only those of the
    specified :py:class:`DiagnosticKinds`) as a list of strings.
    """
    return [d.text for d in diagnostics if kind is None or d.kind is kind]
