"""
The :py:mod:`codec_string_explain` module turns the short, dot-delimited codec
parameter strings found in MIME ``codecs=`` attributes and streaming manifests
(e.g. ``avc1.64002A`` or ``hvc1.2.4.L153.B0``) into human readable diagnostic
reports describing the profile, level, tier and other coding attributes they
signal. No media bitstreams are read.

..
    You are currently reading this documentation in its source form (e.g.
    directly from the Python source docstrings or via ``help()``).

A quick example::

    >>> from codec_string_explain import explain
    >>> for result in explain("avc1.64002A"):
    ...     print(result.label)
    ...     for diagnostic in result.diagnostics:
    ...         print(diagnostic.kind.name, diagnostic.text)
    AVC/H.264
    normal profile_idc=100 constraint_set=0 level_idc=42
    normal profile=High (64)
    normal constraints=------
    normal level=4.2 (2a)
    cross_reference_term urn:dvb:metadata:cs:VideoCodecCS:2022:1.4.14


Main components
---------------

* The diagnostic model (:py:mod:`codec_string_explain.diagnostics`): every
  decoder reports its findings as an ordered list of tagged
  :py:class:`~codec_string_explain.diagnostics.Diagnostic` values. Nothing is
  raised for bad input.
* The decoder registry and dispatcher
  (:py:mod:`codec_string_explain.registry`,
  :py:mod:`codec_string_explain.dispatch`) which map codec identifiers (e.g.
  ``hvc1``) to decoder functions and split multi-codec strings into
  components.
* The codec decoders (:py:mod:`codec_string_explain.decoders`), one pure
  function per codec family.
* Supporting machinery shared by the decoders: a bit addressable buffer for
  packed constraint flags (:py:mod:`codec_string_explain.bitfield`),
  profile/level tables with compatibility flag fallback
  (:py:mod:`codec_string_explain.profiles`), order independent
  ``key=value`` token parsing (:py:mod:`codec_string_explain.key_value`) and
  a classification matcher which maps decoded attributes onto terms from
  external classification schemes such as DVB's VideoCodecCS
  (:py:mod:`codec_string_explain.classification`).
* The ``codec-string-explain`` command line tool
  (:py:mod:`codec_string_explain.scripts.codec_string_explain`).


Tables of values
----------------

Descriptive tables (e.g. the ISO/IEC 23091-2 colour primaries) and
classification rule tables are stored as CSV files in
``codec_string_explain/tables/`` and loaded once at import time. See
:py:mod:`codec_string_explain.tables`.
"""

from codec_string_explain.version import __version__

from codec_string_explain.dispatch import explain, dispatch

__all__ = [
    "__version__",
    "explain",
    "dispatch",
]
