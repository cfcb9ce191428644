"""
The :py:mod:`codec_string_explain.registry` module maps codec identifiers
(e.g. ``avc1``) to the decoder responsible for them.

Registries are built explicitly, once, using a :py:class:`RegistryBuilder`::

    >>> from codec_string_explain.decoders.avc import decode_avc
    >>> builder = RegistryBuilder()
    >>> builder.register(["avc1", "avc3"], "AVC/H.264", decode_avc)
    >>> registry = builder.build()
    >>> registry.lookup("AVC3").label
    'AVC/H.264'

The resulting :py:class:`DecoderRegistry` is read-only and may be shared
freely. Identifiers are case-insensitive and the first registration of a
given identifier wins; later registrations of the same identifier are
ignored.
"""

import logging

from collections import namedtuple, OrderedDict

from codec_string_explain.exceptions import RegistryFrozenError

__all__ = [
    "DecoderEntry",
    "RegistryBuilder",
    "DecoderRegistry",
]


DecoderEntry = namedtuple("DecoderEntry", "identifier,label,decode,render")
"""
A registered decoder.

Parameters
==========
identifier : str
    The (lower case) codec identifier.
label : str
    A human readable name for the codec family.
decode : callable
    ``decode(component) -> [Diagnostic, ...]``
render : callable or None
    ``render(label, diagnostics) -> str``, or None to use the caller's
    default renderer.
"""


class RegistryBuilder(object):
    """
    Accumulates decoder registrations. Call :py:meth:`build` once all
    decoders are registered.
    """

    def __init__(self):
        self._entries = OrderedDict()
        self._built = False

    def register(self, identifiers, label, decode, render=None):
        """
        Register a decoder for one or more codec identifiers.

        Parameters
        ==========
        identifiers : str or iterable of str
            A single identifier or several identifiers sharing the decoder.
        label : str
        decode : callable
        render : callable or None

        Raises :py:exc:`~codec_string_explain.exceptions.RegistryFrozenError`
        if :py:meth:`build` has already been called.
        """
        if self._built:
            raise RegistryFrozenError(
                "cannot register {!r}: registry already built".format(identifiers)
            )

        if isinstance(identifiers, str):
            identifiers = [identifiers]

        for identifier in identifiers:
            identifier = identifier.lower()
            if identifier in self._entries:
                logging.debug("register: %s already registered, ignored", identifier)
                continue
            logging.debug("register: %s (%s)", identifier, label)
            self._entries[identifier] = DecoderEntry(identifier, label, decode, render)

    def build(self):
        """
        Return a read-only :py:class:`DecoderRegistry` containing every
        registration made so far. The builder may not be used afterwards.
        """
        self._built = True
        return DecoderRegistry(self._entries)


class DecoderRegistry(object):
    """
    A read-only mapping from codec identifier to :py:class:`DecoderEntry`.
    Use :py:class:`RegistryBuilder` to construct one.
    """

    def __init__(self, entries):
        self._entries = OrderedDict(entries)

    def lookup(self, identifier):
        """
        Return the :py:class:`DecoderEntry` for ``identifier``
        (case-insensitive) or None if it is not registered.
        """
        return self._entries.get(identifier.lower())

    def __contains__(self, identifier):
        return self.lookup(identifier) is not None

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        """Iterate over :py:class:`DecoderEntry` in registration order."""
        return iter(self._entries.values())

    def identifiers(self):
        """A sorted list of registered identifiers."""
        return sorted(self._entries)
