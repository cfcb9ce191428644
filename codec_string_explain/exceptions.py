"""
Exception types used in this library.

.. note::

    Problems with a codec string being explained are never reported by
    raising an exception: they are returned as
    :py:class:`~codec_string_explain.diagnostics.Diagnostic` values. The
    exceptions below indicate mistakes in the library's own tables or in the
    way it is being used.
"""

__all__ = [
    "TableDefinitionError",
    "DuplicateKeyError",
    "OverlappingBitsError",
    "RegistryFrozenError",
    "BitfieldError",
]


class TableDefinitionError(ValueError):
    """
    Thrown when a table of values (e.g. a profile table, a constraint flag
    table or a key=value field table) is internally inconsistent. Raised when
    the table is constructed, i.e. at import time for the built-in tables.
    """


class DuplicateKeyError(TableDefinitionError):
    """
    Thrown when the same key, name or identifier appears more than once in a
    table which requires unique keys.
    """


class OverlappingBitsError(TableDefinitionError):
    """
    Thrown when two fields in a constraint flag table claim the same bit
    position.
    """


class RegistryFrozenError(ValueError):
    """
    Thrown by :py:meth:`codec_string_explain.registry.RegistryBuilder.register`
    when called after :py:meth:`~codec_string_explain.registry.RegistryBuilder.build`.
    """


class BitfieldError(ValueError):
    """
    Thrown by :py:class:`codec_string_explain.bitfield.BitfieldBuffer` when a
    non-integer value is pushed.
    """
