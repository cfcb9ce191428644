"""
The :py:mod:`codec_string_explain.key_value` module parses codec strings whose
optional fields are written as ``.<key><value>`` tokens, in any order, with
any subset present (e.g. ``evc1.vprf1.vbit08``).

A decoder declares a :py:class:`KeyValueTable` of :py:class:`KeyValueField`
entries, each giving the field's fixed-width key, label, default value and
the pattern its value must match::

    >>> table = KeyValueTable([
    ...     KeyValueField("vprf", "Profile", 0, r"\\d+"),
    ...     KeyValueField("vlev", "Level", 4, r"\\d+"),
    ... ])
    >>> values, diagnostics = parse_tokens(table, ["vlev2"])
    >>> values["vlev"].value, values["vlev"].explicit
    (2, True)
    >>> values["vprf"].explicit
    False

:py:func:`parse_tokens` never raises: unknown keys, invalid values and
repeated keys are reported as error diagnostics and parsing continues with
the next token. :py:func:`report` then describes *every* field of the table
in declaration order (not input order) so that defaults are always visible.
"""

import re

from collections import namedtuple, OrderedDict

from codec_string_explain.diagnostics import Diagnostic, normal, default_used, error

from codec_string_explain.exceptions import DuplicateKeyError, TableDefinitionError

from codec_string_explain.string_formatters import Hex, Dec

__all__ = [
    "KeyValueField",
    "KeyValueTable",
    "FieldValue",
    "parse_tokens",
    "report",
]


class KeyValueField(
    namedtuple("KeyValueField", "key,label,default,pattern,base,describe")
):
    """
    A field which may be given as a ``<key><value>`` token.

    Parameters
    ==========
    key : str
        The fixed-width, lower case key.
    label : str
        Human readable field name.
    default : int or None
        The value assumed when the field is not given (None means 'absent').
    pattern : str or compiled regex
        The value must match this pattern in its entirety.
    base : int
        The numeric base of the value (10 or 16). Default 10.
    describe : callable or None
        Optional. Called with the field's value, returns a description string,
        None (no description) or a
        :py:class:`~codec_string_explain.diagnostics.Diagnostic` (e.g. an
        error for an out-of-range value).
    """

    def __new__(cls, key, label, default, pattern, base=10, describe=None):
        if not hasattr(pattern, "fullmatch"):
            pattern = re.compile(pattern)
        return super(KeyValueField, cls).__new__(
            cls, key, label, default, pattern, base, describe
        )

    def format_value(self, value):
        if value is None:
            return "none"
        elif self.base == 16:
            return Hex(6, prefix="0x", upper=False)(value)
        else:
            return Dec()(value)


class KeyValueTable(object):
    """
    An ordered, read-only table of :py:class:`KeyValueField`.

    Raises
    :py:exc:`~codec_string_explain.exceptions.DuplicateKeyError` if a key is
    listed twice or
    :py:exc:`~codec_string_explain.exceptions.TableDefinitionError` if a key
    is not ``key_length`` characters long.
    """

    def __init__(self, fields, key_length=4):
        self.key_length = key_length
        self._fields = OrderedDict()
        for field in fields:
            if len(field.key) != key_length:
                raise TableDefinitionError(
                    "key {!r} is not {} characters long".format(field.key, key_length)
                )
            if field.key in self._fields:
                raise DuplicateKeyError("key {!r} listed twice".format(field.key))
            self._fields[field.key] = field

    def __iter__(self):
        return iter(self._fields.values())

    def __len__(self):
        return len(self._fields)

    def __contains__(self, key):
        return key in self._fields

    def __getitem__(self, key):
        return self._fields[key]


FieldValue = namedtuple("FieldValue", "field,value,explicit")
"""
The value of a :py:class:`KeyValueField` after parsing.

Parameters
==========
field : :py:class:`KeyValueField`
value : int or None
explicit : bool
    True if the value was given in the codec string, False if it is the
    field's default.
"""


def parse_tokens(table, tokens):
    """
    Parse a series of ``<key><value>`` tokens.

    Parameters
    ==========
    table : :py:class:`KeyValueTable`
    tokens : [str, ...]
        The '.' separated parts of the codec string following the codec
        identifier.

    Returns
    =======
    values : :py:class:`collections.OrderedDict`
        {key: :py:class:`FieldValue`, ...} for every field in the table, in
        table order.
    diagnostics : [:py:class:`~codec_string_explain.diagnostics.Diagnostic`, ...]
        Errors encountered while parsing, in token order.
    """
    values = OrderedDict(
        (field.key, FieldValue(field, field.default, False)) for field in table
    )
    diagnostics = []

    for token in tokens:
        key = token[: table.key_length].lower()
        value = token[table.key_length :]

        if key not in table:
            diagnostics.append(error("invalid key specified ({})".format(key)))
            continue

        field = table[key]
        if field.pattern.fullmatch(value) is None:
            diagnostics.append(
                error("invalid value for key={} ({})".format(key, value))
            )
            continue

        if values[key].explicit:
            diagnostics.append(error("key {} can only be provided once".format(key)))
            continue

        values[key] = FieldValue(field, int(value, field.base), True)

    return values, diagnostics


def report(values):
    """
    Describe every field in the ``values`` returned by :py:func:`parse_tokens`.

    Produces one diagnostic per field, in table order:
    :py:func:`~codec_string_explain.diagnostics.normal` for explicit values and
    :py:func:`~codec_string_explain.diagnostics.default_used` for defaults,
    with the text ``"<label> (<key>)=<value>[: <description>]"``. If a field's
    ``describe`` function returns a
    :py:class:`~codec_string_explain.diagnostics.Diagnostic`, that diagnostic
    follows the field's own.
    """
    out = []
    for key, (field, value, explicit) in values.items():
        text = "{} ({})={}".format(field.label, key, field.format_value(value))

        extra = None
        if field.describe is not None:
            description = field.describe(value)
            if isinstance(description, Diagnostic):
                extra = description
            elif description:
                text += ": {}".format(description)

        out.append(normal(text) if explicit else default_used(text))
        if extra is not None:
            out.append(extra)

    return out
