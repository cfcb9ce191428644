"""
The :py:mod:`codec_string_explain.profiles` module resolves profile, tier and
level fields using small ordered tables.

Profiles and compatibility flags
--------------------------------

Some codec strings signal a profile in two redundant ways: an explicit
``profile_idc`` value and a mask of compatibility flags, where flag *k* being
set means "the stream conforms to the profile whose compatibility flag is
*k*". A :py:class:`ProfileTable` resolves both at once: the first
:py:class:`ProfileRule` whose ``idc`` matches, *or* whose compatibility
``bit`` is set in the mask, wins::

    >>> table = ProfileTable([
    ...     ProfileRule(1, 1, "Main", "Main"),
    ...     ProfileRule(2, 2, "Main 10", "Main 10"),
    ... ])
    >>> table.resolve(2).name
    'Main 10'
    >>> table.resolve(0, 0b100).name
    'Main 10'
    >>> table.resolve(0, 0b110).name
    'Main'

Because table order decides ties, profile tables must be listed in the order
the owning specification gives precedence to.

Levels and tiers
----------------

:py:class:`LevelTable` maps an integer level code to its dotted version
string and :py:func:`resolve_tier` maps a tier letter to its name.
"""

import logging

from collections import namedtuple, OrderedDict

from codec_string_explain.exceptions import DuplicateKeyError

__all__ = [
    "ProfileRule",
    "ProfileTable",
    "LevelTable",
    "TIERS",
    "resolve_tier",
]


ProfileRule = namedtuple("ProfileRule", "idc,bit,name,family")
"""
One entry in a :py:class:`ProfileTable`.

Parameters
==========
idc : int
    The explicit profile code.
bit : int or None
    The compatibility flag (counted from the least significant bit of the
    mask) which also signals this profile, or None if there is none.
name : str
    The profile's full name.
family : str or None
    The profile name passed to the classification matcher (None if the
    profile should not be classified).
"""


def _bit_set(mask, bit):
    return bit is not None and bit >= 0 and (mask >> bit) & 1 == 1


class ProfileTable(object):
    """
    An ordered, read-only table of :py:class:`ProfileRule`.

    Raises :py:exc:`~codec_string_explain.exceptions.DuplicateKeyError` if two
    rules share an ``idc`` or a compatibility ``bit``.
    """

    def __init__(self, rules):
        self._rules = tuple(rules)

        seen_idcs = set()
        seen_bits = set()
        for rule in self._rules:
            if rule.idc in seen_idcs:
                raise DuplicateKeyError(
                    "profile_idc {} listed twice ({})".format(rule.idc, rule.name)
                )
            seen_idcs.add(rule.idc)

            if rule.bit is not None:
                if rule.bit in seen_bits:
                    raise DuplicateKeyError(
                        "compatibility bit {} listed twice ({})".format(
                            rule.bit, rule.name
                        )
                    )
                seen_bits.add(rule.bit)

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def resolve(self, idc, compatibility_mask=0):
        """
        Return the first :py:class:`ProfileRule` whose ``idc`` equals ``idc``
        or whose compatibility bit is set in ``compatibility_mask``. Returns
        None if no rule matches.
        """
        for rule in self._rules:
            if rule.idc == idc or _bit_set(compatibility_mask, rule.bit):
                logging.debug(
                    "resolve(%r, %#x) -> %s", idc, compatibility_mask, rule.name
                )
                return rule
        return None

    def in_family(self, idcs, idc, compatibility_mask=0):
        """
        Test whether any of the profiles listed in ``idcs`` is signalled,
        either explicitly by ``idc`` or by its compatibility bit in
        ``compatibility_mask``.
        """
        for rule in self._rules:
            if rule.idc in idcs and (
                rule.idc == idc or _bit_set(compatibility_mask, rule.bit)
            ):
                return True
        return False


class LevelTable(object):
    """
    An ordered, read-only mapping from an integer level code to a dotted
    version string.

    Parameters
    ==========
    levels : iterable of (int, str) pairs
        Raises :py:exc:`~codec_string_explain.exceptions.DuplicateKeyError` if
        a level code appears twice.
    """

    def __init__(self, levels):
        self._levels = OrderedDict()
        for value, version in levels:
            if value in self._levels:
                raise DuplicateKeyError("level {} listed twice".format(value))
            self._levels[value] = version

    def __contains__(self, value):
        return value in self._levels

    def __iter__(self):
        return iter(self._levels.items())

    def __len__(self):
        return len(self._levels)

    def lookup(self, value):
        """Return the version string for ``value``, or None if not listed."""
        return self._levels.get(value)


TIERS = OrderedDict([("L", "Main"), ("H", "High")])
"""Tier letters and their names."""


def resolve_tier(letter):
    """
    Return the tier name for a (case-insensitive) tier letter, or None.
    """
    return TIERS.get(letter.upper())
