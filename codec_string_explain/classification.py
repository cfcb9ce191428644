r"""
The :py:mod:`codec_string_explain.classification` module maps the coding
attributes resolved by a decoder (codec, profile, level, ...) onto a term from
an external classification scheme, such as DVB's VideoCodecCS.

Tutorial
--------

A rule table is an ordered list of dictionaries. Each rule gives a ``term``
plus a :py:class:`Pattern` for every attribute it constrains. In the contrived
example below we classify fruit rather than codecs::

    >>> fruit_rules = [
    ...     {"term": "1", "kind": Pattern("apple")},
    ...     {"term": "1.1", "kind": Pattern("apple"), "color": Pattern("red")},
    ...     {"term": "1.2", "kind": Pattern("apple"), "color": Pattern("green*")},
    ... ]
    >>> scheme = ClassificationScheme("urn:example:FruitCS", fruit_rules)

The attributes to be classified are supplied as a dictionary whose ``type``
entry selects the scheme to use::

    >>> schemes = {"fruit": scheme}
    >>> classify({"type": "fruit", "kind": "apple", "color": "red"}, schemes)
    'urn:example:FruitCS:1.1'

A trailing ``*`` in a pattern matches any value starting with the text before
it, so a family of values may be matched by a single rule::

    >>> classify({"type": "fruit", "kind": "apple", "color": "greenish"}, schemes)
    'urn:example:FruitCS:1.2'

Unlike a constraint table, a rule only matches a set of attributes with
*exactly* the same keys as the rule. Missing or additional attributes never
match::

    >>> classify({"type": "fruit", "kind": "apple"}, schemes)
    'urn:example:FruitCS:1'
    >>> classify({"type": "fruit", "kind": "apple", "size": "big"}, schemes)
    ''

When no rule matches, or no scheme exists for the given ``type``, an empty
string is returned.

Rules are checked in the order given and the first match wins. Tables are
small, so a simple linear scan is used.


CSV format
----------

Rule tables are read from CSV files using
:py:func:`codec_string_explain.tables._csv_reading.read_rules_from_csv`.
"""

import logging

from collections import namedtuple


__all__ = [
    "WILDCARD",
    "Pattern",
    "ClassificationScheme",
    "rule_matches",
    "filter_rule_table",
    "classify",
]


WILDCARD = "*"
"""
A pattern value ending in this character matches any value which starts with
the characters which precede it.
"""


class Pattern(object):
    """
    A single value in a classification rule: either an exact string or, when
    ending in :py:data:`WILDCARD`, a prefix.

        >>> "High" in Pattern("High")
        True
        >>> "High 10" in Pattern("High")
        False
        >>> "Scalable High" in Pattern("Scalable*")
        True

    An empty pattern matches nothing (not even the empty string).
    """

    def __init__(self, pattern):
        self.pattern = pattern

    @property
    def is_prefix(self):
        return self.pattern.endswith(WILDCARD)

    def __contains__(self, value):
        if not self.pattern or not value:
            return False

        if self.is_prefix:
            prefix = self.pattern[: -len(WILDCARD)]
            return str(value)[: len(prefix)] == prefix
        else:
            return str(value) == self.pattern

    def __eq__(self, other):
        return isinstance(other, Pattern) and self.pattern == other.pattern

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.pattern)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.pattern)

    def __str__(self):
        return self.pattern


ClassificationScheme = namedtuple("ClassificationScheme", "scheme,rules")
"""
A classification scheme: the scheme's URN (``scheme``) and its ordered list of
rules (``rules``).
"""


def rule_matches(rule, params):
    """
    Test whether a classification rule matches a set of coding parameters.

    The rule's keys (ignoring ``term``) must be exactly the same as the
    parameters' keys (ignoring ``type``) and every parameter value must match
    the corresponding :py:class:`Pattern`. A rule with no keys other than
    ``term`` matches nothing.

    Parameters
    ==========
    rule : {"term": str, key: :py:class:`Pattern`, ...}
    params : {key: value, ...}
    """
    rule_keys = set(rule) - set(["term"])
    param_keys = set(params) - set(["type"])

    if not rule_keys or rule_keys != param_keys:
        return False

    return all(params[key] in rule[key] for key in rule_keys)


def filter_rule_table(rules, params):
    """
    Return the subset of ``rules`` which match ``params``, in table order.
    """
    return [rule for rule in rules if rule_matches(rule, params)]


def classify(params, schemes):
    """
    Find the classification term for a set of coding parameters.

    Parameters
    ==========
    params : {"type": str, key: value, ...}
        The coding parameters resolved by a decoder. The ``type`` entry (e.g.
        "video" or "audio") selects which scheme in ``schemes`` is used.
    schemes : {type: :py:class:`ClassificationScheme`, ...}

    Returns
    =======
    str
        "<scheme>:<term>" for the first matching rule or "" if no rule
        matches (or there is no scheme for the parameters' type).
    """
    scheme = schemes.get(params.get("type"))
    if scheme is None:
        return ""

    matches = filter_rule_table(scheme.rules, params)
    if not matches:
        return ""

    term = matches[0]["term"]
    if len(matches) > 1:
        logging.debug(
            "classify: %r matched %d rules, using the first", params, len(matches)
        )
    logging.debug("classify: %r matched %s:%s", params, scheme.scheme, term)
    return "{}:{}".format(scheme.scheme, term)
