# -*- coding: utf-8 -*-

"""
:py:mod:`codec_string_explain.tables._csv_reading`: Internal table reading routines
===================================================================================

These routines are used to load descriptive lookup tables and classification
rule tables from the CSV files in the ``codec_string_explain/tables/``
directory.
"""

import os
import csv

from collections import OrderedDict

from vc2_data_tables.csv_readers import open_utf8, is_ditto

from codec_string_explain.exceptions import DuplicateKeyError, TableDefinitionError

from codec_string_explain.classification import Pattern


__all__ = [
    "is_ditto",
    "csv_path",
    "is_comment_or_empty",
    "read_csv_without_comments",
    "read_descriptions_from_csv",
    "read_rules_from_csv",
]


def csv_path(csv_filename):
    """
    Given a CSV filename in the ``codec_string_explain/tables/`` directory,
    returns a complete path to that file. Absolute filenames are returned
    unchanged.
    """
    return os.path.join(os.path.dirname(__file__), csv_filename)


def is_comment_or_empty(cells):
    """Test if a row of CSV cells is empty or contains only '#' comments."""
    return all(not cell.strip() or cell.strip().startswith("#") for cell in cells)


def read_csv_without_comments(csv_filename):
    """
    Returns a list of dictionaries, one per row, containing the values in the
    CSV (as read by :py:class:`csv.DictReader`). Leading empty and comment rows
    are skipped; the first other row supplies the column headings.
    """
    csv_filename = csv_path(csv_filename)

    # Find the first non-empty/comment row in the CSV
    first_non_empty_row = 0
    with open_utf8(csv_filename) as f:
        for first_non_empty_row, cells in enumerate(csv.reader(f)):
            if not is_comment_or_empty(cells):
                break

    with open_utf8(csv_filename) as f:
        # Skip empty/comment rows
        for _ in range(first_non_empty_row):
            f.readline()

        return list(csv.DictReader(f))


def read_descriptions_from_csv(csv_filename):
    """
    Read a table of textual descriptions for integer code points.

    The CSV must have an 'index' and a 'description' column. A row with an
    empty (or ditto) index adds another line to the description of the
    preceding index, allowing one code point to list several specifications.
    Completely empty rows are ignored.

    Parameters
    ==========
    csv_filename : str
        Filename of the CSV file to read (relative to the
        codec_string_explain/tables directory).

    Returns
    =======
    :py:class:`collections.OrderedDict` : {index: (description, ...), ...}
    """
    rows = read_csv_without_comments(csv_filename)

    lookup = OrderedDict()
    index = None
    for row in rows:
        if is_comment_or_empty(
            cell or "" for key, cell in row.items() if key is not None
        ):
            continue

        index_cell = (row["index"] or "").strip()
        if index_cell and not is_ditto(index_cell):
            index = int(index_cell)
            if index in lookup:
                raise DuplicateKeyError(
                    "index {} appears twice in {}".format(index, csv_filename)
                )
            lookup[index] = ()
        elif index is None:
            raise TableDefinitionError(
                "first description in {} has no index".format(csv_filename)
            )

        lookup[index] += ((row["description"] or "").strip(),)

    return lookup


def read_rules_from_csv(csv_filename):
    r'''
    Reads a classification rule table from a CSV file.

    The first non-empty, non-comment row gives the column headings, one of
    which must be 'term'. Each following row defines one rule, in order:

    * The 'term' column gives the rule's term.
    * Every other non-empty cell becomes a
      :py:class:`~codec_string_explain.classification.Pattern` for the
      attribute named by its column heading.
    * Empty cells mean the rule does not include that attribute.
    * Cells which contain only a pair of quotes (e.g. ``"``, i.e. ditto) take
      the value of the same column in the row above. (This is encoded using
      four double quotes (``""""``) in CSV format).

    Empty rows and rows containing only '#' prefixed values are skipped.

    Parameters
    ==========
    csv_filename : str
        Filename of the CSV file to read (relative to the
        codec_string_explain/tables directory).

    Returns
    =======
    [{"term": str, key: :py:class:`Pattern`, ...}, ...]
    '''
    out = []

    headings = None
    last_row = []
    with open_utf8(csv_path(csv_filename)) as f:
        for row in csv.reader(f):
            # Skip empty lines
            if is_comment_or_empty(row):
                continue

            if headings is None:
                headings = [cell.strip() for cell in row]
                continue

            # Resolve ditto marks against the previous row
            row = [
                (last_row[i] if i < len(last_row) else "")
                if is_ditto(cell)
                else cell.strip()
                for i, cell in enumerate(row)
            ]
            last_row = row

            rule = {}
            for heading, cell in zip(headings, row):
                if not cell:
                    continue
                if heading == "term":
                    rule["term"] = cell
                else:
                    rule[heading] = Pattern(cell)
            out.append(rule)

    return out
