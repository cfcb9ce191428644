r"""
.. _codec-string-explain:

``codec-string-explain``
========================

A command-line utility which explains the codec parameter strings used in
MIME ``codecs=`` attributes and streaming manifests.

Example usage
-------------

An example invocation is shown below::

    $ codec-string-explain avc1.64002A
    AVC/H.264
      profile_idc=100 constraint_set=0 level_idc=42
      profile=High (64)
      constraints=------
      level=4.2 (2a)
      term: urn:dvb:metadata:cs:VideoCodecCS:2022:1.4.14

Several codec strings may be given, either as separate arguments or as a
single comma separated list. Each is explained independently.

A JSON rendition of the same information may be produced using
``--format json``. The supported codec identifiers may be listed using
``--list``.

The exit status is 0 if every codec string was explained without error and 1
otherwise.

Arguments
---------

The complete set of arguments can be listed using ``--help``

.. program-output:: codec-string-explain --help

"""

import sys

import logging

from argparse import ArgumentParser

from codec_string_explain import __version__

from codec_string_explain.diagnostics import has_errors

from codec_string_explain.dispatch import dispatch, default_registry

from codec_string_explain.renderers import render_result, render_json

__all__ = [
    "parse_args",
    "main",
]


def parse_args(*args, **kwargs):
    """
    Parse a set of command line arguments. Returns a :py:mod:`argparse`
    ``args`` object with the following fields:

    * codecs ([str, ...]): The codec strings to explain.
    * format (str): 'text' or 'json'.
    * list (bool): True if the supported codec identifiers are to be listed.
    * verbose (int): The verbosity level.
    """
    parser = ArgumentParser(
        description="""
        Explain the profile, level and other coding attributes signalled by
        media codec parameter strings (e.g. 'avc1.64002A').
    """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "codecs",
        nargs="*",
        help="""
            The codec strings to explain. Each argument may contain several
            comma separated codec strings.
        """,
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="""
            The output format. (Default: %(default)s).
        """,
    )

    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        default=False,
        help="""
            List the supported codec identifiers and exit.
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Show additional status information during execution. Give twice
            for debugging output.
        """,
    )

    args = parser.parse_args(*args, **kwargs)

    if not args.list and not args.codecs:
        parser.error("at least one codec string is required")

    return args


def main(*args, **kwargs):
    args = parse_args(*args, **kwargs)

    log_level = logging.WARNING
    if args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose >= 1:
        log_level = logging.INFO
    logging.basicConfig(level=log_level)

    registry = default_registry()

    if args.list:
        for entry in registry:
            print("{}\t{}".format(entry.identifier, entry.label))
        return 0

    results = dispatch(",".join(args.codecs), registry)
    logging.info("Explained %d codec string(s)", len(results))

    if args.format == "json":
        print(render_json(results))
    else:
        print("\n\n".join(render_result(result) for result in results))

    if any(has_errors(result.diagnostics) for result in results):
        return 1
    else:
        return 0


if __name__ == "__main__":
    sys.exit(main())
