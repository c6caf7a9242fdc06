# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .diffing import diff
from .errors import JSONPatchError
from .patch_format import serialize_patch
from .utils import read_document, write_atomic, setup_std_streams


_description = ("Calculate the difference between two json files "
                "to create a JSON (RFC 6902) patch.")


def main_diff(args):
    """Main handler of diff CLI"""
    try:
        a = read_document(args.from_)
        b = read_document(args.to)
        text = serialize_patch(diff(a, b))
        if args.out:
            write_atomic(args.out, text)
        else:
            print(text, end="")
    except JSONPatchError as e:
        log.error("%s", e)
        return 1
    return 0


def _build_arg_parser(prog='json-patch-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        prog=prog,
        description=_description,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["from", "to"])
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
