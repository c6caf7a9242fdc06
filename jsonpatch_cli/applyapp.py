# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import ConfigBackedParser, add_generic_args, add_filename_args, add_patch_arg
from .document import serialize_document
from .errors import JSONPatchError
from .patching import patch
from .utils import read_document, read_patch, write_atomic, setup_std_streams


_description = "Apply a JSON (RFC 6902) patch to a json file."


def main_apply(args):
    try:
        before = read_document(args.input)
        entries = read_patch(args.patch)
        text = serialize_document(patch(before, entries))
        if args.output:
            write_atomic(args.output, text)
        else:
            print(text, end="")
    except JSONPatchError as e:
        log.error("%s", e)
        return 1
    return 0


def _build_arg_parser(prog='json-patch-apply'):
    """Creates an argument parser for the apply command."""
    parser = ConfigBackedParser(
        prog=prog,
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["input"])
    add_patch_arg(parser)
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())
