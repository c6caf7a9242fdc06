# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_patch_arg,
    add_edit_args, add_prettyprint_args, prettyprint_config_from_args,
    )
from .editing import EditLoop
from .errors import JSONPatchError
from .utils import setup_std_streams


_description = ("Edit a JSON (RFC 6902) patch, by editing a patched "
                "version of the input using a text editor.")


def main_edit(args):
    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    loop = EditLoop(
        args.input, args.patch,
        editor=args.editor,
        watch=args.watch,
        on_apply_error=args.on_apply_error,
        debounce=args.debounce,
        pretty_config=prettyprint_config_from_args(args, out=Printer()),
        )
    try:
        loop.run()
    except JSONPatchError as e:
        log.error("%s", e)
        return 1
    return 0


def _build_arg_parser(prog='json-patch-edit'):
    """Creates an argument parser for the edit command."""
    parser = ConfigBackedParser(
        prog=prog,
        description=_description,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["input"])
    add_patch_arg(parser)
    add_edit_args(parser)
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_edit(arguments)


if __name__ == "__main__":
    sys.exit(main())
