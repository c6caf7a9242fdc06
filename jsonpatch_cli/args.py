# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
    apply_error_policies,
)
from .log import init_logging, set_jsonpatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsonpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsonpatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all json-patch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


filename_help = {
    "from":  "The source json document filename.",
    "to":    "The target json document filename.",
    "input": "The json document filename to patch.",
    "patch": "The json patch filename (RFC 6902).",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        dest = name + '_' if name == 'from' else name
        parser.add_argument(dest, metavar=name.upper(), help=filename_help[name])


def add_patch_arg(parser, required=True):
    """Adds the -p/--patch option naming the patch file."""
    parser.add_argument(
        '-p', '--patch',
        required=required,
        help=filename_help["patch"])


def add_edit_args(parser):
    """Adds a set of arguments for the interactive patch editor.
    """
    parser.add_argument(
        '-e', '--editor',
        default=None,
        help="the editor command used to edit the patched document. "
             "Defaults to $VISUAL, then $EDITOR, then vim.")
    parser.add_argument(
        '-w', '--watch',
        action="store_true",
        default=False,
        help="enable live editing of the patch file: the patch is "
             "rewritten every time the patched document is saved.")
    parser.add_argument(
        '--on-apply-error',
        default='edit-base',
        choices=apply_error_policies,
        help="what to do when the existing patch fails to apply: edit "
             "the unpatched input ('edit-base') or abort ('fail').")
    parser.add_argument(
        '--debounce',
        default=0.2,
        type=float,
        help="seconds to wait for further saves before recomputing "
             "the patch in watch mode.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
