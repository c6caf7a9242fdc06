# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
from difflib import unified_diff
import pprint
import sys

import colorama


# Indentation offset in pretty-print
IND = "  "

# Number of unchanged lines shown around each changed hunk
CONTEXT_LINES = 3

HUNK_SEPARATOR = "-" * 80


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color} '.format(color=colorama.Style.DIM),
        REMOVE = '{color}-'.format(color=colorama.Fore.RED),
        ADD    = '{color}+'.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = ' ',
        REMOVE = '-',
        ADD    = '+',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            context_lines=CONTEXT_LINES,
            ):
        self.out = out
        self.use_color = use_color
        self.context_lines = context_lines

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def _line_number(n):
    return "    " if n is None else "%-4d" % n


def builtin_diff_render(a, b, config=DefaultConfig):
    """Render a line diff of the texts a and b.

    Each line is prefixed by its line numbers in a and b. Hunks are
    separated by a dashed line.
    """
    gen = unified_diff(
        a.splitlines(False),
        b.splitlines(False),
        n=config.context_lines,
        lineterm='')
    uni = []
    aline = bline = 0
    for line in gen:
        if line.startswith('---') or line.startswith('+++'):
            continue
        if line.startswith('@'):
            # Hunk header: "@@ -start,len +start,len @@"
            if uni:
                uni.append(HUNK_SEPARATOR)
            ranges = line.split()
            aline = abs(int(ranges[1].split(',')[0]))
            bline = int(ranges[2].split(',')[0])
            # Empty ranges report the line before the hunk
            if ranges[1].endswith(',0'):
                aline += 1
            if ranges[2].endswith(',0'):
                bline += 1
        elif line.startswith('+'):
            uni.append("%s%s |%s%s%s" % (
                _line_number(None), _line_number(bline),
                config.ADD, line[1:], config.RESET))
            bline += 1
        elif line.startswith('-'):
            uni.append("%s%s |%s%s%s" % (
                _line_number(aline), _line_number(None),
                config.REMOVE, line[1:], config.RESET))
            aline += 1
        else:
            uni.append("%s%s |%s%s%s" % (
                _line_number(aline), _line_number(bline),
                config.KEEP, line[1:], config.RESET))
            aline += 1
            bline += 1
    return '\n'.join(uni)


def pretty_print_patch_change(old, new, config=DefaultConfig):
    """Print the line diff between the old and new text of a patch file.

    Prints nothing if the texts are equal.
    """
    rendered = builtin_diff_render(old, new, config)
    if rendered:
        config.out.write(rendered + "\n")


def format_value(v):
    "Format simple value for printing."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        pretty_print_item(k, d[k], prefix, config)
