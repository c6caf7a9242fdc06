# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import colorama

from jsonpatch_cli.prettyprint import (
    PrettyPrintConfig, builtin_diff_render, pretty_print_patch_change,
    pretty_print_dict, HUNK_SEPARATOR)


def plain_config():
    return PrettyPrintConfig(out=io.StringIO(), use_color=False)


def test_diff_render_line_numbers():
    a = "x\ny\nz\n"
    b = "x\nY\nz\nw\n"
    assert builtin_diff_render(a, b, plain_config()).splitlines() == [
        "1   1    | x",
        "2        |-y",
        "    2    |+Y",
        "3   3    | z",
        "    4    |+w",
        ]


def test_diff_render_equal_is_empty():
    assert builtin_diff_render("a\nb\n", "a\nb\n", plain_config()) == ""


def test_diff_render_from_empty():
    assert builtin_diff_render("", "[]\n", plain_config()) == "    1    |+[]"


def test_diff_render_separates_hunks():
    a = "\n".join(str(i) for i in range(20))
    b = a.replace("2", "two").replace("17", "seventeen")
    lines = builtin_diff_render(a, b, PrettyPrintConfig(use_color=False, context_lines=1)).splitlines()
    assert HUNK_SEPARATOR in lines
    assert lines[0] == "2   2    | 1"


def test_diff_render_colors():
    config = PrettyPrintConfig(use_color=True)
    rendered = builtin_diff_render("a\n", "b\n", config)
    assert colorama.Fore.RED + "-a" in rendered
    assert colorama.Fore.GREEN + "+b" in rendered
    assert colorama.Style.RESET_ALL in rendered


def test_pretty_print_patch_change():
    config = plain_config()
    pretty_print_patch_change("[]\n", "[]\n", config)
    assert config.out.getvalue() == ""
    pretty_print_patch_change("[]\n", "[\n  1\n]\n", config)
    assert config.out.getvalue() == (
        "1        |-[]\n"
        "    1    |+[\n"
        "    2    |+  1\n"
        "    3    |+]\n"
        )


def test_pretty_print_dict():
    config = plain_config()
    pretty_print_dict({"b": {"x": "1"}, "a": "multi\nline"}, config=config)
    assert config.out.getvalue() == (
        "a:\n"
        "  multi\n"
        "  line\n"
        "b:\n"
        "  x: 1\n"
        )
