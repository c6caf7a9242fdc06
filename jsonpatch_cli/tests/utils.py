# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import shlex
import sys

from jsonpatch_cli import patch, diff
from jsonpatch_cli.document import values_equal
from jsonpatch_cli.patch_format import is_valid_patch


pjoin = os.path.join


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_patch(d)
    assert values_equal(patch(a, d), b)


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def write_json(filename, value):
    with open(filename, "w") as f:
        json.dump(value, f)


def read_json(filename):
    with open(filename) as f:
        return json.load(f)


def editor_script(tmpdir, body, name="editor.py"):
    """Write a python script usable as editor command.

    The script receives the file to edit as sys.argv[1], the body
    can refer to it as `filename`.
    """
    script = tmpdir.join(name)
    script.write("import json, sys\nfilename = sys.argv[1]\n" + body + "\n")
    return " ".join(shlex.quote(s) for s in [sys.executable, str(script)])


def json_writing_editor(tmpdir, value):
    "Editor command replacing the edited file with the json value."
    return editor_script(
        tmpdir,
        "with open(filename, 'w') as f:\n"
        "    json.dump(%r, f)\n" % (value,))
