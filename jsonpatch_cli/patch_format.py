# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .document import parse_document
from .errors import ParseError
from .pointer import Pointer


class PatchEntry(dict):
    """For internal usage in jsonpatch_cli library.

    Minimal class providing attribute access to patch entry keys.
    The "from" key is available as the attribute `from_`, since
    `from` is a reserved word.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Members each op requires besides "op" and "path"
_required_members = {
    PatchOp.ADD: ("value",),
    PatchOp.REMOVE: (),
    PatchOp.REPLACE: ("value",),
    PatchOp.MOVE: ("from",),
    PatchOp.COPY: ("from",),
    PatchOp.TEST: ("value",),
}

# Order of members when serializing a patch entry
_member_order = ("op", "from", "path", "value")


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=str(path), value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=str(path))

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=str(path), value=value)

def op_move(from_, path):
    "Create a patch entry to move the value at from_ to path."
    return PatchEntry([("op", PatchOp.MOVE), ("from", str(from_)), ("path", str(path))])

def op_copy(from_, path):
    "Create a patch entry to copy the value at from_ to path."
    return PatchEntry([("op", PatchOp.COPY), ("from", str(from_)), ("path", str(path))])

def op_test(path, value):
    "Create a patch entry testing that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=str(path), value=value)


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except ParseError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a ParseError if not well formed.
    """
    if not isinstance(patch, list):
        raise ParseError("Patch must be a list of operations.")
    for i, e in enumerate(patch):
        validate_patch_entry(e, index=i)


def validate_patch_entry(e, index=None):
    """Check that e is a well formed patch entry.

    Raises a ParseError if not well formed. Values are not checked
    in any way, they can be arbitrary json.
    """
    where = "" if index is None else " at index {}".format(index)
    if not isinstance(e, dict):
        raise ParseError("Patch entry{} is not an object: {!r}".format(where, e))
    op = e.get("op")
    if op not in _required_members:
        raise ParseError("Unknown patch op {!r}{}.".format(op, where))
    if "path" not in e:
        raise ParseError("Patch op {!r}{} is missing 'path'.".format(op, where))
    Pointer.parse(e["path"])
    for member in _required_members[op]:
        if member not in e:
            raise ParseError("Patch op {!r}{} is missing {!r}.".format(op, where, member))
    if "from" in _required_members[op]:
        Pointer.parse(e["from"])


def to_patch_entries(obj):
    "Convert decoded json into a validated list of PatchEntry objects."
    validate_patch(obj)
    return [PatchEntry(e) for e in obj]


def parse_patch(text, source=None):
    "Parse the text of a patch file."
    obj = parse_document(text, source=source)
    try:
        return to_patch_entries(obj)
    except ParseError as e:
        if e.source is None:
            e.source = source
        raise


def _ordered_entry(e):
    ordered = {k: e[k] for k in _member_order if k in e}
    ordered.update((k, v) for k, v in e.items() if k not in ordered)
    return ordered


def serialize_patch(patch):
    "Serialize a patch to its canonical text form."
    entries = [_ordered_entry(e) for e in patch]
    return json.dumps(entries, indent=2, separators=(",", ": "),
                      ensure_ascii=False, allow_nan=False) + "\n"


class PatchBuilder(object):
    "Accumulates patch entries in the order they must be applied."

    def __init__(self):
        self._patch = []

    def validated(self):
        return self._patch

    def append(self, entry):
        assert isinstance(entry, PatchEntry)
        self._patch.append(entry)

    def extend(self, entries):
        for e in entries:
            self.append(e)

    def add(self, path, value):
        self.append(op_add(path, value))

    def remove(self, path):
        self.append(op_remove(path))

    def replace(self, path, value):
        self.append(op_replace(path, value))
