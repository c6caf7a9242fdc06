# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .document import values_equal, value_type
from .errors import (
    ApplyError, PathNotFound, IndexOutOfBounds, InvalidMove, TestFailed)
from .patch_format import PatchEntry, PatchOp, validate_patch_entry
from .pointer import Pointer, APPEND, parse_index


__all__ = ["patch"]


def _container(doc, pointer):
    "Resolve the parent container of pointer within doc."
    obj = doc
    for depth, token in enumerate(pointer.parent):
        if isinstance(obj, dict):
            if token not in obj:
                raise PathNotFound("no such key {!r}".format(token),
                                   path=Pointer(pointer[:depth + 1]))
            obj = obj[token]
        elif isinstance(obj, list):
            index = parse_index(token)
            if index is None:
                raise PathNotFound("invalid array index {!r}".format(token),
                                   path=Pointer(pointer[:depth + 1]))
            if index >= len(obj):
                raise IndexOutOfBounds(
                    "index {} out of range for array of length {}".format(index, len(obj)),
                    path=Pointer(pointer[:depth + 1]))
            obj = obj[index]
        else:
            raise PathNotFound(
                "cannot address into {}".format(value_type(obj)),
                path=Pointer(pointer[:depth + 1]))
    if not isinstance(obj, (dict, list)):
        raise PathNotFound("cannot address into {}".format(value_type(obj)), path=pointer)
    return obj


def _existing_index(arr, token, pointer):
    "Index of an existing array element."
    index = parse_index(token)
    if index is None:
        raise PathNotFound("invalid array index {!r}".format(token), path=pointer)
    if index >= len(arr):
        raise IndexOutOfBounds(
            "index {} out of range for array of length {}".format(index, len(arr)),
            path=pointer)
    return index


def _get(doc, pointer):
    if not pointer:
        return doc
    parent = _container(doc, pointer)
    token = pointer.last
    if isinstance(parent, dict):
        if token not in parent:
            raise PathNotFound("no such key {!r}".format(token), path=pointer)
        return parent[token]
    return parent[_existing_index(parent, token, pointer)]


def _add(doc, pointer, value):
    if not pointer:
        return value
    parent = _container(doc, pointer)
    token = pointer.last
    if isinstance(parent, dict):
        parent[token] = value
    elif token == APPEND:
        parent.append(value)
    else:
        index = parse_index(token)
        if index is None:
            raise PathNotFound("invalid array index {!r}".format(token), path=pointer)
        if index > len(parent):
            raise IndexOutOfBounds(
                "index {} out of range for insertion into array of length {}".format(
                    index, len(parent)),
                path=pointer)
        parent.insert(index, value)
    return doc


def _remove(doc, pointer):
    "Remove the value at pointer, returning it."
    if not pointer:
        raise PathNotFound("cannot remove the document root", path=pointer)
    parent = _container(doc, pointer)
    token = pointer.last
    if isinstance(parent, dict):
        if token not in parent:
            raise PathNotFound("no such key {!r}".format(token), path=pointer)
        return parent.pop(token)
    return parent.pop(_existing_index(parent, token, pointer))


def _replace(doc, pointer, value):
    if not pointer:
        return value
    parent = _container(doc, pointer)
    token = pointer.last
    if isinstance(parent, dict):
        if token not in parent:
            raise PathNotFound("no such key {!r}".format(token), path=pointer)
        # Assigning to an existing key keeps its position
        parent[token] = value
    else:
        parent[_existing_index(parent, token, pointer)] = value
    return doc


def apply_entry(doc, e):
    """Apply a single patch entry to doc, returning the new document.

    doc is modified in place where possible, callers must pass a copy.
    """
    op = e.op
    path = Pointer.parse(e.path)
    if op == PatchOp.ADD:
        return _add(doc, path, copy.deepcopy(e.value))
    elif op == PatchOp.REMOVE:
        _remove(doc, path)
        return doc
    elif op == PatchOp.REPLACE:
        return _replace(doc, path, copy.deepcopy(e.value))
    elif op == PatchOp.MOVE:
        from_ = Pointer.parse(e["from"])
        if from_ == path:
            _get(doc, from_)
            return doc
        if from_.is_prefix_of(path, strict=True):
            raise InvalidMove(
                "cannot move {!r} into its own child".format(str(from_)), path=path)
        value = _remove(doc, from_)
        return _add(doc, path, value)
    elif op == PatchOp.COPY:
        value = copy.deepcopy(_get(doc, Pointer.parse(e["from"])))
        return _add(doc, path, value)
    elif op == PatchOp.TEST:
        actual = _get(doc, path)
        if not values_equal(actual, e.value):
            raise TestFailed(e.value, actual, path=path)
        return doc
    raise ApplyError("invalid op {!r}".format(op), path=path)


def patch(obj, patch):
    """Produce a patched version of obj with given json patch.

    Operations are applied left to right, each seeing the result of
    the previous one. obj is never modified: the operations work on
    a private copy, which is returned once every operation succeeded.
    The first failing operation raises an ApplyError identifying the
    operation, its index within the patch and the offending path.
    """
    result = copy.deepcopy(obj)
    for index, e in enumerate(patch):
        validate_patch_entry(e, index=index)
        if not isinstance(e, PatchEntry):
            e = PatchEntry(e)
        try:
            result = apply_entry(result, e)
        except ApplyError as err:
            err.op = e
            err.index = index
            if err.path is None:
                err.path = e.get("path")
            err.args = (str(err),)
            raise
    return result
