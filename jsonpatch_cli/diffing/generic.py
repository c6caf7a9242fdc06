# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..document import values_equal
from ..patch_format import PatchBuilder, validate_patch
from ..pointer import Pointer

__all__ = ["diff"]


def diff(a, b, path=None):
    """Compute a json patch transforming document a into document b.

    Unchanged subtrees produce no operations. The result is deterministic,
    following the key and element order of the documents.
    """
    path = Pointer() if path is None else Pointer.parse(path)
    d = diff_values(a, b, path)

    # We can turn this off for performance after the library has been well tested:
    validate_patch(d)

    return d


def diff_values(a, b, path):
    "Dispatch on the json types of a and b."
    if values_equal(a, b):
        return []
    if isinstance(a, dict) and isinstance(b, dict):
        return diff_dicts(a, b, path)
    elif isinstance(a, list) and isinstance(b, list):
        return diff_lists(a, b, path)
    # Type change or differing scalars
    di = PatchBuilder()
    di.replace(path, b)
    return di.validated()


def diff_dicts(a, b, path=Pointer()):
    """Compute the patch between two dicts.

    Keys only in a are removed first, in the order of a. Then, in the
    order of b, keys only in b are added and keys in both are diffed
    recursively.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    di = PatchBuilder()
    for key in a:
        if key not in b:
            di.remove(path.join(key))

    for key, bvalue in b.items():
        subpath = path.join(key)
        if key not in a:
            di.add(subpath, bvalue)
        else:
            di.extend(diff_values(a[key], bvalue, subpath))

    return di.validated()


def diff_lists(a, b, path=Pointer()):
    """Compute the patch between two lists.

    Equal elements at the start and the end are left alone. In the
    remaining window, elements at the same offset are diffed
    recursively, surplus items of a are removed from the highest index
    down and surplus items of b are added from the lowest index up.
    Every index in the patch is therefore valid at the time the
    operation is applied.
    """
    if not isinstance(a, list) or not isinstance(b, list):
        raise TypeError('Arguments to diff_lists need to be lists, got %r and %r' % (a, b))

    # Length of common prefix
    n = min(len(a), len(b))
    prefix = 0
    while prefix < n and values_equal(a[prefix], b[prefix]):
        prefix += 1

    # Length of common suffix, not overlapping the prefix
    suffix = 0
    while (suffix < n - prefix and
           values_equal(a[len(a) - 1 - suffix], b[len(b) - 1 - suffix])):
        suffix += 1

    asize = len(a) - prefix - suffix
    bsize = len(b) - prefix - suffix
    common = min(asize, bsize)

    di = PatchBuilder()

    for k in range(prefix, prefix + common):
        di.extend(diff_values(a[k], b[k], path.join(k)))

    for k in reversed(range(prefix + common, prefix + asize)):
        di.remove(path.join(k))

    for k in range(prefix + common, prefix + bsize):
        di.add(path.join(k), b[k])

    return di.validated()
