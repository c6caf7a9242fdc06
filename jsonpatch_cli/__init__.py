# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff
from .patching import patch
from .editing import EditLoop, edit_patch
from .errors import (
    JSONPatchError, ParseError, ApplyError, PathNotFound, IndexOutOfBounds,
    InvalidMove, TestFailed, IoError, EditorError,
)


__all__ = [
    "__version__",
    "diff", "patch",
    "EditLoop", "edit_patch",
    "JSONPatchError", "ParseError", "ApplyError", "PathNotFound",
    "IndexOutOfBounds", "InvalidMove", "TestFailed", "IoError", "EditorError",
    ]
