# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import locale
import os
import shutil
import sys
import tempfile

from .document import parse_document, serialize_document
from .errors import IoError
from .patch_format import parse_patch


def read_text(filename, what="file"):
    "Read a utf-8 text file, raising IoError on failure."
    try:
        with io.open(filename, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError("Error reading {}".format(what), filename) from e


def read_document(filename):
    """Read and return a json document from filename

    Raises IoError if the file cannot be read, and ParseError
    if it is not valid json.
    """
    return parse_document(read_text(filename, "document"), source=filename)


def read_patch(filename):
    """Read and return a patch from filename

    Raises IoError if the file cannot be read, and ParseError
    if it is not a valid patch.
    """
    return parse_patch(read_text(filename, "patch file"), source=filename)


def _current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_atomic(filename, text):
    """Write text to filename atomically.

    The text is written to a temporary file in the same directory which
    then replaces filename, so readers never see a partially written file.
    """
    dirname = os.path.dirname(os.path.abspath(filename))
    try:
        fd, tmpname = tempfile.mkstemp(
            prefix='.' + os.path.basename(filename) + '.', suffix='.tmp', dir=dirname)
    except OSError as e:
        raise IoError("Error writing file", filename) from e
    try:
        with io.open(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if os.path.exists(filename):
            shutil.copymode(filename, tmpname)
        else:
            # mkstemp creates files readable by the owner only
            os.chmod(tmpname, 0o666 & ~_current_umask())
        os.replace(tmpname, filename)
    except (OSError, UnicodeError) as e:
        raise IoError("Error writing file", filename) from e
    finally:
        if os.path.exists(tmpname):
            os.remove(tmpname)


def write_document(filename, value):
    write_atomic(filename, serialize_document(value))


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
