# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Exception types raised by jsonpatch_cli.

Every failure the library reports derives from `JSONPatchError`, so entry
points can catch a single type and turn it into a non-zero exit code.
"""


class JSONPatchError(Exception):
    pass


class ParseError(JSONPatchError, ValueError):
    """Malformed document, patch or pointer text.

    `lineno`, `colno` and `pos` are filled in when the location is known,
    `source` names the file the text came from.
    """

    def __init__(self, message, source=None, lineno=None, colno=None, pos=None):
        self.message = message
        self.source = source
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
        super(ParseError, self).__init__(str(self))

    def __str__(self):
        location = ''
        if self.lineno is not None:
            location = 'line {} column {}'.format(self.lineno, self.colno)
        if self.source:
            location = '{}: {}'.format(self.source, location) if location else str(self.source)
        if location:
            return '{} ({})'.format(self.message, location)
        return self.message


class ApplyError(JSONPatchError):
    """An operation of a patch could not be applied.

    `path` is the pointer that triggered the failure, `op` the offending
    patch entry and `index` its position within the patch.
    """

    def __init__(self, message, path=None, op=None, index=None):
        self.message = message
        self.path = path
        self.op = op
        self.index = index
        super(ApplyError, self).__init__(str(self))

    def __str__(self):
        parts = [self.message]
        if self.op is not None:
            where = 'operation {!r}'.format(self.op.get('op'))
            if self.index is not None:
                where += ' at index {}'.format(self.index)
            parts.append(where)
        if self.path is not None:
            parts.append('path {!r}'.format(str(self.path)))
        return ', '.join(parts)


class PathNotFound(ApplyError):
    pass


class IndexOutOfBounds(ApplyError):
    pass


class InvalidMove(ApplyError):
    pass


class TestFailed(ApplyError):
    __test__ = False

    def __init__(self, expected, actual, path=None, op=None, index=None):
        self.expected = expected
        self.actual = actual
        message = 'test failed: expected {!r}, found {!r}'.format(expected, actual)
        super(TestFailed, self).__init__(message, path=path, op=op, index=index)


class IoError(JSONPatchError):
    """Reading or writing a file failed."""

    def __init__(self, message, filename=None):
        self.message = message
        self.filename = filename
        super(IoError, self).__init__(str(self))

    def __str__(self):
        if self.filename:
            return '{}: {}'.format(self.message, self.filename)
        return self.message


class EditorError(JSONPatchError):
    """The external editor could not be started or exited with an error."""

    def __init__(self, message, command=None, returncode=None):
        self.message = message
        self.command = command
        self.returncode = returncode
        super(EditorError, self).__init__(str(self))

    def __str__(self):
        text = self.message
        if self.command:
            text += ': {}'.format(' '.join(self.command))
        if self.returncode is not None:
            text += ' (exit code {})'.format(self.returncode)
        return text
