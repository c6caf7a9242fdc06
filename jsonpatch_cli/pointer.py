# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON pointers (RFC 6901).

A Pointer is a tuple of unescaped string tokens. The empty pointer
addresses the document root.
"""

import re

from .errors import ParseError


__all__ = ["Pointer", "escape_token", "unescape_token", "parse_index", "APPEND"]


# Token addressing the position one past the end of an array
APPEND = "-"

_r_index = re.compile(r"0|[1-9][0-9]*")
_r_bad_escape = re.compile(r"~(?![01])")


def escape_token(token):
    return str(token).replace("~", "~0").replace("/", "~1")


def unescape_token(token):
    return token.replace("~1", "/").replace("~0", "~")


def parse_index(token):
    "Return token as an array index, or None if it is not one."
    if _r_index.fullmatch(token):
        return int(token)
    return None


class Pointer(tuple):

    def __new__(cls, tokens=()):
        return super(Pointer, cls).__new__(cls, (str(t) for t in tokens))

    @classmethod
    def parse(cls, text):
        "Parse the wire form of a pointer."
        if isinstance(text, Pointer):
            return text
        if not isinstance(text, str):
            raise ParseError("Pointer must be a string, not {!r}".format(text))
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise ParseError("Pointer {!r} must be empty or start with '/'".format(text))
        if _r_bad_escape.search(text):
            raise ParseError("Pointer {!r} contains an invalid '~' escape".format(text))
        return cls(unescape_token(t) for t in text[1:].split("/"))

    def __str__(self):
        return "".join("/" + escape_token(t) for t in self)

    def __repr__(self):
        return "Pointer({!r})".format(str(self))

    def join(self, *tokens):
        return Pointer(self + tuple(str(t) for t in tokens))

    @property
    def parent(self):
        return Pointer(self[:-1])

    @property
    def last(self):
        return self[-1] if self else None

    def is_prefix_of(self, other, strict=False):
        "Whether other addresses this location or one below it."
        if len(self) > len(other) or (strict and len(self) == len(other)):
            return False
        return tuple(other[:len(self)]) == tuple(self)

