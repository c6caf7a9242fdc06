# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Parsing, serialization and comparison of json documents.

Documents are the plain objects produced by the json decoder:
None, bool, int, float, str, list and dict. Dicts keep the key order
of the source text, which is also the order used when serializing.
"""

import json
import math

from .errors import ParseError


__all__ = [
    "parse_document", "serialize_document", "values_equal", "value_type",
    ]


def _reject_constant(name):
    raise ValueError("invalid constant {}".format(name))


def _parse_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError("number {} is out of range".format(text))
    return value


def parse_document(text, source=None):
    """Parse json text into a document.

    Raises ParseError with the position of the problem for malformed input.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf8")
        except UnicodeDecodeError as e:
            raise ParseError("Invalid utf-8 in document", source=source, pos=e.start) from e
    try:
        return json.loads(text, parse_float=_parse_float, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, source=source, lineno=e.lineno, colno=e.colno, pos=e.pos) from e
    except ValueError as e:
        raise ParseError(str(e), source=source) from e


def serialize_document(value):
    "Serialize a document with two space indentation and a trailing newline."
    return json.dumps(value, indent=2, separators=(",", ": "),
                      ensure_ascii=False, allow_nan=False) + "\n"


def value_type(value):
    "Return the json type name of value."
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    raise TypeError("Not a json value: {!r}".format(type(value).__name__))


def values_equal(a, b):
    """Deep structural equality of two documents.

    Unlike ==, booleans never compare equal to numbers. Object key
    order is ignored, array order is not.
    """
    ta = value_type(a)
    if ta != value_type(b):
        return False
    if ta == "array":
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    elif ta == "object":
        if len(a) != len(b):
            return False
        for key, avalue in a.items():
            if key not in b or not values_equal(avalue, b[key]):
                return False
        return True
    return a == b
