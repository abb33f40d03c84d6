# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Static catalog of options understood by the ``zorba`` command line."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any, Final

from .behaviors import quoted_value
from .types import OptionScalar

_ASSIGNMENT_RE: Final[re.Pattern[str]] = re.compile(r"^[^=:\s][^=\s]*:?=.*$", re.DOTALL)
_PARAMETER_RE: Final[re.Pattern[str]] = re.compile(r"^[^=\s]+=.*$", re.DOTALL)
_MAX_PORT: Final[int] = 65535


def _is_int(value: OptionScalar) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _non_negative_int(name: str, value: OptionScalar) -> bool:
    del name
    return _is_int(value) and value >= 0


def _positive_int(name: str, value: OptionScalar) -> bool:
    del name
    return _is_int(value) and value > 0


def _port_number(name: str, value: OptionScalar) -> bool:
    del name
    return _is_int(value) and 0 < value <= _MAX_PORT


def _variable_binding(name: str, value: OptionScalar) -> bool:
    """Accept ``var=value`` (string binding) and ``var:=path`` (document binding)."""

    del name
    return isinstance(value, str) and bool(_ASSIGNMENT_RE.match(value))


def _key_value(name: str, value: OptionScalar) -> bool:
    del name
    return isinstance(value, str) and bool(_PARAMETER_RE.match(value))


def _path_like(name: str, value: OptionScalar) -> bool:
    del name
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    return isinstance(value, str) and bool(value)


def _path_value(name: str, value: OptionScalar) -> str:
    return quoted_value(name, os.fspath(value) if isinstance(value, os.PathLike) else value)


_PATH_OVERRIDES: Final[Mapping[str, Any]] = {"validate": _path_like, "serialize": _path_value}

ZORBA_OPTIONS: Final[tuple[Mapping[str, Any], ...]] = (
    # Query input
    {
        "name": "query",
        "type": "string",
        "repeatable": True,
        "shortFlag": "e",
        "description": "Query text, or a query file path when combined with --as-files.",
    },
    {"name": "as-files", "type": "boolean", "shortFlag": "f", "description": "Treat all query arguments as file paths."},
    {"name": "lib-module", "type": "boolean", "shortFlag": "l", "description": "Query is a library module."},
    {"name": "jsoniq", "type": "boolean", "shortFlag": "j", "description": "Parse queries with the JSONiq parser."},
    {"name": "base-uri", "type": "string", "description": "Base URI of the static context."},
    {
        "name": "external-variable",
        "type": "string",
        "repeatable": True,
        "shortFlag": "x",
        "description": "Bind an external variable: name=value, or name:=file for a document.",
        "validate": _variable_binding,
    },
    {"name": "context-item", "type": "string", "description": "File whose document becomes the context item."},
    # Static context
    {
        "name": "boundary-space",
        "type": "select",
        "choices": ["strip", "preserve"],
        "description": "Boundary-space policy of the static context.",
    },
    {
        "name": "construction-mode",
        "type": "select",
        "choices": ["strip", "preserve"],
        "description": "Construction mode of the static context.",
    },
    {
        "name": "ordering-mode",
        "type": "select",
        "choices": ["ordered", "unordered"],
        "description": "Ordering mode of the static context.",
    },
    {"name": "default-collation", "type": "string", "description": "Default collation URI."},
    {
        "name": "option",
        "type": "string",
        "repeatable": True,
        "description": "Static option declaration as qname=value.",
        "validate": _key_value,
    },
    # Resolution paths
    {"name": "uri-path", "type": "string", "description": "Path list used to resolve URIs.", **_PATH_OVERRIDES},
    {"name": "lib-path", "type": "string", "description": "Path list used to load external libraries.", **_PATH_OVERRIDES},
    {"name": "module-path", "type": "string", "description": "Path list used to load modules.", **_PATH_OVERRIDES},
    {"name": "classpath", "type": "string", "description": "JVM classpath for Java-backed modules.", **_PATH_OVERRIDES},
    {"name": "disable-http-resolution", "type": "boolean", "description": "Do not resolve URIs over HTTP."},
    {"name": "stop-words", "type": "string", "repeatable": True, "description": "Full-text stop-word URI mapping."},
    {"name": "thesaurus", "type": "string", "repeatable": True, "description": "Full-text thesaurus URI mapping."},
    # Compilation and execution
    {
        "name": "optimization-level",
        "type": "select",
        "choices": ["O0", "O1", "O2"],
        "description": "Optimization level of the query compiler.",
    },
    {"name": "parse-only", "type": "boolean", "description": "Stop after parsing the query."},
    {"name": "compile-only", "type": "boolean", "description": "Stop after compiling the query."},
    {"name": "compile-plan", "type": "boolean", "description": "Write the compiled plan instead of executing."},
    {"name": "execute-plan", "type": "boolean", "description": "Execute a previously compiled plan."},
    {
        "name": "multiple",
        "type": "integer",
        "shortFlag": "m",
        "description": "Execute the query this many times.",
        "validate": _positive_int,
    },
    {
        "name": "timeout",
        "type": "integer",
        "description": "Abort execution after this many seconds.",
        "validate": _non_negative_int,
    },
    {
        "name": "max-udf-call-depth",
        "type": "integer",
        "description": "Maximum recursion depth of user-defined functions.",
        "validate": _positive_int,
    },
    {"name": "timing", "type": "boolean", "shortFlag": "t", "description": "Print timing information."},
    {"name": "no-logo", "type": "boolean", "description": "Do not print the banner."},
    # Output
    {
        "name": "output-file",
        "type": "string",
        "shortFlag": "o",
        "description": "Write the result to the given file.",
        **_PATH_OVERRIDES,
    },
    {
        "name": "serialization-parameter",
        "type": "string",
        "repeatable": True,
        "shortFlag": "z",
        "description": "Serializer parameter as name=value.",
        "validate": _key_value,
    },
    {"name": "indent", "type": "boolean", "shortFlag": "i", "description": "Indent the serialized result."},
    {"name": "omit-xml-declaration", "type": "boolean", "shortFlag": "r", "description": "Omit the XML declaration."},
    {"name": "byte-order-mark", "type": "boolean", "description": "Emit a byte order mark."},
    {"name": "serialize-html", "type": "boolean", "description": "Serialize the result as HTML."},
    {"name": "serialize-text", "type": "boolean", "description": "Serialize the result as text."},
    {"name": "no-serializer", "type": "boolean", "description": "Execute without serializing the result."},
    {"name": "trailing-newline", "type": "boolean", "description": "Append a newline to the result."},
    {"name": "print-query", "type": "boolean", "description": "Print the query before executing it."},
    {"name": "print-errors-as-xml", "type": "boolean", "description": "Report errors as XML."},
    # Debugger
    {"name": "debug", "type": "boolean", "shortFlag": "d", "description": "Run the query under the debugger."},
    {"name": "debug-host", "type": "string", "shortFlag": "h", "description": "Host the debugger connects to."},
    {
        "name": "debug-port",
        "type": "integer",
        "shortFlag": "p",
        "description": "Port the debugger connects to.",
        "validate": _port_number,
    },
)

PARSE_ONLY_OPTION: Final[str] = "parse-only"
AS_FILES_FLAG: Final[str] = "--as-files"

__all__ = ["AS_FILES_FLAG", "PARSE_ONLY_OPTION", "ZORBA_OPTIONS"]
