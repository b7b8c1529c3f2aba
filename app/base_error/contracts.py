"""Error capability contracts.

Defines the protocols package errors implement and helpers that work on
any error, whether it came from this package or not.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import json
from typing import Protocol, runtime_checkable

from .enums import ErrorKind, FormatVerb


@runtime_checkable
class HasErrorKind(Protocol):
    """Errors that report their kind."""

    kind: ErrorKind


@runtime_checkable
class Renderable(Protocol):
    """Errors that know how to render themselves."""

    def render(self, verbose: bool = False, quoted: bool = False) -> str:
        """Render error text."""


def error_kind(err: object) -> ErrorKind:
    """Return kind of an error, FOREIGN for anything not from here."""
    if isinstance(err, HasErrorKind) and isinstance(err.kind, ErrorKind):
        return err.kind
    return ErrorKind.FOREIGN


def parse_verb(format_spec: str) -> tuple[bool, bool]:
    """Translate a format spec into ``(verbose, quoted)`` flags."""
    try:
        verb = FormatVerb(format_spec)
    except ValueError:
        raise ValueError(
            f"Unknown format code {format_spec!r} for error",
        ) from None
    return verb is FormatVerb.VERBOSE, verb is FormatVerb.QUOTED


def quote(text: str) -> str:
    """Quote text as a double quoted literal with escapes."""
    return json.dumps(text, ensure_ascii=False)


def render_error(
    err: BaseException,
    verbose: bool = False,
    quoted: bool = False,
) -> str:
    """Render any error.

    Package errors use their own rendering, other errors fall back to
    ``str()``.
    """
    if isinstance(err, Renderable):
        return err.render(verbose=verbose, quoted=quoted)
    if quoted and not verbose:
        return quote(str(err))
    return str(err)
