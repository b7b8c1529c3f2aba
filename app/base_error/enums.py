"""Base error enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of error kinds produced by this package."""

    BASE_ERROR = "base_error"
    WITH_STACK = "with_stack"
    FOREIGN = "foreign"


class FormatVerb(StrEnum):
    """Format specs understood by ``format()`` on package errors."""

    DEFAULT = ""
    STRING = "s"
    VALUE = "v"
    VERBOSE = "+v"
    QUOTED = "q"
