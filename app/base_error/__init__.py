"""Structured error values.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import (
    BaseError,
    is_system,
    new,
    new_stack,
    system,
    system_stack,
    wrap,
    wrap_stack,
)
from .config import CaptureSettings, get_settings
from .contracts import error_kind, render_error
from .enums import ErrorKind
from .exceptions import FactoryConfigurationError
from .factory import (
    ErrorFactory,
    factory,
    factory_stack,
    system_factory,
    system_factory_stack,
    wrap_factory,
    wrap_factory_stack,
)
from .frames import Frame, callers
from .log import error_patcher
from .stack import StackTrace
from .wrapped import WithStackError, with_stack

__all__ = [
    "BaseError",
    "CaptureSettings",
    "ErrorFactory",
    "ErrorKind",
    "FactoryConfigurationError",
    "Frame",
    "StackTrace",
    "WithStackError",
    "callers",
    "error_kind",
    "error_patcher",
    "factory",
    "factory_stack",
    "get_settings",
    "is_system",
    "new",
    "new_stack",
    "render_error",
    "system",
    "system_factory",
    "system_factory_stack",
    "system_stack",
    "with_stack",
    "wrap",
    "wrap_factory",
    "wrap_factory_stack",
    "wrap_stack",
]
