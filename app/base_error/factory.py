"""Error factories.

A factory is built once, usually at module import, and called many times.
Templates use ``{}`` as a positional placeholder::

    UserNotFound = factory("USER_NOT_FOUND", "user {} not found in {}")
    err = UserNotFound("john", "ldap")

Missing trailing values are replaced with empty strings, extra values are
ignored.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Callable

from .base import BaseError, coerce_depth, wrap, wrap_stack
from .exceptions import FactoryConfigurationError
from .frames import callers
from .log import log

PLACEHOLDER = "{}"

Formatter = Callable[..., str]


def factory_format(*args: str) -> tuple[str, Formatter]:
    """Parse ``(code)`` or ``(code, template)`` and compile the template.

    :raises FactoryConfigurationError: on any other argument count
    :return: code and formatter
    """
    if not args:
        log.error("Error factory built without code")
        raise FactoryConfigurationError(
            "error factory requires at least one argument: code",
        )
    if len(args) > 2:
        log.error("Error factory built with {} arguments", len(args))
        raise FactoryConfigurationError(
            "error factory accepts at most two arguments: code, template",
        )

    code = args[0]
    template = args[1] if len(args) == 2 else PLACEHOLDER
    parts = template.split(PLACEHOLDER)
    count = len(parts) - 1

    def formatter(*values: object) -> str:
        padded = [str(value) for value in values[:count]]
        padded.extend("" for _ in range(count - len(padded)))

        chunks = [parts[0]]
        for value, part in zip(padded, parts[1:], strict=True):
            chunks.append(value)
            chunks.append(part)
        return "".join(chunks)

    log.debug("Error factory {} built, {} placeholders", code, count)
    return code, formatter


class ErrorFactory:
    """Reusable BaseError constructor bound to a code and a template."""

    __slots__ = ("_code", "_template", "_formatter", "_system", "_depth")

    def __init__(
        self,
        *args: str,
        system: bool = False,
        depth: int | None = None,
    ) -> None:
        """Compile template.

        :param depth: capture stack of this depth on every call, None
            disables capture
        """
        self._code, self._formatter = factory_format(*args)
        self._template = args[1] if len(args) == 2 else PLACEHOLDER
        self._system = system
        self._depth = None if depth is None else coerce_depth(depth)

    @property
    def code(self) -> str:
        return self._code

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self) -> int:
        return self._template.count(PLACEHOLDER)

    @property
    def system(self) -> bool:
        return self._system

    @property
    def depth(self) -> int | None:
        return self._depth

    def __call__(self, *values: object) -> BaseError:
        stack = None
        if self._depth is not None:
            stack = callers(0, self._depth)
        return BaseError(
            self._code,
            self._formatter(*values),
            system=self._system,
            stack=stack,
        )

    def __repr__(self) -> str:
        return (
            f"ErrorFactory(code={self._code!r}, template={self._template!r}, "
            f"system={self._system!r}, depth={self._depth!r})"
        )


def factory(*args: str) -> ErrorFactory:
    """Build business error factory."""
    return ErrorFactory(*args)


def factory_stack(depth: int | None, *args: str) -> ErrorFactory:
    """Build business error factory capturing stack on each call."""
    return ErrorFactory(*args, depth=coerce_depth(depth))


def system_factory(*args: str) -> ErrorFactory:
    """Build system error factory."""
    return ErrorFactory(*args, system=True)


def system_factory_stack(depth: int | None, *args: str) -> ErrorFactory:
    """Build system error factory capturing stack on each call."""
    return ErrorFactory(*args, system=True, depth=coerce_depth(depth))


def wrap_factory(
    code: str,
) -> Callable[[BaseException | None], BaseError | None]:
    """Bind a code for wrapping errors."""

    def wrapper(err: BaseException | None) -> BaseError | None:
        return wrap(code, err)

    return wrapper


def wrap_factory_stack(
    depth: int | None,
    code: str,
) -> Callable[[BaseException | None], BaseError | None]:
    """Bind a code for wrapping errors with stack capture."""
    depth = coerce_depth(depth)

    def wrapper(err: BaseException | None) -> BaseError | None:
        return wrap_stack(code, err, depth)

    return wrapper
