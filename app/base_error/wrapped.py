"""Attach a stack to an error created elsewhere.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import coerce_depth
from .contracts import parse_verb, quote, render_error
from .enums import ErrorKind
from .frames import callers
from .stack import StackTrace


class WithStackError(Exception):
    """Pair an existing error with a captured stack.

    Has no code or message of its own, text comes from the inner error.
    """

    kind = ErrorKind.WITH_STACK

    def __init__(self, err: BaseException, stack: StackTrace) -> None:
        """Store inner error and stack."""
        super().__init__(err, stack)
        self._cause = err
        self._stack = stack
        self.__cause__ = err

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def stack(self) -> StackTrace:
        return self._stack

    def __str__(self) -> str:
        return str(self._cause)

    def __repr__(self) -> str:
        return f"WithStackError({self._cause!r})"

    def render(self, verbose: bool = False, quoted: bool = False) -> str:
        """Render inner error, verbose mode appends own stack."""
        if verbose:
            return (
                render_error(self._cause, verbose=True)
                + self._stack.render(verbose=True)
            )
        if quoted:
            return quote(str(self))
        return str(self)

    def __format__(self, format_spec: str) -> str:
        verbose, quoted = parse_verb(format_spec)
        return self.render(verbose=verbose, quoted=quoted)


def with_stack(
    err: BaseException | None,
    depth: int | None = 1,
) -> WithStackError | None:
    """Attach captured stack to ``err``, None stays None."""
    if err is None:
        return None
    return WithStackError(err, callers(0, coerce_depth(depth)))
