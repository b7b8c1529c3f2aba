"""Error value and its constructors.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Self

from .contracts import error_kind, parse_verb, quote, render_error
from .enums import ErrorKind
from .frames import callers
from .stack import StackTrace

CHAIN_SEPARATOR = "<-"
CAUSE_SEPARATOR = "---cause---"


class BaseError(Exception):
    """Error value with a stable code and a human message.

    ``system`` separates infrastructure failures (True) from expected
    business failures (False). A cause and a captured stack are optional.
    """

    kind = ErrorKind.BASE_ERROR

    def __init__(
        self,
        code: str,
        msg: str = "",
        system: bool = False,
        cause: BaseException | None = None,
        stack: StackTrace | None = None,
    ) -> None:
        """Create error value."""
        super().__init__(code, msg)
        self.code = code
        self.msg = msg
        self.system = system
        self.chain = ""
        self._cause = cause
        self._stack = stack
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def stack(self) -> StackTrace | None:
        return self._stack

    def with_system(self) -> Self:
        """Mark error as system one."""
        self.system = True
        return self

    def with_chain(self, *segments: str) -> Self:
        """Set chain label, segments are joined with ``<-``."""
        self.chain = CHAIN_SEPARATOR.join(segments)
        return self

    def text(self) -> str:
        return f"[{self.code}] {self.msg}"

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, msg={self.msg!r}, "
            f"system={self.system!r})"
        )

    def render(self, verbose: bool = False, quoted: bool = False) -> str:
        """Render error text.

        Verbose output is the short text, then the stack (if captured),
        then ``---cause---`` and the verbose rendering of the cause.
        """
        if verbose:
            text = self.text()
            if self._stack is not None:
                text += self._stack.render(verbose=True)
            if self._cause is not None:
                cause_text = render_error(self._cause, verbose=True)
                text += f"\n{CAUSE_SEPARATOR}\n{cause_text}"
            return text
        if quoted:
            return quote(self.text())
        return self.text()

    def __format__(self, format_spec: str) -> str:
        verbose, quoted = parse_verb(format_spec)
        return self.render(verbose=verbose, quoted=quoted)

    def __reduce__(self) -> tuple:
        return (
            type(self),
            (self.code, self.msg, self.system, self._cause, self._stack),
            self.__dict__,
        )

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "msg": self.msg}


def coerce_depth(depth: int | None) -> int:
    """Depth is never zero."""
    if not depth or depth < 1:
        return 1
    return depth


def new(code: str, msg: str) -> BaseError:
    """Create business error."""
    return BaseError(code, msg)


def new_stack(code: str, msg: str, depth: int | None = 1) -> BaseError:
    """Create business error with captured stack."""
    return BaseError(code, msg, stack=callers(0, coerce_depth(depth)))


def system(code: str, msg: str) -> BaseError:
    """Create system error."""
    return BaseError(code, msg, system=True)


def system_stack(code: str, msg: str, depth: int | None = 1) -> BaseError:
    """Create system error with captured stack."""
    return BaseError(
        code,
        msg,
        system=True,
        stack=callers(0, coerce_depth(depth)),
    )


def wrap(code: str, err: BaseException | None) -> BaseError | None:
    """Wrap existing error, None stays None.

    Wrapped errors are always system ones.
    """
    if err is None:
        return None
    return BaseError(code, str(err), system=True, cause=err)


def wrap_stack(
    code: str,
    err: BaseException | None,
    depth: int | None = 1,
) -> BaseError | None:
    """Wrap existing error and capture stack, None stays None."""
    if err is None:
        return None
    return BaseError(
        code,
        str(err),
        system=True,
        cause=err,
        stack=callers(0, coerce_depth(depth)),
    )


def is_system(err: BaseException | None) -> bool:
    """Check error is a BaseError with ``system`` unset.

    NOTE: the result is True for business errors, not system ones. Call
    sites depend on this polarity, keep it.
    """
    if error_kind(err) is not ErrorKind.BASE_ERROR:
        return False
    return getattr(err, "system", True) is False
