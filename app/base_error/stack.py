"""Captured stack trace.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, overload

from .enums import FormatVerb

if TYPE_CHECKING:
    from .frames import Frame


class StackTrace(Sequence["Frame"]):
    """Immutable sequence of frames, innermost first.

    Renders only in verbose mode, every other mode renders nothing.
    """

    __slots__ = ("_frames",)

    def __init__(self, frames: tuple["Frame", ...]) -> None:
        """Store captured frames."""
        self._frames = frames

    @property
    def frames(self) -> tuple["Frame", ...]:
        return self._frames

    @overload
    def __getitem__(self, index: int) -> "Frame": ...

    @overload
    def __getitem__(self, index: slice) -> "StackTrace": ...

    def __getitem__(self, index: int | slice) -> "Frame | StackTrace":
        if isinstance(index, slice):
            return StackTrace(self._frames[index])
        return self._frames[index]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator["Frame"]:
        return iter(self._frames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackTrace):
            return NotImplemented
        return self._frames == other._frames

    def __hash__(self) -> int:
        return hash(self._frames)

    def __reduce__(self) -> tuple:
        return (StackTrace, (self._frames,))

    def __repr__(self) -> str:
        return f"StackTrace({len(self._frames)} frames)"

    def render(self, verbose: bool = False) -> str:
        """Render one line group per frame in verbose mode."""
        if not verbose:
            return ""
        return "".join(f"\n{frame}" for frame in self._frames)

    def __format__(self, format_spec: str) -> str:
        return self.render(verbose=format_spec == FormatVerb.VERBOSE)

    def to_list(self) -> list[dict[str, str | int]]:
        """Return frames as plain dicts for structured logs."""
        return [
            {
                "file": frame.filename,
                "line": frame.lineno,
                "function": frame.function,
            }
            for frame in self._frames
        ]
