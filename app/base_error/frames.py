"""Call stack capture.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
from dataclasses import dataclass
from types import FrameType

from .config import CaptureSettings, get_settings
from .log import log
from .stack import StackTrace


@dataclass(frozen=True, slots=True)
class Frame:
    """Single captured call site."""

    filename: str
    lineno: int
    function: str
    module: str = ""

    @property
    def location(self) -> str:
        return f"{self.filename}:{self.lineno}"

    def __str__(self) -> str:
        return f"{self.function}\n\t{self.location}"

    @classmethod
    def from_frame(cls, frame: FrameType) -> "Frame":
        """Copy what we need out of a live frame."""
        code = frame.f_code
        return cls(
            filename=code.co_filename,
            lineno=frame.f_lineno,
            function=code.co_qualname,
            module=frame.f_globals.get("__name__", ""),
        )


def _module_of(frame: FrameType) -> str:
    return frame.f_globals.get("__name__", "")


def callers(
    skip: int = 0,
    depth: int = 1,
    settings: CaptureSettings | None = None,
) -> StackTrace:
    """Capture up to ``depth`` frames of the current call stack.

    ``skip=0`` is the function calling ``callers``. Starting there, frames
    of the package itself are stepped over (test modules excepted) so the
    trace begins at the real call site. The scan stops at frame index
    ``SCAN_CEILING``; if no frame qualified by then, capture starts where
    the scan stopped.
    """
    if settings is None:
        settings = get_settings()
    depth = max(depth, 1)

    try:
        frame: FrameType | None = sys._getframe(skip + 1)  # noqa: SLF001
    except ValueError:
        return StackTrace(())

    index = skip
    while frame is not None and settings.skips(_module_of(frame)):
        if index + 1 >= settings.SCAN_CEILING:
            log.debug(
                "Scan ceiling {} reached, capturing from {}",
                settings.SCAN_CEILING,
                _module_of(frame),
            )
            break
        frame = frame.f_back
        index += 1

    frames: list[Frame] = []
    while frame is not None and len(frames) < depth:
        frames.append(Frame.from_frame(frame))
        frame = frame.f_back

    del frame
    return StackTrace(tuple(frames))
