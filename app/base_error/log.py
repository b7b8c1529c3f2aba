"""Loguru integration.

The package logger is disabled on import, applications opt in with
``logger.enable("base_error")``.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import TYPE_CHECKING

from loguru import logger as loguru_logger

from .contracts import error_kind, render_error
from .enums import ErrorKind

if TYPE_CHECKING:
    from loguru import Record

log = loguru_logger.bind(name="base_error")

loguru_logger.disable("base_error")


def error_patcher(record: "Record") -> None:
    """Attach rendered error text to a log record.

    Looks at ``extra["error"]`` first, then at the logged exception.
    Usage: ``logger.patch(error_patcher).bind(error=err).error("...")``.
    """
    err = record["extra"].get("error")
    if err is None and record["exception"] is not None:
        err = record["exception"].value

    if err is None or error_kind(err) is ErrorKind.FOREIGN:
        return

    record["extra"]["error_code"] = getattr(err, "code", "")
    record["extra"]["error_text"] = render_error(err)
    record["extra"]["error_verbose"] = render_error(err, verbose=True)
