"""Preferred system exit codes as defined by sysexits.h."""

from exitcode.__about__ import __version__
from exitcode.core.exit_codes import (
    CANTCREAT,
    CONFIG,
    DATAERR,
    IOERR,
    NOHOST,
    NOINPUT,
    NOPERM,
    NOUSER,
    OK,
    OSERR,
    OSFILE,
    PROTOCOL,
    SOFTWARE,
    TEMPFAIL,
    UNAVAILABLE,
    USAGE,
    ExitCode,
    is_error,
    is_success,
)

__all__ = [
    "CANTCREAT",
    "CONFIG",
    "DATAERR",
    "IOERR",
    "NOHOST",
    "NOINPUT",
    "NOPERM",
    "NOUSER",
    "OK",
    "OSERR",
    "OSFILE",
    "PROTOCOL",
    "SOFTWARE",
    "TEMPFAIL",
    "UNAVAILABLE",
    "USAGE",
    "ExitCode",
    "__version__",
    "is_error",
    "is_success",
]
