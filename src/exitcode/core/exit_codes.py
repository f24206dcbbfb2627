"""Preferred process exit codes as defined by sysexits.h.

The values are meant to be handed to ``sys.exit()`` (or ``os._exit()``) by
the caller; nothing in this module terminates the process.

    >>> import sys
    >>> import exitcode
    >>> sys.exit(exitcode.OK)  # doctest: +SKIP
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes reserved by the sysexits.h convention.

    Each member is an ``int`` and carries the sysexits.h meaning in
    ``description``.
    """

    description: str

    def __new__(cls, value: int, description: str) -> ExitCode:
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    OK = 0, "Successful termination."
    USAGE = 64, (
        "The command was used incorrectly, e.g. with the wrong number of "
        "arguments, a bad flag or bad syntax in a parameter."
    )
    DATAERR = 65, (
        "The input data was incorrect in some way. Only meant for user data, "
        "not system files."
    )
    NOINPUT = 66, (
        "An input file (not a system file) did not exist or was not readable."
    )
    NOUSER = 67, (
        "The specified user did not exist, e.g. a mail address or remote login."
    )
    NOHOST = 68, (
        "The specified host did not exist, e.g. in a mail address or network "
        "request."
    )
    UNAVAILABLE = 69, (
        "A service is unavailable, e.g. a support program or file does not "
        "exist. Also a catchall when something does not work for an unknown "
        "reason."
    )
    SOFTWARE = 70, (
        "An internal software error has been detected. Limited to errors not "
        "related to the operating system."
    )
    OSERR = 71, (
        "An operating system error has been detected, such as \"cannot fork\" "
        "or \"cannot create pipe\"."
    )
    OSFILE = 72, (
        "Some system file (e.g. /etc/passwd) does not exist, cannot be opened "
        "or has an error such as a syntax error."
    )
    CANTCREAT = 73, "A user-specified output file cannot be created."
    IOERR = 74, "An error occurred while doing I/O on some file."
    TEMPFAIL = 75, (
        "Temporary failure, not really an error. The request should be "
        "retried later."
    )
    PROTOCOL = 76, (
        "The remote system returned something that was not possible during a "
        "protocol exchange."
    )
    NOPERM = 77, (
        "Insufficient permission to perform the operation. Not meant for file "
        "system problems, which use NOINPUT or CANTCREAT."
    )
    CONFIG = 78, "Something was found in an unconfigured or misconfigured state."


OK = ExitCode.OK
USAGE = ExitCode.USAGE
DATAERR = ExitCode.DATAERR
NOINPUT = ExitCode.NOINPUT
NOUSER = ExitCode.NOUSER
NOHOST = ExitCode.NOHOST
UNAVAILABLE = ExitCode.UNAVAILABLE
SOFTWARE = ExitCode.SOFTWARE
OSERR = ExitCode.OSERR
OSFILE = ExitCode.OSFILE
CANTCREAT = ExitCode.CANTCREAT
IOERR = ExitCode.IOERR
TEMPFAIL = ExitCode.TEMPFAIL
PROTOCOL = ExitCode.PROTOCOL
NOPERM = ExitCode.NOPERM
CONFIG = ExitCode.CONFIG


def is_success(code: int) -> bool:
    """Check if exit code ``code`` is successful.

    >>> is_success(OK)
    True
    >>> is_success(USAGE)
    False
    """
    return code == OK


def is_error(code: int) -> bool:
    """Check if exit code ``code`` is an error.

    >>> is_error(USAGE)
    True
    >>> is_error(OK)
    False
    """
    return not is_success(code)
