# Copyright (c) 2017-2019, Stefan Grönke
# Copyright (c) 2014-2018, iocage
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted providing that the following conditions
# are met:
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE AUTHOR ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
# WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED.  IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY
# DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS
# OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
# HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
# STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING
# IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
"""Collection of jail-info errors."""
import typing

# MyPy
import jailinfo.Logger


class JailInfoException(Exception):
    """A well-known exception raised by jailinfo."""

    def __init__(
        self,
        message: str,
        level: str="error",
        silent: bool=False,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        if (logger is not None) and (silent is False):
            logger.__getattribute__(level)(message)
        super().__init__(message)


# Commands


class CommandFailure(JailInfoException):
    """Raised when an external command exits with a non-zero code."""

    def __init__(
        self,
        command: typing.List[str],
        returncode: int,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        self.command = command
        self.returncode = returncode
        msg = f"Command exited with {returncode}: {' '.join(command)}"
        super().__init__(message=msg, logger=logger)


class CommandNotFound(JailInfoException):
    """Raised when an external command cannot be executed."""

    def __init__(
        self,
        command: typing.List[str],
        reason: str,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        self.command = command
        msg = f"Cannot execute {command[0]}: {reason}"
        super().__init__(message=msg, logger=logger)


# Usage


class MissingArgument(JailInfoException):
    """Raised when a required command line argument was not given."""

    def __init__(
        self,
        argument: str,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        msg = f"Missing argument: {argument}"
        super().__init__(message=msg, logger=logger)


# Logger


class InvalidLogLevel(JailInfoException):
    """Raised when the logger was initialized with an invalid log level."""

    def __init__(
        self,
        log_level: str,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        available_log_levels = ", ".join(jailinfo.Logger.Logger.LOG_LEVELS)
        msg = (
            f"Invalid log level '{log_level}'. "
            f"Choose one of {available_log_levels}"
        )
        super().__init__(message=msg, logger=logger)
