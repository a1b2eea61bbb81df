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
"""Print selected jail parameters."""
import sys
import typing

import jailinfo.JailRecord
import jailinfo.Logger
import jailinfo.Options

ABSENT_VALUE = "--"

_ANSI_C_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\E",
    "'": "\\'",
    "\\": "\\\\"
}


def _is_control_character(char: str) -> bool:
    return (ord(char) < 32) or (ord(char) == 127)


def _ansi_c_escape(char: str) -> str:
    if char in _ANSI_C_ESCAPES:
        return _ANSI_C_ESCAPES[char]
    if _is_control_character(char):
        return f"\\{ord(char):03o}"
    return char


def bash_quote(value: str) -> str:
    r"""
    Quote a value like bash does for ${var@A}.

    Values with control characters use ANSI-C quoting, all other values
    are single-quoted.

    Usage:
        >>> bash_quote("7")
        "'7'"
        >>> bash_quote("")
        "''"
        >>> bash_quote("it's")
        "'it'\\''s'"
        >>> bash_quote("a\nb")
        "$'a\\nb'"
    """
    if any(map(_is_control_character, value)):
        return "$'" + "".join(map(_ansi_c_escape, value)) + "'"
    return "'" + value.replace("'", "'\\''") + "'"


class _OutputWriter:

    _stdout: typing.Optional[typing.TextIO]

    @property
    def stdout(self) -> typing.TextIO:
        """Return the output stream, stdout unless configured otherwise."""
        if self._stdout is None:
            return sys.stdout
        return self._stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)


class ParameterPrinter(_OutputWriter):
    """Print requested parameters of jails and remember if any was found."""

    found: bool

    def __init__(
        self,
        options: 'jailinfo.Options.Options',
        stdout: typing.Optional[typing.TextIO]=None,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        self.options = options
        self._stdout = stdout
        self.logger = logger or jailinfo.Logger.Logger()
        self.found = False

    def print_jail(
        self,
        record: 'jailinfo.JailRecord.JailRecord',
        params: typing.Optional[typing.List[str]]=None
    ) -> bool:
        """
        Print the parameters of one jail.

        Without explicit params every declared parameter of the jail is
        printed in declaration order. Returns True if at least one of the
        parameters was defined.
        """
        if (params is None) or (len(params) == 0):
            params = list(record.keys_order)

        found = False
        values: typing.List[str] = []
        for param in params:
            if record.is_defined(param) is True:
                found = True
                value = bash_quote(record[param])
                if self.options.values_only is True:
                    values.append(value)
                else:
                    self._write(f"{param}={value}\n")
            else:
                self.logger.warn(
                    f"parameter '{param}' is not defined "
                    f"for jail '{record.name}'"
                )
                if self.options.values_only is True:
                    values.append(ABSENT_VALUE)
                else:
                    self._write(f"unset {param}\n")

        if len(values) > 0:
            self._write(" ".join(values) + "\n")

        self.found = self.found or found
        return found


class NamePrinter(_OutputWriter):
    """Print jail names tab-separated on a single line."""

    count: int

    def __init__(
        self,
        stdout: typing.Optional[typing.TextIO]=None
    ) -> None:
        self._stdout = stdout
        self.count = 0

    @property
    def found(self) -> bool:
        """Return True if at least one name was printed."""
        return self.count > 0

    def add(self, name: str) -> None:
        """Print a jail name."""
        self._write(("\t" if self.found else "") + name)
        self.count += 1

    def finish(self) -> None:
        """Terminate the line if any name was printed."""
        if self.found is True:
            self._write("\n")
