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
"""Options of a single jail-info invocation."""
import typing

import jailinfo.errors
import jailinfo.Logger

DEFAULT_JAIL_COMMAND = "/usr/sbin/jail"

COMMANDS = ("list", "show",)


class Options:
    """
    Explicit configuration passed down from the command line.

    An empty `jails` list selects all jails, an empty `params` list selects
    every parameter a jail declares.
    """

    command: str
    jails: typing.List[str]
    params: typing.List[str]
    values_only: bool
    jail_command: str
    config_file: typing.Optional[str]
    encoding: str

    def __init__(
        self,
        command: str="show",
        jails: typing.Optional[typing.List[str]]=None,
        params: typing.Optional[typing.List[str]]=None,
        values_only: bool=False,
        jail_command: typing.Optional[str]=None,
        config_file: typing.Optional[str]=None,
        encoding: str="UTF-8"
    ) -> None:
        if command not in COMMANDS:
            raise ValueError(f"Unknown command: {command}")
        self.command = command
        self.jails = list(jails) if (jails is not None) else []
        self.params = list(params) if (params is not None) else []
        self.values_only = values_only
        self.jail_command = jail_command or DEFAULT_JAIL_COMMAND
        self.config_file = config_file
        self.encoding = encoding

    @classmethod
    def from_arguments(
        cls,
        arguments: typing.Sequence[str],
        logger: typing.Optional['jailinfo.Logger.Logger']=None,
        **kwargs: typing.Any
    ) -> 'Options':
        """
        Parse the positional command line arguments.

            list [jail_name ...]
            (jail_name|all) [all|param ...]

        The `list` and `all` keywords are case-insensitive, jail names and
        parameter names are not.
        """
        args = list(arguments)

        if len(args) == 0:
            raise jailinfo.errors.MissingArgument(
                "list, all or a jail name",
                logger=logger
            )

        if args[0].lower() == "list":
            return cls(command="list", jails=args[1:], **kwargs)

        jail_name = args.pop(0)
        jails = [] if (jail_name.lower() == "all") else [jail_name]

        if (len(args) > 0) and (args[0].lower() == "all"):
            params: typing.List[str] = []
        else:
            params = args

        return cls(command="show", jails=jails, params=params, **kwargs)

    @property
    def jail_command_args(self) -> typing.List[str]:
        """Return the command that prints all jail parameters NUL-delimited."""
        command = [self.jail_command]
        if self.config_file is not None:
            command += ["-f", self.config_file]
        command += ["-e", ""]
        return command

    def is_selected(self, name: str) -> bool:
        """Return True if the jail name was selected (exact match)."""
        if len(self.jails) == 0:
            return True
        return name in self.jails

    def __repr__(self) -> str:
        return (
            f"Options(command={self.command!r}, jails={self.jails!r}, "
            f"params={self.params!r}, values_only={self.values_only!r})"
        )
