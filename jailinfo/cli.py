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
"""Command line interface of jail-info."""
import signal
import sys
import typing

import click

import jailinfo
import jailinfo.errors
import jailinfo.JailInfo
import jailinfo.Logger
import jailinfo.Options

PROG_NAME = "jail-info"

_DEFAULT_JAIL_COMMAND = jailinfo.Options.DEFAULT_JAIL_COMMAND
_LOG_LEVELS = ", ".join(jailinfo.Logger.Logger.LOG_LEVELS)

USAGE = f"""usage:

    {PROG_NAME} [-hn] list [jail_name ...]

        Without a jail_name, print a tab-separated list of all jails known
        to jail(8). Otherwise print each given jail_name that is known to
        jail(8). Succeeds if at least one of the jails was found, so it can
        test whether a jail is defined:

            {PROG_NAME} list myjail || echo "myjail was not found"

    {PROG_NAME} [-hn] (jail_name|all) [all|param ...]

        Show the value of each param in the configuration of jail_name, or
        of every defined jail when "all" is used as jail name. Without
        params, or when the first param is "all", every parameter of the
        selected jails is shown. Fails if none of the params is defined in
        any selected jail.

        Undefined parameters are reported on stderr, so the report can be
        redirected independently from the values:

            {PROG_NAME} all devfs_ruleset 2>/dev/null

    OPTIONS

        -h  Show this help message.

        -n  Do not show parameter names, only values. For each jail the
            selected values are printed on one line, bash-quoted and
            space-separated in the order given on the command line.
            Undefined parameters are printed as --. Useful to set shell
            variables:

                {PROG_NAME} -n all osrelease name path |
                while IFS= read -r line; do
                    eval set -- "${{line}}"
                    printf 'jail "%s" runs "%s", ' "$2" "$1"
                    printf 'jail root is "%s"\\n' "$3"
                done

        -d  Print debug messages, including every raw record.

        -f conf_file
            Read the jail configuration from conf_file instead of the
            jail(8) default /etc/jail.conf.

        --jail-command path
            Path of the jail(8) binary (default {_DEFAULT_JAIL_COMMAND}).

        --log-level level
            One of {_LOG_LEVELS}.
"""


def print_usage(file: typing.Optional[typing.TextIO]=None) -> None:
    """Print the usage text."""
    click.echo(USAGE, file=file, nl=False)


@click.command(
    name=PROG_NAME,
    add_help_option=False,
    context_settings=dict(allow_interspersed_args=False)
)
@click.option(
    "--values-only", "-n",
    is_flag=True,
    default=False,
    help="Print values only, all on one line per jail."
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    default=False,
    help="Print debug messages."
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(jailinfo.Logger.Logger.LOG_LEVELS)
)
@click.option(
    "--config-file", "-f",
    default=None,
    envvar="JAILINFO_CONFIG_FILE",
    help="jail.conf file passed to jail(8)."
)
@click.option(
    "--jail-command",
    default=jailinfo.Options.DEFAULT_JAIL_COMMAND,
    envvar="JAILINFO_JAIL_COMMAND",
    help="Path of the jail(8) binary."
)
@click.option(
    "--help", "-h", "_help",
    is_flag=True,
    default=False,
    help="Show the usage text."
)
@click.version_option(version=jailinfo.VERSION, prog_name=PROG_NAME)
@click.argument("arguments", nargs=-1)
def cli(
    values_only: bool,
    debug: bool,
    log_level: typing.Optional[str],
    config_file: typing.Optional[str],
    jail_command: str,
    _help: bool,
    arguments: typing.Tuple[str, ...]
) -> int:
    """List jails or show their configuration parameters."""
    if _help is True:
        print_usage()
        return 1

    logger = jailinfo.Logger.Logger()
    if log_level is not None:
        logger.print_level = log_level
    elif debug is True:
        logger.print_level = "debug"

    try:
        options = jailinfo.Options.Options.from_arguments(
            arguments,
            logger=logger,
            values_only=values_only,
            jail_command=jail_command,
            config_file=config_file
        )
    except jailinfo.errors.MissingArgument:
        print_usage(file=sys.stderr)
        return 1

    try:
        return jailinfo.JailInfo.run(options, logger=logger)
    except jailinfo.errors.JailInfoException:
        return 1


def invoke(args: typing.Optional[typing.List[str]]=None) -> int:
    """Run the CLI and return its exit code."""
    try:
        returncode = cli.main(
            args=args,
            prog_name=PROG_NAME,
            standalone_mode=False
        )
    except click.exceptions.ClickException as e:
        jailinfo.Logger.Logger().error(e.format_message())
        print_usage(file=sys.stderr)
        return 1
    except click.exceptions.Abort:
        return 1
    return int(returncode or 0)


def main() -> None:
    """Entry point of the jail-info command."""
    # If a utility decides to cut off the pipe, we don't care (IE: head)
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    sys.exit(invoke())
