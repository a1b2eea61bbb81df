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
"""List jails or show their parameters."""
import typing

import jailinfo.JailRecord
import jailinfo.Logger
import jailinfo.Options
import jailinfo.Printer


def run(
    options: 'jailinfo.Options.Options',
    logger: typing.Optional['jailinfo.Logger.Logger']=None,
    stdout: typing.Optional[typing.TextIO]=None
) -> int:
    """
    Query the jail command once and print the selected jails.

    Returns the process exit code: 0 if at least one selected jail was
    listed, or one requested parameter was defined in a selected jail.
    """
    if logger is None:
        logger = jailinfo.Logger.Logger()

    logger.debug(f"Running with {options!r}")
    stream = jailinfo.JailRecord.query(options, logger=logger)

    if options.command == "list":
        found = _list_jails(stream, options, logger, stdout)
    else:
        found = _show_jails(stream, options, logger, stdout)

    return 0 if (found is True) else 1


def _selected_records(
    stream: 'jailinfo.JailRecord.JailRecordStream',
    options: 'jailinfo.Options.Options',
    logger: 'jailinfo.Logger.Logger'
) -> typing.Generator['jailinfo.JailRecord.JailRecord', None, None]:
    for record in stream.records():
        if options.is_selected(record.name) is False:
            logger.spam(f"Jail '{record.name}' was not selected")
            continue
        yield record


def _list_jails(
    stream: 'jailinfo.JailRecord.JailRecordStream',
    options: 'jailinfo.Options.Options',
    logger: 'jailinfo.Logger.Logger',
    stdout: typing.Optional[typing.TextIO]=None
) -> bool:
    printer = jailinfo.Printer.NamePrinter(stdout=stdout)
    for record in _selected_records(stream, options, logger):
        printer.add(record.name)
    printer.finish()
    return printer.found


def _show_jails(
    stream: 'jailinfo.JailRecord.JailRecordStream',
    options: 'jailinfo.Options.Options',
    logger: 'jailinfo.Logger.Logger',
    stdout: typing.Optional[typing.TextIO]=None
) -> bool:
    printer = jailinfo.Printer.ParameterPrinter(
        options,
        stdout=stdout,
        logger=logger
    )
    for record in _selected_records(stream, options, logger):
        printer.print_jail(record, options.params)
    return printer.found
