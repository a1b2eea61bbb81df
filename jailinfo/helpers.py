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
"""Collection of jail-info helper functions."""
import typing
import subprocess  # nosec: B404

import jailinfo.errors
import jailinfo.Logger

CommandOutput = typing.Tuple[
    typing.Optional[typing.Union[str, bytes]],
    typing.Optional[str],
    int
]


def exec(
    command: typing.List[str],
    logger: typing.Optional['jailinfo.Logger.Logger']=None,
    ignore_error: bool=False,
    decode_stdout: bool=True,
    **subprocess_args: typing.Any
) -> CommandOutput:
    """
    Execute a command without a shell.

    The standard output is returned as stripped UTF-8 text, or as the raw
    bytes when `decode_stdout` is False. A non-zero exit code raises
    CommandFailure unless `ignore_error` is set.
    """
    if isinstance(command, str):
        command = [command]

    command_str = " ".join(command)

    if logger is not None:
        logger.log(f"Executing: {command_str}", level="spam")

    subprocess_args["stdout"] = subprocess_args.get("stdout", subprocess.PIPE)
    subprocess_args["stderr"] = subprocess_args.get("stderr", subprocess.PIPE)
    subprocess_args["shell"] = False

    try:
        child = subprocess.Popen(  # nosec: B603
            command,
            **subprocess_args
        )
    except OSError as e:
        raise jailinfo.errors.CommandNotFound(
            command=command,
            reason=str(e.strerror or e),
            logger=logger
        )

    stdout, stderr = child.communicate()

    if stderr is not None:
        stderr = stderr.decode("UTF-8", errors="replace").strip()

    if (stdout is not None) and (decode_stdout is True):
        stdout = stdout.decode("UTF-8").strip()
        if logger:
            logger.spam(_prettify_output(stdout))

    returncode = child.wait()
    if returncode != 0:

        if logger:
            log_level = "spam" if ignore_error else "warn"
            logger.log(
                f"Command exited with {returncode}: {command_str}",
                level=log_level
            )
            if stderr:
                logger.log(_prettify_output(stderr), level=log_level)

        if ignore_error is False:
            raise jailinfo.errors.CommandFailure(
                command=command,
                returncode=returncode
            )

    return stdout, stderr, returncode


def _prettify_output(output: str) -> str:
    return "\n".join(map(
        lambda line: f"    {line}",
        output.strip().splitlines()
    ))
