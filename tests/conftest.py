# Copyright (c) 2017-2019, Stefan Grönke
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
"""Unit test configuration."""
import typing
import pytest

import jailinfo.errors
import jailinfo.helpers
import jailinfo.Logger

FIVE_JAILS = (
    b"name=web\0path=/jail/web\0host.hostname=web.example.com\0persist\0\0"
    b"name=db\0path=/jail/db\0devfs_ruleset=7\0persist\0\0"
    b"name=mail\0path=/jail/mail\0mount.devfs\0\0"
    b"name=dns\0path=/jail/dns\0exec.start=/bin/sh /etc/rc\0\0"
    b"name=proxy\0path=/jail/proxy\0\0"
)


class FakeJailCommand:
    """Replacement for jailinfo.helpers.exec returning fixed output."""

    def __init__(
        self,
        stdout: bytes=b"",
        returncode: int=0
    ) -> None:
        self.stdout = stdout
        self.returncode = returncode
        self.calls: typing.List[typing.List[str]] = []

    def __call__(
        self,
        command: typing.List[str],
        logger: typing.Optional['jailinfo.Logger.Logger']=None,
        ignore_error: bool=False,
        decode_stdout: bool=True,
        **subprocess_args: typing.Any
    ) -> 'jailinfo.helpers.CommandOutput':
        self.calls.append(command)
        if (self.returncode != 0) and (ignore_error is False):
            raise jailinfo.errors.CommandFailure(
                command=command,
                returncode=self.returncode
            )
        return self.stdout, "", self.returncode


@pytest.fixture
def logger() -> 'jailinfo.Logger.Logger':
    """Make the jail-info Logger available to the tests."""
    return jailinfo.Logger.Logger()


@pytest.fixture
def jail_command(monkeypatch: typing.Any) -> FakeJailCommand:
    """Replace the jail command with one that prints five jails."""
    fake = FakeJailCommand(FIVE_JAILS)
    monkeypatch.setattr(jailinfo.helpers, "exec", fake)
    return fake


@pytest.fixture
def failing_jail_command(monkeypatch: typing.Any) -> FakeJailCommand:
    """Replace the jail command with one that exits with an error."""
    fake = FakeJailCommand(returncode=1)
    monkeypatch.setattr(jailinfo.helpers, "exec", fake)
    return fake
